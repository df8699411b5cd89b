"""POST /v1/scoring/score - Credit score calculation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from scoring_gateway.api.v1.schemas import ScoreRequest, ScoreResponse
from scoring_gateway.api.dependencies import (
    get_bank_client,
    get_request_id,
    get_state_store,
    to_http_exception,
)
from scoring_gateway.infrastructure.database.session import get_db
from scoring_gateway.infrastructure.database.repositories import ScoreRepository
from scoring_gateway.infrastructure.clients.bank import BankClient
from scoring_gateway.domain.scoring import calculate_score, explain_score
from scoring_gateway.domain.exceptions import BankAPIError, DomainException
from scoring_gateway.infrastructure.observability.metrics import record_score, bank_fetch_failures_counter
from scoring_gateway.infrastructure.observability.logging import log_score
from scoring_gateway.state import StateStore

router = APIRouter()


@router.post("/scoring/score", response_model=ScoreResponse)
async def create_score(
    request_body: ScoreRequest,
    request: Request,
    db: Session = Depends(get_db),
    bank_client: BankClient = Depends(get_bank_client),
    store: StateStore = Depends(get_state_store),
):
    """
    Calculate a credit score from transaction history.

    Flow:
    1. Read the active scoring config once
    2. Use inline transactions, or fetch history from the open-banking API
    3. Calculate the raw score and explain it
    4. Persist the score
    5. Return the score response
    """
    start_time = time.time()
    request_id = get_request_id(request)
    scoring_config = store.snapshot().scoring_config

    try:
        # 1. Resolve transaction history
        if request_body.transactions is not None:
            transactions = [txn.to_domain() for txn in request_body.transactions]
        else:
            transactions = await bank_client.get_transactions(request_body.account_id)

        # 2. Score, then explain
        score = calculate_score(transactions, scoring_config)
        credit_score = explain_score(score, transactions)

        # 3. Persist score
        score_repo = ScoreRepository(db)
        db_score = score_repo.create_score(
            account_id=request_body.account_id,
            model=scoring_config.model.name,
            score=score,
            credit_score=credit_score,
            transaction_count=len(transactions),
        )
        db.commit()

        # Record metrics and logs
        duration_ms = (time.time() - start_time) * 1000
        record_score(credit_score.risk_level, credit_score.total_score)
        log_score(
            request_id,
            request_body.account_id,
            scoring_config.model.name,
            credit_score.total_score,
            credit_score.risk_level,
            len(transactions),
            duration_ms,
        )

        return ScoreResponse(
            score_id=str(db_score.id),
            account_id=request_body.account_id,
            model=scoring_config.model.name,
            score=score,
            total_score=credit_score.total_score,
            risk_level=credit_score.risk_level,
            factors=credit_score.factors,
            transaction_count=len(transactions),
        )

    except BankAPIError as e:
        bank_fetch_failures_counter.inc()
        db.rollback()
        logging.error(f"Bank API error: {e}", extra={"request_id": request_id, "meta": e.meta})
        raise to_http_exception(e)

    except DomainException as e:
        db.rollback()
        logging.warning(f"Score request failed: {e}", extra={"request_id": request_id, "meta": e.meta})
        raise to_http_exception(e)

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
