"""GET /v1/scoring/scores - Fetch stored scores"""

import uuid
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from scoring_gateway.api.v1.schemas import ScoreHistoryResponse, ScoreHistoryItem, ScoreResponse
from scoring_gateway.api.dependencies import to_http_exception
from scoring_gateway.config import settings
from scoring_gateway.domain.exceptions import ScoreNotFoundError
from scoring_gateway.infrastructure.database.session import get_db
from scoring_gateway.infrastructure.database.repositories import ScoreRepository

router = APIRouter()


@router.get("/scoring/scores", response_model=ScoreHistoryResponse)
def get_score_history(
    account_id: str = Query(..., min_length=1, description="Bank account identifier"),
    db: Session = Depends(get_db),
):
    """
    Retrieve recent scores for an account.

    Returns:
        Scores, newest first
    """
    score_repo = ScoreRepository(db)
    scores = score_repo.get_scores_by_account(account_id, limit=settings.score_history_limit)

    history_items = [
        ScoreHistoryItem(
            score_id=str(s.id),
            model=s.model,
            total_score=s.total_score,
            risk_level=s.risk_level,
            created_at=s.created_at.isoformat(),
        )
        for s in scores
    ]

    return ScoreHistoryResponse(account_id=account_id, scores=history_items)


@router.get("/scoring/scores/{score_id}", response_model=ScoreResponse)
def get_score(score_id: str, db: Session = Depends(get_db)):
    """Retrieve a single stored score with its factors"""
    try:
        score_uuid = uuid.UUID(score_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid score ID format")

    score_repo = ScoreRepository(db)
    record = score_repo.get_score_by_id(score_uuid)

    if not record:
        raise to_http_exception(ScoreNotFoundError().with_meta("score_id", score_id))

    return ScoreResponse(
        score_id=str(record.id),
        account_id=record.account_id,
        model=record.model,
        score=record.score_numeric,
        total_score=record.total_score,
        risk_level=record.risk_level,
        factors=record.factors,
        transaction_count=record.transaction_count,
        created_at=record.created_at.isoformat(),
    )
