"""Data access layer for score records"""

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session
from scoring_gateway.infrastructure.database.models import ScoreRecord
from scoring_gateway.domain.models import CreditScore


class ScoreRepository:
    """Repository for calculated scores"""

    def __init__(self, db: Session):
        self.db = db

    def create_score(
        self,
        account_id: str,
        model: str,
        score: float,
        credit_score: CreditScore,
        transaction_count: int,
    ) -> ScoreRecord:
        """Persist score to database"""
        db_score = ScoreRecord(
            account_id=account_id,
            model=model,
            score_numeric=score,
            total_score=credit_score.total_score,
            risk_level=credit_score.risk_level,
            factors=list(credit_score.factors),
            transaction_count=transaction_count,
        )
        self.db.add(db_score)
        self.db.flush()  # Get ID without committing
        return db_score

    def get_scores_by_account(self, account_id: str, limit: int = 10) -> List[ScoreRecord]:
        """Fetch recent scores for an account"""
        return (
            self.db.query(ScoreRecord)
            .filter(ScoreRecord.account_id == account_id)
            .order_by(ScoreRecord.created_at.desc())
            .limit(limit)
            .all()
        )

    def get_score_by_id(self, score_id: uuid.UUID) -> Optional[ScoreRecord]:
        return (
            self.db.query(ScoreRecord)
            .filter(ScoreRecord.id == score_id)
            .first()
        )
