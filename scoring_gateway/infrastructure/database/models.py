"""SQLAlchemy ORM models for persisted scores"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Float, DateTime, Integer, Text, JSON, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class ScoreRecord(Base):
    """Result of one score calculation"""

    __tablename__ = "score_record"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    account_id = Column(Text, nullable=False, index=True)
    model = Column(Text, nullable=False)
    score_numeric = Column(Float, nullable=False)
    total_score = Column(Integer, nullable=False)
    risk_level = Column(Text, nullable=False)
    factors = Column(JSON, nullable=False, default=list)
    transaction_count = Column(Integer, nullable=False)
    # Microsecond resolution; history lists newest first
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
