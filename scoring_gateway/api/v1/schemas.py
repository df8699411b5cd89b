"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

from scoring_gateway.domain.models import HeuristicWeighted, ScoringConfig, Transaction
from scoring_gateway.state import AppState, OpenBankConfig


class TransactionSchema(BaseModel):
    """Transaction supplied inline by the caller"""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str = ""
    amount: float = Field(0.0, ge=0, description="Non-negative transaction amount")
    debit_credit: str = Field("", description="CREDIT, DEBIT or anything else (ignored)")
    balance_after: float = 0.0
    status: str = Field("", description="FAILED or anything else (successful)")
    channel: str = ""
    authorization_token: str = ""
    transaction_type: str = ""
    narration: str = ""
    reference: str = ""
    transaction_time: str = ""
    value_date: str = ""

    def to_domain(self) -> Transaction:
        return Transaction(**self.model_dump())


class ScoreRequest(BaseModel):
    """Request body for POST /v1/scoring/score"""

    account_id: str = Field(..., min_length=1, description="Bank account identifier")
    transactions: Optional[List[TransactionSchema]] = Field(
        None, description="Score these instead of fetching history from the bank"
    )


class ScoreResponse(BaseModel):
    """Response for POST /v1/scoring/score and GET /v1/scoring/scores/{score_id}"""

    score_id: str
    account_id: str
    model: str
    score: float
    total_score: int
    risk_level: str
    factors: List[str]
    transaction_count: int
    created_at: Optional[str] = None


class ScoreHistoryItem(BaseModel):
    """Single score in history"""

    score_id: str
    model: str
    total_score: int
    risk_level: str
    created_at: str


class ScoreHistoryResponse(BaseModel):
    """Response for GET /v1/scoring/scores"""

    account_id: str
    scores: List[ScoreHistoryItem]


class ScoringConfigSchema(BaseModel):
    """Active scoring model selection"""

    model: Literal["heuristic_weighted"] = "heuristic_weighted"
    target_balance: float = Field(10_000.0, gt=0)

    def to_domain(self) -> ScoringConfig:
        return ScoringConfig(model=HeuristicWeighted(target_balance=self.target_balance))

    @classmethod
    def from_domain(cls, config: ScoringConfig) -> "ScoringConfigSchema":
        return cls(model=config.model.name, target_balance=config.model.target_balance)


class OpenBankConfigSchema(BaseModel):
    """Open-banking client overrides"""

    base_url: Optional[str] = None
    timeout_seconds: Optional[float] = Field(None, gt=0)

    def to_domain(self) -> OpenBankConfig:
        return OpenBankConfig(base_url=self.base_url, timeout_seconds=self.timeout_seconds)

    @classmethod
    def from_domain(cls, config: OpenBankConfig) -> "OpenBankConfigSchema":
        return cls(base_url=config.base_url, timeout_seconds=config.timeout_seconds)


class AppStateResponse(BaseModel):
    """Response for GET /v1/state"""

    scoring_config: ScoringConfigSchema
    openbank_config: OpenBankConfigSchema

    @classmethod
    def from_domain(cls, state: AppState) -> "AppStateResponse":
        return cls(
            scoring_config=ScoringConfigSchema.from_domain(state.scoring_config),
            openbank_config=OpenBankConfigSchema.from_domain(state.openbank_config),
        )
