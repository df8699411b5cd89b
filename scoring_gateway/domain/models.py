"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class Transaction:
    """Bank transaction from the open-banking API"""

    id: str
    amount: float
    debit_credit: str  # "CREDIT", "DEBIT" or anything else (ignored)
    balance_after: float
    status: str  # "FAILED" or anything else (successful)
    channel: str = ""
    authorization_token: str = ""
    transaction_type: str = ""
    narration: str = ""
    reference: str = ""
    transaction_time: str = ""
    value_date: str = ""


@dataclass(frozen=True)
class AccountSummary:
    """Aggregates collected in a single pass over the transaction history"""

    total_credit: float
    total_debit: float
    balance_sum: float
    success_count: int
    failed_count: int
    transaction_count: int

    @property
    def avg_balance(self) -> float:
        if self.transaction_count == 0:
            return 0.0
        return self.balance_sum / self.transaction_count

    @property
    def success_rate(self) -> float:
        if self.transaction_count == 0:
            return 0.0
        return self.success_count / self.transaction_count


@dataclass(frozen=True)
class ScoreComponents:
    """Normalized 0-100 sub-scores feeding the weighted combination"""

    income: float
    liquidity: float
    cashflow: float
    reliability: float


@dataclass(frozen=True)
class HeuristicWeighted:
    """Weighted income/liquidity/cashflow/reliability model"""

    # Not read by the formula yet; thresholds are fixed in domain.scoring
    target_balance: float = 10_000.0

    name = "heuristic_weighted"


ScoringModel = Union[HeuristicWeighted]


@dataclass(frozen=True)
class ScoringConfig:
    """Selects the scoring model used for a calculation"""

    model: ScoringModel = field(default_factory=HeuristicWeighted)


@dataclass(frozen=True)
class CreditScore:
    """Output of a score calculation"""

    total_score: int  # 0-100
    risk_level: str  # "Low", "Medium", "High"
    factors: List[str] = field(default_factory=list)
