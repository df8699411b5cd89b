"""Pydantic models for the open-banking transactions payload"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field

from scoring_gateway.domain.models import Transaction

SUCCESS_STATUS = "00"


class OpenBankTransaction(BaseModel):
    """Single transaction as returned by the bank"""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    amount: float
    channel: str = ""
    authorization_token: str = ""
    transaction_type: str = ""
    debit_credit: str = ""
    narration: str = ""
    reference: str = ""
    transaction_time: str = ""
    value_date: str = ""
    balance_after: float
    status: str = ""

    def to_domain(self) -> Transaction:
        return Transaction(**self.model_dump())


class OpenBankSummary(BaseModel):
    """Statement summary for the requested window"""

    model_config = ConfigDict(populate_by_name=True)

    account_number: str = ""
    currency_code: str = ""
    from_date: str = Field("", alias="from")
    to_date: str = Field("", alias="to")
    first_transaction: str = ""
    last_transaction: str = ""
    opening_balance: float = 0.0
    closing_balance: float = 0.0
    total_debit_count: int = 0
    total_credit_count: int = 0
    total_debit_value: float = 0.0
    total_credit_value: float = 0.0
    pages: int = 0
    records_per_page: int = 0


class OpenBankTransactionsData(BaseModel):
    summary: OpenBankSummary = Field(default_factory=OpenBankSummary)
    transactions: List[OpenBankTransaction] = Field(default_factory=list)


class OpenBankTransactionsResponse(BaseModel):
    """Envelope of GET /transactions"""

    status: str  # "00" on success
    message: str = ""
    data: OpenBankTransactionsData = Field(default_factory=OpenBankTransactionsData)

    @property
    def succeeded(self) -> bool:
        return self.status == SUCCESS_STATUS
