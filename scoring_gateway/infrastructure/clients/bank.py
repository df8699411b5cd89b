"""Open-banking HTTP client for fetching transaction history"""

import logging
import httpx
from typing import List, Optional

from scoring_gateway.domain.models import Transaction
from scoring_gateway.domain.exceptions import AccountNotFoundError, BankAPIError
from scoring_gateway.infrastructure.clients.openbank_schemas import OpenBankTransactionsResponse
from scoring_gateway.config import settings

logger = logging.getLogger(__name__)


class BankClient:
    """Client for external open-banking transaction API"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.bank_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_transactions(self, account_id: str) -> List[Transaction]:
        """
        Fetch transaction history for an account.

        Raises:
            AccountNotFoundError: Bank has no such account (HTTP 404)
            BankAPIError: On timeout, HTTP errors, non-"00" status, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(
                    f"{self.base_url}/transactions",
                    params={"account_id": account_id},
                )
                if response.status_code == 404:
                    raise AccountNotFoundError(
                        f"No transaction history for account {account_id}"
                    ).with_meta("account_id", account_id)
                response.raise_for_status()
                payload = OpenBankTransactionsResponse.model_validate(response.json())

            except httpx.TimeoutException as e:
                raise BankAPIError(f"Bank API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise BankAPIError(f"Bank API error: {e.response.status_code}").with_meta(
                    "status_code", str(e.response.status_code)
                ) from e
            except httpx.RequestError as e:
                raise BankAPIError.from_exception(e, "request_error") from e
            except ValueError as e:
                # Covers JSON decode errors and pydantic ValidationError
                raise BankAPIError.from_exception(e, "validation") from e

        if not payload.succeeded:
            raise BankAPIError(f"Bank API rejected request: {payload.message}").with_meta(
                "status", payload.status
            )

        logger.debug(
            "Fetched transactions",
            extra={"account_id": account_id, "transaction_count": len(payload.data.transactions)},
        )
        return [txn.to_domain() for txn in payload.data.transactions]
