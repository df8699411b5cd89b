"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, HTTPException, Request
from scoring_gateway.domain.exceptions import DomainException, ErrorCode
from scoring_gateway.infrastructure.clients.bank import BankClient
from scoring_gateway.state import StateStore

ERROR_STATUS_CODES = {
    ErrorCode.USER: 422,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.TECH: 503,
}


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_state_store(request: Request) -> StateStore:
    """Provide the application-wide state store"""
    return request.app.state.store


def get_bank_client(store: StateStore = Depends(get_state_store)) -> BankClient:
    """Provide open-banking client configured from the current state"""
    openbank_config = store.snapshot().openbank_config
    return BankClient(
        base_url=openbank_config.base_url,
        timeout=openbank_config.timeout_seconds,
    )


def to_http_exception(error: DomainException) -> HTTPException:
    """Translate a domain error into an HTTP error response"""
    return HTTPException(status_code=ERROR_STATUS_CODES[error.code], detail=error.to_dict())
