"""Domain-specific exceptions with a tech / user / not_found taxonomy"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Kind of failure, used to pick the HTTP status at the API edge"""

    TECH = "tech"
    USER = "user"
    NOT_FOUND = "not_found"


DEFAULT_NOTES = {
    ErrorCode.TECH: "A technical issue occurred. Please try again later.",
    ErrorCode.USER: "An issue occurred due to your input.",
    ErrorCode.NOT_FOUND: "The information you seek was not found.",
}


class DomainException(Exception):
    """
    Base exception for domain layer.

    Carries a human-readable note and a string metadata bag for diagnostics.
    An empty note falls back to the default note for the error code.
    Subclasses have a fixed code; only DomainException itself takes any code.
    """

    code = ErrorCode.TECH

    def __init__(
        self,
        note: str = "",
        code: Optional[ErrorCode] = None,
        meta: Optional[Dict[str, str]] = None,
    ):
        if code is not None and code != self.code:
            if type(self) is not DomainException:
                raise ValueError(
                    f"{type(self).__name__} is always {self.code.value}, not {code.value}"
                )
            self.code = code
        self.note = note or DEFAULT_NOTES[self.code]
        self.meta: Dict[str, str] = dict(meta or {})
        super().__init__(self.note)

    @classmethod
    def tech(cls, note: str = "") -> "DomainException":
        return cls(note, ErrorCode.TECH)

    @classmethod
    def user(cls, note: str = "") -> "DomainException":
        return cls(note, ErrorCode.USER)

    @classmethod
    def notfound(cls, note: str = "") -> "DomainException":
        return cls(note, ErrorCode.NOT_FOUND)

    @classmethod
    def from_exception(cls, exc: Exception, source: str) -> "DomainException":
        """Wrap a foreign exception as a technical error"""
        err = cls.tech()
        err.add_meta("from", source)
        err.add_meta("error", str(exc))
        return err

    def add_meta(self, key: str, val: str) -> None:
        self.meta[key] = val

    def with_meta(self, key: str, val: str) -> "DomainException":
        self.meta[key] = val
        return self

    def has_meta(self) -> bool:
        return len(self.meta) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code.value, "note": self.note, "meta": dict(self.meta)}


class BankAPIError(DomainException):
    """Open-banking API returned an error or is unavailable"""

    code = ErrorCode.TECH


class AccountNotFoundError(DomainException):
    """Open-banking API has no history for the account"""

    code = ErrorCode.NOT_FOUND


class ScoreNotFoundError(DomainException):
    """No stored score matches the requested identifier"""

    code = ErrorCode.NOT_FOUND
