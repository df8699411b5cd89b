"""In-memory application state shared by all requests"""

import threading
from dataclasses import dataclass, field, replace
from typing import Optional

from scoring_gateway.config import settings
from scoring_gateway.domain.models import HeuristicWeighted, ScoringConfig


@dataclass(frozen=True)
class OpenBankConfig:
    """Overrides for the open-banking client; None falls back to settings"""

    base_url: Optional[str] = None
    timeout_seconds: Optional[float] = None


@dataclass(frozen=True)
class AppState:
    scoring_config: ScoringConfig = field(default_factory=ScoringConfig)
    openbank_config: OpenBankConfig = field(default_factory=OpenBankConfig)


def default_state() -> AppState:
    """Initial state built from settings"""
    return AppState(
        scoring_config=ScoringConfig(
            model=HeuristicWeighted(target_balance=settings.default_target_balance),
        ),
        openbank_config=OpenBankConfig(),
    )


class StateStore:
    """
    Holder for the current AppState.

    Writers swap in a new immutable AppState under the lock; readers take a
    snapshot and never see a half-applied update.
    """

    def __init__(self, initial: Optional[AppState] = None):
        self._lock = threading.Lock()
        self._state = initial or default_state()

    def snapshot(self) -> AppState:
        with self._lock:
            return self._state

    def set_scoring_config(self, scoring_config: ScoringConfig) -> AppState:
        with self._lock:
            self._state = replace(self._state, scoring_config=scoring_config)
            return self._state

    def set_openbank_config(self, openbank_config: OpenBankConfig) -> AppState:
        with self._lock:
            self._state = replace(self._state, openbank_config=openbank_config)
            return self._state
