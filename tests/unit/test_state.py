"""Unit tests for the shared application state"""

import threading
from scoring_gateway.domain.models import HeuristicWeighted, ScoringConfig
from scoring_gateway.state import AppState, OpenBankConfig, StateStore


def test_default_state_uses_heuristic_model():
    state = StateStore().snapshot()

    assert isinstance(state.scoring_config.model, HeuristicWeighted)
    assert state.scoring_config.model.target_balance == 10_000.0
    assert state.openbank_config == OpenBankConfig()


def test_set_scoring_config_keeps_openbank_config():
    openbank_config = OpenBankConfig(base_url="http://bank.test")
    store = StateStore(AppState(openbank_config=openbank_config))

    state = store.set_scoring_config(ScoringConfig(model=HeuristicWeighted(target_balance=500.0)))

    assert state.scoring_config.model.target_balance == 500.0
    assert state.openbank_config is openbank_config
    assert store.snapshot() == state


def test_snapshot_is_unaffected_by_later_writes():
    store = StateStore()
    before = store.snapshot()

    store.set_openbank_config(OpenBankConfig(timeout_seconds=1.5))

    assert before.openbank_config.timeout_seconds is None
    assert store.snapshot().openbank_config.timeout_seconds == 1.5


def test_concurrent_writers_leave_consistent_state():
    store = StateStore()

    def write(i: int):
        store.set_scoring_config(ScoringConfig(model=HeuristicWeighted(target_balance=float(i))))
        store.set_openbank_config(OpenBankConfig(base_url=f"http://bank-{i}.test"))

    threads = [threading.Thread(target=write, args=(i,)) for i in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    state = store.snapshot()
    assert 0 <= state.scoring_config.model.target_balance < 20
    assert state.openbank_config.base_url.startswith("http://bank-")
