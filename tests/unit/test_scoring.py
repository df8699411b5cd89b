"""Unit tests for heuristic scoring logic"""

import random
import pytest
from scoring_gateway.domain.models import HeuristicWeighted, ScoringConfig
from scoring_gateway.domain.scoring import (
    calculate_heuristic_score,
    calculate_score,
    score_components,
    summarize_transactions,
)


def test_calculate_heuristic_score_empty_transactions():
    """Test empty history short-circuits to zero"""
    assert calculate_heuristic_score([]) == 0.0


def test_summarize_transactions_skips_failed_amounts(mixed_transactions):
    """Test failed transactions count toward balance but not credit/debit totals"""
    summary = summarize_transactions(mixed_transactions)

    assert summary.total_credit == 5_000.0
    assert summary.total_debit == 2_000.0  # failed 100 DEBIT not added
    assert summary.balance_sum == 11_000.0
    assert summary.success_count == 2
    assert summary.failed_count == 1
    assert summary.transaction_count == 3
    assert summary.avg_balance == pytest.approx(3_666.6667, rel=1e-6)
    assert summary.success_rate == pytest.approx(2 / 3)


def test_summarize_transactions_unrecognized_direction(make_transaction):
    """Test unknown debit_credit values count as successful but add no amount"""
    summary = summarize_transactions([
        make_transaction(1_000.0, "TRANSFER", 2_000.0),
        make_transaction(500.0, "", 1_000.0),
    ])

    assert summary.success_count == 2
    assert summary.balance_sum == 3_000.0
    assert summary.total_credit == 0.0
    assert summary.total_debit == 0.0


def test_summarize_transactions_empty_strings(make_transaction):
    """Test empty status is treated as successful"""
    summary = summarize_transactions([make_transaction(100.0, "CREDIT", 100.0, status="")])

    assert summary.success_count == 1
    assert summary.failed_count == 0
    assert summary.total_credit == 100.0


def test_score_components_caps_at_100(make_transaction):
    """Test income and liquidity sub-scores never exceed 100"""
    summary = summarize_transactions([make_transaction(50_000_000.0, "CREDIT", 80_000.0)])
    components = score_components(summary)

    assert components.income == 100.0
    assert components.liquidity == 100.0
    assert components.cashflow == 100.0
    assert components.reliability == 100.0


def test_score_components_cashflow_is_binary(make_transaction):
    """Test cashflow requires credits strictly above debits"""
    summary = summarize_transactions([
        make_transaction(1_000.0, "CREDIT", 1_000.0),
        make_transaction(1_000.0, "DEBIT", 0.0),
    ])

    assert score_components(summary).cashflow == 0.0


def test_calculate_heuristic_score_perfect_customer(make_transaction):
    """Test pure credit, high balance, all successful scores 100"""
    transactions = [make_transaction(10_000.0, "CREDIT", 5_000.0)]

    assert calculate_heuristic_score(transactions) == pytest.approx(100.0)


def test_calculate_heuristic_score_single_failed_transaction(make_transaction):
    """Test a lone failed transaction with no balance is wiped out by the penalty"""
    transactions = [make_transaction(10_000.0, "CREDIT", 0.0, status="FAILED")]

    assert calculate_heuristic_score(transactions) == 0.0


def test_calculate_heuristic_score_failed_transaction_keeps_liquidity(make_transaction):
    """Test a failed transaction still counts toward the average balance"""
    transactions = [make_transaction(10_000.0, "CREDIT", 5_000.0, status="FAILED")]

    # liquidity 100 * 0.3 = 30, minus 20 point penalty
    assert calculate_heuristic_score(transactions) == pytest.approx(10.0)


def test_calculate_heuristic_score_mixed_with_failure(mixed_transactions):
    """Test worked example: weighted ~68.67 minus 20 point penalty"""
    # income 50, liquidity ~73.33, cashflow 100, reliability ~66.67
    # 20 + 22 + 20 + 6.67 = 68.67, minus 20
    assert calculate_heuristic_score(mixed_transactions) == pytest.approx(48.6667, abs=1e-3)


def test_calculate_heuristic_score_unrecognized_direction(make_transaction):
    """Test TRANSFER contributes to reliability and liquidity only"""
    transactions = [make_transaction(10_000.0, "TRANSFER", 5_000.0)]

    # income 0, liquidity 100, cashflow 0, reliability 100
    assert calculate_heuristic_score(transactions) == pytest.approx(40.0)


def test_calculate_heuristic_score_negative_balance_floors_at_zero(make_transaction):
    """Test deeply negative balances cannot push the score below zero"""
    transactions = [make_transaction(100.0, "DEBIT", -1_000_000.0)]

    assert calculate_heuristic_score(transactions) == 0.0


def test_calculate_heuristic_score_penalty_per_failure(make_transaction):
    """Test each failed transaction costs a flat 20 points"""
    good = [make_transaction(10_000.0, "CREDIT", 5_000.0, id=str(i)) for i in range(8)]
    one_failure = good + [make_transaction(1.0, "DEBIT", 5_000.0, status="FAILED")]

    # reliability drops to 8/9 and one 20 point penalty applies
    expected = 40 + 30 + 20 + (8 / 9 * 100) * 0.1 - 20
    assert calculate_heuristic_score(one_failure) == pytest.approx(expected)


def test_calculate_heuristic_score_is_idempotent(mixed_transactions):
    """Test repeated calls yield bit-identical results"""
    assert calculate_heuristic_score(mixed_transactions) == calculate_heuristic_score(mixed_transactions)


def test_calculate_heuristic_score_order_independent(mixed_transactions):
    """Test permuting the history does not change the score"""
    reversed_score = calculate_heuristic_score(list(reversed(mixed_transactions)))

    assert reversed_score == pytest.approx(calculate_heuristic_score(mixed_transactions))


def test_calculate_heuristic_score_bounds(make_transaction):
    """Test score stays within 0-100 across generated histories"""
    rng = random.Random(42)
    directions = ["CREDIT", "DEBIT", "TRANSFER", ""]
    statuses = ["SUCCESSFUL", "FAILED", "PENDING", ""]

    for _ in range(200):
        transactions = [
            make_transaction(
                amount=rng.uniform(0, 50_000),
                debit_credit=rng.choice(directions),
                balance_after=rng.uniform(-20_000, 20_000),
                status=rng.choice(statuses),
            )
            for _ in range(rng.randint(1, 15))
        ]
        score = calculate_heuristic_score(transactions)
        assert 0.0 <= score <= 100.0


def test_calculate_score_ignores_target_balance(mixed_transactions):
    """Test target_balance is carried by the config but not used by the formula"""
    default_score = calculate_score(mixed_transactions, ScoringConfig())
    custom_score = calculate_score(
        mixed_transactions, ScoringConfig(model=HeuristicWeighted(target_balance=1.0))
    )

    assert default_score == custom_score == calculate_heuristic_score(mixed_transactions)
