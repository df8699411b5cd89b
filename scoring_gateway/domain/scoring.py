"""Credit scoring engine - heuristic score and its explanation"""

from typing import List, Sequence
from scoring_gateway.domain.models import (
    AccountSummary,
    CreditScore,
    HeuristicWeighted,
    ScoreComponents,
    ScoringConfig,
    Transaction,
)

# Normalization thresholds: reaching them earns the full 100 sub-score points
INCOME_THRESHOLD = 10_000.0
LIQUIDITY_THRESHOLD = 5_000.0

INCOME_WEIGHT = 0.4
LIQUIDITY_WEIGHT = 0.3
CASHFLOW_WEIGHT = 0.2
RELIABILITY_WEIGHT = 0.1

FAILED_TRANSACTION_PENALTY = 20.0

LOW_RISK_MIN_SCORE = 70
MEDIUM_RISK_MIN_SCORE = 40


def summarize_transactions(transactions: Sequence[Transaction]) -> AccountSummary:
    """
    Aggregate transaction history in a single pass.

    - Every transaction contributes its balance to the balance sum
    - FAILED transactions are only counted, never added to credit/debit totals
    - Directions other than CREDIT/DEBIT are counted as successful but ignored
    """
    total_credit = 0.0
    total_debit = 0.0
    balance_sum = 0.0
    failed_count = 0
    success_count = 0

    for txn in transactions:
        balance_sum += txn.balance_after

        if txn.status == "FAILED":
            failed_count += 1
            continue

        success_count += 1

        if txn.debit_credit == "CREDIT":
            total_credit += txn.amount
        elif txn.debit_credit == "DEBIT":
            total_debit += txn.amount

    return AccountSummary(
        total_credit=total_credit,
        total_debit=total_debit,
        balance_sum=balance_sum,
        success_count=success_count,
        failed_count=failed_count,
        transaction_count=len(transactions),
    )


def score_components(summary: AccountSummary) -> ScoreComponents:
    """
    Normalize aggregates into 0-100 sub-scores.

    - Income: total credits, full points at 10,000
    - Liquidity: average balance after each transaction, full points at 5,000
    - Cashflow: binary, 100 when credits exceed debits
    - Reliability: share of successful transactions (0.95 -> 95 points)
    """
    income = min(summary.total_credit / INCOME_THRESHOLD * 100.0, 100.0)
    liquidity = min(summary.avg_balance / LIQUIDITY_THRESHOLD * 100.0, 100.0)
    cashflow = 100.0 if summary.total_credit > summary.total_debit else 0.0
    reliability = summary.success_rate * 100.0

    return ScoreComponents(
        income=income,
        liquidity=liquidity,
        cashflow=cashflow,
        reliability=reliability,
    )


def calculate_heuristic_score(transactions: Sequence[Transaction]) -> float:
    """
    Calculate the heuristic weighted score from 0.0 to 100.0.

    Scoring weights:
    - 40%: Income
    - 30%: Liquidity
    - 20%: Cashflow
    - 10%: Reliability

    Every failed transaction then costs a flat 20 points; the result never
    drops below 0. No rounding is applied.
    """
    if not transactions:
        return 0.0

    summary = summarize_transactions(transactions)
    components = score_components(summary)

    weighted_score = (
        (components.income * INCOME_WEIGHT)
        + (components.liquidity * LIQUIDITY_WEIGHT)
        + (components.cashflow * CASHFLOW_WEIGHT)
        + (components.reliability * RELIABILITY_WEIGHT)
    )

    penalty = summary.failed_count * FAILED_TRANSACTION_PENALTY

    return max(weighted_score - penalty, 0.0)


def calculate_score(transactions: Sequence[Transaction], config: ScoringConfig) -> float:
    """Score transactions with the model selected by config"""
    model = config.model
    if isinstance(model, HeuristicWeighted):
        return calculate_heuristic_score(transactions)
    raise TypeError(f"Unsupported scoring model: {type(model).__name__}")


def to_total_score(score: float) -> int:
    """Clamp a raw score to 0-100 and round it for display/storage"""
    return int(round(min(max(score, 0.0), 100.0)))


def determine_risk_level(total_score: int) -> str:
    """
    Map total score to a risk level.

    - 70+:     Low
    - 40 - 69: Medium
    - 0 - 39:  High
    """
    if total_score >= LOW_RISK_MIN_SCORE:
        return "Low"
    elif total_score >= MEDIUM_RISK_MIN_SCORE:
        return "Medium"
    else:
        return "High"


def explain_factors(transactions: Sequence[Transaction]) -> List[str]:
    """List the human-readable factors behind a score, strongest signals first"""
    if not transactions:
        return ["No Transaction History"]

    summary = summarize_transactions(transactions)
    components = score_components(summary)
    factors = []

    if components.income >= 70:
        factors.append("Consistent Income")
    elif components.income < 30:
        factors.append("Low Income")

    if summary.avg_balance < 0:
        factors.append("Negative Average Balance")
    elif components.liquidity >= 70:
        factors.append("Healthy Average Balance")
    elif components.liquidity < 30:
        factors.append("Low Average Balance")

    if components.cashflow > 0:
        factors.append("Positive Cash Flow")
    else:
        factors.append("Spending Exceeds Income")

    if summary.failed_count == 1:
        factors.append("1 Failed Transaction")
    elif summary.failed_count > 1:
        factors.append(f"{summary.failed_count} Failed Transactions")

    return factors


def explain_score(score: float, transactions: Sequence[Transaction]) -> CreditScore:
    """
    Main entry point for presentation: turn a raw score into a CreditScore.

    Kept apart from calculate_score so the numeric result never depends on
    the explanation.
    """
    total_score = to_total_score(score)

    return CreditScore(
        total_score=total_score,
        risk_level=determine_risk_level(total_score),
        factors=explain_factors(transactions),
    )
