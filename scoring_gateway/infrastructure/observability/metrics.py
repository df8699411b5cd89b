"""Prometheus metrics for monitoring score distribution and bank API health"""

from prometheus_client import Counter, Histogram

# Score metrics
score_counter = Counter(
    "scoring_score_total",
    "Total credit scores calculated",
    ["risk_level"],  # Low | Medium | High
)

total_score_histogram = Histogram(
    "scoring_total_score",
    "Distribution of calculated total scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Bank API metrics
bank_fetch_failures_counter = Counter(
    "bank_fetch_failures_total",
    "Failed open-banking API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(risk_level: str, total_score: int) -> None:
    """Record score metrics for monitoring risk distribution"""
    score_counter.labels(risk_level=risk_level).inc()
    total_score_histogram.observe(total_score)
