"""Prometheus metrics for monitoring rent scores, payment statuses, and upstream health"""

from typing import Dict

from prometheus_client import Counter, Histogram

# Scoring metrics
score_counter = Counter(
    "rentledger_score_total",
    "Total rent scores computed",
    ["band"],  # 0-399 | 400-699 | 700-899 | 900+
)

score_histogram = Histogram(
    "rentledger_rent_score",
    "Distribution of computed rent scores",
    buckets=[100, 200, 300, 400, 500, 600, 700, 800, 900, 1000],
)

payment_status_counter = Counter(
    "rentledger_payment_status_total",
    "Payments classified by status",
    ["status"],
)

# Upstream API metrics
upstream_fetch_failures_counter = Counter(
    "rentledger_upstream_fetch_failures_total",
    "Failed RentLedger API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(total: int) -> None:
    """Record rent score metrics for monitoring score distribution"""
    if total < 400:
        band = "0-399"
    elif total < 700:
        band = "400-699"
    elif total < 900:
        band = "700-899"
    else:
        band = "900+"

    score_counter.labels(band=band).inc()
    score_histogram.observe(total)


def record_statuses(status_counts: Dict[str, int]) -> None:
    for status, count in status_counts.items():
        if count:
            payment_status_counter.labels(status=status).inc(count)
