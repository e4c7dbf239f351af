"""Prometheus metrics for monitoring quote volume, credit mix, and rejected inputs"""

from typing import List
from prometheus_client import Counter, Histogram
from talktotoyota_finance.domain.models import Alternative

# Quote metrics
quote_counter = Counter(
    "finance_quotes_total",
    "Total financing quotes produced",
    ["tier"],  # Excellent | Good | Fair | Poor | Bad
)

alternatives_offered_counter = Counter(
    "finance_alternatives_offered_total",
    "Alternatives offered alongside quotes",
    ["type"],  # base | longer-term | higher-down | shorter-term
)

validation_failure_counter = Counter(
    "finance_validation_failures_total",
    "Financing requests rejected by validation",
    ["reason"],
)

apr_lookup_counter = Counter(
    "finance_apr_estimates_total",
    "APR estimate lookups",
    ["tier"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_quote(credit_tier: str, alternatives: List[Alternative]) -> None:
    """Record the tier mix and which alternatives customers are being shown"""
    quote_counter.labels(tier=credit_tier).inc()

    for alternative in alternatives:
        alternatives_offered_counter.labels(type=alternative.type.value).inc()
