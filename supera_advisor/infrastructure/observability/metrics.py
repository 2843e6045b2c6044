"""Prometheus metrics for monitoring tier distribution and form errors"""

from prometheus_client import Counter, Histogram

# Assessment metrics
assessment_counter = Counter(
    "supera_assessment_total",
    "Total debt assessments made",
    ["tier"],  # controlled | moderate | high | critical
)

risk_score_histogram = Histogram(
    "supera_risk_score",
    "Distribution of clamped risk scores",
    buckets=[10, 20, 30, 45, 60, 80, 100],
)

validation_failure_counter = Counter(
    "supera_validation_failures_total",
    "Assessments rejected for incomplete or malformed form data",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_assessment(tier: str, risk_score: float) -> None:
    """Record assessment metrics for monitoring the tier mix"""
    assessment_counter.labels(tier=tier).inc()
    risk_score_histogram.observe(risk_score)
