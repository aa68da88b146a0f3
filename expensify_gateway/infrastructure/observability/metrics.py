"""Prometheus metrics for ledger activity, safety levels and behavior flags"""

from prometheus_client import Counter, Histogram

from expensify_gateway.domain.models import FinancialReport

# Engine metrics
evaluation_counter = Counter(
    "expensify_evaluation_total",
    "Financial engine evaluations",
    ["safety_level"],  # Stable | Warning | Critical
)

risk_score_histogram = Histogram(
    "expensify_risk_score",
    "Composite risk score distribution",
    buckets=[0, 10, 25, 50, 75, 90, 100],
)

behavior_flag_counter = Counter(
    "expensify_behavior_flag_total",
    "Behavior patterns detected",
    ["flag"],  # category_spike | impulse | abnormal_velocity
)

# Ledger metrics
ledger_write_counter = Counter(
    "expensify_ledger_write_total",
    "Ledger entries added",
    ["kind"],  # expense | income
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluation(report: FinancialReport) -> None:
    """Record safety level, risk score and any behavior flags raised"""
    evaluation_counter.labels(safety_level=report.state.safety_level.value).inc()
    risk_score_histogram.observe(report.risk.risk_score)

    if report.behavior.category_spikes:
        behavior_flag_counter.labels(flag="category_spike").inc()
    if report.behavior.impulse_pattern_detected:
        behavior_flag_counter.labels(flag="impulse").inc()
    if report.behavior.abnormal_velocity_detected:
        behavior_flag_counter.labels(flag="abnormal_velocity").inc()
