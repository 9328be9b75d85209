"""Prometheus metrics for monitoring report volume, fallback usage and rate source health"""

from prometheus_client import Counter, Histogram

from debt_valuation.domain.models import SummaryReport

# Report metrics
report_counter = Counter(
    "debt_valuation_reports_total",
    "Total conversion reports computed",
    ["source"],  # static | remote
)

report_months_histogram = Histogram(
    "debt_valuation_report_months",
    "Number of months covered by a report",
    buckets=[1, 6, 12, 24, 60, 120, 240],
)

estimated_month_counter = Counter(
    "debt_valuation_estimated_months_total",
    "Months converted with a carried-forward rate",
)

# Rate source metrics
rate_source_failures_counter = Counter(
    "rate_source_failures_total",
    "Failed rate API calls",
    ["reason"],  # timeout | http_status | unreachable | malformed
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(report: SummaryReport, source: str) -> None:
    """Record report metrics for monitoring range sizes and fallback usage"""
    report_counter.labels(source=source).inc()
    report_months_histogram.observe(report.total_months)

    estimated = sum(1 for item in report.line_items if item.estimated)
    if estimated:
        estimated_month_counter.inc(estimated)
