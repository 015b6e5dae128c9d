"""Prometheus Metrics.

This module defines and exports Prometheus metrics for monitoring the application.
Metrics include counters, gauges, histograms and summaries for tracking:
- API requests and responses
- Loan decisions and their outcomes
"""

from prometheus_client import Counter, Gauge, Histogram, Info, Summary

# ========================================
# API Metrics
# ========================================

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
)

http_requests_in_progress = Gauge(
    'http_requests_in_progress',
    'Number of HTTP requests currently being processed',
    ['method', 'endpoint']
)

# ========================================
# Business Metrics
# ========================================

# Outcome is "approved" or the lower-cased error kind
loan_decisions_total = Counter(
    'loan_decisions_total',
    'Total loan decisions by outcome',
    ['outcome']
)

loan_decision_duration_seconds = Histogram(
    'loan_decision_duration_seconds',
    'Time spent computing a loan decision in seconds',
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1)
)

approved_amount_total = Summary(
    'approved_amount_total',
    'Summary of approved loan amounts'
)

approved_period_total = Summary(
    'approved_period_total',
    'Summary of approved loan periods in months'
)

# ========================================
# Application Info
# ========================================

app_info = Info(
    'app',
    'Application information'
)


def set_app_info(version: str, environment: str):
    """Set application information for Prometheus.

    Call this during app startup.
    """
    app_info.info({
        'version': version,
        'environment': environment,
        'service': 'loan-decision-engine'
    })
