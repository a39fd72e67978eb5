"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Auth metrics
login_attempts = Counter(
    'planit_login_attempts_total',
    'Total login form submissions',
    ['result']  # success, missing_fields, unknown_email, bad_credentials
)

signup_attempts = Counter(
    'planit_signup_attempts_total',
    'Total signup form submissions',
    ['result']  # success, invalid, email_in_use
)

# Request metrics
request_latency = Histogram(
    'planit_request_latency_seconds',
    'Request latency by route',
    ['method', 'route'],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)

# Page errors rendered by the error boundary
rendered_errors = Counter(
    'planit_rendered_errors_total',
    'Error pages rendered',
    ['kind']  # not_found, http, runtime, unknown
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_login_attempt(result: str):
    """Record login attempt. Result: success, missing_fields, unknown_email, bad_credentials"""
    login_attempts.labels(result=result).inc()


def record_signup_attempt(result: str):
    """Record signup attempt. Result: success, invalid, email_in_use"""
    signup_attempts.labels(result=result).inc()


def record_request(method: str, route: str, seconds: float):
    request_latency.labels(method=method, route=route).observe(seconds)


def record_rendered_error(kind: str):
    rendered_errors.labels(kind=kind).inc()
