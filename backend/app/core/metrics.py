"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Auth metrics
auth_attempts = Counter(
    'auth_attempts_total',
    'Registration and login attempts',
    ['operation', 'result']  # register/login, success/conflict/invalid
)

# Event metrics
event_operations = Counter(
    'event_operations_total',
    'Event mutations',
    ['operation']  # create, update, delete
)

ownership_denials = Counter(
    'ownership_denials_total',
    'Requests rejected by the event ownership check',
    ['operation']  # update, delete, participants
)

# Participation metrics
event_registrations = Counter(
    'event_registrations_total',
    'Event registration attempts',
    ['result']  # created, ignored, rejected
)

# HTTP metrics
request_latency = Histogram(
    'http_request_latency_seconds',
    'HTTP request latency',
    ['method', 'status_code'],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)


def metrics_endpoint() -> Response:
    """Render the default registry in the Prometheus text format."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_auth_attempt(operation: str, result: str):
    auth_attempts.labels(operation=operation, result=result).inc()


def record_event_operation(operation: str):
    event_operations.labels(operation=operation).inc()


def record_ownership_denial(operation: str):
    ownership_denials.labels(operation=operation).inc()


def record_registration(result: str):
    event_registrations.labels(result=result).inc()


def observe_request(method: str, status_code: int, duration_seconds: float):
    request_latency.labels(method=method, status_code=str(status_code)).observe(duration_seconds)
