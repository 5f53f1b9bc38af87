"""
Prometheus metrics instrumentation for the Stripe adapter services.

Exposes request/latency metrics for the HTTP surface at /metrics and counts
every Stripe SDK call and every translated gateway error.
"""

from prometheus_fastapi_instrumentator import Instrumentator
from prometheus_client import Counter

stripe_requests = Counter(
    "stripe_requests_total",
    "Total number of calls forwarded to the Stripe SDK",
    ["resource", "operation"],
)

gateway_errors = Counter(
    "stripe_gateway_errors_total",
    "Total number of Stripe errors translated into service errors",
    ["category"],
)


def init_metrics(app):
    """
    Initialize Prometheus metrics instrumentation for the FastAPI app.

    Args:
        app: FastAPI application instance

    Returns:
        Instrumentator instance
    """
    inst = Instrumentator(
        should_group_status_codes=False,
        should_ignore_untemplated=True,
    )
    inst.instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)
    return inst
