"""
Prometheus request timing per endpoint (exposed at /metrics).
"""

import functools

from prometheus_client import Histogram

REQUEST_LATENCY = Histogram(
    "order_service_request_seconds",
    "Time spent handling API requests",
    ["endpoint"],
)


def timed(endpoint: str):
    """Record handler latency under the given endpoint label. For async handlers."""

    def decorator(fn):
        @functools.wraps(fn)
        async def wrapper(*args, **kwargs):
            with REQUEST_LATENCY.labels(endpoint=endpoint).time():
                return await fn(*args, **kwargs)

        return wrapper

    return decorator
