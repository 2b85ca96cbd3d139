"""
Prometheus metrics for the PayPal client.

Counters and histograms live in the default registry, so an application that
already exposes prometheus_client metrics picks these up without extra wiring.
"""

from prometheus_client import Counter, Histogram

requests_total = Counter(
    "paypal_requests_total",
    "Total number of PayPal API requests by outcome",
    ["method", "outcome"],
)

request_latency = Histogram(
    "paypal_request_latency_seconds",
    "Time taken for PayPal API requests to complete",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

token_refresh_total = Counter(
    "paypal_token_refresh_total",
    "Total number of OAuth token exchanges",
    ["result"],  # success, unauthorised, bad_network
)


def record_request(method: str, outcome: str, duration: float):
    """Record one finished API request."""
    requests_total.labels(method=method, outcome=outcome).inc()
    request_latency.observe(duration)
