"""
Captures v1

https://developer.paypal.com/docs/api/payments/v1/#capture
"""

from typing import Any

from core.dependencies import get_client
from payments.api import PayPalClient, build_path
from payments.result import Result

CAPTURE = "/v1/payments/capture/{}"


def show(capture_id: str, client: PayPalClient | None = None) -> Result:
    return (client or get_client()).get(build_path(CAPTURE, capture_id))


def refund(
    capture_id: str, params: dict[str, Any] | None = None, client: PayPalClient | None = None
) -> Result:
    """Refund a captured payment; no params refunds the full amount."""
    return (client or get_client()).post(
        build_path(CAPTURE + "/refund", capture_id), params or {}
    )
