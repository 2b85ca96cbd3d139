"""
Authorizations v1

https://developer.paypal.com/docs/api/payments/v1/#authorization
"""

from typing import Any

from core.dependencies import get_client
from payments.api import PayPalClient, build_path
from payments.result import Result

AUTHORIZATION = "/v1/payments/authorization/{}"


def show(authorization_id: str, client: PayPalClient | None = None) -> Result:
    return (client or get_client()).get(build_path(AUTHORIZATION, authorization_id))


def capture(
    authorization_id: str, params: dict[str, Any], client: PayPalClient | None = None
) -> Result:
    """
    Capture an authorized payment.

    Example params:
        {"amount": {"currency": "USD", "total": "4.54"}, "is_final_capture": True}
    """
    return (client or get_client()).post(
        build_path(AUTHORIZATION + "/capture", authorization_id), params
    )


def void(authorization_id: str, client: PayPalClient | None = None) -> Result:
    return (client or get_client()).post(
        build_path(AUTHORIZATION + "/void", authorization_id)
    )


def reauthorize(
    authorization_id: str, params: dict[str, Any], client: PayPalClient | None = None
) -> Result:
    return (client or get_client()).post(
        build_path(AUTHORIZATION + "/reauthorize", authorization_id), params
    )
