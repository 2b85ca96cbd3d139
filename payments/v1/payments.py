"""
Payments v1

https://developer.paypal.com/docs/api/payments/v1/#payment
"""

from typing import Any

from core.dependencies import get_client
from payments.api import PayPalClient, build_path
from payments.result import Result

PAYMENTS = "/v1/payments/payment"
PAYMENT = PAYMENTS + "/{}"


def create(payment: dict[str, Any], client: PayPalClient | None = None) -> Result:
    return (client or get_client()).post(PAYMENTS, payment)


def execute(payment_id: str, payer_id: str, client: PayPalClient | None = None) -> Result:
    """Execute a payment the payer approved; payer_id comes from the return URL."""
    return (client or get_client()).post(
        build_path(PAYMENT + "/execute", payment_id), {"payer_id": payer_id}
    )


def show(payment_id: str, client: PayPalClient | None = None) -> Result:
    return (client or get_client()).get(build_path(PAYMENT, payment_id))


def update(
    payment_id: str, patches: list[dict[str, Any]], client: PayPalClient | None = None
) -> Result:
    return (client or get_client()).patch(build_path(PAYMENT, payment_id), patches)


def list_payments(
    params: dict[str, Any] | None = None, client: PayPalClient | None = None
) -> Result:
    """List payments; params become the query string (count, start_id, start_time, ...)."""
    return (client or get_client()).get(PAYMENTS, params=params)
