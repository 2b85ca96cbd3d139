"""
Checkout Orders v2

https://developer.paypal.com/docs/api/orders/v2/

Bodies map 1:1 to the HTTP API and are sent as given; see PayPal's
documentation for the fields each call accepts.
"""

from typing import Any

from core.dependencies import get_client
from payments.api import PayPalClient, build_path
from payments.result import Result

ORDERS = "/v2/checkout/orders"
ORDER = ORDERS + "/{}"


def create(order: dict[str, Any], client: PayPalClient | None = None) -> Result:
    """
    Create an order.

    Example:
        status, order = orders.create({
            "intent": "CAPTURE",
            "purchase_units": [
                {
                    "reference_id": "d9f80740-38f0-11e8-b467-0ed5f89f718b",
                    "amount": {"currency_code": "USD", "value": "100.00"},
                }
            ],
        })
        # (Status.ok, {"id": "5O190127TN364715T", "status": "PAYER_ACTION_REQUIRED", ...})
    """
    return (client or get_client()).post(ORDERS, order)


def show(order_id: str, client: PayPalClient | None = None) -> Result:
    """Show order details."""
    return (client or get_client()).get(build_path(ORDER, order_id))


def update(
    order_id: str, patches: list[dict[str, Any]], client: PayPalClient | None = None
) -> Result:
    """Apply JSON Patch operations to an order; PayPal answers 204 on success."""
    return (client or get_client()).patch(build_path(ORDER, order_id), patches)


def authorize(
    order_id: str, params: dict[str, Any] | None = None, client: PayPalClient | None = None
) -> Result:
    """
    Authorize payment for an approved order.

    An empty body is sent when no params are given, as PayPal requires one.
    """
    return (client or get_client()).post(
        build_path(ORDER + "/authorize", order_id), params or {}
    )


def capture(
    order_id: str, params: dict[str, Any] | None = None, client: PayPalClient | None = None
) -> Result:
    """Capture payment for an approved order."""
    return (client or get_client()).post(
        build_path(ORDER + "/capture", order_id), params or {}
    )
