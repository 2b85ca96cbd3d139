"""
Refunds v1

https://developer.paypal.com/docs/api/payments/v1/#refund
"""

from core.dependencies import get_client
from payments.api import PayPalClient, build_path
from payments.result import Result


def show(refund_id: str, client: PayPalClient | None = None) -> Result:
    """Show refund details."""
    return (client or get_client()).get(build_path("/v1/payments/refund/{}", refund_id))
