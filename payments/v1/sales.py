"""
Sales v1

https://developer.paypal.com/docs/api/payments/v1/#sale
"""

from typing import Any

from core.dependencies import get_client
from payments.api import PayPalClient, build_path
from payments.result import Result

SALE = "/v1/payments/sale/{}"


def show(sale_id: str, client: PayPalClient | None = None) -> Result:
    return (client or get_client()).get(build_path(SALE, sale_id))


def refund(
    sale_id: str, params: dict[str, Any] | None = None, client: PayPalClient | None = None
) -> Result:
    return (client or get_client()).post(build_path(SALE + "/refund", sale_id), params or {})
