"""
PayPal REST client

Every endpoint function returns a Result, a (status, value) tuple:

    from payments.v2 import orders

    status, order = orders.show("5O190127TN364715T")
"""

from payments.api import PayPalClient
from payments.auth import AccessToken, AuthError, TokenManager
from payments.result import Outcome, PayPalError, Reason, Result, Status

__all__ = [
    "AccessToken",
    "AuthError",
    "Outcome",
    "PayPalClient",
    "PayPalError",
    "Reason",
    "Result",
    "Status",
    "TokenManager",
]
