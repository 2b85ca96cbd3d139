"""
Result types returned by every PayPal call.

A call either succeeds or fails, and the value says how:

- (Status.ok, {...})                  decoded JSON body
- (Status.ok, Outcome.not_found)      PayPal answered 404
- (Status.ok, Outcome.no_content)     2xx with an empty body
- (Status.error, Reason.unauthorised) credentials rejected
- (Status.error, Reason.bad_network)  request never got an HTTP answer
- (Status.error, {...})               PayPal's error body, untouched
"""

from enum import Enum
from typing import Any, NamedTuple


class Status(Enum):
    ok = "ok"
    error = "error"


class Outcome(Enum):
    not_found = "not_found"
    no_content = "no_content"


class Reason(Enum):
    unauthorised = "unauthorised"
    bad_network = "bad_network"


class PayPalError(Exception):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(value.value if isinstance(value, Reason) else value)


class Result(NamedTuple):
    status: Status
    value: Any

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(Status.ok, value)

    @classmethod
    def failure(cls, value: Any) -> "Result":
        return cls(Status.error, value)

    @property
    def ok(self) -> bool:
        return self.status is Status.ok

    def unwrap(self) -> Any:
        """Return the success value, or raise PayPalError with the failure value."""
        if self.ok:
            return self.value
        raise PayPalError(self.value)
