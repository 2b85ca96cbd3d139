"""
PayPal REST dispatcher

Sends one authenticated request per call and folds the HTTP answer into a
Result. Nothing here knows about orders or refunds; endpoint modules only
supply a method, a path and an optional body.
"""

import json
import time
from typing import Any
from urllib.parse import quote

import requests
import structlog

from core import metrics
from core.logging import BusinessEvents
from core.settings import Settings
from core.tracing import get_tracer
from payments.auth import AuthError, TokenManager
from payments.result import Outcome, Reason, Result

log = structlog.get_logger(__name__)


def build_path(template: str, *ids: str) -> str:
    """Fill a path template with URL-quoted ids, e.g. build_path("/v1/payments/sale/{}", sale_id)."""
    return template.format(*(quote(str(i), safe="") for i in ids))


class PayPalClient:
    def __init__(self, settings: Settings, tokens: TokenManager | None = None):
        self.base = settings.base_url
        self.timeout = settings.PAYPAL_TIMEOUT
        self.tokens = tokens if tokens is not None else TokenManager(settings)

    def get(self, path: str, params: dict[str, Any] | None = None) -> Result:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any = None, headers: dict[str, str] | None = None) -> Result:
        return self.request("POST", path, body=body, headers=headers)

    def patch(self, path: str, body: Any) -> Result:
        return self.request("PATCH", path, body=body)

    def delete(self, path: str) -> Result:
        return self.request("DELETE", path)

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Result:
        start = time.perf_counter()
        with get_tracer().start_as_current_span("paypal.request") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("paypal.path", path)
            result, outcome = self._send(method, path, body, params, headers, span)
            span.set_attribute("paypal.outcome", outcome)
        metrics.record_request(method, outcome, time.perf_counter() - start)
        return result

    def _send(self, method, path, body, params, headers, span) -> tuple[Result, str]:
        try:
            token = self.tokens.get_token()
        except AuthError as e:
            return Result.failure(e.reason), e.reason.value

        request_headers = {
            "Authorization": f"Bearer {token.access_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if headers:
            request_headers.update(headers)

        log.debug(BusinessEvents.REQUEST, method=method, path=path)
        try:
            r = requests.request(
                method,
                f"{self.base}{path}",
                data=json.dumps(body) if body is not None else None,
                params=params,
                headers=request_headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log.warning(
                BusinessEvents.REQUEST_FAILED, method=method, path=path, error=str(e)
            )
            return Result.failure(Reason.bad_network), Reason.bad_network.value

        span.set_attribute("http.status_code", r.status_code)
        result, outcome = self._interpret(r, token)
        log.info(
            BusinessEvents.RESPONSE,
            method=method,
            path=path,
            status_code=r.status_code,
            outcome=outcome,
            debug_id=r.headers.get("Paypal-Debug-Id") if r.headers else None,
        )
        return result, outcome

    def _interpret(self, r, token) -> tuple[Result, str]:
        if r.status_code in (401, 403):
            # PayPal revoked or rejected the token; the next call fetches a new one
            self.tokens.invalidate(token)
            return Result.failure(Reason.unauthorised), Reason.unauthorised.value

        if r.status_code == 404:
            return Result.success(Outcome.not_found), Outcome.not_found.value

        if 200 <= r.status_code < 300:
            if not r.content or not r.content.strip():
                return Result.success(Outcome.no_content), Outcome.no_content.value
            try:
                return Result.success(r.json()), "ok"
            except ValueError:
                return Result.failure(r.text), "error"

        try:
            error_body = r.json()
        except ValueError:
            error_body = r.text
        return Result.failure(error_body), "error"
