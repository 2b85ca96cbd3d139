import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import requests
import structlog
from pydantic import BaseModel, ValidationError

from core import metrics
from core.logging import BusinessEvents
from core.settings import Settings
from payments.result import PayPalError, Reason

log = structlog.get_logger(__name__)

TOKEN_PATH = "/v1/oauth2/token"
DEFAULT_EXPIRES_IN = 3600


class AuthError(PayPalError):
    """Raised when no bearer token can be obtained."""

    @property
    def reason(self) -> Reason:
        return self.value


class AccessToken(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    scope: str = ""
    app_id: str | None = None
    expires_at: datetime

    def is_expired(self, now: datetime, margin: int = 0) -> bool:
        return now >= self.expires_at - timedelta(seconds=margin)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenManager:
    """
    Owns the OAuth2 client-credentials token for one set of credentials.

    The lock is held across the exchange, so threads that miss the cache
    while a refresh is running wait for it and reuse its token.
    """

    def __init__(self, settings: Settings, clock: Callable[[], datetime] = _utcnow):
        self.base = settings.base_url
        self.client = settings.PAYPAL_CLIENT_ID
        self.secret = settings.PAYPAL_SECRET
        self.timeout = settings.PAYPAL_TIMEOUT
        self.margin = settings.PAYPAL_TOKEN_EXPIRY_MARGIN
        self.clock = clock
        self._token: AccessToken | None = None
        self._lock = threading.Lock()

    def get_token(self) -> AccessToken:
        with self._lock:
            token = self._token
            if token is not None and not token.is_expired(self.clock(), self.margin):
                return token
            self._token = self._fetch()
            return self._token

    def invalidate(self, token: AccessToken | None = None):
        """Drop the cached token; with a token given, only if it is still the cached one."""
        with self._lock:
            if self._token is None or (token is not None and self._token is not token):
                return
            log.info(BusinessEvents.TOKEN_INVALIDATED, scope=self._token.scope)
            self._token = None

    def _fetch(self) -> AccessToken:
        try:
            r = requests.post(
                f"{self.base}{TOKEN_PATH}",
                auth=(self.client, self.secret),
                data={"grant_type": "client_credentials"},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log.warning(BusinessEvents.TOKEN_FAILED, reason="bad_network", error=str(e))
            metrics.token_refresh_total.labels(result="bad_network").inc()
            raise AuthError(Reason.bad_network) from e

        data = None
        if 200 <= r.status_code < 300:
            try:
                data = r.json()
            except ValueError:
                data = None

        token = None
        access_token = data.get("access_token") if isinstance(data, dict) else None
        if isinstance(access_token, str) and access_token:
            try:
                expires_in = int(data.get("expires_in") or DEFAULT_EXPIRES_IN)
                token = AccessToken(
                    access_token=access_token,
                    token_type=data.get("token_type") or "Bearer",
                    scope=data.get("scope") or "",
                    app_id=data.get("app_id"),
                    expires_at=self.clock() + timedelta(seconds=expires_in),
                )
            except (TypeError, ValueError, ValidationError):
                token = None

        if token is None:
            log.warning(
                BusinessEvents.TOKEN_FAILED,
                reason="unauthorised",
                status_code=r.status_code,
                body=r.text[:500],
            )
            metrics.token_refresh_total.labels(result="unauthorised").inc()
            raise AuthError(Reason.unauthorised)

        log.info(
            BusinessEvents.TOKEN_REFRESHED,
            expires_in=expires_in,
            app_id=token.app_id,
        )
        metrics.token_refresh_total.labels(result="success").inc()
        return token
