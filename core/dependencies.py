import threading

from core.settings import Settings
from payments.api import PayPalClient

# Process-wide defaults, used by endpoint functions called without client=
_settings = None
_client = None
_lock = threading.RLock()


def get_settings() -> Settings:
    """Return the default settings, loading them from the environment once."""
    with _lock:
        if _settings is None:
            init_settings()
        return _settings


def init_settings(settings: Settings | None = None):
    """Initialize settings singleton."""
    global _settings, _client
    with _lock:
        _settings = settings if settings is not None else Settings()
        _client = None


def get_client() -> PayPalClient:
    """Return the default PayPalClient, built from get_settings() on first use."""
    global _client
    with _lock:
        if _client is None:
            _client = PayPalClient(get_settings())
        return _client


def set_client(client: PayPalClient):
    """Install an explicitly constructed client as the default."""
    global _client
    with _lock:
        _client = client


def clear_settings():
    """Clear settings singleton and the client built from it."""
    global _settings, _client
    with _lock:
        _settings = None
        _client = None
