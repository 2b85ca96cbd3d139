import os
from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file automatically
load_dotenv()

BASE_URLS = {
    "sandbox": "https://api-m.sandbox.paypal.com",
    "live": "https://api-m.paypal.com",
}


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # PayPal credentials
    PAYPAL_CLIENT_ID: str
    PAYPAL_SECRET: str

    # PayPal endpoint
    PAYPAL_ENVIRONMENT: Literal["sandbox", "live"] = "sandbox"
    PAYPAL_BASE: str | None = None
    PAYPAL_TIMEOUT: float = 30.0
    PAYPAL_TOKEN_EXPIRY_MARGIN: int = 60

    # App settings
    ENVIRONMENT: Literal["development", "test", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # Observability (Optional)
    OTEL_SERVICE_NAME: str = "paypal-client"

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore"
    )

    def __init__(self, **kwargs):
        # Check for credentials before calling parent constructor
        for name in ("PAYPAL_CLIENT_ID", "PAYPAL_SECRET"):
            if name not in kwargs and not os.getenv(name):
                raise RuntimeError(
                    f"{name} not set; create .env or export the variable"
                )
        super().__init__(**kwargs)

    @property
    def base_url(self) -> str:
        """Root URL of the PayPal REST API, without a trailing slash."""
        if self.PAYPAL_BASE:
            return self.PAYPAL_BASE.rstrip("/")
        return BASE_URLS[self.PAYPAL_ENVIRONMENT]
