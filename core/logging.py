import logging
import sys

import structlog
from opentelemetry.instrumentation.logging import LoggingInstrumentor

from core.settings import Settings


def get_log_renderer(environment: str):
    """Get log renderer based on environment"""
    # Use JSON format for tests and production
    if environment in ["test", "production"]:
        return structlog.processors.JSONRenderer()
    # Pretty printing for local development
    return structlog.dev.ConsoleRenderer(colors=True, sort_keys=False)


def configure_logging(settings: Settings | None = None):
    """Set up structlog + OTEL context injection.

    Libraries should not touch the root logger on import, so applications
    call this once at startup.
    """
    environment = settings.ENVIRONMENT if settings else "development"
    level = settings.LOG_LEVEL.upper() if settings else "INFO"

    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            get_log_renderer(environment),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if environment == "test":
        # In test mode, write to stdout for easier capture
        handler = logging.StreamHandler(sys.stdout)
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]  # Replace any existing handlers
    root_logger.setLevel(level)

    # urllib3 logs every connection at DEBUG, including the token endpoint
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    LoggingInstrumentor().instrument(set_logging_format=False)


# Business Event Log Names
class BusinessEvents:
    """Standard names for PayPal client logs"""

    REQUEST = "paypal.request"
    RESPONSE = "paypal.response"
    REQUEST_FAILED = "paypal.request_failed"
    TOKEN_REFRESHED = "paypal.token.refreshed"
    TOKEN_FAILED = "paypal.token.failed"
    TOKEN_INVALIDATED = "paypal.token.invalidated"
