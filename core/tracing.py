import os

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from core.settings import Settings

log = structlog.get_logger(__name__)

TRACER_NAME = "paypal-client"


def _span_exporter():
    if os.getenv("DISABLE_TRACING", "").lower() in {"1", "true", "yes"}:
        return ConsoleSpanExporter()
    try:
        return OTLPSpanExporter()
    except Exception as exc:  # pragma: no cover
        log.warning("tracing.exporter_unavailable", error=str(exc))
        return ConsoleSpanExporter()


def init_tracer(settings: Settings | None = None) -> TracerProvider:
    """
    Install a TracerProvider named after OTEL_SERVICE_NAME.

    Spans go to the OTLP collector, or to stdout when DISABLE_TRACING is set.
    """
    service_name = settings.OTEL_SERVICE_NAME if settings else TRACER_NAME
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(BatchSpanProcessor(_span_exporter()))
    trace.set_tracer_provider(provider)
    return provider


def get_tracer():
    """Tracer used around PayPal requests; a no-op until init_tracer runs."""
    return trace.get_tracer(TRACER_NAME)
