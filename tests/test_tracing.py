from unittest.mock import patch

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from core.tracing import init_tracer
from tests.conftest import MockResponse


def test_init_tracer_uses_service_name_setting(mock_settings):
    settings = mock_settings.model_copy(update={"OTEL_SERVICE_NAME": "paypal-client-test"})
    with patch("core.tracing.trace.set_tracer_provider") as set_provider:
        provider = init_tracer(settings)

    set_provider.assert_called_once_with(provider)
    assert provider.resource.attributes["service.name"] == "paypal-client-test"


@patch("payments.api.requests.request")
def test_request_span_attributes(mock_request, client):
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    mock_request.return_value = MockResponse(404, {"name": "RESOURCE_NOT_FOUND"})

    with patch("core.tracing.trace.get_tracer", provider.get_tracer):
        client.get("/v1/payments/refund/R-1")

    spans = exporter.get_finished_spans()
    assert len(spans) == 1
    span = spans[0]
    assert span.name == "paypal.request"
    assert span.attributes["http.method"] == "GET"
    assert span.attributes["paypal.path"] == "/v1/payments/refund/R-1"
    assert span.attributes["http.status_code"] == 404
    assert span.attributes["paypal.outcome"] == "not_found"


def test_init_tracer_default_service_name():
    with patch("core.tracing.trace.set_tracer_provider"):
        provider = init_tracer()

    assert provider.resource.attributes["service.name"] == "paypal-client"
