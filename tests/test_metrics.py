"""Test the metrics module."""

from unittest.mock import patch

import requests

from core.metrics import record_request, request_latency, requests_total, token_refresh_total
from tests.conftest import MockResponse


def _count(method, outcome):
    return requests_total.labels(method=method, outcome=outcome)._value.get()


def test_record_request():
    initial = _count("GET", "ok")
    initial_sum = request_latency._sum.get()

    record_request("GET", "ok", 0.25)

    assert _count("GET", "ok") == initial + 1
    assert request_latency._sum.get() == initial_sum + 0.25


@patch("payments.api.requests.request")
def test_outcomes_counted(mock_request, client):
    cases = [
        (MockResponse(200, {"id": "A"}), "ok"),
        (MockResponse(404, {"name": "RESOURCE_NOT_FOUND"}), "not_found"),
        (MockResponse(204), "no_content"),
        (MockResponse(500, {"name": "INTERNAL_SERVER_ERROR"}), "error"),
    ]
    for response, outcome in cases:
        initial = _count("GET", outcome)
        mock_request.return_value = response
        client.get("/v2/checkout/orders/A")
        assert _count("GET", outcome) == initial + 1


@patch("payments.api.requests.request")
def test_bad_network_counted(mock_request, client):
    initial = _count("POST", "bad_network")
    mock_request.side_effect = requests.ConnectionError("down")

    client.post("/v2/checkout/orders", {})

    assert _count("POST", "bad_network") == initial + 1


@patch("payments.auth.requests.post")
def test_token_refresh_counted(mock_post, mock_settings, clock):
    from payments.auth import AuthError, TokenManager

    success = token_refresh_total.labels(result="success")
    rejected = token_refresh_total.labels(result="unauthorised")
    initial_success = success._value.get()
    initial_rejected = rejected._value.get()

    mock_post.return_value = MockResponse(200, {"access_token": "tok"})
    TokenManager(mock_settings, clock=clock).get_token()

    mock_post.return_value = MockResponse(401, {"error": "invalid_client"})
    try:
        TokenManager(mock_settings, clock=clock).get_token()
    except AuthError:
        pass

    assert success._value.get() == initial_success + 1
    assert rejected._value.get() == initial_rejected + 1
