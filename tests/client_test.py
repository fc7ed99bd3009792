import asyncio

import pytest
import requests

from directions.route.client import DirectionsClient, check_status
from directions.route.common import DirectionsConfig, NoRouteFound, ServiceError, TransportError
from directions.route.request import build_request

from conftest import BASE_URL, make_session, two_leg_payload


def _request():
    return build_request("Berlin", "Hamburg", ["Schwerin"], api_key="test-key", base_url=BASE_URL)


def test_fetch_route_success(client_for):
    client = client_for(two_leg_payload())
    result = asyncio.run(client.fetch_route(_request()))
    assert result.distance_km == pytest.approx(3.5)
    assert len(result.coordinates) == 5


def test_single_attempt_with_configured_timeouts(client_for, cfg):
    client = client_for(two_leg_payload())
    asyncio.run(client.fetch_route(_request()))
    client._sess.send.assert_called_once()
    _, kwargs = client._sess.send.call_args
    assert kwargs["timeout"] == cfg.timeouts


def test_service_error_carries_message(client_for):
    client = client_for({"status": "REQUEST_DENIED", "error_message": "The provided API key is invalid."})
    with pytest.raises(ServiceError) as ei:
        asyncio.run(client.fetch_route(_request()))
    assert ei.value.message == "The provided API key is invalid."
    assert ei.value.status == "REQUEST_DENIED"
    assert ei.value.kind == "ServiceError"


def test_service_error_fallback_message(client_for):
    with pytest.raises(ServiceError) as ei:
        asyncio.run(client_for({"status": "OVER_QUERY_LIMIT"}).fetch_route(_request()))
    assert str(ei.value) == "Unknown error"


def test_zero_results_is_no_route(client_for):
    with pytest.raises(NoRouteFound):
        asyncio.run(client_for({"status": "ZERO_RESULTS", "routes": []}).fetch_route(_request()))


def test_ok_with_empty_routes_is_no_route(client_for):
    with pytest.raises(NoRouteFound):
        asyncio.run(client_for({"status": "OK", "routes": []}).fetch_route(_request()))


def test_network_failure_is_transport_error(client_for):
    client = client_for(exc=requests.ConnectionError("connection refused"))
    with pytest.raises(TransportError) as ei:
        asyncio.run(client.fetch_route(_request()))
    assert isinstance(ei.value.cause, requests.ConnectionError)


def test_invalid_json_is_transport_error(client_for):
    client = client_for(ValueError("Expecting value"), status_code=502)
    with pytest.raises(TransportError):
        asyncio.run(client.fetch_route(_request()))


def test_non_object_body_is_transport_error(client_for):
    with pytest.raises(TransportError):
        asyncio.run(client_for(["not", "a", "dict"]).fetch_route(_request()))


def test_blocking_get_route(cfg):
    client = DirectionsClient(cfg, session=make_session(two_leg_payload()))
    assert client.get_route(_request()).duration_min == pytest.approx(2.5)


def test_check_status_accepts_ok_with_routes():
    assert check_status({"status": "OK", "routes": [{}]}) is None


def test_config_reads_key_from_env(monkeypatch):
    monkeypatch.setenv("DIRECTIONS_API_KEY", " env-key ")
    assert DirectionsConfig().api_key == "env-key"
    assert DirectionsConfig(api_key="explicit").api_key == "explicit"


def test_default_session_sends_json_accept_header(cfg):
    with DirectionsClient(cfg) as client:
        assert client._sess.headers["Accept"] == "application/json"
        assert client._sess.headers["User-Agent"] == cfg.user_agent


def test_unusable_custom_request_is_transport_error(cfg):
    session = make_session(two_leg_payload())
    client = DirectionsClient(cfg, session=session)
    request = build_request("Berlin", "Hamburg", api_key="k", base_url=lambda req: 42)
    with pytest.raises(TransportError) as ei:
        asyncio.run(client.fetch_route(request))
    assert isinstance(ei.value.cause, TypeError)
    with pytest.raises(TransportError):
        client.get_route(request)
    session.send.assert_not_called()


def test_url_without_scheme_is_transport_error(client_for):
    request = build_request("Berlin", "Hamburg", api_key="k", base_url="maps.example.test/directions")
    with pytest.raises(TransportError) as ei:
        asyncio.run(client_for(two_leg_payload()).fetch_route(request))
    assert isinstance(ei.value.cause, requests.exceptions.MissingSchema)


def test_transport_error_exposes_message(client_for):
    client = client_for(exc=requests.Timeout("read timed out"))
    with pytest.raises(TransportError) as ei:
        client.get_route(_request())
    assert ei.value.message == str(ei.value)
    assert "read timed out" in ei.value.message
