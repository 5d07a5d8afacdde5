"""Tests for the HTTP request bridge."""
from __future__ import annotations

import io
import json
import urllib.error
from email.message import Message

import pytest

from snowrail_mcp import bridge as bridge_module
from snowrail_mcp import environment as environment_module
from snowrail_mcp.bridge import (
    ParsedBody,
    PreparedRequest,
    RawBody,
    RequestBridge,
    RequestSpec,
    UrllibTransport,
    parse_json_or_raw,
)
from snowrail_mcp.errors import ConfigurationError, TransportError

from conftest import RecordingTransport, make_settings


def test_get_request_has_default_headers_and_no_body(bridge, transport):
    envelope = bridge.execute(RequestSpec(path="/health"))

    assert envelope.url == "https://staging-api.snowrail.xyz/health"
    assert envelope.status == 200
    assert envelope.data == {"ok": True}
    [prepared] = transport.requests
    assert prepared.method == "GET"
    assert prepared.headers == {"Content-Type": "application/json"}
    assert prepared.data is None


def test_get_request_drops_body(bridge, transport):
    bridge.execute(RequestSpec(path="/health", body={"ignored": True}))
    assert transport.requests[0].data is None


def test_post_body_is_serialized_as_json(bridge, transport):
    bridge.execute(RequestSpec(path="/api/treasury/test", method="POST", body={}))
    assert json.loads(transport.requests[0].data) == {}


def test_caller_headers_override_defaults(bridge, transport):
    bridge.execute(
        RequestSpec(
            path="/x",
            method="POST",
            headers={"Content-Type": "text/plain", "X-PAYMENT": "demo-token"},
            body={"a": 1},
        )
    )
    assert transport.requests[0].headers == {"Content-Type": "text/plain", "X-PAYMENT": "demo-token"}


def test_spec_environment_and_override_are_honoured(bridge, transport):
    bridge.execute(RequestSpec(path="/health", environment="production"))
    bridge.execute(RequestSpec(path="/health", environment="production", base_url_override="http://127.0.0.1:9"))

    assert [request.url for request in transport.requests] == [
        "https://api.snowrail.xyz/health",
        "http://127.0.0.1:9/health",
    ]


def test_path_is_not_reencoded(bridge, transport):
    bridge.execute(RequestSpec(path="/api/payroll/pay%2F1"))
    assert transport.requests[0].url.endswith("/api/payroll/pay%2F1")


def test_server_error_is_returned_not_raised(settings):
    stub = RecordingTransport(status=500, text='{"error": "boom"}')
    envelope = RequestBridge(settings, transport=stub).execute(RequestSpec(path="/health"))

    assert envelope.status == 500
    assert envelope.body == ParsedBody({"error": "boom"})
    assert envelope.to_dict()["data"] == {"error": "boom"}


def test_non_json_body_is_kept_verbatim(settings):
    stub = RecordingTransport(status=502, text="<html>Bad gateway</html>")
    envelope = RequestBridge(settings, transport=stub).execute(RequestSpec(path="/health"))

    assert envelope.body == RawBody("<html>Bad gateway</html>")
    assert envelope.data == "<html>Bad gateway</html>"


def test_empty_body_parses_to_none(settings):
    stub = RecordingTransport(status=204, text="")
    envelope = RequestBridge(settings, transport=stub).execute(RequestSpec(path="/health"))
    assert envelope.to_dict() == {"url": "https://staging-api.snowrail.xyz/health", "status": 204, "data": None}


def test_configuration_error_prevents_transport_call(monkeypatch: pytest.MonkeyPatch, transport):
    monkeypatch.setattr(environment_module, "BASE_URLS", {})
    settings = make_settings()
    bridge = RequestBridge(settings, transport=transport)
    with pytest.raises(ConfigurationError):
        bridge.execute(RequestSpec(path="/health", environment="moon"))
    assert transport.requests == []


def test_transport_errors_propagate(settings):
    def failing(prepared: PreparedRequest):
        raise TransportError("connection refused", url=prepared.url)

    with pytest.raises(TransportError):
        RequestBridge(settings, transport=failing).execute(RequestSpec(path="/health"))


@pytest.mark.parametrize(
    "text, expected",
    [
        ('{"a": 1}', ParsedBody({"a": 1})),
        ("[1, 2]", ParsedBody([1, 2])),
        ("", ParsedBody(None)),
        ("not json", RawBody("not json")),
        ('{"x": NaN}', RawBody('{"x": NaN}')),
        ("Infinity", RawBody("Infinity")),
        ("[-Infinity]", RawBody("[-Infinity]")),
    ],
)
def test_parse_json_or_raw(text, expected):
    assert parse_json_or_raw(text) == expected


class _FakeResponse(io.BytesIO):
    def __init__(self, payload: bytes, status: int = 200) -> None:
        super().__init__(payload)
        self.status = status
        self.headers = Message()
        self.headers["Content-Type"] = "application/json; charset=utf-8"


def test_urllib_transport_sends_method_headers_and_body(monkeypatch: pytest.MonkeyPatch):
    captured = {}

    def fake_urlopen(request):
        captured["request"] = request
        return _FakeResponse(b'{"ok": true}', status=201)

    monkeypatch.setattr(bridge_module.urllib.request, "urlopen", fake_urlopen)
    response = UrllibTransport()(
        PreparedRequest(
            url="https://api.snowrail.xyz/auth/login",
            method="POST",
            headers={"Content-Type": "application/json"},
            data=b'{"email": "a@b.co"}',
        )
    )

    assert response.status == 201
    assert response.text == '{"ok": true}'
    request = captured["request"]
    assert request.get_method() == "POST"
    assert request.full_url == "https://api.snowrail.xyz/auth/login"
    assert request.data == b'{"email": "a@b.co"}'
    assert request.get_header("Content-type") == "application/json"


def test_urllib_transport_returns_http_errors(monkeypatch: pytest.MonkeyPatch):
    def fake_urlopen(request):
        headers = Message()
        raise urllib.error.HTTPError(request.full_url, 402, "Payment Required", headers, io.BytesIO(b'{"x402": true}'))

    monkeypatch.setattr(bridge_module.urllib.request, "urlopen", fake_urlopen)
    response = UrllibTransport()(
        PreparedRequest(url="https://api.snowrail.xyz/api/payroll/execute", method="POST", headers={}, data=b"{}")
    )

    assert response.status == 402
    assert response.text == '{"x402": true}'


def test_urllib_transport_wraps_network_failures(monkeypatch: pytest.MonkeyPatch):
    def fake_urlopen(request):
        raise urllib.error.URLError("Name or service not known")

    monkeypatch.setattr(bridge_module.urllib.request, "urlopen", fake_urlopen)
    with pytest.raises(TransportError) as excinfo:
        UrllibTransport()(PreparedRequest(url="https://nowhere.invalid/health", method="GET", headers={}, data=None))

    assert isinstance(excinfo.value.__cause__, urllib.error.URLError)


def test_urllib_transport_rejects_malformed_url():
    with pytest.raises(TransportError):
        UrllibTransport()(PreparedRequest(url="not-a-url/health", method="GET", headers={}, data=None))


def test_non_standard_constants_stay_raw_in_envelope(settings):
    transport = RecordingTransport(status=200, text='{"balance": NaN}')

    envelope = RequestBridge(settings, transport=transport).execute(RequestSpec(path="/api/treasury/balance"))

    assert envelope.body == RawBody('{"balance": NaN}')
    # The envelope serializes as strict JSON.
    json.dumps(envelope.to_dict(), allow_nan=False)
