import pytest
from fastapi.testclient import TestClient

from satstream_mcp.config import SatstreamConfig
from satstream_mcp.errors import StartupConfigError, TransportError, UpstreamHttpError
from satstream_mcp.satstream_api import ProxyFailure, ProxySuccess
from satstream_mcp.server import create_app


class StubClient:
    def __init__(self, result=None):
        self.result = result if result is not None else ProxySuccess({"address": "bc1qxyz"})
        self.calls = []
        self.closed = False

    async def invoke(self, descriptor, args, credential):
        self.calls.append((descriptor.name, dict(args)))
        return self.result

    async def aclose(self):
        self.closed = True


def _client(stub=None, api_key="test-key"):
    stub = stub or StubClient()
    app = create_app(SatstreamConfig(api_key=api_key), client=stub)
    return TestClient(app), stub


def test_health_endpoint_sets_request_id():
    client, _ = _client()
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers.get("X-Request-ID")


def test_metrics_endpoint_counts_requests():
    client, _ = _client()
    client.get("/health")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    data = resp.json()
    assert data["requests"] >= 1
    assert "tool_success" in data


def test_tools_index_lists_catalogue():
    client, _ = _client()
    resp = client.get("/tools")
    names = {tool["name"] for tool in resp.json()["tools"]}
    assert "address_get" in names
    assert "status_get" in names


def test_tool_route_success():
    client, stub = _client()
    resp = client.get("/tools/address_get", params={"address": "bc1qxyz"})
    assert resp.status_code == 200
    assert resp.json() == {"address": "bc1qxyz"}
    assert stub.calls == [("address_get", {"address": "bc1qxyz"})]


def test_tool_route_coerces_integer_query_values():
    client, stub = _client(StubClient(ProxySuccess({"deltas": []})))
    resp = client.get("/tools/address_deltas_get", params={"address": "bc1q", "page_size": "50"})
    assert resp.status_code == 200
    assert stub.calls == [("address_deltas_get", {"address": "bc1q", "page_size": 50})]


def test_tool_route_unknown_tool():
    client, stub = _client()
    resp = client.get("/tools/nope")
    assert resp.status_code == 404
    assert resp.json()["code"] == "unknown_tool"
    assert stub.calls == []


def test_tool_route_bad_integer():
    client, stub = _client()
    resp = client.get("/tools/blockhash_by_height_get", params={"block_height": "tall"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_arguments"
    assert stub.calls == []


def test_tool_route_missing_required_argument():
    client, _ = _client()
    resp = client.get("/tools/address_get")
    assert resp.status_code == 400


def test_tool_route_passes_upstream_status_through():
    stub = StubClient(ProxyFailure(UpstreamHttpError(404, {"message": "not found"})))
    client, _ = _client(stub)
    resp = client.get("/tools/address_get", params={"address": "bc1qxyz"})
    assert resp.status_code == 404
    assert resp.json() == {
        "error": True,
        "code": "upstream_http_error",
        "message": "Upstream returned HTTP 404",
        "status": 404,
        "data": {"message": "not found"},
    }


def test_tool_route_transport_error_is_bad_gateway():
    stub = StubClient(ProxyFailure(TransportError("ConnectError: refused")))
    client, _ = _client(stub)
    resp = client.get("/tools/status_get")
    assert resp.status_code == 502
    assert resp.json()["message"] == "ConnectError: refused"


def test_lifespan_refuses_to_start_without_credential():
    app = create_app(SatstreamConfig(api_key=None), client=StubClient())
    with pytest.raises(StartupConfigError):
        with TestClient(app):
            pass


def test_lifespan_closes_client_on_shutdown():
    stub = StubClient()
    app = create_app(SatstreamConfig(api_key="test-key"), client=stub)
    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
    assert stub.closed is True


def test_tool_call_without_credential_is_service_unavailable():
    client, stub = _client(api_key=None)
    resp = client.get("/tools/status_get")
    assert resp.status_code == 503
    assert resp.json()["code"] == "startup_config_error"
    assert stub.calls == []
