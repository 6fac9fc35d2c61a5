import json

from fastapi.testclient import TestClient

from satstream_mcp import MCP_SERVER_NAME
from satstream_mcp.config import SatstreamConfig
from satstream_mcp.errors import UpstreamHttpError
from satstream_mcp.satstream_api import ProxyFailure, ProxySuccess
from satstream_mcp.server import create_app
from satstream_mcp.tools import DEFAULT_CATALOGUE


class StubClient:
    def __init__(self, result=None):
        self.result = result if result is not None else ProxySuccess({"height": 840000})
        self.calls = []

    async def invoke(self, descriptor, args, credential):
        self.calls.append((descriptor.name, dict(args)))
        return self.result

    async def aclose(self):
        return None


def _client(stub=None):
    stub = stub or StubClient()
    return TestClient(create_app(SatstreamConfig(api_key="test-key"), client=stub)), stub


def test_initialize_echoes_protocol_version():
    client, _ = _client()
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {"protocolVersion": "2025-06-18"}},
    )
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert result["protocolVersion"] == "2025-06-18"
    assert result["serverInfo"]["name"] == MCP_SERVER_NAME
    assert result["capabilities"]["tools"] == {"listChanged": False}


def test_initialize_requires_protocol_version():
    client, _ = _client()
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}})
    assert resp.json()["error"]["code"] == -32602


def test_tools_list():
    client, _ = _client()
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 2, "method": "tools/list"})
    tools = resp.json()["result"]["tools"]
    assert len(tools) == len(DEFAULT_CATALOGUE)
    assert all("inputSchema" in tool for tool in tools)


def test_tools_call_success_has_structured_content():
    client, stub = _client()
    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 3,
            "method": "tools/call",
            "params": {"name": "block_get", "arguments": {"identifier": "840000"}},
        },
    )
    body = resp.json()
    assert body["id"] == 3
    result = body["result"]
    assert result["structuredContent"] == {"height": 840000}
    assert json.loads(result["content"][0]["text"]) == {"height": 840000}
    assert "isError" not in result
    assert stub.calls == [("block_get", {"identifier": "840000"})]


def test_legacy_call_tool_shape():
    client, stub = _client()
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 4, "method": "call_tool", "params": {"tool": "status_get", "params": {}}},
    )
    assert resp.json()["result"]["structuredContent"] == {"height": 840000}
    assert stub.calls == [("status_get", {})]


def test_tools_call_upstream_error_is_flagged():
    stub = StubClient(ProxyFailure(UpstreamHttpError(404, {"message": "not found"})))
    client, _ = _client(stub)
    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 5,
            "method": "tools/call",
            "params": {"name": "address_get", "arguments": {"address": "bc1qxyz"}},
        },
    )
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert result["isError"] is True
    text = json.loads(result["content"][0]["text"])
    assert text["status"] == 404
    assert text["data"] == {"message": "not found"}


def test_tools_call_unknown_tool_is_error_result():
    client, stub = _client()
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 6, "method": "tools/call", "params": {"name": "nope", "arguments": {}}},
    )
    result = resp.json()["result"]
    assert result["isError"] is True
    assert result["structuredContent"]["code"] == "unknown_tool"
    assert stub.calls == []


def test_tools_call_missing_name():
    client, _ = _client()
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 7, "method": "tools/call", "params": {}})
    assert resp.json()["error"]["code"] == -32602


def test_tools_call_arguments_must_be_object():
    client, _ = _client()
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 8, "method": "tools/call", "params": {"name": "status_get", "arguments": [1]}},
    )
    assert resp.json()["error"]["code"] == -32602


def test_parse_error():
    client, _ = _client()
    resp = client.post("/mcp", content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == -32700


def test_non_object_request():
    client, _ = _client()
    resp = client.post("/mcp", json=[1, 2, 3])
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == -32600


def test_params_must_be_object():
    client, _ = _client()
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 9, "method": "tools/list", "params": "x"})
    assert resp.json()["error"]["code"] == -32602


def test_initialized_notification_has_no_body():
    client, _ = _client()
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert resp.status_code == 204
    assert resp.content == b""


def test_unknown_method():
    client, _ = _client()
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 10, "method": "resources/list"})
    assert resp.json()["error"] == {"code": -32601, "message": "Method not found"}


def test_cancelled_notification_has_no_body():
    client, stub = _client()
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "method": "notifications/cancelled", "params": {"requestId": 3}},
    )
    assert resp.status_code == 204
    assert resp.content == b""
    assert stub.calls == []


def test_missing_method_is_invalid_request():
    client, _ = _client()
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 11})
    assert resp.json()["error"]["code"] == -32600
    assert resp.json()["id"] == 11
