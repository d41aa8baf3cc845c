import pytest
from fastapi.testclient import TestClient

from api.main import create_app


@pytest.fixture
def http(server):
    return TestClient(create_app(server))


@pytest.mark.unit
def test_list_tools_route(http):
    response = http.get("/mcp/tools")

    assert response.status_code == 200
    tools = response.json()
    assert len(tools) == 23
    assert tools[0]["name"] == "search_resources"
    assert tools[0]["inputSchema"]["required"] == []


@pytest.mark.unit
def test_call_tool_route(http, upstream):
    upstream.payload = {"data": [{"task_id": "a", "status": "COMPLETED"}]}

    response = http.post("/mcp/call/list_mystic_tasks", json={})

    assert response.status_code == 200
    assert response.json() == {
        "content": [{"type": "text", "text": "**All Mystic Tasks**\n\n1. **a** - Status: COMPLETED"}]
    }


@pytest.mark.unit
def test_call_unknown_tool_route_is_not_an_http_error(http):
    response = http.post("/mcp/call/missing", json={})

    assert response.status_code == 200
    assert response.json()["content"][0]["text"] == "Error: Unknown tool: missing"
