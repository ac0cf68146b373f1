"""API Endpoint Tests."""

from fastapi.testclient import TestClient

from toolhub.core.tool_registry import ToolRegistry
from toolhub.main import create_app

from conftest import FakeCalcTool


def test_root_endpoint(client):
    """Test root endpoint reports the service is alive."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Tool Hub is alive and running!", "tools": 3}


def test_declarations_endpoint(client, registry):
    response = client.get("/v1/tools/declarations")

    assert response.status_code == 200
    assert response.json() == {"declarations": registry.get_declarations()}


def test_call_endpoint_success(client):
    response = client.post("/v1/tools/call", json={"name": "calc", "args": {"op": "add", "a": 2, "b": 2}, "id": "x1"})

    assert response.status_code == 200
    assert response.json() == {"functionResponses": [{"response": {"output": "4"}, "id": "x1"}]}


def test_call_endpoint_unknown_tool_is_not_an_http_error(client):
    response = client.post("/v1/tools/call", json={"name": "doesNotExist", "args": {}, "id": "x2"})

    assert response.status_code == 200
    assert response.json() == {
        "functionResponses": [{"response": {"error": "Unknown tool: doesNotExist"}, "id": "x2"}]
    }


def test_call_endpoint_alias(client, weather_tool):
    response = client.post("/v1/tools/call", json={"name": "get_weather_on_date", "args": {"location": "Lima"}, "id": "w"})

    assert response.json()["functionResponses"][0]["response"] == {"output": "Sunny in Lima"}
    assert weather_tool.calls == [{"location": "Lima"}]


def test_call_endpoint_validation(client):
    """A body that is not a function call is rejected."""
    response = client.post("/v1/tools/call", json={"args": {}})
    assert response.status_code == 422


def test_custom_aliases_are_wired():
    registry = ToolRegistry()
    registry.register("calc", FakeCalcTool())
    client = TestClient(create_app(registry, aliases={"sum": "calc"}))

    response = client.post("/v1/tools/call", json={"name": "sum", "args": {"op": "add", "a": 1, "b": 2}, "id": "s"})

    assert response.json() == {"functionResponses": [{"response": {"output": "3"}, "id": "s"}]}
