"""Pytest fixtures.

Fake tools are plain objects with get_declaration/execute, no base class.
"""

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from toolhub.core.dispatcher import ToolDispatcher
from toolhub.core.tool_registry import EnvelopeStyle, ToolRegistry
from toolhub.main import create_app


class FakeCalcTool:
    """Returns "4" for {op: "add", a: 2, b: 2}."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []

    def get_declaration(self) -> Dict[str, Any]:
        return {
            "name": "calc",
            "description": "Adds two numbers.",
            "parameters": {
                "type": "object",
                "properties": {
                    "op": {"type": "string", "description": "Operation"},
                    "a": {"type": "number", "description": "First operand"},
                    "b": {"type": "number", "description": "Second operand"},
                },
                "required": ["op", "a", "b"],
            },
        }

    async def execute(self, args: Dict[str, Any]) -> str:
        self.calls.append(args)
        if args.get("op") != "add":
            raise ValueError(f"Unsupported op: {args.get('op')}")
        return str(args["a"] + args["b"])


class FakeWeatherTool:
    def __init__(self):
        self.calls: List[Dict[str, Any]] = []

    def get_declaration(self) -> Dict[str, Any]:
        return {
            "name": "get_weather_on_date",
            "description": "Weather for a location.",
            "parameters": {
                "type": "object",
                "properties": {"location": {"type": "string", "description": "City"}},
                "required": ["location"],
            },
        }

    async def execute(self, args: Dict[str, Any]) -> str:
        self.calls.append(args)
        return f"Sunny in {args['location']}"


class FailingTool:
    def get_declaration(self) -> Dict[str, Any]:
        return {"description": "Always fails.", "parameters": {"type": "object", "properties": {}, "required": []}}

    async def execute(self, args: Dict[str, Any]) -> Any:
        raise ConnectionError("upstream service unreachable")


@pytest.fixture
def calc_tool():
    return FakeCalcTool()


@pytest.fixture
def weather_tool():
    return FakeWeatherTool()


@pytest.fixture
def registry(calc_tool, weather_tool):
    """Registry with fake tools, registered the way the default set is."""
    registry = ToolRegistry()
    registry.register("calc", calc_tool)
    registry.register("weather", weather_tool, EnvelopeStyle.FUNCTION_DECLARATIONS)
    registry.register("broken", FailingTool())
    return registry


@pytest.fixture
def dispatcher(registry):
    return ToolDispatcher(registry)


@pytest.fixture
def client(registry):
    """FastAPI test client over the fake registry."""
    return TestClient(create_app(registry))
