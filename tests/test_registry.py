"""Tool Registry Tests."""

import logging

import pytest

from toolhub.core.errors import DuplicateRegistrationError, ErrorCode, ToolError
from toolhub.core.tool_registry import EnvelopeStyle, ToolRegistry, create_default_registry
from toolhub.tools.base_tool import Tool

from conftest import FakeCalcTool, FakeWeatherTool, FailingTool


def test_register_and_retrieve_tool(calc_tool):
    """Test tool registration and retrieval."""
    registry = ToolRegistry()
    registry.register("calc", calc_tool)

    assert registry.get("calc") is calc_tool
    assert "calc" in registry
    assert len(registry) == 1
    assert registry.get("missing") is None


def test_duplicate_registration_raises_and_keeps_first():
    """A second binding under the same name fails and the first survives."""
    registry = ToolRegistry()
    first, second = FakeCalcTool(), FakeCalcTool()
    registry.register("calc", first)

    with pytest.raises(DuplicateRegistrationError) as exc_info:
        registry.register("calc", second)

    assert exc_info.value.tool_name == "calc"
    assert exc_info.value.code is ErrorCode.INVALID_STATE
    assert isinstance(exc_info.value, ToolError)
    assert registry.get("calc") is first
    assert len(registry) == 1


def test_declarations_follow_registration_order(registry):
    declarations = registry.get_declarations()

    assert len(declarations) == 3
    assert [next(iter(record)) for record in declarations] == ["calc", "functionDeclarations", "broken"]


def test_weather_uses_function_declarations_envelope(registry, weather_tool):
    declarations = registry.get_declarations()

    assert declarations[1] == {"functionDeclarations": weather_tool.get_declaration()}
    assert "weather" not in declarations[1]


def test_keyed_envelope_uses_registry_name(calc_tool):
    registry = ToolRegistry()
    registry.register("adder", calc_tool)

    assert registry.get_declarations() == [{"adder": calc_tool.get_declaration()}]


def test_declarations_are_idempotent(registry):
    assert registry.get_declarations() == registry.get_declarations()


def test_declarations_do_not_execute_tools(registry, calc_tool, weather_tool):
    registry.get_declarations()

    assert calc_tool.calls == []
    assert weather_tool.calls == []


def test_envelope_style_accepts_string_value():
    registry = ToolRegistry()
    registry.register("weather", FakeWeatherTool(), "functionDeclarations")

    assert list(registry.get_declarations()[0]) == ["functionDeclarations"]


def test_empty_registry_has_no_declarations():
    assert ToolRegistry().get_declarations() == []


def test_fake_tools_satisfy_tool_protocol():
    assert isinstance(FakeCalcTool(), Tool)
    assert isinstance(FailingTool(), Tool)


def test_default_registry_contents():
    registry = create_default_registry()

    assert registry.names() == ["weather", "emailSender", "calculator"]
    declarations = registry.get_declarations()
    assert declarations[0]["functionDeclarations"]["name"] == "get_weather_on_date"
    assert declarations[1]["emailSender"]["name"] == "emailSender"
    assert declarations[2]["calculator"]["parameters"]["required"] == ["operation", "a"]


def test_registration_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="toolhub")

    ToolRegistry().register("calc", FakeCalcTool())

    records = [r for r in caplog.records if r.name == "toolhub" and r.levelno == logging.INFO]
    assert [r.getMessage() for r in records] == ["Tool calc registered successfully"]


def test_bare_registry_does_not_infer_envelope_from_name():
    registry = ToolRegistry()
    registry.register("weather", FakeWeatherTool())

    assert list(registry.get_declarations()[0]) == ["weather"]
