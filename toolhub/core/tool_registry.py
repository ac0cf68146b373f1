# Owns the name -> tool mapping and renders it for the upstream model.
# Version 0.1.0

from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional
from toolhub.core.errors import DuplicateRegistrationError
from toolhub.tools.base_tool import Tool
from toolhub.tools.calculator_tool import CalculatorTool
from toolhub.tools.email_sender_tool import EmailSenderTool
from toolhub.tools.weather_tool import WeatherTool
from toolhub.utils.logger import console


class EnvelopeStyle(str, Enum):
    """How a tool's declaration record is wrapped in get_declarations()."""
    KEYED = "keyed"
    FUNCTION_DECLARATIONS = "functionDeclarations"


class _Registration(NamedTuple):
    tool: Tool
    envelope_style: EnvelopeStyle


class ToolRegistry:
    """
    An explicitly constructed registry of tools.

    Tools are registered once during start-up, before any call is dispatched,
    and are only read afterwards. Registration order is preserved.
    """
    def __init__(self):
        self._tools: Dict[str, _Registration] = {}

    def register(self, name: str, tool: Tool,
                 envelope_style: EnvelopeStyle = EnvelopeStyle.KEYED) -> None:
        """
        Binds a tool under a name.

        The envelope style is not inferred from the name: a tool registered as
        'weather' needs EnvelopeStyle.FUNCTION_DECLARATIONS passed explicitly to
        keep the {"functionDeclarations": ...} record, as create_default_registry does.

        Raises:
            DuplicateRegistrationError: if the name is already bound. The
                existing binding is left untouched.
        """
        if name in self._tools:
            raise DuplicateRegistrationError(name)
        self._tools[name] = _Registration(tool, EnvelopeStyle(envelope_style))
        console.info(f"Tool {name} registered successfully")

    def get(self, name: str) -> Optional[Tool]:
        registration = self._tools.get(name)
        return registration.tool if registration else None

    def names(self) -> List[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def get_declarations(self) -> List[Dict[str, Any]]:
        """
        Returns one declaration record per registered tool, in registration order.
        Declarations are regenerated on every call.
        """
        declarations = []
        for name, (tool, envelope_style) in self._tools.items():
            declaration = tool.get_declaration()
            if envelope_style is EnvelopeStyle.FUNCTION_DECLARATIONS:
                declarations.append({"functionDeclarations": declaration})
            else:
                declarations.append({name: declaration})
        return declarations


def create_default_registry() -> ToolRegistry:
    """Builds a registry holding the bundled tools."""
    registry = ToolRegistry()
    registry.register("weather", WeatherTool(), EnvelopeStyle.FUNCTION_DECLARATIONS)
    registry.register("emailSender", EmailSenderTool())
    registry.register("calculator", CalculatorTool())
    console.success(f"Tool registry ready with {len(registry)} tools: {registry.names()}")
    return registry
