# Routes a single function call to its tool and wraps the outcome in a response envelope.
# Version 0.1.0

from typing import Any, Dict, Mapping, Optional, Union
from toolhub.core.errors import UnknownToolError, failure_message
from toolhub.core.tool_registry import ToolRegistry
from toolhub.models.common import FunctionCall, ToolResponse
from toolhub.tools.base_tool import Tool
from toolhub.utils.logger import console

# Call names imposed by the model-calling API that differ from registry names.
DEFAULT_ALIASES: Dict[str, str] = {
    "get_weather_on_date": "weather",
}


class ToolDispatcher:
    """
    Resolves calls against a ToolRegistry and executes them.

    handle() never raises for a failed call: unknown tools and tool failures
    are returned as an error envelope carrying the call's id. There is no retry
    and no timeout at this layer; each tool enforces its own.
    """
    def __init__(self, registry: ToolRegistry, aliases: Optional[Mapping[str, str]] = None):
        self.registry = registry
        self.aliases: Dict[str, str] = dict(DEFAULT_ALIASES if aliases is None else aliases)

    def resolve(self, name: str) -> Tool:
        """
        Returns the tool for a call name. The alias table is checked first.

        Raises:
            UnknownToolError: if neither an alias nor a registration matches.
        """
        key = self.aliases.get(name, name)
        tool = self.registry.get(key)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    async def handle(self, call: Union[FunctionCall, Dict[str, Any]]) -> ToolResponse:
        if not isinstance(call, FunctionCall):
            call = FunctionCall.model_validate(call)

        console.info(f"Handling tool call: {call.name}", {"args": call.args, "id": call.id})
        try:
            tool = self.resolve(call.name)
            result = await tool.execute(call.args)
        except Exception as e:
            console.error(f"Tool execution failed: {call.name}", e)
            return ToolResponse.failure(call.id, failure_message(e))

        console.info(f"Tool call completed: {call.name}", {"id": call.id})
        return ToolResponse.success(call.id, result)
