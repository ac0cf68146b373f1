# The module is to define the tool contract and the base class for the bundled tools.
# Date: 2026-10-16
# Version: 0.1.0

from abc import ABC, abstractmethod
from pydantic import BaseModel, ValidationError
from pydantic.json_schema import GenerateJsonSchema
from typing import Any, Dict, Protocol, Type, runtime_checkable
from toolhub.core.errors import ToolExecutionError
from toolhub.models.common import ToolDeclaration


@runtime_checkable
class Tool(Protocol):
    """
    The capability the registry stores and the dispatcher calls.
    Any object with these two methods can be registered.
    """

    def get_declaration(self) -> Dict[str, Any]:
        ...

    async def execute(self, args: Dict[str, Any]) -> Any:
        ...


class _DeclarationJsonSchema(GenerateJsonSchema):
    """
    Renders Optional fields as their inner type. Function-calling APIs accept
    neither 'anyOf' nor 'type: null', and optional arguments are simply left
    out of 'required'.
    """

    def nullable_schema(self, schema):
        return self.generate_inner(schema["schema"])

    def default_schema(self, schema):
        json_schema = super().default_schema(schema)
        if "default" in json_schema and json_schema["default"] is None:
            del json_schema["default"]
        return json_schema


def _strip_titles(schema: Any) -> Any:
    """Drops pydantic's generated 'title' keys, which the model-calling API rejects."""
    if isinstance(schema, dict):
        return {
            key: _strip_titles(value)
            for key, value in schema.items()
            if not (key == "title" and isinstance(value, str))
        }
    if isinstance(schema, list):
        return [_strip_titles(item) for item in schema]
    return schema


def _summarize_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


class BaseTool(ABC):
    """
    Abstract Base Class for the bundled tools.

    Attributes:
        name (str): The name the model uses to call the tool.
        description (str): A brief description of what the tool does.
        args_schema (Type[BaseModel]): A Pydantic model defining the arguments
            that the tool accepts, which will be validated before execution.
    """
    name: str
    description: str
    args_schema: Type[BaseModel]

    @abstractmethod
    async def run(self, **kwargs) -> Any:
        """
        The core logic of the tool. This method must be implemented by all subclasses.

        Args:
            **kwargs: The arguments for the tool, validated against args_schema.

        Returns:
            A value that can be sent back to the model, usually a string.
        """
        pass

    async def execute(self, args: Dict[str, Any]) -> Any:
        """
        Validates the raw call arguments against args_schema and runs the tool.
        Invalid arguments raise ToolExecutionError with a short summary so the
        model can correct its call.
        """
        try:
            validated = self.args_schema.model_validate(args or {})
        except ValidationError as e:
            raise ToolExecutionError(
                f"Invalid arguments for {self.name}: {_summarize_validation_error(e)}"
            ) from e
        return await self.run(**validated.model_dump())

    def get_declaration(self) -> Dict[str, Any]:
        """
        Returns the tool's declaration in the function-calling format:
        name, description and a JSON-schema 'parameters' object.
        """
        parameters = _strip_titles(self.args_schema.model_json_schema(schema_generator=_DeclarationJsonSchema))
        parameters.setdefault("required", [])
        return ToolDeclaration(
            name=self.name,
            description=self.description,
            parameters=parameters,
        ).model_dump(exclude_none=True)
