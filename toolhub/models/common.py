# The module is to define the common models exchanged with the model-calling layer.
# Date: 2026-10-16
# Version: 0.1.0


from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, Dict, List, Optional


class ToolDeclaration(BaseModel):
    """
    Describes a tool to the upstream model.
    Attributes:
        name (Optional[str]): The name the model uses to call the tool.
        description (str): What the tool does, in plain language.
        parameters (dict): JSON-schema object with 'type', 'properties' and 'required'.
    """
    name: Optional[str] = Field(default=None, description="The name the model uses to call the tool.")
    description: str = Field(..., description="What the tool does.")
    parameters: Dict[str, Any] = Field(..., description="JSON-schema object describing the arguments.")


class FunctionCall(BaseModel):
    """
    A single invocation request issued by the model.
    Attributes:
        name (str): The called tool name, or one of its aliases.
        args (dict): Untyped arguments; each tool validates its own.
        id (str): Correlation id echoed back in the response.
    """
    name: str = Field(..., description="The called tool name or alias.")
    args: Dict[str, Any] = Field(default_factory=dict, description="The arguments for the tool.")
    id: str = Field(..., description="Correlation id echoed back in the response.")

    @field_validator("args", mode="before")
    @classmethod
    def _null_args_as_empty(cls, value: Any) -> Any:
        # Models send "args": null for tools without parameters.
        return {} if value is None else value


class ResponsePayload(BaseModel):
    """Outcome of one call. Exactly one of 'output' or 'error' is set."""
    output: Any = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "ResponsePayload":
        if len({"output", "error"} & self.model_fields_set) != 1:
            raise ValueError("exactly one of 'output' or 'error' must be set")
        return self


class FunctionResponse(BaseModel):
    response: ResponsePayload
    id: str


class ToolResponse(BaseModel):
    """
    The response envelope returned for every call, successful or not.
    Serialises to {"functionResponses": [{"response": {...}, "id": ...}]}.
    """
    model_config = ConfigDict(populate_by_name=True)

    function_responses: List[FunctionResponse] = Field(..., alias="functionResponses")

    @classmethod
    def success(cls, call_id: str, value: Any) -> "ToolResponse":
        return cls(function_responses=[
            FunctionResponse(response=ResponsePayload(output=value), id=call_id)
        ])

    @classmethod
    def failure(cls, call_id: str, message: str) -> "ToolResponse":
        return cls(function_responses=[
            FunctionResponse(response=ResponsePayload(error=message), id=call_id)
        ])

    @property
    def id(self) -> str:
        return self.function_responses[0].id

    @property
    def ok(self) -> bool:
        return "error" not in self.function_responses[0].response.model_fields_set

    def to_wire(self) -> Dict[str, Any]:
        """Returns the plain dict shape sent back to the model."""
        return self.model_dump(by_alias=True, exclude_unset=True)
