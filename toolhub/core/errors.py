# The module is to define the error types raised while registering and dispatching tools.
# Date: 2026-10-16
# Version: 0.1.0

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Machine-readable classes of tool errors."""
    INVALID_STATE = "INVALID_STATE"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    TOOL_EXECUTION_FAILED = "TOOL_EXECUTION_FAILED"


class ToolError(Exception):
    """
    Base exception for the tool registry and dispatcher.
    Attributes:
        message (str): Human-readable summary. This is the only text that may
            reach the model through a response envelope.
        code (ErrorCode): The class of failure, for programmatic checks.
    """
    code: ErrorCode = ErrorCode.TOOL_EXECUTION_FAILED

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class DuplicateRegistrationError(ToolError):
    """A second tool was bound to a name that is already registered."""
    code = ErrorCode.INVALID_STATE

    def __init__(self, tool_name: str):
        super().__init__(f"Tool {tool_name} is already registered")
        self.tool_name = tool_name


class UnknownToolError(ToolError):
    """A call named a tool that is neither registered nor aliased."""
    code = ErrorCode.INVALID_PARAMETER

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ToolExecutionError(ToolError):
    """Raised by tools with a summarised, model-facing failure message."""
    code = ErrorCode.TOOL_EXECUTION_FAILED


def failure_message(error: BaseException) -> str:
    """Returns the text of an error that is safe to place in a response envelope."""
    if isinstance(error, ToolError):
        return error.message
    return str(error) or type(error).__name__
