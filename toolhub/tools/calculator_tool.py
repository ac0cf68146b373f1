# The module defines a calculator tool for basic arithmetic.
# Date: 2026-10-16
# Version: 0.1.0

import math
import operator
from pydantic import BaseModel, Field
from typing import Literal, Optional, Type
from .base_tool import BaseTool
from toolhub.core.errors import ToolExecutionError
from toolhub.utils.logger import console

Operation = Literal["add", "subtract", "multiply", "divide", "power", "modulo", "sqrt"]

_BINARY_OPERATIONS = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
    "divide": operator.truediv,
    "power": operator.pow,
    "modulo": operator.mod,
}


class CalculatorInput(BaseModel):
    """
    Input model for the Calculator tool.
    Attributes:
        operation (str): The arithmetic operation to perform.
        a (float): The first operand.
        b (Optional[float]): The second operand, unused by 'sqrt'.
    """
    operation: Operation = Field(..., description="The operation: add, subtract, multiply, divide, power, modulo or sqrt.")
    a: float = Field(..., description="The first operand.")
    b: Optional[float] = Field(default=None, description="The second operand. Not needed for sqrt.")


def _format_number(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


class CalculatorTool(BaseTool):
    """Performs a single arithmetic operation and returns the result as text."""
    name: str = "calculator"
    description: str = "Performs basic arithmetic: add, subtract, multiply, divide, power, modulo and square root."
    args_schema: Type[BaseModel] = CalculatorInput

    async def run(self, operation: str, a: float, b: Optional[float] = None) -> str:
        console.info(f"Executing tool '{self.name}'", {"operation": operation, "a": a, "b": b})

        if operation == "sqrt":
            if a < 0:
                raise ToolExecutionError("Cannot take the square root of a negative number.")
            return _format_number(math.sqrt(a))

        if b is None:
            raise ToolExecutionError(f"Operation '{operation}' requires a second operand 'b'.")
        if operation in ("divide", "modulo") and b == 0:
            raise ToolExecutionError("Division by zero is not allowed.")

        try:
            result = _BINARY_OPERATIONS[operation](a, b)
        except OverflowError as e:
            raise ToolExecutionError(f"Result of {operation} is too large.") from e
        if isinstance(result, complex):
            raise ToolExecutionError(f"Result of {operation} is not a real number.")
        return _format_number(result)
