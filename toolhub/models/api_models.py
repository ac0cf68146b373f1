# The module is to define the API models for the tool endpoints.
# Date: 2026-10-16
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Any, Dict, List

class DeclarationsResponse(BaseModel):
    """
    Defines the response body for the /v1/tools/declarations endpoint.
    Attributes:
        declarations (list): One record per registered tool, in registration order.
    """
    declarations: List[Dict[str, Any]] = Field(..., description="One declaration record per registered tool.")

class HealthResponse(BaseModel):
    """
    Defines the response body for the health check endpoint.
    Attributes:
        message (str): A message indicating the service is alive.
        tools (int): The number of registered tools.
    """
    message: str
    tools: int
