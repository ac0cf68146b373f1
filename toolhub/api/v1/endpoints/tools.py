# This module provides API endpoints for listing and calling tools.
# Date: 2026-10-16
# Version: 0.1.0

from fastapi import APIRouter, Depends, Request
from typing import Any, Dict
from toolhub.core.dispatcher import ToolDispatcher
from toolhub.core.tool_registry import ToolRegistry
from toolhub.models.api_models import DeclarationsResponse
from toolhub.models.common import FunctionCall

router = APIRouter()


def get_registry(request: Request) -> ToolRegistry:
    return request.app.state.registry


def get_dispatcher(request: Request) -> ToolDispatcher:
    return request.app.state.dispatcher


@router.get("/declarations",
            response_model=DeclarationsResponse,
            summary="List Tool Declarations")
def list_declarations(registry: ToolRegistry = Depends(get_registry)):
    """
    Returns the declarations of all registered tools, in the shape the
    model-calling API expects.
    """
    return DeclarationsResponse(declarations=registry.get_declarations())


@router.post("/call", summary="Call a Tool")
async def call_tool(call: FunctionCall,
                    dispatcher: ToolDispatcher = Depends(get_dispatcher)) -> Dict[str, Any]:
    """
    Executes one function call. Unknown tools and tool failures are reported
    in the 'error' field of the envelope, with HTTP 200.
    """
    response = await dispatcher.handle(call)
    return response.to_wire()
