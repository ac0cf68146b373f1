# The module provides a FastAPI application that serves the tool registry over HTTP.
# Date: 2026-10-16
# Version: 0.1.0

from typing import Mapping, Optional
from fastapi import FastAPI, Request
from toolhub.api.v1.api import api_router
from toolhub.core.dispatcher import ToolDispatcher
from toolhub.core.tool_registry import ToolRegistry, create_default_registry
from toolhub.models.api_models import HealthResponse
from toolhub.utils.logger import console


def create_app(registry: Optional[ToolRegistry] = None,
               aliases: Optional[Mapping[str, str]] = None) -> FastAPI:
    """
    Composes the application around an explicitly constructed registry.
    The default tool set is registered when no registry is given; a duplicate
    registration aborts start-up.
    """
    console.rule("toolhub")
    if registry is None:
        registry = create_default_registry()

    app = FastAPI(
        title="Tool Hub",
        version="0.1.0",
        description="Registry and dispatcher for function-calling tools.",
    )
    app.state.registry = registry
    app.state.dispatcher = ToolDispatcher(registry, aliases)

    @app.get("/", summary="Health Check", tags=["Status"], response_model=HealthResponse)
    def read_root(request: Request):
        """Root endpoint to check if the service is alive."""
        console.info("Health check endpoint was hit.")
        return HealthResponse(message="Tool Hub is alive and running!",
                              tools=len(request.app.state.registry))

    # Include the v1 router with a global '/v1' prefix
    app.include_router(api_router, prefix="/v1")
    return app


app = create_app()
