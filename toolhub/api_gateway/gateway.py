"""
API Gateway for toolhub.

This module builds the FastAPI application that exposes the tool registry
over HTTP, together with request logging and error translation.
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel
from starlette.middleware.base import BaseHTTPMiddleware

from toolhub import __version__
from toolhub.config import Settings, settings as default_settings
from toolhub.tool_registry import Tool, ToolCreate, ToolRegistry
from toolhub.utils.error_handling import ToolhubError, catch_and_log


# Set up logging
logger = logging.getLogger(__name__)


class SystemHealth(BaseModel):
    """Health status reported by the gateway."""
    status: str
    uptime_seconds: float
    tool_count: int


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging requests and responses."""

    async def dispatch(self, request: Request, call_next):
        """
        Handle a request, logging details.

        Args:
            request: The incoming request
            call_next: The next middleware/route handler

        Returns:
            The response
        """
        start_time = time.time()

        logger.info(f"Request: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(f"Error processing request: {e}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal server error"}
            )

        duration_ms = (time.time() - start_time) * 1000
        logger.info(f"Response: {response.status_code} - {duration_ms:.2f}ms")

        # Add timing header
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}ms"

        return response


def get_registry(request: Request) -> ToolRegistry:
    """Dependency returning the registry attached to the running application."""
    return request.app.state.registry


router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Greeting."""
    return "Hello world"


@router.get("/tools", response_model=List[Tool], tags=["tools"])
async def list_tools(
    tag: Optional[str] = None,
    registry: ToolRegistry = Depends(get_registry)
):
    """
    List registered tools.

    Args:
        tag: Only return tools carrying this exact tag

    Returns:
        Matching tools
    """
    return await registry.list(tag)


@router.post("/tools", response_model=Tool, status_code=status.HTTP_201_CREATED, tags=["tools"])
async def create_tool(
    tool_data: ToolCreate,
    registry: ToolRegistry = Depends(get_registry)
):
    """
    Register a new tool.

    Args:
        tool_data: Tool creation data

    Returns:
        The created tool, including its server-assigned id
    """
    return await registry.create(
        title=tool_data.title,
        link=tool_data.link,
        description=tool_data.description,
        tags=tool_data.tags
    )


@router.delete("/tools/{tool_id}", response_model=Dict[str, str], tags=["tools"])
async def remove_tool(
    tool_id: UUID,
    registry: ToolRegistry = Depends(get_registry)
):
    """
    Remove a tool.

    Args:
        tool_id: Tool ID

    Returns:
        Status message
    """
    if not await registry.remove(tool_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tool not found"
        )

    return {"message": "Tool removed successfully"}


@router.get("/health", response_model=SystemHealth)
@catch_and_log(component="api_gateway", raise_toolhub_error=True)
async def get_system_health(
    request: Request,
    registry: ToolRegistry = Depends(get_registry)
):
    """
    Get system health status.

    Returns:
        System health status
    """
    started_at: datetime = request.app.state.started_at
    return SystemHealth(
        status="healthy",
        uptime_seconds=(datetime.now() - started_at).total_seconds(),
        tool_count=await registry.count()
    )


async def toolhub_error_handler(request: Request, exc: ToolhubError):
    """Translate package errors into a JSON 500 response."""
    logger.error(f"{exc.component} error on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message}
    )


def create_app(registry: Optional[ToolRegistry] = None,
               app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the gateway application around a registry.

    Args:
        registry: Registry to serve; a new one is built when omitted
        app_settings: Settings to use instead of the process-wide ones

    Returns:
        The FastAPI application
    """
    app_settings = app_settings or default_settings
    seed = registry is None and app_settings.seed_registry
    registry = registry if registry is not None else ToolRegistry()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if seed:
            await registry.seed_default_tools()
        app.state.started_at = datetime.now()
        logger.info(f"Gateway ready with {await registry.count()} tools")
        yield

    app = FastAPI(
        title="toolhub",
        description="In-memory catalog of tools",
        version=__version__,
        debug=app_settings.debug,
        lifespan=lifespan
    )
    app.state.registry = registry

    app.add_middleware(LoggingMiddleware)
    app.add_exception_handler(ToolhubError, toolhub_error_handler)
    app.include_router(router)

    return app


def run_gateway(app_settings: Optional[Settings] = None):
    """Run the API gateway with Uvicorn."""
    import uvicorn

    app_settings = app_settings or default_settings
    uvicorn.run(
        create_app(app_settings=app_settings),
        host=app_settings.host,
        port=app_settings.port,
        log_level=app_settings.log_level.lower()
    )
