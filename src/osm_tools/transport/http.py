"""
HTTP transport: FastAPI routes for the JSON-RPC dispatcher.

``POST /mcp`` carries one JSON-RPC request per HTTP request; ``GET /health``
is a static liveness probe. Errors outside the JSON-RPC contract are plain
``{"error": ...}`` bodies.
"""

import json
import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..constants import ErrorMessages, JsonRpcErrorCode, ServerConfig
from ..dispatcher import JsonRpcDispatcher
from ..models.jsonrpc import JsonRpcResponse

logger = logging.getLogger(__name__)

_HTTP_ERROR_MESSAGES = {
    status.HTTP_404_NOT_FOUND: ErrorMessages.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorMessages.METHOD_NOT_ALLOWED,
}


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (404/405) as ``{"error": message}``."""
    message = _HTTP_ERROR_MESSAGES.get(exc.status_code, str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


def create_app(
    dispatcher: JsonRpcDispatcher,
    on_shutdown: Callable[[], Awaitable[None]] | None = None,
) -> FastAPI:
    """Create the FastAPI application serving ``/mcp`` and ``/health``.

    Args:
        dispatcher: JSON-RPC dispatcher handling ``/mcp`` bodies
        on_shutdown: Optional coroutine run when the app shuts down
            (closes the upstream HTTP client)

    Returns:
        FastAPI: Configured application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "%s ready: %s (JSON-RPC), %s (health)",
            ServerConfig.NAME,
            ServerConfig.MCP_PATH,
            ServerConfig.HEALTH_PATH,
        )
        yield
        logger.info("Shutting down %s", ServerConfig.NAME)
        if on_shutdown is not None:
            await on_shutdown()

    app = FastAPI(
        title=ServerConfig.NAME,
        version=ServerConfig.VERSION,
        description=ServerConfig.DESCRIPTION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)

    @app.post(ServerConfig.MCP_PATH)
    async def mcp_endpoint(request: Request) -> JSONResponse:
        """Decode one JSON-RPC request and return the dispatcher's response."""
        body = await request.body()
        try:
            payload = json.loads(body)
        except ValueError as e:
            logger.info("Rejected unparseable JSON-RPC body: %s", e)
            response = JsonRpcResponse.failure(
                None, JsonRpcErrorCode.PARSE_ERROR, ErrorMessages.PARSE_ERROR.format(e)
            )
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.to_dict())

        result = await dispatcher.handle(payload)
        error = result.get("error")
        if error is not None and error["code"] == JsonRpcErrorCode.INVALID_REQUEST:
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result)
        return JSONResponse(status_code=status.HTTP_200_OK, content=result)

    @app.get(ServerConfig.HEALTH_PATH)
    async def health() -> dict[str, str]:
        return {"status": "ok", "service": ServerConfig.NAME}

    return app
