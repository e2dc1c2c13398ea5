"""
JSON-RPC dispatcher for osm-tools.

Routes ``initialize``, ``tools/list`` and ``tools/call``. Protocol problems
(bad envelope, unknown method or tool, crashes) become JSON-RPC errors;
everything that happens inside a known tool comes back as a normal result
whose payload is a response envelope.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from .constants import ErrorCode, ErrorMessages, JsonRpcErrorCode, ServerConfig
from .models.envelope import Envelope, envelope_payload, failure
from .models.jsonrpc import JsonRpcResponse
from .tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def format_validation_error(error: ValidationError) -> str:
    """List every violated field path with its reason."""
    parts = []
    for item in error.errors():
        path = ".".join(str(part) for part in item["loc"])
        parts.append(f"{path}: {item['msg']}" if path else item["msg"])
    return ErrorMessages.INVALID_INPUT.format(", ".join(parts))


def tool_result(envelope: Envelope) -> dict[str, Any]:
    """MCP tool result wrapping an envelope; ``isError`` mirrors ``not ok``."""
    return {
        "content": [
            {"type": "text", "text": json.dumps(envelope_payload(envelope), indent=2)},
        ],
        "isError": not envelope.ok,
    }


class JsonRpcDispatcher:
    """Single-request JSON-RPC state machine over a tool registry."""

    def __init__(
        self,
        registry: ToolRegistry,
        server_name: str = ServerConfig.NAME,
        server_version: str = ServerConfig.VERSION,
    ):
        self._registry = registry
        self._server_name = server_name
        self._server_version = server_version

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def handle(self, request: Any) -> dict[str, Any]:
        """Resolve one decoded JSON-RPC request to exactly one response dict."""
        return (await self._handle(request)).to_dict()

    async def _handle(self, request: Any) -> JsonRpcResponse:
        if not isinstance(request, dict):
            return JsonRpcResponse.failure(
                None, JsonRpcErrorCode.INVALID_REQUEST, ErrorMessages.INVALID_JSONRPC
            )
        request_id = request.get("id")
        if request.get("jsonrpc") != ServerConfig.JSONRPC_VERSION:
            return JsonRpcResponse.failure(
                request_id, JsonRpcErrorCode.INVALID_REQUEST, ErrorMessages.INVALID_JSONRPC
            )
        method = request.get("method")
        if not isinstance(method, str):
            return JsonRpcResponse.failure(
                request_id, JsonRpcErrorCode.INVALID_REQUEST, ErrorMessages.INVALID_METHOD
            )

        try:
            if method == "initialize":
                return JsonRpcResponse.success(request_id, self._initialize())
            if method == "tools/list":
                return JsonRpcResponse.success(request_id, self._list_tools())
            if method == "tools/call":
                return await self._call_tool(request_id, request.get("params"))
            return JsonRpcResponse.failure(
                request_id,
                JsonRpcErrorCode.METHOD_NOT_FOUND,
                ErrorMessages.METHOD_NOT_FOUND.format(method),
            )
        except Exception as e:
            logger.exception("Dispatch of %s failed", method)
            return JsonRpcResponse.failure(
                request_id, JsonRpcErrorCode.INTERNAL_ERROR, ErrorMessages.INTERNAL.format(e)
            )

    def _initialize(self) -> dict[str, Any]:
        return {
            "protocolVersion": ServerConfig.PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": self._server_name, "version": self._server_version},
        }

    def _list_tools(self) -> dict[str, Any]:
        return {
            "tools": [
                {
                    "name": tool.name,
                    "description": tool.description,
                    "inputSchema": tool.input_schema(),
                }
                for tool in self._registry.list()
            ]
        }

    async def _call_tool(self, request_id: Any, params: Any) -> JsonRpcResponse:
        params = params if isinstance(params, dict) else {}
        name = params.get("name")
        tool = self._registry.find(name) if isinstance(name, str) else None
        if tool is None:
            return JsonRpcResponse.failure(
                request_id,
                JsonRpcErrorCode.METHOD_NOT_FOUND,
                ErrorMessages.UNKNOWN_TOOL.format(name),
            )

        try:
            inputs = tool.validate(params.get("arguments"))
        except ValidationError as e:
            logger.info("Rejected %s arguments: %d error(s)", tool.name, e.error_count())
            envelope: Envelope = failure(ErrorCode.VALIDATION_ERROR, format_validation_error(e))
            return JsonRpcResponse.success(request_id, tool_result(envelope))

        try:
            envelope = await tool.handler(inputs)
        except Exception as e:
            logger.exception("Tool %s raised", tool.name)
            envelope = failure(ErrorCode.INTERNAL_ERROR, str(e) or type(e).__name__)
        return JsonRpcResponse.success(request_id, tool_result(envelope))
