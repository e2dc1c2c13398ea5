"""JSON-RPC 2.0 response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..constants import ServerConfig

# Opaque correlation key, echoed verbatim
RequestId = Any


class JsonRpcError(BaseModel):
    """JSON-RPC 2.0 error object."""

    model_config = ConfigDict(extra="forbid")

    code: int = Field(..., description="Numeric protocol error code")
    message: str = Field(..., description="Short error description")
    data: Any | None = Field(None, description="Optional error details")


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response: exactly one of ``result``/``error``."""

    model_config = ConfigDict(extra="forbid")

    jsonrpc: str = ServerConfig.JSONRPC_VERSION
    id: RequestId = None
    result: Any | None = None
    error: JsonRpcError | None = None

    @classmethod
    def success(cls, request_id: RequestId, result: Any) -> "JsonRpcResponse":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(
        cls, request_id: RequestId, code: int, message: str, data: Any | None = None
    ) -> "JsonRpcResponse":
        return cls(id=request_id, error=JsonRpcError(code=code, message=message, data=data))

    def to_dict(self) -> dict[str, Any]:
        """Wire form: omits the unused member and an absent ``error.data``."""
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(mode="json", exclude_none=True)
        else:
            payload["result"] = self.result
        return payload
