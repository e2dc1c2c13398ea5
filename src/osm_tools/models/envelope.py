"""
Uniform response envelope returned by every tool.

``{ok: true, data, meta}`` on success, ``{ok: false, error, meta}`` on failure.
"""

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_serializer


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


class Pagination(BaseModel):
    """Pagination cursor. No upstream in use is paginated."""

    model_config = ConfigDict(extra="forbid")

    next_cursor: str | None = Field(None, description="Cursor for the next page")


class ResponseMeta(BaseModel):
    """Metadata attached to every envelope."""

    model_config = ConfigDict(extra="forbid")

    source: str | None = Field(None, description="Upstream that answered")
    retrieved_at: str = Field(default_factory=utc_timestamp, description="Completion time")
    pagination: Pagination | None = Field(None, description="Pagination state")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal notices, in order")

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler):
        data = handler(self)
        for key in ("source", "pagination"):
            if data.get(key) is None:
                data.pop(key, None)
        return data


class ErrorDetail(BaseModel):
    """Typed domain error."""

    model_config = ConfigDict(extra="forbid")

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class SuccessEnvelope(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ok: Literal[True] = True
    data: Any = Field(..., description="Tool output")
    meta: ResponseMeta


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ok: Literal[False] = False
    error: ErrorDetail
    meta: ResponseMeta


Envelope = SuccessEnvelope | ErrorEnvelope


def success(data: Any, source: str, warnings: list[str] | None = None) -> SuccessEnvelope:
    """Build a success envelope with source and an empty pagination cursor."""
    return SuccessEnvelope(
        data=data,
        meta=ResponseMeta(
            source=source,
            pagination=Pagination(next_cursor=None),
            warnings=list(warnings or []),
        ),
    )


def failure(
    code: str,
    message: str,
    source: str | None = None,
    warnings: list[str] | None = None,
) -> ErrorEnvelope:
    """Build an error envelope. Pagination is never set on failures."""
    return ErrorEnvelope(
        error=ErrorDetail(code=code, message=message),
        meta=ResponseMeta(source=source, warnings=list(warnings or [])),
    )


def envelope_payload(envelope: Envelope) -> dict[str, Any]:
    """JSON-ready dict for an envelope."""
    return envelope.model_dump(mode="json")
