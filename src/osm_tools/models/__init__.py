"""Envelope, tool input/output, upstream and JSON-RPC models for osm-tools."""

from .envelope import (
    Envelope,
    ErrorDetail,
    ErrorEnvelope,
    Pagination,
    ResponseMeta,
    SuccessEnvelope,
    envelope_payload,
    failure,
    success,
)
from .inputs import (
    GeocodeInput,
    PoiSearchInput,
    ReverseGeocodeInput,
    RouteInput,
    SearchArea,
)
from .jsonrpc import JsonRpcError, JsonRpcResponse
from .responses import (
    GeocodeResult,
    PoiResult,
    ReverseGeocodeResult,
    RouteResult,
    RouteStep,
)

__all__ = [
    "Envelope",
    "ErrorDetail",
    "ErrorEnvelope",
    "GeocodeInput",
    "GeocodeResult",
    "JsonRpcError",
    "JsonRpcResponse",
    "Pagination",
    "PoiResult",
    "PoiSearchInput",
    "ResponseMeta",
    "ReverseGeocodeInput",
    "ReverseGeocodeResult",
    "RouteInput",
    "RouteResult",
    "RouteStep",
    "SearchArea",
    "SuccessEnvelope",
    "envelope_payload",
    "failure",
    "success",
]
