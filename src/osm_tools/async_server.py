"""
Async osm-tools server assembly.

Builds the object graph: settings -> throttle gate -> upstream client ->
adapters -> tool registry -> JSON-RPC dispatcher -> FastAPI app. Every
component gets the same settings value and shares one throttle gate.
"""

import logging

from fastapi import FastAPI

from .config import Settings
from .core.nominatim import NominatimAdapter
from .core.osrm import OsrmAdapter
from .core.overpass import OverpassAdapter
from .core.throttle import ThrottleGate
from .core.upstream import UpstreamClient
from .dispatcher import JsonRpcDispatcher
from .tools.discovery import register_discovery_tools
from .tools.geocoding import register_geocoding_tools
from .tools.registry import ToolRegistry
from .tools.routing import register_routing_tools
from .transport.http import create_app

logger = logging.getLogger(__name__)


def build_registry(settings: Settings, http: UpstreamClient) -> ToolRegistry:
    """Register all tools, in catalog order, against one upstream client."""
    registry = ToolRegistry()
    register_geocoding_tools(registry, NominatimAdapter(http, settings.nominatim_url))
    register_discovery_tools(registry, OverpassAdapter(http, settings.overpass_url))
    register_routing_tools(registry, OsrmAdapter(http, settings.osrm_url))
    return registry


def create_server(settings: Settings | None = None) -> FastAPI:
    """Create the HTTP application.

    Usable as a uvicorn factory: ``uvicorn osm_tools.async_server:create_server --factory``.
    """
    settings = settings or Settings.from_env()
    http = UpstreamClient(settings, ThrottleGate(settings.throttle_seconds))
    registry = build_registry(settings, http)
    logger.info(
        "Registered %d tools; throttle %d ms; user agent %r",
        len(registry),
        settings.throttle_ms,
        settings.user_agent,
    )
    return create_app(JsonRpcDispatcher(registry), on_shutdown=http.close)
