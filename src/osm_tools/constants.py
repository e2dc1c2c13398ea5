"""
Constants for the osm-tools server.

All magic strings, upstream defaults, and error message templates live here.
"""


class ServerConfig:
    NAME = "osm-tools"
    VERSION = "1.0.0"
    DESCRIPTION = "OpenStreetMap MCP Server: Nominatim geocoding, Overpass POI search, OSRM routing"
    PROTOCOL_VERSION = "2024-11-05"
    JSONRPC_VERSION = "2.0"
    DEFAULT_HOST = "localhost"
    DEFAULT_PORT = 8080
    MCP_PATH = "/mcp"
    HEALTH_PATH = "/health"


class UpstreamConfig:
    USER_AGENT = "osm-tools-mcp/1.0.0"
    THROTTLE_MS = 1000
    TIMEOUT_SECONDS = 30.0
    NOMINATIM_URL = "https://nominatim.openstreetmap.org"
    OVERPASS_URL = "https://overpass-api.de/api/interpreter"
    OSRM_URL = "https://router.project-osrm.org"


class Source:
    """Upstream names reported in ``meta.source``."""

    NOMINATIM = "nominatim"
    OVERPASS = "overpass"
    OSRM = "osrm"


class NominatimParams:
    FORMAT = "json"
    ADDRESS_DETAILS = "1"
    SEARCH_LIMIT = 10


class OverpassParams:
    TIMEOUT_SECONDS = 25
    AROUND_RADIUS_M = 1000
    DEFAULT_LIMIT = 25
    MAX_LIMIT = 100


class OsrmParams:
    OK_CODE = "Ok"
    OVERVIEW = "full"
    GEOMETRIES = "polyline"
    STEPS = "true"
    DEFAULT_PROFILE = "car"


# Travel mode -> OSRM profile token
OSRM_PROFILES: dict[str, str] = {
    "driving": "car",
    "cycling": "bike",
    "walking": "foot",
}


class EnvVar:
    HTTP_HOST = "OSM_HTTP_HOST"
    HTTP_PORT = "OSM_HTTP_PORT"
    USER_AGENT = "OSM_USER_AGENT"
    THROTTLE_MS = "OSM_THROTTLE_MS"
    TIMEOUT_SECONDS = "OSM_TIMEOUT_SECONDS"
    NOMINATIM_URL = "OSM_NOMINATIM_URL"
    OVERPASS_URL = "OSM_OVERPASS_URL"
    OSRM_URL = "OSM_OSRM_URL"
    LOG_LEVEL = "OSM_LOG_LEVEL"


class JsonRpcErrorCode:
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INTERNAL_ERROR = -32603


class ErrorCode:
    """Domain error codes carried inside ``ok: false`` envelopes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    NOMINATIM_ERROR = "NOMINATIM_ERROR"
    NOMINATIM_NOT_FOUND = "NOMINATIM_NOT_FOUND"
    OVERPASS_ERROR = "OVERPASS_ERROR"
    OSRM_ERROR = "OSRM_ERROR"
    OSRM_ROUTE_ERROR = "OSRM_ROUTE_ERROR"
    OSRM_NO_ROUTE = "OSRM_NO_ROUTE"
    GEOCODE_ERROR = "GEOCODE_ERROR"
    REVERSE_GEOCODE_ERROR = "REVERSE_GEOCODE_ERROR"
    POI_SEARCH_ERROR = "POI_SEARCH_ERROR"
    ROUTE_ERROR = "ROUTE_ERROR"


# Tool lists, in registration order
GEOCODING_TOOLS = ["geocode", "reverse_geocode"]
DISCOVERY_TOOLS = ["poi_search"]
ROUTING_TOOLS = ["route"]
ALL_TOOLS = GEOCODING_TOOLS + DISCOVERY_TOOLS + ROUTING_TOOLS


class ErrorMessages:
    NOMINATIM_API = "Nominatim API returned {}: {}"
    OVERPASS_API = "Overpass API returned {}: {}"
    OSRM_API = "OSRM API returned {}: {}"
    NOMINATIM_NOT_FOUND = "No address found for coordinates: {}"
    OSRM_ROUTE = "OSRM could not calculate route: {}"
    OSRM_NO_ROUTE = "No route found between the specified points"
    GEOCODE_FAILED = "Failed to geocode: {}"
    REVERSE_GEOCODE_FAILED = "Failed to reverse geocode: {}"
    POI_SEARCH_FAILED = "Failed to search POIs: {}"
    ROUTE_FAILED = "Failed to calculate route: {}"
    INVALID_INPUT = "Invalid input: {}"
    AREA_REQUIRED = "Exactly one of center or bbox must be provided"
    INVALID_JSONRPC = "Invalid Request: missing or invalid jsonrpc version"
    INVALID_METHOD = "Invalid Request: method must be a string"
    PARSE_ERROR = "Parse error: {}"
    UNKNOWN_TOOL = "Unknown tool: {}"
    METHOD_NOT_FOUND = "Method not found: {}"
    INTERNAL = "Internal error: {}"
    DUPLICATE_TOOL = "Tool '{}' is already registered"
    NOT_FOUND = "Not found"
    METHOD_NOT_ALLOWED = "Method not allowed"


class WarningMessages:
    NO_COORDINATES = "Element {} has no coordinates, skipping"
