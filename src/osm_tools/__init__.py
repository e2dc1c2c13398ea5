"""osm-tools: OpenStreetMap geocoding, POI search and routing over JSON-RPC."""

from .constants import ServerConfig

__version__ = ServerConfig.VERSION
