"""Discovery tools: poi_search."""

from .api import register_discovery_tools

__all__ = ["register_discovery_tools"]
