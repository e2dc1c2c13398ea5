"""Routing tools: route."""

from .api import register_routing_tools

__all__ = ["register_routing_tools"]
