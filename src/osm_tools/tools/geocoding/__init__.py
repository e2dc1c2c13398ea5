"""Geocoding tools: geocode, reverse_geocode."""

from .api import register_geocoding_tools

__all__ = ["register_geocoding_tools"]
