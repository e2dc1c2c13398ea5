"""HTTP transport for the JSON-RPC dispatcher."""

from .http import create_app

__all__ = ["create_app"]
