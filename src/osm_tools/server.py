#!/usr/bin/env python3
"""
osm-tools server - Entry Point

Serves OpenStreetMap geocoding (Nominatim), POI search (Overpass) and
routing (OSRM) as JSON-RPC tool calls over HTTP.
"""

import logging
import os
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .async_server import create_server
from .config import Settings
from .constants import EnvVar, ServerConfig

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point for the HTTP server."""
    import argparse

    parser = argparse.ArgumentParser(description=ServerConfig.DESCRIPTION)
    parser.add_argument(
        "--host", default=None, help=f"Bind host (default: {ServerConfig.DEFAULT_HOST})"
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=None,
        help=f"HTTP port (default: {ServerConfig.DEFAULT_PORT})",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(EnvVar.LOG_LEVEL, "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"{ServerConfig.NAME} v{ServerConfig.VERSION}"
    )

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level)
    settings = Settings.from_env().merged(http_host=args.host, http_port=args.port)

    print(
        f"{ServerConfig.NAME} starting in HTTP mode on {settings.http_host}:{settings.http_port}",
        file=sys.stderr,
    )
    print(f"JSON-RPC endpoint: {ServerConfig.MCP_PATH}", file=sys.stderr)
    print(f"Health endpoint: {ServerConfig.HEALTH_PATH}", file=sys.stderr)
    uvicorn.run(
        create_server(settings),
        host=settings.http_host,
        port=settings.http_port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
