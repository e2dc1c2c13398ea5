"""
Runtime settings for osm-tools.

Settings are an immutable value built once from the environment and handed
to every component that needs them. Overrides produce a new value.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import EnvVar, ServerConfig, UpstreamConfig

logger = logging.getLogger(__name__)


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    value = environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", key, value, default)
        return default


def _env_float(environ: Mapping[str, str], key: str, default: float) -> float:
    value = environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", key, value, default)
        return default


class Settings(BaseModel):
    """Server and upstream configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    http_host: str = Field(default=ServerConfig.DEFAULT_HOST, description="HTTP bind host")
    http_port: int = Field(default=ServerConfig.DEFAULT_PORT, ge=0, le=65535)
    user_agent: str = Field(default=UpstreamConfig.USER_AGENT, min_length=1)
    throttle_ms: int = Field(
        default=UpstreamConfig.THROTTLE_MS, ge=0, description="Minimum gap between upstream calls"
    )
    timeout_seconds: float = Field(default=UpstreamConfig.TIMEOUT_SECONDS, gt=0)
    nominatim_url: str = UpstreamConfig.NOMINATIM_URL
    overpass_url: str = UpstreamConfig.OVERPASS_URL
    osrm_url: str = UpstreamConfig.OSRM_URL

    @field_validator("nominatim_url", "overpass_url", "osrm_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def throttle_seconds(self) -> float:
        return self.throttle_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``OSM_*`` environment variables.

        Unset variables keep their defaults; numeric variables that fail to
        parse fall back to the default with a warning.
        """
        env = os.environ if environ is None else environ
        return cls(
            http_host=env.get(EnvVar.HTTP_HOST, ServerConfig.DEFAULT_HOST),
            http_port=_env_int(env, EnvVar.HTTP_PORT, ServerConfig.DEFAULT_PORT),
            user_agent=env.get(EnvVar.USER_AGENT, UpstreamConfig.USER_AGENT),
            throttle_ms=_env_int(env, EnvVar.THROTTLE_MS, UpstreamConfig.THROTTLE_MS),
            timeout_seconds=_env_float(
                env, EnvVar.TIMEOUT_SECONDS, UpstreamConfig.TIMEOUT_SECONDS
            ),
            nominatim_url=env.get(EnvVar.NOMINATIM_URL, UpstreamConfig.NOMINATIM_URL),
            overpass_url=env.get(EnvVar.OVERPASS_URL, UpstreamConfig.OVERPASS_URL),
            osrm_url=env.get(EnvVar.OSRM_URL, UpstreamConfig.OSRM_URL),
        )

    def merged(self, **overrides: Any) -> "Settings":
        """Return a validated copy with ``overrides`` applied.

        ``None`` values are ignored so CLI flags that were not given leave the
        current value alone.
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return type(self).model_validate({**self.model_dump(), **updates})
