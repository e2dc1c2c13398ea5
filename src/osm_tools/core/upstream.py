"""
Low-level async HTTP client shared by the upstream adapters.

Handles throttling, the User-Agent header, and request timeouts.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import Settings
from .throttle import ThrottleGate

logger = logging.getLogger(__name__)


def format_coordinate(value: float) -> str:
    """Render a number the way it appears in JSON (40.0 -> "40")."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class UpstreamClient:
    """Async HTTP client for the OSM upstream services.

    Every request acquires the shared throttle gate first. The User-Agent
    from settings is attached unless the caller already supplied one.
    """

    def __init__(
        self,
        settings: Settings,
        throttle: ThrottleGate | None = None,
    ):
        self._settings = settings
        self._throttle = throttle or ThrottleGate(settings.throttle_seconds)
        self._client: httpx.AsyncClient | None = None

    @property
    def throttle(self) -> ThrottleGate:
        return self._throttle

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazily create httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.timeout_seconds)
        return self._client

    def _headers(self, headers: Mapping[str, str] | None) -> httpx.Headers:
        merged = httpx.Headers(headers or {})
        if "user-agent" not in merged:
            merged["User-Agent"] = self._settings.user_agent
        return merged

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        data: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Issue one throttled request and return the raw response.

        Raises:
            httpx.HTTPError: On connection failures and timeouts
        """
        await self._throttle.acquire()
        client = await self._get_client()
        logger.debug("%s %s", method, url)
        return await client.request(
            method, url, params=params, data=data, headers=self._headers(headers)
        )

    async def get(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("GET", url, params=params, headers=headers)

    async def post_form(
        self,
        url: str,
        data: Mapping[str, str],
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("POST", url, data=data, headers=headers)

    async def close(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
