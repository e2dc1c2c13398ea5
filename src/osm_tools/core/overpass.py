"""
Overpass adapter: tag-based point-of-interest search.

Translates a tag filter and a search area into an Overpass QL query, posts it
as a form body, and keeps only elements that carry coordinates.
"""

import logging

import httpx
from pydantic import ValidationError

from ..constants import ErrorCode, ErrorMessages, OverpassParams, Source, WarningMessages
from ..models.envelope import Envelope, failure, success
from ..models.inputs import PoiSearchInput, SearchArea
from ..models.responses import PoiResult
from ..models.upstream import OverpassResponse
from .upstream import UpstreamClient, format_coordinate

logger = logging.getLogger(__name__)

_QL_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n"})


def escape_ql_string(value: str) -> str:
    """Escape text for use inside a double-quoted Overpass QL literal."""
    return value.translate(_QL_ESCAPES)


def build_tag_filters(tags: dict[str, str]) -> str:
    """``["key"="value"]`` clauses in insertion order."""
    return "".join(
        f'["{escape_ql_string(key)}"="{escape_ql_string(value)}"]' for key, value in tags.items()
    )


def build_area_filter(area: SearchArea) -> str:
    """Overpass bbox ``(south,west,north,east)`` or ``(around:radius,lat,lon)``."""
    if area.bbox is not None:
        return "(" + ",".join(format_coordinate(v) for v in area.bbox) + ")"
    if area.center is not None:
        lat, lon = area.center
        return (
            f"(around:{OverpassParams.AROUND_RADIUS_M},"
            f"{format_coordinate(lat)},{format_coordinate(lon)})"
        )
    raise ValueError(ErrorMessages.AREA_REQUIRED)


def build_overpass_query(inp: PoiSearchInput) -> str:
    """Build the Overpass QL query for nodes, ways and relations.

    ``out center`` makes Overpass attach a center point to ways and
    relations, which have no coordinates of their own.
    """
    selector = build_tag_filters(inp.tags) + build_area_filter(inp.center_or_bbox)
    lines = [
        f"[out:json][timeout:{OverpassParams.TIMEOUT_SECONDS}];",
        "(",
        f"  node{selector};",
        f"  way{selector};",
        f"  relation{selector};",
        ");",
        f"out center {inp.limit};",
    ]
    return "\n".join(lines)


class OverpassAdapter:
    """POI search against an Overpass interpreter endpoint."""

    def __init__(self, http: UpstreamClient, url: str):
        self._http = http
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    async def poi_search(self, inp: PoiSearchInput) -> Envelope:
        """Search for POIs matching every tag inside the area.

        Elements without coordinates are skipped with a warning; that never
        fails the call.
        """
        warnings: list[str] = []
        try:
            query = build_overpass_query(inp)
            response = await self._http.post_form(self._url, data={"data": query})
            if not response.is_success:
                logger.warning("Overpass returned HTTP %d", response.status_code)
                return failure(
                    ErrorCode.OVERPASS_ERROR,
                    ErrorMessages.OVERPASS_API.format(
                        response.status_code, response.reason_phrase
                    ),
                    source=Source.OVERPASS,
                    warnings=warnings,
                )
            payload = OverpassResponse.model_validate(response.json())
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.warning("poi_search failed: %s", e)
            return failure(
                ErrorCode.POI_SEARCH_ERROR,
                ErrorMessages.POI_SEARCH_FAILED.format(e),
                source=Source.OVERPASS,
                warnings=warnings,
            )

        results: list[PoiResult] = []
        for element in payload.elements:
            coords = element.coordinates()
            if coords is None:
                warnings.append(WarningMessages.NO_COORDINATES.format(element.id))
                continue
            tags = element.tags or {}
            results.append(
                PoiResult(
                    id=element.id,
                    name=tags.get("name"),
                    lat=coords[0],
                    lon=coords[1],
                    tags=tags,
                    type=element.type,
                )
            )
        return success(results, source=Source.OVERPASS, warnings=warnings)
