"""
Nominatim adapter: forward and reverse geocoding.

Builds the query string, issues one throttled request, and maps the
Nominatim payload onto the tool output models.
"""

import logging

import httpx
from pydantic import ValidationError

from ..constants import ErrorCode, ErrorMessages, NominatimParams, Source
from ..models.envelope import Envelope, failure, success
from ..models.inputs import GeocodeInput, ReverseGeocodeInput
from ..models.responses import GeocodeResult, ReverseGeocodeResult
from ..models.upstream import NOMINATIM_SEARCH, NominatimReverseError, NominatimReversePlace
from .upstream import UpstreamClient, format_coordinate

logger = logging.getLogger(__name__)


def build_viewbox(bbox: tuple[float, float, float, float]) -> str:
    """Convert a bbox to Nominatim's viewbox order.

    Input is [minLon, minLat, maxLon, maxLat]; Nominatim expects
    "minLon,maxLat,maxLon,minLat" (top-left then bottom-right corner).
    """
    min_lon, min_lat, max_lon, max_lat = bbox
    return ",".join(format_coordinate(v) for v in (min_lon, max_lat, max_lon, min_lat))


def build_search_params(inp: GeocodeInput) -> dict[str, str]:
    """Query parameters for ``/search``."""
    params = {
        "q": inp.query,
        "format": NominatimParams.FORMAT,
        "addressdetails": NominatimParams.ADDRESS_DETAILS,
        "limit": str(NominatimParams.SEARCH_LIMIT),
    }
    if inp.bbox is not None:
        params["viewbox"] = build_viewbox(inp.bbox)
        params["bounded"] = "1"
    if inp.country:
        params["countrycodes"] = inp.country.lower()
    return params


class NominatimAdapter:
    """Geocoding against a Nominatim instance."""

    def __init__(self, http: UpstreamClient, base_url: str):
        self._http = http
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def _http_failure(self, response: httpx.Response) -> Envelope:
        logger.warning("Nominatim returned HTTP %d", response.status_code)
        return failure(
            ErrorCode.NOMINATIM_ERROR,
            ErrorMessages.NOMINATIM_API.format(response.status_code, response.reason_phrase),
            source=Source.NOMINATIM,
        )

    async def geocode(self, inp: GeocodeInput) -> Envelope:
        """Forward geocode: place name to coordinates.

        An empty upstream result list is a success with no data.
        """
        try:
            response = await self._http.get(
                f"{self._base_url}/search", params=build_search_params(inp)
            )
            if not response.is_success:
                return self._http_failure(response)
            places = NOMINATIM_SEARCH.validate_python(response.json())
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.warning("geocode failed: %s", e)
            return failure(
                ErrorCode.GEOCODE_ERROR,
                ErrorMessages.GEOCODE_FAILED.format(e),
                source=Source.NOMINATIM,
            )

        results = [
            GeocodeResult(
                lat=place.lat,
                lon=place.lon,
                display_name=place.display_name,
                type=place.type,
                importance=place.importance,
                place_id=place.place_id,
                osm_type=place.osm_type,
                osm_id=place.osm_id,
                boundingbox=place.boundingbox,
            )
            for place in places
        ]
        return success(results, source=Source.NOMINATIM)

    async def reverse_geocode(self, inp: ReverseGeocodeInput) -> Envelope:
        """Reverse geocode: coordinates to a place and structured address.

        Nominatim answers a miss with HTTP 200 and ``{"error": "..."}``,
        which maps to NOMINATIM_NOT_FOUND.
        """
        params = {
            "lat": format_coordinate(inp.lat),
            "lon": format_coordinate(inp.lon),
            "format": NominatimParams.FORMAT,
            "addressdetails": NominatimParams.ADDRESS_DETAILS,
        }
        try:
            response = await self._http.get(f"{self._base_url}/reverse", params=params)
            if not response.is_success:
                return self._http_failure(response)
            payload = response.json()
            if isinstance(payload, dict) and "error" in payload:
                miss = NominatimReverseError.model_validate(payload)
                return failure(
                    ErrorCode.NOMINATIM_NOT_FOUND,
                    ErrorMessages.NOMINATIM_NOT_FOUND.format(miss.detail),
                    source=Source.NOMINATIM,
                )
            place = NominatimReversePlace.model_validate(payload)
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.warning("reverse_geocode failed: %s", e)
            return failure(
                ErrorCode.REVERSE_GEOCODE_ERROR,
                ErrorMessages.REVERSE_GEOCODE_FAILED.format(e),
                source=Source.NOMINATIM,
            )

        result = ReverseGeocodeResult(
            lat=place.lat,
            lon=place.lon,
            display_name=place.display_name,
            address=place.address,
            place_id=place.place_id,
            osm_type=place.osm_type,
            osm_id=place.osm_id,
        )
        return success(result, source=Source.NOMINATIM)
