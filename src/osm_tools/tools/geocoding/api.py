"""
Geocoding tool registration for osm-tools.

Registers forward and reverse geocoding tools backed by Nominatim.
"""

from ...core.nominatim import NominatimAdapter
from ...models.envelope import Envelope
from ...models.inputs import GeocodeInput, ReverseGeocodeInput
from ..registry import ToolRegistry


def register_geocoding_tools(registry: ToolRegistry, nominatim: NominatimAdapter) -> None:
    """Register geocoding tools with the registry."""

    @registry.tool(
        name="geocode",
        description=(
            "Forward geocoding: search for a location by address or place name. "
            "Returns latitude/longitude coordinates and address details. "
            "Supports optional bounding box and country filters."
        ),
        input_model=GeocodeInput,
    )
    async def geocode(inp: GeocodeInput) -> Envelope:
        """Forward geocode a place name to coordinates.

        Args:
            inp.query: Place name or address (e.g. "Boulder, Colorado")
            inp.bbox: Optional [minLon, minLat, maxLon, maxLat] to restrict results
            inp.country: Optional ISO 3166-1 alpha-2 code (e.g. "FR")

        Returns:
            Envelope with up to 10 matching places
        """
        return await nominatim.geocode(inp)

    @registry.tool(
        name="reverse_geocode",
        description=(
            "Reverse geocoding: get a human-readable address from latitude/longitude "
            "coordinates. Returns the full display name and detailed address breakdown."
        ),
        input_model=ReverseGeocodeInput,
    )
    async def reverse_geocode(inp: ReverseGeocodeInput) -> Envelope:
        """Reverse geocode coordinates to a place name and structured address."""
        return await nominatim.reverse_geocode(inp)
