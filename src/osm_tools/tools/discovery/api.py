"""
Discovery tool registration for osm-tools.

Registers the Overpass-backed POI search tool.
"""

from ...core.overpass import OverpassAdapter
from ...models.envelope import Envelope
from ...models.inputs import PoiSearchInput
from ..registry import ToolRegistry


def register_discovery_tools(registry: ToolRegistry, overpass: OverpassAdapter) -> None:
    """Register discovery tools with the registry."""

    @registry.tool(
        name="poi_search",
        description=(
            "Search for Points of Interest using OpenStreetMap Overpass API. "
            'Filter by OSM tags (e.g., {"amenity": "restaurant"}) within a bounding box '
            "or around a center point (1km radius)."
        ),
        input_model=PoiSearchInput,
    )
    async def poi_search(inp: PoiSearchInput) -> Envelope:
        """Find nodes, ways and relations matching all tags in the area.

        Elements Overpass returns without coordinates are dropped and
        reported in ``meta.warnings``.
        """
        return await overpass.poi_search(inp)
