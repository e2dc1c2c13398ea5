"""
Routing tool registration for osm-tools.
"""

from ...core.osrm import OsrmAdapter
from ...models.envelope import Envelope
from ...models.inputs import RouteInput
from ..registry import ToolRegistry


def register_routing_tools(registry: ToolRegistry, osrm: OsrmAdapter) -> None:
    """Register routing tools with the registry."""

    @registry.tool(
        name="route",
        description=(
            "Calculate a route between two points using OSRM. Supports driving, cycling, "
            "and walking modes. Returns distance, duration, encoded polyline geometry, "
            "and turn-by-turn instructions."
        ),
        input_model=RouteInput,
    )
    async def route(inp: RouteInput) -> Envelope:
        # start/end arrive as [lat, lon]; the adapter swaps them for OSRM
        return await osrm.route(inp)
