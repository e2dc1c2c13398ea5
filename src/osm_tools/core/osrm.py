"""
OSRM adapter: point-to-point routing with turn-by-turn steps.
"""

import logging

import httpx
from pydantic import ValidationError

from ..constants import (
    OSRM_PROFILES,
    ErrorCode,
    ErrorMessages,
    OsrmParams,
    Source,
)
from ..models.envelope import Envelope, failure, success
from ..models.inputs import RouteInput
from ..models.responses import RouteResult, RouteStep
from ..models.upstream import OsrmManeuver, OsrmResponse
from .upstream import UpstreamClient, format_coordinate

logger = logging.getLogger(__name__)


def get_osrm_profile(mode: str) -> str:
    """Map a travel mode to its OSRM profile token (car/bike/foot)."""
    return OSRM_PROFILES.get(mode, OsrmParams.DEFAULT_PROFILE)


# Maneuver types whose text ignores the modifier
FIXED_INSTRUCTIONS: dict[str, str] = {
    "depart": "Depart",
    "arrive": "Arrive at destination",
    "continue": "Continue straight",
    "roundabout": "Enter roundabout",
    "exit roundabout": "Exit roundabout",
    "new name": "Continue",
}

# Maneuver type -> (template, fallback when the modifier is missing)
MODIFIER_INSTRUCTIONS: dict[str, tuple[str, str]] = {
    "turn": ("Turn {}", "ahead"),
    "merge": ("Merge {}", ""),
    "fork": ("Take the {}", "fork"),
    "end of road": ("At end of road, turn {}", "ahead"),
    "notification": ("{}", "Continue"),
}


def build_instruction(maneuver: OsrmManeuver) -> str:
    """Turn an OSRM maneuver into a short human-readable instruction."""
    kind, modifier = maneuver.type, maneuver.modifier
    if kind in FIXED_INSTRUCTIONS:
        return FIXED_INSTRUCTIONS[kind]
    if kind in MODIFIER_INSTRUCTIONS:
        template, fallback = MODIFIER_INSTRUCTIONS[kind]
        return template.format(modifier or fallback).strip()
    return f"{kind} {modifier}" if modifier else kind


def format_waypoint(point: tuple[float, float]) -> str:
    """[lat, lon] input as OSRM's "lon,lat"."""
    lat, lon = point
    return f"{format_coordinate(lon)},{format_coordinate(lat)}"


def build_route_path(inp: RouteInput) -> str:
    """``route/v1/{profile}/{lon,lat};{lon,lat}``"""
    profile = get_osrm_profile(inp.mode)
    return f"route/v1/{profile}/{format_waypoint(inp.start)};{format_waypoint(inp.end)}"


class OsrmAdapter:
    """Routing against an OSRM server."""

    def __init__(self, http: UpstreamClient, base_url: str):
        self._http = http
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def route(self, inp: RouteInput) -> Envelope:
        """Calculate a route between two points.

        Only the first candidate route is used. Distance is converted to
        kilometres and duration to minutes.
        """
        params = {
            "overview": OsrmParams.OVERVIEW,
            "geometries": OsrmParams.GEOMETRIES,
            "steps": OsrmParams.STEPS,
        }
        try:
            response = await self._http.get(
                f"{self._base_url}/{build_route_path(inp)}", params=params
            )
            if not response.is_success:
                logger.warning("OSRM returned HTTP %d", response.status_code)
                return failure(
                    ErrorCode.OSRM_ERROR,
                    ErrorMessages.OSRM_API.format(response.status_code, response.reason_phrase),
                    source=Source.OSRM,
                )
            payload = OsrmResponse.model_validate(response.json())
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.warning("route failed: %s", e)
            return failure(
                ErrorCode.ROUTE_ERROR,
                ErrorMessages.ROUTE_FAILED.format(e),
                source=Source.OSRM,
            )

        if payload.code != OsrmParams.OK_CODE:
            return failure(
                ErrorCode.OSRM_ROUTE_ERROR,
                ErrorMessages.OSRM_ROUTE.format(payload.code),
                source=Source.OSRM,
            )
        if not payload.routes:
            return failure(
                ErrorCode.OSRM_NO_ROUTE, ErrorMessages.OSRM_NO_ROUTE, source=Source.OSRM
            )

        best = payload.routes[0]
        steps = [
            RouteStep(
                instruction=build_instruction(step.maneuver),
                distance_m=step.distance,
                duration_s=step.duration,
                name=step.name,
            )
            for leg in best.legs
            for step in leg.steps
        ]
        result = RouteResult(
            distance_km=best.distance / 1000,
            duration_minutes=best.duration / 60,
            geometry=best.geometry,
            steps=steps,
            summary=" via ".join(leg.summary for leg in best.legs),
        )
        return success(result, source=Source.OSRM)
