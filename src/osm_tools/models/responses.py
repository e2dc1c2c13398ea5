"""
Response models for osm-tools tool data.

These are the ``data`` payloads placed inside success envelopes.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class GeocodeResult(BaseModel):
    """Single forward geocoding result."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")
    display_name: str = Field(..., description="Full display name")
    type: str = Field(..., description="Place type (city, village, etc.)")
    importance: float | None = Field(None, description="Result importance score (0-1)")
    place_id: int = Field(..., description="Nominatim place ID")
    osm_type: str | None = Field(None, description="OSM type (node/way/relation)")
    osm_id: int | None = Field(None, description="OSM ID")
    boundingbox: list[str] | None = Field(
        None, description="Nominatim bounding box [min_lat, max_lat, min_lon, max_lon]"
    )


class ReverseGeocodeResult(BaseModel):
    """Reverse geocoding result."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")
    display_name: str = Field(..., description="Full display name of location")
    address: dict[str, str] = Field(..., description="Address components")
    place_id: int = Field(..., description="Nominatim place ID")
    osm_type: str | None = Field(None, description="OSM type (node/way/relation)")
    osm_id: int | None = Field(None, description="OSM ID")


class PoiResult(BaseModel):
    """A single point of interest."""

    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., description="OSM element ID")
    name: str | None = Field(None, description="Value of the name tag")
    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")
    tags: dict[str, str] = Field(default_factory=dict, description="All OSM tags")
    type: Literal["node", "way", "relation"] = Field(..., description="OSM element kind")


class RouteStep(BaseModel):
    """One turn-by-turn instruction."""

    model_config = ConfigDict(extra="forbid")

    instruction: str = Field(..., description="Human-readable instruction")
    distance_m: float = Field(..., description="Step distance in metres")
    duration_s: float = Field(..., description="Step duration in seconds")
    name: str = Field("", description="Road name")


class RouteResult(BaseModel):
    """Route between two points."""

    model_config = ConfigDict(extra="forbid")

    distance_km: float = Field(..., description="Total distance in kilometres")
    duration_minutes: float = Field(..., description="Total duration in minutes")
    geometry: str = Field(..., description="Encoded polyline")
    steps: list[RouteStep] = Field(..., description="Steps of all legs, in order")
    summary: str = Field(..., description="Leg summaries joined with ' via '")
