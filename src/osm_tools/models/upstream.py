"""
Shapes of the upstream API payloads.

Upstream bodies are parsed into these models rather than trusted, so an
unexpected shape fails with ``pydantic.ValidationError`` at the boundary.
Unknown fields are ignored.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore")


# --- Nominatim ---


class NominatimPlace(_Upstream):
    """An item of ``/search`` (format=json)."""

    place_id: int
    lat: float
    lon: float
    display_name: str
    type: str
    importance: float | None = None
    osm_type: str | None = None
    osm_id: int | None = None
    boundingbox: list[str] | None = None


class NominatimReversePlace(_Upstream):
    """The ``/reverse`` record when a place was found."""

    place_id: int
    lat: float
    lon: float
    display_name: str
    address: dict[str, str] = Field(default_factory=dict)
    osm_type: str | None = None
    osm_id: int | None = None


class NominatimReverseError(_Upstream):
    """The ``/reverse`` body when nothing is found: ``{"error": "..."}``.

    Some Nominatim versions nest the reason as ``{"error": {"message": ...}}``.
    """

    error: str | dict[str, Any]

    @property
    def detail(self) -> str:
        if isinstance(self.error, dict):
            return str(self.error.get("message", self.error))
        return self.error


NOMINATIM_SEARCH = TypeAdapter(list[NominatimPlace])


# --- Overpass ---


class OverpassCenter(_Upstream):
    lat: float
    lon: float


class OverpassElement(_Upstream):
    type: Literal["node", "way", "relation"]
    id: int
    lat: float | None = None
    lon: float | None = None
    center: OverpassCenter | None = None
    tags: dict[str, str] | None = None

    def coordinates(self) -> tuple[float, float] | None:
        """Direct lat/lon, else the center computed by ``out center``."""
        if self.lat is not None and self.lon is not None:
            return self.lat, self.lon
        if self.center is not None:
            return self.center.lat, self.center.lon
        return None


class OverpassResponse(_Upstream):
    elements: list[OverpassElement] = Field(default_factory=list)


# --- OSRM ---


class OsrmManeuver(_Upstream):
    type: str
    modifier: str | None = None


class OsrmStep(_Upstream):
    maneuver: OsrmManeuver
    distance: float
    duration: float
    name: str = ""


class OsrmLeg(_Upstream):
    steps: list[OsrmStep] = Field(default_factory=list)
    summary: str = ""


class OsrmRoute(_Upstream):
    geometry: str
    distance: float
    duration: float
    legs: list[OsrmLeg] = Field(default_factory=list)


class OsrmResponse(_Upstream):
    code: str
    message: str | None = None
    routes: list[OsrmRoute] = Field(default_factory=list)
