"""
Tool input models.

Each tool validates its raw ``arguments`` against one of these models before
the handler runs. The models also render the JSON Schema shown by
``tools/list``.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)

from ..constants import ErrorMessages, OverpassParams

LatLon = tuple[StrictFloat, StrictFloat]
BBox = tuple[StrictFloat, StrictFloat, StrictFloat, StrictFloat]


class GeocodeInput(BaseModel):
    """Forward geocoding arguments."""

    query: StrictStr = Field(..., min_length=1, description="Address or place name to search for")
    bbox: BBox | None = Field(
        None, description="Bounding box [minLon, minLat, maxLon, maxLat] to restrict search"
    )
    country: StrictStr | None = Field(
        None, description="ISO 3166-1 alpha-2 country code to restrict search"
    )


class ReverseGeocodeInput(BaseModel):
    """Reverse geocoding arguments."""

    lat: StrictFloat = Field(..., ge=-90, le=90, description="Latitude")
    lon: StrictFloat = Field(..., ge=-180, le=180, description="Longitude")


class SearchArea(BaseModel):
    """Either a center point (1 km radius) or a bounding box, never both."""

    model_config = ConfigDict(extra="forbid")

    center: LatLon | None = Field(None, description="Center point [lat, lon] with 1km radius")
    bbox: BBox | None = Field(None, description="Bounding box [south, west, north, east]")

    @model_validator(mode="after")
    def _exactly_one(self) -> "SearchArea":
        if (self.center is None) == (self.bbox is None):
            raise ValueError(ErrorMessages.AREA_REQUIRED)
        return self


class PoiSearchInput(BaseModel):
    """POI search arguments."""

    center_or_bbox: SearchArea = Field(
        ..., description="Search area: either center point or bounding box"
    )
    tags: dict[StrictStr, StrictStr] = Field(
        ..., description='OSM key-value tags to filter POIs, e.g., {"amenity": "restaurant"}'
    )
    limit: StrictInt = Field(
        OverpassParams.DEFAULT_LIMIT,
        gt=0,
        le=OverpassParams.MAX_LIMIT,
        description="Maximum number of results (default 25, max 100)",
    )


TravelMode = Literal["driving", "cycling", "walking"]


class RouteInput(BaseModel):
    """Routing arguments. Coordinates are [lat, lon]."""

    start: LatLon = Field(..., description="Start point [lat, lon]")
    end: LatLon = Field(..., description="End point [lat, lon]")
    mode: TravelMode = Field(..., description="Travel mode: driving, cycling, or walking")
