"""Shared test fixtures for osm-tools."""

import pytest

from osm_tools.config import Settings
from osm_tools.core.nominatim import NominatimAdapter
from osm_tools.core.osrm import OsrmAdapter
from osm_tools.core.overpass import OverpassAdapter
from osm_tools.core.throttle import ThrottleGate
from osm_tools.core.upstream import UpstreamClient

NOMINATIM_URL = "https://nominatim.test"
OVERPASS_URL = "https://overpass.test/api/interpreter"
OSRM_URL = "https://osrm.test"


# Sample Nominatim API responses
SAMPLE_SEARCH_RESPONSE = [
    {
        "place_id": 123456,
        "osm_type": "relation",
        "osm_id": 175905,
        "lat": "40.7127281",
        "lon": "-74.0060152",
        "display_name": "New York, United States",
        "boundingbox": ["40.476578", "40.91763", "-74.258843", "-73.700233"],
        "importance": 0.82,
        "place_rank": 16,
        "category": "boundary",
        "type": "administrative",
    }
]

SAMPLE_REVERSE_RESPONSE = {
    "place_id": 654321,
    "osm_type": "way",
    "osm_id": 5668999,
    "lat": "40.7484",
    "lon": "-73.9857",
    "display_name": "Empire State Building, 350, 5th Avenue, Manhattan, New York, United States",
    "address": {
        "building": "Empire State Building",
        "house_number": "350",
        "road": "5th Avenue",
        "city": "New York",
        "country": "United States",
        "country_code": "us",
    },
    "boundingbox": ["40.7479", "40.7489", "-73.9865", "-73.9848"],
}

SAMPLE_REVERSE_MISS = {"error": "Unable to geocode"}

# Sample Overpass API response
SAMPLE_OVERPASS_RESPONSE = {
    "version": 0.6,
    "generator": "Overpass API",
    "elements": [
        {
            "type": "node",
            "id": 1001,
            "lat": 40.7128,
            "lon": -74.006,
            "tags": {"amenity": "cafe", "name": "Corner Cafe"},
        },
        {
            "type": "way",
            "id": 2002,
            "center": {"lat": 40.7131, "lon": -74.0055},
            "tags": {"amenity": "cafe"},
        },
    ],
}

# Sample OSRM API response
SAMPLE_OSRM_RESPONSE = {
    "code": "Ok",
    "routes": [
        {
            "geometry": "_p~iF~ps|U_ulLnnqC",
            "distance": 1500.0,
            "duration": 180.0,
            "legs": [
                {
                    "summary": "Broadway",
                    "distance": 1500.0,
                    "duration": 180.0,
                    "steps": [
                        {
                            "maneuver": {"type": "depart", "modifier": "left"},
                            "distance": 1000.0,
                            "duration": 120.0,
                            "name": "Broadway",
                        },
                        {
                            "maneuver": {"type": "turn", "modifier": "right"},
                            "distance": 500.0,
                            "duration": 60.0,
                            "name": "Wall Street",
                        },
                        {
                            "maneuver": {"type": "arrive"},
                            "distance": 0.0,
                            "duration": 0.0,
                            "name": "",
                        },
                    ],
                }
            ],
        }
    ],
    "waypoints": [],
}


@pytest.fixture
def settings():
    """Settings pointing at test hosts, with throttling disabled."""
    return Settings(
        throttle_ms=0,
        nominatim_url=NOMINATIM_URL,
        overpass_url=OVERPASS_URL,
        osrm_url=OSRM_URL,
    )


@pytest.fixture
async def upstream(settings):
    client = UpstreamClient(settings, ThrottleGate(0))
    yield client
    await client.close()


@pytest.fixture
def nominatim(upstream, settings):
    return NominatimAdapter(upstream, settings.nominatim_url)


@pytest.fixture
def overpass(upstream, settings):
    return OverpassAdapter(upstream, settings.overpass_url)


@pytest.fixture
def osrm(upstream, settings):
    return OsrmAdapter(upstream, settings.osrm_url)
