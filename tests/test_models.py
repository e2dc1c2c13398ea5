"""Tests for osm-tools envelope, input and JSON-RPC models."""

import re

import pytest
from pydantic import ValidationError

from osm_tools.models.envelope import (
    ErrorEnvelope,
    SuccessEnvelope,
    envelope_payload,
    failure,
    success,
    utc_timestamp,
)
from osm_tools.models.inputs import (
    GeocodeInput,
    PoiSearchInput,
    ReverseGeocodeInput,
    RouteInput,
    SearchArea,
)
from osm_tools.models.jsonrpc import JsonRpcResponse
from osm_tools.models.responses import GeocodeResult, RouteStep
from osm_tools.models.upstream import OverpassElement

TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestEnvelope:
    def test_timestamp_format(self):
        assert TIMESTAMP.match(utc_timestamp())

    def test_success_payload(self):
        payload = envelope_payload(success({"x": 1}, source="osrm"))
        assert payload["ok"] is True
        assert payload["data"] == {"x": 1}
        assert payload["meta"]["source"] == "osrm"
        assert payload["meta"]["pagination"] == {"next_cursor": None}
        assert payload["meta"]["warnings"] == []
        assert TIMESTAMP.match(payload["meta"]["retrieved_at"])
        assert "error" not in payload

    def test_success_serializes_models(self):
        result = GeocodeResult(lat=1.0, lon=2.0, display_name="X", type="city", place_id=1)
        payload = envelope_payload(success([result], source="nominatim"))
        assert payload["data"][0]["display_name"] == "X"
        assert payload["data"][0]["importance"] is None

    def test_failure_payload(self):
        payload = envelope_payload(failure("OSRM_NO_ROUTE", "none", source="osrm"))
        assert payload["ok"] is False
        assert payload["error"] == {"code": "OSRM_NO_ROUTE", "message": "none"}
        assert payload["meta"]["source"] == "osrm"
        assert "pagination" not in payload["meta"]
        assert "data" not in payload

    def test_failure_without_source(self):
        payload = envelope_payload(failure("VALIDATION_ERROR", "bad"))
        assert "source" not in payload["meta"]
        assert payload["meta"]["warnings"] == []

    def test_warnings_preserved_in_order(self):
        envelope = success([], source="overpass", warnings=["a", "b"])
        assert envelope.meta.warnings == ["a", "b"]

    def test_ok_discriminates(self):
        assert isinstance(success(None, source="osrm"), SuccessEnvelope)
        assert isinstance(failure("X", "y"), ErrorEnvelope)
        with pytest.raises(ValidationError):
            SuccessEnvelope(ok=False, data=None, meta={})


class TestGeocodeInput:
    def test_minimal(self):
        inp = GeocodeInput.model_validate({"query": "Paris"})
        assert inp.bbox is None
        assert inp.country is None

    def test_empty_query_rejected(self):
        with pytest.raises(ValidationError):
            GeocodeInput.model_validate({"query": ""})

    def test_query_must_be_string(self):
        with pytest.raises(ValidationError):
            GeocodeInput.model_validate({"query": 42})

    def test_bbox_needs_four_numbers(self):
        with pytest.raises(ValidationError):
            GeocodeInput.model_validate({"query": "x", "bbox": [1.0, 2.0, 3.0]})

    def test_bbox_accepts_integers(self):
        inp = GeocodeInput.model_validate({"query": "x", "bbox": [1, 2, 3, 4]})
        assert inp.bbox == (1.0, 2.0, 3.0, 4.0)


class TestReverseGeocodeInput:
    def test_valid(self):
        inp = ReverseGeocodeInput.model_validate({"lat": 40.7484, "lon": -73.9857})
        assert inp.lat == 40.7484

    @pytest.mark.parametrize("args", [{"lat": 91.0, "lon": 0.0}, {"lat": 0.0, "lon": -181.0}])
    def test_out_of_range(self, args):
        with pytest.raises(ValidationError):
            ReverseGeocodeInput.model_validate(args)

    def test_string_rejected(self):
        with pytest.raises(ValidationError):
            ReverseGeocodeInput.model_validate({"lat": "40.7", "lon": "-73.9"})

    def test_missing_lon(self):
        with pytest.raises(ValidationError):
            ReverseGeocodeInput.model_validate({"lat": 1.0})


class TestSearchArea:
    def test_center(self):
        assert SearchArea.model_validate({"center": [1.0, 2.0]}).center == (1.0, 2.0)

    def test_bbox(self):
        area = SearchArea.model_validate({"bbox": [1.0, 2.0, 3.0, 4.0]})
        assert area.center is None

    def test_neither_rejected(self):
        with pytest.raises(ValidationError, match="Exactly one of center or bbox"):
            SearchArea.model_validate({})

    def test_both_rejected(self):
        with pytest.raises(ValidationError):
            SearchArea.model_validate({"center": [1.0, 2.0], "bbox": [1.0, 2.0, 3.0, 4.0]})


class TestPoiSearchInput:
    def test_default_limit(self):
        inp = PoiSearchInput.model_validate(
            {"center_or_bbox": {"center": [1.0, 2.0]}, "tags": {"amenity": "cafe"}}
        )
        assert inp.limit == 25

    @pytest.mark.parametrize("limit", [0, 101, -3])
    def test_limit_bounds(self, limit):
        with pytest.raises(ValidationError):
            PoiSearchInput.model_validate(
                {"center_or_bbox": {"center": [1.0, 2.0]}, "tags": {}, "limit": limit}
            )

    def test_tags_required(self):
        with pytest.raises(ValidationError):
            PoiSearchInput.model_validate({"center_or_bbox": {"center": [1.0, 2.0]}})

    def test_tag_values_must_be_strings(self):
        with pytest.raises(ValidationError):
            PoiSearchInput.model_validate(
                {"center_or_bbox": {"center": [1.0, 2.0]}, "tags": {"amenity": 1}}
            )


class TestRouteInput:
    def test_valid(self):
        inp = RouteInput.model_validate(
            {"start": [40.7128, -74.006], "end": [40.714, -74.008], "mode": "cycling"}
        )
        assert inp.start == (40.7128, -74.006)

    def test_unknown_mode(self):
        with pytest.raises(ValidationError):
            RouteInput.model_validate({"start": [0.0, 0.0], "end": [1.0, 1.0], "mode": "flying"})

    def test_point_needs_two_numbers(self):
        with pytest.raises(ValidationError):
            RouteInput.model_validate({"start": [0.0], "end": [1.0, 1.0], "mode": "driving"})


class TestResponseModels:
    def test_extra_forbid(self):
        with pytest.raises(ValidationError):
            RouteStep(instruction="Depart", distance_m=1.0, duration_s=1.0, bogus=True)


class TestOverpassElement:
    def test_direct_coordinates(self):
        el = OverpassElement(type="node", id=1, lat=1.0, lon=2.0)
        assert el.coordinates() == (1.0, 2.0)

    def test_center_coordinates(self):
        el = OverpassElement.model_validate(
            {"type": "way", "id": 2, "center": {"lat": 3.0, "lon": 4.0}}
        )
        assert el.coordinates() == (3.0, 4.0)

    def test_no_coordinates(self):
        assert OverpassElement(type="relation", id=3).coordinates() is None


class TestJsonRpcResponse:
    def test_success_dict(self):
        assert JsonRpcResponse.success(7, {"a": 1}).to_dict() == {
            "jsonrpc": "2.0",
            "id": 7,
            "result": {"a": 1},
        }

    def test_failure_dict(self):
        assert JsonRpcResponse.failure("abc", -32601, "Method not found: x").to_dict() == {
            "jsonrpc": "2.0",
            "id": "abc",
            "error": {"code": -32601, "message": "Method not found: x"},
        }

    def test_failure_with_data(self):
        payload = JsonRpcResponse.failure(None, -32603, "boom", data={"k": "v"}).to_dict()
        assert payload["id"] is None
        assert payload["error"]["data"] == {"k": "v"}
