"""Unit tests for earthquake feature styling.

Pure functions: no mocks, plain assertions on the returned view-models.
"""

import copy
import math

import pytest

from quakemap.core.feature import (
    StyledMarker,
    collection_features,
    format_popup,
    format_value,
    style_feature,
    style_features,
)


# Sample USGS GeoJSON feature for testing
SAMPLE_FEATURE = {
    "type": "Feature",
    "id": "nc75095866",
    "properties": {"mag": 3.0, "place": "10km NE of Somewhere"},
    "geometry": {
        "type": "Point",
        "coordinates": [-100, 40, 15],  # lon, lat, depth
    },
}

SAMPLE_GEOJSON = {
    "type": "FeatureCollection",
    "features": [SAMPLE_FEATURE],
}


class TestFormatValue:
    """Tests for format_value()."""

    def test_integral_float_drops_decimal(self):
        """3.0 prints as 3."""
        assert format_value(3.0) == "3"
        assert format_value(-100.0) == "-100"

    def test_fractional_float_kept(self):
        """Non-integral floats keep their digits."""
        assert format_value(2.5) == "2.5"
        assert format_value(37.7749) == "37.7749"

    def test_int_unchanged(self):
        assert format_value(15) == "15"

    def test_missing_value(self):
        """None prints as unknown."""
        assert format_value(None) == "unknown"

    def test_nan(self):
        assert format_value(math.nan) == "NaN"


class TestFormatPopup:
    """Tests for format_popup()."""

    def test_contains_all_fields(self):
        """Popup lists magnitude, latitude, longitude and depth."""
        popup = format_popup(4.2, 37.7749, -122.4194, 10.5)

        assert popup == (
            "Magnitude: 4.2<br>"
            "Latitude: 37.7749<br>"
            "Longitude: -122.4194<br>"
            "Depth: 10.5 km"
        )


class TestStyleFeature:
    """Tests for style_feature() pure function."""

    def test_styles_sample_feature(self):
        """Depth 15 is orange; magnitude 3 gives radius 15."""
        marker = style_feature(SAMPLE_FEATURE)

        assert marker is not None
        assert marker.color == "orange"
        assert marker.fill_color == "orange"
        assert marker.radius == 15

    def test_popup_text(self):
        """Popup shows browser-formatted numbers with km unit."""
        marker = style_feature(SAMPLE_FEATURE)

        assert "Magnitude: 3" in marker.popup_text
        assert "Magnitude: 3.0" not in marker.popup_text
        assert "Depth: 15 km" in marker.popup_text
        assert "Latitude: 40" in marker.popup_text
        assert "Longitude: -100" in marker.popup_text

    def test_position_is_lat_lon(self):
        """GeoJSON [lon, lat] becomes (lat, lon)."""
        marker = style_feature(SAMPLE_FEATURE)

        assert marker.position == (40, -100)
        assert marker.latitude == 40
        assert marker.longitude == -100

    def test_color_and_fill_color_match(self):
        """Both colors come from the depth."""
        feature = copy.deepcopy(SAMPLE_FEATURE)
        feature["geometry"]["coordinates"][2] = 120

        marker = style_feature(feature)

        assert marker.color == marker.fill_color == "green"

    def test_missing_magnitude_degrades(self):
        """Missing mag gives NaN radius, not an exception."""
        feature = copy.deepcopy(SAMPLE_FEATURE)
        del feature["properties"]["mag"]

        marker = style_feature(feature)

        assert marker is not None
        assert math.isnan(marker.radius)
        assert "Magnitude: unknown" in marker.popup_text

    def test_missing_depth_degrades_to_green(self):
        """A two-element coordinate array colors as the deepest bucket."""
        feature = copy.deepcopy(SAMPLE_FEATURE)
        feature["geometry"]["coordinates"] = [-100, 40]

        marker = style_feature(feature)

        assert marker is not None
        assert marker.color == "green"
        assert "Depth: unknown km" in marker.popup_text

    def test_missing_properties(self):
        """A feature with no properties still renders."""
        feature = {"geometry": {"coordinates": [1.5, 2.5, 3]}}

        marker = style_feature(feature)

        assert marker is not None
        assert marker.color == "red"
        assert math.isnan(marker.radius)

    def test_returns_none_without_coordinates(self):
        """A feature that cannot be placed yields None."""
        assert style_feature({"properties": {"mag": 2.0}}) is None
        assert style_feature({"geometry": {"coordinates": [1.0]}}) is None
        assert style_feature({"geometry": None}) is None

    def test_returns_none_for_malformed_feature(self):
        """Wrongly typed fields yield None instead of raising."""
        assert style_feature({"geometry": {"coordinates": [1, 2, "5"]}}) is None
        assert style_feature({"geometry": "POINT (1 2)"}) is None
        assert style_feature({"geometry": {"coordinates": 7}}) is None
        assert style_feature("not a feature") is None
        assert style_feature(None) is None

    def test_does_not_mutate_feature(self):
        """Features are read, never modified."""
        feature = copy.deepcopy(SAMPLE_FEATURE)

        style_feature(feature)

        assert feature == SAMPLE_FEATURE

    def test_marker_is_immutable(self):
        """StyledMarker is frozen (immutable)."""
        marker = style_feature(SAMPLE_FEATURE)

        with pytest.raises(AttributeError):
            marker.radius = 1


class TestStyleFeatures:
    """Tests for style_features()."""

    def test_styles_collection(self):
        """One marker per placeable feature."""
        markers = style_features(SAMPLE_GEOJSON)

        assert len(markers) == 1
        assert isinstance(markers[0], StyledMarker)

    def test_skips_unplaceable_features(self):
        """Features without coordinates are skipped, order preserved."""
        deep = copy.deepcopy(SAMPLE_FEATURE)
        deep["geometry"]["coordinates"][2] = 300
        geojson = {
            "features": [SAMPLE_FEATURE, {"properties": {}}, deep],
        }

        markers = style_features(geojson)

        assert [m.color for m in markers] == ["orange", "green"]

    def test_empty_collection(self):
        assert style_features({"features": []}) == []
        assert style_features({}) == []

    def test_null_features(self):
        assert style_features({"type": "FeatureCollection", "features": None}) == []

    def test_skips_malformed_features(self):
        geojson = {
            "features": [
                SAMPLE_FEATURE,
                "junk",
                {"geometry": {"coordinates": [1, 2, "5"]}},
            ],
        }

        assert len(style_features(geojson)) == 1


class TestCollectionFeatures:
    """Tests for collection_features()."""

    def test_returns_feature_list(self):
        assert collection_features(SAMPLE_GEOJSON) == SAMPLE_GEOJSON["features"]

    def test_missing_or_null_features(self):
        assert collection_features({}) == []
        assert collection_features({"features": None}) == []

    def test_non_list_features(self):
        assert collection_features({"features": {"id": "us1"}}) == []
