"""Tests for configuration models and validation - Pure functions."""

import pytest

from quakemap.core.config import (
    EARTHQUAKE_FEED_URL,
    PLATES_URL,
    BaseLayer,
    Config,
    ValidationError,
    ValidationResult,
    default_base_layers,
    validate_config,
    validate_coordinates,
    validate_url,
)


class TestConfigDefaults:
    """Tests for Config defaults."""

    def test_default_sources(self):
        config = Config()

        assert config.earthquake_feed_url == EARTHQUAKE_FEED_URL
        assert "all_week.geojson" in config.earthquake_feed_url
        assert config.plates_url == PLATES_URL
        assert "PB2002_boundaries.json" in config.plates_url

    def test_default_view(self):
        """Map opens over North America at zoom 3."""
        config = Config()

        assert config.center == (37.09, -95.71)
        assert config.zoom == 3
        assert config.legend_position == "bottomright"

    def test_no_timeout_by_default(self):
        assert Config().request_timeout is None

    def test_default_base_layers(self):
        """Streets is shown, Topography is selectable."""
        layers = default_base_layers()

        assert [layer.name for layer in layers] == ["Streets", "Topography"]
        assert layers[0].show is True
        assert layers[1].show is False

    def test_base_layer_lists_are_independent(self):
        a, b = Config(), Config()

        a.base_layers.append(BaseLayer(name="X", tiles="t", attribution=""))

        assert len(b.base_layers) == 2


class TestValidateCoordinates:
    """Tests for validate_coordinates()."""

    def test_valid(self):
        assert validate_coordinates(37.0, -95.0, "center") == []

    def test_latitude_out_of_range(self):
        errors = validate_coordinates(91.0, 0.0, "center")

        assert len(errors) == 1
        assert "Latitude" in errors[0].message

    def test_longitude_out_of_range(self):
        errors = validate_coordinates(0.0, -181.0, "center")

        assert len(errors) == 1
        assert "Longitude" in errors[0].message


class TestValidateUrl:
    """Tests for validate_url()."""

    def test_valid(self):
        assert validate_url("https://example.com/a.geojson", "url") == []

    def test_empty(self):
        errors = validate_url("", "url")

        assert errors[0].severity == "error"

    def test_placeholder_is_warning(self):
        errors = validate_url("${FEED_URL}", "url")

        assert errors[0].severity == "warning"

    def test_non_http_scheme(self):
        errors = validate_url("ftp://example.com/a.geojson", "url")

        assert errors[0].severity == "error"


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_defaults_are_valid(self):
        result = validate_config(Config())

        assert result.valid is True
        assert result.errors == []

    def test_bad_zoom(self):
        result = validate_config(Config(zoom=25))

        assert result.valid is False
        assert result.critical_errors[0].field == "zoom"

    def test_bad_legend_position(self):
        result = validate_config(Config(legend_position="middle"))

        assert result.valid is False
        assert result.critical_errors[0].field == "legend_position"

    def test_no_base_layers(self):
        result = validate_config(Config(base_layers=[]))

        assert result.valid is False

    def test_duplicate_base_layer_names(self):
        layers = [
            BaseLayer(name="A", tiles="t1", attribution="", show=True),
            BaseLayer(name="A", tiles="t2", attribution=""),
        ]

        result = validate_config(Config(base_layers=layers))

        assert result.valid is False

    def test_no_shown_base_layer_is_warning(self):
        layers = [BaseLayer(name="A", tiles="t1", attribution="")]

        result = validate_config(Config(base_layers=layers))

        assert result.valid is True
        assert len(result.warnings) == 1

    def test_non_positive_timeout(self):
        result = validate_config(Config(request_timeout=0))

        assert result.valid is False

    def test_bad_snapshot_size(self):
        result = validate_config(Config(snapshot_width=0))

        assert result.valid is False


class TestValidationResult:
    """Tests for ValidationResult properties."""

    def test_splits_warnings_and_errors(self):
        result = ValidationResult(
            valid=False,
            errors=[
                ValidationError(field="a", message="bad"),
                ValidationError(field="b", message="meh", severity="warning"),
            ],
        )

        assert [e.field for e in result.critical_errors] == ["a"]
        assert [e.field for e in result.warnings] == ["b"]
