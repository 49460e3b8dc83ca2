"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer. Defaults reproduce the
standard weekly earthquake map, so an empty configuration is valid.
"""

from dataclasses import dataclass, field


# USGS weekly summary feed, all magnitudes
EARTHQUAKE_FEED_URL = (
    "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_week.geojson"
)

# PB2002 plate boundary dataset
PLATES_URL = (
    "https://raw.githubusercontent.com/fraxen/tectonicplates/master/"
    "GeoJSON/PB2002_boundaries.json"
)

STREETS_TILES = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
STREETS_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
    "contributors"
)

TOPO_TILES = "https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png"
TOPO_ATTRIBUTION = (
    'Map data: &copy; <a href="https://www.openstreetmap.org/">OpenStreetMap</a> '
    'contributors, <a href="http://viewfinderpanoramas.org">SRTM</a> | '
    'Map style: &copy; <a href="https://opentopomap.org/">OpenTopoMap</a> '
    '(<a href="https://creativecommons.org/licenses/by-sa/3.0/">CC-BY-SA</a>)'
)

LEGEND_POSITIONS = ("topleft", "topright", "bottomleft", "bottomright")


@dataclass(frozen=True)
class BaseLayer:
    """A selectable base map tile layer.

    Attributes:
        name: Label in the layer control
        tiles: Tile URL template ({s}, {z}, {x}, {y})
        attribution: HTML attribution text
        show: Whether this layer is visible when the map opens
    """
    name: str
    tiles: str
    attribution: str
    show: bool = False


def default_base_layers() -> list[BaseLayer]:
    """Streets (shown) and topography base layers."""
    return [
        BaseLayer(
            name="Streets",
            tiles=STREETS_TILES,
            attribution=STREETS_ATTRIBUTION,
            show=True,
        ),
        BaseLayer(
            name="Topography",
            tiles=TOPO_TILES,
            attribution=TOPO_ATTRIBUTION,
        ),
    ]


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        earthquake_feed_url: GeoJSON feed of earthquake points
        plates_url: GeoJSON of tectonic plate boundaries
        center_latitude: Initial map center latitude
        center_longitude: Initial map center longitude
        zoom: Initial zoom level
        base_layers: Base tile layers offered in the layer control
        legend_position: Map corner for the depth legend
        output_path: Where the rendered HTML page is written
        request_timeout: HTTP timeout in seconds (None waits indefinitely)
        snapshot_width: Static PNG snapshot width in pixels
        snapshot_height: Static PNG snapshot height in pixels
    """
    earthquake_feed_url: str = EARTHQUAKE_FEED_URL
    plates_url: str = PLATES_URL
    center_latitude: float = 37.09
    center_longitude: float = -95.71
    zoom: int = 3
    base_layers: list[BaseLayer] = field(default_factory=default_base_layers)
    legend_position: str = "bottomright"
    output_path: str = "earthquake_map.html"
    request_timeout: float | None = None
    snapshot_width: int = 800
    snapshot_height: int = 400

    @property
    def center(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.center_latitude, self.center_longitude)


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_url(url: str, field_name: str) -> list[ValidationError]:
    """Validate that a URL is set and uses HTTP(S).

    Pure function. An unresolved ${...} placeholder is reported as a
    warning, since the fetch will simply fail and leave its layer empty.
    """
    if not url:
        return [ValidationError(field=field_name, message="URL is empty")]

    if url.startswith("${"):
        return [ValidationError(
            field=field_name,
            message="URL not resolved (still contains placeholder)",
            severity="warning",
        )]

    if not url.startswith(("http://", "https://")):
        return [ValidationError(
            field=field_name,
            message=f"URL must start with http:// or https://, got {url!r}",
        )]

    return []


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    errors.extend(validate_url(config.earthquake_feed_url, "earthquake_feed_url"))
    errors.extend(validate_url(config.plates_url, "plates_url"))

    errors.extend(validate_coordinates(
        config.center_latitude, config.center_longitude,
        "center",
    ))

    if not 0 <= config.zoom <= 18:
        errors.append(ValidationError(
            field="zoom",
            message=f"Zoom {config.zoom} out of range [0, 18]",
        ))

    if config.legend_position not in LEGEND_POSITIONS:
        errors.append(ValidationError(
            field="legend_position",
            message=(
                f"Unknown legend position '{config.legend_position}', "
                f"expected one of {', '.join(LEGEND_POSITIONS)}"
            ),
        ))

    # Base layers
    if not config.base_layers:
        errors.append(ValidationError(
            field="base_layers",
            message="No base layers configured",
        ))
    else:
        names = [layer.name for layer in config.base_layers]
        for i, layer in enumerate(config.base_layers):
            if not layer.tiles:
                errors.append(ValidationError(
                    field=f"base_layers[{i}].tiles",
                    message="Tile URL is empty",
                ))
            if names.count(layer.name) > 1:
                errors.append(ValidationError(
                    field=f"base_layers[{i}].name",
                    message=f"Duplicate base layer name '{layer.name}'",
                ))

        shown = [layer for layer in config.base_layers if layer.show]
        if len(shown) != 1:
            errors.append(ValidationError(
                field="base_layers",
                message=f"Expected exactly one base layer shown, got {len(shown)}",
                severity="warning",
            ))

    if config.request_timeout is not None and config.request_timeout <= 0:
        errors.append(ValidationError(
            field="request_timeout",
            message=f"Timeout must be positive, got {config.request_timeout}",
        ))

    if config.snapshot_width <= 0 or config.snapshot_height <= 0:
        errors.append(ValidationError(
            field="snapshot",
            message=(
                f"Snapshot size must be positive, got "
                f"{config.snapshot_width}x{config.snapshot_height}"
            ),
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
