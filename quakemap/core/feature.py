"""Earthquake feature styling - Pure functions.

This module turns USGS GeoJSON features into styled marker view-models.
Fields are read permissively: a missing magnitude or depth degrades the
marker (NaN radius, deepest color) instead of raising.
All functions are pure with no side effects.
"""

import math
from dataclasses import dataclass
from typing import Any

from quakemap.core.style import choose_color, choose_radius


@dataclass(frozen=True)
class StyledMarker:
    """Immutable view-model for one earthquake marker.

    Attributes:
        position: (latitude, longitude) of the epicenter
        color: Stroke color
        fill_color: Fill color
        radius: Circle radius in pixels
        popup_text: HTML shown when the marker is clicked
    """
    position: tuple[float, float]
    color: str
    fill_color: str
    radius: float
    popup_text: str

    @property
    def latitude(self) -> float:
        return self.position[0]

    @property
    def longitude(self) -> float:
        return self.position[1]


def format_value(value: Any) -> str:
    """Format a feed value the way a browser prints a number.

    Pure function. Integral floats drop the trailing ".0" so 3.0 prints
    as "3"; missing values print as "unknown".
    """
    if value is None:
        return "unknown"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def format_popup(
    magnitude: Any,
    latitude: Any,
    longitude: Any,
    depth: Any,
) -> str:
    """Format the popup body for an earthquake marker.

    Pure function.

    Returns:
        HTML fragment with one line per field
    """
    lines = [
        f"Magnitude: {format_value(magnitude)}",
        f"Latitude: {format_value(latitude)}",
        f"Longitude: {format_value(longitude)}",
        f"Depth: {format_value(depth)} km",
    ]
    return "<br>".join(lines)


def collection_features(geojson: dict[str, Any]) -> list[Any]:
    """Get the feature list of a FeatureCollection, [] if absent or null."""
    features = geojson.get("features") or []
    return features if isinstance(features, list) else []


def style_feature(feature: dict[str, Any]) -> StyledMarker | None:
    """Style a single GeoJSON point feature.

    Pure function: reads the feature, never mutates it.

    Args:
        feature: GeoJSON feature with [lon, lat, depth] coordinates

    Returns:
        StyledMarker, or None if the feature has no longitude/latitude
        to place it at or its fields have the wrong types
    """
    if not isinstance(feature, dict):
        return None

    try:
        geometry = feature.get("geometry") or {}
        properties = feature.get("properties") or {}
        coords = geometry.get("coordinates") or []

        if len(coords) < 2:
            return None

        longitude, latitude = coords[0], coords[1]
        depth = coords[2] if len(coords) > 2 else None
        magnitude = properties.get("mag")

        color = choose_color(depth)
        radius = choose_radius(magnitude)
    except (AttributeError, TypeError, ValueError):
        return None

    return StyledMarker(
        position=(latitude, longitude),
        color=color,
        fill_color=color,
        radius=radius,
        popup_text=format_popup(magnitude, latitude, longitude, depth),
    )


def style_features(geojson: dict[str, Any]) -> list[StyledMarker]:
    """Style every placeable feature in a FeatureCollection.

    Pure function: unplaceable or malformed features are skipped, order
    is preserved.

    Args:
        geojson: GeoJSON FeatureCollection from the earthquake feed

    Returns:
        List of styled markers
    """
    markers = []

    for feature in collection_features(geojson):
        marker = style_feature(feature)
        if marker is not None:
            markers.append(marker)

    return markers
