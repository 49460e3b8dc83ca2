"""Tectonic plate boundaries - Pure functions.

This module extracts drawable line paths from the plate boundary GeoJSON.
GeoJSON stores positions as [lon, lat]; paths are returned as
(latitude, longitude) pairs, the order map markers use.
"""

from typing import Any


def _to_path(positions: list[list[float]]) -> list[tuple[float, float]]:
    """Convert GeoJSON positions to a (lat, lon) path."""
    return [
        (position[1], position[0])
        for position in positions
        if isinstance(position, (list, tuple)) and len(position) >= 2
    ]


def _line_parts(geometry_type: str, coords: list) -> list:
    """Get the position lists a geometry is drawn as.

    Polygon rings are drawn as their outlines.
    """
    if geometry_type == "LineString":
        return [coords]
    if geometry_type in ("MultiLineString", "Polygon"):
        return coords
    if geometry_type == "MultiPolygon":
        return [ring for polygon in coords if isinstance(polygon, list) for ring in polygon]
    return []


def geometry_paths(geometry: dict[str, Any]) -> list[list[tuple[float, float]]]:
    """Get the line paths of a single geometry.

    Pure function. LineString yields one path, MultiLineString one per
    part, Polygon and MultiPolygon one per ring. A GeometryCollection
    yields the paths of its members. Points have no boundary lines and
    yield nothing.

    Args:
        geometry: GeoJSON geometry object

    Returns:
        List of paths, each with at least two points
    """
    if not isinstance(geometry, dict):
        return []

    geometry_type = geometry.get("type")

    if geometry_type == "GeometryCollection":
        paths = []
        for member in geometry.get("geometries") or []:
            paths.extend(geometry_paths(member))
        return paths

    coords = geometry.get("coordinates") or []
    parts = _line_parts(geometry_type, coords)
    paths = [_to_path(part) for part in parts if isinstance(part, list)]
    return [path for path in paths if len(path) >= 2]


def plate_paths(geojson: dict[str, Any]) -> list[list[tuple[float, float]]]:
    """Get every boundary line path in a plate GeoJSON document.

    Pure function. Accepts a FeatureCollection, a single Feature, or a
    bare geometry.

    Args:
        geojson: GeoJSON document of plate boundaries

    Returns:
        Flat list of (lat, lon) paths in feature order
    """
    document_type = geojson.get("type")

    if document_type == "Feature":
        return geometry_paths(geojson.get("geometry") or {})
    if document_type not in (None, "FeatureCollection"):
        return geometry_paths(geojson)

    paths = []

    for feature in geojson.get("features") or []:
        if not isinstance(feature, dict):
            continue
        paths.extend(geometry_paths(feature.get("geometry") or {}))

    return paths
