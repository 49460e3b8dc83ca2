"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- GeoJSON client (HTTP)
- Map session (folium map and overlay groups, HTML output)
- Depth legend control
- Static map snapshots (tile fetching, PNG output)
- Configuration loading (environment/files)

Keep this layer thin and simple. All styling logic should be in core.
"""

from quakemap.shell.geojson_client import GeoJSONClient
from quakemap.shell.map_session import MapSession, create_map_session
from quakemap.shell.legend import DepthLegend, add_legend
from quakemap.shell.static_map_client import StaticMapClient
from quakemap.shell.config_loader import load_config

__all__ = [
    "GeoJSONClient",
    "MapSession",
    "create_map_session",
    "DepthLegend",
    "add_legend",
    "StaticMapClient",
    "load_config",
]
