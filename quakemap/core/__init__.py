"""Functional Core - Pure functions with no side effects.

This module contains all styling logic as pure functions:
- Depth/magnitude style policy
- Earthquake feature styling
- Tectonic plate line extraction
- Legend text
- Configuration models and validation

All functions here are deterministic and have no I/O.
"""

from quakemap.core.style import DEPTH_BUCKETS, choose_color, choose_radius
from quakemap.core.feature import StyledMarker, style_feature, style_features
from quakemap.core.plates import plate_paths
from quakemap.core.legend import build_legend_html, legend_entries
from quakemap.core.config import Config, validate_config

__all__ = [
    # Style
    "DEPTH_BUCKETS",
    "choose_color",
    "choose_radius",
    # Feature
    "StyledMarker",
    "style_feature",
    "style_features",
    # Plates
    "plate_paths",
    # Legend
    "build_legend_html",
    "legend_entries",
    # Config
    "Config",
    "validate_config",
]
