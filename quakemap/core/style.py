"""Style policy - Pure functions.

This module maps earthquake depth to a marker color and magnitude to a
marker radius. The depth bucket table is shared with the legend so the
displayed ranges always match the colors on the map.
All functions are pure with no side effects.
"""

import math
from dataclasses import dataclass


# Marker radius in pixels per unit of magnitude
RADIUS_SCALE = 5


@dataclass(frozen=True)
class DepthBucket:
    """One depth range and its display color.

    Ranges are half-open: a bucket covers (previous upper, upper].

    Attributes:
        upper: Inclusive upper bound in km, None for the open last bucket
        color: CSS color name used for marker and legend swatch
    """
    upper: float | None
    color: str


@dataclass(frozen=True)
class LineStyle:
    """Stroke style for a polyline.

    Attributes:
        color: CSS color name
        weight: Stroke width in pixels
    """
    color: str
    weight: int


# Ordered shallow to deep. The first bucket has no lower bound and the
# last has no upper bound, so together they cover every depth.
DEPTH_BUCKETS: tuple[DepthBucket, ...] = (
    DepthBucket(upper=10, color="red"),
    DepthBucket(upper=25, color="orange"),
    DepthBucket(upper=40, color="yellow"),
    DepthBucket(upper=55, color="pink"),
    DepthBucket(upper=70, color="blue"),
    DepthBucket(upper=None, color="green"),
)

PLATE_LINE_STYLE = LineStyle(color="purple", weight=3)


def choose_color(depth: float | None) -> str:
    """Get the marker color for an earthquake depth.

    Pure function. Missing (None) or NaN depths fall through every
    comparison and land in the deepest bucket.

    Args:
        depth: Hypocentral depth in kilometers

    Returns:
        CSS color name (e.g., "red")
    """
    if depth is not None:
        for bucket in DEPTH_BUCKETS:
            if bucket.upper is not None and depth <= bucket.upper:
                return bucket.color
    return DEPTH_BUCKETS[-1].color


def choose_radius(magnitude: float | None) -> float:
    """Get the marker radius for an earthquake magnitude.

    Pure function. The scale is linear and unclamped, so zero and negative
    magnitudes give zero and negative radii. A missing magnitude gives NaN.

    Args:
        magnitude: Earthquake magnitude

    Returns:
        Marker radius in pixels
    """
    if magnitude is None:
        return math.nan
    return magnitude * RADIUS_SCALE
