"""Depth legend - Pure functions.

This module builds the legend panel text from the depth bucket table, so
the ranges shown to the user are the ranges choose_color() applies.
"""

from dataclasses import dataclass

from quakemap.core.feature import format_value
from quakemap.core.style import DEPTH_BUCKETS, DepthBucket


LEGEND_TITLE = "Depth Color Legend"


@dataclass(frozen=True)
class LegendEntry:
    """One legend row.

    Attributes:
        color: Swatch color
        label: Human-readable depth range
    """
    color: str
    label: str


def format_range(lower: float | None, upper: float | None) -> str:
    """Describe a half-open depth range (lower, upper].

    Pure function.
    """
    if lower is None and upper is None:
        return "Any depth"
    if lower is None:
        return f"Depth ≤ {format_value(float(upper))} km"
    if upper is None:
        return f"Depth > {format_value(float(lower))} km"
    return (
        f"{format_value(float(lower))} km < Depth "
        f"≤ {format_value(float(upper))} km"
    )


def legend_entries(
    buckets: tuple[DepthBucket, ...] = DEPTH_BUCKETS,
) -> list[LegendEntry]:
    """Build legend rows for a bucket table, shallow to deep.

    Pure function.
    """
    entries = []
    lower = None

    for bucket in buckets:
        entries.append(LegendEntry(
            color=bucket.color,
            label=format_range(lower, bucket.upper),
        ))
        lower = bucket.upper

    return entries


def build_legend_html(
    title: str = LEGEND_TITLE,
    entries: list[LegendEntry] | None = None,
) -> str:
    """Render the legend panel body.

    Pure function.

    Args:
        title: Panel heading
        entries: Legend rows (default: the depth bucket table)

    Returns:
        HTML fragment for the inside of the legend panel
    """
    if entries is None:
        entries = legend_entries()

    rows = [f"<h4>{title}</h4>"]
    for entry in entries:
        rows.append(
            '<div class="legend-item">'
            f'<i style="background: {entry.color}"></i>'
            f"<span>{entry.label}</span>"
            "</div>"
        )

    return "".join(rows)
