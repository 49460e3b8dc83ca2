"""Static Map Client - Imperative Shell.

This module renders a PNG snapshot of the earthquake and plate layers
using OpenStreetMap tiles. All I/O is contained here; marker styling is
in the core module.
"""

import io
import logging
import math
from dataclasses import dataclass

from staticmap import StaticMap, CircleMarker, Line

from quakemap.core.feature import StyledMarker
from quakemap.core.style import PLATE_LINE_STYLE


logger = logging.getLogger(__name__)


@dataclass
class MapImageResult:
    """Result of map image generation.

    Attributes:
        success: Whether the image was generated successfully
        image_bytes: PNG image data if successful
        error: Error message if failed
    """
    success: bool
    image_bytes: bytes | None = None
    error: str | None = None


class StaticMapClient:
    """Client for generating static map images.

    This is part of the imperative shell - it handles I/O (fetching map tiles
    and rendering images).
    """

    def __init__(self, tile_url: str | None = None) -> None:
        """Initialize static map client.

        Args:
            tile_url: Custom tile URL template. Defaults to OpenStreetMap.
        """
        # Default to OpenStreetMap tiles
        self.tile_url = tile_url or "https://tile.openstreetmap.org/{z}/{x}/{y}.png"

    def generate_map(
        self,
        markers: list[StyledMarker],
        plate_lines: list[list[tuple[float, float]]],
        width: int = 800,
        height: int = 400,
    ) -> MapImageResult:
        """Generate a static snapshot of the rendered layers.

        This method performs I/O (fetches map tiles from tile server).
        Zoom and center are fitted to the drawn features. Markers with a
        non-finite or non-positive radius cannot be drawn and are left out.

        Args:
            markers: Styled earthquake markers
            plate_lines: Plate boundary paths as (lat, lon) points
            width: Image width in pixels
            height: Image height in pixels

        Returns:
            MapImageResult with image bytes or error
        """
        drawable = [
            m for m in markers
            if math.isfinite(m.radius) and m.radius > 0
        ]

        if not drawable and not plate_lines:
            return MapImageResult(success=False, error="Nothing to render")

        logger.info(
            "Generating static map with %d markers and %d plate lines",
            len(drawable),
            len(plate_lines),
        )

        try:
            static_map = StaticMap(width, height, url_template=self.tile_url)

            # Lines first so markers draw on top; staticmap wants (lon, lat)
            for path in plate_lines:
                static_map.add_line(Line(
                    [(lon, lat) for lat, lon in path],
                    PLATE_LINE_STYLE.color,
                    PLATE_LINE_STYLE.weight,
                ))

            for marker in drawable:
                static_map.add_marker(CircleMarker(
                    (marker.longitude, marker.latitude),
                    marker.fill_color,
                    max(1, round(marker.radius)),
                ))

            image = static_map.render()

            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
            image_bytes = buffer.getvalue()

            logger.info(
                "Generated map image: %d bytes",
                len(image_bytes),
            )

            return MapImageResult(
                success=True,
                image_bytes=image_bytes,
            )

        except Exception as e:
            logger.error("Failed to generate map: %s", str(e))
            return MapImageResult(
                success=False,
                error=str(e),
            )
