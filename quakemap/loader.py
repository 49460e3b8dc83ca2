"""Data Loader - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the GeoJSON client, the
pure styling core, and the map session. The two fetches are strictly
sequenced: plate boundaries are requested only after the earthquake layer
has been fully rendered and attached.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from quakemap.core.config import Config
from quakemap.core.feature import collection_features, style_features
from quakemap.core.plates import plate_paths
from quakemap.shell.geojson_client import GeoJSONClient
from quakemap.shell.legend import add_legend
from quakemap.shell.map_session import MapSession, create_map_session


logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Result of loading both overlay layers.

    Attributes:
        earthquakes_rendered: Markers added to the earthquake group
        earthquakes_skipped: Features that could not be placed on the map
        plates_rendered: Boundary lines added to the tectonic group
        errors: Fetch errors that left a layer empty
    """
    earthquakes_rendered: int = 0
    earthquakes_skipped: int = 0
    plates_rendered: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if both layers loaded."""
        return len(self.errors) == 0

    @property
    def summary(self) -> str:
        """Human-readable summary of the load."""
        return (
            f"Rendered {self.earthquakes_rendered} earthquakes "
            f"({self.earthquakes_skipped} skipped), "
            f"{self.plates_rendered} plate boundary lines, "
            f"{len(self.errors)} errors"
        )


async def _fetch(client: GeoJSONClient, url: str) -> dict[str, Any]:
    """Run the blocking fetch in a worker thread so the event loop is free."""
    return await asyncio.to_thread(client.fetch, url)


def render_earthquakes(session: MapSession, geojson: dict[str, Any], result: LoadResult) -> None:
    """Render every earthquake feature into the session's earthquake group."""
    markers = style_features(geojson)

    unstyled = len(collection_features(geojson)) - len(markers)
    if unstyled:
        result.earthquakes_skipped += unstyled
        logger.warning("Skipping %d earthquakes without usable coordinates", unstyled)

    for marker in markers:
        try:
            session.add_marker(marker)
        except (TypeError, ValueError) as e:
            result.earthquakes_skipped += 1
            logger.warning("Skipping earthquake at %s: %s", marker.position, e)
            continue

        result.earthquakes_rendered += 1


def render_plates(session: MapSession, geojson: dict[str, Any], result: LoadResult) -> None:
    """Render every plate boundary path into the session's tectonic group."""
    for path in plate_paths(geojson):
        try:
            session.add_plate_line(path)
        except (TypeError, ValueError) as e:
            logger.warning("Skipping plate boundary line: %s", e)
            continue

        result.plates_rendered += 1


async def load_layers(
    session: MapSession,
    client: GeoJSONClient,
    config: Config,
) -> LoadResult:
    """Fetch and render the earthquake layer, then the plate layer.

    This is the main loading sequence that:
    1. Fetches the earthquake feed and renders it into its group
    2. Attaches the earthquake group to the map
    3. Only then fetches the plate boundaries and renders them
    4. Attaches the tectonic group to the map

    A failed fetch is logged and recorded; its group stays empty and
    unattached. If the earthquake fetch fails the plate fetch is never
    started.

    Args:
        session: Map session holding both overlay groups
        client: GeoJSON client
        config: Application configuration (source URLs)

    Returns:
        LoadResult with details of what happened
    """
    result = LoadResult()

    # Step 1: Earthquakes
    try:
        earthquakes = await _fetch(client, config.earthquake_feed_url)
    except (requests.RequestException, ValueError) as e:
        error_msg = f"Failed to fetch earthquakes: {e}"
        logger.error(error_msg)
        result.errors.append(error_msg)
        return result

    render_earthquakes(session, earthquakes, result)
    session.attach(session.earthquakes)

    logger.info(
        "Rendered %d earthquakes (%d skipped)",
        result.earthquakes_rendered,
        result.earthquakes_skipped,
    )

    # Step 2: Tectonic plates, strictly after step 1
    try:
        plates = await _fetch(client, config.plates_url)
    except (requests.RequestException, ValueError) as e:
        error_msg = f"Failed to fetch tectonic plates: {e}"
        logger.error(error_msg)
        result.errors.append(error_msg)
        return result

    render_plates(session, plates, result)
    session.attach(session.tectonics)

    logger.info("Rendered %d plate boundary lines", result.plates_rendered)

    return result


async def build_map(
    config: Config,
    client: GeoJSONClient | None = None,
) -> tuple[MapSession, LoadResult]:
    """Build a complete map: session, legend, both layers, layer control.

    Args:
        config: Application configuration
        client: GeoJSON client (created if not provided)

    Returns:
        Tuple of (finalized MapSession, LoadResult)
    """
    client = client or GeoJSONClient(timeout=config.request_timeout)

    session = create_map_session(config)
    add_legend(session, position=config.legend_position)

    result = await load_layers(session, client, config)
    session.finalize()

    return session, result
