"""GeoJSON Client - Imperative Shell.

This module handles HTTP communication with the GeoJSON data sources
(earthquake feed and plate boundaries).
All I/O is contained here; styling logic is in the core module.
"""

import logging
from typing import Any

import requests


logger = logging.getLogger(__name__)


# None waits indefinitely
DEFAULT_TIMEOUT = None


class GeoJSONClient:
    """Client for fetching GeoJSON documents over HTTP.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(self, timeout: float | None = DEFAULT_TIMEOUT) -> None:
        """Initialize GeoJSON client.

        Args:
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.timeout = timeout

    def fetch(self, url: str) -> dict[str, Any]:
        """Fetch a GeoJSON document.

        This method performs HTTP I/O. No retries.

        Args:
            url: Document URL

        Returns:
            Parsed GeoJSON object

        Raises:
            requests.RequestException: If the request fails or returns non-2xx
            ValueError: If the body is not a JSON object
        """
        logger.info("Fetching GeoJSON from %s", url)

        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(
                f"Expected a GeoJSON object from {url}, got {type(data).__name__}"
            )

        logger.info(
            "Fetched %d features from %s",
            len(data.get("features") or []),
            url,
        )

        return data
