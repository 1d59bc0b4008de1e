"""Dataset Client - Imperative Shell.

This module fetches resource location datasets (GeoJSON) over HTTP.
All I/O is contained here; parsing and indexing are in the core module.
"""

import logging
from typing import Any

import requests


logger = logging.getLogger(__name__)


# Default timeout for dataset requests (seconds)
DEFAULT_TIMEOUT = 30


class DatasetFetchError(Exception):
    """A dataset could not be fetched or was not GeoJSON."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class DatasetClient:
    """Client for fetching GeoJSON resource datasets.

    This is part of the imperative shell - it handles HTTP I/O.
    Each fetch is a single attempt; the refresh loop retries on its
    next cycle.
    """

    def __init__(self, timeout: int = DEFAULT_TIMEOUT) -> None:
        """Initialize dataset client.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout

    def fetch_features(self, url: str) -> list[dict[str, Any]]:
        """Fetch a GeoJSON FeatureCollection and return its features.

        This method performs HTTP I/O. A bare JSON array of features is
        accepted as well.

        Args:
            url: Dataset URL

        Returns:
            List of GeoJSON feature dicts

        Raises:
            DatasetFetchError: On network errors, non-200 responses,
                non-JSON content or an unexpected document shape
        """
        logger.info("Fetching dataset from %s", url)

        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DatasetFetchError(url, str(e)) from e

        if response.status_code != 200:
            raise DatasetFetchError(url, f"status code {response.status_code}")

        content_type = response.headers.get("Content-Type", "")
        if not content_type.startswith("application/json"):
            raise DatasetFetchError(
                url,
                f"expected application/json but received {content_type or 'nothing'}",
            )

        try:
            data = response.json()
        except ValueError as e:
            raise DatasetFetchError(url, f"invalid JSON: {e}") from e

        if isinstance(data, dict):
            features = data.get("features")
        else:
            features = data

        if not isinstance(features, list):
            raise DatasetFetchError(url, "response has no feature list")

        features = [f for f in features if isinstance(f, dict)]
        logger.info("Fetched %d features from %s", len(features), url)
        return features
