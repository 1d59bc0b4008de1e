"""Locator Service - Wires Functional Core and Imperative Shell.

This module coordinates dataset refreshes and inbound message replies.
It's the "glue" between the dataset client, the pure core and the
per-dataset ResourceFinder instances.
"""

import logging
import threading
from dataclasses import dataclass, field

from sms_locator.core.config import Config, DatasetConfig
from sms_locator.core.errors import LocatorError
from sms_locator.core.extractor import extract_postal_codes
from sms_locator.core.formatter import EMPTY_QUERY_MESSAGE
from sms_locator.core.gazetteer import PostalGazetteer
from sms_locator.core.resource import build_resource_index
from sms_locator.finder import ResourceFinder
from sms_locator.shell.dataset_client import DatasetClient, DatasetFetchError


logger = logging.getLogger(__name__)


@dataclass
class RefreshResult:
    """Result of refreshing every configured dataset.

    Attributes:
        updated: Labels of datasets whose index was replaced
        errors: Error messages for datasets that kept their old index
    """
    updated: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if every dataset was refreshed."""
        return len(self.errors) == 0

    @property
    def summary(self) -> str:
        """Human-readable summary of the refresh."""
        return f"{len(self.updated)} datasets updated, {len(self.errors)} failed"


class LocatorService:
    """Coordinates dataset refreshes and SMS replies.

    This class wires together:
    - Dataset client (fetches GeoJSON)
    - Core functions (indexing, extraction, locating)
    - One ResourceFinder per configured dataset
    """

    def __init__(
        self,
        config: Config,
        gazetteer: PostalGazetteer,
        dataset_client: DatasetClient | None = None,
    ) -> None:
        """Initialize service with configuration.

        Args:
            config: Application configuration
            gazetteer: Postal code table
            dataset_client: Dataset client (created if not provided)
        """
        self.config = config
        self.gazetteer = gazetteer
        self.dataset_client = dataset_client or DatasetClient(
            timeout=config.request_timeout_seconds,
        )
        self.finders: dict[str, ResourceFinder] = {
            dataset.label: ResourceFinder(
                gazetteer,
                resource_kind=dataset.resource_kind,
                radius_miles=config.radius_miles,
                max_results=config.max_results_per_query,
                segment_budget=config.segment_budget,
            )
            for dataset in config.datasets
        }
        self._stop_event = threading.Event()
        self._refresh_thread: threading.Thread | None = None

    def _refresh_dataset(self, dataset: DatasetConfig) -> None:
        """Fetch one dataset, index it and swap it into its finder."""
        features = self.dataset_client.fetch_features(dataset.url)
        index = build_resource_index(features, dataset, self.gazetteer)
        logger.info(
            "Extracted %d %s in %d distinct postal codes from %d features",
            index.record_count,
            dataset.resource_kind,
            len(index),
            len(features),
        )
        self.finders[dataset.label].update_index(index)

    def refresh(self) -> RefreshResult:
        """Refresh every dataset once.

        A dataset that fails keeps serving its previous index.

        Returns:
            RefreshResult with details of what happened
        """
        result = RefreshResult()

        for dataset in self.config.datasets:
            try:
                self._refresh_dataset(dataset)
            except (DatasetFetchError, LocatorError) as e:
                error_msg = f"Failed to refresh {dataset.label}: {e}"
                logger.error(error_msg)
                result.errors.append(error_msg)
                continue
            result.updated.append(dataset.label)

        logger.info("Refresh complete: %s", result.summary)
        return result

    def reply(self, message_text: str | None) -> list[str]:
        """Build the reply segments for an inbound message.

        Args:
            message_text: Inbound SMS body

        Returns:
            Reply segments for every dataset, in configuration order
        """
        postal_codes = extract_postal_codes(message_text, self.gazetteer)
        if not postal_codes:
            logger.info("No postal codes found in message")
            return [EMPTY_QUERY_MESSAGE]

        segments: list[str] = []
        for finder in self.finders.values():
            segments.extend(finder.locate(postal_codes))
        return segments

    def status(self) -> dict[str, dict[str, int]]:
        """Report postal code and record counts per dataset."""
        return {
            label: {
                "postal_codes": len(finder.index),
                "records": finder.index.record_count,
            }
            for label, finder in self.finders.items()
        }

    @property
    def has_data(self) -> bool:
        """True if any dataset has at least one record."""
        return any(len(finder.index) > 0 for finder in self.finders.values())

    def _refresh_loop(self) -> None:
        interval = self.config.refresh_interval_seconds
        while not self._stop_event.wait(interval):
            try:
                self.refresh()
            except Exception:
                logger.exception("Unexpected error during dataset refresh")

    def start_refresh_loop(self) -> None:
        """Refresh datasets every refresh_interval_seconds on a daemon thread."""
        if self._refresh_thread is not None and self._refresh_thread.is_alive():
            return
        self._stop_event.clear()
        self._refresh_thread = threading.Thread(
            target=self._refresh_loop,
            name="dataset-refresh",
            daemon=True,
        )
        self._refresh_thread.start()
        logger.info(
            "Refreshing datasets every %d seconds",
            self.config.refresh_interval_seconds,
        )

    def stop_refresh_loop(self, timeout: float | None = None) -> None:
        """Stop the refresh thread and wait for it to finish."""
        self._stop_event.set()
        if self._refresh_thread is not None:
            self._refresh_thread.join(timeout)
            self._refresh_thread = None
