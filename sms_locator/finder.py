"""Resource Finder - Entry point for proximity lookups.

Holds the current resource index snapshot and answers locate requests
against it using the pure core pipeline.
"""

import logging

from sms_locator.core.errors import EmptyQuery, UnknownPostalCode
from sms_locator.core.formatter import DEFAULT_SEGMENT_BUDGET, EMPTY_QUERY_MESSAGE
from sms_locator.core.gazetteer import PostalGazetteer
from sms_locator.core.locator import (
    DEFAULT_MAX_RESULTS,
    PostalLookup,
    locate_segments,
    make_lookup,
)
from sms_locator.core.resource import ResourceIndex


logger = logging.getLogger(__name__)


class ResourceFinder:
    """Finds resources near postal codes.

    The index is replaced whole by update_index(); locate() reads the
    reference once and uses that snapshot for the whole request, so a
    concurrent refresh never produces a mixed view.
    """

    def __init__(
        self,
        gazetteer: PostalGazetteer,
        index: ResourceIndex | None = None,
        resource_kind: str = "resources",
        radius_miles: float = 5.0,
        max_results: int = DEFAULT_MAX_RESULTS,
        segment_budget: int = DEFAULT_SEGMENT_BUDGET,
    ) -> None:
        """Initialize the finder.

        Args:
            gazetteer: Postal code table
            index: Initial resource index (empty if not provided)
            resource_kind: Plural noun used in replies
            radius_miles: Search radius around each query postal code
            max_results: Resources listed per query postal code
            segment_budget: Maximum reply segment length in characters
        """
        self.gazetteer = gazetteer
        self.resource_kind = resource_kind
        self.radius_miles = radius_miles
        self.max_results = max_results
        self.segment_budget = segment_budget
        self._index = index or ResourceIndex.empty()

    @property
    def index(self) -> ResourceIndex:
        """The current resource index snapshot."""
        return self._index

    def update_index(self, index: ResourceIndex) -> None:
        """Replace the resource index used by subsequent lookups."""
        self._index = index
        logger.info(
            "Resource index updated: %d %s in %d postal codes",
            index.record_count,
            self.resource_kind,
            len(index),
        )

    def _build_lookups(self, postal_codes: list[str]) -> list[PostalLookup]:
        """Resolve query codes, skipping unknown and repeated ones."""
        lookups: list[PostalLookup] = []
        seen: set[str] = set()

        for code in postal_codes:
            if code in seen:
                continue
            try:
                lookups.append(make_lookup(code, self.gazetteer, self.radius_miles))
            except UnknownPostalCode as e:
                logger.warning("Skipping postal code: %s", e)
                continue
            seen.add(code)

        return lookups

    def locate(self, postal_codes: list[str]) -> list[str]:
        """Find resources near each postal code and render the reply.

        Args:
            postal_codes: Query postal codes, in message order

        Returns:
            Plain-text reply segments
        """
        if not postal_codes:
            return [EMPTY_QUERY_MESSAGE]

        index = self._index
        lookups = self._build_lookups(postal_codes)

        try:
            segments = locate_segments(
                lookups,
                index,
                self.resource_kind,
                limit=self.max_results,
                budget=self.segment_budget,
            )
        except EmptyQuery:
            logger.info("No resolvable postal codes in %s", postal_codes)
            return [EMPTY_QUERY_MESSAGE]

        logger.info(
            "Located %s for %s: %d segments",
            self.resource_kind,
            ", ".join(lookup.code for lookup in lookups),
            len(segments),
        )
        return segments
