"""Proximity resource location - Pure functions.

Resolves query postal codes to lookups, expands the postal codes in
range into resource records, measures each record against every query,
deduplicates, ranks and truncates. All functions are pure with no side
effects; the resource index is only read.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Mapping, Sequence

from sms_locator.core.dedup import dedupe_keep_last
from sms_locator.core.errors import EmptyQuery
from sms_locator.core.formatter import (
    DEFAULT_SEGMENT_BUDGET,
    build_messages,
    format_fragment,
)
from sms_locator.core.gazetteer import PostalGazetteer
from sms_locator.core.geo import Coordinate, calculate_distance
from sms_locator.core.resource import RecordIdentity, ResourceIndex, ResourceRecord


DEFAULT_MAX_RESULTS = 3


@dataclass(frozen=True)
class PostalLookup:
    """A query postal code resolved for one request.

    Attributes:
        code: The query postal code
        coordinate: Centroid of the query postal code
        radius_set: Postal codes within the search radius, in gazetteer order
    """
    code: str
    coordinate: Coordinate
    radius_set: tuple[str, ...]

    @cached_property
    def members(self) -> frozenset[str]:
        """The radius set as a set, for membership tests."""
        return frozenset(self.radius_set)


@dataclass(frozen=True)
class AugmentedRecord:
    """A resource record measured against every lookup in a request.

    Attributes:
        record: The underlying resource record
        distances: Query postal code -> distance in meters
        in_radius: Query postal code -> whether the record's postal code
                   is in that query's radius set
        message: Display fragment (name, address, phone)
    """
    record: ResourceRecord
    distances: Mapping[str, float]
    in_radius: Mapping[str, bool]
    message: str

    @property
    def record_index(self) -> RecordIdentity:
        return self.record.record_index


def make_lookup(code: str, gazetteer: PostalGazetteer, radius_miles: float) -> PostalLookup:
    """Resolve a query postal code and its radius set.

    Raises UnknownPostalCode if the gazetteer does not know the code.
    """
    return PostalLookup(
        code=code,
        coordinate=gazetteer.resolve(code),
        radius_set=tuple(gazetteer.radius_set(code, radius_miles)),
    )


def resolve_candidates(
    lookups: Sequence[PostalLookup],
    known_codes: Sequence[str],
) -> list[str]:
    """List the known postal codes inside each lookup's radius.

    Pure function. A code in range of several lookups appears once per
    lookup; deduplication happens later, by record identity.

    Args:
        lookups: Resolved query postal codes
        known_codes: Postal codes present in the resource index

    Returns:
        Candidate postal codes, possibly repeated
    """
    candidates = []
    for lookup in lookups:
        for known in known_codes:
            if known in lookup.members:
                candidates.append(known)
    return candidates


def augment_record(record: ResourceRecord, lookups: Sequence[PostalLookup]) -> AugmentedRecord:
    """Measure a record against every lookup.

    Pure function. In-radius is postal-code membership in the lookup's
    radius set, not a distance check on the record's own coordinate.
    """
    distances = {}
    in_radius = {}
    for lookup in lookups:
        distances[lookup.code] = calculate_distance(lookup.coordinate, record.coordinate)
        in_radius[lookup.code] = record.postal_code in lookup.members

    return AugmentedRecord(
        record=record,
        distances=distances,
        in_radius=in_radius,
        message=format_fragment(record),
    )


def collect_records(
    candidates: Sequence[str],
    index: ResourceIndex,
    lookups: Sequence[PostalLookup],
) -> list[AugmentedRecord]:
    """Expand candidate postal codes into augmented records.

    Pure function. Candidates missing from the index are skipped.
    """
    collected = []
    for code in candidates:
        records = index.get(code)
        if not records:
            continue
        collected.extend(augment_record(record, lookups) for record in records)
    return collected


def rank_for_query(
    records: Sequence[AugmentedRecord],
    code: str,
    limit: int = DEFAULT_MAX_RESULTS,
) -> list[AugmentedRecord]:
    """Filter to in-radius records, sort by distance, keep the nearest.

    Pure function. Records at equal distance keep their relative order.
    """
    in_range = [r for r in records if r.in_radius.get(code, False)]
    ordered = sorted(in_range, key=lambda r: r.distances[code])
    return ordered[:limit]


def rank_all(
    records: Sequence[AugmentedRecord],
    codes: Sequence[str],
    limit: int = DEFAULT_MAX_RESULTS,
) -> dict[str, list[AugmentedRecord]]:
    """Rank records separately for every query postal code, in query order.

    Pure function.
    """
    return {code: rank_for_query(records, code, limit) for code in codes}


def locate_rankings(
    lookups: Sequence[PostalLookup],
    index: ResourceIndex,
    limit: int = DEFAULT_MAX_RESULTS,
) -> dict[str, list[AugmentedRecord]]:
    """Run candidate resolution, augmentation, deduplication and ranking.

    Pure function.

    Raises:
        EmptyQuery: If there are no lookups
    """
    if not lookups:
        raise EmptyQuery()

    candidates = resolve_candidates(lookups, index.keys())
    collected = collect_records(candidates, index, lookups)
    unique = dedupe_keep_last(collected, key=lambda r: r.record_index)
    return rank_all(unique, [lookup.code for lookup in lookups], limit)


def locate_segments(
    lookups: Sequence[PostalLookup],
    index: ResourceIndex,
    resource_kind: str,
    limit: int = DEFAULT_MAX_RESULTS,
    budget: int = DEFAULT_SEGMENT_BUDGET,
) -> list[str]:
    """Find, rank and render resources near every lookup.

    Pure function.

    Args:
        lookups: Resolved query postal codes, in query order
        index: Resource index snapshot to read
        resource_kind: Plural noun for the resources (e.g., "shelters")
        limit: Maximum resources listed per query postal code
        budget: Maximum segment length in characters

    Returns:
        Reply segments for all lookups

    Raises:
        EmptyQuery: If there are no lookups
    """
    rankings = locate_rankings(lookups, index, limit)
    return build_messages(rankings, resource_kind, budget)
