"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Postal code gazetteer lookups and geodesic distances
- Resource record parsing and indexing
- Candidate resolution, deduplication and ranking
- SMS segment formatting

All functions here are deterministic and have no I/O.
"""

from sms_locator.core.dedup import dedupe_keep_last
from sms_locator.core.errors import (
    DuplicateRecordIdentity,
    EmptyQuery,
    IndexIntegrityError,
    LocatorError,
    UnknownPostalCode,
)
from sms_locator.core.extractor import extract_postal_codes
from sms_locator.core.gazetteer import PostalGazetteer
from sms_locator.core.geo import Coordinate, calculate_distance
from sms_locator.core.locator import (
    AugmentedRecord,
    PostalLookup,
    locate_segments,
    make_lookup,
)
from sms_locator.core.resource import ResourceIndex, ResourceRecord, build_resource_index

__all__ = [
    # Geo
    "Coordinate",
    "calculate_distance",
    "PostalGazetteer",
    # Resources
    "ResourceRecord",
    "ResourceIndex",
    "build_resource_index",
    # Locator
    "PostalLookup",
    "AugmentedRecord",
    "make_lookup",
    "locate_segments",
    "dedupe_keep_last",
    "extract_postal_codes",
    # Errors
    "LocatorError",
    "UnknownPostalCode",
    "EmptyQuery",
    "IndexIntegrityError",
    "DuplicateRecordIdentity",
]
