"""Resource records and the resource index - Pure functions.

This module turns GeoJSON features from an upstream dataset into typed
ResourceRecord objects and groups them by postal code into an immutable
ResourceIndex. All functions are pure with no side effects.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

from sms_locator.core.config import DatasetConfig
from sms_locator.core.errors import (
    DuplicateRecordIdentity,
    IndexIntegrityError,
    UnknownPostalCode,
)
from sms_locator.core.gazetteer import PostalGazetteer
from sms_locator.core.geo import Coordinate


# Feed identity value, or the feature position when there is none
RecordIdentity = int | str | tuple[str, int]


@dataclass(frozen=True)
class ResourceRecord:
    """Immutable resource location (shelter, distribution point, ...).

    Attributes:
        record_index: Stable identity used for deduplication
        name: Display name
        address: Street address
        phone: Contact phone number (optional)
        coordinate: Location of the resource
        postal_code: Postal code the resource is indexed under
        metadata: Original feature properties, verbatim
    """
    record_index: RecordIdentity
    name: str
    address: str
    coordinate: Coordinate
    postal_code: str
    phone: str | None = None
    metadata: Mapping[str, Any] = field(
        default_factory=dict, compare=False, hash=False, repr=False,
    )


class ResourceIndex:
    """Immutable mapping of postal code -> resource records.

    Every record is stored under its own postal code. A new index is
    built on each dataset refresh and swapped in whole; nothing mutates
    an index after construction.
    """

    def __init__(self, records_by_code: Mapping[str, Sequence[ResourceRecord]]) -> None:
        frozen: dict[str, tuple[ResourceRecord, ...]] = {}
        for code, records in records_by_code.items():
            for record in records:
                if record.postal_code != code:
                    raise IndexIntegrityError(
                        f"Record {record.record_index!r} has postal code "
                        f"{record.postal_code} but is stored under {code}"
                    )
            frozen[code] = tuple(records)
        self._records = MappingProxyType(frozen)

    @classmethod
    def empty(cls) -> "ResourceIndex":
        """Return an index with no records."""
        return cls({})

    @classmethod
    def from_records(cls, records: Iterable[ResourceRecord]) -> "ResourceIndex":
        """Group records by postal code, preserving their order.

        Raises DuplicateRecordIdentity if two records share a record_index.
        """
        grouped: dict[str, list[ResourceRecord]] = {}
        seen: set = set()
        for record in records:
            if record.record_index in seen:
                raise DuplicateRecordIdentity(record.record_index, record.postal_code)
            seen.add(record.record_index)
            grouped.setdefault(record.postal_code, []).append(record)
        return cls(grouped)

    def get(self, postal_code: str) -> tuple[ResourceRecord, ...] | None:
        """Return the records stored under postal_code, or None."""
        return self._records.get(postal_code)

    def keys(self) -> list[str]:
        """Return the postal codes that have at least one record."""
        return list(self._records.keys())

    def __contains__(self, postal_code: object) -> bool:
        return postal_code in self._records

    def __len__(self) -> int:
        return len(self._records)

    @property
    def record_count(self) -> int:
        """Total number of records across all postal codes."""
        return sum(len(records) for records in self._records.values())


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _coordinate_from_feature(
    properties: Mapping[str, Any],
    geometry: Mapping[str, Any],
) -> Coordinate | None:
    """Read the feature location from properties, else from a Point geometry."""
    try:
        return Coordinate(
            latitude=float(properties["latitude"]),
            longitude=float(properties["longitude"]),
        )
    except (KeyError, TypeError, ValueError):
        pass

    coords = geometry.get("coordinates") or []
    if geometry.get("type", "Point") == "Point" and len(coords) >= 2:
        try:
            return Coordinate(latitude=float(coords[1]), longitude=float(coords[0]))
        except (TypeError, ValueError):
            return None
    return None


def _identity(
    properties: Mapping[str, Any],
    position: int,
    identity_field: str | None,
) -> RecordIdentity:
    """Read the record identity, falling back to the feature position.

    Only non-empty strings and integers are accepted from the feed. The
    fallback for a feed with an identity field is tagged so that it never
    equals a real identity value.
    """
    if identity_field is None:
        return position
    value = properties.get(identity_field)
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return ("position", position)
    if isinstance(value, str) and not value.strip():
        return ("position", position)
    return value


def parse_resource(
    feature: Mapping[str, Any],
    position: int,
    dataset: DatasetConfig,
    gazetteer: PostalGazetteer,
) -> ResourceRecord | None:
    """Parse a single GeoJSON feature into a ResourceRecord.

    Pure function: returns None for features whose postal code is
    missing or unknown to the gazetteer.

    Args:
        feature: GeoJSON feature dict
        position: 1-based position of the feature in the dataset
        dataset: Dataset the feature came from (supplies property names)
        gazetteer: Postal code table used to validate the postal code

    Returns:
        ResourceRecord or None if the feature cannot be indexed
    """
    properties = feature.get("properties") or {}
    geometry = feature.get("geometry") or {}

    postal_code = _text(properties.get(dataset.postal_code_field))
    if not postal_code:
        return None

    try:
        centroid = gazetteer.resolve(postal_code)
    except UnknownPostalCode:
        return None

    coordinate = _coordinate_from_feature(properties, geometry) or centroid

    return ResourceRecord(
        record_index=_identity(properties, position, dataset.identity_field),
        name=_text(properties.get(dataset.name_field)),
        address=_text(properties.get(dataset.address_field)),
        phone=_text(properties.get(dataset.phone_field)) or None,
        coordinate=coordinate,
        postal_code=postal_code,
        metadata=MappingProxyType(dict(properties)),
    )


def parse_resources(
    features: Sequence[Mapping[str, Any]],
    dataset: DatasetConfig,
    gazetteer: PostalGazetteer,
) -> list[ResourceRecord]:
    """Parse every indexable feature, in dataset order.

    Pure function.
    """
    records = []
    for position, feature in enumerate(features, start=1):
        record = parse_resource(feature, position, dataset, gazetteer)
        if record is not None:
            records.append(record)
    return records


def build_resource_index(
    features: Sequence[Mapping[str, Any]],
    dataset: DatasetConfig,
    gazetteer: PostalGazetteer,
) -> ResourceIndex:
    """Build a ResourceIndex from raw GeoJSON features.

    Pure function.

    Raises:
        DuplicateRecordIdentity: If two features share an identity
    """
    return ResourceIndex.from_records(parse_resources(features, dataset, gazetteer))
