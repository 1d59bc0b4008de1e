"""Postal code gazetteer - Pure lookups.

Maps postal codes to their centroid coordinates and answers radius
queries over the whole table. The table is built once (by the shell
loader) and never mutated afterwards.
"""

from functools import lru_cache
from typing import Iterable

from sms_locator.core.errors import UnknownPostalCode
from sms_locator.core.geo import Coordinate, distances_from, miles_to_meters


class PostalGazetteer:
    """Immutable postal code -> Coordinate table.

    Iteration and radius results follow the order in which codes were
    added to the table.
    """

    def __init__(self, entries: dict[str, Coordinate]) -> None:
        self._entries = dict(entries)
        self._codes = list(self._entries)
        self._points = list(self._entries.values())
        self._radius_cache = lru_cache(maxsize=4096)(self._compute_radius_set)

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[str, float, float]]) -> "PostalGazetteer":
        """Build a gazetteer from (code, latitude, longitude) rows.

        The first row for a repeated code wins.
        """
        entries: dict[str, Coordinate] = {}
        for code, latitude, longitude in rows:
            if code not in entries:
                entries[code] = Coordinate(float(latitude), float(longitude))
        return cls(entries)

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._codes)

    def resolve(self, code: str) -> Coordinate:
        """Return the centroid of *code*.

        Raises UnknownPostalCode if the code is not in the table.
        """
        try:
            return self._entries[code]
        except KeyError:
            raise UnknownPostalCode(code) from None

    def radius_set(self, code: str, miles: float) -> list[str]:
        """Return every code whose centroid lies within *miles* of *code*.

        The result includes *code* itself. Raises UnknownPostalCode if
        *code* is not in the table.
        """
        self.resolve(code)
        return list(self._radius_cache(code, float(miles)))

    def _compute_radius_set(self, code: str, miles: float) -> tuple[str, ...]:
        limit = miles_to_meters(miles)
        distances = distances_from(self._entries[code], self._points)
        return tuple(
            other
            for other, distance in zip(self._codes, distances)
            if other == code or distance <= limit
        )
