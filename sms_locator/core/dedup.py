"""Deduplication logic - Pure functions.

A resource can be reached through several candidate postal codes in one
request. These helpers collapse such repeats to a single instance.
"""

from typing import Callable, Hashable, Sequence, TypeVar

T = TypeVar("T")


def dedupe_keep_last(
    items: Sequence[T],
    key: Callable[[T], Hashable],
) -> list[T]:
    """Drop repeated identities, keeping the last occurrence of each.

    Pure function. Survivors keep their original relative order, so the
    result is a fixed point: deduplicating it again changes nothing.

    Args:
        items: Items to deduplicate
        key: Returns the identity of an item

    Returns:
        New list with one item per identity
    """
    seen: set = set()
    kept: list[T] = []

    # Walk backwards so the last occurrence is the one that is seen first
    for item in reversed(items):
        identity = key(item)
        if identity in seen:
            continue
        seen.add(identity)
        kept.append(item)

    kept.reverse()
    return kept
