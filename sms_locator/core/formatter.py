"""Message formatting - Pure functions.

This module renders ranked resources into plain-text SMS segments.
All functions are pure with no side effects.
"""

import math
from typing import TYPE_CHECKING, Mapping, Sequence

from sms_locator.core.geo import meters_to_miles
from sms_locator.core.resource import ResourceRecord

if TYPE_CHECKING:
    from sms_locator.core.locator import AugmentedRecord


# Segment size, well under the 1600 character SMS limit so that the
# outbound formatter can still add "[i of n] " prefixes.
DEFAULT_SEGMENT_BUDGET = 800

EMPTY_QUERY_MESSAGE = (
    "Sorry, I couldn't find any ZIP codes in your text message. Please try again."
)


def format_fragment(record: ResourceRecord) -> str:
    """Format the name/address/phone block of a resource.

    Pure function. The phone line is omitted when there is no phone.
    """
    phone = f"\n{record.phone}" if record.phone else ""
    return f"\n\n{record.name}\n{record.address}{phone}"


def round_miles(miles: float) -> float:
    """Round a distance up: to 0.1mi under one mile, else to the whole mile.

    Pure function.
    """
    if miles < 1.0:
        return math.ceil(miles * 10) / 10
    return float(math.ceil(miles))


def format_distance(meters: float) -> str:
    """Describe a distance in meters as an approximate mileage.

    Pure function.

    Args:
        meters: Distance in meters

    Returns:
        "Under 1mi away" or "About <n>mi away"
    """
    miles = round_miles(meters_to_miles(meters))
    if miles < 1:
        return "Under 1mi away"
    return f"About {int(miles)}mi away"


def format_header(count: int, resource_kind: str, postal_code: str) -> str:
    """Format the first line of a reply for one postal code."""
    return f"Found {count} {resource_kind} near {postal_code}:"


def format_not_found(resource_kind: str, postal_code: str) -> str:
    """Format the reply for a postal code with nothing in range."""
    return (
        f"Sorry, I don't know about any {resource_kind} near {postal_code}. "
        "Please try again later!"
    )


def batch_segments(
    header: str,
    fragments: Sequence[str],
    budget: int = DEFAULT_SEGMENT_BUDGET,
) -> list[str]:
    """Pack a header and fragments into segments of at most budget characters.

    Pure function. A fragment that would push the current segment over
    the budget starts a new segment instead. A single fragment longer
    than the budget still gets a segment of its own.

    Args:
        header: Text the first segment starts with
        fragments: Text blocks to append, in order
        budget: Maximum segment length in characters

    Returns:
        Non-empty segments in order
    """
    segments: list[str] = []
    current = header

    for fragment in fragments:
        if current and len(current) + len(fragment) > budget:
            segments.append(current)
            current = ""
        current += fragment

    if current:
        segments.append(current)

    return segments


def build_query_segments(
    postal_code: str,
    ranked: Sequence["AugmentedRecord"],
    resource_kind: str,
    budget: int = DEFAULT_SEGMENT_BUDGET,
) -> list[str]:
    """Build the reply segments for one query postal code.

    Pure function.
    """
    if not ranked:
        return [format_not_found(resource_kind, postal_code)]

    fragments = [
        f"{r.message}\n{format_distance(r.distances[postal_code])}"
        for r in ranked
    ]
    header = format_header(len(ranked), resource_kind, postal_code)
    return batch_segments(header, fragments, budget)


def build_messages(
    rankings: Mapping[str, Sequence["AugmentedRecord"]],
    resource_kind: str,
    budget: int = DEFAULT_SEGMENT_BUDGET,
) -> list[str]:
    """Build reply segments for every query postal code, in query order.

    Pure function.

    Args:
        rankings: Ranked resources keyed by query postal code
        resource_kind: Plural noun for the resources (e.g., "shelters")
        budget: Maximum segment length in characters

    Returns:
        Segments for all query postal codes
    """
    messages: list[str] = []
    for postal_code, ranked in rankings.items():
        messages.extend(build_query_segments(postal_code, ranked, resource_kind, budget))
    return messages


def number_messages(messages: Sequence[str]) -> list[str]:
    """Prefix each message with "[i of n] " when there is more than one.

    Pure function.
    """
    if len(messages) <= 1:
        return list(messages)
    total = len(messages)
    return [f"[{i} of {total}] {message}" for i, message in enumerate(messages, start=1)]
