"""Postal code extraction - Pure functions."""

import re

from sms_locator.core.gazetteer import PostalGazetteer

_ZIP_CODE_RE = re.compile(r"[0-9]{5}")


def extract_postal_codes(message: str | None, gazetteer: PostalGazetteer) -> list[str]:
    """Extract known five-digit ZIP codes from message text.

    Pure function. Codes are returned in message order; repeats are kept.

    Args:
        message: Inbound message text
        gazetteer: Postal code table; unknown codes are dropped

    Returns:
        List of ZIP code strings
    """
    if not message:
        return []
    return [code for code in _ZIP_CODE_RE.findall(message) if code in gazetteer]
