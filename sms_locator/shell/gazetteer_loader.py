"""Gazetteer Loader - Imperative Shell.

Loads the GeoNames postal code table for a country through pgeocode
into a PostalGazetteer. pgeocode downloads the table on first use and
caches it under PGEOCODE_DATA_DIR (default ~/pgeocode_data).
"""

import logging
import math
from typing import Any, Iterator

import pgeocode

from sms_locator.core.gazetteer import PostalGazetteer


logger = logging.getLogger(__name__)


def iter_postal_rows(frame: Any) -> Iterator[tuple[str, float, float]]:
    """Yield (postal code, latitude, longitude) from a pgeocode table.

    Rows without a postal code or with missing coordinates are skipped.
    """
    columns = frame[["postal_code", "latitude", "longitude"]]
    for code, latitude, longitude in columns.itertuples(index=False, name=None):
        if not isinstance(code, str) or not code.strip():
            continue
        try:
            latitude = float(latitude)
            longitude = float(longitude)
        except (TypeError, ValueError):
            continue
        if math.isnan(latitude) or math.isnan(longitude):
            continue
        yield code.strip(), latitude, longitude


def load_gazetteer(country: str = "US") -> PostalGazetteer:
    """Load the postal code table for a country.

    This function performs HTTP and file I/O (inside pgeocode).

    Args:
        country: Two-letter country code (e.g., "US")

    Returns:
        PostalGazetteer over every postal code with coordinates

    Raises:
        ValueError: If pgeocode doesn't support the country
    """
    logger.info("Loading postal code table for %s", country.upper())

    nominatim = pgeocode.Nominatim(country.lower())
    # One row per postal code, coordinates averaged over its places
    gazetteer = PostalGazetteer.from_rows(iter_postal_rows(nominatim._data_frame))

    logger.info("Loaded %d postal codes for %s", len(gazetteer), country.upper())
    return gazetteer
