"""Shared fixtures: a small postal code table and a GeoJSON dataset."""

import pytest

from sms_locator.core.config import DatasetConfig
from sms_locator.core.gazetteer import PostalGazetteer
from sms_locator.core.resource import build_resource_index


# (postal code, latitude, longitude) centroids
GAZETTEER_ROWS = [
    ("68850", 40.7808, -99.7415),   # Lexington, NE
    ("68883", 40.8206, -98.6003),   # Wood River, NE
    ("71301", 31.2843, -92.4705),   # Alexandria, LA
    ("71302", 31.2700, -92.4200),   # Alexandria, LA
    ("70118", 29.9503, -90.1234),   # New Orleans, LA
    ("70124", 30.0071, -90.1092),   # New Orleans, LA
    ("70116", 29.9686, -90.0646),   # New Orleans, LA
    ("70003", 29.9977, -90.2130),   # Metairie, LA
    ("70471", 30.4000, -90.0580),   # Mandeville, LA
    ("93555", 35.6222, -117.6709),  # Ridgecrest, CA
]


def make_feature(name, zip_code, latitude, longitude, phone=None, **extra):
    """Build a GeoJSON feature shaped like the upstream shelter feed."""
    properties = {
        "shelter": name,
        "address": f"{name} Street, {zip_code}",
        "zip": zip_code,
        "phone": phone,
        "latitude": latitude,
        "longitude": longitude,
        "accepting": "yes",
    }
    properties.update(extra)
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [longitude, latitude]},
        "properties": properties,
    }


FEATURES = [
    make_feature("Lexington High School", "68850", 40.7868, -99.7487),
    make_feature("Wood River Shelter", "68883", 40.8200, -98.6000, "308-555-0101"),
    make_feature("Bolton Ave. Community Center", "71301", 31.3076, -92.4580, "318-555-0100"),
    make_feature("Peabody Magnet High", "71302", 31.2690, -92.4180, "318-555-0102"),
    make_feature("Ridgecrest Shelter", "93555", 35.6222, -117.6709),
    make_feature("Nowhere Shelter", "00000", 10.0, 10.0),
    make_feature("Xavier Gym", "70118", 29.9650, -90.1070, "504-555-0110"),
    make_feature("Carrollton Church", "70118", 29.9450, -90.1300),
    make_feature("Marigny Rec Center", "70116", 29.9680, -90.0580, "504-555-0116"),
    make_feature("Gentilly Library", "70124", 30.0050, -90.1100),
    make_feature("Mandeville Civic Center", "70471", 30.3600, -90.0660),
]


@pytest.fixture
def gazetteer():
    """Gazetteer over the test postal code table."""
    return PostalGazetteer.from_rows(GAZETTEER_ROWS)


@pytest.fixture
def dataset():
    """Dataset config for the shelter feed."""
    return DatasetConfig(
        label="shelters",
        url="https://example.com/shelters.json",
        resource_kind="shelters",
    )


@pytest.fixture
def features():
    """Raw GeoJSON features of the shelter feed."""
    return [dict(f) for f in FEATURES]


@pytest.fixture
def resource_index(features, dataset, gazetteer):
    """Resource index built from the shelter feed."""
    return build_resource_index(features, dataset, gazetteer)


@pytest.fixture(name="make_feature")
def make_feature_fixture():
    """Factory for single GeoJSON features."""
    return make_feature
