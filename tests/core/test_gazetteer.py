"""Unit tests for the postal code gazetteer."""

import pytest

from sms_locator.core.errors import UnknownPostalCode
from sms_locator.core.gazetteer import PostalGazetteer
from sms_locator.core.geo import Coordinate


class TestFromRows:
    """Tests for PostalGazetteer.from_rows()."""

    def test_builds_table(self, gazetteer):
        """Should contain every row."""
        assert len(gazetteer) == 10
        assert "70118" in gazetteer
        assert "00000" not in gazetteer

    def test_first_row_wins_for_repeated_code(self):
        """A repeated code keeps the coordinate from its first row."""
        g = PostalGazetteer.from_rows([
            ("12345", 1.0, 2.0),
            ("12345", 3.0, 4.0),
        ])
        assert len(g) == 1
        assert g.resolve("12345") == Coordinate(1.0, 2.0)

    def test_iterates_in_row_order(self, gazetteer):
        """Iteration follows insertion order."""
        assert list(gazetteer)[:3] == ["68850", "68883", "71301"]


class TestResolve:
    """Tests for PostalGazetteer.resolve()."""

    def test_known_code(self, gazetteer):
        """Should return the centroid."""
        assert gazetteer.resolve("68850") == Coordinate(40.7808, -99.7415)

    def test_unknown_code_raises(self, gazetteer):
        """Should raise UnknownPostalCode carrying the code."""
        with pytest.raises(UnknownPostalCode) as ctx:
            gazetteer.resolve("00000")
        assert ctx.value.code == "00000"


class TestRadiusSet:
    """Tests for PostalGazetteer.radius_set()."""

    def test_includes_code_itself(self, gazetteer):
        """The radius set always contains the query code."""
        assert "68850" in gazetteer.radius_set("68850", 5)

    def test_isolated_code(self, gazetteer):
        """A code with no neighbours in range only contains itself."""
        assert gazetteer.radius_set("93555", 5) == ["93555"]

    def test_zero_radius(self, gazetteer):
        """A zero radius still contains the code itself."""
        assert gazetteer.radius_set("70118", 0) == ["70118"]

    def test_neighbours_within_radius(self, gazetteer):
        """New Orleans codes within 5 miles of 70118, in table order."""
        assert gazetteer.radius_set("70118", 5) == ["70118", "70124", "70116"]

    def test_excludes_codes_beyond_radius(self, gazetteer):
        """Metairie (about 6 miles away) is outside a 5 mile radius."""
        assert "70003" not in gazetteer.radius_set("70118", 5)
        assert "70003" in gazetteer.radius_set("70118", 10)

    def test_returns_fresh_list(self, gazetteer):
        """Mutating a result does not affect later calls."""
        first = gazetteer.radius_set("70118", 5)
        first.append("99999")
        assert "99999" not in gazetteer.radius_set("70118", 5)

    def test_unknown_code_raises(self, gazetteer):
        """Should raise UnknownPostalCode for codes not in the table."""
        with pytest.raises(UnknownPostalCode):
            gazetteer.radius_set("00000", 5)
