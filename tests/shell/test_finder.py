"""Tests for ResourceFinder."""

import logging

import pytest

from sms_locator.core.formatter import EMPTY_QUERY_MESSAGE
from sms_locator.core.resource import ResourceIndex
from sms_locator.finder import ResourceFinder


@pytest.fixture
def finder(gazetteer, resource_index):
    """Finder over the shelter feed."""
    return ResourceFinder(gazetteer, resource_index, resource_kind="shelters")


class TestResourceFinderLocate:
    """Tests for ResourceFinder.locate()."""

    def test_empty_query_apologizes(self, finder):
        assert finder.locate([]) == [EMPTY_QUERY_MESSAGE]

    def test_single_code(self, finder):
        """Lists the nearest shelters, closest first."""
        segments = finder.locate(["70118"])

        assert len(segments) == 1
        assert segments[0].startswith("Found 3 shelters near 70118:")
        assert segments[0].index("Carrollton Church") < segments[0].index("Xavier Gym")
        assert segments[0].index("Xavier Gym") < segments[0].index("Gentilly Library")
        assert "Marigny Rec Center" not in segments[0]

    def test_fallback_for_isolated_code(self, finder):
        assert finder.locate(["70003"]) == [
            "Sorry, I don't know about any shelters near 70003. Please try again later!"
        ]

    def test_unknown_codes_skipped(self, finder, caplog):
        """Unknown codes are logged and left out of the reply."""
        with caplog.at_level(logging.WARNING):
            segments = finder.locate(["99999", "93555"])

        assert len(segments) == 1
        assert segments[0].startswith("Found 1 shelters near 93555:")
        assert "99999" in caplog.text

    def test_all_codes_unknown_apologizes(self, finder):
        assert finder.locate(["99999"]) == [EMPTY_QUERY_MESSAGE]

    def test_repeated_code_answered_once(self, finder):
        segments = finder.locate(["70118", "70118"])

        assert len(segments) == 1

    def test_codes_answered_in_query_order(self, finder):
        segments = finder.locate(["71301", "68850"])

        assert segments[0].startswith("Found 2 shelters near 71301:")
        assert segments[1].startswith("Found 1 shelters near 68850:")

    def test_max_results(self, gazetteer, resource_index):
        finder = ResourceFinder(gazetteer, resource_index, "shelters", max_results=1)

        segments = finder.locate(["70118"])

        assert segments[0].startswith("Found 1 shelters near 70118:")
        assert "Carrollton Church" in segments[0]

    def test_small_budget_splits(self, gazetteer, resource_index):
        finder = ResourceFinder(gazetteer, resource_index, "shelters", segment_budget=60)

        segments = finder.locate(["70118"])

        assert len(segments) > 1
        assert segments[0].startswith("Found 3 shelters near 70118:")


class TestResourceFinderUpdateIndex:
    """Tests for ResourceFinder.update_index()."""

    def test_starts_empty(self, gazetteer):
        finder = ResourceFinder(gazetteer, resource_kind="shelters")

        assert len(finder.index) == 0
        assert finder.locate(["70118"]) == [
            "Sorry, I don't know about any shelters near 70118. Please try again later!"
        ]

    def test_new_index_used_by_later_lookups(self, gazetteer, resource_index):
        finder = ResourceFinder(gazetteer, resource_kind="shelters")

        finder.update_index(resource_index)

        assert finder.index is resource_index
        assert finder.locate(["70118"])[0].startswith("Found 3 shelters")

    def test_replaced_with_empty_index(self, finder):
        finder.update_index(ResourceIndex.empty())

        assert finder.locate(["70118"])[0].startswith("Sorry, I don't know")
