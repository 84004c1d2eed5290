"""Tests for text formatting helpers."""

import pytest

from console_ui.formatting import describe_hand, describe_partial_hand, joinor, point_string


class TestJoinor:
    """Tests for English list joining."""

    @pytest.mark.parametrize("items,expected", [
        ([], ""),
        (["4♦"], "4♦"),
        (["4♦", "3♦"], "4♦ and 3♦"),
        (["4♦", "3♦", "King♣"], "4♦, 3♦, and King♣"),
    ])
    def test_joinor(self, items, expected):
        assert joinor(items) == expected

    def test_custom_delimiter_and_word(self):
        assert joinor(["a", "b", "c"], "; ", "or") == "a; b; or c"

    def test_does_not_modify_input(self):
        items = ["a", "b", "c"]
        joinor(items)
        assert items == ["a", "b", "c"]


class TestDescribe:
    """Tests for hand descriptions."""

    def test_describe_hand(self):
        assert describe_hand("Bob", ["4♦", "3♦"], 7) == "Bob has 4♦ and 3♦ (total: 7)"
        assert describe_hand("Bob", ["4♦", "3♦"]) == "Bob has 4♦ and 3♦"

    def test_describe_partial_hand(self):
        assert describe_partial_hand("Alice", "9♣") == "Alice has 9♣ and unknown card"

    def test_point_string(self):
        assert point_string(0) == "points"
        assert point_string(1) == "point"
        assert point_string(2) == "points"
