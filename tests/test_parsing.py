"""
Tests for coordinate parsing and location-intent classification.
"""

import pytest

from placebot.core.parsing import is_location_seeking, parse_coordinates


class TestParseCoordinates:
    """Test the lat,lon parser."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("40.7,-74.0", (40.7, -74.0)),
            ("-33.8688,151.2093", (-33.8688, 151.2093)),
            ("0,0", (0.0, 0.0)),
            ("51,-1", (51.0, -1.0)),
            ("  48.8566,2.3522\n", (48.8566, 2.3522)),
        ],
    )
    def test_valid_coordinates(self, text, expected):
        """Test that well-formed coordinates parse to exact floats."""
        assert parse_coordinates(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "40.7, -74.0",
            "40.7 ,-74.0",
            "40.7;-74.0",
            "40.7",
            "north,south",
            "+40.7,-74.0",
            "40.,-74.0",
            ".5,1",
            "40.7,-74.0,10",
            "pizza nearby",
            "",
        ],
    )
    def test_invalid_shapes(self, text):
        """Test that anything else is rejected."""
        assert parse_coordinates(text) is None

    def test_out_of_range_values_are_accepted(self):
        """Test that coordinates are not range checked."""
        assert parse_coordinates("123.4,-500.25") == (123.4, -500.25)


class TestIsLocationSeeking:
    """Test the keyword classifier."""

    def test_place_keyword(self):
        assert is_location_seeking("Where is a good place to eat") is True

    def test_general_question(self):
        assert is_location_seeking("What is the capital of France") is False

    @pytest.mark.parametrize(
        "text",
        [
            "pizza nearby",
            "Coffee CLOSE TO me",
            "bars around here",
            "share my Location",
            "gym near the office",
        ],
    )
    def test_each_keyword_matches(self, text):
        """Test every keyword, case-insensitively."""
        assert is_location_seeking(text) is True

    def test_substring_match_without_word_boundary(self):
        """Test that keywords match inside longer words."""
        assert is_location_seeking("What is a job placement agency?") is True
        assert is_location_seeking("The nearest star") is True

    def test_empty_text(self):
        assert is_location_seeking("") is False
