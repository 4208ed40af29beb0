# -*- coding: utf-8 -*-
"""Tests for fixed-precision number formatting."""

import pytest

from frcs_breakout.format import format_fixed
from frcs_breakout.format import format_lrud


class TestFormatFixed:
    """Tests for format_fixed."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (9.3, "9.30"),
            (0, "0.00"),
            (-36, "-36.00"),
            (350.5, "350.50"),
            (0.125, "0.13"),
            (2.675, "2.67"),
            (-0.0, "0.00"),
        ],
    )
    def test_two_decimals(self, value, expected):
        """Test the default shot precision."""
        assert format_fixed(value) == expected

    def test_coordinate_precision(self):
        """Test a three decimal coordinate."""
        assert format_fixed(11.176528, 3) == "11.177"

    @pytest.mark.parametrize("value", [None, float("nan"), float("inf"), float("-inf")])
    def test_missing_values(self, value):
        """Test that missing or non-finite values have no string form."""
        assert format_fixed(value) is None

    def test_large_values_are_not_exponential(self):
        """Test that huge values keep the positional notation."""
        result = format_fixed(1e30)

        assert "e" not in result.lower()
        assert result.startswith("1000000000000000019884624838656")
        assert result.endswith(".00")


class TestFormatLrud:
    """Tests for format_lrud."""

    def test_present_value(self):
        """Test that a reading uses the shot precision."""
        assert format_lrud(0) == "0.00"
        assert format_lrud(12) == "12.00"

    @pytest.mark.parametrize("value", [None, float("nan")])
    def test_missing_value(self, value):
        """Test that a missing reading becomes the bare "0" literal."""
        assert format_lrud(value) == "0"
