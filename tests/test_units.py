# -*- coding: utf-8 -*-
"""Tests for measurement units and unit-tagged quantities."""

import math

import pytest

from frcs_breakout.enums import AngleUnit
from frcs_breakout.enums import InclinationUnit
from frcs_breakout.enums import LengthUnit
from frcs_breakout.unitized import Angle
from frcs_breakout.unitized import Inclination
from frcs_breakout.unitized import Length


class TestLengthUnit:
    """Tests for LengthUnit conversions."""

    @pytest.mark.parametrize(
        ("value", "from_unit", "to_unit", "expected"),
        [
            (1, LengthUnit.FEET, LengthUnit.METERS, 0.3048),
            (1, LengthUnit.METERS, LengthUnit.FEET, 3.280839895),
            (12, LengthUnit.INCHES, LengthUnit.FEET, 1),
            (1, LengthUnit.YARDS, LengthUnit.FEET, 3),
            (1, LengthUnit.MILES, LengthUnit.FEET, 5280),
            (1, LengthUnit.KILOMETERS, LengthUnit.METERS, 1000),
        ],
    )
    def test_convert(self, value, from_unit, to_unit, expected):
        """Test conversions between length units."""
        assert LengthUnit.convert(value, from_unit, to_unit) == pytest.approx(expected)

    def test_same_unit_is_identity(self):
        """Test that converting to the same unit returns the value unchanged."""
        assert LengthUnit.convert(9.3, LengthUnit.FEET, LengthUnit.FEET) == 9.3

    def test_values(self):
        """Test the unit strings written to breakout documents."""
        assert LengthUnit("ft") == LengthUnit.FEET
        assert LengthUnit("m") == LengthUnit.METERS


class TestAngleUnit:
    """Tests for AngleUnit conversions."""

    @pytest.mark.parametrize(
        ("value", "from_unit", "expected"),
        [
            (400, AngleUnit.GRADIANS, 360),
            (6400, AngleUnit.MILS, 360),
            (60, AngleUnit.MINUTES, 1),
            (3600, AngleUnit.SECONDS, 1),
        ],
    )
    def test_to_degrees(self, value, from_unit, expected):
        """Test conversions into degrees."""
        assert AngleUnit.convert(value, from_unit, AngleUnit.DEGREES) == pytest.approx(
            expected
        )


class TestInclinationUnit:
    """Tests for InclinationUnit conversions."""

    def test_percent_grade_to_degrees(self):
        """Test that a 100% grade is 45 degrees."""
        assert InclinationUnit.convert(
            100, InclinationUnit.PERCENT_GRADE, InclinationUnit.DEGREES
        ) == pytest.approx(45)

    def test_degrees_to_percent_grade(self):
        """Test the reverse percent grade conversion."""
        assert InclinationUnit.convert(
            -45, InclinationUnit.DEGREES, InclinationUnit.PERCENT_GRADE
        ) == pytest.approx(-100)

    def test_gradians(self):
        """Test a linear inclination unit."""
        assert InclinationUnit.convert(
            100, InclinationUnit.GRADIANS, InclinationUnit.DEGREES
        ) == pytest.approx(90)

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_does_not_raise(self, value):
        """Test that non-finite values pass through percent grade conversion."""
        result = InclinationUnit.convert(
            value, InclinationUnit.DEGREES, InclinationUnit.PERCENT_GRADE
        )

        assert not math.isfinite(result)


class TestQuantities:
    """Tests for the unit-tagged quantity models."""

    def test_length_get(self):
        """Test reading a length in another unit."""
        assert Length.feet(10).get(LengthUnit.METERS) == pytest.approx(3.048)

    def test_length_add_keeps_left_unit(self):
        """Test that a sum is expressed in the unit of the left operand."""
        total = Length.feet(1).add(Length.meters(0.3048))

        assert total.unit == LengthUnit.FEET
        assert total.value == pytest.approx(2)

    def test_angle_add(self):
        """Test summing angles in different units."""
        total = Angle.degrees(90).add(Angle(value=100, unit=AngleUnit.GRADIANS))

        assert total.get(AngleUnit.DEGREES) == pytest.approx(180)

    def test_inclination_add_in_percent(self):
        """Test that percent grade sums are computed on the angles."""
        total = Inclination(value=100, unit=InclinationUnit.PERCENT_GRADE).add(
            Inclination(value=100, unit=InclinationUnit.PERCENT_GRADE)
        )

        assert total.unit == InclinationUnit.PERCENT_GRADE
        assert total.get(InclinationUnit.DEGREES) == pytest.approx(90)
        assert total.value > 1e10

    def test_nan_propagates(self):
        """Test that NaN magnitudes never raise."""
        assert math.isnan(Length.feet(float("nan")).get(LengthUnit.METERS))

    def test_quantities_are_frozen(self):
        """Test that quantities cannot be mutated."""
        length = Length.feet(1)

        with pytest.raises(ValueError):  # noqa: PT011
            length.value = 2
