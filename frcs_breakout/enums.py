# -*- coding: utf-8 -*-
"""Enumerations for FRCS and breakout data.

This module contains the measurement units shared by the FRCS input records
and the breakout output document, plus a few small classification types.
The unit values are the exact strings used in breakout documents.
"""

from enum import Enum
from math import atan
from math import degrees
from math import isfinite
from math import radians
from math import tan

from frcs_breakout.constants import FEET_TO_METERS
from frcs_breakout.constants import GRADIANS_PER_CIRCLE
from frcs_breakout.constants import MILS_PER_CIRCLE


class FileExtension(str, Enum):
    """File extensions handled by the command line tools (with dot)."""

    JSON = ".json"


class Direction(str, Enum):
    """Sight direction of a shot measurement.

    Attributes:
        FRONTSIGHT: Reading taken from the FROM station toward the TO station
        BACKSIGHT: Reading taken from the TO station back toward the FROM station
    """

    FRONTSIGHT = "fs"
    BACKSIGHT = "bs"


class LengthUnit(str, Enum):
    """Unit for distance measurements.

    Attributes:
        INCHES: Inches
        FEET: Decimal feet
        YARDS: Yards
        METERS: Meters
        KILOMETERS: Kilometers
        MILES: Statute miles
    """

    INCHES = "in"
    FEET = "ft"
    YARDS = "yd"
    METERS = "m"
    KILOMETERS = "km"
    MILES = "mi"

    @property
    def meters_per_unit(self) -> float:
        """Length of one of this unit, in meters."""
        return {
            LengthUnit.INCHES: FEET_TO_METERS / 12,
            LengthUnit.FEET: FEET_TO_METERS,
            LengthUnit.YARDS: FEET_TO_METERS * 3,
            LengthUnit.METERS: 1.0,
            LengthUnit.KILOMETERS: 1000.0,
            LengthUnit.MILES: FEET_TO_METERS * 5280,
        }[self]

    @staticmethod
    def convert(value: float, from_unit: "LengthUnit", to_unit: "LengthUnit") -> float:
        """Convert a length between two units.

        Args:
            value: Magnitude in ``from_unit``
            from_unit: Unit the value is expressed in
            to_unit: Target unit

        Returns:
            Magnitude in ``to_unit``
        """
        if from_unit == to_unit:
            return value
        return value * from_unit.meters_per_unit / to_unit.meters_per_unit


class AngleUnit(str, Enum):
    """Unit for azimuth (bearing) measurements.

    Attributes:
        DEGREES: Standard degrees (360 per circle)
        MINUTES: Minutes of arc
        SECONDS: Seconds of arc
        GRADIANS: Gradians (400 per circle)
        MILS: NATO mils (6400 per circle)
    """

    DEGREES = "deg"
    MINUTES = "min"
    SECONDS = "sec"
    GRADIANS = "grad"
    MILS = "mil"

    @property
    def degrees_per_unit(self) -> float:
        """Size of one of this unit, in degrees."""
        return {
            AngleUnit.DEGREES: 1.0,
            AngleUnit.MINUTES: 1 / 60,
            AngleUnit.SECONDS: 1 / 3600,
            AngleUnit.GRADIANS: 360 / GRADIANS_PER_CIRCLE,
            AngleUnit.MILS: 360 / MILS_PER_CIRCLE,
        }[self]

    @staticmethod
    def convert(value: float, from_unit: "AngleUnit", to_unit: "AngleUnit") -> float:
        """Convert an angle between two units."""
        if from_unit == to_unit:
            return value
        return value * from_unit.degrees_per_unit / to_unit.degrees_per_unit


class InclinationUnit(str, Enum):
    """Unit for vertical angle (inclination) measurements.

    Attributes:
        DEGREES: Standard degrees (-90 to +90)
        MINUTES: Minutes of arc
        SECONDS: Seconds of arc
        GRADIANS: Gradians
        MILS: NATO mils
        PERCENT_GRADE: Percentage gradient (tan(angle) * 100)
    """

    DEGREES = "deg"
    MINUTES = "min"
    SECONDS = "sec"
    GRADIANS = "grad"
    MILS = "mil"
    PERCENT_GRADE = "%"

    def to_degrees(self, value: float) -> float:
        """Convert a value in this unit to degrees."""
        if self == InclinationUnit.PERCENT_GRADE:
            return degrees(atan(value / 100))
        return value * AngleUnit(self.value).degrees_per_unit

    def from_degrees(self, value: float) -> float:
        """Convert a value in degrees to this unit."""
        if not isfinite(value):
            return value
        if self == InclinationUnit.PERCENT_GRADE:
            return tan(radians(value)) * 100
        return value / AngleUnit(self.value).degrees_per_unit

    @staticmethod
    def convert(
        value: float, from_unit: "InclinationUnit", to_unit: "InclinationUnit"
    ) -> float:
        """Convert an inclination between two units."""
        if from_unit == to_unit:
            return value
        return to_unit.from_degrees(from_unit.to_degrees(value))
