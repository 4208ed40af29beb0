# -*- coding: utf-8 -*-
"""Unit-tagged numeric values.

Every FRCS measurement carries its own unit. These immutable models expose
only two operations:

- ``get(unit)``: the magnitude expressed in a target unit
- ``add(other)``: the sum of two quantities of the same dimension

Neither operation raises on NaN or infinite magnitudes; callers decide
what a non-finite result means (the converters treat it as "absent").
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict

from frcs_breakout.enums import AngleUnit
from frcs_breakout.enums import InclinationUnit
from frcs_breakout.enums import LengthUnit


class Length(BaseModel):
    """A distance tagged with its unit."""

    model_config = ConfigDict(frozen=True)

    value: float
    unit: LengthUnit = LengthUnit.FEET

    def get(self, unit: LengthUnit) -> float:
        return LengthUnit.convert(self.value, self.unit, unit)

    def add(self, other: Length) -> Length:
        """Sum two lengths, keeping the unit of ``self``."""
        return Length(value=self.value + other.get(self.unit), unit=self.unit)

    @classmethod
    def feet(cls, value: float) -> Length:
        return cls(value=value, unit=LengthUnit.FEET)

    @classmethod
    def meters(cls, value: float) -> Length:
        return cls(value=value, unit=LengthUnit.METERS)


class Angle(BaseModel):
    """An azimuth tagged with its unit."""

    model_config = ConfigDict(frozen=True)

    value: float
    unit: AngleUnit = AngleUnit.DEGREES

    def get(self, unit: AngleUnit) -> float:
        return AngleUnit.convert(self.value, self.unit, unit)

    def add(self, other: Angle) -> Angle:
        return Angle(value=self.value + other.get(self.unit), unit=self.unit)

    @classmethod
    def degrees(cls, value: float) -> Angle:
        return cls(value=value, unit=AngleUnit.DEGREES)


class Inclination(BaseModel):
    """A vertical angle tagged with its unit.

    Percent grade is not linear, so sums are computed in degrees and
    converted back to the unit of the left operand.
    """

    model_config = ConfigDict(frozen=True)

    value: float
    unit: InclinationUnit = InclinationUnit.DEGREES

    def get(self, unit: InclinationUnit) -> float:
        return InclinationUnit.convert(self.value, self.unit, unit)

    def add(self, other: Inclination) -> Inclination:
        total = self.get(InclinationUnit.DEGREES) + other.get(InclinationUnit.DEGREES)
        return Inclination(
            value=InclinationUnit.convert(total, InclinationUnit.DEGREES, self.unit),
            unit=self.unit,
        )

    @classmethod
    def degrees(cls, value: float) -> Inclination:
        return cls(value=value, unit=InclinationUnit.DEGREES)
