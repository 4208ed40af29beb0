# -*- coding: utf-8 -*-
"""Units reported for a trip.

Breakout trips only use the units FRCS can record; anything else falls back
to feet / degrees. The resolved units are also the ones shot values are
extracted in, so a trip's numbers always match the units it reports.
"""

from frcs_breakout.enums import AngleUnit
from frcs_breakout.enums import InclinationUnit
from frcs_breakout.enums import LengthUnit
from frcs_breakout.frcs.models import FrcsTripHeader

DISTANCE_UNITS: frozenset[LengthUnit] = frozenset({LengthUnit.FEET, LengthUnit.METERS})
DEFAULT_DISTANCE_UNIT = LengthUnit.FEET

AZIMUTH_UNITS: frozenset[AngleUnit] = frozenset(
    {AngleUnit.DEGREES, AngleUnit.GRADIANS, AngleUnit.MILS}
)
DEFAULT_AZIMUTH_UNIT = AngleUnit.DEGREES

INCLINATION_UNITS: frozenset[InclinationUnit] = frozenset(
    {
        InclinationUnit.DEGREES,
        InclinationUnit.GRADIANS,
        InclinationUnit.MILS,
        InclinationUnit.PERCENT_GRADE,
    }
)
DEFAULT_INCLINATION_UNIT = InclinationUnit.DEGREES


def resolve_trip_units(
    header: FrcsTripHeader,
) -> tuple[LengthUnit, AngleUnit, InclinationUnit]:
    """Map a trip header's units onto the supported breakout units.

    Returns:
        (distance unit, azimuth unit, inclination unit)
    """
    distance_unit = (
        header.distance_unit
        if header.distance_unit in DISTANCE_UNITS
        else DEFAULT_DISTANCE_UNIT
    )
    azimuth_unit = (
        header.azimuth_unit
        if header.azimuth_unit in AZIMUTH_UNITS
        else DEFAULT_AZIMUTH_UNIT
    )
    inclination_unit = (
        header.inclination_unit
        if header.inclination_unit in INCLINATION_UNITS
        else DEFAULT_INCLINATION_UNIT
    )
    return distance_unit, azimuth_unit, inclination_unit
