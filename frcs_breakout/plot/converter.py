# -*- coding: utf-8 -*-
"""Fixed station conversion.

Turns the plot-relative coordinates of an FRCS plot file into absolute
fixed stations by adding the cave's zero reference. Coordinates are
reported in meters with millimeter precision.
"""

from __future__ import annotations

import logging

from frcs_breakout.constants import COORDINATE_PRECISION
from frcs_breakout.enums import LengthUnit
from frcs_breakout.format import format_fixed
from frcs_breakout.frcs.models import FrcsPlotFile
from frcs_breakout.frcs.models import ZeroReference
from frcs_breakout.plot.models import FixedStation
from frcs_breakout.plot.models import FixedStations
from frcs_breakout.unitized import Length

logger = logging.getLogger(__name__)

FIXED_STATION_UNIT = LengthUnit.METERS


def _absolute(relative: Length, offset: Length) -> str | None:
    return format_fixed(
        relative.add(offset).get(FIXED_STATION_UNIT), COORDINATE_PRECISION
    )


def convert_plot(
    plot: FrcsPlotFile,
    utm_zone: int,
    zero_reference: ZeroReference | None = None,
) -> list[FixedStations]:
    """Convert plot shots into a single group of fixed stations.

    Each shot positions its TO station. When several shots end at the same
    station, the last one wins.

    Args:
        plot: Parsed plot file
        utm_zone: UTM zone of the cave
        zero_reference: Offset added to every plot coordinate (default: origin)

    Returns:
        A one element list holding the fixed station group
    """
    if zero_reference is None:
        zero_reference = ZeroReference()

    stations: dict[str, FixedStation] = {}
    for shot in plot.shots:
        if shot.to_name in stations:
            logger.debug("Plot station `%s` repositioned by a later shot", shot.to_name)
        stations[shot.to_name] = FixedStation(
            north=_absolute(shot.northing, zero_reference.northing),
            east=_absolute(shot.easting, zero_reference.easting),
            elev=_absolute(shot.elevation, zero_reference.elevation),
        )

    return [
        FixedStations(
            dist_unit=FIXED_STATION_UNIT,
            utm_zone=utm_zone,
            stations=stations,
        )
    ]
