# -*- coding: utf-8 -*-
"""Plot module for converting FRCS plot coordinates into fixed stations."""

from frcs_breakout.plot.converter import convert_plot
from frcs_breakout.plot.models import FixedStation
from frcs_breakout.plot.models import FixedStations

__all__ = [
    "FixedStation",
    "FixedStations",
    "convert_plot",
]
