# -*- coding: utf-8 -*-
"""Trip header conversion and trip models."""

from frcs_breakout.trip.header import convert_trip_header
from frcs_breakout.trip.header import survey_notes_file_name
from frcs_breakout.trip.models import Surveyor
from frcs_breakout.trip.models import Trip
from frcs_breakout.trip.units import resolve_trip_units

__all__ = [
    "Surveyor",
    "Trip",
    "convert_trip_header",
    "resolve_trip_units",
    "survey_notes_file_name",
]
