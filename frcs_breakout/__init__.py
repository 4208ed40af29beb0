# -*- coding: utf-8 -*-
"""FRCS to Breakout Conversion Library.

A Python library for converting parsed FRCS cave survey data (trip headers,
shots, plot coordinates and trip summaries) into the breakout (metacave)
document format used by cave mapping tools.

Usage:
    from frcs_breakout import CaveInput, convert_to_breakout

    breakout = convert_to_breakout({"Fisher Ridge Cave System": cave_input})
    for name, cave in breakout.caves.items():
        for trip in cave.trips:
            if trip is not None:
                print(f"{name}: {trip.name}")

    # Or convert a JSON input file
    from frcs_breakout import BreakoutInterface
    json_str = BreakoutInterface.convert_file(Path("caves.json"))
"""

__version__ = "0.1.0"

from frcs_breakout.constants import FEET_TO_METERS
from frcs_breakout.constants import JSON_ENCODING
from frcs_breakout.converter import convert_cave
from frcs_breakout.converter import convert_to_breakout
from frcs_breakout.converter import convert_trip
from frcs_breakout.enums import AngleUnit
from frcs_breakout.enums import Direction
from frcs_breakout.enums import InclinationUnit
from frcs_breakout.enums import LengthUnit
from frcs_breakout.errors import BreakoutError
from frcs_breakout.errors import InvalidInputError
from frcs_breakout.frcs.models import FrcsLruds
from frcs_breakout.frcs.models import FrcsPlotFile
from frcs_breakout.frcs.models import FrcsPlotShot
from frcs_breakout.frcs.models import FrcsShot
from frcs_breakout.frcs.models import FrcsSurveyFile
from frcs_breakout.frcs.models import FrcsTrip
from frcs_breakout.frcs.models import FrcsTripHeader
from frcs_breakout.frcs.models import FrcsTripSummary
from frcs_breakout.frcs.models import FrcsTripSummaryFile
from frcs_breakout.frcs.models import ZeroReference
from frcs_breakout.interface import BreakoutInterface
from frcs_breakout.models import BreakoutData
from frcs_breakout.models import Cave
from frcs_breakout.models import CaveInput
from frcs_breakout.plot.converter import convert_plot
from frcs_breakout.plot.models import FixedStation
from frcs_breakout.plot.models import FixedStations
from frcs_breakout.survey.builder import SurveySequenceBuilder
from frcs_breakout.survey.builder import convert_survey
from frcs_breakout.survey.models import EmptyShot
from frcs_breakout.survey.models import ShotMeasurement
from frcs_breakout.survey.models import ShotRecord
from frcs_breakout.survey.models import StationRecord
from frcs_breakout.trip.header import convert_trip_header
from frcs_breakout.trip.models import Surveyor
from frcs_breakout.trip.models import Trip
from frcs_breakout.unitized import Angle
from frcs_breakout.unitized import Inclination
from frcs_breakout.unitized import Length

__all__ = [
    # Constants
    "FEET_TO_METERS",
    "JSON_ENCODING",
    # Quantities
    "Angle",
    "AngleUnit",
    # Output Models
    "BreakoutData",
    # Errors
    "BreakoutError",
    # I/O
    "BreakoutInterface",
    "Cave",
    # Input Models
    "CaveInput",
    "Direction",
    "EmptyShot",
    "FixedStation",
    "FixedStations",
    "FrcsLruds",
    "FrcsPlotFile",
    "FrcsPlotShot",
    "FrcsShot",
    "FrcsSurveyFile",
    "FrcsTrip",
    "FrcsTripHeader",
    "FrcsTripSummary",
    "FrcsTripSummaryFile",
    "Inclination",
    "InclinationUnit",
    "InvalidInputError",
    "Length",
    "LengthUnit",
    "ShotMeasurement",
    "ShotRecord",
    "StationRecord",
    # Conversion
    "SurveySequenceBuilder",
    "Surveyor",
    "Trip",
    "ZeroReference",
    "convert_cave",
    "convert_plot",
    "convert_survey",
    "convert_to_breakout",
    "convert_trip",
    "convert_trip_header",
]
