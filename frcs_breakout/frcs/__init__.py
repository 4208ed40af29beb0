# -*- coding: utf-8 -*-
"""Structured FRCS input records."""

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

__all__ = [
    "FrcsLruds",
    "FrcsPlotFile",
    "FrcsPlotShot",
    "FrcsShot",
    "FrcsSurveyFile",
    "FrcsTrip",
    "FrcsTripHeader",
    "FrcsTripSummary",
    "FrcsTripSummaryFile",
    "ZeroReference",
]
