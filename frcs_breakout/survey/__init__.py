# -*- coding: utf-8 -*-
"""Survey module for building breakout survey sequences."""

from frcs_breakout.survey.builder import SurveySequenceBuilder
from frcs_breakout.survey.builder import convert_survey
from frcs_breakout.survey.models import EmptyShot
from frcs_breakout.survey.models import ShotMeasurement
from frcs_breakout.survey.models import ShotRecord
from frcs_breakout.survey.models import StationRecord
from frcs_breakout.survey.models import SurveyEntry

__all__ = [
    "EmptyShot",
    "ShotMeasurement",
    "ShotRecord",
    "StationRecord",
    "SurveyEntry",
    "SurveySequenceBuilder",
    "convert_survey",
]
