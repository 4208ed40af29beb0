# -*- coding: utf-8 -*-
"""Trip models for breakout documents."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from frcs_breakout.enums import AngleUnit
from frcs_breakout.enums import InclinationUnit
from frcs_breakout.enums import LengthUnit
from frcs_breakout.survey.models import SurveyEntry


class Surveyor(BaseModel):
    """Per-surveyor details; FRCS records names only, so usually empty."""

    roles: str | list[str] | None = None


class Trip(BaseModel):
    """A converted trip: descriptive header plus its survey sequence.

    ``date`` is an ISO calendar date (``YYYY-MM-DD``). ``angle_unit`` is
    always degrees; the per-sight units say how shots were read.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    date: str | None = None
    surveyors: dict[str, Surveyor] = Field(default_factory=dict)
    dist_unit: LengthUnit = Field(default=LengthUnit.FEET, alias="distUnit")
    angle_unit: AngleUnit = Field(default=AngleUnit.DEGREES, alias="angleUnit")
    azm_fs_unit: AngleUnit | None = Field(default=None, alias="azmFsUnit")
    azm_bs_unit: AngleUnit | None = Field(default=None, alias="azmBsUnit")
    inc_fs_unit: InclinationUnit | None = Field(default=None, alias="incFsUnit")
    inc_bs_unit: InclinationUnit | None = Field(default=None, alias="incBsUnit")
    azm_backsights_corrected: bool = Field(
        default=False, alias="azmBacksightsCorrected"
    )
    inc_backsights_corrected: bool = Field(
        default=False, alias="incBacksightsCorrected"
    )
    survey: list[SurveyEntry] = Field(default_factory=list)
    survey_notes_file: str | None = Field(default=None, alias="surveyNotesFile")
