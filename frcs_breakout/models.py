# -*- coding: utf-8 -*-
"""Top level data models.

This module contains the per-cave conversion input and the breakout
document produced from it:

- CaveInput: Everything known about one cave
- Cave / BreakoutData: The converted document
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from frcs_breakout.constants import UTM_MAX_ZONE
from frcs_breakout.constants import UTM_MIN_ZONE
from frcs_breakout.frcs.models import FrcsPlotFile
from frcs_breakout.frcs.models import FrcsSurveyFile
from frcs_breakout.frcs.models import FrcsTripSummaryFile
from frcs_breakout.frcs.models import ZeroReference
from frcs_breakout.plot.models import FixedStations
from frcs_breakout.trip.models import Trip


class CaveInput(BaseModel):
    """Parsed files and per-cave settings for one cave.

    Attributes:
        survey: Parsed survey file (trips and shots)
        plot: Parsed plot file; fixed stations need both this and ``utm_zone``
        summaries: Parsed trip summaries overriding trip headers
        survey_notes_file_prefix: Prefix of the scanned notes file names
        utm_zone: UTM zone (1-60 north, -1 to -60 south)
        zero_reference: Absolute offset of the plot coordinates
    """

    model_config = ConfigDict(populate_by_name=True)

    survey: FrcsSurveyFile
    plot: FrcsPlotFile | None = None
    summaries: FrcsTripSummaryFile | None = None
    survey_notes_file_prefix: str | None = Field(
        default=None, alias="surveyNotesFilePrefix"
    )
    utm_zone: int | None = Field(default=None, alias="utmZone")
    zero_reference: ZeroReference = Field(
        default_factory=ZeroReference, alias="zeroReference"
    )

    @field_validator("utm_zone")
    @classmethod
    def validate_zone(cls, v: int | None) -> int | None:
        """Validate UTM zone number.

        Positive values indicate the northern hemisphere, negative values
        the southern one. Zero is not allowed.

        Raises:
            ValueError: If zone is 0 or abs(zone) > 60
        """
        if v is None:
            return v
        if not UTM_MIN_ZONE <= abs(v) <= UTM_MAX_ZONE:
            raise ValueError(
                f"UTM zone must be between -{UTM_MAX_ZONE} and {UTM_MAX_ZONE} "
                f"(excluding 0), got {v}"
            )
        return v


class Cave(BaseModel):
    """A converted cave.

    ``trips`` is positional: a trip missing from the survey file leaves a
    ``None`` hole so later trips keep their index.
    """

    model_config = ConfigDict(populate_by_name=True)

    fixed_stations: list[FixedStations] | None = Field(
        default=None, alias="fixedStations"
    )
    trips: list[Trip | None] = Field(default_factory=list)


class BreakoutData(BaseModel):
    """A breakout document: converted caves by name."""

    model_config = ConfigDict(populate_by_name=True)

    caves: dict[str, Cave] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Dump to the JSON-ready breakout document."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
