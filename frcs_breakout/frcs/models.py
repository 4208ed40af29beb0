# -*- coding: utf-8 -*-
"""Input data models for parsed FRCS survey, plot and trip summary files.

Parsing the raw FRCS text files happens elsewhere; these Pydantic models
describe the structured records that parser hands over:

- FrcsShot: A single instrument shot (a leg, or a splay when ``to`` is absent)
- FrcsTripHeader: Title, team, date and units of a trip
- FrcsTrip: A trip header with its ordered shots
- FrcsSurveyFile: All trips of a cave survey file
- FrcsPlotShot / FrcsPlotFile: Computed plot coordinates
- FrcsTripSummary / FrcsTripSummaryFile: Per-trip overrides
- ZeroReference: Absolute offset of the plot coordinates

Measurements are unit-tagged (see ``frcs_breakout.unitized``), so a shot
may mix units freely.
"""

from __future__ import annotations

import datetime  # noqa: TC003

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from frcs_breakout.enums import AngleUnit
from frcs_breakout.enums import InclinationUnit
from frcs_breakout.enums import LengthUnit
from frcs_breakout.unitized import Angle
from frcs_breakout.unitized import Inclination
from frcs_breakout.unitized import Length


class FrcsLruds(BaseModel):
    """Wall clearances recorded at a station."""

    model_config = ConfigDict(populate_by_name=True)

    left: Length | None = None
    right: Length | None = None
    up: Length | None = None
    down: Length | None = None


class FrcsShot(BaseModel):
    """A single instrument shot.

    A shot without a TO station is a splay from the FROM station.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    from_station: str = Field(alias="from")
    to_station: str | None = Field(default=None, alias="to")
    distance: Length | None = None
    frontsight_azimuth: Angle | None = Field(default=None, alias="frontsightAzimuth")
    backsight_azimuth: Angle | None = Field(default=None, alias="backsightAzimuth")
    frontsight_inclination: Inclination | None = Field(
        default=None, alias="frontsightInclination"
    )
    backsight_inclination: Inclination | None = Field(
        default=None, alias="backsightInclination"
    )
    exclude_distance: bool = Field(default=False, alias="excludeDistance")
    from_lruds: FrcsLruds | None = Field(default=None, alias="fromLruds")
    to_lruds: FrcsLruds | None = Field(default=None, alias="toLruds")
    comment: str | None = None

    @property
    def is_splay(self) -> bool:
        return not self.to_station


class FrcsTripHeader(BaseModel):
    """Descriptive metadata and units of a trip."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    team: list[str] | None = None
    date: datetime.date | None = None
    distance_unit: LengthUnit = Field(default=LengthUnit.FEET, alias="distanceUnit")
    azimuth_unit: AngleUnit = Field(default=AngleUnit.DEGREES, alias="azimuthUnit")
    inclination_unit: InclinationUnit = Field(
        default=InclinationUnit.DEGREES, alias="inclinationUnit"
    )
    backsight_azimuth_corrected: bool = Field(
        default=False, alias="backsightAzimuthCorrected"
    )
    backsight_inclination_corrected: bool = Field(
        default=False, alias="backsightInclinationCorrected"
    )


class FrcsTrip(BaseModel):
    """A trip: its header and the shots in the order they were recorded."""

    model_config = ConfigDict(populate_by_name=True)

    header: FrcsTripHeader
    shots: list[FrcsShot] = Field(default_factory=list)


class FrcsSurveyFile(BaseModel):
    """A parsed survey file.

    ``trips`` is positional: a ``None`` entry is an empty slot whose
    position still counts toward the trip numbers that follow it.
    """

    model_config = ConfigDict(populate_by_name=True)

    cave: str | None = None
    location: str | None = None
    trips: list[FrcsTrip | None] = Field(default_factory=list)

    @property
    def total_shots(self) -> int:
        return sum(len(trip.shots) for trip in self.trips if trip is not None)


class FrcsPlotShot(BaseModel):
    """A computed plot position for the terminal station of a shot."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    to_name: str = Field(alias="toName")
    from_name: str | None = Field(default=None, alias="fromName")
    northing: Length
    easting: Length
    elevation: Length


class FrcsPlotFile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shots: list[FrcsPlotShot] = Field(default_factory=list)


class ZeroReference(BaseModel):
    """Absolute offset of a cave's plot coordinates; the origin by default."""

    model_config = ConfigDict(frozen=True)

    northing: Length = Field(default_factory=lambda: Length.meters(0))
    easting: Length = Field(default_factory=lambda: Length.meters(0))
    elevation: Length = Field(default_factory=lambda: Length.meters(0))


class FrcsTripSummary(BaseModel):
    """Per-trip values that take precedence over the survey file header."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    trip_number: int | None = Field(default=None, alias="tripNumber")
    date: datetime.date | None = None
    team: list[str] | None = None
    name: str | None = None


class FrcsTripSummaryFile(BaseModel):
    """Trip summaries, aligned by position with the survey file trips."""

    model_config = ConfigDict(populate_by_name=True)

    trip_summaries: list[FrcsTripSummary | None] = Field(
        default_factory=list, alias="tripSummaries"
    )

    def get(self, trip_index: int) -> FrcsTripSummary | None:
        """Return the summary at ``trip_index`` (0-based), if any."""
        if 0 <= trip_index < len(self.trip_summaries):
            return self.trip_summaries[trip_index]
        return None
