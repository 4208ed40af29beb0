# -*- coding: utf-8 -*-
"""Survey sequence builder.

Rebuilds the station/shot topology of a trip from its flat, ordered list
of instrument shots:

- Consecutive shots over the same FROM/TO pair are redundant readings of
  one leg and share a single ShotRecord. Consecutive splays from one
  station likewise share its splay list.
- A leg starting where the previous leg ended reuses that TO station.
- Any other leg starts after an EmptyShot break with a new FROM station.
- A shot without a TO station is a splay, stored on its FROM station.

Stations are never merged across breaks: a station id revisited later in
the trip gets a second, independent StationRecord.

Shots must be processed in their original order; each decision depends on
the shot immediately before it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from dataclasses import field

from frcs_breakout.enums import AngleUnit
from frcs_breakout.enums import Direction
from frcs_breakout.enums import InclinationUnit
from frcs_breakout.enums import LengthUnit
from frcs_breakout.format import format_fixed
from frcs_breakout.format import format_lrud
from frcs_breakout.frcs.models import FrcsLruds
from frcs_breakout.frcs.models import FrcsShot
from frcs_breakout.frcs.models import FrcsTrip
from frcs_breakout.survey.models import EmptyShot
from frcs_breakout.survey.models import ShotMeasurement
from frcs_breakout.survey.models import ShotRecord
from frcs_breakout.survey.models import StationRecord
from frcs_breakout.survey.models import SurveyEntry
from frcs_breakout.trip.units import resolve_trip_units

logger = logging.getLogger(__name__)


def _is_finite(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


def _shot_key(shot: FrcsShot) -> tuple[str, str | None]:
    return shot.from_station, shot.to_station or None


@dataclass
class _StitchState:
    """Rolling references of one ``build`` call.

    ``last_key`` and ``measurements`` belong to the previous shot: its
    (FROM, TO) pair and the list its readings went to. ``to_station`` is
    the TO record of the last leg; splays leave it unchanged.
    """

    survey: list[SurveyEntry] = field(default_factory=list)
    to_station: StationRecord | None = None
    last_key: tuple[str, str | None] | None = None
    measurements: list[ShotMeasurement] | None = None
    seen_stations: set[str] = field(default_factory=set)

    def continues_last_shot(self, shot: FrcsShot) -> bool:
        return self.measurements is not None and self.last_key == _shot_key(shot)

    def new_station(self, name: str) -> StationRecord:
        if name in self.seen_stations:
            logger.debug("Station `%s` appears again; emitting a separate record", name)
        self.seen_stations.add(name)
        station = StationRecord(station=name)
        self.survey.append(station)
        return station


class SurveySequenceBuilder:
    """Builds the breakout survey sequence of a trip.

    Values are extracted in the units given to the constructor. The builder
    keeps no state between calls, so one instance may be reused for any
    number of shot lists.
    """

    def __init__(
        self,
        distance_unit: LengthUnit = LengthUnit.FEET,
        azimuth_unit: AngleUnit = AngleUnit.DEGREES,
        inclination_unit: InclinationUnit = InclinationUnit.DEGREES,
    ) -> None:
        self.distance_unit = distance_unit
        self.azimuth_unit = azimuth_unit
        self.inclination_unit = inclination_unit

    def build(self, shots: list[FrcsShot]) -> list[SurveyEntry]:
        """Stitch ``shots`` into an alternating station/shot sequence.

        Args:
            shots: Shots in the order they were recorded

        Returns:
            The survey sequence (empty for an empty shot list)
        """
        state = _StitchState()

        for shot in shots:
            if not state.continues_last_shot(shot):
                # otherwise another reading of the same leg or splay
                state.measurements = self._start_leg(state, shot)
                state.last_key = _shot_key(shot)

            self._add_measurements(state.measurements, shot)

        return state.survey

    def _start_leg(
        self, state: _StitchState, shot: FrcsShot
    ) -> list[ShotMeasurement]:
        """Emit the records for a new leg or splay.

        Returns:
            The list the shot's readings belong to
        """
        if (
            state.to_station is not None
            and state.to_station.station == shot.from_station
        ):
            from_station = state.to_station
        else:
            if state.survey:
                state.survey.append(EmptyShot())
            from_station = state.new_station(shot.from_station)

        self._attach_lrud(from_station, shot.from_lruds)

        if shot.is_splay:
            if from_station.splays is None:
                from_station.splays = []
            return from_station.splays

        leg = ShotRecord()
        if shot.exclude_distance:
            leg.exclude_dist = True
        state.survey.append(leg)

        to_station = state.new_station(shot.to_station)
        self._attach_lrud(to_station, shot.to_lruds)

        state.to_station = to_station
        return leg.measurements

    def _attach_lrud(self, station: StationRecord, lruds: FrcsLruds | None) -> None:
        # first reading of a station wins
        if station.lrud is not None or lruds is None:
            return
        station.lrud = [
            format_lrud(self._length(lruds.left)),
            format_lrud(self._length(lruds.right)),
            format_lrud(self._length(lruds.up)),
            format_lrud(self._length(lruds.down)),
        ]

    def _length(self, value) -> float | None:
        return None if value is None else value.get(self.distance_unit)

    def _add_measurements(
        self, measurements: list[ShotMeasurement], shot: FrcsShot
    ) -> None:
        dist = self._length(shot.distance)
        azm_fs = (
            None
            if shot.frontsight_azimuth is None
            else shot.frontsight_azimuth.get(self.azimuth_unit)
        )
        azm_bs = (
            None
            if shot.backsight_azimuth is None
            else shot.backsight_azimuth.get(self.azimuth_unit)
        )
        inc_fs = (
            None
            if shot.frontsight_inclination is None
            else shot.frontsight_inclination.get(self.inclination_unit)
        )
        inc_bs = (
            None
            if shot.backsight_inclination is None
            else shot.backsight_inclination.get(self.inclination_unit)
        )

        # A level shot taken without reading the clinometer.
        if not _is_finite(inc_fs) and not _is_finite(inc_bs):
            if _is_finite(azm_fs):
                inc_fs = 0.0
            elif _is_finite(azm_bs):
                inc_bs = 0.0

        measurements.append(
            ShotMeasurement(
                direction=Direction.FRONTSIGHT,
                dist=format_fixed(dist),
                azm=format_fixed(azm_fs),
                inc=format_fixed(inc_fs),
            )
        )

        if _is_finite(azm_bs) or _is_finite(inc_bs):
            measurements.append(
                ShotMeasurement(
                    direction=Direction.BACKSIGHT,
                    azm=format_fixed(azm_bs),
                    inc=format_fixed(inc_bs),
                )
            )


def convert_survey(trip: FrcsTrip) -> list[SurveyEntry]:
    """Build the survey sequence of a trip in the trip's resolved units."""
    distance_unit, azimuth_unit, inclination_unit = resolve_trip_units(trip.header)
    builder = SurveySequenceBuilder(
        distance_unit=distance_unit,
        azimuth_unit=azimuth_unit,
        inclination_unit=inclination_unit,
    )
    return builder.build(trip.shots)
