# -*- coding: utf-8 -*-
"""Conversion of parsed FRCS caves into a breakout document.

Usage:
    from frcs_breakout import CaveInput, convert_to_breakout

    breakout = convert_to_breakout({"Fisher Ridge Cave System": cave_input})
    document = breakout.to_dict()

Every cave and every trip is converted independently from its own input;
nothing is shared between calls.
"""

from __future__ import annotations

import logging

from frcs_breakout.frcs.models import FrcsTrip
from frcs_breakout.frcs.models import FrcsTripSummary
from frcs_breakout.models import BreakoutData
from frcs_breakout.models import Cave
from frcs_breakout.models import CaveInput
from frcs_breakout.plot.converter import convert_plot
from frcs_breakout.survey.builder import convert_survey
from frcs_breakout.trip.header import convert_trip_header
from frcs_breakout.trip.models import Trip

logger = logging.getLogger(__name__)


def convert_trip(
    trip_number: int,
    trip: FrcsTrip,
    summary: FrcsTripSummary | None = None,
    survey_notes_file_prefix: str | None = None,
) -> Trip:
    """Convert one trip: header fields plus its survey sequence."""
    result = convert_trip_header(
        trip_number,
        trip.header,
        summary=summary,
        survey_notes_file_prefix=survey_notes_file_prefix,
    )
    result.survey = convert_survey(trip)
    return result


def convert_cave(cave: CaveInput) -> Cave:
    """Convert all trips of a cave, and its fixed stations when possible.

    Fixed stations are only produced when both a plot file and a UTM zone
    are available.
    """
    trips: list[Trip | None] = []

    for trip_index, trip in enumerate(cave.survey.trips):
        if trip is None:
            continue
        summary = cave.summaries.get(trip_index) if cave.summaries else None
        # Pad skipped slots so the trip keeps its position.
        trips.extend([None] * (trip_index - len(trips)))
        trips.append(
            convert_trip(
                trip_index + 1,
                trip,
                summary=summary,
                survey_notes_file_prefix=cave.survey_notes_file_prefix,
            )
        )

    result = Cave(trips=trips)

    if cave.plot is not None and cave.utm_zone is not None:
        result.fixed_stations = convert_plot(
            cave.plot, cave.utm_zone, cave.zero_reference
        )

    return result


def convert_to_breakout(data: dict[str, CaveInput]) -> BreakoutData:
    """Convert every cave of ``data`` (cave name -> input).

    Returns:
        The breakout document, with caves in the order of ``data``
    """
    caves: dict[str, Cave] = {}

    for name, cave_input in data.items():
        caves[name] = convert_cave(cave_input)
        logger.info(
            "Converted cave `%s`: %d trips, %d shots",
            name,
            sum(trip is not None for trip in caves[name].trips),
            cave_input.survey.total_shots,
        )

    return BreakoutData(caves=caves)
