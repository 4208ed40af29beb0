# -*- coding: utf-8 -*-
"""Trip header conversion.

Builds the descriptive part of a breakout trip from an FRCS trip header and
its optional trip summary. Summary values take precedence over the header:

- trip number: summary number, else the trip's position (1-based)
- team: summary team (even an empty one), else header team, else nobody
- date: summary date, else header date
"""

from __future__ import annotations

import datetime

from frcs_breakout.constants import SURVEY_NOTES_EXTENSION
from frcs_breakout.enums import AngleUnit
from frcs_breakout.frcs.models import FrcsTripHeader
from frcs_breakout.frcs.models import FrcsTripSummary
from frcs_breakout.trip.models import Surveyor
from frcs_breakout.trip.models import Trip
from frcs_breakout.trip.units import resolve_trip_units


def resolve_trip_number(trip_number: int, summary: FrcsTripSummary | None) -> int:
    if summary is not None and summary.trip_number is not None:
        return summary.trip_number
    return trip_number


def resolve_trip_date(
    header: FrcsTripHeader, summary: FrcsTripSummary | None
) -> datetime.date | None:
    if summary is not None and summary.date is not None:
        return summary.date
    return header.date


def survey_notes_file_name(
    prefix: str | None, trip_number: int | None, date: datetime.date | None
) -> str | None:
    """Name of the scanned notes of a trip.

    Args:
        prefix: Caller supplied file name prefix (e.g. ``"FRCS"``)
        trip_number: Resolved trip number
        date: Resolved trip date

    Returns:
        ``<prefix>_<number>_<month>-<day>-<year>.pdf`` without zero padding,
        or None unless all three parts are known
    """
    if not prefix or trip_number is None or date is None:
        return None
    return (
        f"{prefix}_{trip_number}_{date.month}-{date.day}-{date.year}"
        f"{SURVEY_NOTES_EXTENSION}"
    )


def convert_trip_header(
    trip_number: int,
    header: FrcsTripHeader,
    summary: FrcsTripSummary | None = None,
    survey_notes_file_prefix: str | None = None,
) -> Trip:
    """Convert an FRCS trip header into a breakout trip without survey data.

    Args:
        trip_number: Position of the trip in its survey file (1-based)
        header: The trip header
        summary: Optional trip summary overriding number, team and date
        survey_notes_file_prefix: Prefix of the survey notes file name

    Returns:
        Trip with an empty survey sequence
    """
    number = resolve_trip_number(trip_number, summary)

    if summary is not None and summary.team is not None:
        team = summary.team
    else:
        team = header.team or []
    surveyors = {name: Surveyor() for name in team}

    distance_unit, azimuth_unit, inclination_unit = resolve_trip_units(header)
    date = resolve_trip_date(header, summary)

    return Trip(
        name=f"{number} {header.name}",
        date=date.isoformat() if date is not None else None,
        surveyors=surveyors,
        dist_unit=distance_unit,
        angle_unit=AngleUnit.DEGREES,
        azm_fs_unit=azimuth_unit,
        azm_bs_unit=azimuth_unit,
        inc_fs_unit=inclination_unit,
        inc_bs_unit=inclination_unit,
        azm_backsights_corrected=header.backsight_azimuth_corrected,
        inc_backsights_corrected=header.backsight_inclination_corrected,
        survey_notes_file=survey_notes_file_name(
            survey_notes_file_prefix, number, date
        ),
    )
