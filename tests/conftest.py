# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared fixtures building small FRCS inputs, modelled on
the first trips of the Fisher Ridge Cave System survey.
"""

from __future__ import annotations

import datetime
import logging

import pytest

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
from frcs_breakout.models import CaveInput
from frcs_breakout.unitized import Angle
from frcs_breakout.unitized import Inclination
from frcs_breakout.unitized import Length

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

CAVE_NAME = "Fisher Ridge Cave System"


# =============================================================================
# Builders
# =============================================================================


def lruds(left=None, right=None, up=None, down=None) -> FrcsLruds:
    """Build LRUDs in feet; ``None`` components stay missing."""
    return FrcsLruds(
        left=None if left is None else Length.feet(left),
        right=None if right is None else Length.feet(right),
        up=None if up is None else Length.feet(up),
        down=None if down is None else Length.feet(down),
    )


def make_shot(
    from_station: str,
    to_station: str | None = None,
    *,
    dist: float | None = None,
    azm_fs: float | None = None,
    azm_bs: float | None = None,
    inc_fs: float | None = None,
    inc_bs: float | None = None,
    **kwargs,
) -> FrcsShot:
    """Build a shot with distances in feet and angles in degrees."""
    return FrcsShot(
        from_station=from_station,
        to_station=to_station,
        distance=None if dist is None else Length.feet(dist),
        frontsight_azimuth=None if azm_fs is None else Angle.degrees(azm_fs),
        backsight_azimuth=None if azm_bs is None else Angle.degrees(azm_bs),
        frontsight_inclination=None if inc_fs is None else Inclination.degrees(inc_fs),
        backsight_inclination=None if inc_bs is None else Inclination.degrees(inc_bs),
        **kwargs,
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def entrance_trip() -> FrcsTrip:
    """First trip: a splay at the entrance then three chained legs."""
    return FrcsTrip(
        header=FrcsTripHeader(
            name="ENTRANCE DROPS, TRICKY TRAVERSE",
            team=["Peter Quick", "Keith Ortiz"],
            date=datetime.date(1981, 2, 15),
            backsight_azimuth_corrected=True,
        ),
        shots=[
            make_shot("AE20", dist=0, from_lruds=lruds(1, 3, 0, 2)),
            make_shot(
                "AE20",
                "AE19",
                dist=9.3,
                azm_fs=60,
                inc_fs=-36,
                azm_bs=60,
                to_lruds=lruds(2, 12, 0, 20),
            ),
            make_shot(
                "AE19",
                "AE18",
                dist=24.5,
                azm_fs=0,
                inc_fs=-90,
                azm_bs=0,
                to_lruds=lruds(6, 10, 25, 0),
            ),
            make_shot(
                "AE18",
                "AE17",
                dist=8,
                azm_fs=350.5,
                inc_fs=17,
                azm_bs=350.5,
                to_lruds=lruds(3, 5, 0, None),
            ),
        ],
    )


@pytest.fixture
def crawlway_trip() -> FrcsTrip:
    """Second trip: a single leg with a meters/grads header."""
    return FrcsTrip(
        header=FrcsTripHeader(
            name="FIRST SURVEY IN UPPER CROWLWAY",
            team=["Dan Crowl"],
            date=datetime.date(1981, 2, 14),
        ),
        shots=[
            make_shot("A1", "A2", dist=586, azm_fs=292, inc_fs=-42, azm_bs=110),
        ],
    )


@pytest.fixture
def entrance_plot() -> FrcsPlotFile:
    return FrcsPlotFile(
        shots=[
            FrcsPlotShot(
                to_name="AE20",
                northing=Length.feet(0),
                easting=Length.feet(0),
                elevation=Length.feet(0),
            ),
            FrcsPlotShot(
                to_name="AE19",
                from_name="AE20",
                northing=Length.feet(3.86),
                easting=Length.feet(6.5),
                elevation=Length.feet(-5.5),
            ),
        ]
    )


@pytest.fixture
def zero_reference() -> ZeroReference:
    return ZeroReference(
        northing=Length.meters(10),
        easting=Length.meters(20),
        elevation=Length.meters(30),
    )


@pytest.fixture
def cave_input(
    entrance_trip: FrcsTrip,
    crawlway_trip: FrcsTrip,
    entrance_plot: FrcsPlotFile,
    zero_reference: ZeroReference,
) -> CaveInput:
    """A complete cave: two trips, a plot, summaries and a zero reference."""
    return CaveInput(
        survey=FrcsSurveyFile(
            cave=CAVE_NAME,
            trips=[entrance_trip, crawlway_trip],
        ),
        plot=entrance_plot,
        summaries=FrcsTripSummaryFile(
            trip_summaries=[
                None,
                FrcsTripSummary(
                    trip_number=2,
                    team=["Dan Crowl", "Keith Ortiz", "Chip Hopper"],
                ),
            ]
        ),
        survey_notes_file_prefix="FRCS",
        utm_zone=14,
        zero_reference=zero_reference,
    )
