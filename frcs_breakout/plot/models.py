# -*- coding: utf-8 -*-
"""Fixed station models for breakout documents."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from frcs_breakout.constants import DEFAULT_DATUM
from frcs_breakout.constants import DEFAULT_ELLIPSOID
from frcs_breakout.enums import LengthUnit


class FixedStation(BaseModel):
    """Absolute coordinates of a station, as fixed-precision strings."""

    model_config = ConfigDict(populate_by_name=True)

    north: str | None = None
    east: str | None = None
    elev: str | None = None


class FixedStations(BaseModel):
    """A group of fixed stations sharing one unit and geodetic frame."""

    model_config = ConfigDict(populate_by_name=True)

    dist_unit: LengthUnit = Field(default=LengthUnit.METERS, alias="distUnit")
    ellipsoid: str = DEFAULT_ELLIPSOID
    datum: str = DEFAULT_DATUM
    utm_zone: int | None = Field(default=None, alias="utmZone")
    stations: dict[str, FixedStation] = Field(default_factory=dict)
