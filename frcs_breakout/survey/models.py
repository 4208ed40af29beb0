# -*- coding: utf-8 -*-
"""Survey sequence models for breakout documents.

A trip's survey is an ordered sequence alternating stations and shots:

- StationRecord: A station, with optional LRUDs and splay readings
- ShotRecord: The readings of one leg between its neighbouring stations
- EmptyShot: A break; the stations on either side are not connected

``SurveyEntry`` is the closed union of the three. The variant is picked
from the keys present, so a serialized sequence validates back into the
same variants.
"""

from __future__ import annotations

from typing import Annotated
from typing import Any
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Discriminator
from pydantic import Field
from pydantic import Tag

from frcs_breakout.enums import Direction


class ShotMeasurement(BaseModel):
    """One sight of a shot; absent fields were not read (or not finite)."""

    model_config = ConfigDict(populate_by_name=True)

    direction: Direction = Field(alias="dir")
    dist: str | None = None
    azm: str | None = None
    inc: str | None = None


class StationRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    station: str
    lrud: list[str] | None = None
    splays: list[ShotMeasurement] | None = None


class ShotRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exclude_dist: bool | None = Field(default=None, alias="excludeDist")
    measurements: list[ShotMeasurement] = Field(default_factory=list)


class EmptyShot(BaseModel):
    """Placeholder marking a discontinuity in the sequence."""

    model_config = ConfigDict(extra="forbid")


def _survey_entry_tag(value: Any) -> str:
    if isinstance(value, StationRecord):
        return "station"
    if isinstance(value, ShotRecord):
        return "shot"
    if isinstance(value, EmptyShot):
        return "empty"
    if isinstance(value, dict):
        if "station" in value:
            return "station"
        if value.keys() & {"measurements", "excludeDist", "exclude_dist"}:
            return "shot"
    return "empty"


SurveyEntry = Annotated[
    Union[
        Annotated[StationRecord, Tag("station")],
        Annotated[ShotRecord, Tag("shot")],
        Annotated[EmptyShot, Tag("empty")],
    ],
    Discriminator(_survey_entry_tag),
]
