# -*- coding: utf-8 -*-
"""Tests for fixed station conversion."""

import logging

from frcs_breakout.constants import DEFAULT_DATUM
from frcs_breakout.constants import DEFAULT_ELLIPSOID
from frcs_breakout.enums import LengthUnit
from frcs_breakout.frcs.models import FrcsPlotFile
from frcs_breakout.frcs.models import FrcsPlotShot
from frcs_breakout.plot.converter import convert_plot
from frcs_breakout.unitized import Length


def plot_shot(name: str, north: float, east: float, elev: float) -> FrcsPlotShot:
    return FrcsPlotShot(
        to_name=name,
        northing=Length.feet(north),
        easting=Length.feet(east),
        elevation=Length.feet(elev),
    )


class TestConvertPlot:
    """Tests for convert_plot."""

    def test_zero_reference_offset(self, entrance_plot, zero_reference):
        """Test that plot coordinates are offset and reported in meters."""
        (group,) = convert_plot(entrance_plot, 14, zero_reference)

        assert group.model_dump(mode="json", by_alias=True, exclude_none=True) == {
            "distUnit": "m",
            "ellipsoid": "WGS84",
            "datum": "WGS84",
            "utmZone": 14,
            "stations": {
                "AE20": {"north": "10.000", "east": "20.000", "elev": "30.000"},
                "AE19": {"north": "11.177", "east": "21.981", "elev": "28.324"},
            },
        }

    def test_default_zero_reference(self, entrance_plot):
        """Test that without a zero reference the origin is used."""
        (group,) = convert_plot(entrance_plot, -16)

        assert group.utm_zone == -16
        assert group.dist_unit == LengthUnit.METERS
        assert group.stations["AE20"].north == "0.000"
        assert group.stations["AE19"].north == "1.177"
        assert group.stations["AE19"].east == "1.981"
        assert group.stations["AE19"].elev == "-1.676"

    def test_last_shot_wins(self, caplog):
        """Test that a station positioned twice keeps the last position."""
        plot = FrcsPlotFile(
            shots=[plot_shot("A1", 1, 1, 1), plot_shot("A1", 10, 10, 10)]
        )

        with caplog.at_level(logging.DEBUG, logger="frcs_breakout.plot.converter"):
            (group,) = convert_plot(plot, 14)

        assert list(group.stations) == ["A1"]
        assert group.stations["A1"].north == "3.048"
        assert "A1" in caplog.text

    def test_non_finite_coordinate_is_omitted(self):
        """Test that a NaN coordinate is left out of the station."""
        plot = FrcsPlotFile(shots=[plot_shot("A1", float("nan"), 0, 0)])

        (group,) = convert_plot(plot, 14)

        assert group.stations["A1"].model_dump(exclude_none=True) == {
            "east": "0.000",
            "elev": "0.000",
        }

    def test_empty_plot(self):
        """Test that an empty plot gives a group without stations."""
        (group,) = convert_plot(FrcsPlotFile(), 14)

        assert group.stations == {}

    def test_geodetic_labels(self, entrance_plot):
        """Test that fixed stations report the default ellipsoid and datum."""
        (group,) = convert_plot(entrance_plot, 14)

        assert group.ellipsoid == DEFAULT_ELLIPSOID == "WGS84"
        assert group.datum == DEFAULT_DATUM == "WGS84"
