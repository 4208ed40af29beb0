# -*- coding: utf-8 -*-
"""Constants used throughout the frcs_breakout library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Encoding used for JSON files
JSON_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# Unit Conversions
# -----------------------------------------------------------------------------

#: Conversion factor from feet to meters
FEET_TO_METERS: float = 0.3048

#: NATO mils in a full circle
MILS_PER_CIRCLE: float = 6400.0

#: Gradians in a full circle
GRADIANS_PER_CIRCLE: float = 400.0

# -----------------------------------------------------------------------------
# Formatting Constants
# -----------------------------------------------------------------------------

#: Decimal precision of shot distances, azimuths, inclinations and LRUDs
SHOT_PRECISION: int = 2

#: Decimal precision of fixed station coordinates
COORDINATE_PRECISION: int = 3

#: LRUD component emitted when the reading is missing (distinct from "0.00")
MISSING_LRUD_STRING: str = "0"

#: Extension of the scanned survey notes referenced by each trip
SURVEY_NOTES_EXTENSION: str = ".pdf"

# -----------------------------------------------------------------------------
# Geodetic Labels
# -----------------------------------------------------------------------------

#: Ellipsoid reported for fixed stations
DEFAULT_ELLIPSOID: str = "WGS84"

#: Datum reported for fixed stations
DEFAULT_DATUM: str = "WGS84"

#: Valid absolute UTM zone numbers
UTM_MIN_ZONE: int = 1
UTM_MAX_ZONE: int = 60
