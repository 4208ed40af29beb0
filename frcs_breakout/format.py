# -*- coding: utf-8 -*-
"""Numeric formatting for breakout documents.

Breakout documents carry every measurement as a fixed-precision string.
A value that is missing or not finite has no string form: the caller
omits the field (or, for LRUDs, writes the missing-reading literal).
"""

import math
from decimal import ROUND_HALF_UP
from decimal import Context
from decimal import Decimal

from frcs_breakout.constants import MISSING_LRUD_STRING
from frcs_breakout.constants import SHOT_PRECISION

# Wide enough for the integer part of any finite float plus the decimals
_DECIMAL_CONTEXT = Context(prec=400)


def format_fixed(value: float | None, precision: int = SHOT_PRECISION) -> str | None:
    """Format a number with a fixed number of decimals.

    Rounds half away from zero on the exact binary value, so ``0.125``
    becomes ``"0.13"`` and ``-0.0`` becomes ``"0.00"``.

    Args:
        value: Number to format (or None)
        precision: Number of decimal digits

    Returns:
        Formatted string, or None if the value is missing or not finite
    """
    if value is None or not math.isfinite(value):
        return None
    quantum = Decimal(1).scaleb(-precision)
    # `+ 0.0` folds negative zero into positive zero
    rounded = Decimal(value + 0.0).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT
    )
    return f"{rounded:f}"


def format_lrud(value: float | None) -> str:
    """Format one LRUD component; missing readings become ``"0"``."""
    formatted = format_fixed(value)
    return MISSING_LRUD_STRING if formatted is None else formatted
