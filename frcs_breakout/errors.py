# -*- coding: utf-8 -*-
"""Exceptions raised by the frcs_breakout file interface.

The conversion itself never raises for odd measurements (they are dropped
from the output); these errors only report inputs that cannot be loaded.
"""

from pathlib import Path


class BreakoutError(Exception):
    """Base class for frcs_breakout errors."""


class InvalidInputError(BreakoutError):
    """Raised when an input document cannot be decoded or validated.

    Attributes:
        message: Error message
        source: File the input was read from (optional)
    """

    def __init__(self, message: str, source: Path | str | None = None):
        self.message = message
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        if self.source is not None:
            return f"{self.message} (in {self.source})"
        return self.message
