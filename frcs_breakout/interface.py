# -*- coding: utf-8 -*-
"""JSON interface for breakout conversion.

Reading:  JSON file -> TypeAdapter.validate_json() -> {cave: CaveInput}
Writing:  BreakoutData -> to_dict() -> orjson -> JSON file

The input document maps cave names to CaveInput objects, using the field
names or aliases of the ``frcs_breakout.frcs`` models.
"""

from __future__ import annotations

import logging
from pathlib import Path

import orjson
from pydantic import TypeAdapter
from pydantic import ValidationError

from frcs_breakout.constants import JSON_ENCODING
from frcs_breakout.converter import convert_to_breakout
from frcs_breakout.errors import InvalidInputError
from frcs_breakout.models import BreakoutData
from frcs_breakout.models import CaveInput

logger = logging.getLogger(__name__)

_CAVE_INPUTS = TypeAdapter(dict[str, CaveInput])


class BreakoutInterface:
    """Unified interface for breakout conversion I/O.

    Example:
        data = BreakoutInterface.load_input(Path("caves.json"))
        breakout = convert_to_breakout(data)
        BreakoutInterface.save_json(breakout, Path("breakout.json"))
    """

    @classmethod
    def load_input(cls, path: Path) -> dict[str, CaveInput]:
        """Load the per-cave conversion input.

        Args:
            path: Path to the JSON input file

        Returns:
            Cave name -> CaveInput

        Raises:
            FileNotFoundError: If the file doesn't exist
            InvalidInputError: If the content is not a valid input document
        """
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        return cls.parse_input(path.read_bytes(), source=path)

    @classmethod
    def parse_input(
        cls, data: str | bytes, source: Path | str | None = None
    ) -> dict[str, CaveInput]:
        """Validate a JSON input document.

        Raises:
            InvalidInputError: If the content is not a valid input document
        """
        try:
            return _CAVE_INPUTS.validate_json(data)
        except ValidationError as e:
            raise InvalidInputError(
                f"Invalid input ({e.error_count()} errors): {e}", source
            ) from e

    @classmethod
    def to_json(cls, breakout: BreakoutData, *, minify: bool = False) -> str:
        opts = 0 if minify else orjson.OPT_INDENT_2
        return orjson.dumps(breakout.to_dict(), option=opts).decode(JSON_ENCODING)

    @classmethod
    def save_json(
        cls, breakout: BreakoutData, path: Path, *, minify: bool = False
    ) -> None:
        """Write a breakout document as JSON."""
        path.write_text(cls.to_json(breakout, minify=minify), encoding=JSON_ENCODING)

    @classmethod
    def load_json(cls, path: Path) -> BreakoutData:
        """Load a breakout document previously written by ``save_json``."""
        return BreakoutData.model_validate_json(path.read_text(encoding=JSON_ENCODING))

    @classmethod
    def convert_file(
        cls,
        input_path: Path,
        output_path: Path | None = None,
        *,
        minify: bool = False,
    ) -> str:
        """Convert an input file to a breakout JSON document.

        Args:
            input_path: JSON input file (cave name -> CaveInput)
            output_path: Optional output path (only returns the JSON if None)
            minify: Omit indentation for compact output

        Returns:
            The breakout JSON string
        """
        breakout = convert_to_breakout(cls.load_input(input_path))
        json_str = cls.to_json(breakout, minify=minify)

        if output_path is not None:
            output_path.write_text(json_str, encoding=JSON_ENCODING)
            logger.info("Wrote breakout document to %s", output_path)

        return json_str
