# -*- coding: utf-8 -*-
"""Convert command: parsed FRCS input JSON -> breakout JSON."""

import argparse
import logging
from pathlib import Path

from frcs_breakout.enums import FileExtension
from frcs_breakout.errors import InvalidInputError
from frcs_breakout.interface import BreakoutInterface

logger = logging.getLogger(__name__)


def convert(args: list[str]) -> int:
    """Entry point for the convert command."""
    parser = argparse.ArgumentParser(
        prog="frcs_breakout convert",
        description="Convert parsed FRCS cave data into a breakout document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  frcs_breakout convert -i caves.json                    # Output to stdout
  frcs_breakout convert -i caves.json -o breakout.json   # Output to file
  frcs_breakout convert -i caves.json --minify           # Compact output

Input:
  A JSON object mapping each cave name to its parsed survey file, and
  optionally its plot file, trip summaries, survey notes prefix, UTM zone
  and zero reference.

Notes:
  - Fixed stations are only written for caves with both a plot and a UTM zone
  - Fixed station coordinates are in meters
""",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="Input JSON file path",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output JSON file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--minify",
        action="store_true",
        help="Omit indentation in the output",
    )

    parsed_args = parser.parse_args(args)

    if not parsed_args.input_file.exists():
        logger.error("Error: Input file not found: %s", parsed_args.input_file)
        return 1

    if parsed_args.input_file.suffix.lower() != FileExtension.JSON.value:
        logger.error("Error: Input file must be a .json file: %s", parsed_args.input_file)
        return 1

    try:
        result = BreakoutInterface.convert_file(
            parsed_args.input_file,
            output_path=parsed_args.output_file,
            minify=parsed_args.minify,
        )

        if parsed_args.output_file is None:
            print(result)  # noqa: T201

        else:
            logger.info(
                "Converted %s -> %s", parsed_args.input_file, parsed_args.output_file
            )

    except InvalidInputError:
        logger.exception("Invalid input file: %s", parsed_args.input_file)
        return 1

    except Exception:
        logger.exception("Unknown Problem ...")
        return 1

    return 0
