# -*- coding: utf-8 -*-
"""``frcs_breakout`` command line entry point.

Sub-commands are registered under the ``frcs_breakout.actions`` entry point
group; each one takes its remaining arguments and returns an exit code.
Log records go to stderr so a document printed to stdout stays valid JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import entry_points

import frcs_breakout

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_parser(command_names: list[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frcs_breakout",
        description="Convert parsed FRCS cave survey data into breakout documents",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s version: {frcs_breakout.__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also log per-station diagnostics (DEBUG level)",
    )
    parser.add_argument("command", choices=command_names)
    parser.add_argument("args", help=argparse.SUPPRESS, nargs=argparse.REMAINDER)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Dispatch to the requested sub-command and return its exit code."""
    registered_commands = entry_points(group="frcs_breakout.actions")

    args = build_parser(sorted(registered_commands.names)).parse_args(argv)
    configure_logging(verbose=args.verbose)

    command = registered_commands[args.command].load()
    return command(args.args)


if __name__ == "__main__":
    sys.exit(main())
