# -*- coding: utf-8 -*-
"""``levelbook`` command line entry point.

Subcommands are looked up in the ``levelbook.actions`` entry point group
and receive the remaining arguments as a list.
"""

from __future__ import annotations

import argparse
import logging
from importlib.metadata import entry_points

import levelbook

LOG_FORMAT = "%(levelname)s: %(message)s"


def main() -> int:
    actions = entry_points(group="levelbook.actions")

    parser = argparse.ArgumentParser(
        prog="levelbook",
        description="Leveling field-book calculator (height-of-collimation method)",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version: {levelbook.__version__}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log change point and reduction details",
    )
    parser.add_argument("command", choices=sorted(actions.names))
    parser.add_argument("args", help=argparse.SUPPRESS, nargs=argparse.REMAINDER)

    parsed_args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    action = actions[parsed_args.command].load()
    return action(parsed_args.args)
