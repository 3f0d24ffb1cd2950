# -*- coding: utf-8 -*-
"""Create command: start a new field-book project file."""

import argparse
import logging
from pathlib import Path

from levelbook.constants import DEFAULT_CHAINAGE_INTERVAL
from levelbook.constants import DEFAULT_POINT_PATTERN
from levelbook.constants import DEFAULT_POINTS_PER_STATION
from levelbook.engine.pattern import generate_table_rows
from levelbook.interface import LevelBookInterface
from levelbook.models import Benchmark
from levelbook.validation import parse_pattern
from levelbook.validation import validate_chainage

logger = logging.getLogger(__name__)


def create(args: list[str]) -> int:
    """Entry point for the create command."""
    parser = argparse.ArgumentParser(
        prog="levelbook create",
        description="Create a leveling field book for a chainage range",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  levelbook create -o subgrade.json --from 0+000 --to 0+200
  levelbook create -o kerb.json --from 2+400 --to 2+500 --interval 10 \\
      --pattern "4.0 LHS, 3.5 LHS, CL, 3.5 RHS, 4.0 RHS"
  levelbook create -o base.json --from 0+000 --to 0+100 --points 1 \\
      --bm-name RD4B-14A --bm-rl 100.000
""",
    )

    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        required=True,
        help="Project file to write (.json)",
    )
    parser.add_argument("--from", dest="from_chainage", required=True)
    parser.add_argument("--to", dest="to_chainage", required=True)
    parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_CHAINAGE_INTERVAL,
        help=f"Distance between stations (default: {DEFAULT_CHAINAGE_INTERVAL})",
    )
    parser.add_argument(
        "--points",
        type=int,
        default=DEFAULT_POINTS_PER_STATION,
        dest="points_per_station",
        help="Points per station, used only with an empty --pattern",
    )
    parser.add_argument(
        "--pattern",
        default=", ".join(DEFAULT_POINT_PATTERN),
        help="Comma separated point labels per station",
    )
    parser.add_argument("--title", default="")
    parser.add_argument("--layer", default="")
    parser.add_argument("--bm-name", default="")
    parser.add_argument("--bm-rl", type=float, default=None)
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing output file",
    )

    parsed_args = parser.parse_args(args)

    try:
        validate_chainage(parsed_args.from_chainage)
        validate_chainage(parsed_args.to_chainage)
    except ValueError as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1

    if parsed_args.output_file.exists() and not parsed_args.force:
        logger.error("Output file already exists: %s", parsed_args.output_file)
        return 1

    benchmark = (
        Benchmark(name=parsed_args.bm_name, rl=parsed_args.bm_rl)
        if parsed_args.bm_rl is not None
        else None
    )
    pattern = parse_pattern(parsed_args.pattern)

    project = LevelBookInterface.create_project(
        from_chainage=parsed_args.from_chainage,
        to_chainage=parsed_args.to_chainage,
        title=parsed_args.title,
        layer=parsed_args.layer,
        chainage_interval=parsed_args.interval,
        points_per_station=parsed_args.points_per_station,
        point_pattern=pattern,
        benchmark=benchmark,
    )
    if not pattern:
        # Offset layout from --points instead of the default labels
        project.point_pattern = None
        project.rows = generate_table_rows(project)
    LevelBookInterface.save_json(project, parsed_args.output_file)
    return 0
