# -*- coding: utf-8 -*-
"""Reduce command: compute HOC/RL/DIFF for a field-book project file."""

import argparse
import logging
import sys
from pathlib import Path

from levelbook.constants import JSON_ENCODING
from levelbook.engine.reduction import reduce_rows
from levelbook.enums import OutputFormat
from levelbook.errors import ProjectFileError
from levelbook.format import format_project
from levelbook.interface import LevelBookInterface

logger = logging.getLogger(__name__)


def _reduce(input_path: Path, target_format: OutputFormat | str) -> str:
    """Reduce a project file and render it.

    Raises:
        FileNotFoundError: If the input file doesn't exist
        ProjectFileError: If the input is not a valid project record
    """
    target_format = OutputFormat(target_format)
    project = LevelBookInterface.load_project_json(input_path)
    reduced = reduce_rows(project.rows, project.benchmark)

    match target_format:
        case OutputFormat.TABLE:
            return format_project(project, reduced)
        case OutputFormat.JSON:
            reduced_project = project.model_copy(update={"rows": reduced})
            return LevelBookInterface.dumps(reduced_project)


def reduce(args: list[str]) -> int:  # noqa: A001
    """Entry point for the reduce command."""
    parser = argparse.ArgumentParser(
        prog="levelbook reduce",
        description="Reduce a leveling field book",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  levelbook reduce -i subgrade.json                 # Table to stdout
  levelbook reduce -i subgrade.json -f json         # Reduced project as JSON
  levelbook reduce -i subgrade.json -o book.txt     # Table to a file
""",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="Project file (.json)",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TABLE.value,
        dest="target_format",
        help="Output format: 'table' or 'json' (default: table)",
    )

    parsed_args = parser.parse_args(args)

    try:
        result = _reduce(parsed_args.input_file, parsed_args.target_format)
    except FileNotFoundError:
        logger.error("Input file not found: %s", parsed_args.input_file)  # noqa: TRY400
        return 1
    except ProjectFileError as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1

    if parsed_args.output_file is None:
        sys.stdout.write(result)
    else:
        parsed_args.output_file.write_text(result, encoding=JSON_ENCODING)

    return 0
