# -*- coding: utf-8 -*-
"""Leveling Field Book Library.

A Python library for reducing leveling surveys by the height-of-collimation
method: benchmark, backsights, intermediate sights and foresights at
chainage points, change points and a closing benchmark.

Usage:
    from levelbook import LevelBookInterface
    from levelbook import reduce_rows

    project = LevelBookInterface.create_project(
        from_chainage="0+000",
        to_chainage="0+200",
    )
    for row in reduce_rows(project.rows, project.benchmark):
        print(row.chainage, row.hoc, row.rl)

    # Or edit through a session with undo
    from levelbook import EditSession
    session = EditSession(project)
    session.set_benchmark(100.0, name="RD4B-14A")
"""

__version__ = "0.1.0"

# Chainage
from levelbook.chainage import format_chainage
from levelbook.chainage import generate_chainage_points
from levelbook.chainage import parse_chainage

# Constants
from levelbook.constants import DEFAULT_CHAINAGE_INTERVAL
from levelbook.constants import DEFAULT_POINT_PATTERN
from levelbook.constants import LEVEL_PRECISION
from levelbook.constants import SIDE_OFFSET

# Engine
from levelbook.engine import ArithmeticCheck
from levelbook.engine import add_closing_benchmark
from levelbook.engine import arithmetic_check
from levelbook.engine import closure_error
from levelbook.engine import generate_table_rows
from levelbook.engine import insert_change_point
from levelbook.engine import reapply_pattern
from levelbook.engine import reduce_rows
from levelbook.engine import remove_change_point
from levelbook.engine import remove_closing_benchmark

# Enums
from levelbook.enums import OutputFormat
from levelbook.enums import ReadingField
from levelbook.enums import RowKind
from levelbook.enums import StationType

# Errors
from levelbook.errors import InvalidFieldError
from levelbook.errors import LevelBookError
from levelbook.errors import ProjectFileError
from levelbook.errors import RowNotFoundError

# Formatting, I/O, models
from levelbook.format import format_table
from levelbook.interface import LevelBookInterface
from levelbook.models import Benchmark
from levelbook.models import BenchmarkRow
from levelbook.models import ChainageStation
from levelbook.models import ChangePointRow
from levelbook.models import ClosingBenchmarkRow
from levelbook.models import Project
from levelbook.models import StationRow

# Session, validation
from levelbook.session import EditSession
from levelbook.validation import is_valid_chainage
from levelbook.validation import parse_pattern
from levelbook.validation import parse_reading

__all__ = [
    # Chainage
    "format_chainage",
    "generate_chainage_points",
    "parse_chainage",
    # Constants
    "DEFAULT_CHAINAGE_INTERVAL",
    "DEFAULT_POINT_PATTERN",
    "LEVEL_PRECISION",
    "SIDE_OFFSET",
    # Engine
    "ArithmeticCheck",
    "add_closing_benchmark",
    "arithmetic_check",
    "closure_error",
    "generate_table_rows",
    "insert_change_point",
    "reapply_pattern",
    "reduce_rows",
    "remove_change_point",
    "remove_closing_benchmark",
    # Enums
    "OutputFormat",
    "ReadingField",
    "RowKind",
    "StationType",
    # Errors
    "InvalidFieldError",
    "LevelBookError",
    "ProjectFileError",
    "RowNotFoundError",
    # Formatting
    "format_table",
    # I/O
    "LevelBookInterface",
    # Models
    "Benchmark",
    "BenchmarkRow",
    "ChainageStation",
    "ChangePointRow",
    "ClosingBenchmarkRow",
    "Project",
    "StationRow",
    # Session
    "EditSession",
    # Validation
    "is_valid_chainage",
    "parse_pattern",
    "parse_reading",
]
