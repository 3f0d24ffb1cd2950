# -*- coding: utf-8 -*-
"""Leveling computation engine.

Usage::

    from levelbook.engine import insert_change_point
    from levelbook.engine import reduce_rows

    reduced = reduce_rows(project.rows, project.benchmark)
    rows = insert_change_point(project.rows, 3, 1.200, benchmark=project.benchmark)

Every function here is pure: rows go in, a new list of rows comes out,
and nothing raises for incomplete or inconsistent field books.
"""

from levelbook.engine.change_points import insert_change_point
from levelbook.engine.change_points import next_change_point_label
from levelbook.engine.change_points import remove_change_point
from levelbook.engine.checks import ArithmeticCheck
from levelbook.engine.checks import arithmetic_check
from levelbook.engine.checks import closure_error
from levelbook.engine.closing import add_closing_benchmark
from levelbook.engine.closing import remove_closing_benchmark
from levelbook.engine.pattern import generate_table_rows
from levelbook.engine.pattern import reapply_pattern
from levelbook.engine.reduction import reduce_rows

__all__ = [
    "ArithmeticCheck",
    "add_closing_benchmark",
    "arithmetic_check",
    "closure_error",
    "generate_table_rows",
    "insert_change_point",
    "next_change_point_label",
    "reapply_pattern",
    "reduce_rows",
    "remove_change_point",
    "remove_closing_benchmark",
]
