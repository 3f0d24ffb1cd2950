# -*- coding: utf-8 -*-
"""Plain-text rendering of a reduced field book.

Rounding to ``LEVEL_PRECISION`` decimals happens here and only here; the
reduction engine works on unrounded values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from levelbook.constants import LEVEL_PRECISION
from levelbook.constants import MISSING_VALUE_STRING
from levelbook.engine.checks import arithmetic_check
from levelbook.engine.checks import closure_error
from levelbook.models import BenchmarkRow
from levelbook.models import ChangePointRow
from levelbook.models import ClosingBenchmarkRow
from levelbook.models import StationRow

if TYPE_CHECKING:
    from collections.abc import Sequence

    from levelbook.models import AnyRow
    from levelbook.models import Benchmark
    from levelbook.models import Project

TABLE_COLUMNS: tuple[str, ...] = (
    "CHAINAGE",
    "BS",
    "IS",
    "FS",
    "HOC",
    "RL",
    "D",
    "DIFF",
)


def format_level(value: float | None, precision: int = LEVEL_PRECISION) -> str:
    """Format a reading or level for display.

    Args:
        value: Numeric value (None for missing)
        precision: Decimal places

    Returns:
        Fixed-point string, or the missing-value placeholder
    """
    if value is None:
        return MISSING_VALUE_STRING
    rounded = round(value, precision)
    if rounded == 0:
        # Avoid "-0.000" for tiny negative residuals
        rounded = 0.0
    return f"{rounded:.{precision}f}"


def _blank(value: float | None) -> str:
    return "" if value is None else format_level(value)


def format_row(row: AnyRow, benchmark: Benchmark | None = None) -> list[str]:
    """Render one reduced row as table cells (see ``TABLE_COLUMNS``).

    Input readings that are absent are left blank; derived values that
    cannot be computed yet show the missing-value placeholder.
    """
    match row:
        case BenchmarkRow():
            return [
                benchmark.name if benchmark and benchmark.name else "BM",
                _blank(row.bs),
                "",
                "",
                format_level(row.hoc),
                format_level(benchmark.rl if benchmark else None),
                "",
                "",
            ]
        case ChangePointRow():
            return [
                row.cp_label or row.chainage,
                _blank(row.bs),
                "",
                _blank(row.fs),
                format_level(row.cp_hoc),
                format_level(row.cp_rl),
                _blank(row.d),
                "",
            ]
        case ClosingBenchmarkRow():
            return [
                row.chainage,
                "",
                "",
                _blank(row.fs),
                "",
                format_level(row.rl),
                _blank(row.d),
                format_level(row.diff),
            ]
        case StationRow():
            return [
                row.chainage,
                _blank(row.bs),
                _blank(row.is_),
                _blank(row.fs),
                format_level(row.hoc),
                format_level(row.rl),
                _blank(row.d),
                format_level(row.diff),
            ]
    raise TypeError(f"Unknown row type: {type(row).__name__}")


def format_table(
    reduced_rows: Sequence[AnyRow],
    benchmark: Benchmark | None = None,
    title: str | None = None,
) -> str:
    """Render reduced rows as an aligned text table.

    The chainage column is left aligned, numeric columns right aligned.
    Arithmetic check and closure lines follow the table when available.
    """
    body = [format_row(row, benchmark) for row in reduced_rows]
    widths = [
        max(len(cells[i]) for cells in [list(TABLE_COLUMNS), *body])
        for i in range(len(TABLE_COLUMNS))
    ]

    def _line(cells: list[str]) -> str:
        first = cells[0].ljust(widths[0])
        rest = [cell.rjust(width) for cell, width in zip(cells[1:], widths[1:])]
        return "  ".join([first, *rest]).rstrip()

    lines: list[str] = []
    if title:
        lines.append(title)
    header = _line(list(TABLE_COLUMNS))
    lines.append(header)
    lines.append("-" * len(header))
    lines.extend(_line(cells) for cells in body)
    lines.extend(format_summary(reduced_rows, benchmark))
    return "\n".join(lines) + "\n"


def format_summary(
    reduced_rows: Sequence[AnyRow],
    benchmark: Benchmark | None,
) -> list[str]:
    """Arithmetic check and closure lines for a reduced field book."""
    lines: list[str] = []

    if (check := arithmetic_check(reduced_rows, benchmark)) is not None:
        status = "OK" if check.passed else "FAILED"
        lines.append(
            "Arithmetic check: "
            f"ΣBS - ΣFS = {format_level(check.reading_difference)}, "
            f"last RL - first RL = {format_level(check.level_difference)} [{status}]"
        )

    if (error := closure_error(reduced_rows)) is not None:
        lines.append(f"Closing error: {format_level(error)}")

    return lines


def format_project(project: Project, reduced_rows: Sequence[AnyRow]) -> str:
    """Render a whole project: title line plus the reduced table."""
    title = project.title or (
        f"LEVEL CHECK FROM {project.from_chainage} TO {project.to_chainage}"
        + (f" FOR {project.layer.upper()}" if project.layer else "")
    )
    return format_table(
        reduced_rows,
        project.benchmark,
        title=f"{title} ({project.date})",
    )
