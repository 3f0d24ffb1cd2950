# -*- coding: utf-8 -*-
"""Field-book checks on reduced rows.

Arithmetic check
----------------
For a height-of-collimation reduction the sums of the staff readings and
the reduced levels must agree:

    sum(BS) - sum(FS) == last RL - first RL

where FS counts the foresights of the change points and the last sight of
the book, the first RL is the opening benchmark and the last RL is the
level of that last sight. A failed check means an arithmetic slip in the
reduction, not a field error.

Closure
-------
On a closed traverse the closing row's ``diff`` (known level minus the
reduced level of the closing foresight) is the accumulated field error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from levelbook.constants import ARITHMETIC_CHECK_TOLERANCE
from levelbook.models import BenchmarkRow
from levelbook.models import ChangePointRow
from levelbook.models import ClosingBenchmarkRow
from levelbook.models import StationRow

if TYPE_CHECKING:
    from collections.abc import Sequence

    from levelbook.models import AnyRow
    from levelbook.models import Benchmark


@dataclass(frozen=True)
class ArithmeticCheck:
    """Result of the BS/FS arithmetic check.

    Attributes:
        sum_bs: Sum of all backsights
        sum_fs: Sum of all foresights
        first_rl: Opening benchmark level
        last_rl: Reduced level of the last foresight
    """

    sum_bs: float
    sum_fs: float
    first_rl: float
    last_rl: float

    @property
    def reading_difference(self) -> float:
        return self.sum_bs - self.sum_fs

    @property
    def level_difference(self) -> float:
        return self.last_rl - self.first_rl

    @property
    def passed(self) -> bool:
        return (
            abs(self.reading_difference - self.level_difference)
            <= ARITHMETIC_CHECK_TOLERANCE
        )


def _sight(row: AnyRow) -> float | None:
    """Staff reading a reduced row's level was taken from, if any."""
    if row.rl is None:
        return None
    match row:
        case StationRow():
            return row.is_ if row.is_ is not None else row.fs
        case ChangePointRow() | ClosingBenchmarkRow():
            return row.fs
    return None


def arithmetic_check(
    reduced_rows: Sequence[AnyRow],
    benchmark: Benchmark | None,
) -> ArithmeticCheck | None:
    """Run the arithmetic check over reduced rows.

    Only sights the instrument moves away from count as foresights: those
    of the change points and the last reduced sight of the book. Any other
    foresight shares its setup with a later sight and is left out, like an
    intermediate sight.

    Returns:
        ArithmeticCheck, or None when there is no benchmark or no sight has
        been reduced yet.
    """
    if benchmark is None:
        return None

    sum_bs = 0.0
    sum_fs = 0.0
    last_sight: AnyRow | None = None

    for row in reduced_rows:
        if isinstance(row, BenchmarkRow | StationRow | ChangePointRow):
            if row.bs is not None:
                sum_bs += row.bs
        if isinstance(row, ChangePointRow) and row.fs is not None:
            sum_fs += row.fs
        if _sight(row) is not None:
            last_sight = row

    if last_sight is None:
        return None
    if not isinstance(last_sight, ChangePointRow):
        sum_fs += _sight(last_sight)

    return ArithmeticCheck(
        sum_bs=sum_bs,
        sum_fs=sum_fs,
        first_rl=benchmark.rl,
        last_rl=last_sight.rl,
    )


def closure_error(reduced_rows: Sequence[AnyRow]) -> float | None:
    """Misclosure of a closed traverse (known closing level minus reduced).

    Returns:
        The closing row's ``diff``, or None when the traverse is open or the
        closing row is incomplete.
    """
    for row in reduced_rows:
        if isinstance(row, ClosingBenchmarkRow):
            return row.diff
    return None
