# -*- coding: utf-8 -*-
"""Row reduction by the height-of-collimation method.

The field book is reduced in one left-to-right pass carrying two values:

* ``current_bm``: level the next backsight is taken from (the opening
  benchmark, then the level of each change point).
* ``current_hoc``: height of the line of sight of the instrument at its
  current position.

Per row variant:

1. Closing benchmark: ``rl = current_hoc - fs``; with a known closing
   value, ``d = closing value`` and ``diff = d - rl``. Terminal, the state
   is not advanced.
2. Change point: shows ``hoc = cp_hoc`` and ``rl = cp_rl`` and moves the
   instrument: ``current_bm = cp_rl``, ``current_hoc = cp_hoc``, unset
   values included.
3. Benchmark / station: a backsight sets ``hoc = current_bm + bs``;
   without a backsight the row carries ``current_hoc``. ``rl = hoc - is``
   or ``hoc - fs`` (intermediate sight first); ``diff = d - rl``.

Zero is a reading like any other, every presence check is against None.
No rounding happens here.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from levelbook.models import BenchmarkRow
from levelbook.models import ChangePointRow
from levelbook.models import ClosingBenchmarkRow
from levelbook.models import StationRow

if TYPE_CHECKING:
    from collections.abc import Sequence

    from levelbook.models import AnyRow
    from levelbook.models import Benchmark

logger = logging.getLogger(__name__)


def _sight_level(row: StationRow, hoc: float | None) -> float | None:
    """Reduced level of a station row under *hoc*.

    An intermediate sight takes precedence over a foresight when both are
    recorded.
    """
    if hoc is None:
        return None
    if row.is_ is not None:
        return hoc - row.is_
    if row.fs is not None:
        return hoc - row.fs
    return None


def reduce_rows(
    rows: Sequence[AnyRow],
    benchmark: Benchmark | None,
) -> list[AnyRow]:
    """Compute HOC, RL and DIFF for every row.

    The input rows are not modified; derived values already present on
    them are discarded and recomputed, so reducing the output again
    yields the same rows.

    Args:
        rows: Field-book rows, benchmark row first
        benchmark: Opening benchmark, or None if not set yet

    Returns:
        New list of rows with derived values populated where computable
    """
    current_bm: float | None = benchmark.rl if benchmark is not None else None
    current_hoc: float | None = None

    reduced: list[AnyRow] = []
    for row in rows:
        row = row.cleared()  # noqa: PLW2901

        match row:
            case ClosingBenchmarkRow():
                update: dict[str, float | None] = {"d": None}
                if current_hoc is not None and row.fs is not None:
                    rl = current_hoc - row.fs
                    update["rl"] = rl
                    if row.closing_bm_value is not None:
                        update["d"] = row.closing_bm_value
                        update["diff"] = row.closing_bm_value - rl
                reduced.append(row.model_copy(update=update))

            case ChangePointRow():
                reduced.append(
                    row.model_copy(update={"hoc": row.cp_hoc, "rl": row.cp_rl})
                )
                # An unset level stops the reduction until it is read again
                current_bm = row.cp_rl
                current_hoc = row.cp_hoc

            case BenchmarkRow() | StationRow():
                hoc = current_hoc
                if row.bs is not None and current_bm is not None:
                    hoc = current_bm + row.bs
                    current_hoc = hoc

                update = {"hoc": hoc}
                if isinstance(row, StationRow):
                    rl = _sight_level(row, hoc)
                    update["rl"] = rl
                    if rl is not None and row.d is not None:
                        update["diff"] = row.d - rl
                reduced.append(row.model_copy(update=update))

    logger.debug("Reduced %d rows", len(reduced))
    return reduced
