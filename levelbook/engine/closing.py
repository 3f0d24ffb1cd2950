# -*- coding: utf-8 -*-
"""Closing benchmark row editing.

A field book holds at most one closing benchmark row, always the last
row. Its foresight onto a benchmark of known level reveals the
accumulated error of the traverse.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from levelbook.constants import CLOSING_BM_LABEL
from levelbook.models import ClosingBenchmarkRow

if TYPE_CHECKING:
    from collections.abc import Sequence

    from levelbook.models import AnyRow

logger = logging.getLogger(__name__)


def add_closing_benchmark(
    rows: Sequence[AnyRow],
    fs: float | None = None,
    value: float | None = None,
    name: str = "",
) -> list[AnyRow]:
    """Append a closing benchmark row.

    Args:
        rows: Field-book rows
        fs: Foresight onto the closing benchmark
        value: Known level of the closing benchmark
        name: Name of the closing benchmark, also used as its label

    Returns:
        New list of rows, or the input rows if the book is already closed.
    """
    if any(isinstance(r, ClosingBenchmarkRow) for r in rows):
        logger.debug("Field book already has a closing benchmark")
        return list(rows)

    closing = ClosingBenchmarkRow(
        chainage=name or CLOSING_BM_LABEL,
        fs=fs,
        closing_bm_name=name,
        closing_bm_value=value,
    )
    return [*rows, closing]


def remove_closing_benchmark(rows: Sequence[AnyRow]) -> list[AnyRow]:
    """Drop the closing benchmark row, if any."""
    return [r for r in rows if not isinstance(r, ClosingBenchmarkRow)]
