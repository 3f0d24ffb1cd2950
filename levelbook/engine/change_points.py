# -*- coding: utf-8 -*-
"""Change point insertion and removal.

A change point is planted on a row that has a recorded foresight: that
foresight fixes the level of the point the staff stands on, the
instrument is moved, and a new backsight is read onto the same staff.

    cp_rl  = old_hoc - fs
    cp_hoc = cp_rl + new_bs

The foresight row itself becomes the change point row. The point that
row was labeled with is pushed down into a new, empty station row linked
to the change point, so it can still be read from the new instrument
position.

Both operations are copy-on-write and total: when a precondition does
not hold the rows come back unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from levelbook.constants import CP_LABEL_DIGITS
from levelbook.constants import CP_LABEL_PREFIX
from levelbook.engine.reduction import reduce_rows
from levelbook.models import ChangePointRow
from levelbook.models import StationRow

if TYPE_CHECKING:
    from collections.abc import Sequence

    from levelbook.models import AnyRow
    from levelbook.models import Benchmark

logger = logging.getLogger(__name__)


def next_change_point_label(rows: Sequence[AnyRow]) -> str:
    """Default label for a new change point (``CP01``, ``CP02``, ...).

    The number is the count of change points currently in the book plus
    one, so a label freed by a removal can be handed out again.
    """
    existing = sum(1 for r in rows if isinstance(r, ChangePointRow))
    return f"{CP_LABEL_PREFIX}{existing + 1:0{CP_LABEL_DIGITS}d}"


def insert_change_point(
    rows: Sequence[AnyRow],
    at_index: int,
    new_backsight: float,
    label: str | None = None,
    benchmark: Benchmark | None = None,
) -> list[AnyRow]:
    """Turn the foresight row at *at_index* into a change point.

    Args:
        rows: Field-book rows
        at_index: Index of a station row with a recorded foresight
        new_backsight: Backsight read from the new instrument position
        label: Change point label, defaults to the next ``CPnn``
        benchmark: Opening benchmark, needed to reduce the old HOC

    Returns:
        New list of rows: the target replaced by a ChangePointRow followed
        by a pushed StationRow. The input rows if the target has no
        foresight or its HOC cannot be reduced yet.
    """
    if not 0 <= at_index < len(rows):
        logger.debug("Change point index %d out of range", at_index)
        return list(rows)

    target = rows[at_index]
    if not isinstance(target, StationRow) or target.fs is None:
        logger.debug("Row %d has no foresight, no change point added", at_index)
        return list(rows)

    old_hoc = reduce_rows(rows[: at_index + 1], benchmark)[at_index].hoc
    if old_hoc is None:
        logger.debug("Row %d has no HOC yet, no change point added", at_index)
        return list(rows)

    if target.is_ is not None:
        logger.warning(
            "Row `%s` has an intermediate sight next to its foresight, "
            "dropping it on the change point",
            target.chainage,
        )

    cp_rl = old_hoc - target.fs
    cp_hoc = cp_rl + new_backsight
    cp_label = label or next_change_point_label(rows)

    change_point = ChangePointRow(
        id=target.id,
        chainage=cp_label,
        station_type=target.station_type,
        bs=new_backsight,
        fs=target.fs,
        d=target.d,
        cp_label=cp_label,
        cp_rl=cp_rl,
        cp_hoc=cp_hoc,
        pushed_from=target.pushed_from,
    )
    pushed = StationRow(
        chainage=target.chainage,
        station_type=target.station_type,
        pushed_from=target.id,
    )

    new_rows = list(rows)
    new_rows[at_index] = change_point
    new_rows.insert(at_index + 1, pushed)

    logger.info(
        "Added %s at `%s`: CP RL %.3f, new HOC %.3f",
        cp_label,
        target.chainage,
        cp_rl,
        cp_hoc,
    )
    return new_rows


def _find_pushed_row(rows: Sequence[AnyRow], change_point_id: str) -> int | None:
    for index, row in enumerate(rows):
        if isinstance(row, StationRow) and row.pushed_from == change_point_id:
            return index
    return None


def remove_change_point(rows: Sequence[AnyRow], at_index: int) -> list[AnyRow]:
    """Undo the change point at *at_index*.

    The row the change point displaced is found through its
    ``pushed_from`` link: its label is restored on the change point row
    and the displaced row is dropped. Without a linked row only the change
    point data is cleared and the label is left blank.

    Args:
        rows: Field-book rows
        at_index: Index of a ChangePointRow

    Returns:
        New list of rows, or the input rows if *at_index* is not a change
        point.
    """
    if not 0 <= at_index < len(rows):
        logger.debug("Change point index %d out of range", at_index)
        return list(rows)

    change_point = rows[at_index]
    if not isinstance(change_point, ChangePointRow):
        logger.debug("Row %d is not a change point", at_index)
        return list(rows)

    new_rows = list(rows)
    pushed_index = _find_pushed_row(rows, change_point.id)

    if pushed_index is None:
        logger.warning(
            "No displaced row found for %s, clearing change point only",
            change_point.cp_label,
        )
        new_rows[at_index] = StationRow(
            id=change_point.id,
            chainage="",
            station_type=change_point.station_type,
            fs=change_point.fs,
            d=change_point.d,
            pushed_from=change_point.pushed_from,
        )
        return new_rows

    pushed = rows[pushed_index]
    if pushed.has_readings:
        logger.warning(
            "Discarding readings on `%s` with %s",
            pushed.chainage,
            change_point.cp_label,
        )

    new_rows[at_index] = StationRow(
        id=change_point.id,
        chainage=pushed.chainage,
        station_type=pushed.station_type,
        fs=change_point.fs,
        d=change_point.d,
        pushed_from=change_point.pushed_from,
    )
    del new_rows[pushed_index]

    logger.info("Removed %s", change_point.cp_label)
    return new_rows
