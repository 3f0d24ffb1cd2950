# -*- coding: utf-8 -*-
"""Field-book table generation and point-pattern re-application."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from levelbook.chainage import generate_chainage_points
from levelbook.models import BenchmarkRow
from levelbook.models import ClosingBenchmarkRow
from levelbook.models import StationRow

if TYPE_CHECKING:
    from levelbook.models import AnyRow
    from levelbook.models import ChainageStation
    from levelbook.models import Project

logger = logging.getLogger(__name__)


def _project_points(project: Project) -> list[ChainageStation]:
    return generate_chainage_points(
        project.from_chainage,
        project.to_chainage,
        project.points_per_station,
        project.chainage_interval,
        project.point_pattern,
    )


def _station_row(point: ChainageStation) -> StationRow:
    return StationRow(chainage=point.display_label, station_type=point.station_type)


def generate_table_rows(project: Project) -> list[AnyRow]:
    """Build the rows of a new field book.

    The benchmark row comes first, followed by one empty station row per
    generated chainage point.
    """
    return [BenchmarkRow(), *(_station_row(p) for p in _project_points(project))]


def reapply_pattern(
    project: Project,
    pattern: list[str] | None = None,
) -> list[AnyRow]:
    """Relabel the field book from a new point pattern.

    Readings are never lost: existing station rows keep their readings and
    only take the label of the next generated point, in order. Change
    point rows stay where they are and consume no label. When more points
    are generated than there are station rows, empty rows are appended;
    when fewer, the surplus rows keep their old labels. The closing
    benchmark row, if any, stays last.

    Args:
        project: Field book to relabel
        pattern: New point labels, defaults to ``project.point_pattern``

    Returns:
        New list of rows
    """
    if pattern is not None:
        project = project.model_copy(update={"point_pattern": pattern})

    if not project.rows:
        return generate_table_rows(project)

    remaining = iter(_project_points(project))
    head, *rest = project.rows

    new_rows: list[AnyRow] = [head]
    closing: list[AnyRow] = []
    kept_labels = 0

    for row in rest:
        match row:
            case ClosingBenchmarkRow():
                closing.append(row)
            case StationRow():
                point = next(remaining, None)
                if point is None:
                    kept_labels += 1
                    new_rows.append(row)
                else:
                    new_rows.append(
                        row.model_copy(
                            update={
                                "chainage": point.display_label,
                                "station_type": point.station_type,
                            }
                        )
                    )
            case _:
                new_rows.append(row)

    appended = [_station_row(p) for p in remaining]
    new_rows.extend(appended)
    new_rows.extend(closing)

    if kept_labels:
        logger.warning(
            "Pattern yields fewer points than rows, %d rows keep their labels",
            kept_labels,
        )
    logger.debug("Pattern applied, %d rows appended", len(appended))
    return new_rows
