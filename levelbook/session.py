# -*- coding: utf-8 -*-
"""Edit session around a field book.

An ``EditSession`` owns one ``Project`` and applies edit events to it.
Every successful edit replaces the project with a new snapshot, pushes the
previous one on a bounded undo stack and hands the new one to an optional
save callback (write-through). The engine functions it calls stay pure.

Example:
    session = EditSession(
        project, on_save=lambda p: LevelBookInterface.save_json(p, path)
    )
    session.set_benchmark(100.0, name="RD4B-14A")
    session.set_reading(row_id, ReadingField.BS, 1.5)
    session.add_change_point(3, 1.2)
    session.undo()
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING
from typing import Any
from typing import Protocol

from levelbook.constants import DEFAULT_UNDO_DEPTH
from levelbook.engine.change_points import insert_change_point
from levelbook.engine.change_points import remove_change_point
from levelbook.engine.closing import add_closing_benchmark
from levelbook.engine.closing import remove_closing_benchmark
from levelbook.engine.pattern import reapply_pattern
from levelbook.engine.reduction import reduce_rows
from levelbook.enums import ReadingField
from levelbook.errors import InvalidFieldError
from levelbook.errors import RowNotFoundError
from levelbook.models import Benchmark
from levelbook.models import BenchmarkRow
from levelbook.models import ChangePointRow
from levelbook.models import ClosingBenchmarkRow
from levelbook.models import StationRow
from levelbook.models import now_ms
from levelbook.validation import parse_pattern
from levelbook.validation import parse_reading

if TYPE_CHECKING:
    from levelbook.models import AnyRow
    from levelbook.models import Project

logger = logging.getLogger(__name__)

# Field addressed by row id, and the text typed into it
RawKey = tuple[str, ReadingField]

# Project plus the raw inputs typed at that point
Snapshot = tuple["Project", dict[RawKey, str]]

# Fields a user may type into, per row variant
EDITABLE_FIELDS: dict[type, frozenset[ReadingField]] = {
    BenchmarkRow: frozenset({ReadingField.BS}),
    StationRow: frozenset(
        {ReadingField.BS, ReadingField.IS, ReadingField.FS, ReadingField.D}
    ),
    ChangePointRow: frozenset({ReadingField.BS, ReadingField.D}),
    ClosingBenchmarkRow: frozenset({ReadingField.FS, ReadingField.CLOSING_BM_VALUE}),
}


class SaveCallback(Protocol):
    """Protocol for write-through save callbacks."""

    def __call__(self, project: Project) -> None:
        """Persist the project."""
        ...


class EditSession:
    """Applies edit events to a field book with undo/redo.

    Attributes:
        undo_depth: Maximum number of snapshots kept for undo
    """

    def __init__(
        self,
        project: Project,
        *,
        on_save: SaveCallback | None = None,
        undo_depth: int = DEFAULT_UNDO_DEPTH,
    ) -> None:
        self.undo_depth = undo_depth
        self._project = project
        self._on_save = on_save
        self._raw_inputs: dict[RawKey, str] = {}
        self._undo: deque[Snapshot] = deque(maxlen=undo_depth)
        self._redo: list[Snapshot] = []

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def project(self) -> Project:
        return self._project

    @property
    def reduced_rows(self) -> list[AnyRow]:
        """Rows of the current snapshot with HOC/RL/DIFF computed."""
        return reduce_rows(self._project.rows, self._project.benchmark)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def _snapshot(self) -> Snapshot:
        return self._project, dict(self._raw_inputs)

    def _restore(self, snapshot: Snapshot) -> None:
        self._project, raw_inputs = snapshot
        self._raw_inputs = dict(raw_inputs)
        self._save()

    def _commit(self, **changes: Any) -> None:
        self._undo.append(self._snapshot())
        self._redo.clear()
        self._project = self._project.model_copy(
            update={**changes, "updated_at": now_ms()}
        )
        self._save()

    def _save(self) -> None:
        if self._on_save is not None:
            self._on_save(self._project)

    def _row_index(self, row_id: str) -> int:
        index = self._project.find_row(row_id)
        if index is None:
            raise RowNotFoundError(row_id)
        return index

    # -------------------------------------------------------------------------
    # Readings
    # -------------------------------------------------------------------------

    def set_reading(
        self,
        row_id: str,
        field: ReadingField | str,
        value: float | None,
    ) -> None:
        """Set (or clear with None) a typed field of a row.

        Setting the backsight of a change point also moves its new HOC.

        Raises:
            RowNotFoundError: If no row has *row_id*
            InvalidFieldError: If the row variant has no such editable field
        """
        field = ReadingField(field)
        index = self._row_index(row_id)
        row = self._project.rows[index]

        if field not in EDITABLE_FIELDS[type(row)]:
            raise InvalidFieldError(field.value, row.kind)

        update: dict[str, Any] = {field.attribute: value}
        if isinstance(row, ChangePointRow) and field is ReadingField.BS:
            update["cp_hoc"] = (
                row.cp_rl + value
                if row.cp_rl is not None and value is not None
                else None
            )

        rows = list(self._project.rows)
        rows[index] = row.model_copy(update=update)
        self._commit(rows=rows)
        self._raw_inputs.pop((row_id, field), None)

    def set_reading_text(
        self,
        row_id: str,
        field: ReadingField | str,
        text: str,
    ) -> None:
        """Apply raw text typed into a field.

        The text is kept as typed (see ``raw_input``) and travels with the
        undo history. A complete number updates the row, empty text clears
        the field, and text that is still being typed (``"3."``) leaves the
        row as it is.
        """
        field = ReadingField(field)

        if text == "":
            self.set_reading(row_id, field, None)
            return

        if (value := parse_reading(text)) is not None:
            self.set_reading(row_id, field, value)
        self._raw_inputs[(row_id, field)] = text

    def raw_input(self, row_id: str, field: ReadingField | str) -> str | None:
        """Text last typed into a field, if any."""
        return self._raw_inputs.get((row_id, ReadingField(field)))

    def set_benchmark(self, rl: float, name: str | None = None) -> None:
        """Set the opening benchmark level (and optionally its name)."""
        if name is None:
            name = self._project.benchmark.name if self._project.benchmark else ""
        self._commit(benchmark=Benchmark(name=name, rl=rl))

    def clear_benchmark(self) -> None:
        self._commit(benchmark=None)

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    def _commit_rows(self, rows: list[AnyRow]) -> bool:
        if rows == self._project.rows:
            return False
        self._commit(rows=rows)
        return True

    def apply_pattern(self, pattern: list[str] | str) -> bool:
        """Relabel the rows from a new point pattern.

        Args:
            pattern: Labels, or comma separated pattern text

        Returns:
            False if the pattern is empty and nothing was applied
        """
        if isinstance(pattern, str):
            pattern = parse_pattern(pattern)
        else:
            pattern = [label.strip() for label in pattern if label.strip()]

        if not pattern:
            logger.debug("Empty point pattern ignored")
            return False

        rows = reapply_pattern(self._project, pattern)
        self._commit(rows=rows, point_pattern=pattern)
        return True

    def add_change_point(
        self,
        at_index: int,
        new_backsight: float,
        label: str | None = None,
    ) -> bool:
        """Insert a change point; False if its preconditions do not hold."""
        return self._commit_rows(
            insert_change_point(
                self._project.rows,
                at_index,
                new_backsight,
                label=label,
                benchmark=self._project.benchmark,
            )
        )

    def remove_change_point(self, at_index: int) -> bool:
        """Remove a change point; False if *at_index* is not one."""
        return self._commit_rows(remove_change_point(self._project.rows, at_index))

    def close_with_benchmark(
        self,
        fs: float | None = None,
        value: float | None = None,
        name: str = "",
    ) -> bool:
        """Append the closing benchmark row; False if already closed."""
        return self._commit_rows(
            add_closing_benchmark(self._project.rows, fs=fs, value=value, name=name)
        )

    def reopen(self) -> bool:
        """Drop the closing benchmark row; False if there is none."""
        return self._commit_rows(remove_closing_benchmark(self._project.rows))

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def undo(self) -> bool:
        """Restore the previous snapshot; False if there is none."""
        if not self._undo:
            return False
        self._redo.append(self._snapshot())
        self._restore(self._undo.pop())
        return True

    def redo(self) -> bool:
        """Re-apply the last undone edit; False if there is none."""
        if not self._redo:
            return False
        self._undo.append(self._snapshot())
        self._restore(self._redo.pop())
        return True
