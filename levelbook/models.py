# -*- coding: utf-8 -*-
"""Data models for leveling field books.

Uses Pydantic discriminated unions for the four row variants. Each row
variant carries only the fields that make sense for it:

- BenchmarkRow: first row, backsight onto the opening benchmark
- StationRow: an ordinary reading at a chainage point
- ChangePointRow: the row where the instrument was relocated
- ClosingBenchmarkRow: final foresight onto a known benchmark

Serialization uses camelCase aliases so that project records keep the
shape of the field-book store (``fromChainage``, ``cpRL``, ``is``, ...).
All serialization is handled by Pydantic's built-in methods.
"""

from __future__ import annotations

import datetime
import time
import uuid
from typing import Annotated
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Discriminator
from pydantic import Field
from pydantic import Tag
from pydantic import field_validator
from pydantic import model_validator

from levelbook.constants import DEFAULT_CHAINAGE_INTERVAL
from levelbook.constants import DEFAULT_POINT_PATTERN
from levelbook.constants import DEFAULT_POINTS_PER_STATION
from levelbook.enums import RowKind
from levelbook.enums import StationType


def new_row_id() -> str:
    """Allocate an opaque, unique row id."""
    return f"row-{uuid.uuid4().hex[:12]}"


def now_ms() -> int:
    """Current time as milliseconds since the epoch."""
    return int(time.time() * 1000)


class Benchmark(BaseModel):
    """Known elevation the traverse starts from."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    rl: float


class ChainageStation(BaseModel):
    """A labeled survey point produced by the chainage generator.

    Attributes:
        chainage: Formatted chainage of the station (e.g. "2+460")
        offset: Lateral offset from the centerline (meters, left negative)
        display_label: Label shown in the field book ("3.5 LHS", "2+460 CL")
        station_type: Display grouping, if the label has one
    """

    model_config = ConfigDict(populate_by_name=True)

    chainage: str
    offset: float = 0.0
    display_label: str = Field(alias="displayName")
    station_type: StationType | None = Field(default=None, alias="chainageType")


# --- Row Classes ---
# Each row has a `kind` field that acts as a discriminator


class _RowBase(BaseModel):
    """Fields shared by every row variant.

    ``hoc``, ``rl`` and ``diff`` are owned by the reduction engine and are
    recomputed on every pass.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(default_factory=new_row_id)
    chainage: str = ""
    hoc: float | None = None
    rl: float | None = None
    diff: float | None = None

    def cleared(self) -> _RowBase:
        """Copy of this row with all derived values unset."""
        return self.model_copy(update={"hoc": None, "rl": None, "diff": None})


class BenchmarkRow(_RowBase):
    """Row 0: the backsight taken onto the opening benchmark."""

    kind: Literal["benchmark"] = "benchmark"
    bs: float | None = None


class StationRow(_RowBase):
    """An ordinary reading at a chainage point.

    ``pushed_from`` links a row created by a change point insertion to the
    change point row that displaced it.
    """

    kind: Literal["station"] = "station"
    station_type: StationType | None = Field(default=None, alias="chainageType")
    bs: float | None = None
    is_: float | None = Field(default=None, alias="is")
    fs: float | None = None
    d: float | None = None
    pushed_from: str | None = Field(default=None, alias="pushedFrom")

    @property
    def has_readings(self) -> bool:
        return any(v is not None for v in (self.bs, self.is_, self.fs, self.d))


class ChangePointRow(_RowBase):
    """Row where the instrument was relocated.

    ``fs`` is the foresight that produced the change point elevation and
    ``bs`` the backsight taken from the new instrument position. ``cp_rl``
    and ``cp_hoc`` are fixed when the change point is inserted.
    ``pushed_from`` is kept when the change point was planted on a row that
    an earlier change point had displaced.
    """

    kind: Literal["change_point"] = "change_point"
    station_type: StationType | None = Field(default=None, alias="chainageType")
    bs: float | None = None
    fs: float | None = None
    d: float | None = None
    cp_label: str = Field(default="", alias="cpLabel")
    cp_rl: float | None = Field(default=None, alias="cpRL")
    cp_hoc: float | None = Field(default=None, alias="cpHOC")
    pushed_from: str | None = Field(default=None, alias="pushedFrom")


class ClosingBenchmarkRow(_RowBase):
    """Final foresight onto an independently known benchmark."""

    kind: Literal["closing_benchmark"] = "closing_benchmark"
    fs: float | None = None
    d: float | None = None
    closing_bm_name: str = Field(default="", alias="closingBMName")
    closing_bm_value: float | None = Field(default=None, alias="closingBMValue")


# --- Discriminated Union ---


def _get_row_kind(v: Any) -> str:
    """Extract the discriminator value for row types.

    Records written before rows carried a ``kind`` encode the variant as
    boolean flags (``isCP``, ``isClosingBM``); those are mapped here.
    """
    if isinstance(v, dict):
        if kind := v.get("kind"):
            return kind
        if v.get("isClosingBM"):
            return RowKind.CLOSING_BENCHMARK.value
        if v.get("isCP"):
            return RowKind.CHANGE_POINT.value
        return RowKind.STATION.value
    return getattr(v, "kind", RowKind.STATION.value)


Row = Annotated[
    Annotated[BenchmarkRow, Tag(RowKind.BENCHMARK.value)]
    | Annotated[StationRow, Tag(RowKind.STATION.value)]
    | Annotated[ChangePointRow, Tag(RowKind.CHANGE_POINT.value)]
    | Annotated[ClosingBenchmarkRow, Tag(RowKind.CLOSING_BENCHMARK.value)],
    Discriminator(_get_row_kind),
]

# Type alias for type hints
AnyRow = BenchmarkRow | StationRow | ChangePointRow | ClosingBenchmarkRow


def _upgrade_legacy_rows(rows: list[Any]) -> list[Any]:
    """Tag flag-shaped row records with their variant.

    The first record is the benchmark row. A record following a change
    point whose id ends with ``-pushed`` is the row that change point
    displaced and gets an explicit ``pushedFrom`` link.
    """
    upgraded: list[Any] = []
    for index, row in enumerate(rows):
        if not isinstance(row, dict) or "kind" in row:
            upgraded.append(row)
            continue

        row = dict(row)  # noqa: PLW2901
        if index == 0:
            row["kind"] = RowKind.BENCHMARK.value
        else:
            row["kind"] = _get_row_kind(row)
            previous = upgraded[-1] if upgraded else None
            if (
                row["kind"] == RowKind.STATION.value
                and str(row.get("id", "")).endswith("-pushed")
                and isinstance(previous, dict)
                and previous.get("kind") == RowKind.CHANGE_POINT.value
            ):
                row["pushedFrom"] = previous.get("id")
        upgraded.append(row)
    return upgraded


# --- Main Project Model ---


class Project(BaseModel):
    """A leveling field book.

    Serialization is fully automatic via Pydantic:
        json_str = project.model_dump_json(indent=2, by_alias=True)
        project = Project.model_validate_json(json_str)
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: f"project-{now_ms()}")
    title: str = ""
    layer: str = ""
    from_chainage: str = Field(default="0+000", alias="fromChainage")
    to_chainage: str = Field(default="0+000", alias="toChainage")
    chainage_interval: float = Field(
        default=DEFAULT_CHAINAGE_INTERVAL, alias="chainageInterval"
    )
    points_per_station: int = Field(
        default=DEFAULT_POINTS_PER_STATION, alias="pointsPerChainage"
    )
    point_pattern: list[str] | None = Field(
        default_factory=lambda: list(DEFAULT_POINT_PATTERN), alias="pointPattern"
    )
    date: datetime.date = Field(default_factory=datetime.date.today)
    benchmark: Benchmark | None = None
    rows: list[Row] = Field(default_factory=list)
    created_at: int = Field(default_factory=now_ms, alias="createdAt")
    updated_at: int = Field(default_factory=now_ms, alias="updatedAt")

    @model_validator(mode="before")
    @classmethod
    def upgrade_legacy_rows(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("rows"), list):
            data = {**data, "rows": _upgrade_legacy_rows(data["rows"])}
        return data

    @field_validator("point_pattern")
    @classmethod
    def strip_pattern(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [label.strip() for label in value if label.strip()]

    @property
    def change_points(self) -> list[ChangePointRow]:
        return [r for r in self.rows if isinstance(r, ChangePointRow)]

    @property
    def closing_row(self) -> ClosingBenchmarkRow | None:
        for r in self.rows:
            if isinstance(r, ClosingBenchmarkRow):
                return r
        return None

    def find_row(self, row_id: str) -> int | None:
        """Index of the row with the given id, or None."""
        for index, r in enumerate(self.rows):
            if r.id == row_id:
                return index
        return None

    def touch(self) -> None:
        """Stamp the record as modified now."""
        self.updated_at = now_ms()
