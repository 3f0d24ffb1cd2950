# -*- coding: utf-8 -*-
"""Tests for field-book table generation and pattern re-application."""

import logging

import pytest

from levelbook.engine.change_points import insert_change_point
from levelbook.engine.closing import add_closing_benchmark
from levelbook.engine.pattern import generate_table_rows
from levelbook.engine.pattern import reapply_pattern
from levelbook.enums import StationType
from levelbook.models import BenchmarkRow
from levelbook.models import ChangePointRow
from levelbook.models import ClosingBenchmarkRow
from levelbook.models import Project
from levelbook.models import StationRow


class TestGenerateTableRows:
    """Tests for generate_table_rows function."""

    def test_default_pattern(self, new_project):
        rows = generate_table_rows(new_project)

        assert isinstance(rows[0], BenchmarkRow)
        assert len(rows) == 1 + 9
        assert all(isinstance(r, StationRow) for r in rows[1:])
        assert [r.chainage for r in rows[1:4]] == ["3.5 LHS", "0+000 CL", "3.5 RHS"]
        assert rows[2].station_type == StationType.CL

    def test_rows_are_empty(self, new_project):
        rows = generate_table_rows(new_project)
        assert rows[0].bs is None
        assert not any(r.has_readings for r in rows[1:])

    def test_unique_ids(self, new_project):
        rows = generate_table_rows(new_project)
        assert len({r.id for r in rows}) == len(rows)

    def test_points_per_station_without_pattern(self):
        project = Project(
            from_chainage="0+000",
            to_chainage="0+100",
            points_per_station=1,
            point_pattern=None,
        )
        rows = generate_table_rows(project)
        assert [r.chainage for r in rows[1:]] == [
            "0+000",
            "0+020",
            "0+040",
            "0+060",
            "0+080",
            "0+100",
        ]

    def test_empty_range(self):
        project = Project(from_chainage="0+100", to_chainage="0+000")
        rows = generate_table_rows(project)
        assert len(rows) == 1


class TestReapplyPattern:
    """Tests for reapply_pattern function."""

    def test_relabels_in_order(self, survey_project):
        rows = reapply_pattern(survey_project, ["CL", "3.5 RHS"])

        assert [r.chainage for r in rows] == [
            "",
            "0+000 CL",
            "3.5 RHS",
            "0+020 CL",
            "3.5 RHS",
            "0+040 CL",
            "3.5 RHS",
        ]
        assert rows[2].station_type == StationType.RHS

    def test_readings_are_kept(self, survey_project):
        rows = reapply_pattern(survey_project, ["CL", "3.5 RHS"])

        assert rows[0] == survey_project.rows[0]
        assert rows[1].id == "row-1"
        assert rows[1].is_ == pytest.approx(1.0)
        assert rows[2].id == "row-2"
        assert rows[2].chainage == "3.5 RHS"
        assert rows[2].fs == pytest.approx(2.0)

    def test_appended_rows_are_empty(self, survey_project):
        rows = reapply_pattern(survey_project, ["CL", "3.5 RHS"])
        assert not any(r.has_readings for r in rows[4:])

    def test_fewer_points_keep_labels(self, survey_project, caplog):
        project = survey_project.model_copy(update={"to_chainage": "0+000"})
        with caplog.at_level(logging.WARNING):
            rows = reapply_pattern(project, ["3.5 LHS"])

        assert [r.chainage for r in rows] == ["", "3.5 LHS", "0+020 CL", "0+040 CL"]
        assert "keep their labels" in caplog.text

    def test_defaults_to_project_pattern(self, survey_project):
        rows = reapply_pattern(survey_project)
        assert rows == survey_project.rows

    def test_change_points_and_closing(self, benchmark):
        project = Project(
            from_chainage="0+000",
            to_chainage="0+020",
            point_pattern=["CL"],
            benchmark=benchmark,
            rows=[
                BenchmarkRow(bs=1.5),
                StationRow(chainage="0+000 CL", fs=1.0),
                StationRow(chainage="0+020 CL"),
            ],
        )
        rows = insert_change_point(project.rows, 1, 1.2, benchmark=benchmark)
        rows = add_closing_benchmark(rows, fs=0.9)
        project = project.model_copy(update={"rows": rows})

        relabeled = reapply_pattern(project, ["CL", "3.5 RHS"])

        assert [r.chainage for r in relabeled] == [
            "",
            "CP01",
            "0+000 CL",
            "3.5 RHS",
            "0+020 CL",
            "3.5 RHS",
            "Closing BM",
        ]
        assert isinstance(relabeled[1], ChangePointRow)
        assert relabeled[2].pushed_from == relabeled[1].id
        assert isinstance(relabeled[-1], ClosingBenchmarkRow)

    def test_no_rows_generates(self, new_project):
        project = new_project.model_copy(update={"rows": []})
        assert len(reapply_pattern(project, ["CL"])) == 1 + 3

    def test_project_not_modified(self, survey_project):
        before = survey_project.model_copy(deep=True)
        reapply_pattern(survey_project, ["CL", "3.5 RHS"])
        assert survey_project == before

    def test_idempotent(self, new_project):
        once = new_project.model_copy(
            update={"rows": reapply_pattern(new_project, ["CL", "3.5 RHS"])}
        )
        twice = reapply_pattern(once, ["CL", "3.5 RHS"])
        assert twice == once.rows
