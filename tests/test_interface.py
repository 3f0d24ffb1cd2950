# -*- coding: utf-8 -*-
"""Tests for project creation and JSON file I/O."""

import json

import pytest

from levelbook.errors import ProjectFileError
from levelbook.interface import LevelBookInterface
from levelbook.models import Benchmark
from levelbook.models import BenchmarkRow
from levelbook.models import ChangePointRow
from levelbook.models import StationRow


class TestCreateProject:
    """Tests for LevelBookInterface.create_project."""

    def test_default_pattern(self, new_project):
        assert new_project.point_pattern == ["3.5 LHS", "CL", "3.5 RHS"]
        assert new_project.title == "Base course"
        assert new_project.layer == "base"
        assert len(new_project.rows) == 10
        assert isinstance(new_project.rows[0], BenchmarkRow)

    def test_timestamps(self, new_project):
        assert new_project.id == f"project-{new_project.created_at}"
        assert new_project.updated_at == new_project.created_at

    def test_custom_pattern(self):
        project = LevelBookInterface.create_project(
            from_chainage="2+400",
            to_chainage="2+420",
            chainage_interval=10,
            point_pattern=["4.0 LHS", "CL", "4.0 RHS"],
        )
        assert [r.chainage for r in project.rows[1:4]] == [
            "4.0 LHS",
            "2+400 CL",
            "4.0 RHS",
        ]
        assert len(project.rows) == 1 + 9

    def test_empty_pattern_falls_back(self):
        project = LevelBookInterface.create_project(
            from_chainage="0+000",
            to_chainage="0+000",
            point_pattern=[],
        )
        assert project.point_pattern == ["3.5 LHS", "CL", "3.5 RHS"]

    def test_with_benchmark(self):
        project = LevelBookInterface.create_project(
            from_chainage="0+000",
            to_chainage="0+000",
            benchmark=Benchmark(name="RD4B-14A", rl=100.0),
        )
        assert project.benchmark.rl == pytest.approx(100.0)


class TestLoadProject:
    """Tests for loading project files."""

    def test_round_trip(self, survey_project, tmp_path):
        path = tmp_path / "book.json"
        LevelBookInterface.save_json(survey_project, path, touch=False)
        loaded = LevelBookInterface.load_project_json(path)
        assert loaded == survey_project

    def test_save_touches(self, survey_project, tmp_path):
        survey_project.updated_at = 0
        LevelBookInterface.save_json(survey_project, tmp_path / "book.json")
        assert survey_project.updated_at > 0

    def test_dumps_uses_aliases(self, survey_project):
        data = json.loads(LevelBookInterface.dumps(survey_project))
        assert data["fromChainage"] == "0+000"
        assert data["rows"][0]["kind"] == "benchmark"
        assert "from_chainage" not in data

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LevelBookInterface.load_project_json(tmp_path / "missing.json")

    def test_invalid_json(self):
        with pytest.raises(ProjectFileError, match="Invalid project record"):
            LevelBookInterface.load_project_str("{not json", source="book.json")

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "book.json"
        path.write_text(json.dumps({"rows": [{"kind": "tripod"}]}), encoding="utf-8")

        with pytest.raises(ProjectFileError) as exc_info:
            LevelBookInterface.load_project_json(path)
        assert exc_info.value.source == str(path)
        assert str(path) in str(exc_info.value)

    def test_legacy_record(self):
        content = json.dumps(
            {
                "id": "project-1",
                "fromChainage": "0+000",
                "toChainage": "0+020",
                "date": "2024-05-02",
                "benchmark": {"name": "BM1", "rl": 50.0},
                "rows": [
                    {"id": "row-1", "bs": 1.5},
                    {"id": "row-2", "fs": 1.0, "isCP": True, "cpLabel": "CP01"},
                    {"id": "row-2-pushed", "chainage": "0+020 CL"},
                ],
            }
        )
        project = LevelBookInterface.load_project_str(content)

        assert isinstance(project.rows[1], ChangePointRow)
        assert isinstance(project.rows[2], StationRow)
        assert project.rows[2].pushed_from == "row-2"

        saved = json.loads(LevelBookInterface.dumps(project))
        assert "isCP" not in saved["rows"][1]
        assert saved["rows"][2]["pushedFrom"] == "row-2"
