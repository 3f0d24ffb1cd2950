# -*- coding: utf-8 -*-
"""Tests for the plain-text field-book rendering."""

import datetime

import pytest

from levelbook.engine.change_points import insert_change_point
from levelbook.engine.closing import add_closing_benchmark
from levelbook.engine.reduction import reduce_rows
from levelbook.format import TABLE_COLUMNS
from levelbook.format import format_level
from levelbook.format import format_project
from levelbook.format import format_row
from levelbook.format import format_table
from levelbook.models import BenchmarkRow
from levelbook.models import StationRow


class TestFormatLevel:
    """Tests for format_level function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (100.0, "100.000"),
            (99.5, "99.500"),
            (1.23456, "1.235"),
            (0.0, "0.000"),
            (-0.0000001, "0.000"),
            (-0.25, "-0.250"),
        ],
    )
    def test_three_decimals(self, value, expected):
        assert format_level(value) == expected

    def test_missing(self):
        assert format_level(None) == "—"

    def test_precision(self):
        assert format_level(1.23456, precision=2) == "1.23"


class TestFormatRow:
    """Tests for format_row function."""

    def test_benchmark_row(self, survey_rows, benchmark):
        reduced = reduce_rows(survey_rows, benchmark)
        assert format_row(reduced[0], benchmark) == [
            "RD4B-14A",
            "1.500",
            "",
            "",
            "101.500",
            "100.000",
            "",
            "",
        ]

    def test_benchmark_row_without_benchmark(self):
        assert format_row(BenchmarkRow(), None)[:6] == ["BM", "", "", "", "—", "—"]

    def test_station_rows(self, survey_rows, benchmark):
        reduced = reduce_rows(survey_rows, benchmark)
        assert format_row(reduced[1]) == [
            "0+000 CL",
            "",
            "1.000",
            "",
            "101.500",
            "100.500",
            "",
            "—",
        ]
        assert format_row(reduced[3])[5] == "—"

    def test_change_point_row(self, survey_rows, benchmark):
        rows = insert_change_point(survey_rows, 2, 1.2, benchmark=benchmark)
        cells = format_row(reduce_rows(rows, benchmark)[2])
        assert cells == ["CP01", "1.200", "", "2.000", "100.700", "99.500", "", ""]

    def test_closing_row(self, survey_rows, benchmark):
        rows = add_closing_benchmark(survey_rows, fs=1.6, value=99.91)
        cells = format_row(reduce_rows(rows, benchmark)[-1])
        assert cells == ["Closing BM", "", "", "1.600", "", "99.900", "99.910", "0.010"]

    def test_unknown_row(self):
        with pytest.raises(TypeError):
            format_row(object())

    def test_column_count(self, survey_rows, benchmark):
        for row in reduce_rows(survey_rows, benchmark):
            assert len(format_row(row, benchmark)) == len(TABLE_COLUMNS)


class TestFormatTable:
    """Tests for format_table and format_project."""

    def test_layout(self, survey_rows, benchmark):
        text = format_table(reduce_rows(survey_rows, benchmark), benchmark)
        lines = text.splitlines()

        assert lines[0].split() == list(TABLE_COLUMNS)
        assert set(lines[1]) == {"-"}
        assert lines[2].startswith("RD4B-14A")
        assert lines[3].startswith("0+000 CL")
        assert "100.500" in lines[3]
        assert text.endswith("\n")

    def test_columns_aligned(self, survey_rows, benchmark):
        text = format_table(reduce_rows(survey_rows, benchmark), benchmark)
        table = text.splitlines()[:6]
        rl_end = table[0].index("RL") + len("RL")
        assert table[3][:rl_end].endswith("100.500")
        assert table[4][:rl_end].endswith("99.500")

    def test_summary(self, survey_rows, benchmark):
        rows = insert_change_point(survey_rows, 2, 1.2, benchmark=benchmark)
        rows = add_closing_benchmark(rows, fs=0.8, value=99.91)
        text = format_table(reduce_rows(rows, benchmark), benchmark)

        assert "Arithmetic check:" in text
        assert "[OK]" in text
        assert "Closing error: 0.010" in text

    def test_failed_check(self, benchmark):
        rows = [BenchmarkRow(bs=1.5), StationRow(fs=2.0), StationRow(bs=0.5, fs=1.0)]
        text = format_table(reduce_rows(rows, benchmark), benchmark)
        assert "[FAILED]" in text

    def test_several_foresights_pass(self, benchmark):
        rows = [BenchmarkRow(bs=1.5), StationRow(fs=2.0), StationRow(fs=1.0)]
        text = format_table(reduce_rows(rows, benchmark), benchmark)

        assert "ΣBS - ΣFS = 0.500, last RL - first RL = 0.500 [OK]" in text

    def test_no_summary_without_benchmark(self, survey_rows):
        text = format_table(reduce_rows(survey_rows, None))
        assert "Arithmetic check" not in text
        assert "Closing error" not in text

    def test_title(self, survey_rows, benchmark):
        text = format_table(reduce_rows(survey_rows, benchmark), benchmark, title="Kerb")
        assert text.splitlines()[0] == "Kerb"

    def test_project_title(self, survey_project):
        survey_project.date = datetime.date(2024, 5, 2)
        reduced = reduce_rows(survey_project.rows, survey_project.benchmark)
        assert format_project(survey_project, reduced).splitlines()[0] == (
            "Subgrade (2024-05-02)"
        )

    def test_project_default_title(self, survey_project):
        survey_project.title = ""
        survey_project.date = datetime.date(2024, 5, 2)
        reduced = reduce_rows(survey_project.rows, survey_project.benchmark)
        assert format_project(survey_project, reduced).splitlines()[0] == (
            "LEVEL CHECK FROM 0+000 TO 0+040 FOR SUBGRADE (2024-05-02)"
        )
