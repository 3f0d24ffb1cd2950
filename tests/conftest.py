# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

Field books used across the test modules. The reference book is the
worked example of a height-of-collimation reduction:

    row 0  benchmark RL 100.000, BS 1.500   -> HOC 101.500
    row 1  0+000 CL   IS 1.000              -> RL  100.500
    row 2  0+020 CL   FS 2.000              -> RL   99.500
    row 3  0+040 CL   (not read yet)
"""

from __future__ import annotations

import logging

import pytest

from levelbook.interface import LevelBookInterface
from levelbook.models import Benchmark
from levelbook.models import BenchmarkRow
from levelbook.models import Project
from levelbook.models import StationRow

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Field Book Fixtures
# =============================================================================


@pytest.fixture
def benchmark() -> Benchmark:
    """Opening benchmark at RL 100.000."""
    return Benchmark(name="RD4B-14A", rl=100.0)


@pytest.fixture
def survey_rows() -> list:
    """Reference field book rows (see module docstring)."""
    return [
        BenchmarkRow(id="row-bm", bs=1.5),
        StationRow(id="row-1", chainage="0+000 CL", station_type="CL", is_=1.0),
        StationRow(id="row-2", chainage="0+020 CL", station_type="CL", fs=2.0),
        StationRow(id="row-3", chainage="0+040 CL", station_type="CL"),
    ]


@pytest.fixture
def survey_project(survey_rows, benchmark) -> Project:
    """Project wrapping the reference rows."""
    return Project(
        id="project-1",
        title="Subgrade",
        layer="subgrade",
        from_chainage="0+000",
        to_chainage="0+040",
        point_pattern=["CL"],
        benchmark=benchmark,
        rows=survey_rows,
    )


@pytest.fixture
def new_project() -> Project:
    """Freshly created project, 0+000 to 0+040 with the default pattern."""
    return LevelBookInterface.create_project(
        title="Base course",
        layer="base",
        from_chainage="0+000",
        to_chainage="0+040",
    )
