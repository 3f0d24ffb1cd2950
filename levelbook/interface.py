# -*- coding: utf-8 -*-
"""Unified interface for field-book project files.

Project files are the JSON serialization of a ``Project``:

- Reading: File -> JSON string -> model_validate_json() -> Project
- Writing: Project -> model_dump_json(by_alias=True) -> File

Records written by older versions of the field book, where row variants
are boolean flags (``isCP``, ``isClosingBM``), are upgraded on load.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from levelbook.constants import DEFAULT_CHAINAGE_INTERVAL
from levelbook.constants import DEFAULT_POINT_PATTERN
from levelbook.constants import DEFAULT_POINTS_PER_STATION
from levelbook.constants import JSON_ENCODING
from levelbook.engine.pattern import generate_table_rows
from levelbook.errors import ProjectFileError
from levelbook.models import Benchmark
from levelbook.models import Project
from levelbook.models import now_ms

logger = logging.getLogger(__name__)


class LevelBookInterface:
    """Project creation and JSON file I/O.

    Example:
        project = LevelBookInterface.create_project(
            title="Subgrade",
            from_chainage="0+000",
            to_chainage="0+200",
        )
        LevelBookInterface.save_json(project, Path("subgrade.json"))
        project = LevelBookInterface.load_project_json(Path("subgrade.json"))
    """

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    @classmethod
    def create_project(
        cls,
        *,
        from_chainage: str,
        to_chainage: str,
        title: str = "",
        layer: str = "",
        chainage_interval: float = DEFAULT_CHAINAGE_INTERVAL,
        points_per_station: int = DEFAULT_POINTS_PER_STATION,
        point_pattern: list[str] | None = None,
        benchmark: Benchmark | None = None,
    ) -> Project:
        """Create a new project with its table already generated.

        An empty or missing *point_pattern* falls back to the default
        ``3.5 LHS, CL, 3.5 RHS`` layout.
        """
        timestamp = now_ms()
        project = Project(
            id=f"project-{timestamp}",
            title=title,
            layer=layer,
            from_chainage=from_chainage,
            to_chainage=to_chainage,
            chainage_interval=chainage_interval,
            points_per_station=points_per_station,
            point_pattern=point_pattern or list(DEFAULT_POINT_PATTERN),
            benchmark=benchmark,
            created_at=timestamp,
            updated_at=timestamp,
        )
        project.rows = generate_table_rows(project)
        logger.info(
            "Created project %s with %d rows (%s to %s)",
            project.id,
            len(project.rows),
            from_chainage,
            to_chainage,
        )
        return project

    # -------------------------------------------------------------------------
    # Loading Methods (File -> Model)
    # -------------------------------------------------------------------------

    @classmethod
    def load_project_str(cls, content: str, source: str = "<string>") -> Project:
        """Load a project from a JSON string.

        Raises:
            ProjectFileError: If the content is not a valid project record
        """
        try:
            return Project.model_validate_json(content)
        except ValidationError as e:
            raise ProjectFileError(
                f"Invalid project record: {e.error_count()} error(s)\n{e}",
                source=source,
            ) from e

    @classmethod
    def load_project_json(
        cls,
        path: Path,
        *,
        encoding: str = JSON_ENCODING,
    ) -> Project:
        """Load a project from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ProjectFileError: If the file is not a valid project record
        """
        content = path.read_text(encoding=encoding)
        return cls.load_project_str(content, source=str(path))

    # -------------------------------------------------------------------------
    # Saving Methods (Model -> File)
    # -------------------------------------------------------------------------

    @classmethod
    def dumps(cls, project: Project) -> str:
        """Serialize a project to a JSON string."""
        return project.model_dump_json(indent=2, by_alias=True)

    @classmethod
    def save_json(
        cls,
        project: Project,
        path: Path,
        *,
        encoding: str = JSON_ENCODING,
        touch: bool = True,
    ) -> None:
        """Save a project as JSON.

        Args:
            project: Project to serialize
            path: Path to write to
            encoding: Character encoding
            touch: Stamp ``updated_at`` before writing
        """
        if touch:
            project.touch()
        path.write_text(cls.dumps(project), encoding=encoding)
        logger.debug("Saved project %s to %s", project.id, path)
