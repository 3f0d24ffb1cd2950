# -*- coding: utf-8 -*-
"""Error classes for the levelbook library.

The reduction engine and the structural editors never raise: incomplete
field books are their steady state. These exceptions are raised by the
outer layers (edit session, project file interface) when a caller asks
for something that cannot exist.
"""


class LevelBookError(Exception):
    """Base class for all levelbook errors."""


class RowNotFoundError(LevelBookError, KeyError):
    """Raised when a row id does not exist in the project.

    Attributes:
        row_id: The id that was looked up
    """

    def __init__(self, row_id: str):
        self.row_id = row_id
        super().__init__(row_id)

    def __str__(self) -> str:
        return f"No row with id `{self.row_id}`"


class InvalidFieldError(LevelBookError, ValueError):
    """Raised when a field is not editable on the addressed row variant.

    Attributes:
        field: Name of the rejected field
        kind: Row kind the edit was addressed to
    """

    def __init__(self, field: str, kind: str):
        self.field = field
        self.kind = kind
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Field `{self.field}` cannot be edited on a `{self.kind}` row"


class ProjectFileError(LevelBookError):
    """Raised when a project file cannot be read or does not validate.

    Attributes:
        message: Error message
        source: File name or identifier of the offending document
    """

    def __init__(self, message: str, source: str | None = None):
        self.message = message
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.source:
            return f"{self.message} (in {self.source})"
        return self.message
