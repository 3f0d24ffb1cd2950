# -*- coding: utf-8 -*-
"""Enumerations for leveling field books.

This module contains the enumerations used by the row models, the
reduction engine and the command line interface.
"""

from enum import Enum


class StationType(str, Enum):
    """Display grouping of a surveyed point.

    Attributes:
        CL: Centerline point
        RD: Reference point (e.g. a road benchmark such as "RD4B-14A")
        LHS: Left hand side point
        RHS: Right hand side point
    """

    CL = "CL"
    RD = "RD"
    LHS = "LHS"
    RHS = "RHS"

    @classmethod
    def classify(cls, label: str) -> "StationType | None":
        """Classify a point-pattern label.

        Inspection is case-insensitive. A label equal to ``CL`` or ending
        with `` CL`` is a centerline point; ``RD`` prefixes mark reference
        points; ``LHS``/``RHS`` anywhere in the label mark side points.

        Args:
            label: Point label, already stripped

        Returns:
            StationType or None if the label carries no classification
        """
        upper = label.upper()
        if upper == cls.CL.value or upper.endswith(f" {cls.CL.value}"):
            return cls.CL
        if upper.startswith(cls.RD.value):
            return cls.RD
        if cls.LHS.value in upper:
            return cls.LHS
        if cls.RHS.value in upper:
            return cls.RHS
        return None


class RowKind(str, Enum):
    """Discriminator of the field-book row variants.

    Attributes:
        BENCHMARK: First row, holds the backsight onto the benchmark
        STATION: Ordinary reading at a chainage point
        CHANGE_POINT: Row where the instrument was relocated
        CLOSING_BENCHMARK: Final foresight onto a known benchmark
    """

    BENCHMARK = "benchmark"
    STATION = "station"
    CHANGE_POINT = "change_point"
    CLOSING_BENCHMARK = "closing_benchmark"


class ReadingField(str, Enum):
    """User-editable numeric fields of a row.

    Values are the serialized field names.
    """

    BS = "bs"
    IS = "is"
    FS = "fs"
    D = "d"
    CLOSING_BM_VALUE = "closingBMValue"

    @property
    def attribute(self) -> str:
        """Python attribute name of this field on the row models."""
        return {
            ReadingField.BS: "bs",
            ReadingField.IS: "is_",
            ReadingField.FS: "fs",
            ReadingField.D: "d",
            ReadingField.CLOSING_BM_VALUE: "closing_bm_value",
        }[self]


class OutputFormat(str, Enum):
    """Output formats of the ``reduce`` command.

    Attributes:
        TABLE: Plain-text field-book table
        JSON: Reduced project serialized as JSON
    """

    TABLE = "table"
    JSON = "json"
