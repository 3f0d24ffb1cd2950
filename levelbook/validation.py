# -*- coding: utf-8 -*-
"""Validation and parsing utilities for field-book input.

Readings are typed in by hand on site, so parsing here is forgiving:
intermediate states such as ``"3."`` are "still typing" rather than
errors, and ``"0"``, ``"00"`` and ``"0.000"`` are all a reading of zero.
"""

import re
from re import Pattern

# Chainage: kilometers, "+", three-digit meters ("2+460")
CHAINAGE_PATTERN: Pattern[str] = re.compile(r"^\d+\+\d{3}$")

# Leading decimal number, optionally signed, with optional exponent
_LEADING_NUMBER: Pattern[str] = re.compile(
    r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)

# Integer followed by a lone trailing dot ("3.", "-12.") or a bare dot
_STILL_TYPING: Pattern[str] = re.compile(r"^-?\d*\.$")


def parse_reading(value: str | None) -> float | None:
    """Parse a typed staff reading or level.

    Args:
        value: Raw text from an input field

    Returns:
        The number, or None for empty input, input that is still being
        typed (``"."``, ``"3."``) and input with no leading number.

    Examples:
        >>> parse_reading("1.455")
        1.455
        >>> parse_reading("00") == 0
        True
        >>> parse_reading("3.") is None
        True
    """
    if value is None or value == "":
        return None
    if _STILL_TYPING.match(value):
        return None
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return None
    return float(match.group(0))


def parse_pattern(text: str) -> list[str]:
    """Split a comma separated point pattern into labels.

    Examples:
        >>> parse_pattern("3.5 LHS, CL, 3.5 RHS")
        ['3.5 LHS', 'CL', '3.5 RHS']
        >>> parse_pattern(" , ")
        []
    """
    return [label.strip() for label in text.split(",") if label.strip()]


def is_valid_chainage(chainage: str) -> bool:
    """Check if a chainage string is well formed (``"<km>+<mmm>"``)."""
    return bool(CHAINAGE_PATTERN.match(chainage))


def validate_chainage(chainage: str) -> None:
    """Validate a chainage string, raising an error if malformed.

    Args:
        chainage: Chainage to validate

    Raises:
        ValueError: If the chainage is not ``"<km>+<mmm>"``
    """
    if not is_valid_chainage(chainage):
        raise ValueError(
            f"Invalid chainage: `{chainage}` (expected e.g. `2+460`)"
        )
