# -*- coding: utf-8 -*-
"""Constants used throughout the levelbook library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Encoding used for JSON project files
JSON_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# Chainage Generation
# -----------------------------------------------------------------------------

#: Distance between generated chainage stations (meters)
DEFAULT_CHAINAGE_INTERVAL: int = 20

#: Number of points generated per station when no pattern is given
DEFAULT_POINTS_PER_STATION: int = 3

#: Lateral offset of the outermost side points from the centerline (meters)
SIDE_OFFSET: float = 3.5

#: Point labels used for new projects
DEFAULT_POINT_PATTERN: tuple[str, ...] = ("3.5 LHS", "CL", "3.5 RHS")

#: Separator between kilometers and meters in a chainage string ("2+460")
CHAINAGE_SEPARATOR = "+"

#: Digits used for the meters part of a chainage string
CHAINAGE_METER_DIGITS: int = 3

# -----------------------------------------------------------------------------
# Change Points
# -----------------------------------------------------------------------------

#: Prefix of auto-generated change point labels ("CP01")
CP_LABEL_PREFIX = "CP"

#: Zero-padded width of the change point sequence number
CP_LABEL_DIGITS: int = 2

# -----------------------------------------------------------------------------
# Presentation
# -----------------------------------------------------------------------------

#: Decimal places shown for levels and readings
LEVEL_PRECISION: int = 3

#: Placeholder shown for derived values that are not computable yet
MISSING_VALUE_STRING = "—"

#: Absolute tolerance of the BS/FS arithmetic check (meters)
ARITHMETIC_CHECK_TOLERANCE: float = 1e-6

# -----------------------------------------------------------------------------
# Edit Session
# -----------------------------------------------------------------------------

#: Maximum number of snapshots kept on the undo stack
DEFAULT_UNDO_DEPTH: int = 50

# -----------------------------------------------------------------------------
# Closing Benchmark
# -----------------------------------------------------------------------------

#: Label shown for a closing benchmark row without a name
CLOSING_BM_LABEL = "Closing BM"
