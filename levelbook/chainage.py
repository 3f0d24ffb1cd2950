# -*- coding: utf-8 -*-
"""Chainage parsing, formatting and station generation.

Chainages are written ``"<kilometers>+<meters>"`` with the meters part
zero-padded to three digits, e.g. ``"2+460"`` is 2460 m along the
alignment. Parsing is tolerant: malformed parts count as 0 and nothing in
this module raises for bad input.
"""

from __future__ import annotations

import logging
import math
import re

from levelbook.constants import CHAINAGE_METER_DIGITS
from levelbook.constants import CHAINAGE_SEPARATOR
from levelbook.constants import DEFAULT_CHAINAGE_INTERVAL
from levelbook.constants import SIDE_OFFSET
from levelbook.enums import StationType
from levelbook.models import ChainageStation

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the leading integer of *text*, 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _format_number(value: float) -> str:
    """Shortest text for a number, without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def parse_chainage(chainage: str) -> int:
    """Parse a chainage string to meters.

    Args:
        chainage: Chainage such as ``"0+000"`` or ``"2+460"``

    Returns:
        Distance in meters. Strings without exactly one ``+`` yield 0,
        a missing or malformed part counts as 0.

    Examples:
        >>> parse_chainage("2+460")
        2460
        >>> parse_chainage("1+")
        1000
        >>> parse_chainage("abc")
        0
    """
    parts = chainage.split(CHAINAGE_SEPARATOR)
    if len(parts) != 2:  # noqa: PLR2004
        return 0
    km, m = parts
    return _leading_int(km) * 1000 + _leading_int(m)


def format_chainage(meters: float) -> str:
    """Format meters as a chainage string.

    Examples:
        >>> format_chainage(100)
        '0+100'
        >>> format_chainage(1050)
        '1+050'
    """
    km = math.floor(meters / 1000)
    rest = _format_number(meters - km * 1000)
    whole, dot, fraction = rest.partition(".")
    meters_text = f"{whole.zfill(CHAINAGE_METER_DIGITS)}{dot}{fraction}"
    return f"{km}{CHAINAGE_SEPARATOR}{meters_text}"


def _pattern_points(chainage: str, pattern: list[str]) -> list[ChainageStation]:
    points: list[ChainageStation] = []
    for raw_label in pattern:
        label = raw_label.strip()
        station_type = StationType.classify(label)
        points.append(
            ChainageStation(
                chainage=chainage,
                offset=0.0,
                display_label=(
                    f"{chainage} {StationType.CL.value}"
                    if station_type is StationType.CL
                    else label
                ),
                station_type=station_type,
            )
        )
    return points


def _offset_points(chainage: str, points_per_station: int) -> list[ChainageStation]:
    centerline = f"{chainage} {StationType.CL.value}"

    if points_per_station == 1:
        return [ChainageStation(chainage=chainage, offset=0.0, display_label=chainage)]

    if points_per_station == 3:  # noqa: PLR2004
        side = _format_number(SIDE_OFFSET)
        return [
            ChainageStation(
                chainage=chainage,
                offset=-SIDE_OFFSET,
                display_label=f"{side} {StationType.LHS.value}",
                station_type=StationType.LHS,
            ),
            ChainageStation(
                chainage=chainage,
                offset=0.0,
                display_label=centerline,
                station_type=StationType.CL,
            ),
            ChainageStation(
                chainage=chainage,
                offset=SIDE_OFFSET,
                display_label=f"{side} {StationType.RHS.value}",
                station_type=StationType.RHS,
            ),
        ]

    if points_per_station < 1:
        return []

    spacing = SIDE_OFFSET * 2 / (points_per_station - 1)
    points: list[ChainageStation] = []
    for i in range(points_per_station):
        offset = -SIDE_OFFSET + i * spacing
        if offset == 0:
            points.append(
                ChainageStation(
                    chainage=chainage,
                    offset=0.0,
                    display_label=centerline,
                    station_type=StationType.CL,
                )
            )
        else:
            points.append(
                ChainageStation(
                    chainage=chainage,
                    offset=offset,
                    display_label=_format_number(abs(offset)),
                )
            )
    return points


def generate_chainage_points(
    from_chainage: str,
    to_chainage: str,
    points_per_station: int,
    interval: float = DEFAULT_CHAINAGE_INTERVAL,
    pattern: list[str] | None = None,
) -> list[ChainageStation]:
    """Generate the labeled survey points for a chainage range.

    Stations are placed every *interval* meters from *from_chainage* up to
    and including *to_chainage*. If the range is not a multiple of the
    interval the last station falls short of *to_chainage*.

    A non-empty *pattern* takes precedence over *points_per_station*: each
    station gets one point per label. Otherwise the points are laid out
    across the carriageway at offsets between ``-SIDE_OFFSET`` and
    ``+SIDE_OFFSET``.

    Args:
        from_chainage: First chainage (``"0+000"``)
        to_chainage: Last chainage (``"0+200"``)
        points_per_station: Points per station when no pattern is given
        interval: Distance between stations in meters
        pattern: Point labels per station (``["3.5 LHS", "CL", "3.5 RHS"]``)

    Returns:
        Ordered list of ChainageStation
    """
    start = parse_chainage(from_chainage)
    end = parse_chainage(to_chainage)

    if interval <= 0:
        logger.warning(
            "Non-positive chainage interval %s, generating %s only",
            interval,
            from_chainage,
        )
        stations = [start]
    else:
        stations = []
        step = 0
        while (meters := start + step * interval) <= end:
            stations.append(meters)
            step += 1

    points: list[ChainageStation] = []
    for meters in stations:
        chainage = format_chainage(meters)
        if pattern:
            points.extend(_pattern_points(chainage, pattern))
        else:
            points.extend(_offset_points(chainage, points_per_station))

    logger.debug(
        "Generated %d points over %d stations (%s to %s)",
        len(points),
        len(stations),
        from_chainage,
        to_chainage,
    )
    return points
