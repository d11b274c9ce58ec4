"""Render :class:`AngleValue` instances as display strings.

Formatters always emit the canonical ASCII markers (``'`` and ``"``) and the
canonical direction letters (N/S/E/W, never ``O``), whatever variant the
input used. Sexagesimal output is rounded on the total count of the smallest
displayed unit before splitting into degrees, minutes and seconds, so a
carry propagates upward and ``60`` never appears in a minutes or seconds
slot: 59.96 seconds is written as the next whole minute.
"""

from __future__ import annotations

from geonorm.config import DD_OUTPUT_DECIMALS, DDM_MINUTES_DECIMALS, DMS_SECONDS_DECIMALS
from geonorm.geo import AngleValue, Direction
from geonorm.rounding import round_half_away


def format_as_dd(angle: AngleValue, decimals: int = DD_OUTPUT_DECIMALS) -> str:
    """Signed decimal degrees, e.g. ``"-2.294444"``."""
    value = round_half_away(angle.degrees, decimals)
    if value == 0:
        value = 0.0  # no "-0.000000"
    return f"{value:.{decimals}f}"


def _sexagesimal_units(magnitude: float, units_per_degree: int) -> int:
    return int(round_half_away(magnitude * units_per_degree))


def _direction(angle: AngleValue, total: int) -> Direction:
    # zero after rounding is N/E, never S/W
    return angle.direction if total else Direction.for_value(0.0, angle.axis)


def format_as_dms(angle: AngleValue, decimals: int = DMS_SECONDS_DECIMALS) -> str:
    """Degrees, minutes and seconds, e.g. ``48°51'29.6"N``.

    Args:
        angle: Value to render.
        decimals: Digits kept after the seconds decimal point.

    Returns:
        str: ``D°M'S.s"H`` with ASCII markers.
    """
    scale = 10**decimals
    per_minute = 60 * scale
    per_degree = 60 * per_minute
    total = _sexagesimal_units(angle.magnitude, per_degree)
    degrees, rest = divmod(total, per_degree)
    minutes, second_units = divmod(rest, per_minute)
    seconds = second_units / scale
    return f"{degrees}°{minutes}'{seconds:.{decimals}f}\"{_direction(angle, total).letter}"


def format_as_ddm(angle: AngleValue, decimals: int = DDM_MINUTES_DECIMALS) -> str:
    """Degrees and decimal minutes, e.g. ``48°51.5'N``."""
    scale = 10**decimals
    per_degree = 60 * scale
    total = _sexagesimal_units(angle.magnitude, per_degree)
    degrees, minute_units = divmod(total, per_degree)
    minutes = minute_units / scale
    return f"{degrees}°{minutes:.{decimals}f}'{_direction(angle, total).letter}"
