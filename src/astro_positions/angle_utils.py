"""Angle normalization, sexagesimal formatting and zodiac lookup."""

from __future__ import annotations

import math
from dataclasses import dataclass

from astro_positions.constants import (
    ARCSEC_PER_DEGREE,
    DEGREES_PER_CIRCLE,
    DEGREES_PER_SIGN,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    ZODIAC_SIGNS,
    ZODIAC_SIGNS_SHORT,
)


@dataclass(frozen=True)
class HMS:
    """Angle as hours, minutes, seconds of time (24h = 360 degrees)."""

    hours: int
    minutes: int
    seconds: int


@dataclass(frozen=True)
class DMS:
    """Angle as degrees, arcminutes, arcseconds; all three carry the angle's sign."""

    degrees: int
    minutes: int
    seconds: int


@dataclass(frozen=True)
class ZodiacInfo:
    """Position of an ecliptic-ish angle within the twelve 30-degree signs."""

    right_ascension: float
    sign_index: int
    sign: str
    sign_short: str
    degrees: int
    minutes: int
    seconds: int


def normalize_degrees(angle: float) -> float:
    """Reduce ``angle`` to [0, 360)."""
    result = angle - DEGREES_PER_CIRCLE * math.floor(angle / DEGREES_PER_CIRCLE)
    # Tiny negative inputs round up to exactly 360.0.
    if result >= DEGREES_PER_CIRCLE:
        result -= DEGREES_PER_CIRCLE
    return result


def _div_toward_zero(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def deg_to_hms(angle: float) -> HMS:
    """Convert degrees to hours/minutes/seconds of time, truncating to whole seconds.

    The angle is normalized to [0, 360) first.

    Parameters:
        angle: Angle in degrees.

    Returns:
        HMS with hours in 0-23.
    """
    total = math.floor(normalize_degrees(angle) * SECONDS_PER_DAY / DEGREES_PER_CIRCLE)
    hours, rest = divmod(total, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    return HMS(int(hours), int(minutes), int(seconds))


def deg_to_dms(angle: float) -> DMS:
    """Convert degrees to degrees/arcminutes/arcseconds, truncating toward zero.

    Parameters:
        angle: Angle in degrees (not normalized).

    Returns:
        DMS whose fields all share the sign of ``angle``.
    """
    arcsec = angle * ARCSEC_PER_DEGREE
    total = math.floor(arcsec) if angle > 0 else math.ceil(arcsec)
    degrees = _div_toward_zero(total, ARCSEC_PER_DEGREE)
    rest = total - degrees * ARCSEC_PER_DEGREE
    minutes = _div_toward_zero(rest, 60)
    seconds = rest - minutes * 60
    return DMS(degrees, minutes, seconds)


def get_zodiac_info(right_ascension: float) -> ZodiacInfo:
    """Locate ``right_ascension`` (degrees) within the zodiac.

    Sign 0 (Aries) starts at 0 degrees; each sign spans 30 degrees.
    """
    ra = normalize_degrees(right_ascension)
    dms = deg_to_dms(ra)
    index = dms.degrees // DEGREES_PER_SIGN
    return ZodiacInfo(
        right_ascension=ra,
        sign_index=index,
        sign=ZODIAC_SIGNS[index],
        sign_short=ZODIAC_SIGNS_SHORT[index],
        degrees=dms.degrees % DEGREES_PER_SIGN,
        minutes=dms.minutes,
        seconds=dms.seconds,
    )


def zodiac_sign(right_ascension: float) -> str:
    """Full sign name, e.g. 'Gemini'."""
    return get_zodiac_info(right_ascension).sign


def zodiac_sign_short(right_ascension: float) -> str:
    """Two-letter sign abbreviation, e.g. 'GE'."""
    return get_zodiac_info(right_ascension).sign_short


def rasc_to_zodiac(right_ascension: float) -> str:
    """Compact zodiac position: degrees in sign, abbreviation, arcminutes ('20GE19')."""
    info = get_zodiac_info(right_ascension)
    return f'{info.degrees:02d}{info.sign_short}{info.minutes:02d}'


def rasc_string(right_ascension: float) -> str:
    """Right ascension as '12h 10m 30s'."""
    hms = deg_to_hms(right_ascension)
    return f'{hms.hours:02d}h {hms.minutes:02d}m {hms.seconds:02d}s'


def decl_string(declination: float) -> str:
    """Declination as '+12d 10m 30s' or '-05d 02m 10s'."""
    dms = deg_to_dms(declination)
    sign = '+' if declination >= 0 else '-'
    return f'{sign}{abs(dms.degrees):02d}d {abs(dms.minutes):02d}m {abs(dms.seconds):02d}s'
