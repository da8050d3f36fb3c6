"""Tests for angle normalization, sexagesimal strings and zodiac lookup."""

from __future__ import annotations

import pytest

from astro_positions.angle_utils import (
    DMS,
    HMS,
    decl_string,
    deg_to_dms,
    deg_to_hms,
    get_zodiac_info,
    normalize_degrees,
    rasc_string,
    rasc_to_zodiac,
    zodiac_sign,
    zodiac_sign_short,
)
from astro_positions.constants import ZODIAC_SIGNS, ZODIAC_SIGNS_SHORT


@pytest.mark.parametrize(
    ('angle', 'expected'),
    [(400.0, 40.0), (-60.0, 300.0), (-460.0, 260.0), (360.0, 0.0), (0.0, 0.0), (720.5, 0.5)],
)
def test_normalize_degrees(angle: float, expected: float) -> None:
    """Angles reduce to [0, 360)."""
    assert normalize_degrees(angle) == pytest.approx(expected)


def test_normalize_tiny_negative_stays_below_360() -> None:
    """A value just below zero never normalizes to 360."""
    assert 0.0 <= normalize_degrees(-1e-15) < 360.0


def test_deg_to_hms() -> None:
    """Degrees convert to time units with 15 degrees per hour."""
    assert deg_to_hms(15.0) == HMS(1, 0, 0)
    assert deg_to_hms(182.625) == HMS(12, 10, 30)
    assert deg_to_hms(-15.0) == HMS(23, 0, 0)


def test_deg_to_dms_truncates_toward_zero() -> None:
    """Arcseconds truncate toward zero and every field carries the sign."""
    assert deg_to_dms(12.175) == DMS(12, 10, 30)
    assert deg_to_dms(-12.175) == DMS(-12, -10, -30)
    assert deg_to_dms(180.999999999) == DMS(180, 59, 59)
    assert deg_to_dms(0.0) == DMS(0, 0, 0)


@pytest.mark.parametrize(
    ('ra', 'expected'),
    [
        (0.0, '00AR00'),
        (30.0, '00TA00'),
        (65.5, '05GE30'),
        (80.33, '20GE19'),
        (145.7, '25LE42'),
        (325.2, '25AQ12'),
        (-34.8, '25AQ12'),
    ],
)
def test_rasc_to_zodiac(ra: float, expected: str) -> None:
    """Compact zodiac strings: degrees in sign, sign abbreviation, arcminutes."""
    assert rasc_to_zodiac(ra) == expected


@pytest.mark.parametrize('index', range(12))
def test_sign_boundaries(index: int) -> None:
    """Each sign starts exactly at a multiple of 30 degrees."""
    start = 30.0 * index
    assert zodiac_sign(start) == ZODIAC_SIGNS[index]
    assert zodiac_sign_short(start) == ZODIAC_SIGNS_SHORT[index]
    assert zodiac_sign(start + 29.99) == ZODIAC_SIGNS[index]
    assert zodiac_sign_short(start - 0.01) == ZODIAC_SIGNS_SHORT[index - 1]


def test_zodiac_info_fields() -> None:
    """ZodiacInfo breaks the angle down within its sign."""
    info = get_zodiac_info(98.234)
    assert info.sign == 'Cancer'
    assert info.sign_short == 'CN'
    assert info.sign_index == 3
    assert (info.degrees, info.minutes, info.seconds) == (8, 14, 2)
    assert info.right_ascension == pytest.approx(98.234)


def test_rasc_string() -> None:
    """Right ascension formats as hours, minutes, seconds."""
    assert rasc_string(182.625) == '12h 10m 30s'
    assert rasc_string(0.0) == '00h 00m 00s'
    assert rasc_string(-15.0) == '23h 00m 00s'


def test_decl_string() -> None:
    """Declination carries an explicit sign."""
    assert decl_string(12.175) == '+12d 10m 30s'
    assert decl_string(-12.175) == '-12d 10m 30s'
    assert decl_string(-0.5) == '-00d 30m 00s'
    assert decl_string(0.0) == '+00d 00m 00s'
