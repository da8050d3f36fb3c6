"""Tests for position and ephemeris table output."""

from __future__ import annotations

import io

import pytest

from astro_positions.bodies import Body
from astro_positions.report import (
    POSITIONS_HEADER,
    ephemeris_times,
    format_position_row,
    generate_ephemeris,
    write_positions,
)
from astro_positions.utc_time import UTCTime, resolve_utc_timestamp


def test_write_positions_full_table() -> None:
    """Default table lists every visible body and the Moon footnote."""
    instant = resolve_utc_timestamp(2013, 6, 4, 1, 15, 0)
    out = io.StringIO()
    write_positions(instant, out)
    lines = out.getvalue().splitlines()
    assert lines[0] == 'Planetary positions for Tuesday June 04, 2013 01:15:00 UTC'
    assert lines[1] == ''
    assert tuple(lines[2:4]) == POSITIONS_HEADER
    rows = lines[4:14]
    assert [row.split(':')[0].strip() for row in rows] == [
        'Sun',
        'Moon',
        'Mercury',
        'Venus',
        'Mars',
        'Jupiter',
        'Saturn',
        'Uranus',
        'Neptune',
        'Pluto',
    ]
    assert rows[0].startswith('Sun     : 04h 48m')
    assert rows[0].endswith('Gemini')
    assert lines[-1] == '* Moon distance is in Earth radii.'


def test_write_positions_selected_bodies() -> None:
    """Only the requested bodies are listed; no footnote without the Moon."""
    instant = resolve_utc_timestamp(2013, 6, 4, 1, 15, 0)
    out = io.StringIO()
    write_positions(instant, out, ['mars', Body.VENUS])
    text = out.getvalue()
    rows = text.splitlines()[4:]
    assert len(rows) == 2
    assert rows[0].startswith('Mars    :')
    assert rows[1].startswith('Venus   :')
    assert 'Earth radii' not in text


def test_write_positions_unknown_body() -> None:
    """Unknown body names raise ValueError before anything is written."""
    out = io.StringIO()
    with pytest.raises(ValueError):
        write_positions(UTCTime(0), out, ['Vulcan'])
    assert out.getvalue() == ''


def test_format_position_row_fields() -> None:
    """A row holds RA, signed declination, distance and zodiac fields."""
    row = format_position_row(Body.SUN, resolve_utc_timestamp(2013, 6, 4, 1, 15, 0))
    name, rest = row.split(':', 1)
    assert name == 'Sun     '
    ra, decl, tail = rest.split(',')
    assert ra.strip().endswith('s')
    assert decl.strip().startswith('+22d')
    distance, zodiac, sign = tail.split()
    assert float(distance) == pytest.approx(1.0145, abs=0.001)
    assert zodiac[2:4] == 'GE'
    assert sign == 'Gemini'


def test_ephemeris_times_inclusive() -> None:
    """The stop time is included when it falls on a step."""
    start = resolve_utc_timestamp(2013, 6, 4)
    stop = resolve_utc_timestamp(2013, 6, 4, 3)
    times = ephemeris_times(start, stop, 1, 'hour')
    assert [t.timestamp - start.timestamp for t in times] == [0, 3600, 7200, 10800]


def test_ephemeris_times_limits() -> None:
    """Too few or too many steps are rejected."""
    start = resolve_utc_timestamp(2013, 6, 4)
    with pytest.raises(ValueError, match='too short'):
        ephemeris_times(start, start, 1, 'hour')
    with pytest.raises(ValueError, match='exceeds limit'):
        ephemeris_times(start, resolve_utc_timestamp(2013, 6, 6), 1, 'sec')
    with pytest.raises(ValueError):
        ephemeris_times(start, resolve_utc_timestamp(2013, 6, 5), 1, 'week')


def test_generate_ephemeris() -> None:
    """One row per step, each starting with the civil time."""
    start = resolve_utc_timestamp(2013, 6, 4)
    stop = resolve_utc_timestamp(2013, 6, 6)
    out = io.StringIO()
    count = generate_ephemeris('Jupiter', start, stop, out, interval=1, time_unit='day')
    lines = out.getvalue().splitlines()
    assert count == 3
    assert len(lines) == 4
    assert lines[0].startswith('year mo dy hr mi sc')
    assert lines[1].startswith('2013  6  4  0  0  0 ')
    assert lines[3].startswith('2013  6  6  0  0  0 ')
    for line in lines[1:]:
        assert line.split()[-1][2:4] in ('TA', 'GE')
