"""Text reports: position table for one instant and ephemeris table over a time range."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TextIO

from astro_positions.angle_utils import decl_string, rasc_string, rasc_to_zodiac, zodiac_sign
from astro_positions.bodies import VISIBLE_BODIES, Body, get_body_spec, parse_body
from astro_positions.bodies.base import DISTANCE_EARTH_RADII
from astro_positions.constants import DEFAULT_INTERVAL, MAX_EPHEMERIS_STEPS
from astro_positions.positions import position
from astro_positions.time_utils import interval_seconds
from astro_positions.utc_time import UTCTime

logger = logging.getLogger(__name__)

POSITIONS_HEADER = (
    'PLANET    R.ASCENSION   DECLINATION  DIST (AU)* ZODIAC ZODIAC SIGN',
    '=======   ===========  ============= ========== ====== ===========',
)

EPHEMERIS_HEADER = ('year mo dy hr mi sc', 'R.ASCENSION', ' DECLINATION', f'{"DIST":>12}', 'ZODIAC')


def _join_fields(fields: Iterable[str]) -> str:
    """One blank between fields; trailing blanks removed."""
    return ' '.join(fields).rstrip()


def format_position_row(body: Body, instant: UTCTime) -> str:
    """One table row: name, RA, declination, distance, zodiac position and sign."""
    coords = position(body, instant)
    ra = coords.right_ascension
    return (
        f'{body.value:<8}: {rasc_string(ra)}, {decl_string(coords.declination)}, '
        f'{coords.distance:10.7f} {rasc_to_zodiac(ra)} {zodiac_sign(ra)}'
    )


def write_positions(
    instant: UTCTime,
    output: TextIO,
    bodies: Iterable[Body | str] | None = None,
) -> None:
    """Write the position table for ``bodies`` (default: every visible body).

    Parameters:
        instant: Time of the positions.
        output: Text stream.
        bodies: Bodies or names in the order to list them.

    Raises:
        ValueError: If a body name is unknown.
    """
    selected = [parse_body(b) for b in bodies] if bodies else list(VISIBLE_BODIES)
    output.write(f'Planetary positions for {instant.time_string()}\n\n')
    for line in POSITIONS_HEADER:
        output.write(line + '\n')
    for body in selected:
        output.write(format_position_row(body, instant) + '\n')
    if any(get_body_spec(b).distance_unit == DISTANCE_EARTH_RADII for b in selected):
        output.write('\n* Moon distance is in Earth radii.\n')


def ephemeris_times(
    start: UTCTime,
    stop: UTCTime,
    interval: float = DEFAULT_INTERVAL,
    time_unit: str = 'hour',
) -> list[UTCTime]:
    """Instants from ``start`` to ``stop`` (inclusive when it falls on a step).

    Raises:
        ValueError: If the range holds fewer than 2 steps or more than 100000.
    """
    dsec = interval_seconds(interval, time_unit)
    ntimes = int((stop - start) / dsec) + 1
    if ntimes < 2:
        raise ValueError('Time range too short or interval too large')
    if ntimes > MAX_EPHEMERIS_STEPS:
        raise ValueError(f'Number of time steps exceeds limit of {MAX_EPHEMERIS_STEPS}')
    return [UTCTime.from_timestamp(start.timestamp + i * dsec) for i in range(ntimes)]


def generate_ephemeris(
    body: Body | str,
    start: UTCTime,
    stop: UTCTime,
    output: TextIO,
    interval: float = DEFAULT_INTERVAL,
    time_unit: str = 'hour',
) -> int:
    """Write one row per time step for ``body``.

    Returns:
        Number of rows written (header excluded).

    Raises:
        ValueError: Unknown body, bad time unit, or too few/many steps.
    """
    resolved = parse_body(body)
    times = ephemeris_times(start, stop, interval, time_unit)
    logger.info('Ephemeris for %s: %d steps from %s', resolved.value, len(times), start)

    output.write(_join_fields(EPHEMERIS_HEADER) + '\n')
    for instant in times:
        coords = position(resolved, instant)
        c = instant.civil()
        fields = (
            f'{c.year:4d}{c.month:3d}{c.day:3d}{c.hour:3d}{c.minute:3d}{c.second:3d}',
            rasc_string(coords.right_ascension),
            decl_string(coords.declination),
            f'{coords.distance:12.7f}',
            rasc_to_zodiac(coords.right_ascension),
        )
        output.write(_join_fields(fields) + '\n')
    return len(times)
