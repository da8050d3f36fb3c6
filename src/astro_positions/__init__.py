"""Approximate geocentric positions of the Sun, Moon and planets.

This package provides:
- A civil calendar / UTC timestamp engine that resolves UTC date/times through
  the host's local-time primitives, robust to Daylight Saving transitions
- Orbital elements, Kepler's equation and coordinate transforms giving right
  ascension, declination and distance at arc-minute accuracy
- Angle formatting and zodiac lookup, text reports and a command-line tool

Free-form date/time strings are parsed with rms-julian.
"""

from astro_positions.angle_utils import (
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
from astro_positions.bodies import VISIBLE_BODIES, Body
from astro_positions.errors import (
    AstroPositionsError,
    ComputationError,
    InvalidDate,
    TimeResolutionError,
)
from astro_positions.positions import all_positions, position
from astro_positions.transforms import SphCoords
from astro_positions.utc_time import (
    CivilDateTime,
    UTCTime,
    current_timestamp,
    resolve_utc_timestamp,
)

__all__ = [
    'VISIBLE_BODIES',
    'AstroPositionsError',
    'Body',
    'CivilDateTime',
    'ComputationError',
    'InvalidDate',
    'SphCoords',
    'TimeResolutionError',
    'UTCTime',
    'all_positions',
    'current_timestamp',
    'decl_string',
    'deg_to_dms',
    'deg_to_hms',
    'get_zodiac_info',
    'normalize_degrees',
    'position',
    'rasc_string',
    'rasc_to_zodiac',
    'resolve_utc_timestamp',
    'zodiac_sign',
    'zodiac_sign_short',
]
