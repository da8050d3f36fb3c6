"""Date/time string parsing (rms-julian) and time step conversion."""

from __future__ import annotations

import logging
import re

import julian

from astro_positions.config import get_leapsecs_path
from astro_positions.constants import (
    DEFAULT_MIN_INTERVAL_SECONDS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from astro_positions.utc_time import (
    CivilDateTime,
    UTCTime,
    civil_year,
    resolve_utc_timestamp,
)

logger = logging.getLogger(__name__)

_SECONDS_PER_UNIT = {
    'sec': 1,
    'min': SECONDS_PER_MINUTE,
    'hour': SECONDS_PER_HOUR,
    'day': SECONDS_PER_DAY,
}

_YEAR_HMS = re.compile(r'(\d{4})\s+(\d{1,2}:\d{2}:\d{2})')

_leapsecs_loaded = False


def _load_leapsecs(path: str | None) -> None:
    if path is not None:
        try:
            julian.load_lsk(path)
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info(
                'Cannot load leap seconds from %s (%s); using the bundled kernel', path, e
            )
    julian.load_lsk()


def _ensure_leapsecs() -> None:
    """Select the SPICE UT model and load a leap-second kernel, once per process.

    The kernel named by JULIAN_LEAPSECS is used when set; if it cannot be
    read, the kernel bundled with rms-julian is loaded instead.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    _load_leapsecs(get_leapsecs_path())
    _leapsecs_loaded = True


def _candidate_strings(string: str) -> list[str]:
    """The string itself, then rewrites of forms rms-julian does not read."""
    stripped = string.strip()
    candidates = [string]
    if stripped[-1:] in ('Z', 'z'):
        candidates.append(stripped[:-1])
    match = _YEAR_HMS.fullmatch(stripped)
    if match is not None:
        candidates.append('{}-01-01 {}'.format(*match.groups()))
    return candidates


def parse_datetime(string: str) -> CivilDateTime | None:
    """Parse a free-form UTC date/time string.

    Parameters:
        string: Date/time in any format rms-julian accepts ("2013-06-04 01:15",
            "June 4, 2013 1:15", "2013-155T01:15:00", ...). A trailing "Z" is
            allowed, and "YYYY HH:MM:SS" means January 1st of that year.

    Returns:
        The civil date/time, truncated to whole seconds; None on parse failure.
    """
    _ensure_leapsecs()
    for candidate in _candidate_strings(string):
        try:
            day, sec = julian.day_sec_from_string(candidate)[:2]
        except (ValueError, TypeError, LookupError, OSError):
            continue
        # A leap second (23:59:60) folds onto 23:59:59.
        y, m, d = julian.ymd_from_day(int(day))
        h, mi, s = julian.hms_from_sec(min(float(sec), SECONDS_PER_DAY - 1))
        return CivilDateTime(civil_year(int(y)), int(m), int(d), int(h), int(mi), int(s))
    logger.debug('Unparseable date/time %r', string)
    return None


def parse_utc_time(string: str) -> UTCTime:
    """Parse a date/time string and resolve it to a ``UTCTime``.

    Raises:
        ValueError: If the string cannot be parsed (InvalidDate is a ValueError too).
        TimeResolutionError: If the parsed time cannot be resolved.
    """
    civil = parse_datetime(string)
    if civil is None:
        raise ValueError(f'Invalid date/time {string!r}')
    return resolve_utc_timestamp(*civil.as_tuple())


def interval_seconds(
    interval: float,
    time_unit: str,
    *,
    min_seconds: float = DEFAULT_MIN_INTERVAL_SECONDS,
) -> float:
    """Length of one time step in seconds.

    Parameters:
        interval: Step size in ``time_unit``; the sign is ignored.
        time_unit: 'sec', 'min', 'hour' or 'day', or a longer word starting
            with one of them ('seconds', 'minutes', ...), any case.
        min_seconds: Smallest step returned.

    Raises:
        ValueError: If ``time_unit`` is not recognized.
    """
    unit = time_unit.strip().lower()
    key = next((k for k in _SECONDS_PER_UNIT if unit.startswith(k)), None)
    if key is None:
        raise ValueError(f'Invalid time_unit {time_unit!r}; expected one of sec, min, hour, day')
    return max(float(abs(interval) * _SECONDS_PER_UNIT[key]), min_seconds)
