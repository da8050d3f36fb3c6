"""Civil calendar arithmetic and UTC timestamp resolution.

The host calendar primitive (``time.mktime``) interprets a broken-down time
only as *local* time. ``get_utc_timestamp`` turns a UTC civil time into a Unix
timestamp by measuring the local UTC offset with that primitive, then checks
the answer with ``time.gmtime``. Near Daylight Saving transitions the local
reading can be ambiguous or impossible, so the request is retried from nearby
seeds (one hour either side, then minute by minute) until a candidate decodes
back to exactly the requested time.

Civil years are signed with no year zero (1 BC is year -1). Leap years and
the host primitives both use the proleptic astronomical year (1 BC is 0).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from dataclasses import dataclass, replace

from astro_positions import config
from astro_positions.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_JULIAN_CENTURY,
    EPOCH_J2000,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_J2000,
    UNIX_EPOCH_LUNAR,
)
from astro_positions.errors import InvalidDate, TimeResolutionError

logger = logging.getLogger(__name__)

_HOST_ERRORS = (OverflowError, OSError, ValueError)


# ---------------------------------------------------------------------------
# Calendar rules
# ---------------------------------------------------------------------------


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def astronomical_year(year: int) -> int:
    """Civil year (no zero, 1 BC is -1) -> astronomical year (1 BC is 0)."""
    return year + 1 if year < 0 else year


def civil_year(year: int) -> int:
    """Astronomical year -> civil year (no zero)."""
    return year - 1 if year <= 0 else year


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` (1-12) of civil ``year``.

    The leap rule is applied to the astronomical year, as the host calendar
    does, so 1 BC, 5 BC, 9 BC, ... have a February 29th.
    """
    if month == 2 and is_leap_year(astronomical_year(year)):
        return 29
    return DAYS_IN_MONTH[month - 1]


def validate_date(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> bool:
    """Check a civil UTC date/time against the calendar rules.

    Parameters:
        year: Signed year, never 0.
        month: 1-12.
        day: 1 to the length of the month (see ``days_in_month``).
        hour: 0-23.
        minute: 0-59.
        second: 0-59.

    Returns:
        True when every field is valid.

    Raises:
        InvalidDate: Naming the first offending field and its value.
    """
    if year == 0:
        raise InvalidDate('year', year, 'Invalid year: 0 (there is no year zero)')
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidDate('month', month, f'Invalid month: {month} (expected 1-12)')
    month_length = days_in_month(month, year)
    if not 1 <= day <= month_length:
        raise InvalidDate(
            'day', day, f'Invalid day: {day} (month {month} of {year} has {month_length} days)'
        )
    if not 0 <= hour < HOURS_PER_DAY:
        raise InvalidDate('hour', hour, f'Invalid hour: {hour} (expected 0-23)')
    if not 0 <= minute < MINUTES_PER_HOUR:
        raise InvalidDate('minute', minute, f'Invalid minute: {minute} (expected 0-59)')
    if not 0 <= second < SECONDS_PER_MINUTE:
        raise InvalidDate('second', second, f'Invalid second: {second} (expected 0-59)')
    return True


def _next_year(year: int) -> int:
    return 1 if year == -1 else year + 1


def _previous_year(year: int) -> int:
    return -1 if year == 1 else year - 1


# ---------------------------------------------------------------------------
# Civil date/time value and its arithmetic
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CivilDateTime:
    """Calendar date and time of day; month is 1-based, year has no zero.

    Arithmetic methods return new values and never modify ``self``.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        """Return (year, month, day, hour, minute, second)."""
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def validate(self) -> bool:
        """Validate the fields (see ``validate_date``)."""
        return validate_date(*self.as_tuple())

    def increment_day(self, quantity: int = 1) -> CivilDateTime:
        return tm_increment_day(self, quantity)

    def increment_hour(self, quantity: int = 1) -> CivilDateTime:
        return tm_increment_hour(self, quantity)

    def increment_minute(self, quantity: int = 1) -> CivilDateTime:
        return tm_increment_minute(self, quantity)

    def increment_second(self, quantity: int = 1) -> CivilDateTime:
        return tm_increment_second(self, quantity)

    def decrement_day(self, quantity: int = 1) -> CivilDateTime:
        return tm_decrement_day(self, quantity)

    def decrement_hour(self, quantity: int = 1) -> CivilDateTime:
        return tm_decrement_hour(self, quantity)

    def decrement_minute(self, quantity: int = 1) -> CivilDateTime:
        return tm_decrement_minute(self, quantity)

    def decrement_second(self, quantity: int = 1) -> CivilDateTime:
        return tm_decrement_second(self, quantity)

    def __str__(self) -> str:
        return (
            f'{self.year:04d}-{self.month:02d}-{self.day:02d} '
            f'{self.hour:02d}:{self.minute:02d}:{self.second:02d}'
        )


def _add_with_carry(value: int, quantity: int, base: int) -> tuple[int, int]:
    """Add non-negative ``quantity`` to ``value`` (0 <= value < base); return (value, carry)."""
    carry, rest = divmod(quantity, base)
    value += rest
    if value >= base:
        value -= base
        carry += 1
    return value, carry


def _subtract_with_borrow(value: int, quantity: int, base: int) -> tuple[int, int]:
    """Subtract non-negative ``quantity`` from ``value``; return (value, borrow)."""
    borrow, rest = divmod(quantity, base)
    value -= rest
    if value < 0:
        value += base
        borrow += 1
    return value, borrow


def tm_increment_day(dt: CivilDateTime, quantity: int = 1) -> CivilDateTime:
    """Add ``quantity`` days, rolling over months and years."""
    if quantity < 0:
        return tm_decrement_day(dt, -quantity)
    year, month, day = dt.year, dt.month, dt.day
    remaining = quantity
    while remaining > 0:
        left_in_month = days_in_month(month, year) - day
        if remaining <= left_in_month:
            day += remaining
            break
        remaining -= left_in_month + 1
        day = 1
        if month == MONTHS_PER_YEAR:
            month = 1
            year = _next_year(year)
        else:
            month += 1
    return replace(dt, year=year, month=month, day=day)


def tm_decrement_day(dt: CivilDateTime, quantity: int = 1) -> CivilDateTime:
    """Subtract ``quantity`` days, rolling back months and years."""
    if quantity < 0:
        return tm_increment_day(dt, -quantity)
    year, month, day = dt.year, dt.month, dt.day
    remaining = quantity
    while remaining > 0:
        if remaining < day:
            day -= remaining
            break
        remaining -= day
        if month == 1:
            month = MONTHS_PER_YEAR
            year = _previous_year(year)
        else:
            month -= 1
        day = days_in_month(month, year)
    return replace(dt, year=year, month=month, day=day)


def tm_increment_hour(dt: CivilDateTime, quantity: int = 1) -> CivilDateTime:
    """Add ``quantity`` hours, carrying into days."""
    if quantity < 0:
        return tm_decrement_hour(dt, -quantity)
    hour, days = _add_with_carry(dt.hour, quantity, HOURS_PER_DAY)
    return tm_increment_day(replace(dt, hour=hour), days)


def tm_decrement_hour(dt: CivilDateTime, quantity: int = 1) -> CivilDateTime:
    """Subtract ``quantity`` hours, borrowing from days."""
    if quantity < 0:
        return tm_increment_hour(dt, -quantity)
    hour, days = _subtract_with_borrow(dt.hour, quantity, HOURS_PER_DAY)
    return tm_decrement_day(replace(dt, hour=hour), days)


def tm_increment_minute(dt: CivilDateTime, quantity: int = 1) -> CivilDateTime:
    """Add ``quantity`` minutes, carrying into hours."""
    if quantity < 0:
        return tm_decrement_minute(dt, -quantity)
    minute, hours = _add_with_carry(dt.minute, quantity, MINUTES_PER_HOUR)
    return tm_increment_hour(replace(dt, minute=minute), hours)


def tm_decrement_minute(dt: CivilDateTime, quantity: int = 1) -> CivilDateTime:
    """Subtract ``quantity`` minutes, borrowing from hours."""
    if quantity < 0:
        return tm_increment_minute(dt, -quantity)
    minute, hours = _subtract_with_borrow(dt.minute, quantity, MINUTES_PER_HOUR)
    return tm_decrement_hour(replace(dt, minute=minute), hours)


def tm_increment_second(dt: CivilDateTime, quantity: int = 1) -> CivilDateTime:
    """Add ``quantity`` seconds, carrying into minutes."""
    if quantity < 0:
        return tm_decrement_second(dt, -quantity)
    second, minutes = _add_with_carry(dt.second, quantity, SECONDS_PER_MINUTE)
    return tm_increment_minute(replace(dt, second=second), minutes)


def tm_decrement_second(dt: CivilDateTime, quantity: int = 1) -> CivilDateTime:
    """Subtract ``quantity`` seconds, borrowing from minutes."""
    if quantity < 0:
        return tm_increment_second(dt, -quantity)
    second, minutes = _subtract_with_borrow(dt.second, quantity, SECONDS_PER_MINUTE)
    return tm_decrement_minute(replace(dt, second=second), minutes)


def tm_compare(first: CivilDateTime, second: CivilDateTime) -> int:
    """Compare two civil times field by field; return -1, 0 or 1."""
    a = first.as_tuple()
    b = second.as_tuple()
    return (a > b) - (a < b)


def tm_adj_day_secs_diff(first: CivilDateTime, second: CivilDateTime) -> int:
    """Seconds from ``first`` to ``second``, assuming they are less than a day apart.

    Only the time of day is compared; the date fields decide which way the
    result wraps. Comparing 10:00 on one day with 14:00 on the next gives
    4 hours, not 28. Positive when ``second`` is later than ``first``.
    """
    comparison = tm_compare(first, second)
    if comparison == 0:
        return 0
    difference = (
        (second.hour - first.hour) * SECONDS_PER_HOUR
        + (second.minute - first.minute) * SECONDS_PER_MINUTE
        + (second.second - first.second)
    )
    if comparison == 1 and difference > 0:
        difference -= SECONDS_PER_DAY
    elif comparison == -1 and difference < 0:
        difference += SECONDS_PER_DAY
    return difference


# ---------------------------------------------------------------------------
# Host calendar primitive
# ---------------------------------------------------------------------------


def _host_tuple(dt: CivilDateTime) -> tuple[int, ...]:
    """9-tuple for time.mktime with DST left for the library to decide."""
    year = astronomical_year(dt.year)
    return (year, dt.month, dt.day, dt.hour, dt.minute, dt.second, 0, 0, -1)


def _civil_from_struct(st: time.struct_time) -> CivilDateTime:
    return CivilDateTime(
        civil_year(st.tm_year), st.tm_mon, st.tm_mday, st.tm_hour, st.tm_min, st.tm_sec
    )


def utc_civil_from_timestamp(timestamp: int) -> CivilDateTime:
    """Decode a Unix timestamp into its UTC civil date/time.

    Raises:
        TimeResolutionError: If the host cannot represent the timestamp.
    """
    try:
        return _civil_from_struct(time.gmtime(timestamp))
    except _HOST_ERRORS as e:
        raise TimeResolutionError(f'Cannot decode timestamp {timestamp}: {e}') from e


def get_fuzzy_utc_timestamp(local: CivilDateTime) -> int:
    """Timestamp for ``local`` read as UTC, found through local-time conversion.

    1. Convert ``local`` as if it were local time (DST unspecified): T1.
    2. Decode T1 as UTC and convert that as local time again: T2.
    3. T1 + (T1 - T2) is the UTC reading of ``local``.

    If ``local`` does not exist as a local time (clocks went forward over it),
    mktime() moves it; the size of that move is taken back out of the offset.
    The result is usually right but must be verified by the caller.

    Raises:
        TimeResolutionError: If the host calendar primitive fails.
    """
    try:
        l_time = time.mktime(_host_tuple(local))
        normalised = _civil_from_struct(time.localtime(l_time))
        utc_struct = time.gmtime(l_time)
        utc_wrong_way = time.mktime(tuple(utc_struct[:8]) + (-1,))
    except _HOST_ERRORS as e:
        raise TimeResolutionError(f'Host calendar conversion failed for {local}: {e}') from e

    utc_offset = l_time - utc_wrong_way
    if tm_compare(local, normalised) != 0:
        utc_offset -= tm_adj_day_secs_diff(local, normalised)
    return int(l_time + utc_offset)


def check_utc_timestamp(check_time: int, requested: CivilDateTime) -> tuple[bool, int]:
    """Check that ``check_time`` decodes (as UTC) to ``requested``.

    Returns:
        (agrees, secs_diff) where secs_diff is how many seconds the decoded
        time is ahead of the requested one (0 when they agree).
    """
    decoded = utc_civil_from_timestamp(check_time)
    if decoded == requested:
        return True, 0
    return False, tm_adj_day_secs_diff(requested, decoded)


def _minute_offsets(hours: int) -> Iterator[int]:
    """Seed offsets in minutes, nearest first: -1, 1, -2, 2, ..."""
    for k in range(1, hours * MINUTES_PER_HOUR + 1):
        yield -k
        yield k


def _seeded_candidate(requested: CivilDateTime, offset_minutes: int) -> int:
    """Resolve from a seed ``offset_minutes`` away, then shift back by the same amount."""
    seed = tm_increment_minute(requested, offset_minutes)
    return get_fuzzy_utc_timestamp(seed) - offset_minutes * SECONDS_PER_MINUTE


def _search(requested: CivilDateTime, offsets: Iterator[int] | tuple[int, ...]) -> int | None:
    for offset in offsets:
        candidate = _seeded_candidate(requested, offset)
        if check_utc_timestamp(candidate, requested)[0]:
            logger.debug('Resolved %s from seed offset %+d min', requested, offset)
            return candidate
    return None


def get_utc_timestamp(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Unix timestamp of a civil UTC date/time.

    Raises:
        InvalidDate: If the date/time is not valid.
        TimeResolutionError: If no candidate decodes back to the request.
    """
    validate_date(year, month, day, hour, minute, second)
    requested = CivilDateTime(year, month, day, hour, minute, second)

    utc_ts = get_fuzzy_utc_timestamp(requested)
    agrees, secs_diff = check_utc_timestamp(utc_ts, requested)
    if agrees:
        return utc_ts

    logger.debug('Timestamp %d for %s is off by %d s; adjusting', utc_ts, requested, secs_diff)
    utc_ts -= secs_diff
    if check_utc_timestamp(utc_ts, requested)[0]:
        return utc_ts

    found = _search(requested, (-MINUTES_PER_HOUR, MINUTES_PER_HOUR))
    if found is not None:
        return found

    fallback_hours = config.get_fallback_hours()
    logger.info('Searching +/-%d h minute by minute to resolve %s', fallback_hours, requested)
    found = _search(requested, _minute_offsets(fallback_hours))
    if found is not None:
        return found

    wide_hours = config.get_wide_fallback_hours()
    if wide_hours > fallback_hours:
        logger.warning('Widening timestamp search to +/-%d h for %s', wide_hours, requested)
        found = _search(requested, _minute_offsets(wide_hours))
        if found is not None:
            return found

    logger.error('Could not resolve a UTC timestamp for %s', requested)
    raise TimeResolutionError(f'Could not resolve a UTC timestamp for {requested}')


# ---------------------------------------------------------------------------
# Timestamp value
# ---------------------------------------------------------------------------


def julian_date(timestamp: int) -> float:
    """Julian Date of a Unix timestamp."""
    return EPOCH_J2000 + (timestamp - UNIX_EPOCH_J2000) / SECONDS_PER_DAY


def julian_centuries_since_j2000(timestamp: int) -> float:
    """Julian centuries elapsed since J2000 (2000-01-01 12:00 UTC)."""
    return (julian_date(timestamp) - EPOCH_J2000) / DAYS_PER_JULIAN_CENTURY


def days_since_lunar_epoch(timestamp: int) -> float:
    """Days elapsed since 2000 January 0.0 (1999-12-31 00:00 UTC)."""
    return (timestamp - UNIX_EPOCH_LUNAR) / SECONDS_PER_DAY


@dataclass(frozen=True, order=True)
class UTCTime:
    """An instant, as whole seconds since the Unix epoch (leap seconds ignored).

    Ordered by instant; subtracting two values gives elapsed seconds.
    """

    timestamp: int

    @classmethod
    def now(cls) -> UTCTime:
        """The current time from the host clock."""
        return cls(int(time.time()))

    @classmethod
    def from_timestamp(cls, timestamp: int | float) -> UTCTime:
        """Wrap a Unix timestamp, truncating fractional seconds."""
        return cls(int(timestamp))

    @classmethod
    def from_civil(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> UTCTime:
        """Resolve a civil UTC date/time (see ``get_utc_timestamp``)."""
        return cls(get_utc_timestamp(year, month, day, hour, minute, second))

    def civil(self) -> CivilDateTime:
        """UTC civil date/time of this instant."""
        return utc_civil_from_timestamp(self.timestamp)

    def julian_date(self) -> float:
        return julian_date(self.timestamp)

    def time_string(self) -> str:
        """E.g. 'Tuesday June 04, 2013 01:15:00 UTC' (host locale names)."""
        return time.strftime('%A %B %d, %Y %H:%M:%S UTC', time.gmtime(self.timestamp))

    def time_string_inet(self) -> str:
        """RFC 3339 form, e.g. '2013-06-04T01:15:00Z'."""
        c = self.civil()
        return (
            f'{c.year:04d}-{c.month:02d}-{c.day:02d}'
            f'T{c.hour:02d}:{c.minute:02d}:{c.second:02d}Z'
        )

    def __sub__(self, other: object) -> float:
        if not isinstance(other, UTCTime):
            return NotImplemented
        return float(self.timestamp - other.timestamp)

    def __str__(self) -> str:
        return self.time_string_inet()


def resolve_utc_timestamp(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> UTCTime:
    """Resolve a civil UTC date/time to a ``UTCTime``.

    Raises:
        InvalidDate: If the date/time is not valid.
        TimeResolutionError: If resolution fails (logged at ERROR).
    """
    return UTCTime.from_civil(year, month, day, hour, minute, second)


def current_timestamp() -> UTCTime:
    """The current time, to the second."""
    return UTCTime.now()
