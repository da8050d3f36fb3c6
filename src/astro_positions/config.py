"""Configuration: search windows, iteration caps and leap-second file from environment."""

from __future__ import annotations

import logging
import os

from astro_positions.constants import (
    DEFAULT_FALLBACK_HOURS,
    DEFAULT_KEPLER_MAX_ITER,
    DEFAULT_WIDE_FALLBACK_HOURS,
)

logger = logging.getLogger(__name__)


def _positive_int_from_env(name: str, default: int) -> int:
    """Return a positive integer from environment variable ``name`` or ``default``.

    Unparseable or non-positive values are logged and replaced by the default.
    """
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning('Ignoring %s=%r (not an integer); using %d', name, raw, default)
        return default
    if value <= 0:
        logger.warning('Ignoring %s=%r (must be positive); using %d', name, raw, default)
        return default
    return value


def get_fallback_hours() -> int:
    """Return the per-minute DST search window in hours on each side of the request.

    Returns:
        ASTRO_POSITIONS_FALLBACK_HOURS env var or 2.
    """
    return _positive_int_from_env('ASTRO_POSITIONS_FALLBACK_HOURS', DEFAULT_FALLBACK_HOURS)


def get_wide_fallback_hours() -> int:
    """Return the degenerate (last resort) search window in hours on each side.

    Returns:
        ASTRO_POSITIONS_WIDE_FALLBACK_HOURS env var or 24.
    """
    return _positive_int_from_env(
        'ASTRO_POSITIONS_WIDE_FALLBACK_HOURS', DEFAULT_WIDE_FALLBACK_HOURS
    )


def get_kepler_max_iterations() -> int:
    """Return the Newton-Raphson iteration cap for Kepler's equation.

    Returns:
        ASTRO_POSITIONS_KEPLER_MAX_ITER env var or 100.
    """
    return _positive_int_from_env('ASTRO_POSITIONS_KEPLER_MAX_ITER', DEFAULT_KEPLER_MAX_ITER)


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian, if configured.

    Returns:
        JULIAN_LEAPSECS env var, or None to use the LSK bundled with rms-julian.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None
