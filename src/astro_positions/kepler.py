"""Kepler's equation, M = E - e sin E, solved by Newton-Raphson."""

from __future__ import annotations

import logging
import math

from astro_positions.config import get_kepler_max_iterations
from astro_positions.constants import KEPLER_TOLERANCE
from astro_positions.errors import ComputationError

logger = logging.getLogger(__name__)


def solve_kepler(m_anom: float, ecc: float, max_iterations: int | None = None) -> float:
    """Eccentric anomaly for a mean anomaly on an elliptical orbit.

    Starts from E = M and iterates until the residual |E - e sin E - M|
    measured before a step is at most 1e-6 radians.

    Parameters:
        m_anom: Mean anomaly (radians, any range).
        ecc: Eccentricity, 0 <= ecc < 1.
        max_iterations: Iteration cap; None reads ASTRO_POSITIONS_KEPLER_MAX_ITER
            (default 100).

    Returns:
        Eccentric anomaly in radians, in the same revolution as ``m_anom``.

    Raises:
        ComputationError: If ``ecc`` is outside [0, 1) or the cap is reached.
    """
    if not 0.0 <= ecc < 1.0:
        raise ComputationError(f'Eccentricity {ecc!r} outside [0, 1); orbit is not elliptical')
    if max_iterations is None:
        max_iterations = get_kepler_max_iterations()

    e_anom = m_anom
    for _ in range(max_iterations):
        diff = e_anom - ecc * math.sin(e_anom) - m_anom
        e_anom -= diff / (1.0 - ecc * math.cos(e_anom))
        if abs(diff) <= KEPLER_TOLERANCE:
            return e_anom

    logger.error(
        "Kepler's equation did not converge for M=%r, e=%r after %d iterations",
        m_anom,
        ecc,
        max_iterations,
    )
    raise ComputationError(
        f"Kepler's equation did not converge for M={m_anom!r}, e={ecc!r} "
        f'after {max_iterations} iterations'
    )
