"""Moon and the Sun proxy used by the lunar theory.

Low-precision elements at 2000 January 0.0 (1999-12-31 00:00 UTC) with rates
per day. The Sun proxy is only read for its mean longitude and mean anomaly.
"""

from __future__ import annotations

from astro_positions.bodies.base import (
    DISTANCE_EARTH_RADII,
    TIME_UNIT_DAY,
    Body,
    BodySpec,
    ReferenceElements,
)

MOON = BodySpec(
    body=Body.MOON,
    reference=ReferenceElements(60.2666, 0.0549, 5.1454, 198.5516, 83.1862, 125.1228),
    rates=ReferenceElements(0.0, 0.0, 0.0, 13.1763964649, 0.111403514, -0.0529538083),
    time_unit=TIME_UNIT_DAY,
    lunar_theory=True,
    distance_unit=DISTANCE_EARTH_RADII,
)

SUN_FOR_MOON = BodySpec(
    body=Body.SUN_FOR_MOON,
    reference=ReferenceElements(1.0, 0.016709, 0.0, 278.9874, -77.0596, 0.0),
    rates=ReferenceElements(0.0, -0.000000001151, 0.0, 0.98564735200, 0.00004709350, 0.0),
    time_unit=TIME_UNIT_DAY,
    no_heliocentric=True,
    no_geocentric=True,
)
