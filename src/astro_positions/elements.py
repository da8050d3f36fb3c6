"""Orbital elements at an instant, extrapolated linearly from catalog epochs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from astro_positions.bodies.base import TIME_UNIT_DAY, BodySpec
from astro_positions.utc_time import (
    UTCTime,
    days_since_lunar_epoch,
    julian_centuries_since_j2000,
)


@dataclass(frozen=True)
class OrbitalElements:
    """Keplerian elements at one instant.

    Angles are in radians. ``man`` (mean anomaly) and ``arp`` (argument of
    perihelion) are derived from the others and cannot be passed in.

    Attributes:
        sma: Semi-major axis (AU, or Earth radii for the Moon).
        ecc: Eccentricity.
        inc: Inclination.
        ml: Mean longitude.
        lp: Longitude of perihelion.
        lan: Longitude of the ascending node.
        man: Mean anomaly, ``ml - lp``.
        arp: Argument of perihelion, ``lp - lan``.
    """

    sma: float
    ecc: float
    inc: float
    ml: float
    lp: float
    lan: float
    man: float = field(init=False)
    arp: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'man', self.ml - self.lp)
        object.__setattr__(self, 'arp', self.lp - self.lan)


def elapsed_units(spec: BodySpec, instant: UTCTime) -> float:
    """Time since the body's epoch in its rate unit (Julian centuries or days)."""
    if spec.time_unit == TIME_UNIT_DAY:
        return days_since_lunar_epoch(instant.timestamp)
    return julian_centuries_since_j2000(instant.timestamp)


def elements_at(spec: BodySpec, instant: UTCTime) -> OrbitalElements:
    """Extrapolate ``spec``'s elements to ``instant``: reference + rate * elapsed.

    Accuracy degrades outside roughly 1800-2050 for the planets.
    """
    t = elapsed_units(spec, instant)
    ref = spec.reference
    rate = spec.rates
    return OrbitalElements(
        sma=ref.sma + rate.sma * t,
        ecc=ref.ecc + rate.ecc * t,
        inc=math.radians(ref.inc + rate.inc * t),
        ml=math.radians(ref.ml + rate.ml * t),
        lp=math.radians(ref.lp + rate.lp * t),
        lan=math.radians(ref.lan + rate.lan * t),
    )
