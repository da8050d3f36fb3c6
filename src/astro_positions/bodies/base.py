"""Body identifiers and catalog descriptors."""

from __future__ import annotations

import enum
from dataclasses import dataclass

TIME_UNIT_CENTURY = 'century'
TIME_UNIT_DAY = 'day'

DISTANCE_AU = 'AU'
DISTANCE_EARTH_RADII = 'earth radii'


class Body(enum.Enum):
    """Bodies known to the catalog. SUN_FOR_MOON is internal to the lunar theory."""

    SUN = 'Sun'
    MERCURY = 'Mercury'
    VENUS = 'Venus'
    EARTH = 'Earth'
    MARS = 'Mars'
    JUPITER = 'Jupiter'
    SATURN = 'Saturn'
    URANUS = 'Uranus'
    NEPTUNE = 'Neptune'
    PLUTO = 'Pluto'
    MOON = 'Moon'
    SUN_FOR_MOON = 'Sun (lunar theory)'


@dataclass(frozen=True)
class ReferenceElements:
    """Six primary orbital elements: angles in degrees, sma/ecc in native units.

    Used both for values at the epoch and for their rates per time unit.
    """

    sma: float
    ecc: float
    inc: float
    ml: float
    lp: float
    lan: float


@dataclass(frozen=True)
class BodySpec:
    """Catalog entry: epoch elements, rates and how positions are derived.

    Attributes:
        body: Identifier.
        reference: Elements at the epoch (J2000, or 2000 January 0.0 for lunar bodies).
        rates: Element change per ``time_unit``.
        time_unit: 'century' (Julian centuries since J2000) or 'day' (days since
            2000 January 0.0).
        no_heliocentric: Body sits at the heliocentric origin (the Sun).
        no_geocentric: Body sits at the geocentric origin (the Earth).
        lunar_theory: Geocentric position comes from the lunar perturbation series.
        distance_unit: Unit of ``sma`` and of reported distances.
    """

    body: Body
    reference: ReferenceElements
    rates: ReferenceElements
    time_unit: str = TIME_UNIT_CENTURY
    no_heliocentric: bool = False
    no_geocentric: bool = False
    lunar_theory: bool = False
    distance_unit: str = DISTANCE_AU

    @property
    def name(self) -> str:
        return self.body.value
