"""Coordinate transforms: orbital plane -> heliocentric ecliptic -> equatorial -> spherical.

Pure functions of plain floats; frames are implied by the producing stage.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from astro_positions.constants import OBLIQUITY_DEG
from astro_positions.elements import OrbitalElements
from astro_positions.kepler import solve_kepler

_OBLIQUITY = math.radians(OBLIQUITY_DEG)


@dataclass(frozen=True)
class RectCoords:
    """Rectangular coordinates (AU, or Earth radii for the Moon)."""

    x: float
    y: float
    z: float

    def __sub__(self, other: RectCoords) -> RectCoords:
        return RectCoords(self.x - other.x, self.y - other.y, self.z - other.z)


ORIGIN = RectCoords(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class SphCoords:
    """Spherical coordinates.

    Attributes:
        right_ascension: Degrees in (-180, 180]; use normalize_degrees for [0, 360).
        declination: Degrees in [-90, 90].
        distance: Same unit as the rectangular input.
    """

    right_ascension: float
    declination: float
    distance: float


def helio_orb_coords(oes: OrbitalElements) -> RectCoords:
    """Position in the orbital plane, x toward perihelion.

    ``z`` holds the orbital radius rather than an out-of-plane coordinate;
    the lunar theory reads the radius from it.
    """
    e_anom = solve_kepler(oes.man, oes.ecc)
    x = oes.sma * (math.cos(e_anom) - oes.ecc)
    y = oes.sma * math.sqrt(1.0 - oes.ecc**2) * math.sin(e_anom)
    return RectCoords(x, y, math.hypot(x, y))


def helio_ecl_coords(oes: OrbitalElements) -> RectCoords:
    """Heliocentric ecliptic coordinates (rotations by arp, inc and lan)."""
    hoc = helio_orb_coords(oes)
    cos_arp, sin_arp = math.cos(oes.arp), math.sin(oes.arp)
    cos_lan, sin_lan = math.cos(oes.lan), math.sin(oes.lan)
    cos_inc, sin_inc = math.cos(oes.inc), math.sin(oes.inc)
    x = (cos_arp * cos_lan - sin_arp * sin_lan * cos_inc) * hoc.x + (
        -sin_arp * cos_lan - cos_arp * sin_lan * cos_inc
    ) * hoc.y
    y = (cos_arp * sin_lan + sin_arp * cos_lan * cos_inc) * hoc.x + (
        -sin_arp * sin_lan + cos_arp * cos_lan * cos_inc
    ) * hoc.y
    z = sin_arp * sin_inc * hoc.x + cos_arp * sin_inc * hoc.y
    return RectCoords(x, y, z)


def ecliptic_to_equatorial(rect: RectCoords) -> RectCoords:
    """Rotate ecliptic coordinates about x by the obliquity of the ecliptic."""
    cos_obl, sin_obl = math.cos(_OBLIQUITY), math.sin(_OBLIQUITY)
    return RectCoords(
        rect.x,
        rect.y * cos_obl - rect.z * sin_obl,
        rect.y * sin_obl + rect.z * cos_obl,
    )


def rec_to_sph(rect: RectCoords) -> SphCoords:
    """Rectangular to spherical; RA and declination in degrees."""
    rho = math.hypot(rect.x, rect.y)
    return SphCoords(
        right_ascension=math.degrees(math.atan2(rect.y, rect.x)),
        declination=math.degrees(math.atan2(rect.z, rho)),
        distance=math.sqrt(rect.x**2 + rect.y**2 + rect.z**2),
    )
