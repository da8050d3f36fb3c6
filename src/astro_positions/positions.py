"""Apparent geocentric positions of catalog bodies at an instant."""

from __future__ import annotations

import logging
from functools import cached_property

from astro_positions.bodies import (
    EARTH,
    SUN_FOR_MOON,
    VISIBLE_BODIES,
    Body,
    BodySpec,
    get_body_spec,
    parse_body,
)
from astro_positions.elements import OrbitalElements, elements_at
from astro_positions.lunar import moon_geo_ecl_coords
from astro_positions.transforms import (
    ORIGIN,
    RectCoords,
    SphCoords,
    ecliptic_to_equatorial,
    helio_ecl_coords,
    helio_orb_coords,
    rec_to_sph,
)
from astro_positions.utc_time import UTCTime, current_timestamp

logger = logging.getLogger(__name__)


class CelestialBody:
    """One body at one instant; every coordinate stage is derived from the catalog entry.

    Override flags on the ``BodySpec`` replace the generic stages: the Sun sits
    at the heliocentric origin, the Earth at the geocentric origin, and the
    Moon's geocentric ecliptic position comes from the lunar theory.
    """

    def __init__(self, spec: BodySpec, instant: UTCTime) -> None:
        self.spec = spec
        self.instant = instant

    @property
    def name(self) -> str:
        return self.spec.name

    @cached_property
    def orbital_elements(self) -> OrbitalElements:
        return elements_at(self.spec, self.instant)

    def helio_orb_coords(self) -> RectCoords:
        if self.spec.no_heliocentric:
            return ORIGIN
        return helio_orb_coords(self.orbital_elements)

    def helio_ecl_coords(self) -> RectCoords:
        if self.spec.no_heliocentric:
            return ORIGIN
        return helio_ecl_coords(self.orbital_elements)

    def geo_ecl_coords(self) -> RectCoords:
        if self.spec.no_geocentric:
            return ORIGIN
        if self.spec.lunar_theory:
            sun = CelestialBody(SUN_FOR_MOON, self.instant)
            return moon_geo_ecl_coords(self.orbital_elements, sun.orbital_elements)
        earth = CelestialBody(EARTH, self.instant)
        return self.helio_ecl_coords() - earth.helio_ecl_coords()

    def geo_equ_coords(self) -> RectCoords:
        return ecliptic_to_equatorial(self.geo_ecl_coords())

    def sph_coords(self) -> SphCoords:
        return rec_to_sph(self.geo_equ_coords())

    def right_ascension(self) -> float:
        return self.sph_coords().right_ascension

    def declination(self) -> float:
        return self.sph_coords().declination

    def distance(self) -> float:
        return self.sph_coords().distance

    def __repr__(self) -> str:
        return f'CelestialBody({self.name!r}, {self.instant.time_string_inet()!r})'


def position(body: Body | str, timestamp: UTCTime | None = None) -> SphCoords:
    """Apparent geocentric position of a visible body.

    Parameters:
        body: Body or its name (case-insensitive).
        timestamp: Instant; None means now.

    Returns:
        RA/declination in degrees (RA not normalized) and distance in AU
        (Earth radii for the Moon).

    Raises:
        ValueError: If ``body`` is not one of the visible bodies.
        ComputationError: If Kepler's equation does not converge.
    """
    resolved = parse_body(body)
    instant = timestamp if timestamp is not None else current_timestamp()
    coords = CelestialBody(get_body_spec(resolved), instant).sph_coords()
    logger.debug('%s at %s: %s', resolved.value, instant, coords)
    return coords


def all_positions(timestamp: UTCTime | None = None) -> dict[Body, SphCoords]:
    """Positions of every visible body at one instant, in report order."""
    instant = timestamp if timestamp is not None else current_timestamp()
    return {body: position(body, instant) for body in VISIBLE_BODIES}
