"""Geocentric ecliptic position of the Moon with the low-order perturbation series.

The Moon's catalog elements describe its orbit about the Earth, so the
"heliocentric" stages of the pipeline yield geocentric values here. The
largest periodic terms (evection, variation, yearly equation, ...) are then
added to longitude, latitude and distance.
"""

from __future__ import annotations

import math

from astro_positions.elements import OrbitalElements
from astro_positions.transforms import RectCoords, helio_ecl_coords, helio_orb_coords

# (coefficient in degrees, (Mm, Ms, D, F) multipliers)
# Mm: Moon mean anomaly, Ms: Sun mean anomaly, D: mean elongation, F: argument of latitude.
LONGITUDE_TERMS: tuple[tuple[float, tuple[int, int, int, int]], ...] = (
    (-1.274, (1, 0, -2, 0)),
    (0.658, (0, 0, 2, 0)),
    (-0.186, (0, 1, 0, 0)),
    (-0.059, (2, 0, -2, 0)),
    (-0.057, (1, 1, -2, 0)),
    (0.053, (1, 0, 2, 0)),
    (0.046, (0, -1, 2, 0)),
    (0.041, (1, -1, 0, 0)),
    (-0.035, (0, 0, 1, 0)),
    (-0.031, (1, 1, 0, 0)),
    (-0.015, (0, 0, -2, 2)),
    (0.011, (1, 0, -4, 0)),
)

LATITUDE_TERMS: tuple[tuple[float, tuple[int, int, int, int]], ...] = (
    (-0.173, (0, 0, -2, 1)),
    (-0.055, (1, 0, -2, -1)),
    (-0.046, (1, 0, -2, 1)),
    (0.033, (0, 0, 2, 1)),
    (0.017, (2, 0, 0, 1)),
)

# Earth radii; cosine terms.
RADIUS_TERMS: tuple[tuple[float, tuple[int, int, int, int]], ...] = (
    (-0.58, (1, 0, -2, 0)),
    (-0.46, (0, 0, 2, 0)),
)


def _argument(multipliers: tuple[int, int, int, int], fundamentals: tuple[float, ...]) -> float:
    return sum(k * angle for k, angle in zip(multipliers, fundamentals))


def perturbations(moon: OrbitalElements, sun: OrbitalElements) -> tuple[float, float, float]:
    """Corrections (longitude rad, latitude rad, distance Earth radii).

    Parameters:
        moon: Moon elements at the instant.
        sun: Sun-for-Moon elements at the same instant (mean longitude and anomaly).
    """
    mel = moon.ml - sun.ml
    arl = moon.ml - moon.lan
    fundamentals = (moon.man, sun.man, mel, arl)
    d_lon = sum(c * math.sin(_argument(k, fundamentals)) for c, k in LONGITUDE_TERMS)
    d_lat = sum(c * math.sin(_argument(k, fundamentals)) for c, k in LATITUDE_TERMS)
    d_rad = sum(c * math.cos(_argument(k, fundamentals)) for c, k in RADIUS_TERMS)
    return math.radians(d_lon), math.radians(d_lat), d_rad


def moon_geo_ecl_coords(moon: OrbitalElements, sun: OrbitalElements) -> RectCoords:
    """Geocentric ecliptic coordinates of the Moon in Earth radii."""
    ecl = helio_ecl_coords(moon)
    lon = math.atan2(ecl.y, ecl.x)
    lat = math.atan2(ecl.z, math.hypot(ecl.x, ecl.y))
    rhc = helio_orb_coords(moon).z

    d_lon, d_lat, d_rad = perturbations(moon, sun)
    lon += d_lon
    lat += d_lat
    rhc += d_rad

    return RectCoords(
        rhc * math.cos(lon) * math.cos(lat),
        rhc * math.sin(lon) * math.cos(lat),
        rhc * math.sin(lat),
    )
