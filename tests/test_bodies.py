"""Tests for the body catalog and orbital element extrapolation."""

from __future__ import annotations

import math

import pytest

from astro_positions.bodies import (
    EARTH,
    MARS,
    MOON,
    SUN,
    SUN_FOR_MOON,
    VISIBLE_BODIES,
    Body,
    get_body_spec,
    parse_body,
)
from astro_positions.elements import OrbitalElements, elapsed_units, elements_at
from astro_positions.utc_time import UTCTime


def test_parse_body_case_insensitive() -> None:
    """Body names parse regardless of case and surrounding blanks."""
    assert parse_body('mars') == Body.MARS
    assert parse_body('  MOON ') == Body.MOON
    assert parse_body(Body.PLUTO) == Body.PLUTO


def test_parse_body_lists_valid_names() -> None:
    """Unknown names raise ValueError listing the accepted bodies."""
    with pytest.raises(ValueError, match='Mercury'):
        parse_body('earth')


def test_catalog_flags() -> None:
    """Override flags select the degenerate cases."""
    assert SUN.no_heliocentric and not SUN.no_geocentric
    assert EARTH.no_geocentric and not EARTH.no_heliocentric
    assert MOON.lunar_theory and MOON.distance_unit == 'earth radii'
    assert SUN_FOR_MOON.no_heliocentric and SUN_FOR_MOON.no_geocentric
    assert not MARS.no_heliocentric and not MARS.no_geocentric and not MARS.lunar_theory


def test_visible_bodies() -> None:
    """Ten bodies are visible; Earth and the lunar Sun proxy are not."""
    assert len(VISIBLE_BODIES) == 10
    assert Body.EARTH not in VISIBLE_BODIES
    assert Body.SUN_FOR_MOON not in VISIBLE_BODIES
    for body in Body:
        assert get_body_spec(body).body is body


def test_derived_elements() -> None:
    """Mean anomaly and argument of perihelion derive from the other elements."""
    oes = OrbitalElements(sma=1.0, ecc=0.1, inc=0.1, ml=2.0, lp=0.5, lan=0.2)
    assert oes.man == pytest.approx(1.5)
    assert oes.arp == pytest.approx(0.3)
    with pytest.raises(TypeError):
        OrbitalElements(1.0, 0.1, 0.1, 2.0, 0.5, 0.2, 1.5)  # type: ignore[call-arg]


def test_elements_at_epoch_equal_reference() -> None:
    """At J2000 the planetary elements equal the catalog values."""
    oes = elements_at(MARS, UTCTime(946728000))
    assert oes.sma == MARS.reference.sma
    assert oes.ecc == MARS.reference.ecc
    assert oes.ml == pytest.approx(math.radians(MARS.reference.ml))
    assert oes.man == pytest.approx(oes.ml - oes.lp)
    assert oes.arp == pytest.approx(oes.lp - oes.lan)


def test_elements_linear_in_time() -> None:
    """One Julian century later every element moved by exactly its rate."""
    j2000 = UTCTime(946728000)
    later = UTCTime(946728000 + 36525 * 86400)
    assert elapsed_units(EARTH, later) == pytest.approx(1.0)
    oes0 = elements_at(EARTH, j2000)
    oes1 = elements_at(EARTH, later)
    assert oes1.sma - oes0.sma == pytest.approx(EARTH.rates.sma)
    assert math.degrees(oes1.ml - oes0.ml) == pytest.approx(EARTH.rates.ml)


def test_lunar_elements_use_days() -> None:
    """Lunar elements advance per day from 2000 January 0.0."""
    epoch = UTCTime(946598400)
    assert elapsed_units(MOON, epoch) == 0.0
    assert elapsed_units(MOON, UTCTime(946598400 + 86400)) == 1.0
    oes = elements_at(MOON, epoch)
    assert oes.sma == MOON.reference.sma
    assert oes.lan == pytest.approx(math.radians(MOON.reference.lan))
