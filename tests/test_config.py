"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest

from astro_positions import config


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables give the built-in defaults."""
    for name in (
        'ASTRO_POSITIONS_FALLBACK_HOURS',
        'ASTRO_POSITIONS_WIDE_FALLBACK_HOURS',
        'ASTRO_POSITIONS_KEPLER_MAX_ITER',
        'JULIAN_LEAPSECS',
    ):
        monkeypatch.delenv(name, raising=False)
    assert config.get_fallback_hours() == 2
    assert config.get_wide_fallback_hours() == 24
    assert config.get_kepler_max_iterations() == 100
    assert config.get_leapsecs_path() is None


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables override the defaults."""
    monkeypatch.setenv('ASTRO_POSITIONS_FALLBACK_HOURS', '3')
    monkeypatch.setenv('ASTRO_POSITIONS_WIDE_FALLBACK_HOURS', ' 48 ')
    monkeypatch.setenv('ASTRO_POSITIONS_KEPLER_MAX_ITER', '500')
    monkeypatch.setenv('JULIAN_LEAPSECS', '/data/naif0012.tls')
    assert config.get_fallback_hours() == 3
    assert config.get_wide_fallback_hours() == 48
    assert config.get_kepler_max_iterations() == 500
    assert config.get_leapsecs_path() == '/data/naif0012.tls'


@pytest.mark.parametrize('raw', ['abc', '0', '-4', '1.5'])
def test_invalid_values_fall_back(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, raw: str
) -> None:
    """Bad values are logged and replaced by the default."""
    monkeypatch.setenv('ASTRO_POSITIONS_FALLBACK_HOURS', raw)
    with caplog.at_level(logging.WARNING, logger='astro_positions.config'):
        assert config.get_fallback_hours() == 2
    assert 'ASTRO_POSITIONS_FALLBACK_HOURS' in caplog.text
