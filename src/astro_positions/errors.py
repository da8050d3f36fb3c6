"""Exceptions raised by the timestamp engine and the orbital pipeline."""

from __future__ import annotations


class AstroPositionsError(Exception):
    """Base error."""


class InvalidDate(AstroPositionsError, ValueError):
    """A civil date/time violates calendar rules.

    Attributes:
        field: Name of the offending field ('year', 'month', ...).
        value: The rejected value.
    """

    def __init__(self, field: str, value: int, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f'Invalid {field}: {value!r}')


class TimeResolutionError(AstroPositionsError, RuntimeError):
    """No timestamp could be found that decodes back to the requested UTC time."""


class ComputationError(AstroPositionsError, ArithmeticError):
    """An orbital computation failed (e.g. Kepler's equation did not converge)."""
