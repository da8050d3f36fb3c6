"""Body catalog: orbital elements and position-derivation flags per body."""

import logging

from astro_positions.bodies.base import (
    DISTANCE_AU,
    DISTANCE_EARTH_RADII,
    TIME_UNIT_CENTURY,
    TIME_UNIT_DAY,
    Body,
    BodySpec,
    ReferenceElements,
)
from astro_positions.bodies.moon import MOON, SUN_FOR_MOON
from astro_positions.bodies.planets import (
    EARTH,
    JUPITER,
    MARS,
    MERCURY,
    NEPTUNE,
    PLUTO,
    SATURN,
    SUN,
    URANUS,
    VENUS,
)

logger = logging.getLogger(__name__)

_BODY_SPECS: dict[Body, BodySpec] = {
    spec.body: spec
    for spec in (
        SUN,
        MERCURY,
        VENUS,
        EARTH,
        MARS,
        JUPITER,
        SATURN,
        URANUS,
        NEPTUNE,
        PLUTO,
        MOON,
        SUN_FOR_MOON,
    )
}

# Bodies whose positions are reported, in report order.
VISIBLE_BODIES: tuple[Body, ...] = (
    Body.SUN,
    Body.MOON,
    Body.MERCURY,
    Body.VENUS,
    Body.MARS,
    Body.JUPITER,
    Body.SATURN,
    Body.URANUS,
    Body.NEPTUNE,
    Body.PLUTO,
)


def get_body_spec(body: Body) -> BodySpec:
    """Return the catalog entry for ``body``."""
    return _BODY_SPECS[body]


def parse_body(text: str | Body) -> Body:
    """Parse a visible body name (case-insensitive) to ``Body``.

    Parameters:
        text: Body name such as 'mars' or 'Moon', or a Body.

    Returns:
        The matching Body.

    Raises:
        ValueError: If the name is not one of the visible bodies.
    """
    if isinstance(text, Body):
        body = text
    else:
        key = text.strip().lower()
        body = next((b for b in VISIBLE_BODIES if b.value.lower() == key), None)
        if body is None:
            logger.debug('Unknown body name %r', text)
    if body is None or body not in VISIBLE_BODIES:
        valid = ', '.join(b.value for b in VISIBLE_BODIES)
        raise ValueError(f'Unknown body {text!r}; expected one of: {valid}')
    return body


__all__ = [
    'DISTANCE_AU',
    'DISTANCE_EARTH_RADII',
    'EARTH',
    'JUPITER',
    'MARS',
    'MERCURY',
    'MOON',
    'NEPTUNE',
    'PLUTO',
    'SATURN',
    'SUN',
    'SUN_FOR_MOON',
    'TIME_UNIT_CENTURY',
    'TIME_UNIT_DAY',
    'URANUS',
    'VENUS',
    'VISIBLE_BODIES',
    'Body',
    'BodySpec',
    'ReferenceElements',
    'get_body_spec',
    'parse_body',
]
