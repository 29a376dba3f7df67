"""Hex colour codec: #rrggbb strings <-> Rgb with 0-1 float channels."""

import re

from ramp_tool.core.errors import InvalidColourFormat
from ramp_tool.core.types import Rgb

WHITE = Rgb(1.0, 1.0, 1.0)
BLACK = Rgb(0.0, 0.0, 0.0)

_HEX_RE = re.compile(r'#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})', re.IGNORECASE | re.ASCII)


def hex_to_rgb(value: str) -> Rgb:
    """Parse '#rrggbb' or 'rrggbb' (any case) into an Rgb.

    Shorthand '#rgb', 8-digit forms and surrounding whitespace are rejected.
    """
    m = _HEX_RE.fullmatch(value) if isinstance(value, str) else None
    if m is None:
        raise InvalidColourFormat(value)
    return Rgb(
        r=int(m.group(1), 16) / 255,
        g=int(m.group(2), 16) / 255,
        b=int(m.group(3), 16) / 255,
    )


def channel_to_hex(v: float) -> str:
    """Zero-padded lowercase hex of round(v * 255). Clamps first."""
    n = round(max(0.0, min(1.0, v)) * 255)
    return f'{n:02x}'


def rgb_to_hex(colour: Rgb) -> str:
    return '#' + channel_to_hex(colour.r) + channel_to_hex(colour.g) + channel_to_hex(colour.b)


def normalise_hex(value: str) -> str:
    """Canonical lowercase '#rrggbb' form of a valid hex string."""
    return rgb_to_hex(hex_to_rgb(value))
