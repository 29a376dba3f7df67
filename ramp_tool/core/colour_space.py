"""Approximate LCH conversion built on HSL.

This is not OKLCH. Lightness is HSL lightness, chroma is HSL saturation
scaled by 0.4 and hue is the HSL hue. Presets and contrast targets are tuned
against exactly these formulas, so they must not be swapped for a real
perceptual space.

from_approx_oklch() does not clamp: callers clamp with clamp_rgb() or
Rgb.clamped() before treating the result as a renderable colour.
"""

import math

from ramp_tool.core.types import Lch, Rgb

CHROMA_SCALE = 0.4
SATURATION_SCALE = 2.5  # inverse of CHROMA_SCALE


def to_approx_oklch(colour: Rgb) -> Lch:
    r, g, b = colour.r, colour.g, colour.b
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    h = 0.0
    s = 0.0
    l = (mx + mn) / 2  # noqa: E741

    if delta != 0:
        s = delta / (2 - mx - mn) if l > 0.5 else delta / (mx + mn)
        if mx == r:
            h = ((g - b) / delta + (6 if g < b else 0)) * 60
        elif mx == g:
            h = ((b - r) / delta + 2) * 60
        else:
            h = ((r - g) / delta + 4) * 60

    return Lch(l=l, c=s * CHROMA_SCALE, h=h)


def from_approx_oklch(lch: Lch) -> Rgb:
    l, h = lch.l, lch.h  # noqa: E741
    s = lch.c * SATURATION_SCALE

    c = (1 - abs(2 * l - 1)) * s
    # fmod keeps the sign of h, so negative hues fall through to the last sector
    x = c * (1 - abs(math.fmod(h / 60, 2) - 1))
    m = l - c / 2

    if 0 <= h < 60:
        r, g, b = c, x, 0.0
    elif 60 <= h < 120:
        r, g, b = x, c, 0.0
    elif 120 <= h < 180:
        r, g, b = 0.0, c, x
    elif 180 <= h < 240:
        r, g, b = 0.0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return Rgb(r=r + m, g=g + m, b=b + m)


def clamp_rgb(colour: Rgb) -> Rgb:
    return colour.clamped()


def wrap_hue(h: float) -> float:
    """Wrap any hue (including shifts beyond +-360) into [0, 360)."""
    wrapped = h % 360
    # tiny negative inputs round up to exactly 360.0
    return 0.0 if wrapped >= 360 else wrapped
