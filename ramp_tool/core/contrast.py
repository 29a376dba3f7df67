"""WCAG 2.x relative luminance and contrast ratio.

Functions accept an Rgb, a plain (r, g, b) sequence with 0-1 channels, or a
numpy array whose last axis holds the three channels. Scalar inputs return a
float; arrays return an array (used by the sweep command).
"""

import numpy as np

from ramp_tool.core.types import Rgb

_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])
_WHITE_LUMINANCE = 1.0


def _as_array(colour) -> np.ndarray:
    if isinstance(colour, Rgb):
        return np.array(colour.as_tuple(), dtype=float)
    return np.asarray(colour, dtype=float)


def relative_luminance(colour):
    arr = _as_array(colour)
    # np.maximum keeps the power branch defined for dark/negative channels it never selects
    linear = np.where(
        arr <= 0.03928,
        arr / 12.92,
        ((np.maximum(arr, 0.03928) + 0.055) / 1.055) ** 2.4,
    )
    lum = linear @ _WEIGHTS
    if np.ndim(lum) == 0:
        return float(lum)
    return lum


def _ratio(lum_a, lum_b):
    lighter = np.maximum(lum_a, lum_b)
    darker = np.minimum(lum_a, lum_b)
    ratio = (lighter + 0.05) / (darker + 0.05)
    if np.ndim(ratio) == 0:
        return float(ratio)
    return ratio


def contrast_ratio(a, b):
    """Contrast ratio between two colours, always >= 1 regardless of argument order."""
    return _ratio(relative_luminance(a), relative_luminance(b))


def contrast_against_white(colour):
    return _ratio(relative_luminance(colour), _WHITE_LUMINANCE)
