"""Render a ramp as a horizontal strip of swatches (PNG via Pillow).

Layout: fixed 500x60 white canvas, 10 px padding, 40x40 swatches spaced
5 px apart, left to right in step order. The canvas widens if more swatches
are passed than fit.
"""

import os

import numpy as np
from PIL import Image

from ramp_tool.core.types import Rgb

CANVAS_WIDTH = 500
CANVAS_HEIGHT = 60
PADDING = 10
SWATCH_SIZE = 40
SPACING = 5


def _to_uint8(colour: Rgb) -> np.ndarray:
    return np.round(np.clip(np.array(colour.as_tuple()), 0.0, 1.0) * 255).astype(np.uint8)


def render_swatches(colours: list[Rgb], swatch_size: int = SWATCH_SIZE) -> Image.Image:
    n = len(colours)
    needed = 2 * PADDING + n * swatch_size + max(n - 1, 0) * SPACING
    width = max(CANVAS_WIDTH, needed)
    height = max(CANVAS_HEIGHT, 2 * PADDING + swatch_size)

    canvas = np.full((height, width, 3), 255, dtype=np.uint8)
    for i, colour in enumerate(colours):
        x = PADDING + i * (swatch_size + SPACING)
        canvas[PADDING : PADDING + swatch_size, x : x + swatch_size] = _to_uint8(colour)

    return Image.fromarray(canvas)


def save_swatches(colours: list[Rgb], path: str) -> str:
    """Render and save as PNG; parent directories are created."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_swatches(colours).save(path, format='PNG')
    return path
