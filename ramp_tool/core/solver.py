"""Binary search over lightness until a colour hits a contrast target against white."""

import logging

from ramp_tool.core.colour_space import from_approx_oklch
from ramp_tool.core.contrast import contrast_against_white
from ramp_tool.core.types import Lch, LightnessSolution, Rgb

logger = logging.getLogger(__name__)


def _candidate(lightness: float, chroma: float, hue: float) -> tuple[Rgb, float]:
    colour = from_approx_oklch(Lch(l=lightness, c=chroma, h=hue)).clamped()
    return colour, contrast_against_white(colour)


def search_lightness(
    chroma: float,
    hue: float,
    target_contrast: float,
    tolerance: float = 0.1,
    max_iterations: int = 10,
    initial_lightness: float = 0.5,
) -> LightnessSolution:
    """Search lightness in [0, 1] for a fixed chroma and hue.

    Stops as soon as |contrast - target| < tolerance. When the budget runs
    out the colour at the last refined lightness is returned with
    converged=False; that is a best-effort result, not an error.
    """
    lo = 0.0
    hi = 1.0
    current = initial_lightness
    iterations = 0

    while iterations < max_iterations:
        colour, contrast = _candidate(current, chroma, hue)
        if abs(contrast - target_contrast) < tolerance:
            return LightnessSolution(
                colour=colour,
                lightness=current,
                contrast=contrast,
                target=target_contrast,
                iterations=iterations + 1,
                converged=True,
            )

        if contrast > target_contrast:
            # Too dark: push lighter
            lo = current
            current = (current + hi) / 2
        else:
            hi = current
            current = (current + lo) / 2
        iterations += 1

    colour, contrast = _candidate(current, chroma, hue)
    logger.debug(
        'No convergence after %d iterations: target %.3f, got %.3f at l=%.4f (c=%.4f h=%.1f)',
        max_iterations,
        target_contrast,
        contrast,
        current,
        chroma,
        hue,
    )
    return LightnessSolution(
        colour=colour,
        lightness=current,
        contrast=contrast,
        target=target_contrast,
        iterations=iterations,
        converged=False,
    )


def solve_lightness(
    chroma: float,
    hue: float,
    target_contrast: float,
    tolerance: float = 0.1,
    max_iterations: int = 10,
    initial_lightness: float = 0.5,
) -> Rgb:
    """Clamped colour whose contrast against white best matches the target."""
    return search_lightness(
        chroma,
        hue,
        target_contrast,
        tolerance=tolerance,
        max_iterations=max_iterations,
        initial_lightness=initial_lightness,
    ).colour
