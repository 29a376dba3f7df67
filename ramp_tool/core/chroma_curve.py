"""Chroma multiplier curves: one multiplier per step, applied to the seed chroma.

The shaping constants below (0.0625 / 0.5 / 0.75 lead-in, the quadratic
approach to the peak, the exponential tail and the extra 0.7 on the last
three steps) are what the stored presets were tuned against. Keep them.
"""

import logging

from ramp_tool.core.presets import FLAVOURS, STEPS, get_falloff_factor, step_index
from ramp_tool.core.types import ChromaCurveSettings

logger = logging.getLogger(__name__)

MIN_CHROMA_RATIO = 0.0625  # step 100 relative to the peak
CUSTOM_STOP_FALLBACK = 0.5
TAIL_START = 7  # 800, 900, 950
TAIL_FACTOR = 0.7


def _custom_curve(settings: ChromaCurveSettings) -> list[float]:
    peak_value = settings.peak_chroma / 100
    stops = settings.custom_stops or {}
    curve = []
    for step in STEPS:
        if step == str(settings.peak_position):
            curve.append(peak_value)
        else:
            value = stops.get(step)
            curve.append(CUSTOM_STOP_FALLBACK if value is None else float(value))
    return curve


def generate_chroma_curve(settings: ChromaCurveSettings) -> list[float]:
    """Build the 10-entry multiplier curve for the given settings.

    Explicit custom_stops bypass the generated shape entirely (the peak step
    still takes peak_chroma / 100). An unknown peak_position yields a flat
    curve of ones; an unknown falloff_rate behaves like 'moderate'.
    """
    if settings.custom_stops is not None:
        return _custom_curve(settings)

    count = len(STEPS)
    peak_index = step_index(settings.peak_position)
    if peak_index is None:
        logger.debug('Peak position %r is not a step, using a flat curve', settings.peak_position)
        return [1.0] * count

    peak_value = settings.peak_chroma / 100
    decay = get_falloff_factor(settings.falloff_rate)

    curve: list[float] = []
    for i in range(count):
        if i == peak_index:
            value = peak_value
        elif i < peak_index:
            # Lighter steps
            if i == 0:
                value = peak_value * MIN_CHROMA_RATIO
            elif i == 1:
                value = peak_value * 0.5
            elif i == 2:
                value = peak_value * 0.75
            else:
                t = i / peak_index
                value = peak_value * (0.8 + 0.2 * t * t)
        else:
            # Darker steps: exponential falloff over the normalised distance
            distance = abs(i - peak_index) / (count - 1) * 2
            value = peak_value * decay ** (distance * 5)
            if i >= TAIL_START:
                value *= TAIL_FACTOR
        curve.append(value)

    return curve


def multipliers_to_stops(curve) -> dict[str, float]:
    """Key a 10-entry curve by step id."""
    values = list(curve)
    if len(values) != len(STEPS):
        raise ValueError(f'Expected {len(STEPS)} multipliers, got {len(values)}')
    return dict(zip(STEPS, values))


def preset_curves() -> dict[str, dict[str, float]]:
    """Every built-in flavour's multipliers keyed by step."""
    return {flavour_id: multipliers_to_stops(f.chroma_multipliers) for flavour_id, f in FLAVOURS.items()}
