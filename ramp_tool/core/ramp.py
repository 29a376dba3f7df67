"""Ramp orchestration: seed colour + flavour / curve settings -> 10 solved steps.

Two variants:

  build_ramp / generate_ramp
      Flavour or chroma-curve driven. Each step gets seed chroma times its
      multiplier and starts the lightness search from LIGHTNESS_SHAPE.
      Default solver: tolerance 0.1, 10 iterations.

  build_contrast_ramp / generate_contrast_ramp
      Contrast only. Every step keeps the seed's chroma and hue and starts
      from the seed's lightness. Default solver: tolerance 0.01, 20 iterations.

Neither variant caches anything; each call computes a fresh Ramp.
"""

import logging
import math
from collections.abc import Mapping

from ramp_tool.core.chroma_curve import generate_chroma_curve
from ramp_tool.core.colour_space import to_approx_oklch, wrap_hue
from ramp_tool.core.errors import ConfigError
from ramp_tool.core.palette import hex_to_rgb, rgb_to_hex
from ramp_tool.core.presets import (
    DEFAULT_CONTRAST_TARGETS,
    FLAVOURS,
    LIGHTNESS_SHAPE,
    SEED_CHROMA_FALLBACK,
    STEPS,
    get_flavour,
)
from ramp_tool.core.solver import search_lightness
from ramp_tool.core.types import ChromaCurveSettings, Ramp, RampFlavour, RampStep, Rgb, SolverSettings

logger = logging.getLogger(__name__)


def resolve_multipliers(
    flavour: RampFlavour,
    chroma_curve_settings: ChromaCurveSettings | None = None,
) -> list[float]:
    """custom_stops > generated curve > flavour multipliers."""
    if chroma_curve_settings is not None:
        # generate_chroma_curve handles custom_stops itself
        return generate_chroma_curve(chroma_curve_settings)
    return list(flavour.chroma_multipliers)


def resolve_contrast_targets(contrast_targets: Mapping[str, float] | None = None) -> dict[str, float]:
    """Default targets overlaid with caller-supplied entries."""
    targets = dict(DEFAULT_CONTRAST_TARGETS)
    if not contrast_targets:
        return targets
    for step, ratio in contrast_targets.items():
        step = str(step)
        if step not in targets:
            logger.debug('Ignoring contrast target for unknown step %r', step)
            continue
        ratio = float(ratio)
        if not math.isfinite(ratio) or ratio < 1.0:
            raise ConfigError(f'Contrast target for step {step} must be a finite ratio >= 1.0, got {ratio}')
        targets[step] = ratio
    return targets


def ramp_title(
    seed: str,
    flavour_id: str | None = 'bright',
    chroma_curve_settings: ChromaCurveSettings | None = None,
    flavours: Mapping[str, RampFlavour] = FLAVOURS,
) -> str:
    if chroma_curve_settings is not None:
        return f'[Ramp] Custom Curve ({chroma_curve_settings.peak_position}) - {seed}'
    name = get_flavour(flavour_id, flavours).name
    return f'[Ramp] {name} Ramp - {seed}'


def build_ramp(
    seed_hex: str,
    flavour_id: str | None = 'bright',
    contrast_targets: Mapping[str, float] | None = None,
    chroma_curve_settings: ChromaCurveSettings | None = None,
    solver: SolverSettings | None = None,
    flavours: Mapping[str, RampFlavour] = FLAVOURS,
) -> Ramp:
    """Solve every step of a flavour / curve driven ramp.

    `flavours` is the read-only flavour table to resolve `flavour_id` in.
    Raises InvalidColourFormat for a malformed seed before any step is solved.
    """
    seed_rgb = hex_to_rgb(seed_hex)
    seed = rgb_to_hex(seed_rgb)
    solver = solver or SolverSettings()

    flavour = get_flavour(flavour_id, flavours)
    multipliers = resolve_multipliers(flavour, chroma_curve_settings)
    targets = resolve_contrast_targets(contrast_targets)

    lch = to_approx_oklch(seed_rgb)
    seed_chroma = lch.c or SEED_CHROMA_FALLBACK
    seed_hue = lch.h

    steps = []
    for index, step in enumerate(STEPS):
        initial = LIGHTNESS_SHAPE[index]
        if flavour.lightness_adjustment:
            initial = max(0.0, min(1.0, initial + flavour.lightness_adjustment[index]))

        chroma = seed_chroma * multipliers[index]
        hue = seed_hue
        if flavour.hue_shift:
            hue = wrap_hue(seed_hue + flavour.hue_shift)

        solution = search_lightness(
            chroma,
            hue,
            targets[step],
            tolerance=solver.tolerance,
            max_iterations=solver.max_iterations,
            initial_lightness=initial,
        )
        steps.append(RampStep(step=step, solution=solution, chroma=chroma, hue=hue, multiplier=multipliers[index]))

    return Ramp(
        seed=seed,
        title=ramp_title(seed, flavour_id, chroma_curve_settings, flavours),
        steps=tuple(steps),
    )


def generate_ramp(
    seed_hex: str,
    flavour_id: str | None = 'bright',
    contrast_targets: Mapping[str, float] | None = None,
    chroma_curve_settings: ChromaCurveSettings | None = None,
    solver: SolverSettings | None = None,
) -> dict[str, Rgb]:
    """Ordered mapping of step id -> clamped Rgb for one seed."""
    return build_ramp(seed_hex, flavour_id, contrast_targets, chroma_curve_settings, solver).colours()


def build_contrast_ramp(
    seed_hex: str,
    contrast_targets: Mapping[str, float] | None = None,
    solver: SolverSettings | None = None,
) -> Ramp:
    """Solve a ramp that keeps the seed's chroma and hue on every step."""
    seed_rgb = hex_to_rgb(seed_hex)
    seed = rgb_to_hex(seed_rgb)
    solver = solver or SolverSettings.precise()
    targets = resolve_contrast_targets(contrast_targets)
    lch = to_approx_oklch(seed_rgb)

    steps = []
    for step in STEPS:
        solution = search_lightness(
            lch.c,
            lch.h,
            targets[step],
            tolerance=solver.tolerance,
            max_iterations=solver.max_iterations,
            initial_lightness=lch.l,
        )
        steps.append(RampStep(step=step, solution=solution, chroma=lch.c, hue=lch.h, multiplier=1.0))

    return Ramp(seed=seed, title=f'[Ramp] Contrast Ramp - {seed}', steps=tuple(steps))


def generate_contrast_ramp(
    seed_hex: str,
    contrast_targets: Mapping[str, float] | None = None,
    solver: SolverSettings | None = None,
) -> dict[str, Rgb]:
    return build_contrast_ramp(seed_hex, contrast_targets, solver).colours()
