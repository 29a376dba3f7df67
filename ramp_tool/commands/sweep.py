"""Convergence survey: generate ramps for evenly spaced hues and score them.

Builds --hues seed colours around the hue circle at HSL lightness 0.5 and
saturation --saturation, solves a full ramp for each (current flavour and
solver settings) and measures every step's contrast against white with a
vectorised numpy pass.

Per seed: how many of the 10 steps landed within --within of their target,
and the worst miss. Overall: the share of all steps within --within. A seed
passes when all its steps are within --within.

Example:
    uv run ramp-tool sweep
    uv run ramp-tool sweep --hues 36 --saturation 0.8 --within 0.15 --json
"""

import numpy as np

from ramp_tool.core.colour_space import from_approx_oklch
from ramp_tool.core.contrast import contrast_against_white
from ramp_tool.core.palette import rgb_to_hex
from ramp_tool.core.ramp import build_ramp
from ramp_tool.core.types import Command, Lch, Report

command = Command(
    name='sweep',
    help='Solve ramps for evenly spaced hues and report how many steps hit their targets.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('--hues', type=int, default=12, help='Number of seed hues (default: 12)')
    parser.add_argument('--saturation', type=float, default=0.6, help='HSL saturation of the seeds (default: 0.6)')
    parser.add_argument('--within', type=float, default=0.15, help='Allowed contrast miss (default: 0.15)')
    parser.add_argument('-f', '--flavour', default=None, help='Flavour id (default: RAMP_TOOL_FLAVOUR or bright)')


def sweep_seeds(hues: int, saturation: float) -> list[str]:
    """Seed hex colours at evenly spaced hues, HSL lightness 0.5."""
    return [
        rgb_to_hex(from_approx_oklch(Lch(l=0.5, c=saturation * 0.4, h=float(h))).clamped())
        for h in np.linspace(0.0, 360.0, num=max(hues, 1), endpoint=False)
    ]


@command.run
def run(args, report: Report) -> None:
    env = args.env_settings
    flavour = args.flavour or env.flavour
    seeds = sweep_seeds(args.hues, args.saturation)

    ramps = [build_ramp(seed, flavour, solver=env.solver) for seed in seeds]
    colours = np.array([[s.colour.as_tuple() for s in ramp.steps] for ramp in ramps])
    targets = np.array([[s.solution.target for s in ramp.steps] for ramp in ramps])

    contrasts = contrast_against_white(colours)
    misses = np.abs(contrasts - targets)
    within = misses <= args.within

    for i, seed in enumerate(seeds):
        hits = int(within[i].sum())
        report.add(
            seed,
            {
                'within': f'{hits}/{within.shape[1]}',
                'worst_miss': round(float(misses[i].max()), 3),
            },
        )
        if hits == within.shape[1]:
            report.record_pass(seed)
        else:
            report.record_fail(seed)

    report.title = f'Sweep: {len(seeds)} hues, saturation {args.saturation:g}, flavour {flavour}'
    report.meta['share_within'] = round(float(within.mean()), 3)
    report.meta['within'] = args.within
