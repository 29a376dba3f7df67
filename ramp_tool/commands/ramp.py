"""Generate a 10-step colour ramp (100..950) from one seed colour.

Each step is solved so its contrast against white lands on a target ratio:

    100  1.05    400  1.4     700  4.5     950  12
    200  1.1     500  2.5     800  5.5
    300  1.2     600  3.0     900  8.0

Chroma per step is the seed chroma times a multiplier taken from, in order
of precedence:

  1. --stop STEP=VALUE entries (the --peak step always gets --peak-chroma)
  2. a generated curve (--peak-chroma / --peak / --falloff)
  3. the --flavour preset (bright, stone, concrete; unknown ids use bright)

--contrast-only ignores flavours and curves: every step keeps the seed's
chroma and hue and the solver runs with tolerance 0.01 / 20 iterations.

A step passes when its solved contrast is within the solver tolerance of its
target. --fail-on-miss N exits 1 if any step misses its target by more than N.

Example:
    uv run ramp-tool ramp '#0066ff'
    uv run ramp-tool ramp 0066ff --flavour stone --name Blue --json
    uv run ramp-tool ramp '#0066ff' --peak-chroma 80 --peak 500 --falloff steep
    uv run ramp-tool ramp '#0066ff' --target 950=15 --png ./tmp/blue.png
"""

import sys

from ramp_tool.commands._options import add_curve_arguments, curve_settings_from_args, parse_step_values
from ramp_tool.core.presets import FLAVOURS
from ramp_tool.core.ramp import build_contrast_ramp, build_ramp
from ramp_tool.core.report import ORGANISATIONS, add_ramp
from ramp_tool.core.swatch import save_swatches
from ramp_tool.core.types import Command, Report, SolverSettings

command = Command(
    name='ramp',
    help='Generate a 10-step ramp from a seed colour. Text, JSON tokens or PNG swatches.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('seed', help='Seed colour as #rrggbb (the # is optional)')
    parser.add_argument(
        '-f',
        '--flavour',
        default=None,
        help=f'Preset: {", ".join(FLAVOURS)} (default: RAMP_TOOL_FLAVOUR or bright)',
    )
    parser.add_argument(
        '-t',
        '--target',
        action='append',
        metavar='STEP=RATIO',
        help='Override the contrast target for a step. Repeatable.',
    )
    add_curve_arguments(parser)
    parser.add_argument('--contrast-only', action='store_true', help='Keep seed chroma and hue on every step')
    parser.add_argument('--tolerance', type=float, default=None, help='Solver contrast tolerance')
    parser.add_argument('--max-iterations', type=int, default=None, help='Solver iteration budget')
    parser.add_argument('-n', '--name', default=None, help='Colour name for design-token output, e.g. Blue')
    parser.add_argument(
        '--organisation',
        choices=ORGANISATIONS,
        default='nested',
        help='Token naming: nested (Blue/100) or flat (Blue-100)',
    )
    parser.add_argument('--png', default=None, metavar='PATH', help='Also save the swatch strip as PNG')
    parser.add_argument(
        '-m',
        '--fail-on-miss',
        type=float,
        default=None,
        metavar='N',
        help='Exit 1 if any step misses its contrast target by more than N (CI gating)',
    )


def _solver_settings(args, default: SolverSettings) -> SolverSettings:
    return SolverSettings(
        tolerance=args.tolerance if args.tolerance is not None else default.tolerance,
        max_iterations=args.max_iterations if args.max_iterations is not None else default.max_iterations,
    )


@command.run
def run(args, report: Report) -> None:
    env = args.env_settings
    targets = parse_step_values(args.target) or None

    if args.contrast_only:
        solver = _solver_settings(args, SolverSettings.precise())
        ramp = build_contrast_ramp(args.seed, targets, solver)
    else:
        solver = _solver_settings(args, env.solver)
        flavour = args.flavour or env.flavour
        ramp = build_ramp(args.seed, flavour, targets, curve_settings_from_args(args), solver)

    add_ramp(report, ramp, solver.tolerance, name=args.name, organisation=args.organisation)

    if args.png:
        path = save_swatches([s.colour for s in ramp.steps], args.png)
        report.meta['png'] = path
        print(f'ramp-tool: wrote {path}', file=sys.stderr)
