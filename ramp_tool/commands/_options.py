"""Argument helpers shared by the ramp and curve commands."""

from ramp_tool.core.errors import ConfigError
from ramp_tool.core.presets import DEFAULT_FALLOFF, FALLOFF_FACTORS, STEPS
from ramp_tool.core.types import ChromaCurveSettings


def parse_step_values(pairs: list[str] | None) -> dict[str, float]:
    """Parse ['400=1.5', '950=12'] into {'400': 1.5, '950': 12.0}."""
    values: dict[str, float] = {}
    for pair in pairs or []:
        step, sep, raw = pair.partition('=')
        step = step.strip()
        if not sep or step not in STEPS:
            raise ConfigError(f'Expected STEP=VALUE with STEP one of {", ".join(STEPS)}, got {pair!r}')
        try:
            values[step] = float(raw)
        except ValueError as e:
            raise ConfigError(f'Value for step {step} is not a number: {raw!r}') from e
    return values


def add_curve_arguments(parser) -> None:
    parser.add_argument(
        '-c',
        '--peak-chroma',
        type=float,
        default=None,
        metavar='PCT',
        help='Peak chroma as a percentage of the seed chroma (0-100)',
    )
    parser.add_argument('-P', '--peak', default='400', metavar='STEP', help='Step where chroma peaks (default: 400)')
    parser.add_argument(
        '-o',
        '--falloff',
        default=DEFAULT_FALLOFF,
        help=f'Falloff after the peak: {", ".join(FALLOFF_FACTORS)} (default: {DEFAULT_FALLOFF})',
    )
    parser.add_argument(
        '-s',
        '--stop',
        action='append',
        metavar='STEP=VALUE',
        help='Explicit multiplier for a step; bypasses the generated curve. Repeatable.',
    )


def curve_settings_from_args(args) -> ChromaCurveSettings | None:
    """ChromaCurveSettings from CLI args, or None when no curve option was given."""
    stops = parse_step_values(args.stop)
    if args.peak_chroma is None and not stops:
        return None
    peak_chroma = 100.0 if args.peak_chroma is None else args.peak_chroma
    if not 0 <= peak_chroma <= 100:
        raise ConfigError(f'--peak-chroma must be between 0 and 100, got {peak_chroma}')
    return ChromaCurveSettings(
        peak_chroma=peak_chroma,
        peak_position=args.peak,
        falloff_rate=args.falloff,
        custom_stops=stops or None,
    )
