"""Preview a chroma multiplier curve without generating a ramp.

The curve has one multiplier per step. At the --peak step it equals
--peak-chroma / 100. Lighter steps use fixed lead-in ratios (0.0625, 0.5,
0.75 of the peak, then a quadratic approach); darker steps decay
exponentially by the --falloff factor:

    gentle 0.85   moderate 0.70   steep 0.50   extreme 0.30

with an extra 0.7 on 800/900/950. An unknown --peak gives a flat curve of
ones; an unknown --falloff behaves like moderate.

--stop STEP=VALUE entries replace the generated curve (missing steps get
0.5, the peak step still gets --peak-chroma / 100).

Example:
    uv run ramp-tool curve --peak-chroma 100 --peak 400
    uv run ramp-tool curve --peak-chroma 60 --peak 600 --falloff gentle --json
"""

from ramp_tool.commands._options import add_curve_arguments, curve_settings_from_args
from ramp_tool.core.chroma_curve import generate_chroma_curve, multipliers_to_stops
from ramp_tool.core.types import ChromaCurveSettings, Command, Report

command = Command(
    name='curve',
    help='Preview the chroma multiplier curve for peak / falloff settings.',
)


@command.arguments
def add_arguments(parser) -> None:
    add_curve_arguments(parser)


@command.run
def run(args, report: Report) -> None:
    settings = curve_settings_from_args(args) or ChromaCurveSettings(
        peak_chroma=100.0,
        peak_position=args.peak,
        falloff_rate=args.falloff,
    )
    report.title = f'Chroma curve: peak {settings.peak_chroma:g}% at {settings.peak_position}, {settings.falloff_rate}'
    for step, multiplier in multipliers_to_stops(generate_chroma_curve(settings)).items():
        report.add(step, {'multiplier': round(multiplier, 6)})
