"""List the built-in ramp flavours and their chroma multipliers.

    bright    Default: full chroma, peak at 400
    stone     muted, half the chroma of bright
    concrete  an even lower saturation version of stone

Example:
    uv run ramp-tool flavours
    uv run ramp-tool flavours --json
"""

from ramp_tool.core.chroma_curve import preset_curves
from ramp_tool.core.presets import FLAVOURS
from ramp_tool.core.types import Command, Report

command = Command(
    name='flavours',
    help='List built-in flavours with their per-step chroma multipliers.',
)


@command.run
def run(args, report: Report) -> None:
    report.title = 'Ramp flavours'
    for flavour_id, stops in preset_curves().items():
        flavour = FLAVOURS[flavour_id]
        report.add(
            flavour_id,
            {
                'name': flavour.name,
                'description': flavour.description,
                'multipliers': stops,
            },
        )
