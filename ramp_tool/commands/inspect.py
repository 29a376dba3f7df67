"""Describe one colour: hex, contrast against white, approximate LCH.

The LCH values are the tool's HSL-derived approximation (chroma is HSL
saturation x 0.4), the same space ramps are solved in. Also reports the
nearest default contrast target so a colour can be placed on a ramp.

Example:
    uv run ramp-tool inspect '#0066ff'
    uv run ramp-tool inspect 2563eb --json
"""

from ramp_tool.core.colour_space import to_approx_oklch
from ramp_tool.core.contrast import contrast_against_white
from ramp_tool.core.palette import hex_to_rgb, rgb_to_hex
from ramp_tool.core.presets import DEFAULT_CONTRAST_TARGETS
from ramp_tool.core.types import Command, Report

command = Command(
    name='inspect',
    help='Show contrast against white and approximate LCH for a colour.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('colour', help='Colour as #rrggbb')


@command.run
def run(args, report: Report) -> None:
    colour = hex_to_rgb(args.colour)
    lch = to_approx_oklch(colour)
    ratio = contrast_against_white(colour)
    nearest = min(DEFAULT_CONTRAST_TARGETS, key=lambda step: abs(DEFAULT_CONTRAST_TARGETS[step] - ratio))

    report.title = rgb_to_hex(colour)
    report.seed = rgb_to_hex(colour)
    report.meta.update(
        {
            'contrast': round(ratio, 1),
            'lch': {'l': round(lch.l, 2), 'c': round(lch.c, 2), 'h': round(lch.h)},
            'nearest_step': nearest,
        }
    )
