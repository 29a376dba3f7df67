"""Read-only preset tables: steps, flavours, contrast targets, lightness shape.

Everything here is built once at import time and exposed through tuples and
MappingProxyType so nothing can be mutated at runtime.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from ramp_tool.core.types import RampFlavour

logger = logging.getLogger(__name__)

# Canonical order: 100 is the lightest step, 950 the darkest
STEPS: tuple[str, ...] = ('100', '200', '300', '400', '500', '600', '700', '800', '900', '950')

DEFAULT_FLAVOUR = 'bright'

FLAVOURS = MappingProxyType(
    {
        'bright': RampFlavour(
            name='Default',
            description='Emulates current Rosetta UI',
            # peak at 400
            chroma_multipliers=(0.7, 0.85, 0.95, 1.0, 0.95, 0.85, 0.7, 0.5, 0.3, 0.2),
        ),
        'stone': RampFlavour(
            name='Stone',
            description='Emulates more muted/lower saturation',
            chroma_multipliers=(0.35, 0.4, 0.45, 0.5, 0.45, 0.4, 0.2, 0.1, 0.05, 0.03),
        ),
        'concrete': RampFlavour(
            name='Concrete',
            description='An even lower saturation version of Stone',
            chroma_multipliers=(0.175, 0.2, 0.225, 0.25, 0.2, 0.175, 0.075, 0.05, 0.03, 0.01),
        ),
    }
)

# Contrast against white, strictly increasing from 100 to 950
DEFAULT_CONTRAST_TARGETS = MappingProxyType(
    {
        '100': 1.05,
        '200': 1.1,
        '300': 1.2,
        '400': 1.4,
        '500': 2.5,
        '600': 3.0,
        '700': 4.5,
        '800': 5.5,
        '900': 8.0,
        '950': 12.0,
    }
)

# Initial lightness guess per step for the solver, lightest first like STEPS
LIGHTNESS_SHAPE: tuple[float, ...] = (0.97, 0.93, 0.85, 0.78, 0.65, 0.55, 0.45, 0.35, 0.25, 0.15)

FALLOFF_FACTORS = MappingProxyType(
    {
        'gentle': 0.85,
        'moderate': 0.70,
        'steep': 0.50,
        'extreme': 0.30,
    }
)
DEFAULT_FALLOFF = 'moderate'

# Used when the seed is achromatic
SEED_CHROMA_FALLBACK = 0.1


def get_flavour(flavour_id: str | None, flavours: Mapping[str, RampFlavour] = FLAVOURS) -> RampFlavour:
    """Look up a flavour, silently falling back to the built-in 'bright' for unknown ids."""
    flavour = flavours.get(flavour_id) if flavour_id else None
    if flavour is None:
        logger.debug('Unrecognised flavour %r, using %r', flavour_id, DEFAULT_FLAVOUR)
        return flavours.get(DEFAULT_FLAVOUR) or FLAVOURS[DEFAULT_FLAVOUR]
    return flavour


def get_falloff_factor(falloff_rate: str | None) -> float:
    factor = FALLOFF_FACTORS.get(falloff_rate) if falloff_rate else None
    if factor is None:
        logger.debug('Unrecognised falloff rate %r, using %r', falloff_rate, DEFAULT_FALLOFF)
        return FALLOFF_FACTORS[DEFAULT_FALLOFF]
    return factor


def step_index(step: str) -> int | None:
    """Position of a step id in STEPS, or None."""
    try:
        return STEPS.index(str(step))
    except ValueError:
        return None
