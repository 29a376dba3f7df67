"""Exception hierarchy for ramp-tool.

Only conditions with no sensible fallback are raised. Unknown flavours,
unknown falloff rates, unresolved peak positions and solver non-convergence
are absorbed by the core with documented defaults.
"""


class RampToolError(Exception):
    """Base class for every error ramp-tool raises on purpose."""


class InvalidColourFormat(RampToolError, ValueError):
    """Seed string is not a 6-hex-digit #rrggbb colour."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'Invalid hex colour: {value!r} (expected #rrggbb)')


class ConfigError(RampToolError, ValueError):
    """An environment value or CLI option could not be parsed."""
