"""Shared types for ramp-tool: Rgb, Lch, RampFlavour, ChromaCurveSettings, Ramp, Command, Report."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Rgb:
    """sRGB colour with float channels, nominally 0-1. No alpha."""

    r: float
    g: float
    b: float

    def clamped(self) -> Rgb:
        """Copy with every channel clamped into [0, 1]."""
        return Rgb(
            r=max(0.0, min(1.0, self.r)),
            g=max(0.0, min(1.0, self.g)),
            b=max(0.0, min(1.0, self.b)),
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class Lch:
    """Approximate lightness / chroma / hue triple (HSL-derived, not true OKLCH)."""

    l: float  # noqa: E741  0-1
    c: float  # >= 0, practically < 0.5
    h: float  # degrees, may be unnormalised


@dataclass(frozen=True)
class RampFlavour:
    """A named preset shaping chroma (and optionally lightness / hue) per step."""

    name: str
    description: str
    chroma_multipliers: tuple[float, ...]
    lightness_adjustment: tuple[float, ...] | None = None
    hue_shift: float | None = None  # degrees


@dataclass(frozen=True)
class ChromaCurveSettings:
    """User-authored chroma curve: peak strength, peak step and falloff."""

    peak_chroma: float  # percentage, 0-100
    peak_position: str  # step id, e.g. '400'
    falloff_rate: str = 'moderate'  # gentle | moderate | steep | extreme
    custom_stops: Mapping[str, float] | None = None  # step id -> multiplier, bypasses the curve


@dataclass(frozen=True)
class SolverSettings:
    """Stopping rule for the lightness binary search."""

    tolerance: float = 0.1
    max_iterations: int = 10

    @classmethod
    def precise(cls) -> SolverSettings:
        """Tighter settings used by the contrast-only ramp."""
        return cls(tolerance=0.01, max_iterations=20)


@dataclass(frozen=True)
class LightnessSolution:
    """Outcome of one lightness search."""

    colour: Rgb  # clamped
    lightness: float
    contrast: float  # against white
    target: float
    iterations: int
    converged: bool


@dataclass(frozen=True)
class RampStep:
    """One solved swatch of a ramp."""

    step: str
    solution: LightnessSolution
    chroma: float
    hue: float
    multiplier: float

    @property
    def colour(self) -> Rgb:
        return self.solution.colour


@dataclass(frozen=True)
class Ramp:
    """Ten solved steps in canonical order, derived from one seed."""

    seed: str
    title: str
    steps: tuple[RampStep, ...]

    def colours(self) -> dict[str, Rgb]:
        """Ordered mapping of step id -> colour."""
        return {s.step: s.colour for s in self.steps}


class Command:
    """A self-registering CLI sub-command.

    Usage in a command module:

        command = Command(name='curve', help='Preview a chroma curve')

        @command.arguments
        def add_arguments(parser):
            ...

        @command.run
        def run(args, report):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._args_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any, report: Report) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report)


@dataclass
class Report:
    """Accumulates per-step results from a command for text/JSON output."""

    title: str = ''
    seed: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)
    steps: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, step: str, data: dict[str, Any]) -> None:
        """Add (or merge) result data for a step."""
        if step not in self.steps:
            self.steps[step] = {}
        self.steps[step].update(data)

    def record_pass(self, step: str) -> None:
        self.pass_count += 1

    def record_fail(self, step: str) -> None:
        self.fail_count += 1
