"""Configuration for ramp-tool: .env loading plus RAMP_TOOL_* settings.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file found walking up from cwd, stopping at the repo root (.git).

Recognised variables:
  RAMP_TOOL_FLAVOUR         default flavour id (bright | stone | concrete)
  RAMP_TOOL_TOLERANCE       solver contrast tolerance (float > 0)
  RAMP_TOOL_MAX_ITERATIONS  solver iteration budget (int >= 1)
  RAMP_TOOL_LOG_LEVEL       logging level name (DEBUG, INFO, WARNING, ...)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ramp_tool.core.errors import ConfigError
from ramp_tool.core.presets import DEFAULT_FLAVOUR
from ramp_tool.core.types import SolverSettings

ENV_PREFIX = 'RAMP_TOOL_'


@dataclass(frozen=True)
class EnvSettings:
    flavour: str = DEFAULT_FLAVOUR
    solver: SolverSettings = field(default_factory=SolverSettings)
    log_level: int = logging.WARNING


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start; None once a .git marker or / is reached."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone and a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes stripped, comments and malformed lines skipped."""
    values: dict[str, str] = {}
    with open(path, encoding='utf-8') as f:
        for raw in f:
            line = raw.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue
            key, _, value = line.partition('=')
            key = key.strip()
            if key:
                values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ without touching keys already set.

    Returns the file that was loaded, or None.
    """
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _number(environ: Mapping[str, str], name: str, cast, default):
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ConfigError(f'{ENV_PREFIX}{name}={raw!r} is not a valid {cast.__name__}') from e


def settings_from_env(environ: Mapping[str, str] | None = None) -> EnvSettings:
    """Read RAMP_TOOL_* values (from os.environ unless a mapping is given)."""
    environ = os.environ if environ is None else environ
    defaults = SolverSettings()

    tolerance = _number(environ, 'TOLERANCE', float, defaults.tolerance)
    if tolerance <= 0:
        raise ConfigError(f'{ENV_PREFIX}TOLERANCE must be > 0, got {tolerance}')
    max_iterations = _number(environ, 'MAX_ITERATIONS', int, defaults.max_iterations)
    if max_iterations < 1:
        raise ConfigError(f'{ENV_PREFIX}MAX_ITERATIONS must be >= 1, got {max_iterations}')

    level_name = environ.get(ENV_PREFIX + 'LOG_LEVEL', '').strip().upper()
    log_level = logging.WARNING
    if level_name:
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ConfigError(f'{ENV_PREFIX}LOG_LEVEL={level_name!r} is not a logging level')
        log_level = level

    return EnvSettings(
        flavour=environ.get(ENV_PREFIX + 'FLAVOUR', '').strip() or DEFAULT_FLAVOUR,
        solver=SolverSettings(tolerance=tolerance, max_iterations=max_iterations),
        log_level=log_level,
    )
