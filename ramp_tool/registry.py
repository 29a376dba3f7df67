"""Command lookup for the ramp-tool CLI.

Every public module in ramp_tool/commands/ that defines a module-level
`command` (a Command) becomes a sub-command under that command's name.
Underscore-prefixed modules hold shared helpers and are never loaded here.

A frozen binary has no package directory to scan, so COMMAND_MODULES names
the modules to load in that case.
"""

import importlib
import pkgutil
from types import ModuleType

from ramp_tool.core.types import Command

COMMAND_MODULES = ('curve', 'flavours', 'inspect', 'ramp', 'sweep')

# command name -> (Command, defining module); filled once per process
_loaded: dict[str, tuple[Command, ModuleType]] = {}


def _module_names() -> list[str]:
    import ramp_tool.commands as package

    names = [info.name for info in pkgutil.iter_modules(package.__path__) if not info.name.startswith('_')]
    return names or list(COMMAND_MODULES)


def discover() -> dict[str, Command]:
    """Load every command module once and return name -> Command."""
    if not _loaded:
        for name in _module_names():
            module = importlib.import_module(f'ramp_tool.commands.{name}')
            found = getattr(module, 'command', None)
            if isinstance(found, Command):
                _loaded[found.name] = (found, module)
    return {name: cmd for name, (cmd, _module) in _loaded.items()}


def all_commands() -> dict[str, Command]:
    return discover()


def get(name: str) -> Command:
    """The Command registered as `name`; KeyError lists the known names."""
    commands = discover()
    if name not in commands:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}')
    return commands[name]


def module_for(name: str) -> ModuleType:
    """The module that defines command `name`; its docstring is the help text."""
    get(name)
    return _loaded[name][1]
