"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by ramp_tool.registry.discover(). Underscore-prefixed
modules are shared helpers.

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary.
"""

# PyInstaller hidden imports, keep this list in sync with command modules
import ramp_tool.commands.curve as _curve  # noqa: F401
import ramp_tool.commands.flavours as _flavours  # noqa: F401
import ramp_tool.commands.inspect as _inspect  # noqa: F401
import ramp_tool.commands.ramp as _ramp  # noqa: F401
import ramp_tool.commands.sweep as _sweep  # noqa: F401
