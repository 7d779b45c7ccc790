"""
Build commands from a package of command modules.

Each module in the package becomes one subcommand named after the module.
Valid command modules should implement an interface like the following:

    \"\"\"Perform magic.\"\"\"

    USAGE_LINE = "[-x] [file ...]"  # optional

    def setup_flags(flag_set: subcmd.FlagSet) -> None:
        # Optional additions to this command's flag set.
        flag_set.add_argument("-x", action="store_true", help="Enable effects")

    def run(resolution: subcmd.Resolution, args: list[str]) -> int:
        # Implementation of this command's functionality.
        return subcmd.EXIT_SUCCESS

The first line of the module's __doc__ (or the result of `get_help()`, if
defined) is shown in the main command's usage listing. A module that sets
`CUSTOM_FLAGS = True` receives its arguments unparsed, and a module that sets
`NOT_A_COMMAND = True` is skipped.
"""

import importlib
import logging
import pkgutil
from types import ModuleType

from subcmd.command import Command

logger = logging.getLogger(__name__)


def get_help(module: ModuleType) -> str:
    """Get the one-line help of a command module."""
    if hasattr(module, "get_help"):
        return module.get_help()
    doc = (module.__doc__ or "").strip()
    return doc.splitlines()[0] if doc else ""


def command_from_module(name: str, module: ModuleType) -> Command:
    """Create the Command implemented by module."""
    command = Command(
        name=name,
        run=module.run,
        usage_line=getattr(module, "USAGE_LINE", ""),
        short=get_help(module),
        long=(module.__doc__ or "").strip(),
        custom_flags=getattr(module, "CUSTOM_FLAGS", False),
    )
    if hasattr(module, "setup_flags"):
        module.setup_flags(command.flag)
    return command


def load_commands(package: ModuleType | str) -> list[Command]:
    """Dynamically load the command modules of package, sorted by name."""
    if isinstance(package, str):
        package = importlib.import_module(package)

    commands = []
    module_infos = pkgutil.iter_modules(package.__path__)
    for module_info in sorted(module_infos, key=lambda info: info.name):
        module_name = module_info.name
        module = importlib.import_module(f"{package.__name__}.{module_name}")
        if getattr(module, "NOT_A_COMMAND", False):
            logger.debug("Skipping %(module)s", {"module": module.__name__})
            continue
        commands.append(command_from_module(module_name, module))
    return commands
