"""Commands and their default usage output."""

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from subcmd import settings
from subcmd.flagset import FlagSet


@dataclass(eq=False)
class Command:
    """
    A single command, optionally with its own subcommands.

    `run` is called as `run(resolution, args)` where args are the arguments
    after the command name and its flags. A command without `run` is not
    runnable and is never selected on the command line.
    """

    name: str
    run: Callable[..., Any] | None = None
    usage_line: str = ""
    short: str = ""  # shown in the parent's "commands:" listing
    long: str = ""
    commands: list["Command"] = field(default_factory=list)
    custom_flags: bool = False  # the command parses its own flags
    usage_func: Callable[[], None] | None = None
    flag: FlagSet | None = None

    def __post_init__(self):
        if self.flag is None:
            self.flag = FlagSet(self.name)

    @property
    def runnable(self) -> bool:
        """Report whether the command can be run."""
        return self.run is not None

    def lookup(self, name: str) -> "Command | None":
        """Return the first runnable subcommand called name, if any."""
        for command in self.commands:
            if command.name == name and command.runnable:
                return command
        return None

    def format_usage(self, prog: str | None = None) -> str:
        """Format the default usage message of this command."""
        lines = [f"usage: {prog or self.name} {self.usage_line}".rstrip()]
        if defaults := self.flag.format_defaults():
            lines.append(defaults.rstrip("\n"))
        if self.long:
            lines.extend(("", self.long))
        if self.commands:
            lines.extend(("", "commands:", ""))
            width = settings.USAGE_NAME_WIDTH
            for command in self.commands:
                lines.append(f"\t{command.name:<{width}} {command.short}".rstrip())
        return "\n".join(lines) + "\n"

    def usage(self, prog: str | None = None, file=None):
        """Print the usage message, or call usage_func when it is set."""
        if self.usage_func is not None:
            self.usage_func()
            return
        print(self.format_usage(prog), end="", file=file or sys.stderr)

    def __str__(self):
        return self.name
