"""Resolve a command line to the command it invokes."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from subcmd.command import Command
from subcmd.errors import (
    CommandLineError,
    FlagError,
    HelpRequested,
    NoCommandError,
    UnknownCommandError,
)
from subcmd.flagset import quiet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """
    The result of resolving a command line.

    chain holds the matched commands from the root down to the selected
    command. args are the arguments left for the selected command. error is
    None when the command line was resolved successfully.
    """

    chain: tuple[Command, ...]
    args: list[str] = field(default_factory=list)
    error: CommandLineError | None = None

    @property
    def command(self) -> Command:
        """Get the selected command."""
        return self.chain[-1]

    @property
    def root(self) -> Command:
        """Get the main command."""
        return self.chain[0]

    @property
    def parent(self) -> Command | None:
        """Get the command the selected command was resolved from."""
        return self.chain[-2] if len(self.chain) > 1 else None

    @property
    def long_name(self) -> str:
        """Get the command's long name, without the main command name."""
        return " ".join(command.name for command in self.chain[1:])

    @property
    def display_name(self) -> str:
        """Get the command's full name, including the main command name."""
        return " ".join(command.name for command in self.chain)

    @property
    def ok(self) -> bool:
        """Report whether the command line was resolved without errors."""
        return self.error is None

    def usage(self, file=None):
        """Print the usage message of the selected command."""
        self.command.usage(prog=self.display_name, file=file)

    def __str__(self):
        return self.display_name


def parse(root: Command, argv: Sequence[str]) -> Resolution:
    """
    Parse the command line and select the command to run.

    argv must not include the program name. Flags before the command name
    are parsed by the root's flag set; flags after it by the command's own
    flag set, unless the command does its own flag parsing. Errors are
    returned on the resolution, never raised, and the error attributed to
    the command whose flags failed to parse.
    """
    with quiet(root.flag):
        try:
            root.flag.parse(argv)
        except (FlagError, HelpRequested) as error:
            logger.debug("%(root)s: %(error)s", {"root": root, "error": error})
            return Resolution((root,), error=error)

    args = root.flag.args()
    if not args:
        return Resolution((root,), error=NoCommandError())

    name, rest = args[0], args[1:]
    command = root.lookup(name)
    if command is None:
        logger.debug(
            "%(root)s: no runnable command %(name)r", {"root": root, "name": name}
        )
        return Resolution((root,), args, UnknownCommandError(name))

    chain = (root, command)
    logger.debug(
        "Resolved command %(command)r", {"command": " ".join(map(str, chain))}
    )
    if command.custom_flags:
        return Resolution(chain, list(rest))

    with quiet(command.flag):
        try:
            command.flag.parse(rest)
        except (FlagError, HelpRequested) as error:
            logger.debug(
                "%(command)s: %(error)s", {"command": command, "error": error}
            )
            return Resolution(chain, error=error)

    return Resolution(chain, command.flag.args())
