"""A single command with many subcommands, each with its own flags."""

from subcmd.cli import main, run
from subcmd.command import Command
from subcmd.constants import EXIT_FAILURE, EXIT_SUCCESS, EXIT_USAGE_ERROR
from subcmd.errors import (
    CommandLineError,
    FlagError,
    HelpRequested,
    NoCommandError,
    UnknownCommandError,
)
from subcmd.flagset import FlagSet, quiet
from subcmd.resolver import Resolution, parse

__all__ = [
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "EXIT_USAGE_ERROR",
    "Command",
    "CommandLineError",
    "FlagError",
    "FlagSet",
    "HelpRequested",
    "NoCommandError",
    "Resolution",
    "UnknownCommandError",
    "main",
    "parse",
    "quiet",
    "run",
]
