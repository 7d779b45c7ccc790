"""
Errors produced while resolving a command line.

The resolver returns these as values on its result instead of raising them,
so the driver can always attribute a diagnostic to the command involved.

Hierarchy:
- CommandLineError
    ├── NoCommandError
    ├── UnknownCommandError
    ├── HelpRequested
    └── FlagError
"""


class CommandLineError(Exception):
    """Base exception for command line resolution errors."""


class NoCommandError(CommandLineError):
    """Exception used when no command was provided."""

    def __init__(self, message: str = "no command"):
        super().__init__(message)


class UnknownCommandError(CommandLineError):
    """Exception used when the named command does not exist or is not runnable."""

    def __init__(self, name: str):
        super().__init__(f"unknown command {name!r}")
        self.name = name


class HelpRequested(CommandLineError):
    """Exception used when -h or -help was given but not defined as a flag."""

    def __init__(self, message: str = "help requested"):
        super().__init__(message)


class FlagError(CommandLineError):
    """Exception used for any other failure while parsing flags."""
