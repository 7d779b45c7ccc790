"""Main command-line entrypoint."""

import logging
import os
import sys
from collections.abc import Sequence

from subcmd import constants, exitstatus, resolver, settings
from subcmd.command import Command
from subcmd.errors import HelpRequested, NoCommandError, UnknownCommandError
from subcmd.flagset import FlagSet

logger = logging.getLogger(__name__)


def add_logging_flags(flag_set: FlagSet):
    """Add the verbose and quiet flags used by configure_logging."""
    flag_set.add_argument(
        "-v",
        "-verbose",
        action="count",
        dest="verbosity",
        default=0,
        help="Increase verbose output",
    )
    flag_set.add_argument(
        "-q",
        "-quiet",
        action="store_true",
        dest="quiet",
        default=False,
        help="Quiet output (overrides `-v`/`-verbose`)",
    )


def get_default_log_level() -> int:
    """Get the default log level, which the environment may override."""
    if name := os.environ.get(settings.LOG_LEVEL_ENV_VAR):
        level = logging.getLevelName(name.upper())
        if isinstance(level, int):
            return level
        logger.warning(
            "Ignoring invalid %(env_var)s value %(value)r",
            {"env_var": settings.LOG_LEVEL_ENV_VAR, "value": name},
        )
    return settings.DEFAULT_LOG_LEVEL


def configure_logging(verbosity: int = 0, quiet: bool = False) -> int:
    """
    Configure the base logger.

    Returns the calculated level used to configure the logging module.
    """
    log_level = (
        logging.CRITICAL
        if quiet
        else max(logging.DEBUG, get_default_log_level() - (verbosity * 10))
    )
    log_format = (
        "%(asctime)s %(levelname)s: %(message)s"
        if verbosity > 2  # noqa: PLR2004
        else "%(levelname)s: %(message)s"
    )
    logging.basicConfig(
        format=log_format,
        level=log_level,
        encoding="utf-8",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return log_level


def exit_status_of(result) -> int:
    """Convert the value returned by a command's run to an exit status."""
    if result is None or result is True:
        return constants.EXIT_SUCCESS
    if result is False:
        return constants.EXIT_FAILURE
    return int(result)


def invoke(resolution: resolver.Resolution) -> int:
    """Run the resolved command and return its exit status."""
    command = resolution.command
    if not command.runnable:
        logger.error("%(command)s: command is not runnable", {"command": resolution})
        return constants.EXIT_USAGE_ERROR

    try:
        return exit_status_of(command.run(resolution, resolution.args))
    except SystemExit:
        raise
    except KeyboardInterrupt:  # can occur via control-c input
        print()  # new line for cleaner output before logger
        logger.error("Exiting due to keyboard interrupt.")
    except EOFError:  # can occur via control-d input
        print()  # new line for cleaner output before logger
        logger.error("Input closed unexpectedly.")
    except Exception as e:  # noqa: BLE001
        logger.exception(e)
    return constants.EXIT_FAILURE


def run(root: Command, argv: Sequence[str] | None = None) -> int:
    """
    Run the subcommand of root selected by the command line.

    argv defaults to sys.argv[1:]. Returns the exit status: the value
    returned by the command, or EXIT_USAGE_ERROR when the command line
    could not be resolved.
    """
    if argv is None:
        argv = sys.argv[1:]

    resolution = resolver.parse(root, argv)
    error = resolution.error
    if error is None:
        return invoke(resolution)

    if isinstance(error, UnknownCommandError):
        logger.error(
            "%(root)s %(name)s: unknown command", {"root": root, "name": error.name}
        )
        logger.error("Run '%(root)s -help' for usage.", {"root": root})
    elif isinstance(error, (NoCommandError, HelpRequested)):
        resolution.usage()
    else:
        logger.error("%(command)s: %(error)s", {"command": resolution, "error": error})
        resolution.usage()
    return constants.EXIT_USAGE_ERROR


def main(root: Command, argv: Sequence[str] | None = None):
    """Run the command line and exit the process with its exit status."""
    exitstatus.set_exit_status(run(root, argv))
    exitstatus.exit()
