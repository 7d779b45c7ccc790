"""Flag sets for commands, built on argparse."""

import argparse
import contextlib
import os
import sys
from collections.abc import Iterator, Sequence

from subcmd import settings
from subcmd.errors import FlagError, HelpRequested

# Spellings of inline boolean flag values, as in -v=true.
TRUE_VALUES = ("1", "t", "T", "TRUE", "true", "True")
FALSE_VALUES = ("0", "f", "F", "FALSE", "false", "False")


class FlagSet(argparse.ArgumentParser):
    """
    The flags of a single command.

    Flags are declared with the usual `add_argument` API, for example:

        flag_set.add_argument("-v", action="store_true", help="verbose")

    Unlike `ArgumentParser.parse_args`, `parse` stops at the first argument
    that is not a flag, so anything after a subcommand name is left alone.
    Only optional arguments should be declared; positional arguments are
    returned by `args()` instead.
    """

    def __init__(self, name: str = "", *, output=None, **kwargs):
        kwargs.setdefault("add_help", False)
        kwargs.setdefault("allow_abbrev", False)
        super().__init__(prog=name or None, **kwargs)
        self.output = output
        self.values = argparse.Namespace()
        self._args: list[str] = []

    def parse(self, args: Sequence[str]) -> argparse.Namespace:
        """
        Parse flags from the front of args.

        Parsing stops at the first non-flag argument, at a lone "-", or after
        the "--" terminator. Each call replaces the previous values and
        remaining arguments.
        """
        self.values = argparse.Namespace()
        self._args = []
        flags, remaining = self._split_flags(list(args))
        try:
            self.values = self.parse_args(flags)
        except argparse.ArgumentError as error:
            self.error(str(error))
        self._args = remaining
        return self.values

    def args(self) -> list[str]:
        """Return the arguments remaining after the flags have been parsed."""
        return list(self._args)

    def arg(self, i: int) -> str:
        """Return the i'th remaining argument, or "" if it does not exist."""
        if 0 <= i < len(self._args):
            return self._args[i]
        return ""

    def narg(self) -> int:
        """Return the number of arguments remaining after the flags."""
        return len(self._args)

    def format_defaults(self) -> str:
        """Format the help of every declared flag."""
        formatter = self._get_formatter()
        formatter.add_arguments(self._actions)
        return formatter.format_help()

    def error(self, message: str):
        """Report a parse error according to the exit_on_error policy."""
        if self.exit_on_error:
            super().error(message)
        self.print_usage(sys.stderr)
        self._print_message(f"{self.prog}: error: {message}\n", sys.stderr)
        raise FlagError(message)

    def _help_requested(self):
        self.print_help(sys.stderr)
        if self.exit_on_error:
            self.exit(0)
        raise HelpRequested()

    def _print_message(self, message, file=None):
        super()._print_message(message, self.output or file)

    def _lookup_flag(self, option: str) -> tuple[str, argparse.Action | None]:
        """Find the action of option, accepting --name for a declared -name."""
        if action := self._option_string_actions.get(option):
            return option, action
        if option.startswith("--"):
            if action := self._option_string_actions.get(option[1:]):
                return option[1:], action
        return option, None

    def _split_flags(self, args: list[str]) -> tuple[list[str], list[str]]:
        """
        Split args into the leading flags and the remaining arguments.

        The flags are returned in a form argparse accepts: a single value is
        attached with "=" so it may start with "-", and an inline boolean
        value such as -v=false is resolved to the flag or to nothing.
        """
        flags = []
        index = 0
        while index < len(args):
            token = args[index]
            if token == settings.FLAG_TERMINATOR:
                return flags, args[index + 1 :]
            if len(token) < 2 or token[0] not in self.prefix_chars:  # noqa: PLR2004
                break
            option, equals, value = token.partition("=")
            option, action = self._lookup_flag(option)
            if action is None:
                if option in settings.HELP_FLAGS:
                    self._help_requested()
                self.error(f"flag provided but not defined: {option}")
            index += 1
            if equals and action.nargs == 0 and isinstance(action.const, bool):
                if self._parse_bool(option, value):
                    flags.append(option)
            elif equals:
                flags.append(f"{option}={value}")
            elif action.nargs is None and index < len(args):
                flags.append(f"{option}={args[index]}")
                index += 1
            else:
                count = _count_values(action, args[index:])
                flags.append(option)
                flags.extend(args[index : index + count])
                index += count
        return flags, args[index:]

    def _parse_bool(self, option: str, value: str) -> bool:
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        self.error(f"invalid boolean value {value!r} for {option}")


def _count_values(action: argparse.Action, rest: list[str]) -> int:
    """Count how many of the following arguments are values of action."""
    if action.nargs == 0:
        return 0
    if action.nargs is None:
        count = 1
    elif action.nargs == argparse.OPTIONAL:
        count = 1 if rest and not rest[0].startswith("-") else 0
    elif action.nargs in (argparse.ZERO_OR_MORE, argparse.ONE_OR_MORE):
        count = next(
            (i for i, value in enumerate(rest) if value.startswith("-")), len(rest)
        )
    elif isinstance(action.nargs, int):
        count = action.nargs
    else:
        count = len(rest)
    return min(count, len(rest))


@contextlib.contextmanager
def quiet(flag_set: FlagSet) -> Iterator[FlagSet]:
    """
    Make flag_set raise instead of exiting and discard everything it writes.

    The previous output and error policy are restored when the block exits,
    whether it returns or raises.
    """
    output, exit_on_error = flag_set.output, flag_set.exit_on_error
    with open(os.devnull, "w", encoding="utf-8") as discard:
        flag_set.output = discard
        flag_set.exit_on_error = False
        try:
            yield flag_set
        finally:
            flag_set.output = output
            flag_set.exit_on_error = exit_on_error
