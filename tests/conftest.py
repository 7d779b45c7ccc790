"""Shared fixtures and helpers for pytest tests."""

from collections.abc import Generator
from typing import Any

import pytest

from subcmd import Command, exitstatus
from subcmd.constants import EXIT_SUCCESS


@pytest.fixture(autouse=True)
def reset_exit_status() -> Generator[None, Any, None]:
    """Start and finish every test with a clean process exit status."""
    exitstatus.reset()
    yield
    exitstatus.reset()


def noop(resolution, args) -> int:
    """Run nothing, successfully."""
    return EXIT_SUCCESS


def build(names: list[str]) -> Command:
    """
    Build a command tree from names and return its root.

    Each name after the first is the only subcommand of the previous one.
    Every command except the root is runnable.
    """
    child = None
    for index in range(len(names) - 1, -1, -1):
        command = Command(names[index], run=noop if index else None)
        if child is not None:
            command.commands = [child]
        child = command
    return child


def chain(names: list[str]) -> tuple[Command, ...]:
    """Build the chain of commands named names, root first."""
    return tuple(Command(name) for name in names)


def find(root: Command, depth: int) -> Command:
    """Find the subcommand of root at depth; depth 0 returns root."""
    command = root
    for __ in range(depth):
        command = command.commands[0]
    return command
