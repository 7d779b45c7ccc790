"""Test the subcmd.errors module."""

import pytest

from subcmd import errors


@pytest.mark.parametrize(
    "error",
    (
        errors.NoCommandError(),
        errors.UnknownCommandError("bogus"),
        errors.HelpRequested(),
        errors.FlagError("flag provided but not defined: -x"),
    ),
)
def test_errors_share_base_class(error):
    """Test every resolution error can be handled as a CommandLineError."""
    assert isinstance(error, errors.CommandLineError)


def test_help_requested_is_not_a_flag_error():
    """Test a help request is distinguishable from a flag error."""
    assert not isinstance(errors.HelpRequested(), errors.FlagError)


def test_unknown_command_error(faker):
    """Test the unknown command name is kept on the error."""
    name = faker.slug()
    error = errors.UnknownCommandError(name)
    assert error.name == name
    assert str(error) == f"unknown command {name!r}"


def test_default_messages():
    """Test the default error messages."""
    assert str(errors.NoCommandError()) == "no command"
    assert str(errors.HelpRequested()) == "help requested"
