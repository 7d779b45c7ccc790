"""Process exit status and functions to run at exit."""

import logging
import sys
import threading
from collections.abc import Callable

from subcmd import constants

logger = logging.getLogger(__name__)


class ExitController:
    """
    Track the exit status of the process.

    The status only ever increases: setting a lower status than the current
    one has no effect. Functions registered with at_exit are called in the
    order they were registered, just before exiting.
    """

    def __init__(self):
        self._lock = threading.Lock()  # guards _status
        self._status: int = constants.EXIT_SUCCESS
        self._at_exit: list[Callable[[], None]] = []

    @property
    def status(self) -> int:
        """Get the current exit status."""
        return self._status

    def get_exit_status(self) -> int:
        """Get the current exit status."""
        return self._status

    def set_exit_status(self, status: int):
        """Raise the exit status to status, if it is higher than the current one."""
        with self._lock:
            if self._status < status:
                self._status = status

    def at_exit(self, func: Callable[[], None]):
        """Call func when exit is called."""
        self._at_exit.append(func)

    def exit(self):
        """Call every function registered with at_exit, then exit the process."""
        for func in list(self._at_exit):
            func()
        sys.exit(self._status)

    def errorf(self, message: str, *args):
        """Log the message as an error and raise the exit status to 1."""
        logger.error(message, *args)
        self.set_exit_status(constants.EXIT_FAILURE)

    def fatalf(self, message: str, *args):
        """Log the message as an error and exit with status 1."""
        self.errorf(message, *args)
        self.exit()

    def exit_if_errors(self):
        """Exit if the current exit status is not 0."""
        if self._status != constants.EXIT_SUCCESS:
            self.exit()

    def reset(self):
        """Forget the exit status and the functions registered with at_exit."""
        with self._lock:
            self._status = constants.EXIT_SUCCESS
        self._at_exit.clear()


controller = ExitController()

at_exit = controller.at_exit
exit = controller.exit  # noqa: A001
errorf = controller.errorf
fatalf = controller.fatalf
exit_if_errors = controller.exit_if_errors
set_exit_status = controller.set_exit_status
get_exit_status = controller.get_exit_status
reset = controller.reset
