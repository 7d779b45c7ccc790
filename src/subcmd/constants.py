"""Global constants for subcmd."""

# Exit status codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE_ERROR = 2  # the command line itself was wrong
