"""Global configuration settings for subcmd."""

import logging

ENV_VAR_PREFIX = "SUBCMD_"  # used to construct env vars that override settings
LOG_LEVEL_ENV_VAR = f"{ENV_VAR_PREFIX}LOG_LEVEL"

DEFAULT_LOG_LEVEL = logging.WARNING

# Tokens that request help when a flag set does not define them itself.
HELP_FLAGS = ("-h", "-help", "--help")
FLAG_TERMINATOR = "--"

# Column width of command names in the "commands:" usage listing.
USAGE_NAME_WIDTH = 11
