"""
Configuration constants for the console.

Menu layout, prompt sentinels and paths used across the package.
"""

import os
from pathlib import Path


# Menu layout
NAME_SEP = "/"
UP_COMMAND = ".."
HELP_COMMAND = "help"
EXIT_COMMAND = "exit"

# Prompt sentinels
CANCEL_INPUT = UP_COMMAND
OPEN_END_BLOCK = -1  # end block meaning "no upper bound"

# Live event watching
POLL_INTERVAL = float(os.environ.get("ABI_CONSOLE_POLL_INTERVAL", "2.0"))

# Prompt history
HISTORY_FILE = Path(os.environ.get("ABI_CONSOLE_HISTORY", Path.home() / ".abi_console_history"))

# Node connection
REQUEST_TIMEOUT = 30

# Process exit statuses for fatal startup errors
EXIT_BAD_INTERFACE = 3
EXIT_NODE_UNREACHABLE = 4
