"""
abi_console.config - Console configuration constants.
"""

from .constants import (
    NAME_SEP,
    UP_COMMAND,
    HELP_COMMAND,
    EXIT_COMMAND,
    CANCEL_INPUT,
    OPEN_END_BLOCK,
    POLL_INTERVAL,
    HISTORY_FILE,
    REQUEST_TIMEOUT,
    EXIT_BAD_INTERFACE,
    EXIT_NODE_UNREACHABLE,
)

__all__ = [
    'NAME_SEP',
    'UP_COMMAND',
    'HELP_COMMAND',
    'EXIT_COMMAND',
    'CANCEL_INPUT',
    'OPEN_END_BLOCK',
    'POLL_INTERVAL',
    'HISTORY_FILE',
    'REQUEST_TIMEOUT',
    'EXIT_BAD_INTERFACE',
    'EXIT_NODE_UNREACHABLE',
]
