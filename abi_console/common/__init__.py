"""
abi_console.common - Shared utilities for the console

This module provides:
- colors: ANSI color codes and message functions
- errors: Console error types
- prompts: Interactive prompt session
"""

from .colors import Colors, log, warn, error, info, detail
from .errors import (
    ConsoleError,
    InterfaceError,
    InvalidArgument,
    WrongMutability,
    Aborted,
    SignerNotConfigured,
    ExternalCallFailure,
    DeliveryError,
    PathError,
)
from .prompts import InputSession, read_line

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info', 'detail',
    'ConsoleError', 'InterfaceError', 'InvalidArgument', 'WrongMutability',
    'Aborted', 'SignerNotConfigured', 'ExternalCallFailure', 'DeliveryError',
    'PathError',
    'InputSession', 'read_line',
]
