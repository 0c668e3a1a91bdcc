"""
Error types raised by the console.

Every command-level error is a ConsoleError. Command wrappers catch them and
print a single line, so none of them unwinds past the current command.
"""


class ConsoleError(Exception):
    """Base class for operator-visible console errors."""
    pass


class InterfaceError(ConsoleError):
    """Raised when the contract ABI is unreadable or malformed."""
    pass


class InvalidArgument(ConsoleError):
    """Raised when operator text can't be converted to a contract value."""
    pass


class WrongMutability(ConsoleError):
    """Raised when a method is invoked through the wrong call path."""
    pass


class Aborted(ConsoleError):
    """Raised when the operator cancels a multi-step prompt."""

    def __init__(self, msg: str = "aborted"):
        super().__init__(msg)


class SignerNotConfigured(ConsoleError):
    """Raised when a transaction is attempted without a signer."""

    def __init__(self, msg: str = "signer not configured, use signer/key first"):
        super().__init__(msg)


class ExternalCallFailure(ConsoleError):
    """Raised when the node, the contract binding or gas estimation fails."""
    pass


class DeliveryError(ConsoleError):
    """Raised when log delivery fails while listing or watching events."""
    pass


class PathError(ConsoleError):
    """Raised when a selected file path is missing or not a regular file."""
    pass
