"""
ANSI color codes and message helpers for the console.

Every operator-facing line goes through one of these helpers so tags and
colors stay consistent across commands.
"""


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    NC = "\033[0m"  # No Color / Reset


def _emit(color: str, tag: str, msg: str) -> None:
    print(f"{color}{tag}{Colors.NC} {msg}")


def log(msg: str) -> None:
    """Print a success message in green."""
    _emit(Colors.GREEN, "[+]", msg)


def warn(msg: str) -> None:
    """Print a warning message in yellow."""
    _emit(Colors.YELLOW, "[!]", msg)


def error(msg: str) -> None:
    """Print an error message in red."""
    _emit(Colors.RED, "[ERROR]", msg)


def info(msg: str) -> None:
    """Print an informational message in cyan."""
    _emit(Colors.CYAN, "[i]", msg)


def detail(msg: str) -> None:
    """Print an indented result line (call results, log entries)."""
    print(f"  {msg}")
