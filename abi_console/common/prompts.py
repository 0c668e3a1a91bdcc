"""
Interactive prompt utilities for the console.

InputSession wraps a line-input function (prompt_toolkit by default) and
provides the typed prompts used while collecting call arguments, event
filters and transaction options.

Prompts that can be cancelled with ".." return a (value, committed) pair.
When committed is False the caller must abandon the whole operation.
Ctrl+C or Ctrl+D at any prompt raises Aborted.
"""

import re
from pathlib import Path
from typing import Any, Callable, Optional

from prompt_toolkit import prompt
from prompt_toolkit.completion import Completer, PathCompleter, WordCompleter

from abi_console.config import CANCEL_INPUT, HELP_COMMAND

from .colors import warn
from .errors import Aborted, InvalidArgument, PathError

YES_NO = {"yes": True, "no": False}

_DECIMAL_RE = re.compile(r"[-+]?[0-9]+")


def parse_decimal(value: str) -> int:
    """Parse a plain decimal integer. Raises ValueError on anything else."""
    if not _DECIMAL_RE.fullmatch(value):
        raise ValueError(f"invalid decimal integer: {value!r}")
    return int(value)


def read_line(message: str, completer: Optional[Completer] = None, is_password: bool = False) -> str:
    """Read one line from the terminal."""
    return prompt(message, completer=completer, is_password=is_password)


class InputSession:
    """Typed, blocking operator prompts."""

    def __init__(self, reader: Callable[..., str] = read_line):
        self.reader = reader

    def _read(self, message: str, completer: Optional[Completer] = None, is_password: bool = False) -> str:
        try:
            return self.reader(message, completer=completer, is_password=is_password)
        except (KeyboardInterrupt, EOFError):
            print()
            print("aborted")
            raise Aborted()

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    def multi_choice(
        self,
        message: str,
        default: str,
        choices: list[str],
        help_fn: Optional[Callable[[list[str]], None]] = None,
    ) -> tuple[str, bool]:
        """
        Prompt for one of a fixed set of choices.

        Args:
            message: Prompt text, "{}" is replaced by the default
            default: Returned on blank input
            choices: Allowed answers
            help_fn: Called with the choices when the operator types "help"

        Returns:
            (choice, committed); committed is False if the operator typed ".."
        """
        completer = WordCompleter(list(choices) + [CANCEL_INPUT, HELP_COMMAND])
        while True:
            answer = self._read(message.format(default), completer=completer).strip()
            if not answer:
                return default, True
            if answer == CANCEL_INPUT:
                print("aborted")
                return "", False
            if answer == HELP_COMMAND:
                if help_fn:
                    help_fn(list(choices))
                continue
            if answer in choices:
                return answer, True
            warn(f"invalid choice: {answer}")

    def yes_no(self, message: str, default: bool) -> tuple[bool, bool]:
        """Prompt for yes/no. Returns (answer, committed)."""
        answer, ok = self.multi_choice(
            message,
            "yes" if default else "no",
            ["no", "yes"],
            lambda _: print("choose yes or no"),
        )
        if not ok:
            return False, False
        return YES_NO[answer], True

    def text(self, message: str) -> str:
        """Prompt for free text."""
        return self._read(message)

    def int_with_default(self, message: str, default: int) -> tuple[int, bool]:
        """Prompt for an integer. Blank returns the default, ".." cancels."""
        while True:
            value = self._read(message.format(default)).strip()
            if not value:
                return default, True
            if value == CANCEL_INPUT:
                print("aborted")
                return 0, False
            try:
                return parse_decimal(value), True
            except ValueError:
                warn(f"{value!r} is not a number")

    def big_int(self, message: str) -> int:
        """Prompt for an arbitrary-precision integer until one parses."""
        while True:
            value = self._read(message).strip()
            if not value:
                continue
            try:
                return parse_decimal(value)
            except ValueError:
                warn(f"{value!r} is not a number")

    def big_int_with_default(self, message: str, default: int) -> int:
        """Prompt for an arbitrary-precision integer, blank returns the default."""
        while True:
            value = self._read(message.format(default)).strip()
            if not value:
                return default
            try:
                return parse_decimal(value)
            except ValueError:
                warn(f"{value!r} is not a number")

    def path(self, message: str, root: Path, must_exist: bool = False) -> str:
        """
        Prompt for a file path, completing entries below root.

        Relative answers are resolved against root. Blank input returns "".

        Raises:
            PathError: must_exist is set and the path is missing or not a file
        """
        completer = PathCompleter(get_paths=lambda: [str(root)], expanduser=True)
        answer = self._read(message, completer=completer).strip()
        if not answer:
            return ""
        path = Path(answer).expanduser()
        if not path.is_absolute():
            path = Path(root) / path
        if must_exist:
            if not path.exists():
                raise PathError(f"{path}: no such file")
            if not path.is_file():
                raise PathError(f"{path}: not a file")
        return str(path)

    def password(self, message: str = "password: ") -> str:
        """Prompt for a password without echoing it."""
        return self._read(message, is_password=True)

    # -------------------------------------------------------------------------
    # Argument and filter collection
    # -------------------------------------------------------------------------

    def collect_arguments(self, args) -> list[Any]:
        """
        Prompt for each argument in declared order.

        Blank input re-prompts the same argument. A value that doesn't parse
        abandons the whole collection.

        Raises:
            InvalidArgument: on the first value that doesn't parse
        """
        from abi_console.abi.codec import encode

        values = []
        for arg in args:
            while True:
                text = self.text(f"{arg.name} ({arg.type.canonical}): ")
                if not text.strip():
                    print("....")
                    continue
                values.append(encode(text, arg.type))
                break
        return values

    def collect_filters(self, args) -> list[Optional[Any]]:
        """
        Prompt for a match value on each indexed argument.

        Returns one entry per indexed argument, None meaning no constraint.
        Blank input means no constraint; a value that doesn't parse
        re-prompts the same field.

        Raises:
            Aborted: the operator cancelled a filter question
        """
        from abi_console.abi.codec import encode

        filters = []
        for arg in args:
            if not arg.indexed:
                continue
            question = f"field {arg.name} ({arg.type.canonical}) is indexed. filter? ({{}}): "
            wanted, ok = self.yes_no(question, False)
            if not ok:
                raise Aborted()
            if not wanted:
                filters.append(None)
                continue
            while True:
                text = self.text("field value (none): ")
                if not text.strip():
                    filters.append(None)
                    break
                try:
                    filters.append(encode(text, arg.type))
                    break
                except InvalidArgument as e:
                    warn(f"can't parse value: {e}")
        return filters
