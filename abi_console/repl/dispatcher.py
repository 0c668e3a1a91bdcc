"""
Command dispatcher and main loop for the console.
"""

from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory
from prompt_toolkit.styles import Style

from abi_console.common import Colors, warn
from abi_console.config import EXIT_COMMAND, HELP_COMMAND, UP_COMMAND

from .commands import (
    cmd_constant,
    cmd_list_events,
    cmd_signer_key,
    cmd_signer_show,
    cmd_transact,
    cmd_watch_events,
)
from .completer import MenuCompleter
from .context import SessionContext, get_prompt_text
from .display import show_help
from .menu import LeafAction
from .navigation import go_up, navigate

CONSOLE_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
})

# Builtin commands by full menu path
BUILTIN_COMMANDS = {
    "signer/key": cmd_signer_key,
    "signer/show": cmd_signer_show,
}


def dispatch_leaf(ctx: SessionContext, index: int) -> None:
    """Run the command behind a menu entry without children."""
    node = ctx.menu.node(index)

    if node.action is LeafAction.CONSTANT_CALL:
        cmd_constant(ctx, node.segment)
    elif node.action is LeafAction.TRANSACTION:
        cmd_transact(ctx, node.segment)
    elif node.action is LeafAction.EVENT_LIST:
        cmd_list_events(ctx, node.segment)
    elif node.action is LeafAction.EVENT_WATCH:
        cmd_watch_events(ctx, node.segment)
    else:
        name = ctx.menu.name(index)
        handler = BUILTIN_COMMANDS.get(name)
        if handler is None:
            warn(f"command not defined: {name}")
            return
        handler(ctx)


def handle_command(ctx: SessionContext, line: str) -> bool:
    """
    Handle one input line. Returns False if the console should exit.
    """
    command = line.strip()

    if command == EXIT_COMMAND:
        return False

    if command == HELP_COMMAND:
        show_help(ctx.menu, ctx.current)
        return True

    if command == UP_COMMAND:
        go_up(ctx)
        return True

    if not command:
        return True

    if navigate(ctx, command):
        return True

    child = ctx.menu.find_child(ctx.current, command)
    if child is None:
        warn(f"unknown command: {command}")
        print("Type 'help' for available commands")
        return True

    dispatch_leaf(ctx, child)
    return True


def run_repl(ctx: SessionContext, history_file: Optional[Path] = None) -> int:
    """Main console loop."""
    print()
    print(f"{Colors.BOLD}Contract Console{Colors.NC}")
    print("Type 'help' for commands, 'exit' to quit")
    print()

    history = FileHistory(str(history_file)) if history_file else InMemoryHistory()
    session = PromptSession(
        history=history,
        completer=MenuCompleter(ctx),
        style=CONSOLE_STYLE,
    )

    while True:
        try:
            line = session.prompt(get_prompt_text(ctx))
            if not handle_command(ctx, line):
                break
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break

    print("Goodbye!")
    return 0
