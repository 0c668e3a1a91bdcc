"""
abi_console.repl - REPL components for the console

This package contains the modular components of the interactive console:
- context: Session context and prompt text
- menu: Menu tree built from the contract interface
- completer: Tab completion
- navigation: Menu navigation
- display: Help rendering
- commands/: Command handlers
- dispatcher: Main command dispatcher and REPL loop
"""

from .context import SessionContext, get_prompt_text
from .menu import LeafAction, MenuNode, MenuTree, build_menu_tree
from .navigation import navigate, go_up
from .completer import MenuCompleter
from .dispatcher import handle_command, run_repl

__all__ = [
    'SessionContext',
    'get_prompt_text',
    'LeafAction',
    'MenuNode',
    'MenuTree',
    'build_menu_tree',
    'navigate',
    'go_up',
    'MenuCompleter',
    'handle_command',
    'run_repl',
]
