"""
Display helpers for the console.

Renders menu help with rich.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .menu import MenuTree

console = Console()


def show_help(menu: MenuTree, index: int) -> None:
    """Print every entry of a menu with its description."""
    table = Table(show_header=False, box=None, padding=(0, 4, 0, 0))
    table.add_column("command", style="bold")
    table.add_column("description")
    for child in menu.children(index):
        node = menu.node(child)
        table.add_row(Text(node.segment), Text(node.description))
    console.print(table)
