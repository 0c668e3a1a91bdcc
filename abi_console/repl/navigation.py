"""
Navigation utilities for the console.

This module moves the current position within the menu tree.
"""

from .context import SessionContext


def navigate(ctx: SessionContext, target: str) -> bool:
    """
    Descend into a submenu. Returns True if navigation succeeded.

    Args:
        ctx: Current session context
        target: Segment of a child of the current menu

    Returns:
        True if target is a child with its own entries, False otherwise
    """
    child = ctx.menu.find_child(ctx.current, target)
    if child is None or not ctx.menu.has_children(child):
        return False
    ctx.current = child
    return True


def go_up(ctx: SessionContext) -> None:
    """Move to the parent menu, staying put at the root."""
    parent = ctx.menu.parent(ctx.current)
    if parent is not None:
        ctx.current = parent
