"""
Tab completion for the console.

Completes the entries of the current menu using prompt_toolkit.
"""

from prompt_toolkit.completion import Completer, Completion

from .context import SessionContext


class MenuCompleter(Completer):
    """Completer offering the children of the current menu node."""

    def __init__(self, ctx: SessionContext):
        self.ctx = ctx

    def get_completions(self, document, complete_event):
        word = document.text_before_cursor.lstrip()
        menu = self.ctx.menu
        for index in menu.completions(self.ctx.current, word):
            node = menu.node(index)
            yield Completion(
                node.segment,
                start_position=-len(word),
                display_meta=node.description,
            )
