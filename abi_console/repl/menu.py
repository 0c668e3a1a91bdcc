"""
Menu tree for the console.

The menu is built once from the contract interface and never changes.
Nodes live in a flat list and refer to each other by index; the root is
index 0 and has no segment.

    constant/<method>      constant calls
    transact/<method>      transactions
    events/list/<event>    past events
    events/watch/<event>   live events
    signer/key, show       signer configuration

Every menu ends with "..", "help" and "exit", after its sorted entries.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from abi_console.abi import ContractInterface, EventSpec, MethodSpec
from abi_console.config import EXIT_COMMAND, HELP_COMMAND, NAME_SEP, UP_COMMAND


class LeafAction(Enum):
    NONE = "none"
    CONSTANT_CALL = "constant_call"
    TRANSACTION = "transaction"
    EVENT_LIST = "event_list"
    EVENT_WATCH = "event_watch"
    BUILTIN = "builtin"


ROOT = 0

TAIL_COMMANDS = [
    (UP_COMMAND, "move to the parent menu"),
    (HELP_COMMAND, "show the help for the current menu"),
    (EXIT_COMMAND, "exit the interactive console"),
]


@dataclass
class MenuNode:
    """A menu entry. Entries without children are commands."""
    segment: str
    description: str = ""
    parent: Optional[int] = None
    children: list[int] = field(default_factory=list)
    action: LeafAction = LeafAction.NONE


class MenuTree:
    """Arena of menu nodes addressed by index."""

    def __init__(self):
        self.nodes: list[MenuNode] = [MenuNode(segment="")]

    def add(self, parent: int, segment: str, description: str = "",
            action: LeafAction = LeafAction.NONE) -> int:
        index = len(self.nodes)
        self.nodes.append(MenuNode(segment, description, parent, [], action))
        self.nodes[parent].children.append(index)
        return index

    def add_tail(self, parent: int) -> None:
        for segment, description in TAIL_COMMANDS:
            self.add(parent, segment, description, LeafAction.BUILTIN)

    def node(self, index: int) -> MenuNode:
        return self.nodes[index]

    def parent(self, index: int) -> Optional[int]:
        return self.nodes[index].parent

    def children(self, index: int) -> list[int]:
        return self.nodes[index].children

    def has_children(self, index: int) -> bool:
        return bool(self.nodes[index].children)

    def name(self, index: int) -> str:
        """Full path of a node, e.g. "events/list/Transfer"."""
        parts = []
        current: Optional[int] = index
        while current is not None:
            node = self.nodes[current]
            if node.segment:
                parts.append(node.segment)
            current = node.parent
        return NAME_SEP.join(reversed(parts))

    def find_child(self, index: int, segment: str) -> Optional[int]:
        for child in self.nodes[index].children:
            if self.nodes[child].segment == segment:
                return child
        return None

    def completions(self, index: int, prefix: str) -> list[int]:
        """Children whose segment starts with prefix, in menu order."""
        return [c for c in self.nodes[index].children
                if self.nodes[c].segment.startswith(prefix)]


def _add_methods(tree: MenuTree, parent: int, methods: list[MethodSpec], action: LeafAction) -> None:
    for method in sorted(methods, key=lambda m: m.name):
        tree.add(parent, method.name, method.describe(), action)
    tree.add_tail(parent)


def _add_events(tree: MenuTree, parent: int, events: list[EventSpec]) -> None:
    branches = [
        ("list", "list past events", LeafAction.EVENT_LIST),
        ("watch", "watch new events", LeafAction.EVENT_WATCH),
    ]
    for segment, description, action in branches:
        branch = tree.add(parent, segment, description)
        for event in sorted(events, key=lambda e: e.name):
            tree.add(branch, event.name, event.describe(), action)
        tree.add_tail(branch)
    tree.add_tail(parent)


def _add_signer(tree: MenuTree, parent: int) -> None:
    tree.add(parent, "key", "sign with a key file", LeafAction.BUILTIN)
    tree.add(parent, "show", "show the configured signer", LeafAction.BUILTIN)
    tree.add_tail(parent)


def build_menu_tree(interface: ContractInterface) -> MenuTree:
    """Build the menu tree for a contract interface."""
    tree = MenuTree()
    constant = [m for m in interface.methods if m.constant]
    transact = [m for m in interface.methods if not m.constant]

    sections = [
        ("constant", "make a call to a constant method",
         lambda n: _add_methods(tree, n, constant, LeafAction.CONSTANT_CALL)),
        ("events", "list/watch events",
         lambda n: _add_events(tree, n, interface.events)),
        ("signer", "configure signer",
         lambda n: _add_signer(tree, n)),
        ("transact", "make a transaction to a method",
         lambda n: _add_methods(tree, n, transact, LeafAction.TRANSACTION)),
    ]
    for segment, description, build in sorted(sections, key=lambda s: s[0]):
        build(tree.add(ROOT, segment, description))
    tree.add_tail(ROOT)
    return tree
