"""
Session context and prompt utilities for the console.

This module contains:
- SessionContext: Current menu position, collaborators and signer state
- get_prompt_text: Generates the prompt string from the current menu path
"""

from dataclasses import dataclass, field
from typing import Callable

from abi_console.abi import ContractInterface
from abi_console.chain import ContractBinding, InterruptNotice, Signer
from abi_console.common import InputSession

from .menu import ROOT, MenuTree


@dataclass
class SessionContext:
    """State threaded through every command of a console session."""
    menu: MenuTree
    interface: ContractInterface
    binding: ContractBinding
    session: InputSession = field(default_factory=InputSession)
    signer: Signer = field(default_factory=Signer)  # Last one set wins
    interrupts: Callable[[], InterruptNotice] = InterruptNotice
    current: int = ROOT


def get_prompt_text(ctx: SessionContext) -> str:
    """Generate the prompt string based on current menu path."""
    return f"{ctx.menu.name(ctx.current)}> "
