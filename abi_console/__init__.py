"""
abi_console - Interactive console for smart-contract interfaces

This package turns a contract ABI into a navigable command menu and drives
constant calls, transactions and event queries against an Ethereum node.
"""

__version__ = "1.0.0"
