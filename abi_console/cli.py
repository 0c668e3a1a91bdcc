#!/usr/bin/env python3
"""
cli.py - Entry point for the contract console

Parses the command line, loads the ABI, connects to the node and starts the
interactive console.

Usage: abi-console <node_url> <address> <abi_file>
"""

import argparse
import sys
from pathlib import Path

from web3 import Web3

from abi_console.abi import load_interface
from abi_console.chain import Web3ContractBinding, connect
from abi_console.common import ExternalCallFailure, InterfaceError, error, info
from abi_console.config import (
    EXIT_BAD_INTERFACE,
    EXIT_NODE_UNREACHABLE,
    HISTORY_FILE,
    REQUEST_TIMEOUT,
)
from abi_console.repl import SessionContext, build_menu_tree, run_repl


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="abi-console",
        description="Interactive console for calling a smart contract through its ABI",
    )
    parser.add_argument("node_url", help="node URL (http(s)://, ws(s):// or IPC path)")
    parser.add_argument("address", help="contract address")
    parser.add_argument("abi_file", type=Path, help="ABI JSON file or compiler artifact")
    parser.add_argument("--timeout", type=int, default=REQUEST_TIMEOUT,
                        help=f"node request timeout in seconds (default: {REQUEST_TIMEOUT})")
    parser.add_argument("--no-history", action="store_true",
                        help="don't read or write the prompt history file")

    args = parser.parse_args(argv)
    if not Web3.is_address(args.address):
        parser.error(f"invalid contract address: {args.address}")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        interface = load_interface(args.abi_file)
    except InterfaceError as e:
        error(f"can't read abi: {e}")
        return EXIT_BAD_INTERFACE

    try:
        w3 = connect(args.node_url, args.timeout)
    except ExternalCallFailure as e:
        error(f"can't dial client: {e}")
        return EXIT_NODE_UNREACHABLE

    info(f"Loaded {len(interface.methods)} methods and {len(interface.events)} events from {args.abi_file}")

    ctx = SessionContext(
        menu=build_menu_tree(interface),
        interface=interface,
        binding=Web3ContractBinding(w3, args.address, interface),
    )
    return run_repl(ctx, None if args.no_history else HISTORY_FILE)


if __name__ == "__main__":
    sys.exit(main())
