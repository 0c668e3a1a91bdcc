"""
abi_console.chain - Chain-facing collaborators.

This package contains:
- signer: Transaction signer state and key file loading
- binding: Contract binding interface and its web3 implementation
- interrupt: Interrupt notice used by live event watching
"""

from .signer import Signer, SignerKind, signer_from_key_file
from .binding import (
    TransactionOptions,
    LogEntry,
    LogQuery,
    LogSubscription,
    ContractBinding,
    Web3ContractBinding,
    argument_filters,
    connect,
)
from .interrupt import InterruptNotice

__all__ = [
    'Signer', 'SignerKind', 'signer_from_key_file',
    'TransactionOptions', 'LogEntry', 'LogQuery', 'LogSubscription',
    'ContractBinding', 'Web3ContractBinding', 'argument_filters', 'connect',
    'InterruptNotice',
]
