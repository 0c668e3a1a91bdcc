"""
Contract binding.

ContractBinding is what the console needs from the chain: constant calls,
signed transactions, a gas price suggestion, and event logs either as a
bounded query over past blocks or as a live subscription. The web3
implementation talks to a node over HTTP, WebSocket or IPC.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from requests import RequestException
from web3 import HTTPProvider, IPCProvider, LegacyWebSocketProvider, Web3
from web3.exceptions import Web3Exception
from websockets.exceptions import WebSocketException

from abi_console.abi import ContractInterface, EventSpec, MethodSpec
from abi_console.common import DeliveryError, ExternalCallFailure, warn

from .signer import Signer

# Errors raised by web3 and its transports
NODE_ERRORS = (Web3Exception, RequestException, WebSocketException, ValueError, OSError)


@dataclass
class TransactionOptions:
    """Per-attempt transaction options. None means let the node estimate."""
    value: Optional[int] = None
    gas_price: Optional[int] = None
    gas_limit: Optional[int] = None


@dataclass
class LogEntry:
    """A decoded event log."""
    block_number: int
    values: dict[str, Any] = field(default_factory=dict)


class LogQuery(ABC):
    """Bounded query over logs already on chain."""

    @abstractmethod
    def entries(self) -> Iterator[LogEntry]:
        """Yield the entries available now, without waiting for more."""

    @abstractmethod
    def release(self) -> None:
        """Release the query on the node."""


class LogSubscription(ABC):
    """Unbounded subscription to new logs."""

    @abstractmethod
    def poll(self) -> list[LogEntry]:
        """Return entries that arrived since the last poll."""

    @abstractmethod
    def unsubscribe(self) -> None:
        """Release the subscription on the node."""


class ContractBinding(ABC):
    """Operations against one deployed contract."""

    @abstractmethod
    def call(self, method: MethodSpec, args: list) -> Any:
        """Run a constant method and return its raw result."""

    @abstractmethod
    def transact(self, method: MethodSpec, args: list, options: TransactionOptions, signer: Signer) -> str:
        """Sign and submit one transaction, returning its hash."""

    @abstractmethod
    def suggest_gas_price(self) -> int:
        """Return the node's suggested gas price in wei."""

    @abstractmethod
    def filter_logs(self, event: EventSpec, filters: list, start: int, end: Optional[int]) -> LogQuery:
        """Open a query over past logs. end=None means no upper bound."""

    @abstractmethod
    def watch_logs(self, event: EventSpec, filters: list) -> LogSubscription:
        """Open a live subscription to new logs."""


def argument_filters(event: EventSpec, filters: list) -> dict[str, Any]:
    """Map per-indexed-argument filters to web3 argument_filters."""
    return {
        arg.name: value
        for arg, value in zip(event.indexed_inputs, filters)
        if value is not None
    }


def connect(url: str, timeout: int) -> Web3:
    """
    Connect to a node.

    Raises:
        ExternalCallFailure: the node is unreachable
    """
    if url.startswith(("http://", "https://")):
        provider = HTTPProvider(url, request_kwargs={"timeout": timeout})
    elif url.startswith(("ws://", "wss://")):
        provider = LegacyWebSocketProvider(url, websocket_timeout=timeout)
    else:
        provider = IPCProvider(url, timeout=timeout)

    w3 = Web3(provider)
    try:
        connected = w3.is_connected()
    except NODE_ERRORS as e:
        raise ExternalCallFailure(f"can't connect to {url}: {e}")
    if not connected:
        raise ExternalCallFailure(f"can't connect to {url}")
    return w3


def _to_entry(log) -> LogEntry:
    return LogEntry(block_number=log["blockNumber"], values=dict(log["args"]))


class _FilterLogs:
    """Shared handling of an installed web3 log filter."""

    def __init__(self, w3: Web3, log_filter):
        self.w3 = w3
        self.log_filter = log_filter

    def _release(self) -> None:
        try:
            self.w3.eth.uninstall_filter(self.log_filter.filter_id)
        except NODE_ERRORS as e:
            warn(f"can't release log filter: {e}")


class Web3LogQuery(_FilterLogs, LogQuery):

    def entries(self) -> Iterator[LogEntry]:
        try:
            logs = self.log_filter.get_all_entries()
        except NODE_ERRORS as e:
            raise DeliveryError(str(e))
        for log in logs:
            yield _to_entry(log)

    def release(self) -> None:
        self._release()


class Web3LogSubscription(_FilterLogs, LogSubscription):

    def poll(self) -> list[LogEntry]:
        try:
            return [_to_entry(log) for log in self.log_filter.get_new_entries()]
        except NODE_ERRORS as e:
            raise DeliveryError(str(e))

    def unsubscribe(self) -> None:
        self._release()


class Web3ContractBinding(ContractBinding):
    """ContractBinding backed by web3."""

    def __init__(self, w3: Web3, address: str, interface: ContractInterface):
        self.w3 = w3
        self.contract = w3.eth.contract(
            address=Web3.to_checksum_address(address),
            abi=interface.raw,
        )

    def _function(self, method: MethodSpec, args: list):
        return self.contract.get_function_by_signature(method.signature)(*args)

    def call(self, method: MethodSpec, args: list) -> Any:
        try:
            return self._function(method, args).call()
        except NODE_ERRORS as e:
            raise ExternalCallFailure(str(e))

    def transact(self, method: MethodSpec, args: list, options: TransactionOptions, signer: Signer) -> str:
        account = signer.account
        try:
            params = {
                "from": account.address,
                "nonce": self.w3.eth.get_transaction_count(account.address, "pending"),
            }
            if options.value:
                params["value"] = options.value
            if options.gas_price is not None:
                params["gasPrice"] = options.gas_price
            if options.gas_limit:
                params["gas"] = options.gas_limit
            tx = self._function(method, args).build_transaction(params)
            signed = account.sign_transaction(tx)
            tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        except NODE_ERRORS as e:
            raise ExternalCallFailure(str(e))
        return Web3.to_hex(tx_hash)

    def suggest_gas_price(self) -> int:
        try:
            return self.w3.eth.gas_price
        except NODE_ERRORS as e:
            raise ExternalCallFailure(str(e))

    def filter_logs(self, event: EventSpec, filters: list, start: int, end: Optional[int]) -> LogQuery:
        try:
            log_filter = self.contract.events[event.abi_name].create_filter(
                from_block=start,
                to_block=end if end is not None else "latest",
                argument_filters=argument_filters(event, filters),
            )
        except NODE_ERRORS as e:
            raise ExternalCallFailure(str(e))
        return Web3LogQuery(self.w3, log_filter)

    def watch_logs(self, event: EventSpec, filters: list) -> LogSubscription:
        try:
            log_filter = self.contract.events[event.abi_name].create_filter(
                from_block="latest",
                argument_filters=argument_filters(event, filters),
            )
        except NODE_ERRORS as e:
            raise ExternalCallFailure(str(e))
        return Web3LogSubscription(self.w3, log_filter)
