import pytest

from abi_console.abi import parse_interface
from abi_console.chain import (
    ContractBinding,
    LogEntry,
    LogQuery,
    LogSubscription,
    Signer,
)
from abi_console.common import DeliveryError, InputSession
from abi_console.repl import SessionContext, build_menu_tree

TOKEN_ABI = [
    {"type": "function", "name": "balanceOf", "stateMutability": "view",
     "inputs": [{"name": "owner", "type": "address"}],
     "outputs": [{"name": "", "type": "uint256"}]},
    {"type": "function", "name": "name", "stateMutability": "view",
     "inputs": [], "outputs": [{"name": "", "type": "string"}]},
    {"type": "function", "name": "getReserves", "stateMutability": "view",
     "inputs": [],
     "outputs": [{"name": "reserve0", "type": "uint112"},
                 {"name": "reserve1", "type": "uint112"},
                 {"name": "timestamp", "type": "uint32"}]},
    {"type": "function", "name": "ping", "stateMutability": "pure",
     "inputs": [], "outputs": []},
    {"type": "function", "name": "transfer", "stateMutability": "nonpayable",
     "inputs": [{"name": "to", "type": "address"}, {"name": "value", "type": "uint256"}],
     "outputs": [{"name": "", "type": "bool"}]},
    {"type": "function", "name": "approve", "stateMutability": "nonpayable",
     "inputs": [{"name": "spender", "type": "address"}, {"name": "value", "type": "uint256"}],
     "outputs": [{"name": "", "type": "bool"}]},
    {"type": "function", "name": "deposit", "stateMutability": "payable",
     "inputs": [], "outputs": []},
    {"type": "event", "name": "Transfer", "anonymous": False,
     "inputs": [{"name": "from", "type": "address", "indexed": True},
                {"name": "to", "type": "address", "indexed": True},
                {"name": "value", "type": "uint256", "indexed": False}]},
    {"type": "event", "name": "Approval", "anonymous": False,
     "inputs": [{"name": "owner", "type": "address", "indexed": True},
                {"name": "spender", "type": "address", "indexed": True},
                {"name": "value", "type": "uint256", "indexed": False}]},
    {"type": "constructor", "stateMutability": "nonpayable",
     "inputs": [{"name": "supply", "type": "uint256"}]},
]

ALICE = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
BOB = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"
TEST_KEY = "0x" + "11" * 32


class ScriptedReader:
    """Line reader that replays canned answers and records prompts."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.password_prompts = 0

    def __call__(self, message, completer=None, is_password=False):
        self.prompts.append(message)
        if is_password:
            self.password_prompts += 1
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {message!r}")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


class FakeQuery(LogQuery):

    def __init__(self, entries, fail_after=None):
        self._entries = entries
        self._fail_after = fail_after
        self.released = False

    def entries(self):
        for i, entry in enumerate(self._entries):
            if self._fail_after is not None and i == self._fail_after:
                raise DeliveryError("connection lost")
            yield entry

    def release(self):
        self.released = True


class FakeSubscription(LogSubscription):

    def __init__(self, batches, fail=False):
        self.batches = list(batches)
        self.fail = fail
        self.unsubscribed = False

    def poll(self):
        if self.batches:
            return self.batches.pop(0)
        if self.fail:
            raise DeliveryError("subscription dropped")
        return []

    def unsubscribe(self):
        self.unsubscribed = True


class FakeBinding(ContractBinding):
    """Binding that records every call it receives."""

    def __init__(self, call_result=None, gas_price=20, query=None, subscription=None):
        self.calls = []
        self.call_result = call_result
        self.gas_price = gas_price
        self.query = query or FakeQuery([])
        self.subscription = subscription or FakeSubscription([])

    def call(self, method, args):
        self.calls.append(("call", method.name, args))
        return self.call_result

    def transact(self, method, args, options, signer):
        self.calls.append(("transact", method.name, args, options, signer))
        return "0x" + "ab" * 32

    def suggest_gas_price(self):
        self.calls.append(("suggest_gas_price",))
        return self.gas_price

    def filter_logs(self, event, filters, start, end):
        self.calls.append(("filter_logs", event.name, filters, start, end))
        return self.query

    def watch_logs(self, event, filters):
        self.calls.append(("watch_logs", event.name, filters))
        return self.subscription


class FakeNotice:
    """Interrupt notice that fires after a number of waits."""

    def __init__(self, fire_after=1):
        self.fire_after = fire_after
        self.waits = 0
        self.fired = False
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, *exc):
        self.exited = True

    def is_set(self):
        return self.fired

    def wait(self, timeout):
        self.waits += 1
        if self.waits >= self.fire_after:
            self.fired = True
        return self.fired


def entry(block, **values):
    return LogEntry(block_number=block, values=values)


@pytest.fixture
def interface():
    return parse_interface(TOKEN_ABI)


@pytest.fixture
def make_ctx(interface):
    def _make(answers=(), binding=None, signer=None, notice=None):
        ctx = SessionContext(
            menu=build_menu_tree(interface),
            interface=interface,
            binding=binding or FakeBinding(),
            session=InputSession(ScriptedReader(answers)),
        )
        if signer is not None:
            ctx.signer = signer
        if notice is not None:
            ctx.interrupts = lambda: notice
        return ctx
    return _make


@pytest.fixture
def key_signer():
    return Signer.from_key(TEST_KEY)
