"""
Type-directed conversion between operator text and contract values.

encode() turns free text typed at a prompt into the Python value web3
expects for a given ABI type. decode() renders a value returned by the node
back into display text.
"""

import json
import re
from collections.abc import Mapping
from typing import Any, Optional

from web3 import Web3

from abi_console.common.errors import InvalidArgument

from .dataclasses import (
    ADDRESS,
    BOOL,
    BYTES,
    FIXED_BYTES,
    INT,
    STRING,
    UINT,
    ArgumentSpec,
    ArrayType,
    ScalarType,
    TupleType,
    TypeDescriptor,
)


# =============================================================================
# Encoding
# =============================================================================

def encode(text: str, descriptor: TypeDescriptor) -> Any:
    """Convert operator text into a value of the given ABI type.

    Non-string scalars are parsed directly as literals of their kind.
    String-like kinds are wrapped in quotes first; those and composite kinds
    are then parsed as JSON and coerced into the destination shape.

    Raises:
        InvalidArgument: on any parse or shape mismatch
    """
    if isinstance(descriptor, ScalarType) and not descriptor.string_like:
        return _encode_literal(text.strip(), descriptor)

    if descriptor.string_like:
        text = f'"{text}"'
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidArgument(f"can't parse {text} as {descriptor.canonical}: {e.msg}")
    return _coerce(value, descriptor)


def _encode_literal(text: str, descriptor: ScalarType) -> Any:
    kind = descriptor.kind
    if kind in (INT, UINT):
        return _check_range(_parse_int(text), descriptor)
    if kind == BOOL:
        if text == "true":
            return True
        if text == "false":
            return False
        raise InvalidArgument(f"{text!r} is not a bool (true/false)")
    if kind == FIXED_BYTES:
        return _parse_hex(text, descriptor.size)
    if kind == ADDRESS:
        return _parse_address(text)
    raise InvalidArgument(f"unsupported type: {descriptor.canonical}")


_DECIMAL_RE = re.compile(r"[-+]?[0-9]+")
_HEX_INT_RE = re.compile(r"[-+]?0[xX][0-9a-fA-F]+")


def _parse_int(text: str) -> int:
    # int() alone would also take "1_000"
    if _DECIMAL_RE.fullmatch(text):
        return int(text, 10)
    if _HEX_INT_RE.fullmatch(text):
        return int(text, 16)
    raise InvalidArgument(f"{text!r} is not an integer")


def _check_range(value: int, descriptor: ScalarType) -> int:
    if descriptor.kind == UINT:
        low, high = 0, 2 ** descriptor.size - 1
    else:
        low, high = -(2 ** (descriptor.size - 1)), 2 ** (descriptor.size - 1) - 1
    if not low <= value <= high:
        raise InvalidArgument(f"{value} out of range for {descriptor.canonical}")
    return value


def _parse_hex(text: str, size: Optional[int] = None) -> bytes:
    if not text.startswith(("0x", "0X")):
        raise InvalidArgument(f"{text!r} is not a 0x-prefixed hex string")
    try:
        value = bytes.fromhex(text[2:])
    except ValueError:
        raise InvalidArgument(f"{text!r} is not valid hex")
    if size is not None and len(value) != size:
        raise InvalidArgument(f"expected {size} bytes, got {len(value)}")
    return value


def _parse_address(text: str) -> str:
    if not Web3.is_address(text):
        raise InvalidArgument(f"{text!r} is not an address")
    return Web3.to_checksum_address(text)


def _coerce(value: Any, descriptor: TypeDescriptor) -> Any:
    """Coerce a parsed JSON value into the shape of the descriptor."""
    if isinstance(descriptor, ArrayType):
        if not isinstance(value, list):
            raise InvalidArgument(f"expected a JSON array for {descriptor.canonical}")
        if descriptor.length is not None and len(value) != descriptor.length:
            raise InvalidArgument(
                f"expected {descriptor.length} elements for {descriptor.canonical}, got {len(value)}"
            )
        return [_coerce(v, descriptor.element) for v in value]

    if isinstance(descriptor, TupleType):
        fields = descriptor.fields
        if isinstance(value, dict):
            missing = [f.name for f in fields if f.name not in value]
            if missing:
                raise InvalidArgument(f"missing tuple fields: {', '.join(missing)}")
            return tuple(_coerce(value[f.name], f.type) for f in fields)
        if isinstance(value, list):
            if len(value) != len(fields):
                raise InvalidArgument(f"expected {len(fields)} tuple fields, got {len(value)}")
            return tuple(_coerce(v, f.type) for v, f in zip(value, fields))
        raise InvalidArgument(f"expected a JSON array or object for {descriptor.canonical}")

    kind = descriptor.kind
    if kind in (INT, UINT):
        if isinstance(value, bool):
            raise InvalidArgument(f"expected an integer for {descriptor.canonical}")
        if isinstance(value, int):
            return _check_range(value, descriptor)
        if isinstance(value, str):
            return _check_range(_parse_int(value), descriptor)
        raise InvalidArgument(f"expected an integer for {descriptor.canonical}")
    if kind == BOOL:
        if not isinstance(value, bool):
            raise InvalidArgument("expected true or false")
        return value
    if kind == STRING:
        if not isinstance(value, str):
            raise InvalidArgument("expected a string")
        return value
    if not isinstance(value, str):
        raise InvalidArgument(f"expected a string for {descriptor.canonical}")
    if kind == BYTES:
        return _parse_hex(value)
    if kind == FIXED_BYTES:
        return _parse_hex(value, descriptor.size)
    if kind == ADDRESS:
        return _parse_address(value)
    raise InvalidArgument(f"unsupported type: {descriptor.canonical}")


# =============================================================================
# Decoding
# =============================================================================

def decode(value: Any, descriptor: Optional[TypeDescriptor] = None) -> str:
    """Render a contract value as display text.

    Addresses render as checksummed hex, everything else as JSON.
    """
    value = unwrap(value)
    if _is_address(value, descriptor):
        return Web3.to_checksum_address(value)
    return json.dumps(_to_plain(value))


def _is_address(value: Any, descriptor: Optional[TypeDescriptor]) -> bool:
    if isinstance(descriptor, ScalarType):
        return descriptor.kind == ADDRESS and isinstance(value, str)
    if descriptor is not None:
        return False
    return isinstance(value, str) and len(value) == 42 and Web3.is_address(value)


def _to_plain(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    if isinstance(value, Mapping):
        return {str(k): _to_plain(v) for k, v in value.items()}
    return value


def unwrap(value: Any) -> Any:
    """Strip read-only mapping wrappers such as web3's AttributeDict."""
    if isinstance(value, Mapping) and not isinstance(value, dict):
        return dict(value)
    return value


def format_values(args, values) -> str:
    """Render values as space separated name=value pairs."""
    parts = []
    for i, (arg, value) in enumerate(zip(args, values)):
        name = arg.name or str(i)
        parts.append(f"{name}={decode(value, arg.type)}")
    return " ".join(parts)


def format_event(args, values: Mapping, block_number: int) -> str:
    """Render one decoded log entry as `block N: name=value ...`."""
    ordered = [values.get(a.name or str(i)) for i, a in enumerate(args)]
    return f"block {block_number}: {format_values(args, ordered)}"


# =============================================================================
# Call results
# =============================================================================

class CallResult:
    """Result slots for a constant call.

    A method with one output holds a single slot; with more outputs the
    binding returns an ordered sequence and each element is a slot.
    """

    def __init__(self, outputs: tuple[ArgumentSpec, ...]):
        self.outputs = outputs
        self.raw: Any = None

    def bind(self, raw: Any) -> None:
        self.raw = raw

    def results(self) -> list:
        if len(self.outputs) == 1:
            return [unwrap(self.raw)]
        return [unwrap(v) for v in self.raw]

    def display(self) -> list[str]:
        return [decode(v, a.type) for v, a in zip(self.results(), self.outputs)]


def new_call_result(outputs: tuple[ArgumentSpec, ...]) -> Optional[CallResult]:
    """Create the result container for a call; None when nothing is returned."""
    if not outputs:
        return None
    return CallResult(outputs)
