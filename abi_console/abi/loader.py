"""
ABI loader.

Functions for loading a contract interface from ABI JSON. Accepts either a
bare ABI list or a compiler artifact holding it under "abi".
"""

import json
import re
from pathlib import Path
from typing import Optional

from abi_console.common.errors import InterfaceError

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
    ContractInterface,
    EventSpec,
    MethodSpec,
    ScalarType,
    TupleType,
    TypeDescriptor,
)

_ARRAY_RE = re.compile(r"^(.*)\[(\d*)\]$")
_INT_RE = re.compile(r"^(u?int)(\d*)$")
_FIXED_BYTES_RE = re.compile(r"^bytes(\d+)$")

_CONSTANT_MUTABILITY = ("view", "pure")


def parse_type(type_str: str, components: Optional[list] = None) -> TypeDescriptor:
    """Parse an ABI type string (with tuple components) into a descriptor."""
    m = _ARRAY_RE.match(type_str)
    if m:
        inner, size = m.groups()
        length = int(size) if size else None
        if length == 0:
            raise InterfaceError(f"zero-length array type: {type_str}")
        return ArrayType(parse_type(inner, components), length)

    if type_str == "tuple":
        return TupleType(tuple(parse_argument(c) for c in components or []))

    if type_str in (BOOL, STRING, BYTES, ADDRESS):
        return ScalarType(type_str)

    m = _INT_RE.match(type_str)
    if m:
        kind = UINT if m.group(1) == "uint" else INT
        bits = int(m.group(2)) if m.group(2) else 256
        if bits < 8 or bits > 256 or bits % 8:
            raise InterfaceError(f"invalid integer width: {type_str}")
        return ScalarType(kind, bits)

    m = _FIXED_BYTES_RE.match(type_str)
    if m:
        size = int(m.group(1))
        if size < 1 or size > 32:
            raise InterfaceError(f"invalid fixed bytes size: {type_str}")
        return ScalarType(FIXED_BYTES, size)

    raise InterfaceError(f"unsupported type: {type_str}")


def parse_argument(data: dict) -> ArgumentSpec:
    """Parse one ABI input/output/component entry."""
    try:
        type_str = data["type"]
    except (KeyError, TypeError):
        raise InterfaceError(f"argument without type: {data!r}")
    return ArgumentSpec(
        name=data.get("name", ""),
        type=parse_type(type_str, data.get("components")),
        indexed=bool(data.get("indexed", False)),
    )


def _is_constant(entry: dict) -> bool:
    mutability = entry.get("stateMutability")
    if mutability is not None:
        return mutability in _CONSTANT_MUTABILITY
    return bool(entry.get("constant", False))


def _is_payable(entry: dict) -> bool:
    mutability = entry.get("stateMutability")
    if mutability is not None:
        return mutability == "payable"
    return bool(entry.get("payable", False))


def _unique_name(name: str, taken: set) -> str:
    """Overloads keep the first name, later ones get name0, name1, ..."""
    candidate = name
    idx = 0
    while candidate in taken:
        candidate = f"{name}{idx}"
        idx += 1
    taken.add(candidate)
    return candidate


def parse_interface(data) -> ContractInterface:
    """Parse ABI JSON data into a ContractInterface."""
    if isinstance(data, dict):
        data = data.get("abi")
    if not isinstance(data, list):
        raise InterfaceError("ABI must be a list of entries")

    methods = []
    events = []
    method_names: set = set()
    event_names: set = set()

    for entry in data:
        if not isinstance(entry, dict):
            raise InterfaceError(f"invalid ABI entry: {entry!r}")
        kind = entry.get("type", "function")

        if kind == "function":
            abi_name = entry.get("name")
            if not abi_name:
                raise InterfaceError("function without name")
            methods.append(MethodSpec(
                name=_unique_name(abi_name, method_names),
                abi_name=abi_name,
                inputs=tuple(parse_argument(a) for a in entry.get("inputs", [])),
                outputs=tuple(parse_argument(a) for a in entry.get("outputs", [])),
                constant=_is_constant(entry),
                payable=_is_payable(entry),
            ))
        elif kind == "event":
            abi_name = entry.get("name")
            if not abi_name:
                raise InterfaceError("event without name")
            events.append(EventSpec(
                name=_unique_name(abi_name, event_names),
                abi_name=abi_name,
                inputs=tuple(parse_argument(a) for a in entry.get("inputs", [])),
                anonymous=bool(entry.get("anonymous", False)),
            ))
        # constructor, fallback, receive and error entries have no menu entry

    return ContractInterface(methods=methods, events=events, raw=data)


def load_interface(abi_file: Path) -> ContractInterface:
    """Load a contract interface from an ABI JSON file."""
    try:
        with open(abi_file) as f:
            data = json.load(f)
    except OSError as e:
        raise InterfaceError(f"can't read {abi_file}: {e}")
    except json.JSONDecodeError as e:
        raise InterfaceError(f"can't parse {abi_file}: {e}")
    return parse_interface(data)
