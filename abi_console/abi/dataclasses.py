"""
Contract interface dataclasses.

These describe a contract ABI: type descriptors, arguments, methods and
events. All of them are immutable once loaded.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


# Scalar kinds
INT = "int"
UINT = "uint"
BOOL = "bool"
STRING = "string"
BYTES = "bytes"
FIXED_BYTES = "fixed_bytes"
ADDRESS = "address"

SCALAR_KINDS = (INT, UINT, BOOL, STRING, BYTES, FIXED_BYTES, ADDRESS)


@dataclass(frozen=True)
class ScalarType:
    """A scalar ABI type. `size` is the bit width for integers and the byte
    length for fixed byte arrays, 0 otherwise."""
    kind: str
    size: int = 0

    @property
    def canonical(self) -> str:
        if self.kind in (INT, UINT):
            return f"{self.kind}{self.size}"
        if self.kind == FIXED_BYTES:
            return f"bytes{self.size}"
        return self.kind

    @property
    def string_like(self) -> bool:
        return self.kind in (STRING, BYTES)


@dataclass(frozen=True)
class ArrayType:
    """An array of `element`. `length` is None for dynamic arrays."""
    element: "TypeDescriptor"
    length: Optional[int] = None

    @property
    def canonical(self) -> str:
        size = "" if self.length is None else str(self.length)
        return f"{self.element.canonical}[{size}]"

    @property
    def string_like(self) -> bool:
        return False


@dataclass(frozen=True)
class TupleType:
    """A tuple (struct) with ordered, named fields."""
    fields: tuple["ArgumentSpec", ...] = ()

    @property
    def canonical(self) -> str:
        return "(" + ",".join(f.type.canonical for f in self.fields) + ")"

    @property
    def string_like(self) -> bool:
        return False


TypeDescriptor = Union[ScalarType, ArrayType, TupleType]


@dataclass(frozen=True)
class ArgumentSpec:
    """A named, typed method or event argument."""
    name: str
    type: TypeDescriptor
    indexed: bool = False  # Only meaningful for event inputs

    def describe(self) -> str:
        parts = [self.type.canonical]
        if self.indexed:
            parts.append("indexed")
        if self.name:
            parts.append(self.name)
        return " ".join(parts)


@dataclass(frozen=True)
class MethodSpec:
    """A callable contract method."""
    name: str  # Menu name, unique even for overloaded methods
    abi_name: str  # Name as declared in the ABI
    inputs: tuple[ArgumentSpec, ...] = ()
    outputs: tuple[ArgumentSpec, ...] = ()
    constant: bool = False  # view/pure: answerable without a transaction
    payable: bool = False  # Accepts an attached value

    @property
    def signature(self) -> str:
        return f"{self.abi_name}({','.join(a.type.canonical for a in self.inputs)})"

    def describe(self) -> str:
        args = ", ".join(a.describe() for a in self.inputs)
        text = f"function {self.abi_name}({args})"
        if self.constant:
            text += " view"
        elif self.payable:
            text += " payable"
        if self.outputs:
            text += " returns (" + ", ".join(a.describe() for a in self.outputs) + ")"
        return text


@dataclass(frozen=True)
class EventSpec:
    """An event the contract can emit."""
    name: str
    abi_name: str
    inputs: tuple[ArgumentSpec, ...] = ()
    anonymous: bool = False

    @property
    def indexed_inputs(self) -> list[ArgumentSpec]:
        return [a for a in self.inputs if a.indexed]

    def describe(self) -> str:
        args = ", ".join(a.describe() for a in self.inputs)
        return f"event {self.abi_name}({args})"


@dataclass
class ContractInterface:
    """Methods and events of a contract, in ABI order."""
    methods: list[MethodSpec] = field(default_factory=list)
    events: list[EventSpec] = field(default_factory=list)
    raw: list = field(default_factory=list)  # Original ABI JSON for the binding

    def method(self, name: str) -> Optional[MethodSpec]:
        for m in self.methods:
            if m.name == name:
                return m
        return None

    def event(self, name: str) -> Optional[EventSpec]:
        for e in self.events:
            if e.name == name:
                return e
        return None
