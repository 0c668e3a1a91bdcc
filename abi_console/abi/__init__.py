"""
abi_console.abi - Contract interface model and value codec.

This package contains:
- dataclasses: Type descriptors, arguments, methods and events
- loader: ABI JSON parsing
- codec: Operator text <-> contract value conversion
"""

from .dataclasses import (
    ScalarType,
    ArrayType,
    TupleType,
    TypeDescriptor,
    ArgumentSpec,
    MethodSpec,
    EventSpec,
    ContractInterface,
)

from .loader import (
    parse_type,
    parse_interface,
    load_interface,
)

from .codec import (
    encode,
    decode,
    format_values,
    format_event,
    CallResult,
    new_call_result,
)

__all__ = [
    # Dataclasses
    'ScalarType',
    'ArrayType',
    'TupleType',
    'TypeDescriptor',
    'ArgumentSpec',
    'MethodSpec',
    'EventSpec',
    'ContractInterface',
    # Loader
    'parse_type',
    'parse_interface',
    'load_interface',
    # Codec
    'encode',
    'decode',
    'format_values',
    'format_event',
    'CallResult',
    'new_call_result',
]
