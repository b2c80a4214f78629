"""jsontag: Lossless JSON envelopes for big integers and binary data

A small Python library that carries values JSON cannot represent directly
through any JSON layer: arbitrary-precision integers and fixed-width binary
buffers (typed arrays, raw bytes, and ``{"type": "Buffer", "data": [...]}``
objects produced by other serializers).

Key Features:
- Single-key envelope objects with stable, cross-implementation tag names
- Typed array views over shared buffers, encoded window by window
- Pure, stateless encode/decode of one value at a time
- Optional helpers that apply the codec across a whole JSON document

Quick Start:
    >>> from jsontag import BigInt, Uint16Array, from_serializable, to_serializable
    >>>
    >>> to_serializable(BigInt(2**70))
    {'__@json.bigint__': '1180591620717411303424'}
    >>> envelope = to_serializable(Uint16Array([1, 2]))
    >>> from_serializable(envelope)
    Uint16Array([1, 2])
"""

from __future__ import annotations

from .arrays import (
    BigInt,
    BigInt64Array,
    BigUint64Array,
    Float32Array,
    Float64Array,
    Int8Array,
    Int16Array,
    Int32Array,
    TypedArray,
    Uint8Array,
    Uint8ClampedArray,
    Uint16Array,
    Uint32Array,
    Variant,
    classify_view,
    is_typed_array,
    typed_array_name,
)
from .codec import (
    BIGINT_TAG,
    DEFAULT_OPTIONS,
    MAX_SAFE_INTEGER,
    TYPEDARRAY_TAG,
    CodecOptions,
    ValueKind,
    classify_value,
    from_serializable,
    is_buffer_like,
    is_typed_array_payload,
    to_serializable,
)
from .exceptions import InvalidEncoding, InvalidPayload, JsontagError
from .tree import decode_tree, dumps, encode_tree, loads
from .utils import decode_hex, encode_hex

__version__ = "0.1.0"

__all__ = [
    # Core API
    "to_serializable",
    "from_serializable",
    "classify_value",
    "ValueKind",
    # Wire constants
    "BIGINT_TAG",
    "TYPEDARRAY_TAG",
    "MAX_SAFE_INTEGER",
    # Configuration
    "CodecOptions",
    "DEFAULT_OPTIONS",
    # Values
    "BigInt",
    "TypedArray",
    "Int8Array",
    "Uint8Array",
    "Uint8ClampedArray",
    "Int16Array",
    "Uint16Array",
    "Int32Array",
    "Uint32Array",
    "Float32Array",
    "Float64Array",
    "BigInt64Array",
    "BigUint64Array",
    # Classification
    "Variant",
    "classify_view",
    "is_typed_array",
    "typed_array_name",
    "is_buffer_like",
    "is_typed_array_payload",
    # Exceptions
    "JsontagError",
    "InvalidEncoding",
    "InvalidPayload",
    # Hex codec
    "encode_hex",
    "decode_hex",
    # JSON helpers
    "encode_tree",
    "decode_tree",
    "dumps",
    "loads",
    # Version
    "__version__",
]
