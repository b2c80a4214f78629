"""Binary views and big integers for jsontag.

This module provides the typed array family that binary envelopes decode to,
the BigInt marker type, and the variant classifier.
"""

from __future__ import annotations

from .typed import (
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
    typed_array_class,
)
from .variants import Variant, classify_view, is_typed_array, typed_array_name

__all__ = [
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
    "typed_array_class",
    "Variant",
    "classify_view",
    "is_typed_array",
    "typed_array_name",
]
