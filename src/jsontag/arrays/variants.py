"""Fixed-width binary variants and view classification.

A variant names how the bytes of a binary view are interpreted. The names
double as wire names inside binary envelopes, so they must never change.
"""

from __future__ import annotations

import array
import enum
import re
import sys
from typing import Any, Optional

_TAG_PATTERN = re.compile(r"^\[object (.+)\]$")

# Byte-order prefixes whose element bytes are laid out in native order
_NATIVE_PREFIXES = ("@", "=", "<" if sys.byteorder == "little" else ">")
if sys.byteorder == "big":
    _NATIVE_PREFIXES += ("!",)


class Variant(enum.Enum):
    """The 11 supported fixed-width element interpretations.

    Each member carries its element width in bytes, the native ``struct``
    format character used to view the bytes, and its numeric family.
    """

    INT8 = ("Int8Array", 1, "b")
    UINT8 = ("Uint8Array", 1, "B")
    UINT8_CLAMPED = ("Uint8ClampedArray", 1, "B")
    INT16 = ("Int16Array", 2, "h")
    UINT16 = ("Uint16Array", 2, "H")
    INT32 = ("Int32Array", 4, "i")
    UINT32 = ("Uint32Array", 4, "I")
    FLOAT32 = ("Float32Array", 4, "f")
    FLOAT64 = ("Float64Array", 8, "d")
    BIGINT64 = ("BigInt64Array", 8, "q")
    BIGUINT64 = ("BigUint64Array", 8, "Q")

    def __init__(self, type_name: str, byte_width: int, format: str) -> None:
        self.type_name = type_name
        self.byte_width = byte_width
        self.format = format

    @property
    def is_float(self) -> bool:
        return self.format in ("f", "d")

    @property
    def is_clamped(self) -> bool:
        return self is Variant.UINT8_CLAMPED

    @property
    def signed(self) -> bool:
        return self.is_float or self.format.islower()

    @property
    def bits(self) -> int:
        return self.byte_width * 8

    @classmethod
    def from_name(cls, name: Any) -> Optional[Variant]:
        """Look up a variant by its wire name.

        Args:
            name: Candidate variant name (e.g. ``"Uint16Array"``)

        Returns:
            Matching Variant, or None if the name is not one of the 11
        """
        if not isinstance(name, str):
            return None
        return _BY_NAME.get(name)


_BY_NAME = {variant.type_name: variant for variant in Variant}

# (format char, itemsize) -> variant, for memoryview and array.array.
# Integer formats are matched by size because 'i', 'l' and 'q' widths vary
# across platforms.
_INT_FORMATS = {
    (True, 1): Variant.INT8,
    (False, 1): Variant.UINT8,
    (True, 2): Variant.INT16,
    (False, 2): Variant.UINT16,
    (True, 4): Variant.INT32,
    (False, 4): Variant.UINT32,
    (True, 8): Variant.BIGINT64,
    (False, 8): Variant.BIGUINT64,
}


def variant_for_format(format: str, itemsize: int) -> Optional[Variant]:
    """Map a native ``struct`` format character to a variant.

    Args:
        format: Format string of a memoryview or array typecode
        itemsize: Element size in bytes

    Returns:
        Matching Variant, or None for unsupported formats
    """
    # Explicit non-native orders (e.g. ">H" on little-endian) stay unmatched:
    # their bytes would not reinterpret correctly as a native view
    if format[:1] in _NATIVE_PREFIXES:
        format = format[1:]
    if len(format) != 1:
        return None

    if format in "bhilqn" or format in "BHILQN":
        return _INT_FORMATS.get((format.islower(), itemsize))
    if format == "f" and itemsize == 4:
        return Variant.FLOAT32
    if format == "d" and itemsize == 8:
        return Variant.FLOAT64
    return None


def _declared_name(value: Any) -> Optional[str]:
    # Imported lazily; typed.py imports this module.
    from .typed import TypedArray

    if isinstance(value, TypedArray):
        return type(value).__name__
    if isinstance(value, array.array):
        variant = variant_for_format(value.typecode, value.itemsize)
        return variant.type_name if variant else None
    if isinstance(value, memoryview):
        if value.ndim != 1:
            return None
        variant = variant_for_format(value.format, value.itemsize)
        return variant.type_name if variant else None
    return None


def _tag_name(value: Any) -> Optional[str]:
    tag = getattr(value, "to_string_tag", None)
    if not isinstance(tag, str):
        return None
    match = _TAG_PATTERN.match(tag)
    return match.group(1) if match else None


def is_typed_array(value: Any) -> bool:
    """Check whether a value is a direct, typed binary view.

    TypedArray instances, array.array objects and one-dimensional
    memoryviews qualify. A memoryview whose element format has no variant
    is the untyped view and does not.
    """
    from .typed import TypedArray

    if isinstance(value, (TypedArray, array.array)):
        return True
    if isinstance(value, memoryview):
        return _declared_name(value) is not None
    return False


def typed_array_name(value: Any) -> Optional[str]:
    """Resolve the variant name a binary view declares.

    The view's own declared name wins. When it is missing or not one of the
    supported names, the descriptive tag ``[object <Name>]`` is parsed instead.

    Args:
        value: Candidate binary view

    Returns:
        Variant name, or None if nothing could be resolved
    """
    name = _declared_name(value)
    if name is not None and name in _BY_NAME:
        return name
    return _tag_name(value) or name


def classify_view(value: Any) -> Optional[Variant]:
    """Classify a binary view into one of the 11 variants.

    Args:
        value: Any value

    Returns:
        The view's Variant, or None if it is not a recognized binary array
    """
    if not is_typed_array(value):
        return None
    return Variant.from_name(typed_array_name(value))
