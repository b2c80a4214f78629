"""Typed array views over shared byte buffers.

Python has no built-in family of fixed-width numeric arrays that can share
one backing buffer at different offsets, so this module provides one. A
``bytearray`` plays the role of the backing buffer and each TypedArray is a
window ``[byte_offset, byte_offset + byte_length)`` into it, interpreted
under one Variant. Elements are stored in native byte order.

Example:
    >>> buf = bytearray(12)
    >>> words = Int32Array(buf, 4, 1)
    >>> words[0] = -1
    >>> bytes(buf)
    b'\\x00\\x00\\x00\\x00\\xff\\xff\\xff\\xff\\x00\\x00\\x00\\x00'
"""

from __future__ import annotations

import math
import struct
from typing import Any, ClassVar, Iterable, Iterator, List, Optional, Type, TypeVar, Union

from ..utils.intcodec import int_to_decimal
from .variants import Variant

_T = TypeVar("_T", bound="TypedArray")


class BigInt(int):
    """An integer that always encodes as a big-integer envelope.

    Plain ints only get tagged once they leave the IEEE-754 safe range;
    wrapping a value in BigInt forces the envelope regardless of magnitude.
    Decoding a big-integer envelope yields a BigInt, so re-encoding is stable.
    """

    def __repr__(self) -> str:
        return f"BigInt({int_to_decimal(self)})"


class TypedArray:
    """Base class for fixed-width views over a byte buffer.

    Do not instantiate directly; use one of the variant subclasses.

    Args:
        source: Element count (zero-filled), a ``bytearray`` to view,
            or an iterable of element values to copy
        byte_offset: Start of the view inside a ``bytearray`` source
        length: Number of elements in the view (default: to the end of the buffer)

    Raises:
        ValueError: If the offset or length do not fit the buffer or the element width
        TypeError: If offset/length are given for a non-buffer source
    """

    variant: ClassVar[Variant]
    BYTES_PER_ELEMENT: ClassVar[int]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Subclasses not named after a variant keep their base class variant
        variant = Variant.from_name(cls.__name__)
        if variant is not None:
            cls.variant = variant
            cls.BYTES_PER_ELEMENT = variant.byte_width

    def __init__(
        self,
        source: Union[int, bytearray, Iterable[Any]] = 0,
        byte_offset: int = 0,
        length: Optional[int] = None,
    ) -> None:
        if not hasattr(type(self), "variant"):
            raise TypeError("TypedArray is abstract; use a variant subclass such as Uint8Array")

        width = self.BYTES_PER_ELEMENT

        if isinstance(source, bytearray):
            if byte_offset < 0 or byte_offset > len(source):
                raise ValueError(
                    f"Start offset {byte_offset} is outside the bounds of the buffer"
                )
            if byte_offset % width != 0:
                raise ValueError(
                    f"Start offset of {type(self).__name__} should be a multiple of {width}"
                )
            if length is None:
                remaining = len(source) - byte_offset
                if remaining % width != 0:
                    raise ValueError(
                        f"Byte length of {type(self).__name__} should be a multiple of {width}"
                    )
                length = remaining // width
            elif length < 0 or byte_offset + length * width > len(source):
                raise ValueError(f"Invalid typed array length: {length}")

            self._buffer = source
            self._byte_offset = byte_offset
            self._length = length
            return

        if byte_offset or length is not None:
            raise TypeError("byte_offset and length are only valid with a bytearray source")

        if isinstance(source, bool):
            raise TypeError("Typed array length must be an int, not bool")

        if isinstance(source, int):
            if source < 0:
                raise ValueError(f"Invalid typed array length: {source}")
            self._buffer = bytearray(source * width)
            self._byte_offset = 0
            self._length = source
            return

        values = list(source)
        self._buffer = bytearray(len(values) * width)
        self._byte_offset = 0
        self._length = len(values)
        for index, item in enumerate(values):
            self[index] = item

    @classmethod
    def from_bytes(cls: Type[_T], data: Union[bytes, bytearray, memoryview]) -> _T:
        """Create a view over a fresh copy of ``data``.

        Args:
            data: Raw bytes; length must be a multiple of the element width

        Returns:
            New typed array owning its own buffer

        Raises:
            ValueError: If the byte count does not divide evenly into elements
        """
        return cls(bytearray(data))

    @property
    def buffer(self) -> bytearray:
        """The backing buffer, shared with any other view over it."""
        return self._buffer

    @property
    def byte_offset(self) -> int:
        return self._byte_offset

    @property
    def byte_length(self) -> int:
        return self._length * self.BYTES_PER_ELEMENT

    @property
    def to_string_tag(self) -> str:
        """Descriptive tag of the form ``[object <Name>]``."""
        return f"[object {self.variant.type_name}]"

    def _elements(self) -> memoryview:
        start = self._byte_offset
        return memoryview(self._buffer)[start : start + self.byte_length].cast(self.variant.format)

    @staticmethod
    def _to_float(value: Any) -> float:
        try:
            return float(value)
        except OverflowError:
            # Ints beyond double range round to infinity
            return math.inf if value > 0 else -math.inf

    def _coerce(self, value: Any) -> Any:
        variant = self.variant
        if variant.is_float:
            number = self._to_float(value)
            try:
                struct.pack(variant.format, number)
            except OverflowError:
                # Out of float32 range rounds to infinity
                number = math.copysign(math.inf, number)
            return number

        if variant.is_clamped:
            number = self._to_float(value)
            if math.isnan(number):
                return 0
            if number <= 0:
                return 0
            if number >= 255:
                return 255
            return round(number)

        if isinstance(value, float):
            if math.isnan(value) or math.isinf(value):
                return 0
            value = math.trunc(value)
        value = int(value) % (1 << variant.bits)
        if variant.signed and value >= 1 << (variant.bits - 1):
            value -= 1 << variant.bits
        return value

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return self.tolist()[index]
        return self._elements()[self._check_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._elements()[self._check_index(index)] = self._coerce(value)

    def _check_index(self, index: int) -> int:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError(f"{type(self).__name__} index out of range")
        return index

    def __iter__(self) -> Iterator[Any]:
        return iter(self.tolist())

    def tolist(self) -> List[Any]:
        return self._elements().tolist()

    def tobytes(self) -> bytes:
        """Return a copy of this view's own byte window."""
        start = self._byte_offset
        return bytes(self._buffer[start : start + self.byte_length])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypedArray):
            return self.variant is other.variant and self.tobytes() == other.tobytes()
        if isinstance(other, (list, tuple)):
            return self.tolist() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"


class Int8Array(TypedArray):
    pass


class Uint8Array(TypedArray):
    pass


class Uint8ClampedArray(TypedArray):
    pass


class Int16Array(TypedArray):
    pass


class Uint16Array(TypedArray):
    pass


class Int32Array(TypedArray):
    pass


class Uint32Array(TypedArray):
    pass


class Float32Array(TypedArray):
    pass


class Float64Array(TypedArray):
    pass


class BigInt64Array(TypedArray):
    pass


class BigUint64Array(TypedArray):
    pass


TYPED_ARRAY_CLASSES = {
    cls.variant: cls
    for cls in (
        Int8Array,
        Uint8Array,
        Uint8ClampedArray,
        Int16Array,
        Uint16Array,
        Int32Array,
        Uint32Array,
        Float32Array,
        Float64Array,
        BigInt64Array,
        BigUint64Array,
    )
}


def typed_array_class(variant: Variant) -> Type[TypedArray]:
    """Return the TypedArray subclass for a variant."""
    return TYPED_ARRAY_CLASSES[variant]
