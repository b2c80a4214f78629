"""Envelope encoder.

This module provides to_serializable(), which turns a single value that JSON
cannot carry losslessly into a tagged envelope and leaves everything else
alone. It does not walk containers; see jsontag.tree for that.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from ..arrays.typed import BigInt
from ..arrays.variants import Variant, classify_view
from ..utils.hexcodec import encode_hex
from ..utils.intcodec import int_to_decimal
from .schema import BIGINT_TAG, DEFAULT_OPTIONS, TYPEDARRAY_TAG, CodecOptions, is_buffer_like


class ValueKind(enum.Enum):
    """What the encoder makes of a value.

    Members are listed in match priority. A value is classified as the
    first kind it fits; new kinds must be slotted in deliberately.
    """

    BIG_INT = 1
    BINARY_VIEW = 2
    RAW_BUFFER = 3
    BUFFER_LIKE = 4
    PLAIN = 5


@dataclass(frozen=True)
class Classification:
    """Result of classify_value().

    Attributes:
        kind: Matched value kind
        variant: Variant of a BINARY_VIEW, None for every other kind
    """

    kind: ValueKind
    variant: Optional[Variant] = None


_PLAIN = Classification(ValueKind.PLAIN)


def is_big_int(value: Any, options: CodecOptions = DEFAULT_OPTIONS) -> bool:
    """Check whether a value must travel as a big-integer envelope.

    BigInt instances always do. Plain ints do once their magnitude exceeds
    ``options.max_safe_integer``. Bools never do.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    if isinstance(value, BigInt):
        return True
    return abs(value) > options.max_safe_integer


def classify_value(value: Any, options: CodecOptions = DEFAULT_OPTIONS) -> Classification:
    """Classify a value for encoding.

    Args:
        value: Any value
        options: Codec options

    Returns:
        Classification naming the first matching kind
    """
    if is_big_int(value, options):
        return Classification(ValueKind.BIG_INT)

    variant = classify_view(value)
    if variant is not None:
        return Classification(ValueKind.BINARY_VIEW, variant)

    if isinstance(value, (bytes, bytearray)):
        return Classification(ValueKind.RAW_BUFFER)

    if is_buffer_like(value):
        return Classification(ValueKind.BUFFER_LIKE)

    return _PLAIN


def _view_bytes(value: Any) -> bytes:
    # TypedArray, array.array and memoryview all copy out only their own window,
    # never the whole backing buffer
    return bytes(value.tobytes())


def _binary_envelope(type_name: str, data: Any) -> dict[str, Any]:
    return {TYPEDARRAY_TAG: {"type": type_name, "bytes": encode_hex(data)}}


def to_serializable(value: Any, options: Optional[CodecOptions] = None) -> Any:
    """Encode one value into its JSON-safe form.

    Args:
        value: Any value
        options: Codec options (defaults to DEFAULT_OPTIONS)

    Returns:
        A big-integer or binary envelope, or ``value`` itself when it needs
        no special treatment (including values that already are envelopes)

    Examples:
        ```python
        from jsontag import BigInt, to_serializable

        to_serializable(BigInt(2**70))
        # {'__@json.bigint__': '1180591620717411303424'}

        to_serializable({"type": "Buffer", "data": [0, 255, 16]})
        # {'__@json.typedarray__': {'type': 'Uint8Array', 'bytes': '0x00ff10'}}

        to_serializable("hello")
        # 'hello'
        ```
    """
    options = options or DEFAULT_OPTIONS
    classification = classify_value(value, options)
    kind = classification.kind

    if kind is ValueKind.BIG_INT:
        return {BIGINT_TAG: int_to_decimal(value)}

    variant = classification.variant
    if kind is ValueKind.BINARY_VIEW and variant is not None:
        return _binary_envelope(variant.type_name, _view_bytes(value))

    if kind is ValueKind.RAW_BUFFER:
        return _binary_envelope(Variant.UINT8.type_name, value)

    if kind is ValueKind.BUFFER_LIKE:
        return _binary_envelope(Variant.UINT8.type_name, value["data"])

    return value
