"""Envelope decoder.

This module provides from_serializable(), the inverse of to_serializable():
it rebuilds big integers and typed arrays from their envelopes and returns
every other value unchanged.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from pydantic import ValidationError

from ..arrays.typed import BigInt, TypedArray, typed_array_class
from ..arrays.variants import Variant
from ..exceptions import InvalidEncoding, InvalidPayload
from ..utils.hexcodec import decode_hex
from ..utils.intcodec import decimal_to_int
from .schema import (
    BIGINT_TAG,
    DEFAULT_OPTIONS,
    TYPEDARRAY_TAG,
    CodecOptions,
    TypedArrayPayload,
    is_buffer_like,
)

logger = logging.getLogger(__name__)

_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


def from_serializable(value: Any, options: Optional[CodecOptions] = None) -> Any:
    """Decode one value from its JSON-safe form.

    Only dicts are inspected. A dict is an envelope only when its single key
    is one of the tags; a tag key next to other keys is ordinary user data.

    Args:
        value: Any value, typically fresh out of json.loads()
        options: Codec options (defaults to DEFAULT_OPTIONS)

    Returns:
        BigInt for a big-integer envelope, a TypedArray (or raw bytes for an
        unknown variant) for a binary envelope, bytes for a Buffer-like
        object, otherwise ``value`` itself

    Raises:
        InvalidEncoding: If a big-integer literal or hex string is malformed
        InvalidPayload: If a binary envelope payload is malformed

    Examples:
        ```python
        from jsontag import from_serializable

        from_serializable({"__@json.bigint__": "-12345678901234567890"})
        # BigInt(-12345678901234567890)

        from_serializable({"__@json.typedarray__": {"type": "Uint8Array", "bytes": "0x00ff"}})
        # Uint8Array([0, 255])
        ```
    """
    if not isinstance(value, dict):
        return value

    options = options or DEFAULT_OPTIONS

    if len(value) == 1:
        if BIGINT_TAG in value:
            return _decode_big_int(value[BIGINT_TAG])
        if TYPEDARRAY_TAG in value:
            return _decode_typed_array(value[TYPEDARRAY_TAG], options)
    elif BIGINT_TAG in value or TYPEDARRAY_TAG in value:
        logger.debug("Object carries an envelope tag next to other keys; left as-is")

    if is_buffer_like(value):
        return bytes(value["data"])

    return value


def _decode_big_int(literal: Any) -> BigInt:
    """Parse the decimal literal of a big-integer envelope.

    Args:
        literal: Tag value; a base-10 integer string (an int is accepted too)

    Returns:
        Parsed integer

    Raises:
        InvalidEncoding: If the literal is not a base-10 integer
    """
    if isinstance(literal, int) and not isinstance(literal, bool):
        return BigInt(literal)

    if not isinstance(literal, str):
        raise InvalidEncoding(
            f"Big-integer literal must be a string, got {type(literal).__name__}"
        )

    # int() alone would also accept underscores and surrounding whitespace
    if not _DECIMAL_INTEGER.fullmatch(literal):
        raise InvalidEncoding(f"Cannot convert {literal!r} to a big integer")

    return BigInt(decimal_to_int(literal))


def _decode_typed_array(payload: Any, options: CodecOptions) -> TypedArray | bytes:
    """Rebuild the value carried by a binary envelope.

    Args:
        payload: Inner ``{"type": ..., "bytes": ...}`` object
        options: Codec options

    Returns:
        Fresh typed array of the named variant, or raw bytes if the
        variant is unknown and options allow degrading

    Raises:
        InvalidPayload: If the payload shape is wrong or the bytes do not fit the variant
        InvalidEncoding: If the hex string is malformed
    """
    try:
        parsed = TypedArrayPayload.model_validate(payload)
    except ValidationError as e:
        raise InvalidPayload(f"Invalid typed array payload: {e}") from e

    data = decode_hex(parsed.bytes)

    variant = Variant.from_name(parsed.type)
    if variant is None:
        if options.unknown_variant == "error":
            raise InvalidPayload(f"Unknown typed array type: {parsed.type!r}")
        logger.debug(
            "Unknown typed array type %r; returning %d raw bytes", parsed.type, len(data)
        )
        return data

    if len(data) % variant.byte_width != 0:
        raise InvalidPayload(
            f"Byte length {len(data)} is not a multiple of {variant.byte_width} "
            f"for {variant.type_name}"
        )

    return typed_array_class(variant).from_bytes(data)
