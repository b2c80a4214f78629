"""Hex codec for binary envelope payloads.

Bytes are rendered as ``0x`` followed by two lowercase hex digits per byte.
Decoding is case-insensitive and accepts input with or without the prefix.
"""

from __future__ import annotations

import binascii
from typing import Iterable, Union

from ..exceptions import InvalidEncoding

HEX_PREFIX = "0x"

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

BytesLike = Union[bytes, bytearray, memoryview]


def encode_hex(data: BytesLike | Iterable[int]) -> str:
    """Encode a byte sequence as a ``0x``-prefixed lowercase hex string.

    Args:
        data: Bytes-like object, or an iterable of ints in [0, 255]

    Returns:
        Hex string (``"0x"`` for empty input)

    Raises:
        ValueError: If an iterable element is outside [0, 255]

    Example:
        >>> encode_hex(b"\\x00\\xff\\x10")
        '0x00ff10'
        >>> encode_hex(b"")
        '0x'
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data)
    return HEX_PREFIX + bytes(data).hex()


def decode_hex(text: str) -> bytes:
    """Decode a hex string, with or without a leading ``0x``.

    Args:
        text: Hex string

    Returns:
        Decoded bytes

    Raises:
        InvalidEncoding: If the digit count is odd or a character is not a hex digit

    Example:
        >>> decode_hex("0xAB") == decode_hex("ab") == b"\\xab"
        True
    """
    if not isinstance(text, str):
        raise InvalidEncoding(f"Hex input must be a string, got {type(text).__name__}")

    digits = text[2:] if text[:2] in ("0x", "0X") else text

    if len(digits) % 2 != 0:
        raise InvalidEncoding(f"Invalid hex string for bytes: odd length ({len(digits)} digits)")

    # Checked up front so every bad digit surfaces as InvalidEncoding
    for position, char in enumerate(digits):
        if char not in _HEX_DIGITS:
            raise InvalidEncoding(
                f"Invalid hex string for bytes: {char!r} at position {position} is not a hex digit"
            )

    return binascii.unhexlify(digits)
