"""Utility functions for jsontag.

This module provides the hex codec used by binary envelopes and the
decimal conversion used by big-integer envelopes.
"""

from __future__ import annotations

from .hexcodec import HEX_PREFIX, decode_hex, encode_hex
from .intcodec import decimal_to_int, int_to_decimal

__all__ = [
    "HEX_PREFIX",
    "encode_hex",
    "decode_hex",
    "int_to_decimal",
    "decimal_to_int",
]
