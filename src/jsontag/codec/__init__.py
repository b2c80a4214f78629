"""Envelope codec for jsontag.

This module provides the single-value encoder and decoder, plus the tag
constants and payload shapes they agree on.
"""

from __future__ import annotations

from .decoder import from_serializable
from .encoder import Classification, ValueKind, classify_value, to_serializable
from .schema import (
    BIGINT_TAG,
    DEFAULT_OPTIONS,
    MAX_SAFE_INTEGER,
    TYPEDARRAY_TAG,
    BufferLikeObject,
    CodecOptions,
    TypedArrayPayload,
    is_buffer_like,
    is_typed_array_payload,
)

__all__ = [
    "to_serializable",
    "from_serializable",
    "classify_value",
    "Classification",
    "ValueKind",
    "BIGINT_TAG",
    "TYPEDARRAY_TAG",
    "MAX_SAFE_INTEGER",
    "CodecOptions",
    "DEFAULT_OPTIONS",
    "TypedArrayPayload",
    "BufferLikeObject",
    "is_buffer_like",
    "is_typed_array_payload",
]
