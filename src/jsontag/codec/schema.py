"""Envelope tags, payload shapes and codec options.

The two tag strings are the wire contract of the format: data encoded by
any implementation, in any version, carries exactly these keys. Changing
either one breaks decoding of everything encoded before.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

BIGINT_TAG = "__@json.bigint__"
TYPEDARRAY_TAG = "__@json.typedarray__"

# Largest integer an IEEE-754 double represents exactly (2**53 - 1).
MAX_SAFE_INTEGER = 9007199254740991

ByteValue = Annotated[int, Field(ge=0, le=255)]


class TypedArrayPayload(BaseModel):
    """Inner payload of a binary envelope: ``{"type": ..., "bytes": ...}``.

    Attributes:
        type: Variant name (e.g. ``"Uint16Array"``)
        bytes: ``0x``-prefixed hex string of the raw bytes
    """

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    type: str
    bytes: str


class BufferLikeObject(BaseModel):
    """Object shape some serializers emit for raw bytes.

    Example:
        ``{"type": "Buffer", "data": [0, 255, 16]}``
    """

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    type: Literal["Buffer"]
    data: List[ByteValue]


class CodecOptions(BaseModel):
    """Per-call codec configuration.

    Attributes:
        max_safe_integer: Plain ints with a magnitude above this are encoded
            as big-integer envelopes. BigInt values are always encoded.
        unknown_variant: What the decoder does with a binary envelope whose
            ``type`` is not a supported variant: ``"bytes"`` returns the raw
            decoded bytes, ``"error"`` raises InvalidPayload.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_safe_integer: int = Field(default=MAX_SAFE_INTEGER, ge=0)
    unknown_variant: Literal["bytes", "error"] = "bytes"


DEFAULT_OPTIONS = CodecOptions()


def is_buffer_like(value: Any) -> bool:
    """Check whether a value is a Buffer-like object.

    The key set must be exactly ``{"type", "data"}``, ``type`` must be
    ``"Buffer"``, and ``data`` must be a list of ints in [0, 255]
    (bools are not ints here).

    Args:
        value: Any value

    Returns:
        True if the value has the Buffer-like shape
    """
    # Cheap rejections before handing off to pydantic
    if not isinstance(value, dict) or len(value) != 2 or value.get("type") != "Buffer":
        return False
    if not isinstance(value.get("data"), list):
        return False
    try:
        BufferLikeObject.model_validate(value)
    except ValidationError:
        return False
    return True


def is_typed_array_payload(value: Any) -> bool:
    """Check whether a value is a well-formed binary envelope payload."""
    if not isinstance(value, dict):
        return False
    try:
        TypedArrayPayload.model_validate(value)
    except ValidationError:
        return False
    return True
