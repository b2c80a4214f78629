"""JSON integration helpers.

The codec works on one value at a time. These helpers apply it across a
whole document and wire it into the standard library json module, for
callers who do not already have their own traversal.

Example:
    >>> from jsontag import BigInt, Uint16Array
    >>> text = dumps({"id": BigInt(2**64), "samples": Uint16Array([1, 2])})
    >>> loads(text)["id"]
    BigInt(18446744073709551616)
"""

from __future__ import annotations

import functools
import json
from typing import Any, Optional

from .codec.decoder import from_serializable
from .codec.encoder import to_serializable
from .codec.schema import CodecOptions


def encode_tree(value: Any, options: Optional[CodecOptions] = None) -> Any:
    """Encode every position of a value tree, top-down.

    Each value is passed through to_serializable() first. Envelopes are
    final; untagged dicts, lists and tuples are then walked. Tuples become
    lists. The input is not mutated.

    Args:
        value: Root value
        options: Codec options

    Returns:
        JSON-safe copy of the tree
    """
    encoded = to_serializable(value, options)
    if encoded is not value:
        return encoded

    if isinstance(value, dict):
        return {key: encode_tree(item, options) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_tree(item, options) for item in value]
    return value


def decode_tree(value: Any, options: Optional[CodecOptions] = None) -> Any:
    """Decode every position of a value tree, bottom-up.

    Children are decoded before their parent, which matches the order
    json.loads() calls its ``object_hook``.

    Args:
        value: Root value, typically fresh out of json.loads()
        options: Codec options

    Returns:
        Decoded copy of the tree

    Raises:
        InvalidEncoding: If an envelope carries malformed text
        InvalidPayload: If a binary envelope payload is malformed
    """
    if isinstance(value, dict):
        value = {key: decode_tree(item, options) for key, item in value.items()}
    elif isinstance(value, list):
        value = [decode_tree(item, options) for item in value]
    return from_serializable(value, options)


def dumps(value: Any, *, options: Optional[CodecOptions] = None, **kwargs: Any) -> str:
    """Serialize a value tree to a JSON string.

    Args:
        value: Root value
        options: Codec options
        **kwargs: Passed through to json.dumps()

    Returns:
        JSON text
    """
    return json.dumps(encode_tree(value, options), **kwargs)


def loads(text: str | bytes, *, options: Optional[CodecOptions] = None, **kwargs: Any) -> Any:
    """Parse JSON text and rebuild every envelope in it.

    Args:
        text: JSON text
        options: Codec options
        **kwargs: Passed through to json.loads() (``object_hook`` is reserved)

    Returns:
        Decoded value tree

    Raises:
        InvalidEncoding: If an envelope carries malformed text
        InvalidPayload: If a binary envelope payload is malformed
    """
    if "object_hook" in kwargs or "object_pairs_hook" in kwargs:
        raise TypeError("loads() installs its own object_hook")
    return json.loads(
        text, object_hook=functools.partial(from_serializable, options=options), **kwargs
    )
