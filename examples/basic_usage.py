#!/usr/bin/env python3
"""Basic usage example for jsontag.

This example demonstrates:
1. Encoding single values into envelopes
2. Decoding envelopes back into typed values
3. Encoding a view over part of a shared buffer
4. Round-tripping a whole document through JSON text
"""

from __future__ import annotations

import json

from jsontag import (
    BigInt,
    Float32Array,
    Int32Array,
    Uint8Array,
    dumps,
    from_serializable,
    loads,
    to_serializable,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("jsontag Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding single values...")
    for value in (BigInt(2**70), Uint8Array([0, 255, 16]), {"type": "Buffer", "data": [104, 105]}):
        print(f"   {value!r}")
        print(f"   -> {json.dumps(to_serializable(value))}")
    print()

    print("2. Decoding envelopes...")
    envelope = to_serializable(Float32Array([0.5, -1.25]))
    decoded = from_serializable(envelope)
    print(f"   {envelope}")
    print(f"   -> {decoded!r}")
    print()

    print("3. Encoding a view over a shared buffer...")
    buffer = bytearray(range(12))
    word = Int32Array(buffer, 4, 1)
    print(f"   buffer: {buffer.hex()}")
    print(f"   Int32Array at offset 4 -> {to_serializable(word)}")
    print()

    print("4. Round-tripping a document...")
    document = {"id": BigInt(18446744073709551617), "payload": b"\x01\x02", "name": "probe"}
    text = dumps(document, indent=2)
    print(text)
    restored = loads(text)
    print(f"   Restored: {restored!r}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
