"""Property-based tests using hypothesis."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from jsontag import (
    BigInt,
    Variant,
    decode_hex,
    encode_hex,
    from_serializable,
    is_buffer_like,
    to_serializable,
)
from jsontag.arrays import typed_array_class

json_scalars = st.none() | st.booleans() | st.floats(allow_nan=False) | st.text()
json_values = st.recursive(
    json_scalars | st.integers(min_value=-(2**53 - 1), max_value=2**53 - 1),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=10,
)


class TestHexProperties:
    """Property-based tests for the hex codec."""

    @given(data=st.binary(max_size=256))
    def test_round_trip(self, data: bytes) -> None:
        """Test decode_hex(encode_hex(b)) == b."""
        assert decode_hex(encode_hex(data)) == data

    @given(data=st.binary(max_size=64))
    def test_canonical_form(self, data: bytes) -> None:
        """Test output is prefixed, lowercase and two digits per byte."""
        text = encode_hex(data)
        assert text.startswith("0x")
        assert len(text) == 2 + 2 * len(data)
        assert text == text.lower()

    @given(data=st.binary(max_size=64))
    def test_normalizes_uppercase(self, data: bytes) -> None:
        """Test uppercase input normalizes to the canonical form."""
        text = data.hex().upper()
        assert encode_hex(decode_hex(text)) == "0x" + data.hex()


class TestBigIntProperties:
    """Property-based tests for big integers."""

    @given(n=st.integers(min_value=-(2**200), max_value=2**200))
    def test_round_trip(self, n: int) -> None:
        """Test every integer survives encode/decode."""
        assert from_serializable(to_serializable(n)) == n

    @given(n=st.integers(min_value=-(2**200), max_value=2**200))
    def test_marker_round_trip(self, n: int) -> None:
        """Test BigInt survives as BigInt."""
        decoded = from_serializable(to_serializable(BigInt(n)))
        assert isinstance(decoded, BigInt)
        assert decoded == n


@pytest.mark.parametrize("variant", list(Variant), ids=lambda v: v.type_name)
class TestVariantProperties:
    """Round-trip every variant at every whole element count."""

    @given(data=st.data())
    def test_round_trip(self, variant: Variant, data: Any) -> None:
        """Test bytes and variant survive encode/decode."""
        count = data.draw(st.integers(min_value=0, max_value=16))
        raw = data.draw(st.binary(min_size=count * variant.byte_width, max_size=count * variant.byte_width))
        original = typed_array_class(variant).from_bytes(raw)

        decoded = from_serializable(to_serializable(original))

        assert type(decoded) is type(original)
        assert decoded.tobytes() == raw


class TestCodecProperties:
    """Property-based tests for pass-through and idempotence."""

    @given(value=json_values)
    def test_decode_pass_through(self, value: Any) -> None:
        """Test untagged JSON values decode to themselves."""
        assume(not is_buffer_like(value))
        assert from_serializable(value) is value

    @given(value=json_values | st.binary(max_size=8) | st.integers())
    def test_encode_idempotent(self, value: Any) -> None:
        """Test encode(encode(x)) == encode(x)."""
        once = to_serializable(value)
        assert to_serializable(once) == once

    @given(data=st.lists(st.integers(min_value=0, max_value=255), max_size=32))
    def test_buffer_like_normalizes(self, data: list[int]) -> None:
        """Test Buffer-like objects encode and decode to the same bytes."""
        envelope = to_serializable({"type": "Buffer", "data": data})
        assert from_serializable({"type": "Buffer", "data": data}) == bytes(data)
        assert from_serializable(envelope).tobytes() == bytes(data)
