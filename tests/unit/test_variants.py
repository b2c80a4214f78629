"""Unit tests for variant classification."""

from __future__ import annotations

import array
import ctypes
import sys

import pytest

from jsontag import (
    Float32Array,
    Float64Array,
    Int16Array,
    Uint8Array,
    Uint8ClampedArray,
    Variant,
    classify_view,
    is_typed_array,
    typed_array_name,
)
from jsontag.arrays.variants import variant_for_format


class TestVariant:
    """Test the Variant enum."""

    def test_eleven_variants(self) -> None:
        """Test exactly 11 variants exist with unique names."""
        names = {variant.type_name for variant in Variant}
        assert len(Variant) == 11
        assert names == {
            "Int8Array",
            "Uint8Array",
            "Uint8ClampedArray",
            "Int16Array",
            "Uint16Array",
            "Int32Array",
            "Uint32Array",
            "Float32Array",
            "Float64Array",
            "BigInt64Array",
            "BigUint64Array",
        }

    @pytest.mark.parametrize(
        "name,width",
        [
            ("Int8Array", 1),
            ("Uint8ClampedArray", 1),
            ("Uint16Array", 2),
            ("Int32Array", 4),
            ("Float32Array", 4),
            ("Float64Array", 8),
            ("BigUint64Array", 8),
        ],
    )
    def test_byte_width(self, name: str, width: int) -> None:
        """Test element widths."""
        variant = Variant.from_name(name)
        assert variant is not None
        assert variant.byte_width == width

    def test_from_name_unknown(self) -> None:
        """Test unknown or non-string names."""
        assert Variant.from_name("DataView") is None
        assert Variant.from_name("Array") is None
        assert Variant.from_name(None) is None

    def test_families(self) -> None:
        """Test signedness and float flags."""
        assert Variant.INT8.signed
        assert not Variant.UINT8.signed
        assert Variant.FLOAT32.is_float
        assert not Variant.BIGINT64.is_float
        assert Variant.UINT8_CLAMPED.is_clamped
        assert not Variant.UINT8.is_clamped


class TestClassifyView:
    """Test classify_view() across view shapes."""

    def test_typed_arrays(self) -> None:
        """Test TypedArray instances classify by class name."""
        assert classify_view(Uint8Array(2)) is Variant.UINT8
        assert classify_view(Uint8ClampedArray(2)) is Variant.UINT8_CLAMPED
        assert classify_view(Int16Array(2)) is Variant.INT16
        assert classify_view(Float64Array(2)) is Variant.FLOAT64

    def test_subclass_falls_back_to_tag(self) -> None:
        """Test a user subclass resolves through its descriptive tag."""

        class Samples(Float32Array):
            pass

        samples = Samples(3)
        assert samples.to_string_tag == "[object Float32Array]"
        assert typed_array_name(samples) == "Float32Array"
        assert classify_view(samples) is Variant.FLOAT32

    def test_array_module(self) -> None:
        """Test array.array classifies by typecode and item size."""
        assert classify_view(array.array("b", [1])) is Variant.INT8
        assert classify_view(array.array("B", [1])) is Variant.UINT8
        assert classify_view(array.array("h", [1])) is Variant.INT16
        assert classify_view(array.array("H", [1])) is Variant.UINT16
        assert classify_view(array.array("q", [1])) is Variant.BIGINT64
        assert classify_view(array.array("Q", [1])) is Variant.BIGUINT64
        assert classify_view(array.array("f", [1.0])) is Variant.FLOAT32
        assert classify_view(array.array("d", [1.0])) is Variant.FLOAT64

    def test_memoryview(self) -> None:
        """Test memoryviews classify by format."""
        raw = bytearray(8)
        assert classify_view(memoryview(raw)) is Variant.UINT8
        assert classify_view(memoryview(raw).cast("H")) is Variant.UINT16
        assert classify_view(memoryview(raw).cast("d")) is Variant.FLOAT64

    @pytest.mark.parametrize("prefix", ["", "@", "="])
    def test_native_format_prefixes(self, prefix: str) -> None:
        """Test native-order format prefixes are accepted."""
        assert variant_for_format(prefix + "H", 2) is Variant.UINT16
        assert variant_for_format(prefix + "d", 8) is Variant.FLOAT64

    def test_explicit_byte_order(self) -> None:
        """Test explicit orders match only when they are the native order."""
        native, foreign = ("<", ">") if sys.byteorder == "little" else (">", "<")
        assert variant_for_format(native + "I", 4) is Variant.UINT32
        assert variant_for_format(foreign + "I", 4) is None

    def test_ctypes_memoryview(self) -> None:
        """Test memoryviews over ctypes arrays, which report '<'/'>' formats."""
        native = memoryview((ctypes.c_uint16 * 2)(1, 2))
        assert native.format[:1] in "<>"
        assert classify_view(native) is Variant.UINT16

        swapped_type = (
            ctypes.c_uint16.__ctype_be__ if sys.byteorder == "little" else ctypes.c_uint16.__ctype_le__
        )
        assert classify_view(memoryview((swapped_type * 2)(1, 2))) is None

    def test_untyped_memoryview(self) -> None:
        """Test memoryviews without a variant are not typed arrays."""
        view = memoryview(bytearray(4)).cast("c")
        assert not is_typed_array(view)
        assert classify_view(view) is None

    def test_multidimensional_memoryview(self) -> None:
        """Test only one-dimensional memoryviews qualify."""
        view = memoryview(bytearray(4)).cast("B", shape=[2, 2])
        assert classify_view(view) is None

    @pytest.mark.parametrize(
        "value",
        [b"abc", bytearray(b"abc"), [1, 2, 3], {"type": "Buffer", "data": [1]}, "x", 3, None],
    )
    def test_not_views(self, value: object) -> None:
        """Test raw buffers and plain values are not typed arrays."""
        assert not is_typed_array(value)
        assert classify_view(value) is None
