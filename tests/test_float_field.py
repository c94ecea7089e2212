"""
Tests for float field values over numeric doc values.
"""

import numpy as np
import pytest

from wordvec.function import (
    NO_MORE_DOCS,
    ArrayNumericDocValues,
    FloatFieldSource,
    NumericDocValues,
    float_to_int_bits,
    int_bits_to_float,
)


@pytest.fixture
def price_values():
    """Field 'price' with values for docs 1, 4 and 7 (doc 4 stores 0.0)."""
    source = FloatFieldSource("price")
    doc_values = ArrayNumericDocValues.from_floats([1, 4, 7], [2.5, 0.0, -1.25])
    return source.get_values(doc_values)


class TestBitConversion:

    def test_round_trip(self):
        for value in [0.0, 1.5, -3.25, np.float32(0.1)]:
            assert int_bits_to_float(float_to_int_bits(value)) == np.float32(value)

    def test_known_patterns(self):
        assert float_to_int_bits(1.0) == 0x3F800000
        assert int_bits_to_float(0x3F800000) == 1.0
        # Sign bit set: negative 32-bit pattern
        assert float_to_int_bits(-2.0) == -0x40000000
        assert int_bits_to_float(-0x40000000) == -2.0


class TestArrayNumericDocValues:

    def test_is_numeric_doc_values(self):
        assert isinstance(ArrayNumericDocValues([], []), NumericDocValues)

    def test_advance(self):
        values = ArrayNumericDocValues([2, 5, 9], [20, 50, 90])

        assert values.doc_id() == -1
        assert values.advance(0) == 2
        assert values.long_value() == 20
        assert values.advance(3) == 5
        assert values.advance(9) == 9
        assert values.long_value() == 90
        assert values.advance(10) == NO_MORE_DOCS
        assert values.doc_id() == NO_MORE_DOCS

    def test_long_value_requires_position(self):
        values = ArrayNumericDocValues([2], [20])

        with pytest.raises(RuntimeError):
            values.long_value()

    @pytest.mark.parametrize("docs, vals", [([3, 1], [0, 0]), ([1, 1], [0, 0]), ([-1], [0]), ([1, 2], [0])])
    def test_invalid_construction(self, docs, vals):
        with pytest.raises(ValueError):
            ArrayNumericDocValues(docs, vals)


class TestFloatDocValues:

    def test_stored_values(self, price_values):
        assert price_values.float_val(1) == 2.5
        assert price_values.float_val(7) == -1.25

    def test_missing_value_defaults_to_zero(self, price_values):
        assert price_values.exists(0) is False
        assert price_values.float_val(2) == 0.0
        assert price_values.exists(4) is True

    def test_stored_zero_distinct_from_missing(self, price_values):
        assert price_values.object_val(3) is None
        assert price_values.object_val(4) == 0.0

    def test_same_doc_repeatedly(self, price_values):
        assert price_values.exists(4)
        assert price_values.exists(4)
        assert price_values.float_val(4) == 0.0

    def test_out_of_order_rejected(self, price_values):
        price_values.exists(7)

        with pytest.raises(ValueError, match="docs were sent out-of-order: lastDocID=7 vs docID=4"):
            price_values.exists(4)

    def test_past_last_doc(self, price_values):
        assert price_values.float_val(100) == 0.0
        assert price_values.exists(200) is False

    def test_conversions(self, price_values):
        assert price_values.double_val(1) == 2.5
        assert price_values.int_val(1) == 2
        assert price_values.str_val(1) == "2.5"
        assert price_values.to_string(7) == "float(price)=-1.25"


class TestFloatFieldSource:

    def test_description(self):
        assert FloatFieldSource("price").description() == "float(price)"

    def test_equality(self):
        assert FloatFieldSource("price") == FloatFieldSource("price")
        assert FloatFieldSource("price") != FloatFieldSource("weight")
        assert hash(FloatFieldSource("price")) == hash(FloatFieldSource("price"))

    def test_subclass_not_equal(self):
        class OtherSource(FloatFieldSource):
            pass

        assert FloatFieldSource("price") != OtherSource("price")
        assert OtherSource("price") != FloatFieldSource("price")
        assert not FloatFieldSource("price") == OtherSource("price")
        assert OtherSource("price") == OtherSource("price")
