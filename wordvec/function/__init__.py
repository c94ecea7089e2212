# Package initialization for field value sources
from .float_field import (
    NO_MORE_DOCS,
    NumericDocValues,
    ArrayNumericDocValues,
    FloatDocValues,
    FloatFieldSource,
    int_bits_to_float,
    float_to_int_bits,
)

__all__ = [
    'NO_MORE_DOCS',
    'NumericDocValues',
    'ArrayNumericDocValues',
    'FloatDocValues',
    'FloatFieldSource',
    'int_bits_to_float',
    'float_to_int_bits'
]
