"""Scalar schemas built purely on the rule chain."""

from .base_primitive import PrimitiveSchema
from .boolean_schema import BooleanSchema
from .number_schema import NumberSchema
from .string_schema import StringSchema

__all__ = ["PrimitiveSchema", "BooleanSchema", "NumberSchema", "StringSchema"]
