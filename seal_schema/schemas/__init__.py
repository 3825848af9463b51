"""Schema kinds: rule-chain primitives, wrappers, structural schemas and combinators.

Every kind shares the ``validate(value)`` / ``export_metadata()`` interface
defined by :class:`CoreSchema`.
"""

from .core_schema import CoreSchema
from .wrappers import NullableSchema, OptionalSchema
from .primitives import BooleanSchema, NumberSchema, PrimitiveSchema, StringSchema
from .composite import ArraySchema, DateSchema, ObjectSchema
from .combinators import AllOfSchema, AnyOfSchema, ComposeSchema, NotSchema, OneOfSchema

__all__ = [
    # Core
    "CoreSchema",
    "NullableSchema",
    "OptionalSchema",
    # Primitives
    "PrimitiveSchema",
    "BooleanSchema",
    "NumberSchema",
    "StringSchema",
    # Composite
    "ArraySchema",
    "DateSchema",
    "ObjectSchema",
    # Combinators
    "ComposeSchema",
    "AllOfSchema",
    "AnyOfSchema",
    "NotSchema",
    "OneOfSchema",
]
