"""Logical combinators over sub-schemas."""

from .all_of_schema import AllOfSchema
from .any_of_schema import AnyOfSchema
from .compose_schema import ComposeSchema
from .not_schema import NotSchema
from .one_of_schema import OneOfSchema

__all__ = ["AllOfSchema", "AnyOfSchema", "ComposeSchema", "NotSchema", "OneOfSchema"]
