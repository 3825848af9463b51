"""Schemas that validate containers or need input conversion."""

from .array_schema import ArraySchema
from .date_schema import DateSchema
from .object_schema import ObjectSchema, ObjectShape

__all__ = ["ArraySchema", "DateSchema", "ObjectSchema", "ObjectShape"]
