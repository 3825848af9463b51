"""Small helpers shared by the schema implementations and the CLI."""

from .formatting import (
    contains,
    describe_type,
    distinct_count,
    format_value,
    identity_key,
    is_finite_number,
    is_integer,
    is_number,
)
from .logging_utils import configure_split_stream_logging

__all__ = [
    "contains",
    "describe_type",
    "distinct_count",
    "format_value",
    "identity_key",
    "is_finite_number",
    "is_integer",
    "is_number",
    "configure_split_stream_logging",
]
