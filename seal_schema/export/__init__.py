"""Exporters turning schema descriptors into documentation artifacts."""

from .json_schema import check_json_schema, to_json_schema
from .documents import export_document, render_reference, to_plain

__all__ = [
    "check_json_schema",
    "to_json_schema",
    "export_document",
    "render_reference",
    "to_plain",
]
