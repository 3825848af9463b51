"""File I/O related utilities.

This package groups small modules that read data documents and schema
references and render templates to text.
"""

from .document_loader import DOCUMENT_SUFFIXES, DocumentLoader, resolve_schema_reference
from .template_renderer import TemplateRenderer

__all__ = [
    "DOCUMENT_SUFFIXES",
    "DocumentLoader",
    "resolve_schema_reference",
    "TemplateRenderer",
]
