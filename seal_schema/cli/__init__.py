"""Command line interface for validating documents and exporting schemas."""

from .report import ValidationReport
from .run_cli import main, run

__all__ = ['main', 'run', 'ValidationReport']
