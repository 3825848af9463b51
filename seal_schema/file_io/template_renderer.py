"""Template rendering utilities for consistent Jinja2 rendering across the project."""

from __future__ import annotations

import json
import os

from jinja2 import Environment, FileSystemLoader, StrictUndefined


def _get_template_directories() -> list[str]:
    """Resolve template search paths.

    Works for both a source checkout and an installed package, since the
    templates ship as package data next to this module.
    """

    # Base dir is .../seal_schema/file_io
    base_dir = os.path.dirname(os.path.abspath(__file__))
    core_template_dir = os.path.abspath(os.path.join(base_dir, "../template"))

    extra = os.environ.get("SEAL_SCHEMA_TEMPLATE_DIR")
    template_dirs: list[str] = []
    if extra and os.path.isdir(extra):
        template_dirs.append(extra)
    if os.path.exists(core_template_dir):
        template_dirs.append(core_template_dir)
    return template_dirs


def tojson_filter(value, indent: int | None = None):
    """Jinja2 filter to serialize descriptor values to JSON."""

    return json.dumps(value, default=str, indent=indent)


def constraint_items(descriptor: dict) -> list[tuple[str, object]]:
    """Jinja2 filter listing the constraint keys of a descriptor for display."""

    hidden = {"type", "name", "description", "shape", "items", "tuple", "oneOf", "anyOf", "allOf", "not"}
    return [(key, value) for key, value in descriptor.items() if key not in hidden]


class TemplateRenderer:
    """Unified template rendering utility."""

    def __init__(self, template_dir: str | list[str] | None = None):
        if template_dir is None:
            template_dirs = _get_template_directories()
        elif isinstance(template_dir, str):
            template_dirs = [template_dir]
        else:
            template_dirs = list(template_dir)

        self.template_dirs = template_dirs
        self.env = Environment(
            loader=FileSystemLoader(self.template_dirs),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            newline_sequence="\n",
            autoescape=False,
            undefined=StrictUndefined,
        )
        self.env.filters["tojson"] = tojson_filter
        self.env.filters["constraints"] = constraint_items

    def render_template(self, template_name: str, **kwargs) -> str:
        template = self.env.get_template(template_name)
        return template.render(**kwargs)
