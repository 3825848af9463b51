# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Render schema descriptors as JSON, YAML, JSON Schema or Markdown text."""

import json
import logging
from typing import Any, Dict, Optional

import yaml

from ..config import EXPORT_FORMATS, SealConfig, seal_config
from ..exceptions import SchemaExportError
from ..file_io.template_renderer import TemplateRenderer
from ..schemas import CoreSchema
from ..types import Descriptor
from .json_schema import check_json_schema, to_json_schema

logger = logging.getLogger(__name__)

REFERENCE_TEMPLATE = "schema_reference.md.jinja2"


def to_plain(descriptor: Descriptor) -> Dict[str, Any]:
    """Return a copy of *descriptor* holding only JSON-compatible values."""
    return json.loads(json.dumps(descriptor, default=str))


def render_reference(schemas: Dict[str, CoreSchema], renderer: Optional[TemplateRenderer] = None) -> str:
    """Render a Markdown reference page for the given named schemas."""
    renderer = renderer or TemplateRenderer()
    entries = [
        {"name": name, "descriptor": to_plain(schema.export_metadata())}
        for name, schema in schemas.items()
    ]
    return renderer.render_template(REFERENCE_TEMPLATE, schemas=entries)


def export_document(
    schema: CoreSchema,
    fmt: Optional[str] = None,
    *,
    name: str = "Schema",
    config: Optional[SealConfig] = None,
) -> str:
    """Serialize *schema* in one of ``json``, ``yaml``, ``json-schema`` or ``markdown``.

    Raises:
        SchemaExportError: On an unknown format, or when the JSON Schema
            output fails the meta-schema check (if enabled in *config*).
    """
    config = config or seal_config
    fmt = fmt or config.export_format
    if fmt not in EXPORT_FORMATS:
        raise SchemaExportError(f"Unknown export format '{fmt}'. Valid formats: {list(EXPORT_FORMATS)}")

    logger.debug(f"Exporting '{schema.type}' schema as {fmt}")

    if fmt == "json":
        return json.dumps(to_plain(schema.export_metadata()), indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(to_plain(schema.export_metadata()), sort_keys=False, allow_unicode=True)
    if fmt == "json-schema":
        document = to_plain(to_json_schema(schema, dialect=config.json_schema_dialect))
        if config.check_export:
            check_json_schema(document)
        return json.dumps(document, indent=2)
    return render_reference({name: schema})
