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

"""Loading of data documents and schema references for the CLI."""

import importlib
import logging
from pathlib import Path
from typing import Any, Union

import yaml

from ..exceptions import SchemaLoadError
from ..schemas import CoreSchema
from ..types import MISSING

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".yaml", ".yml", ".json")


class DocumentLoader:
    """YAML/JSON document loader."""

    def load(self, file_path: Union[str, Path]) -> Any:
        """Load a YAML or JSON document.

        An empty file yields ``MISSING`` so that it validates like an absent value.

        Raises:
            SchemaLoadError: If the file is missing or cannot be parsed.
        """
        path = Path(file_path)

        if not path.exists():
            raise SchemaLoadError(f"Document not found: {path}")

        if not path.is_file():
            raise SchemaLoadError(f"Path is not a file: {path}")

        logger.debug(f"Loading document: {path}")
        try:
            content = path.read_text(encoding="utf-8")
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SchemaLoadError(f"Invalid YAML/JSON in {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaLoadError(f"Failed to read {path}: {e}") from e

        if data is None and not content.strip():
            data = MISSING
        return data


def resolve_schema_reference(reference: str) -> CoreSchema:
    """Import a schema given as ``package.module:attribute``.

    The attribute may be a dotted path (``module:Schemas.user``) and may
    point at a zero-argument callable returning a schema.

    Raises:
        SchemaLoadError: If the reference is malformed, cannot be imported
            or does not resolve to a schema.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise SchemaLoadError(f"Invalid schema reference '{reference}'. Expected 'package.module:attribute'")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise SchemaLoadError(f"Cannot import module '{module_name}': {e}") from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise SchemaLoadError(f"'{reference}' has no attribute '{part}'") from e

    if callable(target) and not isinstance(target, CoreSchema):
        target = target()

    if not isinstance(target, CoreSchema):
        raise SchemaLoadError(f"'{reference}' is not a schema (got {type(target).__name__})")

    logger.debug(f"Resolved schema reference '{reference}' to {target!r}")
    return target
