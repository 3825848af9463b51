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

"""Schema for mappings with a fixed set of keys."""

from collections.abc import Mapping
from typing import Any, Dict, List

from ...types import Descriptor
from ..core_schema import CoreSchema
from ..wrappers import OptionalSchema


ObjectShape = Dict[str, CoreSchema]


class ObjectSchema(CoreSchema):
    """Validate a mapping against a shape of per-key schemas.

    Validation stops at the first problem found, in this order:
    input type, missing required keys (in shape order), unknown keys
    (unless loose), then each present key in shape order. Nested messages
    are prefixed with ``key "<name>" ``.

    Args:
        shape: Mapping from key to child schema. The mapping is kept by
            reference, so it is shared with schemas derived through ``loose``.
    """

    def __init__(self, shape: ObjectShape):
        super().__init__("object")
        self.shape = shape
        self.is_loose = False

    @property
    def loose(self) -> "ObjectSchema":
        """Return a new schema over the same shape that tolerates unknown keys."""
        schema = ObjectSchema(self.shape)
        schema.is_loose = True
        return schema

    def name(self, name: str):
        return self._metadata(name=name)

    def external_docs(self, docs: Dict[str, str]):
        """Attach ``{"description": ..., "url": ...}`` documentation metadata."""
        return self._metadata(externalDocs=docs)

    def validate(self, value: Any) -> List[str]:
        if not isinstance(value, Mapping):
            return ["not an object"]

        for key, schema in self.shape.items():
            if key not in value and not isinstance(schema, OptionalSchema):
                return [f'key "{key}" not found']

        has_unknown_keys = any(key not in self.shape for key in value)
        if has_unknown_keys and not self.is_loose:
            return ["unknown keys not allowed"]

        for key, schema in self.shape.items():
            if key not in value:
                continue
            errors = schema.validate(value[key])
            if errors:
                return [f'key "{key}" {message}' for message in errors]

        return []

    def export_metadata(self) -> Descriptor:
        return {
            **self._descriptor,
            "shape": {key: schema.export_metadata() for key, schema in self.shape.items()},
        }
