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

"""Base class for schemas composed from an ordered list of sub-schemas.

Unlike primitive rule chains, composed schemas evaluate every sub-schema on
each call and aggregate their messages in declaration order.
"""

from typing import Any, List, Sequence

from ..core_schema import CoreSchema


class ComposeSchema(CoreSchema):
    """Holds the sub-schemas captured at construction.

    Args:
        type_label: Descriptor type and key under which the sub-schema
            descriptors are recorded (e.g. "oneOf").
        schemas: Sub-schemas, evaluated in this order.
    """

    def __init__(self, type_label: str, schemas: Sequence[CoreSchema]):
        super().__init__(type_label)
        self.schemas: List[CoreSchema] = list(schemas)
        self._metadata({type_label: [s.export_metadata() for s in self.schemas]})

    def _collect(self, value: Any) -> List[List[str]]:
        return [schema.validate(value) for schema in self.schemas]

    @staticmethod
    def _flatten(results: List[List[str]]) -> List[str]:
        return [message for messages in results for message in messages]
