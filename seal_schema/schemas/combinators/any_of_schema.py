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

from typing import Any, List, Sequence

from ..core_schema import CoreSchema
from .compose_schema import ComposeSchema


class AnyOfSchema(ComposeSchema):
    """Valid when at least one sub-schema accepts the value."""

    def __init__(self, schemas: Sequence[CoreSchema]):
        super().__init__("anyOf", schemas)

    def validate(self, value: Any) -> List[str]:
        results = self._collect(value)
        if any(not messages for messages in results):
            return []
        return ["all schemas are invalid", *self._flatten(results)]
