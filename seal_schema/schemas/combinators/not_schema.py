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

from typing import Any, List

from ..core_schema import CoreSchema


class NotSchema(CoreSchema):
    """Valid when the base schema accepts the value and the excluded one rejects it.

    The descriptor follows the JSON Schema idiom allOf: [base] plus
    not: excluded.
    """

    def __init__(self, base: CoreSchema, excluded: CoreSchema):
        super().__init__("not")
        self.base = base
        self.excluded = excluded
        self._metadata({
            "allOf": [base.export_metadata()],
            "not": excluded.export_metadata(),
        })

    def validate(self, value: Any) -> List[str]:
        base_errors = self.base.validate(value)
        excluded_errors = self.excluded.validate(value)

        passes_base = not base_errors
        fails_excluded = bool(excluded_errors)
        if passes_base and fails_excluded:
            return []

        if not passes_base:
            return ["base schema is invalid", *base_errors]
        return ["value must not match the excluded schema", *excluded_errors]
