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

from typing import Any

from ...utils.formatting import contains, format_value
from ..core_schema import CoreSchema


class PrimitiveSchema(CoreSchema):
    """Schema for scalar values with explicit allowed or disallowed sets."""

    def valid(self, *values: Any):
        """Accept only the listed values."""
        allowed = list(values)
        return self._metadata(valid=allowed)._add(
            lambda v: (contains(allowed, v), f"{format_value(v)} is not allowed")
        )

    def invalid(self, *values: Any):
        """Reject the listed values."""
        denied = list(values)
        return self._metadata(invalid=denied)._add(
            lambda v: (not contains(denied, v), f"{format_value(v)} is not allowed")
        )
