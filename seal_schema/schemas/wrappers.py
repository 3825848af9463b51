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

"""Optional and nullable wrappers around an existing schema."""

from typing import Any, List

from ..types import MISSING
from .core_schema import CoreSchema


class _WrapperSchema(CoreSchema):
    _marker = ""

    def __init__(self, inner: CoreSchema):
        descriptor = dict(inner.export_metadata())
        descriptor[self._marker] = True
        super().__init__(descriptor["type"], descriptor=descriptor)
        self.inner = inner

    def _accepts(self, value: Any) -> bool:
        raise NotImplementedError

    def validate(self, value: Any) -> List[str]:
        if self._accepts(value):
            return []
        return self.inner.validate(value)


class OptionalSchema(_WrapperSchema):
    """Accepts ``MISSING`` and delegates everything else to the inner schema.

    Inside an object shape, a key whose schema is optional may be absent.
    """

    _marker = "optional"

    def _accepts(self, value: Any) -> bool:
        return value is MISSING


class NullableSchema(_WrapperSchema):
    """Accepts ``None`` and delegates everything else to the inner schema."""

    _marker = "nullable"

    def _accepts(self, value: Any) -> bool:
        return value is None
