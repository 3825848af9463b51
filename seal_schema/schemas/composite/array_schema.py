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

"""Schema for list/tuple values, homogeneous or positional (tuple mode)."""

from typing import Any, List, Optional, Sequence, Union

from ...types import Descriptor
from ...utils.formatting import SEQUENCE_TYPES, contains, describe_type, distinct_count
from ..core_schema import CoreSchema


class ArraySchema(CoreSchema):
    """Validate sequences element by element.

    Passing a single schema validates every element against it. Passing a
    list or tuple of schemas switches to tuple mode: the input must have the
    same length and each position is validated by its own schema.
    """

    def __init__(self, items: Union[CoreSchema, Sequence[CoreSchema]]):
        super().__init__("array")
        self.element_schema: Optional[CoreSchema] = None
        self.tuple_schemas: Optional[List[CoreSchema]] = None

        self._allow_duplicates = True
        self._whitelist: Optional[List[Any]] = None
        self._blacklist: Optional[List[Any]] = None

        if isinstance(items, SEQUENCE_TYPES):
            self.tuple_schemas = list(items)
            self._metadata(tuple=[s.export_metadata() for s in self.tuple_schemas])
        else:
            self.element_schema = items
            self._metadata(items=items.export_metadata())

    def name(self, name: str):
        return self._metadata(name=name)

    def min(self, n: int):
        return self._metadata(minItems=n)._add(
            lambda v: (len(v) >= n, f"shall contain at least {n} items")
        )

    def max(self, n: int):
        return self._metadata(maxItems=n)._add(
            lambda v: (len(v) <= n, f"shall contain less than {n + 1} items")
        )

    def length(self, n: int):
        return self.min(n).max(n)

    def unique(self):
        self._allow_duplicates = False
        return self._metadata(uniqueItems=True)._add(
            lambda v: (distinct_count(v) == len(v), "shall contain only unique items")
        )

    def valid(self, *values: Any):
        """Allow only the listed element values."""
        allowed = list(values)
        self._whitelist = allowed
        return self._metadata(valid=allowed)._add(
            lambda v: (all(contains(allowed, item) for item in v), "some of provided values are not allowed")
        )

    def invalid(self, *values: Any):
        """Reject arrays containing any of the listed element values."""
        denied = list(values)
        self._blacklist = denied
        return self._metadata(invalid=denied)._add(
            lambda v: (not any(contains(denied, item) for item in v), "some of provided values are not allowed")
        )

    def validate(self, value: Any) -> List[str]:
        if not isinstance(value, SEQUENCE_TYPES):
            return [f"{describe_type(value)} is not an array"]

        if self.tuple_schemas is not None:
            if len(value) != len(self.tuple_schemas):
                return ["invalid array length"]
            for schema, item in zip(self.tuple_schemas, value):
                errors = schema.validate(item)
                if errors:
                    return errors
        elif self.element_schema is not None:
            for item in value:
                errors = self.element_schema.validate(item)
                if errors:
                    return errors

        if not self._allow_duplicates and distinct_count(value) != len(value):
            return ["duplicates not allowed"]

        if self._whitelist is not None and not all(contains(self._whitelist, item) for item in value):
            return ["some of provided values are not allowed"]

        if self._blacklist is not None and any(contains(self._blacklist, item) for item in value):
            return ["some of provided values are not allowed"]

        return super().validate(value)

    def export_metadata(self) -> Descriptor:
        descriptor = dict(self._descriptor)
        if self.element_schema is not None:
            descriptor["items"] = self.element_schema.export_metadata()
        if self.tuple_schemas is not None:
            descriptor["tuple"] = [s.export_metadata() for s in self.tuple_schemas]
        return descriptor
