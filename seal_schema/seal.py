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

"""Entry point for building schemas and validating values against them."""

import logging
from typing import Any, List, Sequence, Union

from .types import MISSING, Descriptor
from .schemas import (
    AllOfSchema,
    AnyOfSchema,
    ArraySchema,
    BooleanSchema,
    CoreSchema,
    DateSchema,
    NotSchema,
    NumberSchema,
    ObjectSchema,
    OneOfSchema,
    StringSchema,
)
from .schemas.composite import ObjectShape

logger = logging.getLogger(__name__)


class Seal:
    """Factory for schemas plus the validate/export helpers.

    Property constructors return a fresh schema on every access, so
    ``seal.string`` never shares state with another ``seal.string``.
    """

    @property
    def boolean(self) -> BooleanSchema:
        return BooleanSchema()

    @property
    def string(self) -> StringSchema:
        return StringSchema()

    @property
    def number(self) -> NumberSchema:
        return NumberSchema()

    @property
    def date(self) -> DateSchema:
        return DateSchema()

    def object(self, shape: ObjectShape) -> ObjectSchema:
        return ObjectSchema(shape)

    def array(self, items: Union[CoreSchema, Sequence[CoreSchema]]) -> ArraySchema:
        """Homogeneous array for a single schema, tuple array for a list of schemas."""
        return ArraySchema(items)

    def one_of(self, *schemas: CoreSchema) -> OneOfSchema:
        return OneOfSchema(schemas)

    def any_of(self, *schemas: CoreSchema) -> AnyOfSchema:
        return AnyOfSchema(schemas)

    def all_of(self, *schemas: CoreSchema) -> AllOfSchema:
        return AllOfSchema(schemas)

    def not_(self, schema: CoreSchema, excluded: CoreSchema) -> NotSchema:
        """Match *schema* while rejecting values that also match *excluded*."""
        return NotSchema(schema, excluded)

    def validate(self, schema: CoreSchema, value: Any = MISSING) -> List[str]:
        """Validate *value* against *schema*.

        Args:
            schema: A finished schema.
            value: Candidate value. Omitting it validates ``MISSING``.

        Returns:
            Error messages in evaluation order; empty when the value is valid.
        """
        errors = schema.validate(value)
        logger.debug(f"Validated against '{schema.type}' schema: {len(errors)} error(s)")
        return errors

    def export_metadata_of(self, schema: CoreSchema) -> Descriptor:
        """Return the descriptor accumulated by *schema*."""
        return schema.export_metadata()


seal = Seal()
