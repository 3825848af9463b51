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

"""Composable runtime validation schemas with exportable descriptors."""

__version__ = "0.3.0"

from .exceptions import SealError, ValidationError, SchemaExportError, SchemaLoadError
from .types import MISSING
from .schemas import (
    CoreSchema,
    NullableSchema,
    OptionalSchema,
    PrimitiveSchema,
    BooleanSchema,
    NumberSchema,
    StringSchema,
    ArraySchema,
    DateSchema,
    ObjectSchema,
    ComposeSchema,
    AllOfSchema,
    AnyOfSchema,
    NotSchema,
    OneOfSchema,
)
from .seal import Seal, seal

__all__ = [
    "__version__",
    "seal",
    "Seal",
    "MISSING",
    "SealError",
    "ValidationError",
    "SchemaExportError",
    "SchemaLoadError",
    "CoreSchema",
    "NullableSchema",
    "OptionalSchema",
    "PrimitiveSchema",
    "BooleanSchema",
    "NumberSchema",
    "StringSchema",
    "ArraySchema",
    "DateSchema",
    "ObjectSchema",
    "ComposeSchema",
    "AllOfSchema",
    "AnyOfSchema",
    "NotSchema",
    "OneOfSchema",
]
