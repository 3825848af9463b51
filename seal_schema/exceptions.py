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

"""Custom exceptions for seal_schema.

Validation outcomes are never raised; they are returned as lists of messages.
The exceptions below signal misuse of the library itself.
"""


class SealError(Exception):
    """Base exception for seal_schema related errors."""
    pass


class ValidationError(SealError):
    """Exception raised when a schema is built with invalid configuration.

    Carries the HTTP-like classification ``code = 400`` (bad request) so that
    web layers can surface it directly.
    """

    code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SchemaExportError(SealError):
    """Exception raised when a descriptor cannot be exported."""
    pass


class SchemaLoadError(SealError):
    """Exception raised when a schema reference or a document cannot be loaded."""
    pass
