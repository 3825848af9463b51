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

"""String schema with length, pattern and format rules."""

import re
from typing import List, Optional, Pattern, Union
from urllib.parse import urlsplit

from ...utils.formatting import describe_type
from .base_primitive import PrimitiveSchema


ALPHANUMERIC_RE = re.compile(r"^[a-zA-Z0-9]+$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE)
IP_RE = re.compile(r"^(?:\d{1,3}\.){3}\d{1,3}$|^[0-9a-f:]+$", re.IGNORECASE)
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_TIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?Z?$")

_FLAG_LETTERS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def regex_flags(pattern: Pattern) -> str:
    """Letters for the inline flags set on *pattern* (e.g. ``"i"``)."""
    return "".join(letter for flag, letter in _FLAG_LETTERS if pattern.flags & flag)


def is_valid_url(value: str) -> bool:
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


class StringSchema(PrimitiveSchema):
    """Schema for ``str`` values. Blank strings are rejected unless ``empty`` is used."""

    def __init__(self):
        self._can_be_empty = False
        super().__init__("string", [
            lambda v: (isinstance(v, str), f"type {describe_type(v)} is not a string"),
            lambda v: (self._can_be_empty or len(v.strip()) != 0, "empty strings are not allowed"),
        ])

    @property
    def empty(self):
        """Allow blank strings."""
        self._can_be_empty = True
        return self

    def min(self, n: int):
        return self._metadata(minLength=n)._add(
            lambda v: (len(v) >= n, f"should be longer than {n - 1} symbols")
        )

    def max(self, n: int):
        return self._metadata(maxLength=n)._add(
            lambda v: (len(v) <= n, f"should be shorter than {n + 1} symbols")
        )

    def length(self, a: int, b: Optional[int] = None):
        """Require exactly *a* characters, or between *a* and *b* when *b* is given."""
        if b is None:
            return self._metadata(minLength=a, maxLength=a)._add(
                lambda v: (len(v) == a, f"should be {a} symbols long")
            )
        return self._metadata(minLength=a, maxLength=b)._add(
            lambda v: (a <= len(v) <= b, f"should be longer than {a} symbols and shorter than {b}")
        )

    def pattern(self, regex: Union[str, Pattern]):
        """Require *regex* to match somewhere in the value."""
        compiled = re.compile(regex) if isinstance(regex, str) else regex
        source: List[str] = [compiled.pattern, regex_flags(compiled)]
        return self._metadata(pattern=source)._add(
            lambda v: (compiled.search(v) is not None, f"should match {compiled.pattern}")
        )

    def starts_with(self, prefix: str):
        return self._metadata(startsWith=prefix)._add(
            lambda v: (v.startswith(prefix), f"should start with {prefix}")
        )

    def ends_with(self, suffix: str):
        return self._metadata(endsWith=suffix)._add(
            lambda v: (v.endswith(suffix), f"should end with {suffix}")
        )

    def includes(self, substring: str):
        return self._metadata(includes=substring)._add(
            lambda v: (substring in v, f"should include {substring}")
        )

    def trim(self):
        return self._add(lambda v: (v == v.strip(), "should be trimmed"))

    def lowercase(self):
        return self._add(lambda v: (v == v.lower(), "should be lowercase"))

    def uppercase(self):
        return self._add(lambda v: (v == v.upper(), "should be uppercase"))

    def alphanumeric(self):
        return self._metadata({"x-format": "alphanumeric"}).pattern(ALPHANUMERIC_RE)

    def email(self):
        return self._metadata(format="email").pattern(EMAIL_RE)

    def uri(self):
        return self._metadata(format="uri")._add(lambda v: (is_valid_url(v), "should be a valid url"))

    def uuid(self):
        return self._metadata(format="uuid").pattern(UUID_RE)

    def ip(self):
        """IPv4 dotted quad or a loose IPv6 shape."""
        return self._metadata(format="ip").pattern(IP_RE)

    def iso_date(self):
        return self._metadata(format="date").pattern(ISO_DATE_RE)

    def date_time(self):
        return self._metadata(format="date-time").pattern(DATE_TIME_RE)
