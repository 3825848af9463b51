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

"""Schema for points in time.

Inputs may be ``datetime``/``date`` objects or ISO 8601 strings. Naive
values are read as UTC so that every comparison happens between aware
datetimes. Bounds are rendered as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.
"""

import logging
from datetime import date, datetime, time, timezone
from typing import Any, List, Optional, Union

from ...exceptions import ValidationError
from ...utils.formatting import describe_type
from ..core_schema import CoreSchema

logger = logging.getLogger(__name__)

DateLike = Union[datetime, date, str]


def to_datetime(value: Any) -> Optional[datetime]:
    """Convert *value* to an aware UTC datetime.

    Returns None when *value* is not a date, or when its UTC equivalent
    falls outside the ``datetime`` range.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        try:
            return value.astimezone(timezone.utc)
        except OverflowError:
            return None
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except (ValueError, OverflowError):
            return None
        return to_datetime(parsed)
    return None


def to_iso(value: datetime) -> str:
    value = value.astimezone(timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


class DateSchema(CoreSchema):
    """Schema for dates with optional inclusive bounds."""

    def __init__(self):
        super().__init__("string", [
            lambda v: (isinstance(v, datetime), f"{describe_type(v)} is not a valid date"),
        ])
        self.min_date: Optional[datetime] = None
        self.max_date: Optional[datetime] = None
        self._metadata(format="date-time")

    @property
    def date(self):
        """Require a calendar date (no time of day)."""
        return self._metadata(format="date")._add(
            lambda v: (v.time() == time(), f"{to_iso(v)} is not a valid RFC 3339 date")
        )

    @property
    def date_time(self):
        return self._metadata(format="date-time")

    @property
    def past(self):
        return self.max(datetime.now(timezone.utc))

    @property
    def future(self):
        return self.min(datetime.now(timezone.utc))

    def display(self, pattern: str):
        """Record a display pattern for documentation; no rule is added."""
        return self._metadata({"x-date-format": pattern})

    def min(self, bound: DateLike):
        """Inclusive lower bound.

        Raises:
            ValidationError: If *bound* is not a date or a parsable ISO string.
        """
        parsed = to_datetime(bound)
        if parsed is None:
            logger.debug(f"Rejected min date bound: {bound!r}")
            raise ValidationError("Invalid min date")
        self.min_date = parsed
        iso = to_iso(parsed)
        return self._metadata(minimum=iso)._add(
            lambda v: (v >= parsed, f"shall be greater than or equal to {iso}")
        )

    def max(self, bound: DateLike):
        """Inclusive upper bound.

        Raises:
            ValidationError: If *bound* is not a date or a parsable ISO string.
        """
        parsed = to_datetime(bound)
        if parsed is None:
            logger.debug(f"Rejected max date bound: {bound!r}")
            raise ValidationError("Invalid max date")
        self.max_date = parsed
        iso = to_iso(parsed)
        return self._metadata(maximum=iso)._add(
            lambda v: (v <= parsed, f"shall be less than or equal to {iso}")
        )

    def between(self, lower: DateLike, upper: DateLike):
        return self.min(lower).max(upper)

    def validate(self, value: Any) -> List[str]:
        if not isinstance(value, (str, datetime, date)):
            return [f"{describe_type(value)} is not a valid date"]

        converted = to_datetime(value)
        if converted is None:
            text = value if isinstance(value, str) else value.isoformat()
            return [f"{text} is not a valid date"]

        if self.min_date is not None and converted < self.min_date:
            return [f"shall be greater than or equal to {to_iso(self.min_date)}"]
        if self.max_date is not None and converted > self.max_date:
            return [f"shall be less than or equal to {to_iso(self.max_date)}"]

        return super().validate(converted)
