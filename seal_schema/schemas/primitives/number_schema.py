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

"""Numeric schema.

Descriptor fields contributed here: ``minimum``, ``maximum``,
``exclusiveMinimum``, ``exclusiveMaximum``, ``multipleOf``, ``format``
(``int32``/``int64``), ``x-precision`` and a refined ``type``
(``integer``/``float``).
"""

from ...utils.formatting import format_value, is_finite_number, is_integer
from .base_primitive import PrimitiveSchema


NUMBER_FORMATS = ("int32", "int64")


class NumberSchema(PrimitiveSchema):
    """Schema for finite int/float values."""

    def __init__(self):
        super().__init__("number", [
            lambda v: (is_finite_number(v), f"{format_value(v)} is not a valid integer number"),
        ])

    @property
    def integer(self):
        """Require an integral value."""
        return self._metadata(type="integer")._add(lambda v: (is_integer(v), "shall be an integer"))

    @property
    def float(self):
        """Require a value with a fractional part."""
        return self._metadata(type="float")._add(lambda v: (not is_integer(v), "shall not be an integer"))

    @property
    def double(self):
        return self.float

    @property
    def positive(self):
        return self.gt(0)

    @property
    def negative(self):
        return self.lt(0)

    @property
    def port(self):
        """Integer in the TCP/UDP port range."""
        return self.integer.format("int32").gte(0).lte(65535)

    def gte(self, n):
        return self._metadata(minimum=n)._add(
            lambda v: (v >= n, f"shall be greater than or equal to {format_value(n)}")
        )

    def lte(self, n):
        return self._metadata(maximum=n)._add(
            lambda v: (v <= n, f"shall be less than or equal to {format_value(n)}")
        )

    def gt(self, n):
        return self._metadata(exclusiveMinimum=n)._add(
            lambda v: (v > n, f"shall be greater than {format_value(n)}")
        )

    def lt(self, n):
        return self._metadata(exclusiveMaximum=n)._add(
            lambda v: (v < n, f"shall be less than {format_value(n)}")
        )

    def min(self, n):
        return self.gte(n)

    def max(self, n):
        return self.lte(n)

    def format(self, fmt: str = "int64"):
        """Record a numeric format without adding a rule."""
        return self._metadata(format=fmt)

    def multiple(self, base):
        return self._metadata(multipleOf=base)._add(
            lambda v: (base != 0 and v % base == 0, f"shall be a multiple of {format_value(base)}")
        )

    def precision(self, decimals: int):
        """Allow at most *decimals* digits after the decimal point."""
        factor = 10 ** decimals
        return self._metadata({"x-precision": decimals})._add(
            lambda v: (is_integer(v * factor), f"shall be accurate to {format_value(factor)}")
        )
