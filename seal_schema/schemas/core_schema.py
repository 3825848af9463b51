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

"""Rule chain engine and descriptor accumulator shared by every schema.

A schema is a mutable builder: chained modifiers append to the rule list and
merge into the descriptor of the receiver, then return the receiver. Any
reference to the same instance observes later modifications.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..types import Descriptor, Rule


class CoreSchema:
    """Ordered rules plus an introspection descriptor.

    Args:
        schema_type: Free-form type tag stored under ``type`` in the descriptor.
        rules: Initial rules, evaluated before anything chained later.
        descriptor: Initial descriptor fields merged over ``{"type": schema_type}``.
    """

    def __init__(
        self,
        schema_type: str,
        rules: Optional[Iterable[Rule]] = None,
        descriptor: Optional[Descriptor] = None,
    ):
        self._rules: List[Rule] = list(rules) if rules is not None else []
        self._descriptor: Descriptor = {"type": schema_type, **(descriptor or {})}

    @property
    def type(self) -> str:
        return self._descriptor["type"]

    @property
    def rules(self) -> List[Rule]:
        return self._rules

    # ---- metadata modifiers -------------------------------------------------

    @property
    def deprecated(self):
        """Mark this schema as deprecated."""
        return self._metadata(deprecated=True)

    @property
    def read_only(self):
        """Mark this schema as read-only."""
        return self._metadata(readOnly=True)

    @property
    def write_only(self):
        """Mark this schema as write-only."""
        return self._metadata(writeOnly=True)

    def description(self, text: str):
        return self._metadata(description=text)

    def example(self, value: Any):
        return self._metadata(example=value)

    def default(self, value: Any):
        return self._metadata(default=value)

    # ---- wrappers -----------------------------------------------------------

    @property
    def optional(self):
        """Return a new schema that also accepts ``MISSING``."""
        from .wrappers import OptionalSchema

        return OptionalSchema(self)

    @property
    def nullable(self):
        """Return a new schema that also accepts ``None``."""
        from .wrappers import NullableSchema

        return NullableSchema(self)

    # ---- evaluation ---------------------------------------------------------

    def validate(self, value: Any) -> List[str]:
        """Run rules in insertion order and stop at the first failure.

        Returns:
            An empty list when every rule passes, otherwise a single message.
        """
        for rule in self._rules:
            passed, message = rule(value)
            if not passed:
                return [message]
        return []

    def export_metadata(self) -> Descriptor:
        """Return the accumulated descriptor."""
        return self._descriptor

    # ---- chaining primitives ------------------------------------------------

    def _add(self, rule: Rule):
        self._rules.append(rule)
        return self

    def _metadata(self, fragment: Optional[Dict[str, Any]] = None, **fields: Any):
        # Shallow merge, later keys win. A new dict is built so that snapshots
        # previously handed out by export_metadata() stay untouched.
        self._descriptor = {**self._descriptor, **(fragment or {}), **fields}
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type!r}, rules={len(self._rules)})"
