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

"""Per-document validation results and their output formats."""

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence


class ValidationReport:
    """Container for the validation result of a single document."""

    def __init__(self, file_path: Path):
        """Initialize the report.

        Args:
            file_path: Path to the validated document
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, message: str):
        self.errors.append({'message': message})

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'valid': self.ok,
            'errors': self.errors,
        }


def format_human(reports: Sequence[ValidationReport]) -> str:
    lines: List[str] = []
    for report in reports:
        if report.ok:
            lines.append(f"{report.file_path}: OK")
            continue
        lines.append(f"{report.file_path}:")
        for error in report.errors:
            lines.append(f"  ERROR: {error['message']}")
    return "\n".join(lines)


def format_json(reports: Sequence[ValidationReport]) -> str:
    output = {
        'files': len(reports),
        'errors': sum(len(r.errors) for r in reports),
        'results': [r.to_dict() for r in reports],
    }
    return json.dumps(output, indent=2)


def format_github_actions(reports: Sequence[ValidationReport]) -> str:
    lines: List[str] = []
    for report in reports:
        for error in report.errors:
            lines.append(f"::error file={report.file_path},line=1::{error['message']}")
    return "\n".join(lines)


FORMATTERS = {
    'human': format_human,
    'json': format_json,
    'github-actions': format_github_actions,
}
