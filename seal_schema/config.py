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

"""Configuration management for seal_schema tooling."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging, resolve_level


EXPORT_FORMATS = ("json", "yaml", "json-schema", "markdown")
DEFAULT_DIALECT = "https://json-schema.org/draft/2020-12/schema"


@dataclass
class SealConfig:
    """Configuration for the export and validation tooling."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    export_format: str = "json"
    check_export: bool = True
    json_schema_dialect: str = DEFAULT_DIALECT

    def __post_init__(self) -> None:
        if self.export_format not in EXPORT_FORMATS:
            raise ValueError(
                f"Unsupported export format '{self.export_format}'. Valid formats: {list(EXPORT_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> 'SealConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('SEAL_SCHEMA_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('SEAL_SCHEMA_PRINT_LEVEL', 'ERROR'),
            export_format=os.getenv('SEAL_SCHEMA_EXPORT_FORMAT', 'json').strip().lower(),
            check_export=os.getenv('SEAL_SCHEMA_CHECK_EXPORT', 'true').lower() == 'true',
            json_schema_dialect=os.getenv('SEAL_SCHEMA_JSON_SCHEMA_DIALECT', DEFAULT_DIALECT),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = resolve_level(self.log_level, logging.INFO)
        stderr_level = resolve_level(self.print_level, logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)


# Global configuration instance
seal_config = SealConfig.from_env()
