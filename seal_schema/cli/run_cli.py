#!/usr/bin/env python3
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

"""CLI entry point: validate documents against a schema, or export its descriptor."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import EXPORT_FORMATS, SealConfig, seal_config
from ..exceptions import SchemaExportError, SchemaLoadError
from ..export import export_document
from ..file_io import DOCUMENT_SUFFIXES, DocumentLoader, resolve_schema_reference
from ..schemas import CoreSchema
from ..seal import seal
from .report import FORMATTERS, ValidationReport

logger = logging.getLogger(__name__)


def find_documents(paths: List[str]) -> List[Path]:
    """Find all YAML/JSON documents in given paths."""
    documents = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            documents.append(path)
        elif path.is_dir():
            for suffix in DOCUMENT_SUFFIXES:
                documents.extend(path.rglob(f'*{suffix}'))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(documents))


def validate_documents(schema: CoreSchema, documents: List[Path], loader: DocumentLoader) -> List[ValidationReport]:
    reports = []
    for document in documents:
        report = ValidationReport(document)
        try:
            data = loader.load(document)
        except SchemaLoadError as e:
            report.add_error(str(e))
        else:
            for message in seal.validate(schema, data):
                report.add_error(message)
        logger.debug(f"{document}: {len(report.errors)} error(s)")
        reports.append(report)
    return reports


def _run_validate(args: argparse.Namespace, config: SealConfig) -> int:
    schema = resolve_schema_reference(args.schema)

    documents = find_documents(args.paths)
    if not documents:
        print("No documents found.", file=sys.stderr)
        return 1

    reports = validate_documents(schema, documents, DocumentLoader())
    print(FORMATTERS[args.format](reports))

    total_errors = sum(len(r.errors) for r in reports)
    if total_errors > 0:
        return 1
    if args.format == 'human':
        print("Validation succeeded with no errors.")
    return 0


def _run_export(args: argparse.Namespace, config: SealConfig) -> int:
    schema = resolve_schema_reference(args.schema)
    name = args.name or args.schema.rpartition(":")[2]
    content = export_document(schema, args.format, name=name, config=config)

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content if content.endswith("\n") else content + "\n", encoding="utf-8")
        logger.info(f"Exported '{args.schema}' to {output}")
    else:
        print(content)
    return 0


def build_parser(config: SealConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seal-schema',
        description='Validate documents against seal schemas and export schema descriptors',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help=f'Logging level (default: {config.log_level})',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    validate_parser = subparsers.add_parser('validate', help='Validate YAML/JSON documents')
    validate_parser.add_argument('schema', help="Schema reference, 'package.module:attribute'")
    validate_parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='Document paths or directories (default: current directory)',
    )
    validate_parser.add_argument(
        '--format',
        choices=sorted(FORMATTERS),
        default='human',
        help='Output format (default: human)',
    )

    export_parser = subparsers.add_parser('export', help='Export a schema descriptor')
    export_parser.add_argument('schema', help="Schema reference, 'package.module:attribute'")
    export_parser.add_argument(
        '--format',
        choices=EXPORT_FORMATS,
        default=config.export_format,
        help=f'Output format (default: {config.export_format})',
    )
    export_parser.add_argument('--name', default=None, help='Title used by the markdown format')
    export_parser.add_argument('--output', '-o', default=None, help='Write to this file instead of stdout')
    return parser


def main(argv: Optional[List[str]] = None, config: Optional[SealConfig] = None) -> int:
    """Main entry point for the CLI. Returns the process exit code."""
    config = config or seal_config
    parser = build_parser(config)
    args = parser.parse_args(argv)

    if args.log_level:
        config = dataclasses.replace(config, log_level=args.log_level)
    config.set_logging()

    if args.command == 'validate' and not args.paths:
        args.paths = ['.']

    try:
        if args.command == 'validate':
            return _run_validate(args, config)
        return _run_export(args, config)
    except (SchemaLoadError, SchemaExportError) as e:
        logger.error(str(e))
        return 2


def run() -> None:
    sys.exit(main())


if __name__ == '__main__':
    run()
