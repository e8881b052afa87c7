#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
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

"""CLI entry point for checking data files against a schema document."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from ..exceptions import SchemaDepthError, SchemaLoadError, ValidationError
from ..file_io.schema_loader import SchemaDocument, load_data_file, load_schema_document
from ..utils.logging_utils import configure_cli_logging
from .report import CheckResult, summarize

logger = logging.getLogger(__name__)


def check_files(document: SchemaDocument, file_paths: List[Path], max_depth: int = None) -> List[CheckResult]:
    """Check each data file against the document's schema.

    Args:
        document: Loaded schema document
        file_paths: Data files (YAML or JSON)
        max_depth: Optional recursion limit for the matcher

    Returns:
        List of CheckResult objects, one per file
    """
    results = []
    for file_path in file_paths:
        result = CheckResult(file_path)
        try:
            data = load_data_file(file_path)
            result.matched = document.matches(data, max_depth=max_depth)
        except SchemaLoadError as e:
            result.add_error(str(e))
        except SchemaDepthError as e:
            result.add_error(str(e))
        logger.debug(f"{file_path}: matched={result.matched}")
        results.append(result)
    return results


def _print_human(document: SchemaDocument, results: List[CheckResult]) -> None:
    schema_name = document.name or (document.source.name if document.source else "schema")
    for result in results:
        if result.errors:
            for error in result.errors:
                print(f"{result.file_path}: ERROR: {error}")
        elif result.matched:
            print(f"{result.file_path}: OK")
        else:
            print(f"{result.file_path}: does not match '{schema_name}'")


def main(argv: List[str] = None) -> None:
    """Main entry point for the check CLI."""
    parser = argparse.ArgumentParser(
        prog='schema-match',
        description='Check YAML/JSON data files against a schema document',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('schema', help='Schema document (YAML or JSON)')
    parser.add_argument('data', nargs='+', help='Data files to check')
    parser.add_argument(
        '--format',
        choices=['human', 'json'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        default=None,
        help='Maximum schema nesting depth before aborting',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    configure_cli_logging(args.verbose)

    try:
        document = load_schema_document(args.schema)
    except (SchemaLoadError, ValidationError, SchemaDepthError) as e:
        logger.error(str(e))
        sys.exit(1)

    results = check_files(document, [Path(p) for p in args.data], max_depth=args.max_depth)

    if args.format == 'json':
        print(json.dumps(summarize(results), indent=2))
    else:
        _print_human(document, results)

    if any(not r.ok for r in results):
        sys.exit(1)
    sys.exit(0)


if __name__ == '__main__':
    main()
