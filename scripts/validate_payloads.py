#!/usr/bin/env -S uv run
"""
Decode every payload file in a directory against a model.

Reports how many payloads decoded to typed records, how many fell back to
UnparsedObject (shape drift), and how many were rejected.

Usage:
    ./scripts/validate_payloads.py MODEL [payloads_dir] [OPTIONS]

Options:
    --pattern, -p    Glob pattern for payload files (default: *.json)
    --verbose, -v    Log decode details
    --help, -h       Show this help message

Examples:
    ./scripts/validate_payloads.py LogsListResponse captures/logs/
    ./scripts/validate_payloads.py IncidentAttachmentAttributes fixtures/payloads -p 'incident_*.json'
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from monitoring_api.exceptions import UnknownModelError
from monitoring_api.schemas.base import UnparsedObject
from monitoring_api.schemas.loader import load_payloads_batch


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Decode payload files against an API model.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('model', help='Registered API schema name (e.g. LogsListResponse)')
    parser.add_argument(
        'payloads_dir',
        nargs='?',
        type=Path,
        default=Path.cwd(),
        help='Directory containing payload files (default: current directory)',
    )
    parser.add_argument('-p', '--pattern', default='*.json', help='Glob pattern for payload files')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log decode details')
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='[%(levelname)s] %(name)s: %(message)s',
    )

    try:
        records, errors = load_payloads_batch(args.payloads_dir, args.model, args.pattern)
    except UnknownModelError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(2)

    unparsed = sum(1 for record in records if isinstance(record, UnparsedObject))
    typed = len(records) - unparsed

    print('=' * 80)
    print(f'{args.model} payload validation: {args.payloads_dir}')
    print('=' * 80)
    print(f'  Typed:    {typed}')
    print(f'  Unparsed: {unparsed}')
    print(f'  Errors:   {len(errors)}')

    for path, error in errors.items():
        print(f'  ✗ {path.name}: {error}')

    if errors:
        sys.exit(1)


if __name__ == '__main__':
    main()
