#!/usr/bin/env -S uv run
"""
Export JSON Schema for a registered API model.

This generates a JSON Schema document (wire names, draft 2020-12) that other
tools can consume:
- TypeScript type generation
- Contract tests against the live API
- Cross-language validation

Usage:
    ./scripts/export_schema.py MODEL [output_path]
"""

from __future__ import annotations

import sys
from pathlib import Path

import orjson

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from monitoring_api.schemas.registry import MODEL_REGISTRY, export_json_schema


def export_schema(name: str, output_path: str) -> None:
    """Write the JSON Schema of a registered model to output_path."""
    schema = export_json_schema(name)

    output_file = Path(output_path)
    output_file.write_bytes(orjson.dumps(schema, option=orjson.OPT_INDENT_2))

    print(f'✓ Exported JSON Schema for {name} to: {output_file}')
    print(f'  Size: {output_file.stat().st_size:,} bytes')
    print(f'  {len(schema.get("$defs", {}))} nested model definitions')


if __name__ == '__main__':
    if len(sys.argv) < 2 or sys.argv[1] not in MODEL_REGISTRY:
        print(f'Usage: {sys.argv[0]} MODEL [output_path]', file=sys.stderr)
        print(f'Models: {", ".join(sorted(MODEL_REGISTRY))}', file=sys.stderr)
        sys.exit(2)
    name = sys.argv[1]
    export_schema(name, sys.argv[2] if len(sys.argv) > 2 else f'{name}.schema.json')
