"""
API model schemas for monitoring-api.

This package contains the Pydantic models for the platform's REST API:
- base: ApiModel and the JSON encode/decode contract
- v1: v1 API models (downtimes)
- v2: v2 API models (incident attachments, log search)
- registry: lookup by API schema name, JSON Schema export
- loader: decoding payload files
"""

from __future__ import annotations

from monitoring_api.schemas.base import (
    ApiModel,
    OneOf,
    UnparsedObject,
    check_required,
    decode,
    decode_one_of,
    encode,
    parse_object,
    validate_shape,
)
from monitoring_api.schemas.types import JsonDatetime, Nullable

__all__ = [
    'ApiModel',
    'JsonDatetime',
    'Nullable',
    'OneOf',
    'UnparsedObject',
    'check_required',
    'decode',
    'decode_one_of',
    'encode',
    'parse_object',
    'validate_shape',
]
