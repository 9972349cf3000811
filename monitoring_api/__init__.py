"""
Typed models for the monitoring platform's REST API.

Models decode from and encode to the API's JSON payloads:

    from monitoring_api import decode, encode
    from monitoring_api.schemas.v2 import IncidentAttachmentLinkAttributesAttachmentObject

    record = decode(IncidentAttachmentLinkAttributesAttachmentObject, payload)
    payload = encode(record)
"""

from __future__ import annotations

from monitoring_api.exceptions import (
    DecodeError,
    EncodeError,
    MalformedPayload,
    MissingRequiredField,
    MonitoringApiError,
    UnknownModelError,
)
from monitoring_api.schemas import ApiModel, OneOf, UnparsedObject, decode, decode_one_of, encode

__all__ = [
    'ApiModel',
    'DecodeError',
    'EncodeError',
    'MalformedPayload',
    'MissingRequiredField',
    'MonitoringApiError',
    'OneOf',
    'UnknownModelError',
    'UnparsedObject',
    'decode',
    'decode_one_of',
    'encode',
]
