"""
Model registry.

Maps API schema names to model classes so payloads can be decoded by name
(scripts, fixtures). One-of unions are registered as OneOf objects and
decode with exactly-one-member semantics.
"""

from __future__ import annotations

from typing import Any

from monitoring_api.exceptions import UnknownModelError
from monitoring_api.schemas.base import ApiModel, OneOf, UnparsedObject, decode
from monitoring_api.schemas.v1 import downtimes
from monitoring_api.schemas.v2 import incidents, logs

MODEL_REGISTRY: dict[str, type[ApiModel] | OneOf] = {
    # v1 - Downtimes
    'Downtime': downtimes.Downtime,
    'DowntimeRecurrence': downtimes.DowntimeRecurrence,
    # v2 - Incident attachments
    'IncidentAttachmentLinkAttributesAttachmentObject': incidents.IncidentAttachmentLinkAttributesAttachmentObject,
    'IncidentAttachmentsPostmortemAttributesAttachmentObject': (
        incidents.IncidentAttachmentsPostmortemAttributesAttachmentObject
    ),
    'IncidentAttachmentLinkAttributes': incidents.IncidentAttachmentLinkAttributes,
    'IncidentAttachmentPostmortemAttributes': incidents.IncidentAttachmentPostmortemAttributes,
    'IncidentAttachmentAttributes': incidents.IncidentAttachmentAttributes,
    'IncidentAttachmentData': incidents.IncidentAttachmentData,
    # v2 - Logs
    'LogsQueryFilter': logs.LogsQueryFilter,
    'LogsListRequestPage': logs.LogsListRequestPage,
    'LogsListRequest': logs.LogsListRequest,
    'LogAttributes': logs.LogAttributes,
    'Log': logs.Log,
    'LogsListResponseLinks': logs.LogsListResponseLinks,
    'LogsResponseMetadataPage': logs.LogsResponseMetadataPage,
    'LogsWarning': logs.LogsWarning,
    'LogsResponseMetadata': logs.LogsResponseMetadata,
    'LogsListResponse': logs.LogsListResponse,
}


def get_model(name: str) -> type[ApiModel] | OneOf:
    """
    Look up a model by API schema name.

    Raises:
        UnknownModelError: If the name is not registered
    """
    try:
        return MODEL_REGISTRY[name]
    except KeyError:
        raise UnknownModelError(name, sorted(MODEL_REGISTRY)) from None


def decode_named(name: str, payload: bytes | str) -> ApiModel | UnparsedObject:
    """Decode a payload with the model registered under name."""
    model = get_model(name)
    if isinstance(model, OneOf):
        return model.decode(payload)
    return decode(model, payload)


def export_json_schema(name: str) -> dict[str, Any]:
    """
    JSON Schema (draft 2020-12) of a registered model, keyed by wire names.

    One-of unions export as a oneOf of their members.
    """
    model = get_model(name)
    if isinstance(model, OneOf):
        schema: dict[str, Any] = {'oneOf': [], '$defs': {}}
        for member in model.members:
            member_schema = member.model_json_schema(by_alias=True)
            schema['$defs'].update(member_schema.pop('$defs', {}))
            schema['$defs'][member.__name__] = member_schema
            schema['oneOf'].append({'$ref': f'#/$defs/{member.__name__}'})
    else:
        schema = model.model_json_schema(by_alias=True)

    schema['$schema'] = 'https://json-schema.org/draft/2020-12/schema'
    schema['title'] = name
    return schema
