"""v2 API models."""

from __future__ import annotations

from monitoring_api.schemas.v2.incidents import (
    AnyIncidentAttachmentAttributes,
    IncidentAttachmentAttributes,
    IncidentAttachmentData,
    IncidentAttachmentLinkAttachmentType,
    IncidentAttachmentLinkAttributes,
    IncidentAttachmentLinkAttributesAttachmentObject,
    IncidentAttachmentPostmortemAttachmentType,
    IncidentAttachmentPostmortemAttributes,
    IncidentAttachmentsPostmortemAttributesAttachmentObject,
    IncidentAttachmentType,
)
from monitoring_api.schemas.v2.logs import (
    Log,
    LogAttributes,
    LogsAggregateResponseStatus,
    LogsListRequest,
    LogsListRequestPage,
    LogsListResponse,
    LogsListResponseLinks,
    LogsQueryFilter,
    LogsResponseMetadata,
    LogsResponseMetadataPage,
    LogsSort,
    LogsStorageTier,
    LogsWarning,
    LogType,
)

__all__ = [
    # Incidents
    'AnyIncidentAttachmentAttributes',
    'IncidentAttachmentAttributes',
    'IncidentAttachmentData',
    'IncidentAttachmentLinkAttachmentType',
    'IncidentAttachmentLinkAttributes',
    'IncidentAttachmentLinkAttributesAttachmentObject',
    'IncidentAttachmentPostmortemAttachmentType',
    'IncidentAttachmentPostmortemAttributes',
    'IncidentAttachmentsPostmortemAttributesAttachmentObject',
    'IncidentAttachmentType',
    # Logs
    'Log',
    'LogAttributes',
    'LogsAggregateResponseStatus',
    'LogsListRequest',
    'LogsListRequestPage',
    'LogsListResponse',
    'LogsListResponseLinks',
    'LogsQueryFilter',
    'LogsResponseMetadata',
    'LogsResponseMetadataPage',
    'LogsSort',
    'LogsStorageTier',
    'LogsWarning',
    'LogType',
]
