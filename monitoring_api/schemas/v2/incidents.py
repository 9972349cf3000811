"""
Incident attachment models (v2 API).

Attachments are either a link or a postmortem document. Both carry an
attachment object with the document URL and title; the attachment_type enum
tells them apart on the wire.

Wire format of the link attachment object:

    {"documentUrl": "https://...", "title": "Runbook"}
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

import pydantic

from monitoring_api.schemas.base import ApiModel, OneOf

# ==============================================================================
# Enums
# ==============================================================================


class IncidentAttachmentType(StrEnum):
    """The incident attachment resource type."""

    INCIDENT_ATTACHMENTS = 'incident_attachments'


class IncidentAttachmentLinkAttachmentType(StrEnum):
    """The type of link attachment attributes."""

    LINK = 'link'


class IncidentAttachmentPostmortemAttachmentType(StrEnum):
    """The type of postmortem attachment attributes."""

    POSTMORTEM = 'postmortem'


# ==============================================================================
# Attachment objects
# ==============================================================================


class IncidentAttachmentLinkAttributesAttachmentObject(ApiModel):
    """The link attachment."""

    document_url: str = pydantic.Field(alias='documentUrl', description='The URL of this link attachment')
    title: str = pydantic.Field(description='The title of this link attachment')


class IncidentAttachmentsPostmortemAttributesAttachmentObject(ApiModel):
    """The postmortem attachment."""

    document_url: str = pydantic.Field(alias='documentUrl', description='The URL of this notebook attachment')
    title: str = pydantic.Field(description='The title of this postmortem attachment')


# ==============================================================================
# Attachment attributes (one-of)
# ==============================================================================


class IncidentAttachmentLinkAttributes(ApiModel):
    """The attributes object for a link attachment."""

    attachment: IncidentAttachmentLinkAttributesAttachmentObject
    attachment_type: IncidentAttachmentLinkAttachmentType


class IncidentAttachmentPostmortemAttributes(ApiModel):
    """The attributes object for a postmortem attachment."""

    attachment: IncidentAttachmentsPostmortemAttributesAttachmentObject
    attachment_type: IncidentAttachmentPostmortemAttachmentType


IncidentAttachmentAttributes = OneOf(
    'IncidentAttachmentAttributes',
    (IncidentAttachmentPostmortemAttributes, IncidentAttachmentLinkAttributes),
)

# Field annotation for the same union inside a parent model
AnyIncidentAttachmentAttributes = Annotated[
    IncidentAttachmentPostmortemAttributes | IncidentAttachmentLinkAttributes,
    pydantic.Field(union_mode='left_to_right'),
]


# ==============================================================================
# Resource
# ==============================================================================


class IncidentAttachmentData(ApiModel):
    """A single incident attachment."""

    id: str = pydantic.Field(description='A unique identifier that represents the incident attachment')
    type: IncidentAttachmentType
    attributes: AnyIncidentAttachmentAttributes
