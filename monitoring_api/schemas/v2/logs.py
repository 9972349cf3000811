"""
Log search models (v2 API).

Request side: LogsListRequest with its filter, page and sort.
Response side: LogsListResponse with log events, links and metadata.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any, Self

import pydantic

from monitoring_api.schemas.base import ApiModel
from monitoring_api.schemas.types import JsonDatetime

# ==============================================================================
# Enums
# ==============================================================================


class LogsSort(StrEnum):
    """Sort parameters when querying logs."""

    TIMESTAMP_ASCENDING = 'timestamp'
    TIMESTAMP_DESCENDING = '-timestamp'


class LogsStorageTier(StrEnum):
    """Specifies storage type as indexes, online-archives or flex."""

    INDEXES = 'indexes'
    ONLINE_ARCHIVES = 'online-archives'
    FLEX = 'flex'


class LogType(StrEnum):
    """Type of the event."""

    LOG = 'log'


class LogsAggregateResponseStatus(StrEnum):
    """The status of the response."""

    DONE = 'done'
    TIMEOUT = 'timeout'


# ==============================================================================
# Request
# ==============================================================================


class LogsQueryFilter(ApiModel):
    """The search and filter query settings."""

    from_: str | None = pydantic.Field(default=None, alias='from')  # "now-15m", ISO-8601 or epoch ms
    indexes: Sequence[str] | None = None
    query: str | None = None
    storage_tier: LogsStorageTier | None = None
    to: str | None = None

    @classmethod
    def with_defaults(cls) -> Self:
        """Filter populated with the API's documented defaults."""
        return cls(
            from_='now-15m',
            indexes=['*'],
            query='*',
            storage_tier=LogsStorageTier.INDEXES,
            to='now',
        )


class LogsListRequestPage(ApiModel):
    """Paging attributes for listing logs."""

    cursor: str | None = None  # "after" cursor from the previous response
    limit: int | None = None  # Server caps at 5000


class LogsListRequest(ApiModel):
    """The request for a logs list."""

    filter: LogsQueryFilter | None = None
    page: LogsListRequestPage | None = None
    sort: LogsSort | None = None


# ==============================================================================
# Response
# ==============================================================================


class LogAttributes(ApiModel):
    """JSON object containing all log attributes and their associated values."""

    attributes: Mapping[str, Any] | None = None  # Free-form, set by the log pipeline
    host: str | None = None
    message: str | None = None
    service: str | None = None
    status: str | None = None
    tags: Sequence[str] | None = None
    timestamp: JsonDatetime | None = None


class Log(ApiModel):
    """Object description of a log after being processed and stored."""

    attributes: LogAttributes | None = None
    id: str | None = None
    type: LogType | None = None


class LogsListResponseLinks(ApiModel):
    """Links attributes."""

    next: str | None = None


class LogsResponseMetadataPage(ApiModel):
    """Paging attributes."""

    after: str | None = None


class LogsWarning(ApiModel):
    """A warning message indicating something that went wrong with the query."""

    code: str | None = None
    detail: str | None = None
    title: str | None = None


class LogsResponseMetadata(ApiModel):
    """The metadata associated with a request."""

    elapsed: int | None = None
    page: LogsResponseMetadataPage | None = None
    request_id: str | None = None
    status: LogsAggregateResponseStatus | None = None
    warnings: Sequence[LogsWarning] | None = None


class LogsListResponse(ApiModel):
    """Response object with all logs matching the request and pagination information."""

    data: Sequence[Log] | None = None
    links: LogsListResponseLinks | None = None
    meta: LogsResponseMetadata | None = None
