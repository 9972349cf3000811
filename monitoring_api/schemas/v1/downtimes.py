"""
Downtime models (v1 API).

Several Downtime fields are nullable: the API distinguishes "not sent" from
an explicit null (e.g. end=null means the downtime never ends). These fields
carry the Nullable marker so an explicitly assigned None is written as null.

Example:
    body = Downtime(
        message='Schedule a downtime once a year',
        recurrence=DowntimeRecurrence(period=1, type='years'),
        scope=['*'],
        start=1760000000,
        timezone='Etc/UTC',
    )
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated

from monitoring_api.schemas.base import ApiModel
from monitoring_api.schemas.types import Nullable


class DowntimeRecurrence(ApiModel):
    """An object defining the recurrence of the downtime."""

    period: int | None = None  # How often to repeat, as an integer
    rrule: str | None = None  # RRULE string, only with type="rrule"
    type: str | None = None  # days, weeks, months, years or rrule
    until_date: Annotated[int | None, Nullable] = None  # POSIX timestamp
    until_occurrences: Annotated[int | None, Nullable] = None
    week_days: Annotated[Sequence[str] | None, Nullable] = None  # Mon, Tue, ...


class Downtime(ApiModel):
    """
    Downtiming gives you greater control over monitor notifications by
    allowing you to globally exclude scopes from alerting.
    """

    active: bool | None = None
    canceled: Annotated[int | None, Nullable] = None
    creator_id: int | None = None
    disabled: bool | None = None
    downtime_type: int | None = None
    end: Annotated[int | None, Nullable] = None
    id: int | None = None
    message: str | None = None
    monitor_id: Annotated[int | None, Nullable] = None
    monitor_tags: Sequence[str] | None = None
    mute_first_recovery_notification: bool | None = None
    parent_id: Annotated[int | None, Nullable] = None
    recurrence: Annotated[DowntimeRecurrence | None, Nullable] = None
    scope: Sequence[str] | None = None
    start: int | None = None
    timezone: str | None = None
    updater_id: Annotated[int | None, Nullable] = None
