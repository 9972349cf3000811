"""v1 API models."""

from __future__ import annotations

from monitoring_api.schemas.v1.downtimes import Downtime, DowntimeRecurrence

__all__ = [
    'Downtime',
    'DowntimeRecurrence',
]
