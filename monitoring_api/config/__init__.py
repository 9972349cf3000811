"""Configuration for monitoring-api."""

from __future__ import annotations

from monitoring_api.config.base import BaseApiSettings, get_settings, lazy_settings
from monitoring_api.config.codec import CodecSettings, settings

__all__ = [
    'BaseApiSettings',
    'CodecSettings',
    'get_settings',
    'lazy_settings',
    'settings',
]
