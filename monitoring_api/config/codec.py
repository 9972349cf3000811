"""
Codec configuration.

Extends base configuration with encode/decode behaviour switches.
"""

from __future__ import annotations

from monitoring_api.config.base import BaseApiSettings, lazy_settings


class CodecSettings(BaseApiSettings):
    """Model codec configuration."""

    # Sort object keys on encode instead of keeping declaration order
    ENCODE_SORT_KEYS: bool = False

    # Warn when a payload does not fit its model and is kept verbatim
    LOG_RAW_FALLBACK: bool = True


# Module-level singleton (lazy-loaded)
settings = lazy_settings(CodecSettings)
