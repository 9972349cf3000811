"""
Shared type definitions for API model schemas.

Centralizes the annotation markers and primitive aliases used by the model
catalogue (v1/, v2/) and read back by the codec through introspection.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated

import pydantic

# ==============================================================================
# Field Markers
# ==============================================================================
#
# Markers are attached with typing.Annotated and end up in FieldInfo.metadata,
# where monitoring_api.introspection finds them:
#
#     end: Annotated[int | None, Nullable] = None
#
# Unmarked optional fields are omitted from the output while None. Nullable
# fields write an explicit null once the caller (or a decoded payload) set them.
# ==============================================================================


@dataclass(frozen=True)
class NullableMarker:
    """Mark an optional field whose explicit null is sent on the wire."""

    pass


Nullable = NullableMarker()


# ==============================================================================
# Primitive Types
# ==============================================================================

type JsonDatetime = Annotated[datetime, pydantic.Field(strict=False)]
"""Datetime that accepts ISO-8601 strings on the wire."""

type JsonObject = dict[str, object]
"""Generic string-keyed JSON object, as produced by parsing a payload."""
