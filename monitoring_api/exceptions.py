"""
Shared exceptions for monitoring-api.

Exception Hierarchy:
    MonitoringApiError (base)
    ├── DecodeError (payload could not be turned into a record)
    │   ├── MalformedPayload (not JSON, or not a JSON object)
    │   └── MissingRequiredField (valid JSON without a mandatory property)
    ├── EncodeError (record could not be serialized)
    └── UnknownModelError (registry lookup failures)

None of these subclass ValueError: pydantic only converts ValueError and
AssertionError raised inside validators into validation errors, everything
else propagates to the caller unchanged.
"""

from __future__ import annotations


class MonitoringApiError(Exception):
    """Base exception for all monitoring-api errors."""


class DecodeError(MonitoringApiError):
    """Base exception for decode failures."""


class MalformedPayload(DecodeError):
    """Raised when the payload is not valid JSON or not a JSON object."""

    def __init__(self, model_name: str, reason: str) -> None:
        self.model_name = model_name
        self.reason = reason
        super().__init__(f'Malformed {model_name} payload: {reason}')


class MissingRequiredField(DecodeError):
    """Raised when a valid JSON payload omits a mandatory property."""

    def __init__(self, field_name: str, model_name: str) -> None:
        self.field_name = field_name
        self.model_name = model_name
        super().__init__(f'required field {field_name} missing from {model_name}')


class EncodeError(MonitoringApiError):
    """Raised when a record holds values that cannot be serialized to JSON."""

    def __init__(self, model_name: str, reason: str) -> None:
        self.model_name = model_name
        self.reason = reason
        super().__init__(f'Cannot encode {model_name}: {reason}')


class UnknownModelError(MonitoringApiError):
    """Raised when a model name is not in the registry."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        known_str = ', '.join(known[:10])
        if len(known) > 10:
            known_str += f', ... and {len(known) - 10} more'
        super().__init__(f"Unknown model '{name}'. Known models: {known_str}")
