"""
Model codec: the ApiModel base class and its JSON encode/decode contract.

Every API model inherits from ApiModel. The codec is generic: it reads the
schema description (field name, wire name, required flag, nullable flag) from
the model class through monitoring_api.introspection instead of being written
out per model.

Decoding is split into explicit passes:

1. parse_object()    - bytes -> generic JSON object (MalformedPayload)
2. check_required()  - required wire slots present and non-null (MissingRequiredField)
3. validate_shape()  - strict validation of the full declared shape

A payload that passes 1 and 2 but fails 3 is not an error: it is returned as
an UnparsedObject holding the parsed object verbatim, and encoding that
UnparsedObject writes the object back unchanged. A decoded record is therefore
either a typed ApiModel or an UnparsedObject, never a mix.

Unknown sibling properties are dropped when pass 3 succeeds; they are only
preserved through the UnparsedObject path. additional_properties is never
filled by decode, it carries caller-supplied keys into encode.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Self, TypeVar

import orjson
import pydantic
import pydantic_core

from monitoring_api.config import settings
from monitoring_api.exceptions import DecodeError, EncodeError, MalformedPayload, MissingRequiredField
from monitoring_api.introspection import get_field_specs, get_reachable_wire_names, get_required_fields
from monitoring_api.schemas.types import JsonObject

__all__ = [
    'ApiModel',
    'OneOf',
    'UnparsedObject',
    'check_required',
    'decode',
    'decode_one_of',
    'encode',
    'parse_object',
    'validate_shape',
]

logger = logging.getLogger(__name__)

M = TypeVar('M', bound='ApiModel')

# Validation context key; nested models only check presence when decoding from the wire
WIRE_CONTEXT = 'wire'

MISSING_REQUIRED_FIELD = 'missing_required_field'


# ==============================================================================
# Base Model
# ==============================================================================


class ApiModel(pydantic.BaseModel):
    """
    Base model for API payloads.

    - extra='ignore': unknown wire properties are dropped on a typed decode
    - strict=True: no type coercion (JSON-mode rules apply on decode)
    - validate_assignment=True: attribute setters are validated, so a required
      field can never be set to None
    - fields are addressable by name in Python and by alias on the wire
    """

    model_config = pydantic.ConfigDict(
        extra='ignore',
        strict=True,
        validate_assignment=True,
        validate_by_name=True,
        validate_by_alias=True,
    )

    _additional_properties: dict[str, Any] = pydantic.PrivateAttr(default_factory=dict)

    @property
    def additional_properties(self) -> dict[str, Any]:
        """Properties outside the declared schema, merged into the encoded output."""
        return self._additional_properties

    @additional_properties.setter
    def additional_properties(self, value: Mapping[str, Any]) -> None:
        self._additional_properties = dict(value)

    def __copy__(self) -> Self:
        copied = super().__copy__()
        copied._additional_properties = dict(self._additional_properties)
        return copied

    @pydantic.model_validator(mode='before')
    @classmethod
    def check_required_on_wire(cls, data: Any, info: pydantic.ValidationInfo) -> Any:
        """Presence check for nested models while decoding a payload."""
        if isinstance(data, dict) and info.context and info.context.get(WIRE_CONTEXT):
            missing = find_missing_required(cls, data)
            if missing is not None:
                raise pydantic_core.PydanticCustomError(
                    MISSING_REQUIRED_FIELD,
                    'required field {field} missing',
                    {'field': missing},
                )
        return data

    @pydantic.model_serializer(mode='wrap')
    def serialize_with_additional_properties(
        self,
        handler: pydantic.SerializerFunctionWrapHandler,
        info: pydantic.SerializationInfo,
    ) -> dict[str, Any]:
        data = handler(self)
        for spec in get_field_specs(type(self)):
            if spec.required or getattr(self, spec.name) is not None:
                continue
            if spec.nullable and spec.name in self.model_fields_set:
                continue
            data.pop(spec.wire_name if info.by_alias else spec.name, None)
        # Extra keys win over declared fields on collision
        data.update(self._additional_properties)
        return data

    def to_json(self, *, sort_keys: bool | None = None) -> bytes:
        return encode(self, sort_keys=sort_keys)

    @classmethod
    def from_json(cls, payload: bytes | str) -> Self | UnparsedObject:
        return decode(cls, payload)


# ==============================================================================
# Raw Records
# ==============================================================================


@dataclass(frozen=True)
class UnparsedObject:
    """
    A payload that did not fit its model's declared shape.

    Holds the parsed JSON object verbatim so that writing it back never loses
    data the client does not understand.
    """

    model_name: str
    raw: JsonObject

    def to_json(self, *, sort_keys: bool | None = None) -> bytes:
        return encode(self, sort_keys=sort_keys)


# ==============================================================================
# Encode
# ==============================================================================


def _record_name(record: ApiModel | UnparsedObject) -> str:
    if isinstance(record, UnparsedObject):
        return record.model_name
    return type(record).__name__


def encode(record: ApiModel | UnparsedObject, *, sort_keys: bool | None = None) -> bytes:
    """
    Serialize a record to JSON bytes.

    Typed records write declared fields under their wire names in declaration
    order, then overlay additional_properties. Unparsed records write their raw
    object unchanged.

    Raises:
        EncodeError: If additional_properties holds a value JSON cannot represent
    """
    if sort_keys is None:
        sort_keys = settings.ENCODE_SORT_KEYS
    option = orjson.OPT_SORT_KEYS if sort_keys else 0

    if isinstance(record, UnparsedObject):
        obj: Any = record.raw
    else:
        try:
            obj = record.model_dump(mode='json', by_alias=True)
        except pydantic_core.PydanticSerializationError as e:
            raise EncodeError(_record_name(record), str(e)) from e

    try:
        return orjson.dumps(obj, option=option)
    except orjson.JSONEncodeError as e:
        raise EncodeError(_record_name(record), str(e)) from e


# ==============================================================================
# Decode passes
# ==============================================================================


def parse_object(model_name: str, payload: bytes | str) -> JsonObject:
    """
    Parse a payload into a generic JSON object.

    Raises:
        MalformedPayload: If the payload is not JSON, or not a JSON object
    """
    try:
        data = orjson.loads(payload)
    except orjson.JSONDecodeError as e:
        raise MalformedPayload(model_name, str(e)) from e

    if not isinstance(data, dict):
        raise MalformedPayload(model_name, f'expected a JSON object, got {type(data).__name__}')
    return data


def find_missing_required(model: type[ApiModel], data: Mapping[str, Any]) -> str | None:
    """Wire name of the first required field that is absent or null, if any."""
    for spec in get_required_fields(model):
        if data.get(spec.wire_name) is None:
            return spec.wire_name
    return None


def check_required(model: type[ApiModel], data: Mapping[str, Any]) -> None:
    """
    Presence pass: every required field must be present and non-null.

    Only looks at the required fields' slots; their types are checked by
    validate_shape().

    Raises:
        MissingRequiredField: Naming the first missing field in declaration order
    """
    missing = find_missing_required(model, data)
    if missing is not None:
        raise MissingRequiredField(missing, model.__name__)


def validate_shape(model: type[M], payload: bytes | str) -> M:
    """
    Full-shape pass: strict validation of every declared field.

    Runs in JSON mode so enums and datetimes validate from their wire form.
    Keys are matched by wire name only; a Python field name on the wire is an
    unknown property and is dropped.

    Raises:
        pydantic.ValidationError: If the payload does not fit the declared shape
    """
    return model.model_validate_json(
        payload,
        strict=True,
        by_alias=True,
        by_name=False,
        context={WIRE_CONTEXT: True},
    )


def _nested_missing_field(model: type[ApiModel], error: pydantic.ValidationError) -> str | None:
    """
    Dotted wire path of a nested missing field when that is the only kind of failure.

    Union member tags in the error location are not wire keys and are skipped.
    """
    errors = error.errors()
    if not errors or any(err['type'] != MISSING_REQUIRED_FIELD for err in errors):
        return None
    first = errors[0]
    wire_names = get_reachable_wire_names(model)
    parts = [str(part) for part in first['loc'] if isinstance(part, int) or part in wire_names]
    parts.append(first['ctx']['field'])
    return '.'.join(parts)


def _decode_object(model: type[M], payload: bytes | str, data: JsonObject) -> M | None:
    """Run the presence and shape passes; None means the shape did not fit."""
    check_required(model, data)

    try:
        return validate_shape(model, payload)
    except pydantic.ValidationError as e:
        if any(err['type'] == 'json_invalid' for err in e.errors()):
            raise MalformedPayload(model.__name__, str(e)) from e
        missing = _nested_missing_field(model, e)
        if missing is not None:
            raise MissingRequiredField(missing, model.__name__) from e
        logger.debug(f'{model.__name__} shape mismatch: {e}')
        return None


def decode(model: type[M], payload: bytes | str) -> M | UnparsedObject:
    """
    Decode a payload into a typed record, or keep it verbatim.

    Args:
        model: ApiModel subclass describing the payload
        payload: JSON text

    Returns:
        A typed record (additional_properties empty), or an UnparsedObject when
        the payload is a JSON object that does not fit the declared shape

    Raises:
        MalformedPayload: If the payload is not a JSON object
        MissingRequiredField: If a required field is absent or null
    """
    data = parse_object(model.__name__, payload)
    record = _decode_object(model, payload, data)
    if record is None:
        if settings.LOG_RAW_FALLBACK:
            logger.warning(f'{model.__name__} payload does not match the declared shape, keeping it unparsed')
        return UnparsedObject(model.__name__, data)
    return record


# ==============================================================================
# One-of unions
# ==============================================================================


def decode_one_of(name: str, members: Sequence[type[ApiModel]], payload: bytes | str) -> ApiModel | UnparsedObject:
    """
    Decode a payload that is exactly one of several member models.

    A member matches when it decodes to a typed record that does not encode
    to an empty object. Decode errors only disqualify a member. Anything but
    exactly one match yields an UnparsedObject named after the union.

    Raises:
        MalformedPayload: If the payload is not a JSON object
    """
    data = parse_object(name, payload)

    matches: list[ApiModel] = []
    for member in members:
        try:
            record = _decode_object(member, payload, data)
        except DecodeError as e:
            logger.debug(f'{name}: {member.__name__} rejected: {e}')
            continue
        if record is None or encode(record) == b'{}':
            continue
        matches.append(record)

    if len(matches) == 1:
        return matches[0]

    if settings.LOG_RAW_FALLBACK:
        logger.warning(f'{name} payload matched {len(matches)} of {len(members)} members, keeping it unparsed')
    return UnparsedObject(name, data)


@dataclass(frozen=True)
class OneOf:
    """
    Named one-of union of API models.

    Inside a parent model, the same union is declared as a left-to-right
    pydantic union of the member types.
    """

    name: str
    members: tuple[type[ApiModel], ...]

    def decode(self, payload: bytes | str) -> ApiModel | UnparsedObject:
        return decode_one_of(self.name, self.members, payload)
