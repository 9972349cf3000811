"""
Introspection utilities for API models.

Extracts the schema description the codec is driven by: which fields are
required, what they are called on the wire, and which optional fields are
nullable. Results are cached per model class; model classes are immutable
once defined.
"""

from __future__ import annotations

import functools
from collections.abc import Iterator
from typing import Any, NamedTuple, TypeAliasType, get_args

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from monitoring_api.schemas.types import NullableMarker


class FieldSpec(NamedTuple):
    """Schema description of a single declared field."""

    name: str
    wire_name: str
    required: bool
    nullable: bool


def wire_name(name: str, field_info: FieldInfo) -> str:
    """JSON key used for a field (its alias, or the field name when unaliased)."""
    return field_info.alias or name


def is_nullable(field_info: FieldInfo) -> bool:
    """Check whether a field carries the Nullable marker."""
    return any(isinstance(meta, NullableMarker) for meta in field_info.metadata)


@functools.cache
def get_field_specs(model: type[BaseModel]) -> tuple[FieldSpec, ...]:
    """
    Describe every declared field of a model, in declaration order.

    Example:
        >>> get_field_specs(IncidentAttachmentLinkAttributesAttachmentObject)
        (FieldSpec(name='document_url', wire_name='documentUrl', required=True, nullable=False),
         FieldSpec(name='title', wire_name='title', required=True, nullable=False))
    """
    return tuple(
        FieldSpec(
            name=name,
            wire_name=wire_name(name, field_info),
            required=field_info.is_required(),
            nullable=is_nullable(field_info),
        )
        for name, field_info in model.model_fields.items()
    )


def get_required_fields(model: type[BaseModel]) -> list[FieldSpec]:
    """Required fields in declaration order (the order presence is checked in)."""
    return [spec for spec in get_field_specs(model) if spec.required]


def get_nullable_fields(model: type[BaseModel]) -> list[str]:
    """Names of fields marked Nullable."""
    return [spec.name for spec in get_field_specs(model) if spec.nullable]


def get_wire_names(model: type[BaseModel]) -> dict[str, str]:
    """Mapping from field name to wire name."""
    return {spec.name: spec.wire_name for spec in get_field_specs(model)}


def _nested_models(annotation: Any) -> Iterator[type[BaseModel]]:
    """Models referenced by a field annotation (through containers, unions and aliases)."""
    if isinstance(annotation, TypeAliasType):
        annotation = annotation.__value__
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        yield annotation
    for arg in get_args(annotation):
        yield from _nested_models(arg)


@functools.cache
def get_reachable_wire_names(model: type[BaseModel]) -> frozenset[str]:
    """Wire names of a model and of every model nested inside it."""
    names: set[str] = set()
    seen: set[type[BaseModel]] = set()
    pending = [model]
    while pending:
        current = pending.pop()
        if current in seen:
            continue
        seen.add(current)
        names.update(spec.wire_name for spec in get_field_specs(current))
        for field_info in current.model_fields.values():
            pending.extend(_nested_models(field_info.annotation))
    return frozenset(names)
