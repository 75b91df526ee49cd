"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

SUPPORTED_TYPE_TAGS: tuple[str, ...] = ("integer", "number", "boolean", "string", "object")


@dataclass(frozen=True)
class FieldSchema:
    """Base of the closed set of resolved property schemas."""


@dataclass(frozen=True)
class IntegerField(FieldSchema):
    """Property generated as a 32-bit signed integer."""


@dataclass(frozen=True)
class NumberField(FieldSchema):
    """Property generated as a floating-point number."""


@dataclass(frozen=True)
class BooleanField(FieldSchema):
    """Property generated as a boolean."""


@dataclass(frozen=True)
class StringField(FieldSchema):
    """Property generated as an alphanumeric string."""


@dataclass(frozen=True)
class ObjectField(FieldSchema):
    """Property generated as a nested document.

    Properties keep the order in which they were declared in the schema.
    """

    properties: Mapping[str, FieldSchema] = field(default_factory=dict)
