"""Schema loading, navigation, and parsing service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from .schema_models import (
    SUPPORTED_TYPE_TAGS,
    BooleanField,
    FieldSchema,
    IntegerField,
    NumberField,
    ObjectField,
    StringField,
)

DEFAULT_MAX_DEPTH = 64
MAX_SUPPORTED_DEPTH = 200

_LOGGER = logging.getLogger("schema_doc_generator.schema")

_SCALAR_FIELDS: dict[str, FieldSchema] = {
    "integer": IntegerField(),
    "number": NumberField(),
    "boolean": BooleanField(),
    "string": StringField(),
}


class SchemaError(Exception):
    """Raised for schema parsing failures."""

    def __init__(self, message: str, *, field_path: str | None = None) -> None:
        super().__init__(message)
        self.field_path = field_path


class SchemaShapeError(SchemaError):
    """Raised when a node does not carry an object-shaped `properties` mapping."""


class MissingTypeError(SchemaError):
    """Raised when a property node lacks a string `type` tag."""

    def __init__(self, field_path: str) -> None:
        super().__init__(f"Field '{field_path}' has no type.", field_path=field_path)


class UnsupportedTypeError(SchemaError):
    """Raised when a property node declares an unknown `type` tag."""

    def __init__(self, field_path: str, type_tag: str) -> None:
        super().__init__(
            f"Field '{field_path}' has unsupported type '{type_tag}'.", field_path=field_path
        )
        self.type_tag = type_tag


class SchemaTooDeepError(SchemaError):
    """Raised when object nesting exceeds the configured depth ceiling."""

    def __init__(self, field_path: str | None, max_depth: int) -> None:
        location = f"Field '{field_path}'" if field_path else "Schema"
        super().__init__(
            f"{location} exceeds the maximum nesting depth of {max_depth}.",
            field_path=field_path,
        )
        self.max_depth = max_depth


def load_schema_document(text: str) -> Mapping[str, Any]:
    """Parse schema text into a structured document."""
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON schema: {exc}") from exc
    except RecursionError as exc:
        raise SchemaTooDeepError(None, MAX_SUPPORTED_DEPTH) from exc
    if not isinstance(root, Mapping):
        raise SchemaShapeError("Schema root must be a JSON object.")
    return root


def properties_of(node: Any, *, field_path: str | None = None) -> Mapping[str, Any]:
    """Return the declared property mapping of an object-shaped schema node.

    Iteration order of the returned mapping is the declaration order, which
    in turn is the field order of generated documents.

    Raises:
      SchemaShapeError: If `properties` is missing or is not a mapping.
    """
    location = f"Field '{field_path}'" if field_path else "Schema root"
    if not isinstance(node, Mapping):
        raise SchemaShapeError(f"{location} is not an object.", field_path=field_path)
    if "properties" not in node:
        raise SchemaShapeError(f"{location} properties is missing.", field_path=field_path)
    properties = node["properties"]
    if not isinstance(properties, Mapping):
        raise SchemaShapeError(
            f"{location} properties is not an object.", field_path=field_path
        )
    return properties


def parse_schema(root: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> ObjectField:
    """Resolve a root schema into the closed field variants.

    The root's own `type` tag is not consulted; it must expose `properties`.
    """
    if not 1 <= max_depth <= MAX_SUPPORTED_DEPTH:
        raise ValueError(f"max_depth must be between 1 and {MAX_SUPPORTED_DEPTH}.")
    parsed = _parse_object(properties_of(root), prefix="", depth=1, max_depth=max_depth)
    _LOGGER.debug("Parsed schema with %d top-level fields", len(parsed.properties))
    return parsed


def _parse_object(
    properties: Mapping[str, Any], *, prefix: str, depth: int, max_depth: int
) -> ObjectField:
    fields: dict[str, FieldSchema] = {}
    for name, child in properties.items():
        child_path = name if not prefix else f"{prefix}.{name}"
        fields[name] = _parse_field(child, field_path=child_path, depth=depth, max_depth=max_depth)
    return ObjectField(properties=fields)


def _parse_field(node: Any, *, field_path: str, depth: int, max_depth: int) -> FieldSchema:
    if not isinstance(node, Mapping):
        raise MissingTypeError(field_path)
    type_tag = node.get("type")
    if not isinstance(type_tag, str):
        raise MissingTypeError(field_path)
    if type_tag not in SUPPORTED_TYPE_TAGS:
        raise UnsupportedTypeError(field_path, type_tag)
    if type_tag != "object":
        return _SCALAR_FIELDS[type_tag]
    if depth >= max_depth:
        raise SchemaTooDeepError(field_path, max_depth)
    return _parse_object(
        properties_of(node, field_path=field_path),
        prefix=field_path,
        depth=depth + 1,
        max_depth=max_depth,
    )
