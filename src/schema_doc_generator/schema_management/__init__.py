"""Schema management exports."""

from .schema_models import (
    SUPPORTED_TYPE_TAGS,
    BooleanField,
    FieldSchema,
    IntegerField,
    NumberField,
    ObjectField,
    StringField,
)
from .schema_parsing import (
    DEFAULT_MAX_DEPTH,
    MAX_SUPPORTED_DEPTH,
    MissingTypeError,
    SchemaError,
    SchemaShapeError,
    SchemaTooDeepError,
    UnsupportedTypeError,
    load_schema_document,
    parse_schema,
    properties_of,
)

__all__ = [
    "SUPPORTED_TYPE_TAGS",
    "DEFAULT_MAX_DEPTH",
    "MAX_SUPPORTED_DEPTH",
    "FieldSchema",
    "IntegerField",
    "NumberField",
    "BooleanField",
    "StringField",
    "ObjectField",
    "SchemaError",
    "SchemaShapeError",
    "MissingTypeError",
    "UnsupportedTypeError",
    "SchemaTooDeepError",
    "load_schema_document",
    "parse_schema",
    "properties_of",
]
