"""Scalar generation exports."""

from .scalar_producers import (
    ALPHANUMERIC,
    INT32_MAX,
    INT32_MIN,
    STRING_LENGTH,
    derive_document_seeds,
    generate_boolean,
    generate_integer,
    generate_number,
    generate_string,
    new_random_source,
)

__all__ = [
    "ALPHANUMERIC",
    "INT32_MAX",
    "INT32_MIN",
    "STRING_LENGTH",
    "derive_document_seeds",
    "generate_boolean",
    "generate_integer",
    "generate_number",
    "generate_string",
    "new_random_source",
]
