"""Schema-driven document synthesis service."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from schema_doc_generator.scalar_generation import (
    derive_document_seeds,
    generate_boolean,
    generate_integer,
    generate_number,
    generate_string,
    new_random_source,
)
from schema_doc_generator.schema_management import (
    DEFAULT_MAX_DEPTH,
    BooleanField,
    FieldSchema,
    IntegerField,
    NumberField,
    ObjectField,
    StringField,
    parse_schema,
)

Document = dict[str, Any]

_LOGGER = logging.getLogger("schema_doc_generator.synthesis")

_SCALAR_PRODUCERS: dict[type[FieldSchema], Callable[[random.Random], Any]] = {
    IntegerField: generate_integer,
    StringField: generate_string,
    BooleanField: generate_boolean,
    NumberField: generate_number,
}


def synthesize_document(properties: Mapping[str, FieldSchema], rng: random.Random) -> Document:
    """Build one document with a value for every declared property, in order.

    A repeated property name overwrites the earlier value.
    """
    document: Document = {}
    for name, field_schema in properties.items():
        document[name] = _resolve_value(field_schema, rng)
    return document


def iter_documents(
    root_schema: Mapping[str, Any] | ObjectField,
    count: int,
    *,
    seed: int | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[Document]:
    """Yield `count` independent documents one at a time.

    The schema is parsed before the first document is produced, so schema
    defects surface before any output. Stopping iteration early leaves a
    valid partial result.
    """
    schema = _resolve_schema(root_schema, max_depth)
    for document_seed in _document_seeds(seed, count):
        yield synthesize_document(schema.properties, new_random_source(document_seed))


def generate(
    root_schema: Mapping[str, Any] | ObjectField,
    count: int,
    *,
    seed: int | None = None,
    parallelism: int = 1,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Document]:
    """Generate `count` documents for the root schema.

    With `seed` set, every document draws from its own seed derived from the
    run seed, so results do not depend on `parallelism`.
    """
    if parallelism < 1:
        raise ValueError("parallelism must be at least 1.")
    schema = _resolve_schema(root_schema, max_depth)
    seeds = _document_seeds(seed, count)
    _LOGGER.debug(
        "Generating %d documents (parallelism=%d, seeded=%s)",
        count,
        parallelism,
        seed is not None,
    )
    if parallelism == 1 or count <= 1:
        documents = [
            synthesize_document(schema.properties, new_random_source(document_seed))
            for document_seed in seeds
        ]
    else:
        with ThreadPoolExecutor(max_workers=parallelism) as executor:
            futures = [
                executor.submit(_synthesize_seeded, schema.properties, document_seed)
                for document_seed in seeds
            ]
            documents = [future.result() for future in futures]
    _LOGGER.debug("Generated %d documents", len(documents))
    return documents


def _synthesize_seeded(properties: Mapping[str, FieldSchema], seed: int | None) -> Document:
    return synthesize_document(properties, new_random_source(seed))


def _resolve_value(field_schema: FieldSchema, rng: random.Random) -> Any:
    if isinstance(field_schema, ObjectField):
        return synthesize_document(field_schema.properties, rng)
    producer = _SCALAR_PRODUCERS.get(type(field_schema))
    if producer is None:
        raise TypeError(f"No producer registered for {type(field_schema).__name__}.")
    return producer(rng)


def _resolve_schema(root_schema: Mapping[str, Any] | ObjectField, max_depth: int) -> ObjectField:
    if isinstance(root_schema, ObjectField):
        return root_schema
    return parse_schema(root_schema, max_depth=max_depth)


def _document_seeds(seed: int | None, count: int) -> list[int | None]:
    if count < 0:
        raise ValueError("count must not be negative.")
    if seed is None:
        return [None] * count
    return list(derive_document_seeds(seed, count))
