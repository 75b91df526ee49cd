"""Run execution use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from schema_doc_generator.configuration import (
    OUTPUT_FORMATS,
    ConfigurationError,
    GenerationSettings,
    OutputSettings,
    SchemaSource,
    load_configuration,
    load_schema_source,
)
from schema_doc_generator.document_synthesis import Document, generate
from schema_doc_generator.results_writing import emit_documents, write_documents
from schema_doc_generator.schema_management import SchemaError, load_schema_document

from .run_contracts import GenerationRequest, RunOutcome, RunRequest

_LOGGER = logging.getLogger("schema_doc_generator.run")


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


@dataclass(frozen=True)
class _RunSettings:
    """Configuration merged with command line overrides."""

    schema: SchemaSource | None
    generation: GenerationSettings
    output: OutputSettings


def generate_from_request(request: GenerationRequest) -> list[Document]:
    """Run one generation pass for a resolved request."""
    return generate(
        request.schema,
        request.count,
        seed=request.seed,
        parallelism=request.parallelism,
        max_depth=request.max_depth,
    )


def execute_generation_run(
    request: RunRequest, *, echo: Callable[[str], None] = print
) -> RunOutcome:
    """Resolve settings, generate documents, and hand them to the output sink."""
    try:
        settings = _resolve_run_settings(request)
        if settings.schema is None:
            return RunOutcome(output_path=None, documents_written=0, schema_specified=False)
        generation_request = GenerationRequest(
            schema=load_schema_document(settings.schema.text),
            count=settings.generation.count,
            seed=settings.generation.seed,
            parallelism=settings.generation.parallelism,
            max_depth=settings.generation.max_depth,
        )
        _LOGGER.debug("Generating from schema %s", settings.schema.source_path or "<inline>")
        documents = generate_from_request(generation_request)
        if settings.output.path is None:
            written = emit_documents(documents, echo)
            return RunOutcome(output_path=None, documents_written=written)
        output_path = write_documents(
            documents,
            settings.output.path,
            output_format=settings.output.output_format,
            indent=settings.output.indent,
        )
    except (ConfigurationError, SchemaError, OSError, ValueError) as exc:
        raise RunExecutionError(f"{type(exc).__name__}: {exc}") from exc
    return RunOutcome(output_path=output_path, documents_written=len(documents))


def _resolve_run_settings(request: RunRequest) -> _RunSettings:
    if request.config_path:
        configuration = load_configuration(request.config_path)
        schema = configuration.schema
        generation = configuration.generation
        output = configuration.output
    else:
        schema = None
        generation = GenerationSettings()
        output = OutputSettings()

    if request.schema_path:
        schema = load_schema_source(request.schema_path)

    if request.count is not None and request.count < 0:
        raise ValueError("count must not be negative.")
    if request.parallelism is not None and request.parallelism < 1:
        raise ValueError("parallelism must be at least 1.")
    generation = GenerationSettings(
        count=generation.count if request.count is None else request.count,
        seed=generation.seed if request.seed is None else request.seed,
        parallelism=(
            generation.parallelism if request.parallelism is None else request.parallelism
        ),
        max_depth=generation.max_depth,
    )

    output_format = request.output_format or output.output_format
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {output_format}")
    output = OutputSettings(
        path=Path(request.output_path) if request.output_path else output.path,
        output_format=output_format,
        indent=output.indent,
    )
    return _RunSettings(schema=schema, generation=generation, output=output)
