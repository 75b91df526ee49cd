"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_doc_generator.schema_management import DEFAULT_MAX_DEPTH

DEFAULT_DOCUMENT_COUNT = 100
DEFAULT_PARALLELISM = 1
OUTPUT_FORMATS: tuple[str, ...] = ("jsonl", "json")
DEFAULT_OUTPUT_FORMAT = "jsonl"


@dataclass(frozen=True)
class SchemaSource:
    """Normalized schema settings."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class GenerationSettings:
    """How many documents to generate and how."""

    count: int = DEFAULT_DOCUMENT_COUNT
    seed: int | None = None
    parallelism: int = DEFAULT_PARALLELISM
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class OutputSettings:
    """Destination of generated documents; stdout when `path` is None."""

    path: Path | None = None
    output_format: str = DEFAULT_OUTPUT_FORMAT
    indent: int | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaSource | None
    generation: GenerationSettings
    output: OutputSettings
