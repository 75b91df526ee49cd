"""Run execution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from schema_doc_generator.schema_management import DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run; unset values fall back to configuration."""

    schema_path: str | None = None
    config_path: str | None = None
    count: int | None = None
    output_path: str | None = None
    output_format: str | None = None
    seed: int | None = None
    parallelism: int | None = None


@dataclass(frozen=True)
class GenerationRequest:
    """Fully resolved root schema and document count for one generation pass."""

    schema: Mapping[str, Any]
    count: int
    seed: int | None = None
    parallelism: int = 1
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    output_path: Path | None
    documents_written: int
    schema_specified: bool = True
