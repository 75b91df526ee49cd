"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_doc_generator.schema_management import DEFAULT_MAX_DEPTH, MAX_SUPPORTED_DEPTH

from .runtime_settings import (
    DEFAULT_DOCUMENT_COUNT,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_PARALLELISM,
    OUTPUT_FORMATS,
    Configuration,
    GenerationSettings,
    OutputSettings,
    SchemaSource,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    generation = _parse_generation_section(parsed.get("generation"))
    output = _parse_output_section(parsed.get("output"), path.parent)

    return Configuration(path=path, schema=schema, generation=generation, output=output)


def load_schema_source(schema_path: Path | str) -> SchemaSource:
    """Read a schema file given directly on the command line."""
    path = Path(schema_path)
    if not path.exists():
        raise ConfigurationError(f"Schema file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        raise ConfigurationError("Schema text cannot be empty.")
    return SchemaSource(text=text, source_path=path.resolve())


def _parse_schema_section(value: Any, base_path: Path) -> SchemaSource | None:
    if value is None:
        return None
    text, source_path = _load_schema_definition(value, base_path)
    if not text.strip():
        raise ConfigurationError("Schema text cannot be empty.")
    return SchemaSource(text=text, source_path=source_path)


def _load_schema_definition(definition: Any, base_path: Path) -> tuple[str, Path | None]:
    if isinstance(definition, str):
        return definition, None
    mapping = _require_mapping(definition, "schema")
    inline = mapping.get("inline")
    path_value = mapping.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("Schema inline value must be a string.")
        return inline, None
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("Schema path must be a string.")
        schema_path = _resolve_path(base_path, path_value)
        if not schema_path.exists():
            raise ConfigurationError(f"Schema file not found: {schema_path}")
        text = schema_path.read_text(encoding="utf-8")
        return text, schema_path
    raise ConfigurationError("Schema definition requires either inline or path.")


def _parse_generation_section(value: Any) -> GenerationSettings:
    if value is None:
        return GenerationSettings()
    section = _require_mapping(value, "generation")
    count = _require_non_negative_int(
        section.get("count", DEFAULT_DOCUMENT_COUNT), "generation.count"
    )
    seed = _optional_int(section.get("seed"), "generation.seed")
    parallelism = _require_positive_int(
        section.get("parallelism", DEFAULT_PARALLELISM), "generation.parallelism"
    )
    max_depth = _require_positive_int(
        section.get("max_depth", DEFAULT_MAX_DEPTH), "generation.max_depth"
    )
    if max_depth > MAX_SUPPORTED_DEPTH:
        raise ConfigurationError(f"generation.max_depth must not exceed {MAX_SUPPORTED_DEPTH}.")
    return GenerationSettings(
        count=count, seed=seed, parallelism=parallelism, max_depth=max_depth
    )


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    if value is None:
        return OutputSettings()
    section = _require_mapping(value, "output")
    path_value = _optional_string(section.get("path"), "output.path")
    output_format = _require_output_format(
        section.get("format", DEFAULT_OUTPUT_FORMAT), "output.format"
    )
    indent_value = section.get("indent")
    indent = None if indent_value is None else _require_positive_int(indent_value, "output.indent")
    return OutputSettings(
        path=_resolve_path(base_path, path_value) if path_value else None,
        output_format=output_format,
        indent=indent,
    )


def _require_output_format(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    normalized = value.strip().lower()
    if normalized not in OUTPUT_FORMATS:
        raise ConfigurationError(f"{field_name} must be one of: {', '.join(OUTPUT_FORMATS)}.")
    return normalized


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
