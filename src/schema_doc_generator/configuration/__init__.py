"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, load_schema_source
from .runtime_settings import (
    DEFAULT_DOCUMENT_COUNT,
    OUTPUT_FORMATS,
    Configuration,
    GenerationSettings,
    OutputSettings,
    SchemaSource,
)

__all__ = [
    "Configuration",
    "GenerationSettings",
    "OutputSettings",
    "SchemaSource",
    "DEFAULT_DOCUMENT_COUNT",
    "OUTPUT_FORMATS",
    "ConfigurationError",
    "load_configuration",
    "load_schema_source",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
