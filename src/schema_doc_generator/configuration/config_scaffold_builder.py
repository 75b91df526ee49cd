"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "generator.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration template for schema-doc-generator.
# Replace every <REQUIRED> placeholder before running generate --config.
# Command line options override the values below.

schema:
  # Provide either an inline schema JSON text or a schema path.
  # Relative paths resolve against this file's directory.
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"

generation:
  # Number of documents to generate.
  count: 100
  # Fix the seed to make runs reproducible.
  # seed: <OPTIONAL>
  parallelism: 1
  # Maximum object nesting depth accepted in the schema.
  max_depth: 64

output:
  # Omit path to print one document per line to stdout.
  # path: "<OPTIONAL>"
  # jsonl writes one document per line, json writes a single array.
  format: jsonl
  # indent: <OPTIONAL>
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
