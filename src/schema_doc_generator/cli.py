"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_doc_generator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_DOCUMENT_COUNT,
    OUTPUT_FORMATS,
    write_placeholder_configuration,
)
from schema_doc_generator.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_generation_run,
)

_PACKAGE_LOGGER_NAME = "schema_doc_generator"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-doc-generator")
def cli() -> None:
    """Schema-driven random document generator."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generator configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--schema-from-file",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the JSON schema describing the documents",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generator configuration file",
)
@click.option(
    "--count",
    type=click.IntRange(min=0),
    default=None,
    help=f"Number of documents to generate [default: {DEFAULT_DOCUMENT_COUNT}]",
)
@click.option(
    "--output-file",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write documents to this file instead of stdout",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output file format [default: jsonl]",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output")
@click.option(
    "--parallelism",
    type=click.IntRange(min=1),
    default=None,
    help="Number of worker threads generating documents [default: 1]",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr.")
def generate_documents(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    schema_path: str | None,
    config_path: str | None,
    count: int | None,
    output_path: str | None,
    output_format: str | None,
    seed: int | None,
    parallelism: int | None,
    verbose: bool,
) -> None:
    """Generate random documents matching a JSON schema."""
    if verbose:
        _enable_verbose_logging()
    try:
        outcome = execute_generation_run(
            RunRequest(
                schema_path=schema_path,
                config_path=config_path,
                count=count,
                output_path=output_path,
                output_format=output_format,
                seed=seed,
                parallelism=parallelism,
            ),
            echo=click.echo,
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if not outcome.schema_specified:
        click.echo("No schema specified, do nothing.")
        return
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))


def _enable_verbose_logging() -> None:
    logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    if any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
