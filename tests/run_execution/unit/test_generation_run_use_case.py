"""Generation run use-case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_doc_generator.run_execution import (
    GenerationRequest,
    RunExecutionError,
    RunRequest,
    execute_generation_run,
    generate_from_request,
)

SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "integer"},
        "name": {"type": "string"},
        "meta": {"type": "object", "properties": {"active": {"type": "boolean"}}},
    },
}


def _write_schema(tmp_path: Path, schema: object = SCHEMA) -> Path:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(schema), encoding="utf-8")
    return path


def _write_config(tmp_path: Path, config: dict) -> Path:
    path = tmp_path / "generator.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def test_generate_from_request_honours_count_and_seed() -> None:
    request = GenerationRequest(schema=SCHEMA, count=4, seed=10)

    documents = generate_from_request(request)

    assert len(documents) == 4
    assert documents == generate_from_request(request)


def test_run_writes_documents_to_output_file(tmp_path: Path) -> None:
    schema_path = _write_schema(tmp_path)
    output_path = tmp_path / "out" / "docs.jsonl"

    outcome = execute_generation_run(
        RunRequest(schema_path=str(schema_path), count=7, output_path=str(output_path))
    )

    assert outcome.output_path == output_path.resolve()
    assert outcome.documents_written == 7
    lines = output_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 7
    assert set(json.loads(lines[0])) == {"id", "name", "meta"}


def test_run_emits_to_echo_when_no_output_path(tmp_path: Path) -> None:
    schema_path = _write_schema(tmp_path)
    lines: list[str] = []

    outcome = execute_generation_run(
        RunRequest(schema_path=str(schema_path), count=3), echo=lines.append
    )

    assert outcome.output_path is None
    assert outcome.documents_written == 3
    assert len(lines) == 3
    assert all(set(json.loads(line)) == {"id", "name", "meta"} for line in lines)


def test_run_uses_default_count_of_one_hundred(tmp_path: Path) -> None:
    schema_path = _write_schema(tmp_path)
    lines: list[str] = []

    outcome = execute_generation_run(RunRequest(schema_path=str(schema_path)), echo=lines.append)

    assert outcome.documents_written == 100
    assert len(lines) == 100


def test_run_without_schema_does_nothing() -> None:
    lines: list[str] = []

    outcome = execute_generation_run(RunRequest(count=5), echo=lines.append)

    assert outcome.schema_specified is False
    assert outcome.documents_written == 0
    assert lines == []


def test_configuration_values_apply_and_cli_values_override(tmp_path: Path) -> None:
    _write_schema(tmp_path)
    config_path = _write_config(
        tmp_path,
        {
            "schema": {"path": "schema.json"},
            "generation": {"count": 2, "seed": 99},
            "output": {"path": "configured.json", "format": "json"},
        },
    )

    configured = execute_generation_run(RunRequest(config_path=str(config_path)))
    overridden = execute_generation_run(
        RunRequest(
            config_path=str(config_path),
            count=5,
            output_path=str(tmp_path / "override.jsonl"),
            output_format="jsonl",
        )
    )

    assert configured.output_path == (tmp_path / "configured.json").resolve()
    configured_documents = json.loads(configured.output_path.read_text(encoding="utf-8"))
    assert len(configured_documents) == 2
    assert overridden.documents_written == 5
    override_lines = (tmp_path / "override.jsonl").read_text(encoding="utf-8").splitlines()
    assert [json.loads(line) for line in override_lines[:2]] == configured_documents


def test_schema_file_option_overrides_configured_schema(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        {"schema": {"inline": json.dumps({"properties": {"other": {"type": "string"}}})}},
    )
    schema_path = _write_schema(tmp_path)
    lines: list[str] = []

    execute_generation_run(
        RunRequest(config_path=str(config_path), schema_path=str(schema_path), count=1),
        echo=lines.append,
    )

    assert set(json.loads(lines[0])) == {"id", "name", "meta"}


def test_unsupported_type_is_reported_with_kind_and_field(tmp_path: Path) -> None:
    schema_path = _write_schema(tmp_path, {"properties": {"a": {"type": "unknown"}}})
    output_path = tmp_path / "docs.jsonl"

    with pytest.raises(RunExecutionError) as exc_info:
        execute_generation_run(
            RunRequest(schema_path=str(schema_path), count=2, output_path=str(output_path))
        )

    message = str(exc_info.value)
    assert message.startswith("UnsupportedTypeError:")
    assert "'a'" in message
    assert "'unknown'" in message
    assert not output_path.exists()


def test_missing_type_is_reported(tmp_path: Path) -> None:
    schema_path = _write_schema(tmp_path, {"properties": {"a": {}}})

    with pytest.raises(RunExecutionError, match="MissingTypeError"):
        execute_generation_run(RunRequest(schema_path=str(schema_path), count=1))


def test_missing_properties_is_reported(tmp_path: Path) -> None:
    schema_path = _write_schema(tmp_path, {"type": "object"})

    with pytest.raises(RunExecutionError, match="SchemaShapeError"):
        execute_generation_run(RunRequest(schema_path=str(schema_path), count=1))


def test_invalid_schema_json_is_reported(tmp_path: Path) -> None:
    schema_path = tmp_path / "schema.json"
    schema_path.write_text("{broken", encoding="utf-8")

    with pytest.raises(RunExecutionError, match="Invalid JSON schema"):
        execute_generation_run(RunRequest(schema_path=str(schema_path), count=1))


def test_missing_schema_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(RunExecutionError, match="Schema file not found"):
        execute_generation_run(RunRequest(schema_path=str(tmp_path / "missing.json")))


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"count": -1}, "count must not be negative"),
        ({"parallelism": 0}, "parallelism must be at least 1"),
        ({"output_format": "xml"}, "Unsupported output format"),
    ],
)
def test_invalid_overrides_are_reported(tmp_path: Path, overrides: dict, message: str) -> None:
    schema_path = _write_schema(tmp_path)

    with pytest.raises(RunExecutionError, match=message):
        execute_generation_run(RunRequest(schema_path=str(schema_path), **overrides))


def test_indent_setting_does_not_break_line_per_document_stdout(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        {
            "schema": {"inline": json.dumps({"properties": {"a": {"type": "integer"}}})},
            "generation": {"count": 2, "seed": 3},
            "output": {"indent": 2},
        },
    )
    lines: list[str] = []

    outcome = execute_generation_run(RunRequest(config_path=str(config_path)), echo=lines.append)

    assert outcome.documents_written == 2
    assert len(lines) == 2
    assert all("\n" not in line for line in lines)
    assert all(set(json.loads(line)) == {"a"} for line in lines)
