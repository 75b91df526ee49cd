"""Generated document serialization service."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any

_LOGGER = logging.getLogger("schema_doc_generator.output")


def serialize_document(document: Any, *, indent: int | None = None) -> str:
    """Render one document as JSON text."""
    return json.dumps(document, ensure_ascii=False, indent=indent)


def write_documents(
    documents: Sequence[Any],
    output_path: Path | str,
    *,
    output_format: str = "jsonl",
    indent: int | None = None,
) -> Path:
    """Write all documents to one file and return its resolved path.

    `jsonl` writes one compact document per line; `json` writes a single
    array and honours `indent`.
    """
    destination = Path(output_path)
    if output_format == "jsonl":
        content = "".join(f"{serialize_document(document)}\n" for document in documents)
    elif output_format == "json":
        content = serialize_document(list(documents), indent=indent) + "\n"
    else:
        raise ValueError(f"Unsupported output format: {output_format}")

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(content, encoding="utf-8")
    _LOGGER.debug("Wrote %d documents to %s", len(documents), destination)
    return destination.resolve()


def emit_documents(documents: Iterable[Any], echo: Callable[[str], None]) -> int:
    """Send each compact document to a line-oriented sink and return how many were sent."""
    emitted = 0
    for document in documents:
        echo(serialize_document(document))
        emitted += 1
    return emitted
