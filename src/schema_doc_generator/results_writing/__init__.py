"""Results writing exports."""

from .document_writer import emit_documents, serialize_document, write_documents

__all__ = ["emit_documents", "serialize_document", "write_documents"]
