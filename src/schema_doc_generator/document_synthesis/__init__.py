"""Document synthesis exports."""

from .document_synthesizer import Document, generate, iter_documents, synthesize_document

__all__ = ["Document", "generate", "iter_documents", "synthesize_document"]
