"""Generate random JSON documents from a declarative schema."""

import logging

logging.getLogger("schema_doc_generator").addHandler(logging.NullHandler())
