"""Versioned schema loaders and validators."""

from script_structurer.schemas.context_v1 import load_project_context, load_script_context
from script_structurer.schemas.document_v1 import dump_document, load_document, validate_document

__all__ = [
    "load_document",
    "dump_document",
    "validate_document",
    "load_project_context",
    "load_script_context",
]
