"""Document schema v1.0.0 — load, dump, validate.

Canonical JSON (sort_keys=True) ensures byte-identical serialization of
identical documents regardless of Python dict insertion order.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from script_structurer.structuring.models import SCHEMA_VERSION, Document

__all__ = ["SCHEMA_VERSION", "load_document", "dump_document", "document_to_dict", "validate_document"]


def load_document(source: Union[str, bytes, dict, Path]) -> Document:
    """Parse a Document from JSON string, bytes, dict, or file Path.

    Raises:
        ValidationError: data does not conform to the Document schema.
        FileNotFoundError: Path does not exist.
    """
    if isinstance(source, Path):
        data = json.loads(source.read_text(encoding="utf-8"))
    elif isinstance(source, (str, bytes)):
        data = json.loads(source)
    else:
        data = source
    return Document.model_validate(data)


def document_to_dict(document: Document) -> Dict[str, Any]:
    return json.loads(document.model_dump_json())


def dump_document(document: Document, *, indent: int = 2) -> str:
    """Serialize a Document to canonical JSON (sort_keys=True, indent=2)."""
    return json.dumps(document_to_dict(document), sort_keys=True, indent=indent, ensure_ascii=False)


def validate_document(data: dict) -> List[str]:
    """Validate a raw dict against the Document model.

    Returns a list of human-readable error strings (empty list = valid).
    Does not raise.
    """
    try:
        Document.model_validate(data)
        return []
    except ValidationError as exc:
        return [f"{e['loc']}: {e['msg']}" for e in exc.errors()]
