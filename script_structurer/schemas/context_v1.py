"""Project/script context loaders.

Records come in the shape the persistence store keeps them: a project with a
"characters" (or "roster") list whose entries carry "role" or "description",
and a script with camelCase "scriptSettings".
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from script_structurer.structuring.models import ProjectContext, ScriptContext


def _read(source: Union[str, bytes, dict, Path]):
    if isinstance(source, Path):
        return json.loads(source.read_text(encoding="utf-8"))
    if isinstance(source, (str, bytes)):
        return json.loads(source)
    return source


def load_project_context(source: Union[str, bytes, dict, Path]) -> ProjectContext:
    """Load and validate a ProjectContext.

    Raises:
        ValueError: "ERROR: invalid ProjectContext input"  (exact string, always)
    """
    try:
        return ProjectContext.model_validate(_read(source))
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise ValueError("ERROR: invalid ProjectContext input") from exc


def load_script_context(source: Union[str, bytes, dict, Path]) -> ScriptContext:
    """Load and validate a ScriptContext.  The title is checked later.

    Raises:
        ValueError: "ERROR: invalid ScriptContext input"  (exact string, always)
    """
    try:
        return ScriptContext.model_validate(_read(source))
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise ValueError("ERROR: invalid ScriptContext input") from exc
