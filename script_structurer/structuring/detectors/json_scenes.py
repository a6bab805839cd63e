"""JSON scene detector.

Accepts a fenced ```json block or a bare JSON document whose top level is an
object with a "scenes" array.  The payload is checked against
JsonScenes.v1.json before any scene is drafted: a payload that fails the
check yields no scenes at all, never a partial list.
"""
from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Optional, Tuple

from script_structurer.schema_loader import load_validator
from script_structurer.structuring.config import StructuringConfig
from script_structurer.structuring.models import (
    DialogueDraft,
    LineDraft,
    SceneDraft,
)

_JSON_FENCE_RE = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)

# Canonical field → accepted source keys, in lookup order.
SCENE_FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "title": ("title",),
    "description": ("description", "content"),
    "duration": ("duration",),
}
LINE_FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "character": ("character", "speaker"),
    "content": ("content", "text"),
    "emotion": ("emotion", "mood"),
}


def detect_json_scenes(raw_text: str, config: StructuringConfig) -> List[SceneDraft]:
    payload = _load_payload(raw_text)
    if payload is None or not load_validator("JsonScenes.v1.json").is_valid(payload):
        return []

    strings = config.strings
    drafts: List[SceneDraft] = []
    for index, scene_data in enumerate(payload["scenes"]):
        lines_data = scene_data.get("lines")
        lines: List[LineDraft] = []
        if isinstance(lines_data, list):
            for line_data in lines_data:
                content = _resolve(line_data, LINE_FIELD_ALIASES, "content")
                if content is None:
                    continue
                lines.append(
                    DialogueDraft(
                        character=_resolve(line_data, LINE_FIELD_ALIASES, "character")
                        or strings.narrator,
                        content=content,
                        emotion=_resolve(line_data, LINE_FIELD_ALIASES, "emotion"),
                    )
                )
        drafts.append(
            SceneDraft(
                title=_resolve(scene_data, SCENE_FIELD_ALIASES, "title")
                or strings.scene_title(index + 1),
                description=_resolve(scene_data, SCENE_FIELD_ALIASES, "description") or "",
                duration=_resolve(scene_data, SCENE_FIELD_ALIASES, "duration"),
                lines=lines,
            )
        )
    return drafts


def _load_payload(raw_text: str) -> Optional[Any]:
    """Fenced block first, whole text second; None if neither parses."""
    match = _JSON_FENCE_RE.search(raw_text)
    candidate = match.group(1) if match else raw_text.strip()
    if not candidate:
        return None
    try:
        return json.loads(candidate)
    except (ValueError, RecursionError):
        return None


def _resolve(obj: Dict[str, Any], table: Dict[str, Tuple[str, ...]], field: str) -> Optional[str]:
    """First non-blank alias value for *field*, stringified.

    Booleans carry no text and count as absent.
    """
    for key in table[field]:
        value = obj.get(key)
        if value is None or isinstance(value, bool):
            continue
        text = value.strip() if isinstance(value, str) else str(value)
        if text:
            return text
    return None
