"""Plain-text detector — the heuristic of last resort.

Every blank-line-delimited paragraph becomes one scene.  The paragraph's first
line is the scene description; each later line is dialogue when a colon sits
within the configured window (default: index 1..19), narration otherwise.
Any non-blank input yields at least one scene.
"""
from __future__ import annotations

import re
from typing import List

from script_structurer.structuring.config import StructuringConfig
from script_structurer.structuring.models import (
    DialogueDraft,
    LineDraft,
    NarrationDraft,
    SceneDraft,
)

_PARAGRAPH_BREAK_RE = re.compile(r"\n[ \t]*\n")


def detect_plain_text_scenes(raw_text: str, config: StructuringConfig) -> List[SceneDraft]:
    strings = config.strings
    text = raw_text.replace("\r\n", "\n").replace("\r", "\n")
    drafts: List[SceneDraft] = []

    for paragraph in _PARAGRAPH_BREAK_RE.split(text):
        lines = [line.strip() for line in paragraph.split("\n") if line.strip()]
        if not lines:
            continue
        scene_lines: List[LineDraft] = []
        for line in lines[1:]:
            parsed = _classify_line(line, config.dialogue_colon_window)
            if parsed is not None:
                scene_lines.append(parsed)
        drafts.append(
            SceneDraft(
                title=strings.scene_title(len(drafts) + 1),
                description=lines[0],
                lines=scene_lines,
            )
        )
    return drafts


def _classify_line(line: str, window: int):
    colon = _first_colon(line)
    if 0 < colon < window:
        content = line[colon + 1:].strip()
        if not content:
            return None
        return DialogueDraft(character=line[:colon].strip(), content=content)
    return NarrationDraft(content=line)


def _first_colon(line: str) -> int:
    positions = [i for i in (line.find(":"), line.find("：")) if i >= 0]
    return min(positions) if positions else -1
