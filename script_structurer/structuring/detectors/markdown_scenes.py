"""Markdown-scene detector.

Line grammar, evaluated top to bottom on each stripped line:

    ## <title> (<duration>)        start a scene; duration optional
    *<description>                 scene description, no colon; last one wins
    【<narration>】                 narration; a leading "Narration:" is dropped
    <Name>: <content> [<emotion>]  dialogue; emotion optional
    anything else                  ignored

Lines before the first "##" header are ignored.  Text with no header at all
yields no scenes.
"""
from __future__ import annotations

import re
from typing import List, Optional

from script_structurer.structuring.config import StructuringConfig
from script_structurer.structuring.models import DialogueDraft, NarrationDraft, SceneDraft

_SCENE_RE = re.compile(r"^##(?!#)\s*(.+?)(?:\s*[(（](.+?)[)）])?$")
_NARRATION_RE = re.compile(r"^【(.+?)】$")
_DIALOGUE_RE = re.compile(r"^(.+?)[:：]\s*(.+?)(?:\s*\[(.+?)\])?$")


def detect_markdown_scenes(raw_text: str, config: StructuringConfig) -> List[SceneDraft]:
    strings = config.strings
    label_re = _narration_label_re(strings.narration_labels)
    drafts: List[SceneDraft] = []
    current: Optional[SceneDraft] = None

    for raw_line in raw_text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        scene_match = _SCENE_RE.match(line)
        if scene_match:
            if current is not None:
                drafts.append(current)
            current = SceneDraft(
                title=scene_match.group(1).strip(),
                duration=scene_match.group(2),
            )
            continue

        if current is None:
            continue

        if line.startswith("*") and ":" not in line and "：" not in line:
            description = line.strip("*").strip()
            # "* * *" is a horizontal rule, not a description.
            if description.strip("* \t"):
                current.description = description
            continue

        narration_match = _NARRATION_RE.match(line)
        if narration_match:
            content = label_re.sub("", narration_match.group(1)).strip()
            current.lines.append(NarrationDraft(content=content))
            continue

        dialogue_match = _DIALOGUE_RE.match(line)
        if dialogue_match:
            character = dialogue_match.group(1).strip().strip("*").strip()
            if character:
                current.lines.append(
                    DialogueDraft(
                        character=character,
                        content=dialogue_match.group(2).strip(),
                        emotion=dialogue_match.group(3),
                    )
                )

    if current is not None:
        drafts.append(current)
    return drafts


def _narration_label_re(labels) -> re.Pattern:
    if not labels:
        return re.compile(r"(?!)")
    alternatives = "|".join(re.escape(label) for label in labels)
    return re.compile(rf"^(?:{alternatives})\s*[:：]\s*", re.IGNORECASE)
