"""Fallback synthesizer: one opening scene built from context alone.

Used only when every detector came back empty.  Never inspects the raw text.
"""
from __future__ import annotations

from typing import Optional

from script_structurer.structuring.locale import LocaleStrings
from script_structurer.structuring.models import (
    DialogueDraft,
    NarrationDraft,
    ProjectContext,
    SceneDraft,
    ScriptContext,
)


def synthesize_opening(
    project: Optional[ProjectContext],
    script: ScriptContext,
    strings: LocaleStrings,
) -> SceneDraft:
    """Two-line exchange between the first two roster members, else narration."""
    roster = project.roster if project is not None else []
    scene = SceneDraft(
        title=strings.opening_title,
        description=strings.opening_description,
        duration=script.settings.average_scene_duration,
    )
    if len(roster) >= 2:
        first, second = roster[0].name, roster[1].name
        scene.lines.append(
            DialogueDraft(
                character=first,
                content=strings.greeting(second),
                emotion=strings.opening_greeting_emotion,
            )
        )
        scene.lines.append(
            DialogueDraft(
                character=second,
                content=strings.opening_reply,
                emotion=strings.opening_reply_emotion,
            )
        )
    else:
        scene.lines.append(NarrationDraft(content=strings.opening_narration))
    return scene
