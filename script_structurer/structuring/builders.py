"""Element construction: stamp identifiers and fill required fields.

These are the only functions that create Document elements.  None of them
raise for any draft a detector or the synthesizer can produce: blank titles
become "Scene N", missing durations and emotions take the locale sentinel,
and lines whose content is blank are dropped.

Ordering contract: a scene's id is drawn before any of its lines' ids, so a
line id always falls between its scene's id and the next scene's id.
"""
from __future__ import annotations

from typing import List, Optional

from script_structurer.structuring.ids import IdAllocator
from script_structurer.structuring.locale import LocaleStrings
from script_structurer.structuring.models import (
    CastEntry,
    CastList,
    DialogueDraft,
    DialogueLine,
    Header,
    LineDraft,
    NarrationLine,
    ProjectContext,
    Scene,
    SceneDraft,
    ScriptContext,
)


def build_header(
    ids: IdAllocator,
    script: ScriptContext,
    project: Optional[ProjectContext],
    strings: LocaleStrings,
) -> Header:
    """Header from context.  The caller has already checked the title."""
    project_name = (project.name.strip() if project else "") or strings.untitled_project
    return Header(
        id=ids.next_id(),
        title=(script.title or "").strip(),
        project_name=project_name,
        description=script.description,
    )


def build_cast_list(
    ids: IdAllocator,
    project: Optional[ProjectContext],
    strings: LocaleStrings,
) -> Optional[CastList]:
    """One CastEntry per roster member, roster order kept; None if no roster."""
    if project is None or not project.roster:
        return None
    return CastList(
        id=ids.next_id(),
        title=strings.cast_list_title,
        entries=[CastEntry(name=m.name, description=m.role) for m in project.roster],
    )


def build_scene(
    ids: IdAllocator,
    draft: SceneDraft,
    number: int,
    strings: LocaleStrings,
) -> Scene:
    scene_id = ids.next_id()
    lines = []
    for line_draft in draft.lines:
        line = _build_line(ids, line_draft, strings)
        if line is not None:
            lines.append(line)
    return Scene(
        id=scene_id,
        title=(draft.title or "").strip() or strings.scene_title(number),
        description=draft.description.strip(),
        duration=(draft.duration or "").strip() or strings.default_duration,
        lines=lines,
    )


def build_scenes(
    ids: IdAllocator,
    drafts: List[SceneDraft],
    strings: LocaleStrings,
) -> List[Scene]:
    return [build_scene(ids, d, n, strings) for n, d in enumerate(drafts, start=1)]


def _build_line(ids: IdAllocator, draft: LineDraft, strings: LocaleStrings):
    content = draft.content.strip()
    if not content:
        return None
    if isinstance(draft, DialogueDraft):
        return DialogueLine(
            id=ids.next_id(),
            character=draft.character.strip() or strings.narrator,
            content=content,
            emotion=(draft.emotion or "").strip() or strings.neutral_emotion,
        )
    return NarrationLine(id=ids.next_id(), content=content)
