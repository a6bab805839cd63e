"""Raw LLM script text → Document.

Public entry point
------------------
    structure_script(raw_text, project_context, script_context, config=...) -> Document

State machine
-------------
    START → HEADER_EMITTED → CAST_EMITTED (roster only)
          → DETECTING_JSON → DETECTING_MARKDOWN → DETECTING_PLAIN_TEXT
          → SYNTHESIZING (all detectors empty) → DONE

A detecting state moves forward only when its detector returns no scenes; the
first non-empty result goes straight to DONE.  Detector order is fixed.  The
only failure is a blank script title, reported before anything is emitted.

Logging carries state names and counts only, never script text.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from script_structurer.structuring.builders import build_cast_list, build_header, build_scenes
from script_structurer.structuring.config import StructuringConfig, resolve_config
from script_structurer.structuring.detectors import (
    detect_json_scenes,
    detect_markdown_scenes,
    detect_plain_text_scenes,
)
from script_structurer.structuring.errors import InvalidScriptInput
from script_structurer.structuring.fallback import synthesize_opening
from script_structurer.structuring.ids import IdAllocator
from script_structurer.structuring.models import (
    Document,
    ProjectContext,
    SceneDraft,
    ScriptContext,
)

logger = logging.getLogger(__name__)

Detector = Callable[[str, StructuringConfig], List[SceneDraft]]


class PipelineState(str, Enum):
    START = "start"
    HEADER_EMITTED = "header_emitted"
    CAST_EMITTED = "cast_emitted"
    DETECTING_JSON = "detecting_json"
    DETECTING_MARKDOWN = "detecting_markdown"
    DETECTING_PLAIN_TEXT = "detecting_plain_text"
    SYNTHESIZING = "synthesizing"
    DONE = "done"


DETECTION_ORDER: Tuple[Tuple[PipelineState, Detector], ...] = (
    (PipelineState.DETECTING_JSON, detect_json_scenes),
    (PipelineState.DETECTING_MARKDOWN, detect_markdown_scenes),
    (PipelineState.DETECTING_PLAIN_TEXT, detect_plain_text_scenes),
)


def structure_script(
    raw_text: Optional[str],
    project_context: Union[None, Mapping[str, Any], ProjectContext],
    script_context: Union[Mapping[str, Any], ScriptContext],
    *,
    config: Optional[StructuringConfig] = None,
) -> Document:
    """Turn raw model output into a Document.

    Args:
        raw_text:        Text returned by the completion provider.  None and
                         blank text are accepted and lead to the fallback scene.
        project_context: ProjectContext or its dict record; may be None.
        script_context:  ScriptContext or its dict record; title is required.
        config:          Locale, colon window and id seed.  Defaults apply
                         when omitted.

    Returns:
        A frozen Document: Header, CastList when the roster is non-empty,
        then at least one Scene.

    Raises:
        InvalidScriptInput: the script title is missing or blank, or a context
                            record cannot be read.
    """
    cfg = resolve_config(config)
    project, script = coerce_contexts(project_context, script_context)
    strings = cfg.strings
    text = raw_text or ""
    ids = IdAllocator(cfg.id_seed)

    state = PipelineState.START
    elements: list = [build_header(ids, script, project, strings)]
    state = _advance(state, PipelineState.HEADER_EMITTED)

    cast_list = build_cast_list(ids, project, strings)
    if cast_list is not None:
        elements.append(cast_list)
        state = _advance(state, PipelineState.CAST_EMITTED)

    drafts: List[SceneDraft] = []
    for detecting_state, detect in DETECTION_ORDER:
        state = _advance(state, detecting_state)
        drafts = detect(text, cfg)
        logger.debug("%s yielded %d scene(s)", detecting_state.value, len(drafts))
        if drafts:
            break
    else:
        state = _advance(state, PipelineState.SYNTHESIZING)
        drafts = [synthesize_opening(project, script, strings)]

    elements.extend(build_scenes(ids, drafts, strings))
    _advance(state, PipelineState.DONE)
    return Document(elements=elements)


def coerce_contexts(
    project_context: Union[None, Mapping[str, Any], ProjectContext],
    script_context: Union[None, Mapping[str, Any], ScriptContext],
) -> Tuple[Optional[ProjectContext], ScriptContext]:
    """Validate both contexts and enforce the title contract."""
    try:
        project = (
            None if project_context is None
            else project_context if isinstance(project_context, ProjectContext)
            else ProjectContext.model_validate(dict(project_context))
        )
        if script_context is None:
            raise InvalidScriptInput("ERROR: script context is required")
        script = (
            script_context if isinstance(script_context, ScriptContext)
            else ScriptContext.model_validate(dict(script_context))
        )
    except (ValidationError, TypeError) as exc:
        raise InvalidScriptInput("ERROR: invalid script or project context") from exc
    if not (script.title or "").strip():
        raise InvalidScriptInput("ERROR: script title is required")
    return project, script


def _advance(current: PipelineState, target: PipelineState) -> PipelineState:
    logger.debug("structuring: %s -> %s", current.value, target.value)
    return target
