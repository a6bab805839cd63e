"""Completion-provider front end.

The provider owns prompting, retries, timeouts and credentials.  This module
only awaits its text and hands it to structure_script(); a provider failure
degrades to the fallback document rather than reaching the caller.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

from script_structurer.structuring.config import StructuringConfig
from script_structurer.structuring.errors import ProviderError
from script_structurer.structuring.models import Document, ProjectContext, ScriptContext
from script_structurer.structuring.pipeline import coerce_contexts, structure_script

logger = logging.getLogger(__name__)


@runtime_checkable
class CompletionProvider(Protocol):
    async def complete(self, prompt: str) -> str:
        ...


async def generate_structured_script(
    provider: CompletionProvider,
    prompt: str,
    project_context: Union[None, Mapping[str, Any], ProjectContext],
    script_context: Union[Mapping[str, Any], ScriptContext],
    *,
    config: Optional[StructuringConfig] = None,
) -> Document:
    """Await *provider* for *prompt* and structure the result.

    The title contract is checked before the provider is called, so an
    invalid request never spends a completion.

    Raises:
        InvalidScriptInput: blank script title or unreadable context.
    """
    project, script = coerce_contexts(project_context, script_context)
    try:
        raw_text = await provider.complete(prompt)
    except ProviderError as exc:
        logger.warning("completion provider failed (%s); using fallback scene", type(exc).__name__)
        raw_text = ""
    return structure_script(raw_text, project, script, config=config)
