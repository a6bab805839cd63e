"""Raw script text → structured Document."""

from script_structurer.structuring.config import StructuringConfig, load_config
from script_structurer.structuring.errors import InvalidScriptInput, ProviderError
from script_structurer.structuring.generation import CompletionProvider, generate_structured_script
from script_structurer.structuring.models import (
    CastEntry,
    CastList,
    DialogueLine,
    Document,
    Header,
    NarrationLine,
    ProjectContext,
    RosterEntry,
    Scene,
    ScriptContext,
    ScriptSettings,
)
from script_structurer.structuring.pipeline import PipelineState, structure_script

__all__ = [
    "structure_script",
    "generate_structured_script",
    "CompletionProvider",
    "InvalidScriptInput",
    "ProviderError",
    "PipelineState",
    "StructuringConfig",
    "load_config",
    "CastEntry",
    "CastList",
    "DialogueLine",
    "Document",
    "Header",
    "NarrationLine",
    "ProjectContext",
    "RosterEntry",
    "Scene",
    "ScriptContext",
    "ScriptSettings",
]
