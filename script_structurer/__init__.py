"""script-structurer: turn free-form LLM script output into a typed Document."""

from script_structurer.structuring import InvalidScriptInput, structure_script

__all__ = ["structure_script", "InvalidScriptInput"]
