"""Grammar detectors.

Each detector is a pure function ``(raw_text, config) -> List[SceneDraft]``.
An empty list means "no match"; detectors never raise for any input text.
"""

from script_structurer.structuring.detectors.json_scenes import detect_json_scenes
from script_structurer.structuring.detectors.markdown_scenes import detect_markdown_scenes
from script_structurer.structuring.detectors.plain_text import detect_plain_text_scenes

__all__ = [
    "detect_json_scenes",
    "detect_markdown_scenes",
    "detect_plain_text_scenes",
]
