"""Structuring configuration.

Loaded the same way the schema loaders load: from a dict, a JSON string or
bytes, or a file Path.  Unknown keys are ignored.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from script_structurer.structuring.locale import DEFAULT_LOCALE, LocaleStrings, get_locale

# Plain-text detector: a colon at index 1..19 marks "Name: content".
DIALOGUE_COLON_WINDOW: int = 20


class StructuringConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    locale: str = DEFAULT_LOCALE
    dialogue_colon_window: int = Field(default=DIALOGUE_COLON_WINDOW, ge=2)
    id_seed: int = 1

    @property
    def strings(self) -> LocaleStrings:
        return get_locale(self.locale)


def load_config(source: Union[None, str, bytes, dict, Path]) -> StructuringConfig:
    """Build a StructuringConfig; None yields the defaults.

    Raises:
        ValueError: "ERROR: invalid StructuringConfig input" (exact string).
    """
    if source is None:
        return StructuringConfig()
    try:
        if isinstance(source, Path):
            data = json.loads(source.read_text(encoding="utf-8"))
        elif isinstance(source, (str, bytes)):
            data = json.loads(source)
        else:
            data = source
        return StructuringConfig.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise ValueError("ERROR: invalid StructuringConfig input") from exc


def resolve_config(config: Optional[StructuringConfig]) -> StructuringConfig:
    return config if config is not None else StructuringConfig()
