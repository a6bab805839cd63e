"""Document, context, and draft models — the data contracts for structuring.

A Document is the only thing the pipeline hands back.  Every model in the
Document tree is frozen: once structure_script() returns, nothing can be
reassigned on it.  extra="ignore" everywhere gives forward-compatibility with
records written by newer versions.

Drafts (SceneDraft, DialogueDraft, NarrationDraft) are the id-less, mutable
shapes the detectors fill in.  They become Document elements only when the
coordinator stamps them with identifiers (see builders.py).
"""
from __future__ import annotations

from typing import Annotated, Iterator, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

SCHEMA_VERSION = "1.0.0"


# ── Context models (read-only inputs) ─────────────────────────────────────────


class RosterEntry(BaseModel):
    """A named character the project defines."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    role: str = ""

    @model_validator(mode="before")
    @classmethod
    def _role_from_description(cls, data):
        # Stored character records carry either "role" or "description".
        if isinstance(data, dict) and not data.get("role") and data.get("description"):
            data = {**data, "role": data["description"]}
        return data

    @field_validator("role", mode="before")
    @classmethod
    def _role_text(cls, value):
        # Stored records carry null for unset text fields.
        return "" if value is None else value


class ProjectContext(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    name: str = ""
    description: str = ""
    roster: List[RosterEntry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("roster", "characters"),
    )

    @field_validator("name", "description", mode="before")
    @classmethod
    def _text_fields(cls, value):
        return "" if value is None else value

    @field_validator("roster", mode="before")
    @classmethod
    def _roster_list(cls, value):
        return [] if value is None else value


class ScriptSettings(BaseModel):
    """Generation targets the caller asked the model for (all optional).

    Only average_scene_duration is read here, by the fallback synthesizer.
    total_duration and scene_count are carried through for callers that
    build the prompt from the same context.  A hint of the wrong type is
    treated as unset rather than rejecting the whole context.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    total_duration: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("total_duration", "totalDuration")
    )
    scene_count: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("scene_count", "sceneCount")
    )
    average_scene_duration: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("average_scene_duration", "averageSceneDuration"),
    )

    @field_validator("total_duration", "average_scene_duration", mode="before")
    @classmethod
    def _duration_hint(cls, value):
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            return value.strip() or None
        return None

    @field_validator("scene_count", mode="before")
    @classmethod
    def _count_hint(cls, value):
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        return None


class ScriptContext(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    title: Optional[str] = None
    description: str = ""
    settings: ScriptSettings = Field(
        default_factory=ScriptSettings,
        validation_alias=AliasChoices("settings", "script_settings", "scriptSettings"),
    )

    @field_validator("description", mode="before")
    @classmethod
    def _description_text(cls, value):
        return "" if value is None else value

    @field_validator("settings", mode="before")
    @classmethod
    def _settings_object(cls, value):
        return value if isinstance(value, (dict, ScriptSettings)) else {}


# ── Drafts (detector output, no identifiers yet) ─────────────────────────────


class DialogueDraft(BaseModel):
    type: Literal["dialogue"] = "dialogue"
    character: str
    content: str
    emotion: Optional[str] = None


class NarrationDraft(BaseModel):
    type: Literal["narration"] = "narration"
    content: str


LineDraft = Annotated[Union[DialogueDraft, NarrationDraft], Field(discriminator="type")]


class SceneDraft(BaseModel):
    title: Optional[str] = None
    description: str = ""
    duration: Optional[str] = None
    lines: List[LineDraft] = []


# ── Document tree ─────────────────────────────────────────────────────────────


class DialogueLine(BaseModel):
    """A spoken line attributed to one character."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Literal["dialogue"] = "dialogue"
    id: int
    character: str = Field(min_length=1)
    content: str = Field(min_length=1)
    emotion: str


class NarrationLine(BaseModel):
    """Narrated content with no character attribution."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Literal["narration"] = "narration"
    id: int
    content: str = Field(min_length=1)


Line = Annotated[Union[DialogueLine, NarrationLine], Field(discriminator="type")]


class Header(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Literal["header"] = "header"
    id: int
    title: str = Field(min_length=1)
    project_name: str
    description: str = ""


class CastEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    description: str = ""


class CastList(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Literal["cast_list"] = "cast_list"
    id: int
    title: str
    entries: List[CastEntry] = []


class Scene(BaseModel):
    """A scene owns its lines exclusively; line order is reading order."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Literal["scene"] = "scene"
    id: int
    title: str = Field(min_length=1)
    description: str = ""
    duration: str
    lines: List[Line] = []


Element = Annotated[Union[Header, CastList, Scene], Field(discriminator="type")]


class Document(BaseModel):
    """Structured script: Header first, optional CastList second, then Scenes.

    Element order is authoritative and never re-sorted.  Identifiers, read in
    element-then-line order, are strictly increasing.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    schema_version: str = SCHEMA_VERSION
    elements: List[Element] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_shape(self) -> "Document":
        if not isinstance(self.elements[0], Header):
            raise ValueError("first element must be a header")
        kinds = [e.type for e in self.elements]
        if kinds.count("header") != 1:
            raise ValueError("document must contain exactly one header")
        if kinds.count("cast_list") > 1 or ("cast_list" in kinds and kinds.index("cast_list") != 1):
            raise ValueError("cast_list may only appear once, directly after the header")
        ids = list(self.iter_ids())
        if any(b <= a for a, b in zip(ids, ids[1:])):
            raise ValueError("element and line ids must be strictly increasing")
        return self

    @property
    def header(self) -> Header:
        return self.elements[0]  # type: ignore[return-value]

    @property
    def cast_list(self) -> Optional[CastList]:
        for element in self.elements:
            if isinstance(element, CastList):
                return element
        return None

    @property
    def scenes(self) -> List[Scene]:
        return [e for e in self.elements if isinstance(e, Scene)]

    def iter_ids(self) -> Iterator[int]:
        """Yield every id in production order: element, then its lines."""
        for element in self.elements:
            yield element.id
            if isinstance(element, Scene):
                for line in element.lines:
                    yield line.id

    def scene_for_line_id(self, line_id: int) -> Optional[Scene]:
        """Find the owning scene of *line_id* by walking ownership edges."""
        for scene in self.scenes:
            if any(line.id == line_id for line in scene.lines):
                return scene
        return None
