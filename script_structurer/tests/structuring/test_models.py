"""Tests for the Document tree and context models.

Covers: document shape invariants, id ordering, immutability, roundtrip
serialisation, and the alias handling of stored context records.
"""
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from script_structurer.structuring.models import (
    CastEntry,
    CastList,
    DialogueLine,
    Document,
    Header,
    NarrationLine,
    ProjectContext,
    Scene,
    ScriptContext,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────


def _header(id_: int = 1) -> Header:
    return Header(id=id_, title="Pilot", project_name="Harbor Lights")


def _scene(id_: int, lines=None) -> Scene:
    return Scene(id=id_, title=f"Scene {id_}", duration="3 minutes", lines=lines or [])


def _minimal_document() -> Document:
    return Document(
        elements=[
            _header(1),
            CastList(id=2, title="Characters", entries=[CastEntry(name="Alice")]),
            _scene(3, [
                DialogueLine(id=4, character="Alice", content="Hi.", emotion="neutral"),
                NarrationLine(id=5, content="Rain."),
            ]),
        ]
    )


# ── Roundtrip ─────────────────────────────────────────────────────────────────


class TestRoundtrip:
    def test_document_roundtrip(self):
        doc = _minimal_document()
        reconstructed = Document.model_validate_json(doc.model_dump_json())
        assert reconstructed == doc

    def test_schema_version_in_json(self):
        data = json.loads(_minimal_document().model_dump_json())
        assert data["schema_version"] == "1.0.0"

    def test_line_variants_keep_their_type(self):
        data = json.loads(_minimal_document().model_dump_json())
        lines = data["elements"][2]["lines"]
        assert [line["type"] for line in lines] == ["dialogue", "narration"]
        assert "character" not in lines[1]


# ── Shape invariants ──────────────────────────────────────────────────────────


class TestDocumentShape:
    def test_empty_document_rejected(self):
        with pytest.raises(ValidationError):
            Document(elements=[])

    def test_header_must_come_first(self):
        with pytest.raises(ValidationError):
            Document(elements=[_scene(1), _header(2)])

    def test_second_header_rejected(self):
        with pytest.raises(ValidationError):
            Document(elements=[_header(1), _header(2)])

    def test_cast_list_must_follow_header(self):
        with pytest.raises(ValidationError):
            Document(elements=[
                _header(1),
                _scene(2),
                CastList(id=3, title="Characters"),
            ])

    def test_header_only_document_is_valid(self):
        doc = Document(elements=[_header(1)])
        assert doc.scenes == []
        assert doc.cast_list is None

    def test_non_increasing_ids_rejected(self):
        with pytest.raises(ValidationError):
            Document(elements=[
                _header(1),
                _scene(5, [NarrationLine(id=4, content="Out of order.")]),
            ])

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError):
            Document(elements=[_header(1), _scene(1)])


class TestRequiredFields:
    def test_blank_scene_title_rejected(self):
        with pytest.raises(ValidationError):
            Scene(id=1, title="", duration="1m")

    def test_blank_dialogue_character_rejected(self):
        with pytest.raises(ValidationError):
            DialogueLine(id=1, character="", content="Hi.", emotion="neutral")

    def test_blank_dialogue_content_rejected(self):
        with pytest.raises(ValidationError):
            DialogueLine(id=1, character="Alice", content="", emotion="neutral")

    def test_blank_header_title_rejected(self):
        with pytest.raises(ValidationError):
            Header(id=1, title="", project_name="P")


class TestImmutability:
    def test_scene_fields_are_frozen(self):
        doc = _minimal_document()
        with pytest.raises(ValidationError):
            doc.scenes[0].title = "Changed"

    def test_document_elements_are_frozen(self):
        doc = _minimal_document()
        with pytest.raises(ValidationError):
            doc.elements = []


class TestAccessors:
    def test_iter_ids_is_element_then_line_order(self):
        assert list(_minimal_document().iter_ids()) == [1, 2, 3, 4, 5]

    def test_scene_for_line_id(self):
        doc = _minimal_document()
        assert doc.scene_for_line_id(5).id == 3
        assert doc.scene_for_line_id(99) is None

    def test_header_property(self):
        assert _minimal_document().header.title == "Pilot"


# ── Context records ───────────────────────────────────────────────────────────


class TestContexts:
    def test_project_accepts_characters_key(self):
        project = ProjectContext.model_validate({
            "name": "Harbor Lights",
            "characters": [{"name": "Alice", "role": "captain"}],
        })
        assert [m.name for m in project.roster] == ["Alice"]

    def test_role_falls_back_to_description(self):
        project = ProjectContext.model_validate({
            "roster": [{"name": "Bob", "description": "the cook"}],
        })
        assert project.roster[0].role == "the cook"

    def test_role_preferred_over_description(self):
        project = ProjectContext.model_validate({
            "roster": [{"name": "Bob", "role": "cook", "description": "long text"}],
        })
        assert project.roster[0].role == "cook"

    def test_script_settings_camel_case(self):
        script = ScriptContext.model_validate({
            "title": "Pilot",
            "scriptSettings": {
                "totalDuration": "10 minutes",
                "sceneCount": 4,
                "averageSceneDuration": "2 minutes",
            },
        })
        assert script.settings.scene_count == 4
        assert script.settings.average_scene_duration == "2 minutes"
        assert script.settings.total_duration == "10 minutes"

    def test_unknown_fields_ignored(self):
        script = ScriptContext.model_validate({"title": "Pilot", "createdAt": "2026-01-01"})
        assert script.title == "Pilot"

    def test_unusable_setting_hints_become_none(self):
        script = ScriptContext.model_validate({
            "title": "Pilot",
            "scriptSettings": {"sceneCount": "three", "totalDuration": True, "averageSceneDuration": 90},
        })
        assert script.settings.scene_count is None
        assert script.settings.total_duration is None
        assert script.settings.average_scene_duration == "90"

    def test_numeric_string_scene_count_parsed(self):
        script = ScriptContext.model_validate({"title": "Pilot", "settings": {"scene_count": " 5 "}})
        assert script.settings.scene_count == 5
