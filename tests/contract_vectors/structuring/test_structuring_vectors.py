"""Contract vector tests for structure_script().

Each vector is a committed (fixture, golden) pair run against one shared
context.  The test asserts that the produced Document equals the golden
Document exactly, ids included, and that it conforms to Document.v1.json.
"""
import json
import pathlib

import pytest

from script_structurer.contract_validate import validate_document_model
from script_structurer.schemas.document_v1 import document_to_dict, load_document
from script_structurer.structuring.pipeline import structure_script

_HERE = pathlib.Path(__file__).parent
_FIXTURES = _HERE / "fixtures"
_GOLDENS = _HERE / "goldens"

_VECTORS = ["markdown_two_scenes", "json_fenced", "plain_paragraphs", "empty"]


def _context():
    with (_FIXTURES / "context.json").open("r", encoding="utf-8") as f:
        data = json.load(f)
    return data["project"], data["script"]


def _produce(name: str):
    project, script = _context()
    raw = (_FIXTURES / f"{name}.txt").read_text(encoding="utf-8")
    return structure_script(raw, project, script)


def _load_golden(name: str) -> dict:
    with (_GOLDENS / f"{name}.json").open("r", encoding="utf-8") as f:
        return json.load(f)


@pytest.mark.parametrize("name", _VECTORS)
def test_matches_golden(name):
    assert document_to_dict(_produce(name)) == _load_golden(name)


@pytest.mark.parametrize("name", _VECTORS)
def test_golden_loads_as_document(name):
    assert load_document(_load_golden(name)) == _produce(name)


@pytest.mark.parametrize("name", _VECTORS)
def test_conforms_to_contract(name):
    validate_document_model(_produce(name))
