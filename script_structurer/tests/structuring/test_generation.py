"""generate_structured_script(): provider text in, Document out."""
from __future__ import annotations

import asyncio

import pytest

from script_structurer.structuring.errors import InvalidScriptInput, ProviderError
from script_structurer.structuring.generation import CompletionProvider, generate_structured_script
from script_structurer.structuring.models import DialogueLine

PROJECT = {"name": "P", "roster": [{"name": "Alice"}, {"name": "Bob"}]}
SCRIPT = {"title": "Pilot"}


class _StaticProvider:
    def __init__(self, text: str) -> None:
        self.text = text
        self.prompts = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text


class _FailingProvider:
    def __init__(self) -> None:
        self.calls = 0

    async def complete(self, prompt: str) -> str:
        self.calls += 1
        raise ProviderError("rate limited")


class _BrokenProvider:
    async def complete(self, prompt: str) -> str:
        raise RuntimeError("bug in provider")


class TestGenerateStructuredScript:
    def test_provider_text_is_structured(self):
        provider = _StaticProvider("## Dock (1m)\nAlice: Morning.")
        doc = asyncio.run(generate_structured_script(provider, "write it", PROJECT, SCRIPT))
        assert provider.prompts == ["write it"]
        assert [s.title for s in doc.scenes] == ["Dock"]

    def test_provider_error_falls_back(self):
        doc = asyncio.run(generate_structured_script(_FailingProvider(), "p", PROJECT, SCRIPT))
        assert [s.title for s in doc.scenes] == ["Opening"]
        assert all(isinstance(line, DialogueLine) for line in doc.scenes[0].lines)

    def test_other_exceptions_propagate(self):
        with pytest.raises(RuntimeError):
            asyncio.run(generate_structured_script(_BrokenProvider(), "p", PROJECT, SCRIPT))

    def test_missing_title_checked_before_provider_call(self):
        provider = _FailingProvider()
        with pytest.raises(InvalidScriptInput):
            asyncio.run(generate_structured_script(provider, "p", PROJECT, {"title": ""}))
        assert provider.calls == 0

    def test_providers_satisfy_protocol(self):
        assert isinstance(_StaticProvider(""), CompletionProvider)
