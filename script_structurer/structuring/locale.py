"""Locale sentinel tables.

Every default string the pipeline may emit lives here: the neutral emotion,
the narrator label, the default duration, synthesized titles, and the
fallback exchange.  Two locales ship, matching the editor's UI languages.
Unknown locale codes resolve to English.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class LocaleStrings:
    locale: str
    neutral_emotion: str
    narrator: str
    default_duration: str
    untitled_project: str
    cast_list_title: str
    scene_title_pattern: str
    opening_title: str
    opening_description: str
    opening_greeting_pattern: str
    opening_greeting_emotion: str
    opening_reply: str
    opening_reply_emotion: str
    opening_narration: str
    # Leading labels stripped from 【...】 narration lines.
    narration_labels: Tuple[str, ...] = ()

    def scene_title(self, number: int) -> str:
        return self.scene_title_pattern.format(n=number)

    def greeting(self, listener: str) -> str:
        return self.opening_greeting_pattern.format(name=listener)


LOCALES: Dict[str, LocaleStrings] = {
    "en": LocaleStrings(
        locale="en",
        neutral_emotion="neutral",
        narrator="Narrator",
        default_duration="3 minutes",
        untitled_project="Untitled",
        cast_list_title="Characters",
        scene_title_pattern="Scene {n}",
        opening_title="Opening",
        opening_description="The story begins.",
        opening_greeting_pattern="Hello, {name}.",
        opening_greeting_emotion="friendly",
        opening_reply="Hello. Lovely weather today, isn't it?",
        opening_reply_emotion="calm",
        opening_narration="This is the beginning of a new adventure.",
        narration_labels=("Narration", "Narrator", "ナレーション"),
    ),
    "ja": LocaleStrings(
        locale="ja",
        neutral_emotion="普通",
        narrator="ナレーター",
        default_duration="3分",
        untitled_project="未設定",
        cast_list_title="登場キャラクター",
        scene_title_pattern="シーン{n}",
        opening_title="オープニング",
        opening_description="物語の始まりです。",
        opening_greeting_pattern="こんにちは、{name}さん。",
        opening_greeting_emotion="親しみやすい",
        opening_reply="はい、こんにちは。今日はいい天気ですね。",
        opening_reply_emotion="穏やか",
        opening_narration="これは新しい冒険の始まりだ。",
        narration_labels=("ナレーション", "Narration", "Narrator"),
    ),
}

DEFAULT_LOCALE = "en"


def get_locale(code: str) -> LocaleStrings:
    """Return the sentinel table for *code*, falling back to English."""
    return LOCALES.get(code, LOCALES[DEFAULT_LOCALE])
