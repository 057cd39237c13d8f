"""Preset symbol themes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    key: str
    name: str
    symbols: tuple[str, ...]


PRESET_THEMES: dict[str, Theme] = {
    theme.key: theme
    for theme in (
        Theme(
            "animals",
            "Cute Animals",
            ("🐶", "🐱", "🐭", "🐹", "🐰", "🦊", "🐻", "🐼",
             "🐨", "🐯", "🦁", "🐮", "🐷", "🐸", "🐵", "🐔"),
        ),
        Theme(
            "fruits",
            "Fresh Produce",
            ("🍎", "🍌", "🍇", "🍉", "🍒", "🍓", "🥑", "🥕",
             "🌽", "🥦", "🍄", "🥜", "🥐", "🥨", "🧀", "🥩"),
        ),
        Theme(
            "sports",
            "Sports",
            ("⚽", "🏀", "🏈", "⚾", "🎾", "🏐", "🏉", "🎱",
             "🏓", "🏸", "🏒", "🥊", "🛹", "⛳", "⛸️", "🏹"),
        ),
        Theme(
            "weather",
            "Nature & Weather",
            ("☀️", "🌤️", "☁️", "🌧️", "⛈️", "🌩️", "❄️", "☃️",
             "🌬️", "🌈", "⭐", "🌙", "🌊", "🔥", "💧", "⚡"),
        ),
        Theme(
            "expressions",
            "Funny Faces",
            ("😀", "😂", "😍", "😎", "😡", "😱", "🤔", "😴",
             "🤢", "🤡", "👻", "👽", "🤖", "💩", "👺", "🙈"),
        ),
        Theme(
            "transport",
            "Transport",
            ("🚗", "🚕", "🚙", "🚌", "🚓", "🚑", "🚒", "🚲",
             "🛵", "🚂", "✈️", "🚀", "🛸", "🚁", "🛶", "🚢"),
        ),
    )
}

DEFAULT_THEME = "fruits"

# Used whenever a generated theme is unusable.
FALLBACK_SYMBOLS: tuple[str, ...] = PRESET_THEMES["animals"].symbols


def get_theme(key: str) -> Theme:
    try:
        return PRESET_THEMES[key]
    except KeyError:
        known = ", ".join(PRESET_THEMES)
        raise ValueError(f"Unknown theme {key!r} (expected one of: {known}).") from None
