"""Theme generation — turns a free-text topic into a symbol set.

The actual generator (e.g. an LLM call) is pluggable through the
:class:`ThemeProvider` protocol.  Whatever it returns is normalised; a
failing or stingy provider never breaks a game, it just yields the
fallback symbols.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Protocol

from tilelink.models.theme import FALLBACK_SYMBOLS, PRESET_THEMES

logger = logging.getLogger(__name__)

MIN_THEME_SYMBOLS = 8
MAX_THEME_SYMBOLS = 16


class ThemeProvider(Protocol):
    """Interface every theme source must implement."""

    def suggest(self, topic: str) -> list[str]:
        """Return candidate symbols for *topic*.

        May raise; callers fall back to a static theme.
        """
        ...


class StaticThemeProvider:
    """Provider that ignores the topic and returns a fixed list."""

    def __init__(self, symbols: Iterable[str]) -> None:
        self.symbols = list(symbols)

    def suggest(self, topic: str) -> list[str]:
        return list(self.symbols)


class PresetThemeProvider:
    """Offline provider: picks the preset theme whose key or name mentions
    a word of the topic.  Returns an empty list when nothing matches.
    """

    def suggest(self, topic: str) -> list[str]:
        words = {w.strip(".,!?&").lower() for w in topic.split()}
        words.discard("")
        for theme in PRESET_THEMES.values():
            names = {theme.key, *theme.name.lower().split()}
            if words & names:
                return list(theme.symbols)
        return []


def normalize_symbols(candidates: Iterable[object]) -> list[str] | None:
    """Strip, de-duplicate and cap *candidates*.

    Returns ``None`` when fewer than ``MIN_THEME_SYMBOLS`` usable symbols
    remain.
    """
    seen: list[str] = []
    for raw in candidates:
        if not isinstance(raw, str):
            continue
        symbol = raw.strip()
        if symbol and symbol not in seen:
            seen.append(symbol)
        if len(seen) == MAX_THEME_SYMBOLS:
            break
    if len(seen) < MIN_THEME_SYMBOLS:
        return None
    return seen


class ThemeGenerator:
    def __init__(
        self,
        provider: ThemeProvider | None = None,
        fallback: Sequence[str] = FALLBACK_SYMBOLS,
    ) -> None:
        self.provider = provider
        self.fallback = list(fallback)

    def generate(self, topic: str) -> list[str]:
        """Return 8–16 distinct symbols for *topic*, or the fallback set."""
        topic = topic.strip()
        if not topic or self.provider is None:
            return list(self.fallback)

        try:
            candidates = self.provider.suggest(topic)
        except Exception as exc:  # provider is an external service
            logger.warning("Theme provider failed for %r: %s", topic, exc)
            return list(self.fallback)

        symbols = normalize_symbols(candidates or [])
        if symbols is None:
            logger.warning(
                "Theme provider returned too few symbols for %r; using fallback",
                topic,
            )
            return list(self.fallback)

        logger.debug("Theme %r -> %d symbols", topic, len(symbols))
        return symbols
