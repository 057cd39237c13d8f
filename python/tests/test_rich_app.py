"""Menu theme cycling in the Rich frontend (screen and keyboard stubbed out)."""

from __future__ import annotations

import pytest

import tilelink.frontend.cli.rich.app as rich_app
from tilelink.models.difficulty import Difficulty
from tilelink.models.theme import PRESET_THEMES


@pytest.fixture
def menu(monkeypatch: pytest.MonkeyPatch):
    """Drive ``_menu_loop`` with scripted keys; returns what each game got."""
    drawn: list[str] = []
    played: list[tuple] = []

    def drive(keys: list[str], theme_key: str, symbols=None) -> list[tuple]:
        script = iter(keys)
        monkeypatch.setattr(rich_app, "get_key", lambda: next(script))
        monkeypatch.setattr(
            rich_app, "_draw_menu", lambda d, key, custom: drawn.append(key)
        )
        monkeypatch.setattr(
            rich_app, "_play_game", lambda d, chosen: played.append((d, list(chosen)))
        )
        monkeypatch.setattr(rich_app.console, "clear", lambda: None)
        monkeypatch.setattr(rich_app.console, "print", lambda *a, **k: None)
        rich_app._menu_loop(Difficulty.EASY, theme_key, symbols)
        return played

    drive.drawn = drawn
    return drive


def test_theme_options_put_custom_last() -> None:
    assert rich_app._theme_options(False) == list(PRESET_THEMES)
    options = rich_app._theme_options(True)
    assert options[:-1] == list(PRESET_THEMES)
    assert options[-1] == rich_app.CUSTOM_THEME


def test_cycling_returns_to_custom_symbols(menu) -> None:
    custom = list("ABCDEFGH")
    played = menu(["down", "up", "select", "quit"], "fruits", custom)
    first = list(PRESET_THEMES)[0]
    assert menu.drawn[:3] == [rich_app.CUSTOM_THEME, first, rich_app.CUSTOM_THEME]
    assert played == [(Difficulty.EASY, custom)]


def test_cycling_without_custom_wraps_presets(menu) -> None:
    keys = list(PRESET_THEMES)
    played = menu(["up", "select", "quit"], keys[0])
    assert menu.drawn[1] == keys[-1]
    assert played == [(Difficulty.EASY, list(PRESET_THEMES[keys[-1]].symbols))]
