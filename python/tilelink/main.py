"""Tile Link — connect matching tiles with a path of at most two turns.

Usage::

    tilelink                          # Rich terminal, medium board
    tilelink -d hard -t sports        # 10×8 board, sports theme
    tilelink --symbols "A,B,C,D,E,F,G,H"
    tilelink --topic "weather"
    tilelink --log-file tilelink.log --log-level debug
"""

from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from tilelink.engine.themegen import (
    PresetThemeProvider,
    StaticThemeProvider,
    ThemeGenerator,
)
from tilelink.models.difficulty import DEFAULT_DIFFICULTY, Difficulty
from tilelink.models.theme import DEFAULT_THEME, PRESET_THEMES, get_theme

logger = logging.getLogger(__name__)


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel, log_file: Path | None) -> None:
    handlers: list[logging.Handler]
    if log_file is not None:
        handlers = [logging.FileHandler(log_file, mode="w", encoding="utf-8")]
    else:
        handlers = [logging.StreamHandler()]
    logging.basicConfig(
        level=getattr(logging, level.value.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def _parse_symbols(raw: str) -> list[str]:
    """Turn a comma separated list into a validated symbol set."""
    candidates = raw.split(",")
    generator = ThemeGenerator(StaticThemeProvider(candidates), fallback=())
    symbols = generator.generate("custom")
    if not symbols:
        raise typer.BadParameter(
            "need at least 8 distinct, non-empty symbols", param_hint="--symbols"
        )
    return symbols


def _theme_for_topic(topic: str) -> list[str]:
    """Symbols for a free-text topic; unknown topics get the fallback set."""
    return ThemeGenerator(PresetThemeProvider()).generate(topic)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    difficulty: Difficulty = typer.Option(
        DEFAULT_DIFFICULTY, "-d", "--difficulty",
        help="Board size and time limit.",
    ),
    theme: str = typer.Option(
        DEFAULT_THEME, "-t", "--theme",
        help=f"Preset theme ({', '.join(PRESET_THEMES)}).",
    ),
    symbols: Optional[str] = typer.Option(
        None, "--symbols",
        help="Comma separated custom symbols (8-16 distinct).",
    ),
    topic: Optional[str] = typer.Option(
        None, "--topic",
        help="Free-text theme topic, e.g. \"sports\" (ignored with --symbols).",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Write logs to a file instead of stderr.",
    ),
) -> None:
    """Tile Link puzzle."""
    _configure_logging(log_level, log_file)

    try:
        get_theme(theme)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--theme") from exc

    custom: list[str] | None = None
    if symbols is not None:
        custom = _parse_symbols(symbols)
    elif topic is not None:
        custom = _theme_for_topic(topic)

    from tilelink.frontend.cli.rich.app import run

    logger.debug("Launching frontend: difficulty=%s theme=%s", difficulty, theme)
    run(difficulty=difficulty, theme_key=theme, symbols=custom)


if __name__ == "__main__":
    app()
