"""Rich terminal frontend — board table, cursor, and panels.

Uses the ``rich`` library for styled output.  Includes a menu for
difficulty and theme selection, the timed play screen, and win /
time-up screens.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilelink.engine.gameplay import GamePlay, SelectionKind
from tilelink.engine.gamestate import GamePhase
from tilelink.models.board import Coordinate
from tilelink.models.difficulty import DIFFICULTIES, Difficulty
from tilelink.models.theme import PRESET_THEMES
from tilelink.frontend.cli.input_handler import get_key, get_key_timeout

logger = logging.getLogger(__name__)

console = Console()

# How long a matched pair stays on screen before it is cleared.
CLEAR_DELAY = 0.3

# Menu key for symbols passed on the command line.
CUSTOM_THEME = "custom"

_MOVES = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}"


def _path_cells(path: Sequence[Coordinate] | None) -> set[Coordinate]:
    """Every cell covered by the polyline through *path*'s vertices."""
    cells: set[Coordinate] = set()
    if not path:
        return cells
    for a, b in zip(path, path[1:]):
        if a.x == b.x:
            step = 1 if b.y >= a.y else -1
            cells.update(Coordinate(a.x, y) for y in range(a.y, b.y + step, step))
        else:
            step = 1 if b.x >= a.x else -1
            cells.update(Coordinate(x, a.y) for x in range(a.x, b.x + step, step))
    return cells


# -- board rendering ----------------------------------------------------------


def _render_board(game: GamePlay, cursor: Coordinate | None) -> Table:
    """Return a Rich Table of the padded grid."""
    board = game.board
    on_path = _path_cells(game.last_path)
    hint = set(game.hint_pair or ())

    table = Table(
        show_header=False,
        show_edge=False,
        box=None,
        padding=(0, 0),
    )
    for _ in range(board.grid_width):
        table.add_column(width=4, justify="center")

    for y in range(board.grid_height):
        cells: list[Text] = []
        for x in range(board.grid_width):
            coord = Coordinate(x, y)
            tile = board.get_tile(coord)
            if tile is None:
                cell = Text(" • " if coord in on_path else " · ",
                            style="bold magenta" if coord in on_path else "dim")
            elif tile.matched:
                cell = Text(f" {tile.symbol}", style="strike on dark_red")
            elif coord == game.selected:
                cell = Text(f" {tile.symbol}", style="on blue")
            elif coord in hint:
                cell = Text(f" {tile.symbol}", style="on yellow")
            else:
                cell = Text(f" {tile.symbol}", style="on grey23")
            if coord == cursor:
                cell.stylize("reverse")
            cells.append(cell)
        table.add_row(*cells)

    return table


# -- menu screen --------------------------------------------------------------


def _draw_menu(difficulty: Difficulty, theme_key: str, custom: bool) -> None:
    console.clear()

    levels = Text()
    for i, level in enumerate(Difficulty):
        if i:
            levels.append("  ")
        label = f" {DIFFICULTIES[level].label} "
        if level is difficulty:
            levels.append(label, style="bold green on #313244")
        else:
            levels.append(label, style="dim")

    theme = Text()
    if custom:
        theme.append("  Custom symbols", style="bold magenta")
    else:
        preset = PRESET_THEMES[theme_key]
        theme.append(f"  {preset.name}  ", style="bold cyan")
        theme.append(" ".join(preset.symbols[:8]))

    nav = Text("  ← →  difficulty    ↑ ↓  theme", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(levels),
        Align.center(theme),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]T I L E   L I N K[/bold]",
        subtitle="[dim]connect pairs with at most two turns[/dim]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Score: ", style="dim")
    stats.append(str(int(game.state.score)), style="bold yellow")
    stats.append("    Time: ", style="dim")
    left = game.state.time_left
    stats.append(_format_time(left), style="bold red" if left < 30 else "bold cyan")
    stats.append("    Tiles: ", style="dim")
    stats.append(str(game.board.resolved().tile_count), style="bold yellow")
    return stats


def _draw_game(game: GamePlay, cursor: Coordinate, status: str = "") -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  pick   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("X", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  menu", style="dim")

    title = "Tile Link"
    if game.difficulty is not None:
        title = f"Tile Link  {DIFFICULTIES[game.difficulty].label}"

    panel = Panel(
        Align.center(_render_board(game, cursor)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_result(game: GamePlay) -> None:
    console.clear()

    won = game.state.phase is GamePhase.WON
    banner = Text()
    if won:
        banner.append("\n  ★ ", style="bold yellow")
        banner.append("BOARD CLEARED!", style="bold green")
        banner.append(" ★\n", style="bold yellow")
    else:
        banner.append("\n  TIME'S UP!\n", style="bold red")

    final = Text()
    final.append("  Final score: ", style="dim")
    final.append(str(int(game.state.score)), style="bold yellow")
    final.append("    Matches: ", style="dim")
    final.append(str(game.state.matches), style="bold yellow")
    final.append("    Hints: ", style="dim")
    final.append(str(game.state.hints_used), style="bold yellow")

    panel = Panel(
        Group(Align.center(banner), Align.center(final)),
        title="[bold]Tile Link[/bold]",
        border_style="bold green" if won else "bold red",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _apply_key(game: GamePlay, key: str, cursor: Coordinate) -> tuple[Coordinate, str]:
    """Apply one action; returns the new cursor and a status message."""
    board = game.board

    if key in _MOVES:
        dx, dy = _MOVES[key]
        x = min(board.width, max(1, cursor.x + dx))
        y = min(board.height, max(1, cursor.y + dy))
        return Coordinate(x, y), ""

    if key == "select":
        result = game.select(cursor)
        if result.kind is SelectionKind.MATCHED:
            _draw_game(game, cursor, f"[green]+{int(result.points)}[/green]")
            sys.stdout.flush()
            time.sleep(CLEAR_DELAY)
            game.clear_matched()
            return cursor, ""
        if result.kind is SelectionKind.MISMATCH:
            return cursor, "[red]Those two cannot be linked.[/red]"
        return cursor, ""

    if key == "hint":
        if game.hint() is None:
            return cursor, "[yellow]No hint available.[/yellow]"
        return cursor, "[yellow]Hint shown (-50).[/yellow]"

    if key == "shuffle":
        game.shuffle()
        return cursor, "[cyan]Shuffled![/cyan]"

    return cursor, ""


def _play_game(difficulty: Difficulty, symbols: Sequence[str]) -> None:
    while True:
        game = GamePlay(difficulty, symbols)
        cursor = Coordinate(1, 1)
        status = ""

        while not game.is_over:
            _draw_game(game, cursor, status)
            status = ""

            # Short timeout so the countdown keeps moving.
            while True:
                key = get_key_timeout(0.5)
                game.tick()
                if key is not None or game.is_over:
                    break
                _draw_game(game, cursor)

            if key == "quit":
                game.quit_to_menu()
                return
            if key == "restart":
                game = GamePlay(difficulty, symbols)
                cursor = Coordinate(1, 1)
                continue
            if key is not None and not game.is_over:
                shuffles_before = game.reshuffles
                cursor, status = _apply_key(game, key, cursor)
                if game.reshuffles > shuffles_before:
                    status = "[cyan]No moves left, tiles reshuffled.[/cyan]"

        _draw_result(game)
        while True:
            key = get_key()
            if key == "restart":
                break
            if key == "quit":
                return


# -- menu loop ----------------------------------------------------------------


def _theme_options(has_custom: bool) -> list[str]:
    """Theme keys the menu cycles through; the custom set comes last."""
    options = list(PRESET_THEMES)
    if has_custom:
        options.append(CUSTOM_THEME)
    return options


def _menu_loop(
    difficulty: Difficulty, theme_key: str, symbols: Sequence[str] | None
) -> None:
    options = _theme_options(symbols is not None)
    if symbols is not None:
        theme_key = CUSTOM_THEME

    while True:
        _draw_menu(difficulty, theme_key, theme_key == CUSTOM_THEME)
        key = get_key()
        levels = list(Difficulty)

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            difficulty = levels[max(0, levels.index(difficulty) - 1)]
        elif key == "right":
            difficulty = levels[min(len(levels) - 1, levels.index(difficulty) + 1)]
        elif key in ("up", "down"):
            step = -1 if key == "up" else 1
            theme_key = options[(options.index(theme_key) + step) % len(options)]
        elif key == "select":
            if theme_key == CUSTOM_THEME and symbols is not None:
                chosen = symbols
            else:
                chosen = PRESET_THEMES[theme_key].symbols
            logger.info("Starting %s game", difficulty)
            _play_game(difficulty, chosen)


# -- public entry point -------------------------------------------------------


def run(
    difficulty: Difficulty,
    theme_key: str,
    symbols: Sequence[str] | None = None,
) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(difficulty, theme_key, symbols)
