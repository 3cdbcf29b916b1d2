"""Rich terminal frontend — tables, colours, and panels.

Arrow keys / WASD slide a tile into the blank; IJKL move a cursor and
Space/Enter clicks the slot under it (adjacent tiles slide, others are
selected).
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from picslide.engine.gameplay import GameSession
from picslide.engine.gamestate import PuzzleState
from picslide.frontend.cli.input_handler import get_key_timeout
from picslide.models.grid import Direction, neighbor
from picslide.models.history import CompletedGame, HistoryStore

console = Console()

# The cursor walks toward the arrow, i.e. opposite to ``neighbor``'s source.
_CURSOR_KEYS: dict[str, Direction] = {
    "cursor-up": Direction.DOWN,
    "cursor-down": Direction.UP,
    "cursor-left": Direction.RIGHT,
    "cursor-right": Direction.LEFT,
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def tile_labels(grid_size: int) -> list[str]:
    """Content for a picture-less puzzle: the 1-based tile numbers."""
    return [str(i) for i in range(1, grid_size * grid_size)]


# -- rendering ----------------------------------------------------------------


def render_board(puzzle: PuzzleState, cursor: int | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    size = puzzle.grid_size
    width = len(str(size * size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=width + 1, justify="center")

    cells: list[str] = []
    for position in range(size * size):
        tile = puzzle.tile_at(position)
        if tile.is_empty:
            cell = "·"
            style = "dim"
        else:
            cell = f"{tile.content or tile.id + 1:>{width}}"
            style = "bold green" if tile.is_correct else "bold white"
        if position == puzzle.selected_position:
            style = "bold black on yellow"
        elif position == cursor:
            style += " reverse"
        cells.append(f"[{style}]{cell}[/]")

    for r in range(size):
        table.add_row(*cells[r * size : (r + 1) * size])
    return table


def render_history(entries: list[CompletedGame]) -> Table:
    table = Table(
        title="Completed games",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Grid", justify="center")
    table.add_column("Moves", justify="right", style="yellow")
    table.add_column("Time", justify="right", style="yellow")
    table.add_column("Finished", style="dim")
    for i, e in enumerate(entries, 1):
        table.add_row(
            str(i),
            f"{e.grid}×{e.grid}",
            str(e.moves),
            _format_time(e.time),
            e.finished_at,
        )
    return table


def _draw_game(session: GameSession, cursor: int, status: str = "") -> None:
    console.clear()

    size = session.grid_size
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(session.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(session.timer.elapsed), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("IJKL", style="bold cyan")
    controls.append(" + ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  click   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  new   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    won = session.is_won
    panel = Panel(
        Align.center(render_board(session.puzzle, None if won else cursor)),
        title=f"[bold cyan]Picture Slide  {size}×{size}[/bold cyan]",
        border_style="bold green" if won else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play(session: GameSession) -> None:
    cursor = session.puzzle.blank_position
    status = ""

    while True:
        if session.is_won and session.completed is not None:
            status = (
                f"[bold green]★ Solved in {session.completed.moves} moves, "
                f"{_format_time(session.completed.time)}! ★[/bold green]"
                "  [dim]N: new game[/dim]"
            )
        _draw_game(session, cursor, status)
        status = ""

        # Short timeout so the clock keeps ticking.
        key = get_key_timeout(0.5)
        if key is None:
            continue

        if key == "quit":
            session.save()
            return
        if key == "new":
            session.new_game()
            cursor = session.puzzle.blank_position
        elif key == "restart":
            session.restart()
            status = "[yellow]Restarted.[/yellow]"
        elif session.is_won:
            continue
        elif key in _CURSOR_KEYS:
            step = neighbor(cursor, _CURSOR_KEYS[key], session.grid_size)
            cursor = cursor if step is None else step
        elif key == "click":
            session.click(cursor)
        elif key.startswith("Arrow"):
            session.press(key)
            cursor = session.puzzle.blank_position


# -- public entry point -------------------------------------------------------


def show_history(store: HistoryStore) -> None:
    entries = store.history()
    if not entries:
        console.print(Text("  No completed games yet.", style="dim"))
        return
    console.print(Align.center(render_history(entries)))


def run(session: GameSession) -> None:
    """Launch the Rich frontend on *session*."""
    _play(session)
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
