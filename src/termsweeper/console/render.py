"""
Frame rendering with rich.

Turns a read-only GameView into a renderable; never touches the engine.
"""
from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..engine.cell import HIDDEN_CODE, MARKED_CODE, MINE_CODE
from ..engine.game import GameStatus, GameView


# ============================================================================
# Glyphs and Colors
# ============================================================================

HIDDEN_GLYPH = "X"
MARKED_GLYPH = "?"
MINE_GLYPH = "!"
EMPTY_GLYPH = " "

NUMBER_STYLES = [
    "default",  # 0
    "blue",  # 1
    "green",  # 2
    "red",  # 3
    "cyan",  # 4
    "yellow3",  # 5
    "magenta",  # 6
    "purple",  # 7
    "red",  # 8
]

CURSOR_STYLE = "reverse"

HELP_LINE = "arrows/wasd move  enter/space reveal  m mark  r restart  q quit"
WIN_LINE = "[green]You win! Press r to play again or q to quit."
LOSE_LINE = "[red]Boom! You hit a mine. Press r to play again or q to quit."


def cell_text(code: int, selected: bool = False) -> Text:
    """Glyph for one observation code."""
    if code == HIDDEN_CODE:
        text = Text(HIDDEN_GLYPH, style="dim")
    elif code == MARKED_CODE:
        text = Text(MARKED_GLYPH, style="bold yellow")
    elif code == MINE_CODE:
        text = Text(MINE_GLYPH, style="bold red")
    elif code == 0:
        text = Text(EMPTY_GLYPH)
    else:
        text = Text(str(code), style=NUMBER_STYLES[code])
    if selected:
        text.stylize(CURSOR_STYLE)
    return text


def status_line(view: GameView) -> str:
    if view.status == GameStatus.WON:
        return WIN_LINE
    if view.status == GameStatus.LOST:
        return LOSE_LINE
    return HELP_LINE


def board_table(view: GameView) -> Table:
    """Borderless grid, one column per board column."""
    table = Table(
        show_header=False,
        box=None,
        pad_edge=False,
        padding=(0, 1),
    )
    for _ in range(view.width):
        table.add_column(justify="center", no_wrap=True)
    cursor_row, cursor_col = view.cursor
    for row in range(view.height):
        table.add_row(
            *[
                cell_text(
                    int(view.cells[row, col]),
                    selected=(row, col) == (cursor_row, cursor_col),
                )
                for col in range(view.width)
            ]
        )
    return table


def render_game(view: GameView) -> Align:
    """
    Full frame, centered: a header naming the difficulty, the board in a
    panel whose subtitle counts the unmarked mines, and the status line.
    """
    header = Text(f"Minesweeper - {view.difficulty.label}", style="bold cyan")
    panel = Panel.fit(
        board_table(view),
        subtitle=f"{view.mines_remaining} mines",
    )
    footer = Text.from_markup(status_line(view))
    return Align.center(Group(header, panel, footer))
