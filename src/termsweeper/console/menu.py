"""
Interactive level selection shown before play when no level was given.
"""
from typing import Callable, Optional

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ..engine.difficulty import Difficulty
from ..engine.game import Action
from .keymap import key_to_action, read_key


WELCOME = "Welcome to Minesweeper"
MENU_HELP = "up/down choose  enter select  q quit"


class LevelMenu:
    """
    Selection state of the level menu.

    Up and Down move the highlight (clamped to the available levels),
    Reveal picks the highlighted level and Quit backs out.
    """

    def __init__(self, level: int = 1) -> None:
        self.levels = list(Difficulty)
        self.level = min(max(level, 1), len(self.levels))
        self.chosen: Optional[Difficulty] = None
        self.cancelled = False

    @property
    def done(self) -> bool:
        return self.cancelled or self.chosen is not None

    @property
    def selected(self) -> Difficulty:
        return Difficulty.from_level(self.level)

    def handle(self, action: Optional[Action]) -> bool:
        """Apply one action; returns True once the menu is finished."""
        if action == Action.QUIT:
            self.cancelled = True
        elif action == Action.REVEAL:
            self.chosen = self.selected
        elif action == Action.MOVE_UP:
            self.level = max(self.level - 1, 1)
        elif action == Action.MOVE_DOWN:
            self.level = min(self.level + 1, len(self.levels))
        return self.done

    def render(self) -> Panel:
        lines = [Text(WELCOME, style="bold cyan"), Text("")]
        for difficulty in self.levels:
            line = Text(f"{difficulty.level}. {difficulty.describe()}")
            if difficulty.level == self.level:
                line.stylize("bold reverse")
            lines.append(line)
        return Panel.fit(Group(*lines), subtitle=MENU_HELP)


def choose_level(
    console: Optional[Console] = None,
    read: Callable[[], str] = read_key,
) -> Optional[Difficulty]:
    """
    Run the level menu until a level is chosen.

    Returns:
        The chosen difficulty, or None if the player quit.
    """
    menu = LevelMenu()
    with Live(
        menu.render(), console=console, auto_refresh=False, screen=True
    ) as live:
        while not menu.handle(key_to_action(read())):
            live.update(menu.render(), refresh=True)
    return menu.chosen
