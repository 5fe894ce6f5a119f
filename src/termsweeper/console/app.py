"""
The interactive game loop.

Single-threaded: draw a frame, block for one key, apply it, repeat until
the player quits.
"""
from typing import Callable, Optional

from rich.console import Console
from rich.live import Live

from ..engine.game import Game
from .keymap import key_to_action, read_key
from .render import render_game


GOODBYE = "Thanks for playing!"


def play(
    game: Game,
    console: Optional[Console] = None,
    read: Callable[[], str] = read_key,
) -> None:
    """
    Play until the player quits.

    Args:
        game: Session to drive.
        console: Where frames are drawn.
        read: Blocking source of decoded key names.
    """
    with Live(
        render_game(game.view()),
        console=console,
        auto_refresh=False,
        screen=True,
    ) as live:
        while game.running:
            action = key_to_action(read())
            if action is None:
                continue
            if game.handle(action):
                live.update(render_game(game.view()), refresh=True)


def say_goodbye(console: Optional[Console] = None) -> None:
    (console or Console()).print(GOODBYE)
