"""
Terminal front end.

Key decoding, rich rendering, the level menu and the play loop.
"""
from .keymap import KEY_BINDINGS, KeyReader, decode_key, key_to_action, read_key
from .render import render_game
from .menu import LevelMenu, choose_level
from .app import GOODBYE, play, say_goodbye

__all__ = [
    "KEY_BINDINGS",
    "KeyReader",
    "decode_key",
    "key_to_action",
    "read_key",
    "render_game",
    "LevelMenu",
    "choose_level",
    "GOODBYE",
    "play",
    "say_goodbye",
]
