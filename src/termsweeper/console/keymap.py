"""
Keyboard input for the terminal front end.

Reads single keypresses from a raw-mode TTY, decodes arrow-key escape
sequences and maps keys to game actions.
"""
import os
import select
import sys
import termios
import tty
from typing import Dict, Optional, TextIO

from ..engine.game import Action


# ============================================================================
# Key Names
# ============================================================================

ESCAPE = "\x1b"
CTRL_C = "\x03"

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
ENTER = "enter"
SPACE = "space"
INTERRUPT = "interrupt"

# Final byte of the CSI sequence sent by each arrow key
_ARROWS = {"A": UP, "B": DOWN, "C": RIGHT, "D": LEFT}

_SPECIAL = {
    "\r": ENTER,
    "\n": ENTER,
    " ": SPACE,
    CTRL_C: INTERRUPT,
}

# Seconds to wait for the rest of an escape sequence
ESCAPE_TIMEOUT = 0.05


KEY_BINDINGS: Dict[str, Action] = {
    "q": Action.QUIT,
    "Q": Action.QUIT,
    INTERRUPT: Action.QUIT,
    "r": Action.RESTART,
    "R": Action.RESTART,
    UP: Action.MOVE_UP,
    "w": Action.MOVE_UP,
    DOWN: Action.MOVE_DOWN,
    "s": Action.MOVE_DOWN,
    LEFT: Action.MOVE_LEFT,
    "a": Action.MOVE_LEFT,
    RIGHT: Action.MOVE_RIGHT,
    "d": Action.MOVE_RIGHT,
    ENTER: Action.REVEAL,
    SPACE: Action.REVEAL,
    "m": Action.MARK,
    "?": Action.MARK,
}


def decode_key(chars: str) -> str:
    """
    Turn the raw characters of one keypress into a key name.

    Arrow keys (``ESC [ A`` .. ``ESC [ D``, or the ``ESC O`` variant)
    become ``up``/``down``/``right``/``left``; Enter, Space and Ctrl-C get
    names; anything else is returned unchanged.
    """
    if chars.startswith(ESCAPE):
        if len(chars) == 3 and chars[1] in "[O":
            return _ARROWS.get(chars[2], chars)
        return chars
    return _SPECIAL.get(chars, chars)


def key_to_action(key: str) -> Optional[Action]:
    """Action bound to a decoded key, or None for unbound keys."""
    return KEY_BINDINGS.get(key)


# ============================================================================
# TTY Reading
# ============================================================================

class KeyReader:
    """
    Blocking key source for a whole session.

    While entered, the terminal stays in cbreak mode (no echo, no line
    buffering, output processing left on), so keys typed during a redraw
    are neither echoed nor lost. Calling the reader returns one decoded key.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved: Optional[list] = None

    def __enter__(self) -> "KeyReader":
        self._saved = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    def __call__(self) -> str:
        return _read_key_chars(self.fd)


def read_key(stream: Optional[TextIO] = None) -> str:
    """
    Block until one key is pressed and return its decoded name.

    The terminal is put into raw mode only for the duration of the read.
    """
    fd = (stream or sys.stdin).fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return _read_key_chars(fd)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def _read_key_chars(fd: int) -> str:
    """Read one keypress, including the tail of an escape sequence."""
    chars = _read_char(fd)
    if chars == ESCAPE:
        while len(chars) < 3 and _pending(fd):
            chars += _read_char(fd)
    return decode_key(chars)


def _read_char(fd: int) -> str:
    return os.read(fd, 1).decode("utf-8", errors="ignore")


def _pending(fd: int) -> bool:
    ready, _, _ = select.select([fd], [], [], ESCAPE_TIMEOUT)
    return bool(ready)
