"""
Difficulty presets.

The three classic board sizes, each a fixed (width, height, mines)
triple. Custom sizes go through BoardConfig directly.
"""
from enum import Enum
from typing import Union

from .board import BoardConfig


class Difficulty(Enum):
    """Fixed board presets, in menu order."""

    BEGINNER = (9, 9, 10)
    INTERMEDIATE = (16, 16, 40)
    ADVANCED = (24, 24, 99)

    @property
    def width(self) -> int:
        return self.value[0]

    @property
    def height(self) -> int:
        return self.value[1]

    @property
    def mine_count(self) -> int:
        return self.value[2]

    @property
    def config(self) -> BoardConfig:
        """Board configuration for this preset."""
        return BoardConfig(*self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def level(self) -> int:
        """1-based position in the level menu."""
        return list(Difficulty).index(self) + 1

    def describe(self) -> str:
        """Menu line, e.g. ``Beginner - 9 * 9 Board and 10 Mines``."""
        return (
            f"{self.label} - {self.width} * {self.height} Board "
            f"and {self.mine_count} Mines"
        )

    @classmethod
    def from_level(cls, level: int) -> "Difficulty":
        """Preset for a 1-based menu level. Unknown levels mean Beginner."""
        presets = list(cls)
        if 1 <= level <= len(presets):
            return presets[level - 1]
        return cls.BEGINNER

    @classmethod
    def parse(cls, value: Union[str, int]) -> "Difficulty":
        """
        Resolve a command-line level: a number (1-3) or a preset name.

        Anything unrecognised falls back to Beginner.
        """
        text = str(value).strip()
        if text.isdigit():
            return cls.from_level(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            return cls.BEGINNER
