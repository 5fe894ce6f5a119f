"""
Exceptions raised by the Minesweeper engine.

Only board construction can fail. Every play-time operation is total:
out-of-range input is clamped or ignored instead of raised.
"""


class SweeperError(Exception):
    """Base class for all termsweeper errors."""


class ConfigError(SweeperError, ValueError):
    """Invalid board dimensions, mine count or mine layout."""
