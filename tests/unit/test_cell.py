"""
Unit tests for Cell class.

Tests cell state management, reveal/mark behavior, and observation codes.
"""
import pytest
from termsweeper.engine import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden and unmarked."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_marked is False
        assert cell.is_revealed is False

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mine_count == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_twice_returns_false(self, hidden_cell: Cell) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_marked_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a marked cell."""
        hidden_cell.toggle_mark()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_marked is True


# ============================================================================
# Cell Mark Tests
# ============================================================================

class TestCellMark:
    """Test cell marking behavior."""

    def test_mark_hidden_cell(self, hidden_cell: Cell) -> None:
        """Marking a hidden cell should succeed."""
        assert hidden_cell.toggle_mark() is True
        assert hidden_cell.state == CellState.MARKED

    def test_mark_twice_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Toggling twice restores the unmarked state."""
        hidden_cell.toggle_mark()
        hidden_cell.toggle_mark()
        assert hidden_cell.is_hidden is True

    def test_mark_revealed_cell_is_noop(self, hidden_cell: Cell) -> None:
        """Cannot mark a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_mark() is False
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell display codes."""

    def test_hidden_cell_code(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_observation() == -1

    def test_marked_cell_code(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_mark()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_shows_count(self, count: int) -> None:
        """Revealed safe cell returns its adjacent mine count."""
        cell = Cell(adjacent_mine_count=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_code(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9

    def test_hidden_mine_looks_hidden(self, mine_cell: Cell) -> None:
        """A mine is indistinguishable until revealed."""
        assert mine_cell.to_observation() == -1

    def test_marked_mine_looks_marked(self, mine_cell: Cell) -> None:
        mine_cell.toggle_mark()
        assert mine_cell.to_observation() == -2

    def test_clear_keeps_visible_state(self) -> None:
        """Clearing drops the layout but not the mark."""
        cell = Cell(is_mine=True, adjacent_mine_count=3)
        cell.toggle_mark()
        cell.clear()
        assert (cell.is_mine, cell.adjacent_mine_count) == (False, 0)
        assert cell.is_marked is True
