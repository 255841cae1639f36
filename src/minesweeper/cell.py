"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their position,
visual state (hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Board view codes; revealed safe cells show their count (0-8)
HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    A single ``state`` field holds the visual state, so a cell is never
    revealed and flagged at the same time.

    Attributes:
        row: Row index of the cell on its board.
        col: Column index of the cell on its board.
        is_mine: Whether this cell contains a mine.
        neighbor_mine_count: Mines among the 8 surrounding cells (0-8).
            Only meaningful when ``is_mine`` is False.
        state: Current visual state (hidden, revealed, or flagged).
    """

    row: int = 0
    col: int = 0
    is_mine: bool = False
    neighbor_mine_count: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Open a hidden cell. Flagged cells stay shut until unflagged.

        Returns:
            True if the cell was opened by this call.
        """
        opened = self.state == CellState.HIDDEN
        if opened:
            self.state = CellState.REVEALED
        return opened

    def toggle_flag(self) -> bool:
        """
        Switch between hidden and flagged. Opened cells cannot carry a flag.

        Returns:
            True if the flag was placed or removed.
        """
        flip = {
            CellState.HIDDEN: CellState.FLAGGED,
            CellState.FLAGGED: CellState.HIDDEN,
        }
        if self.state not in flip:
            return False
        self.state = flip[self.state]
        return True

    @property
    def is_hidden(self) -> bool:
        """Unopened and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    def display_code(self) -> int:
        """
        Integer shown for this cell in the board view.

        ``HIDDEN_CODE`` and ``FLAGGED_CODE`` for closed cells, ``MINE_CODE``
        for an opened mine, otherwise the neighbor mine count.
        """
        if self.state == CellState.REVEALED:
            return MINE_CODE if self.is_mine else self.neighbor_mine_count
        return FLAGGED_CODE if self.is_flagged else HIDDEN_CODE
