"""
Board module for Minesweeper game.

Holds the board configuration and the rectangular grid of cells, with
the low-level grid utilities (bounds, neighbors, copying, observation)
the engine and the game session are built on.
"""
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState, FLAGGED_CODE, HIDDEN_CODE, MINE_CODE


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols
        if self.mine_count > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.mine_count


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    A plain grid of cells. Boards are treated as values: the engine never
    changes a board it was given, it returns a modified copy instead.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Create an all-hidden, mine-free grid if none was supplied."""
        if not self.grid:
            self.grid = [
                [Cell(row=row, col=col) for col in range(self.config.cols)]
                for row in range(self.config.rows)
            ]

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up to 8 in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Cell Access
    # ========================================================================

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self.grid[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self.grid:
            yield from row

    def copy(self) -> "Board":
        """Return a deep copy whose cells can be changed independently."""
        grid = [[replace(cell) for cell in row] for row in self.grid]
        return Board(self.config, grid)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def mine_count(self) -> int:
        """Number of mine cells actually on the grid."""
        return sum(1 for cell in self.cells() if cell.is_mine)

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(1 for cell in self.cells() if cell.is_revealed)

    @property
    def flagged_count(self) -> int:
        """Number of flagged cells."""
        return sum(1 for cell in self.cells() if cell.is_flagged)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.display_code()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        return [
            (cell.row, cell.col)
            for cell in self.cells()
            if cell.state == CellState.HIDDEN
        ]


# ============================================================================
# Text Rendering
# ============================================================================

_SYMBOLS = {HIDDEN_CODE: ".", FLAGGED_CODE: "F", MINE_CODE: "*", 0: " "}


def render_text(board: Board, show_coordinates: bool = False) -> str:
    """
    Render board as ASCII string.

    Hidden cells are ``.``, flags ``F``, revealed mines ``*``, empty
    revealed cells a blank and numbered cells their count.

    Args:
        board: Board to render.
        show_coordinates: Prefix rows and add a header with indices.

    Returns:
        Multi-line string, one line per row.
    """
    lines = []
    if show_coordinates:
        header = "    " + " ".join(str(col % 10) for col in range(board.cols))
        lines.append(header.rstrip())

    for row in board.grid:
        symbols = []
        for cell in row:
            code = cell.display_code()
            symbols.append(_SYMBOLS.get(code, str(code)))
        line = " ".join(symbols)
        if show_coordinates:
            line = f"{row[0].row:>3} {line}"
        lines.append(line)

    return "\n".join(lines)
