"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Iterable, List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameSession, generate


# ============================================================================
# Deterministic Mine Placement
# ============================================================================

class FixedMines(random.Random):
    """Random source that places mines at chosen positions."""

    def __init__(self, cols: int, positions: Iterable[Tuple[int, int]]) -> None:
        super().__init__(0)
        self.indices = [row * cols + col for row, col in positions]

    def sample(self, population, k, **kwargs) -> List[int]:
        assert k == len(self.indices)
        return list(self.indices)


def board_with_mines(
    rows: int, cols: int, positions: List[Tuple[int, int]]
) -> Board:
    """Generate a board with mines at exactly the given positions."""
    return generate(rows, cols, len(positions), FixedMines(cols, positions))


def session_with_mines(
    rows: int, cols: int, positions: List[Tuple[int, int]]
) -> GameSession:
    """Start a session whose first board has mines at the given positions."""
    config = BoardConfig(rows, cols, len(positions))
    return GameSession(config, rng=FixedMines(cols, positions))


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return generate(9, 9, 10, random.Random(42))


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return board_with_mines(3, 3, [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return generate(5, 5, 0)


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a column of mines splitting it in two.

        . . * . .
        . . * . .
        . . * . .
        . . * . .
        . . * . .
    """
    return board_with_mines(5, 5, [(row, 2) for row in range(5)])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def default_session() -> GameSession:
    """Seeded 9x9 session with 10 mines."""
    return GameSession(BoardConfig(9, 9, 10), rng=random.Random(7))


@pytest.fixture
def corner_mine_session() -> GameSession:
    """3x3 session with a single mine at (0, 0)."""
    return session_with_mines(3, 3, [(0, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
