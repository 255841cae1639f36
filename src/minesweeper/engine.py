"""
Board engine for Minesweeper.

Stateless functions that create and transform boards: mine placement,
neighbor counting, cascading reveal and the win check. Functions never
change the board they receive; when something changes they return a new
board and otherwise hand back the input unchanged.
"""
import logging
import random
from typing import List, Optional, Tuple

from .board import Board, BoardConfig


logger = logging.getLogger(__name__)


# ============================================================================
# Generation
# ============================================================================

def generate(
    rows: int,
    cols: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Create a new board with randomly placed mines.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Mines to place, between 0 and rows * cols.
        rng: Random source for mine placement. A fresh unseeded
            generator is used when omitted.

    Returns:
        Fully initialized board with neighbor counts computed.

    Raises:
        ValueError: If the dimensions or mine count are invalid.
    """
    config = BoardConfig(rows, cols, mine_count)
    if rng is None:
        rng = random.Random()
    logger.debug("Creating new board: rows=%d cols=%d mines=%d", rows, cols, mine_count)

    board = Board(config)
    _place_mines(board, rng)
    _calculate_neighbor_counts(board)
    return board


def _place_mines(board: Board, rng: random.Random) -> None:
    """Mark ``mine_count`` distinct cells as mines."""
    for index in rng.sample(range(board.config.total_cells), board.config.mine_count):
        row, col = divmod(index, board.cols)
        board.grid[row][col].is_mine = True


def _calculate_neighbor_counts(board: Board) -> None:
    """Calculate neighbor mine counts for all non-mine cells."""
    for cell in board.cells():
        if not cell.is_mine:
            cell.neighbor_mine_count = _count_neighbor_mines(board, cell.row, cell.col)


def _count_neighbor_mines(board: Board, row: int, col: int) -> int:
    count = 0
    for neighbor_row, neighbor_col in board.neighbors(row, col):
        if board.grid[neighbor_row][neighbor_col].is_mine:
            count += 1
    return count


# ============================================================================
# Reveal
# ============================================================================

def _can_reveal(board: Board, row: int, col: int) -> bool:
    """Check if a cell exists and is hidden (not revealed, not flagged)."""
    cell = board.get_cell(row, col)
    return cell is not None and cell.is_hidden


def reveal(board: Board, row: int, col: int) -> Board:
    """
    Reveal a cell, cascading through empty regions.

    Out-of-bounds, already revealed and flagged cells are left alone and
    the input board is returned as is. Revealing a cell with no
    neighboring mines also reveals its neighbors, repeatedly, so a whole
    empty region opens together with its numbered border.

    Mines are revealed like any other cell; deciding that the game is
    lost is up to the caller.

    Args:
        board: Board to reveal on. Not modified.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        New board with the revealed cells, or ``board`` for a no-op.
    """
    if not _can_reveal(board, row, col):
        return board

    logger.debug("Revealing cell: row=%d col=%d", row, col)
    new_board = board.copy()
    pending: List[Tuple[int, int]] = [(row, col)]
    revealed = 0

    while pending:
        current_row, current_col = pending.pop()
        cell = new_board.grid[current_row][current_col]
        if not cell.reveal():
            continue
        revealed += 1

        if cell.is_mine or cell.neighbor_mine_count > 0:
            continue
        for neighbor_row, neighbor_col in new_board.neighbors(current_row, current_col):
            if _can_reveal(new_board, neighbor_row, neighbor_col):
                pending.append((neighbor_row, neighbor_col))

    if revealed > 1:
        logger.debug("Cascade from (%d, %d) revealed %d cells", row, col, revealed)
    return new_board


def expose_mines(board: Board) -> Board:
    """
    Reveal every mine on the board, e.g. for the end-of-game view.

    Flags placed on mines are replaced by the revealed mine. Safe cells
    are left untouched.

    Returns:
        New board with all mines revealed.
    """
    new_board = board.copy()
    for cell in new_board.cells():
        if cell.is_mine and not cell.is_revealed:
            if cell.is_flagged:
                cell.toggle_flag()
            cell.reveal()
    return new_board


# ============================================================================
# Win Check
# ============================================================================

def check_win(board: Board) -> bool:
    """Check if every non-mine cell is revealed. Flags are ignored."""
    return all(cell.is_revealed for cell in board.cells() if not cell.is_mine)
