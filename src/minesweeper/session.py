"""
Game session for Minesweeper.

Owns the current board, flag budget, elapsed time and game phase, and
applies player actions to the board through the engine.
"""
import logging
import random
from enum import Enum, auto
from typing import Optional

from . import engine
from .board import Board, BoardConfig, BEGINNER


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GamePhase(Enum):
    """Possible phases of a game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    State machine for a single game of Minesweeper.

    The game starts in ``PLAYING`` and ends in ``WON`` or ``LOST``. Once a
    game has ended, reveal and flag actions are ignored until ``reset``.
    Actions never raise during normal play; invalid actions return False.

    The session does not schedule its own timer. The host is expected to
    call ``tick`` once per second while ``is_playing`` is True.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Random source used for every board this session
                generates.
        """
        self.rng = rng if rng is not None else random.Random()
        self._config = config or BEGINNER
        self._board = engine.generate(
            self._config.rows, self._config.cols, self._config.mine_count, self.rng
        )
        self._phase = GamePhase.PLAYING
        self._flags_remaining = self._config.mine_count
        self._elapsed_seconds = 0

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell.

        Hitting a mine loses the game and exposes all mines. Revealing the
        last safe cell wins it.

        Returns:
            True if the action changed the game, False if it was ignored.
        """
        if self._phase != GamePhase.PLAYING:
            return False
        cell = self._board.get_cell(row, col)
        if cell is None or cell.is_flagged or cell.is_revealed:
            return False

        if cell.is_mine:
            self._board = engine.expose_mines(self._board)
            self._set_phase(GamePhase.LOST)
            return True

        self._board = engine.reveal(self._board, row, col)
        if engine.check_win(self._board):
            self._set_phase(GamePhase.WON)
        return True

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Place or remove a flag on a hidden cell.

        A flag can only be placed while flags remain.

        Returns:
            True if the flag was toggled, False otherwise.
        """
        if self._phase != GamePhase.PLAYING:
            return False
        cell = self._board.get_cell(row, col)
        if cell is None or cell.is_revealed:
            return False
        if not cell.is_flagged and self._flags_remaining <= 0:
            return False

        new_board = self._board.copy()
        new_board.grid[row][col].toggle_flag()
        self._board = new_board
        if cell.is_flagged:
            self._flags_remaining += 1
        else:
            self._flags_remaining -= 1
        return True

    def tick(self) -> None:
        """Advance the game clock by one second while playing."""
        if self._phase == GamePhase.PLAYING:
            self._elapsed_seconds += 1

    def reset(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        mine_count: Optional[int] = None,
    ) -> None:
        """
        Start a new game from any phase.

        Omitted arguments keep the current configuration.

        Raises:
            ValueError: If the new configuration is invalid. The current
                game is left as it was.
        """
        config = BoardConfig(
            self._config.rows if rows is None else rows,
            self._config.cols if cols is None else cols,
            self._config.mine_count if mine_count is None else mine_count,
        )
        self._board = engine.generate(config.rows, config.cols, config.mine_count, self.rng)
        self._config = config
        self._phase = GamePhase.PLAYING
        self._flags_remaining = config.mine_count
        self._elapsed_seconds = 0
        logger.debug("Game reset: %dx%d with %d mines", config.rows, config.cols, config.mine_count)

    def _set_phase(self, phase: GamePhase) -> None:
        logger.info("Game %s after %d seconds", phase.name.lower(), self._elapsed_seconds)
        self._phase = phase

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        """Current board, for rendering."""
        return self._board

    @property
    def config(self) -> BoardConfig:
        return self._config

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def flags_remaining(self) -> int:
        return self._flags_remaining

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._phase == GamePhase.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._phase == GamePhase.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._phase == GamePhase.LOST
