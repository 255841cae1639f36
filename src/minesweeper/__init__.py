"""
Minesweeper rule engine.

Provides board generation, cascading reveal, win detection and the game
session state machine, plus a Gymnasium environment over a session.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, BEGINNER, INTERMEDIATE, EXPERT, render_text
from .engine import generate, reveal, check_win, expose_mines
from .session import GameSession, GamePhase
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "render_text",
    "generate",
    "reveal",
    "check_win",
    "expose_mines",
    "GameSession",
    "GamePhase",
    "MinesweeperEnv",
]
