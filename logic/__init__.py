"""
Logic module for TicTacToe.
Handles game state, rules, and the move history.
"""

from .config import GameConfig
from .game_state import Mark, Snapshot, GameStatus, Outcome
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, WinResult
from .game_engine import GameEngine

__version__ = "1.0.0"
