"""
Move validator for TicTacToe.
Decides whether a placement or a history jump can be accepted.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe intents.

    Rules:
    1. Cell index must be 0-8
    2. Can only place on empty cells
    3. Game must not be won already
    4. A jump must land on an existing history step

    The validator never raises; callers decide what to do with a
    rejected intent.
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a placement.

        Args:
            board: Board the mark would be placed on.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not (0 <= index < GameConfig.CELL_COUNT):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        if self.win_checker.check_winner(board) is not None:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index]}"
            )

        return ValidationResult(is_valid=True)

    def validate_step(self, step: int, history_length: int) -> ValidationResult:
        """
        Validate a jump to a history step.

        Args:
            step: Step to jump to.
            history_length: Number of snapshots in the history.
        """
        if not (0 <= step < history_length):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid step {step}. Must be 0-{history_length - 1}."
            )
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all cells the player to move may place on.

        Returns:
            Empty cell indices, or an empty list once the game is won.
        """
        if self.win_checker.check_winner(board) is not None:
            return []
        return [index for index, cell in enumerate(board) if cell is None]
