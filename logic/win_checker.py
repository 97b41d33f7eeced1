"""
Win checker for TicTacToe.
Checks if a player has completed a line or if the game is a draw.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, Mark


@dataclass(frozen=True)
class WinResult:
    """The winning mark and the three cells that make up its line."""
    mark: Mark
    line: Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 equal marks in a row
    (horizontally, vertically, or diagonally).

    The checker holds no state, so one instance can be shared freely.
    """

    # All possible winning lines, in scan order
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_winner(self, board: Board) -> Optional[WinResult]:
        """
        Check if there's a winner.

        Lines are scanned rows first, then columns, then diagonals;
        the first complete line wins.

        Args:
            board: The 9 cells of the board.

        Returns:
            WinResult with the mark and line, or None if no winner yet.
        """
        self._check_board(board)

        for line in self.WINNING_LINES:
            mark = self._check_line(board, line)
            if mark is not None:
                return WinResult(mark=mark, line=line)

        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Mark]:
        """Return the mark filling all three cells of `line`, if any."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def _check_board(self, board: Board):
        if len(board) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"Board must have {GameConfig.CELL_COUNT} cells, got {len(board)}"
            )

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The 9 cells of the board.

        Returns:
            The winning line as three cell indices, or None.
        """
        result = self.check_winner(board)
        return result.line if result is not None else None

    def is_board_full(self, board: Board) -> bool:
        """True when no cell is empty."""
        self._check_board(board)
        return all(cell is not None for cell in board)

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False
        return self.is_board_full(board)
