"""
Game engine for TicTacToe.
Owns the move history and the cursor into it, and answers every
question the views ask about the current position.
"""

import logging
from typing import List, Optional, Tuple

from .config import GameConfig
from .game_state import Board, GameStatus, Mark, Snapshot, index_to_cell
from .move_validator import MoveValidator
from .win_checker import WinChecker, WinResult

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Two-player TicTacToe with move history and time-travel.

    State is just the history (a list of immutable snapshots) and the
    cursor (index of the snapshot being shown). Everything else - whose
    turn it is, the winner, draw - is derived from the snapshot at the
    cursor each time it is asked for.

    Intents:
    - place_mark(index): play the next mark on a cell
    - jump_to(step): show an earlier (or later) snapshot
    - restart(): start over with an empty board

    Illegal intents are ignored without raising.
    """

    def __init__(
        self,
        win_checker: Optional[WinChecker] = None,
        validator: Optional[MoveValidator] = None
    ):
        self.win_checker = win_checker or WinChecker()
        self.validator = validator or MoveValidator(self.win_checker)

        self._history: List[Snapshot] = [Snapshot.initial()]
        self._cursor = 0

    # ==================== INTENTS ====================

    def place_mark(self, index: int) -> bool:
        """
        Place the current player's mark on a cell.

        Any snapshots after the cursor are discarded before the new one
        is appended, so a move made after jumping back abandons the old
        future.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the mark was placed, False if the move was ignored.
        """
        result = self.validator.validate_move(self.board, index)
        if not result.is_valid:
            logger.debug("Ignoring move at %s: %s", index, result.error_message)
            return False

        mark = self.next_player
        snapshot = self.current_snapshot.with_mark(index, mark)

        del self._history[self._cursor + 1:]
        self._history.append(snapshot)
        self._cursor = len(self._history) - 1

        logger.info("%s placed at %d (step %d)", mark, index, self._cursor)
        return True

    def jump_to(self, step: int) -> bool:
        """
        Move the cursor to a history step. History itself is untouched.

        Args:
            step: Step index, 0 being the empty board.

        Returns:
            True if the cursor moved, False if the step was out of range.
        """
        result = self.validator.validate_step(step, len(self._history))
        if not result.is_valid:
            logger.debug("Ignoring jump: %s", result.error_message)
            return False

        self._cursor = step
        logger.info("Jumped to step %d of %d", step, len(self._history) - 1)
        return True

    def restart(self):
        """Reset to a new game."""
        self._history = [Snapshot.initial()]
        self._cursor = 0
        logger.info("Game restarted")

    # ==================== DERIVED STATE ====================

    def get_status(self) -> GameStatus:
        """
        Get the status of the current snapshot.

        A winner takes precedence over a draw; a draw needs a full board.
        """
        winner = self.winner
        if winner is not None:
            return GameStatus.winner(winner.mark)
        if self.win_checker.is_board_full(self.board):
            return GameStatus.draw()
        return GameStatus.next_player(self.next_player)

    @property
    def status_text(self) -> str:
        return self.get_status().text

    @property
    def current_snapshot(self) -> Snapshot:
        return self._history[self._cursor]

    @property
    def board(self) -> Board:
        """Board of the snapshot at the cursor."""
        return self.current_snapshot.board

    @property
    def current_step(self) -> int:
        return self._cursor

    @property
    def history(self) -> Tuple[Snapshot, ...]:
        """All snapshots, oldest first."""
        return tuple(self._history)

    @property
    def next_player(self) -> Mark:
        """X on even steps, O on odd ones."""
        first = Mark(GameConfig.FIRST_PLAYER)
        return first if self._cursor % 2 == 0 else first.opposite()

    @property
    def winner(self) -> Optional[WinResult]:
        return self.win_checker.check_winner(self.board)

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.board)

    @property
    def is_draw(self) -> bool:
        return self.win_checker.check_draw(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_draw

    def get_valid_moves(self) -> List[int]:
        """Cells the player to move may place on."""
        return self.validator.get_valid_moves(self.board)

    def describe_step(self, step: int) -> str:
        """
        Label for a history entry, e.g. "Go to move #3 (r2, c1)".

        Args:
            step: Step index into the history.

        Raises:
            IndexError: If the step is not in the history.
        """
        result = self.validator.validate_step(step, len(self._history))
        if not result.is_valid:
            raise IndexError(result.error_message)

        if step == 0:
            return GameConfig.START_LABEL

        last_move = self._history[step].last_move
        if last_move is None:
            return GameConfig.MOVE_LABEL.format(step=step)

        row, col = index_to_cell(last_move)
        return GameConfig.MOVE_WITH_CELL_LABEL.format(step=step, row=row + 1, col=col + 1)
