"""
Game state types for TicTacToe.
Marks, boards, history snapshots and the derived game status.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


# A board is 9 cells, row-major. None means empty.
Board = Tuple[Optional[Mark], ...]


def empty_board() -> Board:
    """Return a board with all 9 cells empty."""
    return (None,) * GameConfig.CELL_COUNT


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a flat cell index (0-8) to a 0-based (row, col)."""
    return divmod(index, GameConfig.BOARD_SIZE)


@dataclass(frozen=True)
class Snapshot:
    """
    One entry in the move history.

    The board as it stood after a move, and the cell that move was made on.
    The first snapshot of every game is the empty board with no last move.
    """
    board: Board
    last_move: Optional[int] = None

    @classmethod
    def initial(cls) -> "Snapshot":
        """The empty board that every game starts from."""
        return cls(board=empty_board(), last_move=None)

    def with_mark(self, index: int, mark: Mark) -> "Snapshot":
        """Return a new snapshot with `mark` placed on `index`."""
        cells = list(self.board)
        cells[index] = mark
        return Snapshot(board=tuple(cells), last_move=index)


class Outcome(Enum):
    """What the current position means for the players."""
    WINNER = "winner"
    DRAW = "draw"
    NEXT_PLAYER = "next_player"


@dataclass(frozen=True)
class GameStatus:
    """
    Derived game status.

    `mark` is the winner for WINNER, the player to move for NEXT_PLAYER,
    and None for DRAW.
    """
    outcome: Outcome
    mark: Optional[Mark] = None

    @classmethod
    def winner(cls, mark: Mark) -> "GameStatus":
        return cls(Outcome.WINNER, mark)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Outcome.DRAW)

    @classmethod
    def next_player(cls, mark: Mark) -> "GameStatus":
        return cls(Outcome.NEXT_PLAYER, mark)

    @property
    def text(self) -> str:
        """Status line shown to the players."""
        if self.outcome == Outcome.WINNER:
            return GameConfig.WINNER_TEXT.format(mark=self.mark)
        if self.outcome == Outcome.DRAW:
            return GameConfig.DRAW_TEXT
        return GameConfig.NEXT_PLAYER_TEXT.format(mark=self.mark)
