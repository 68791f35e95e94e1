# tictactoe/state.py

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .exceptions import InvalidStep
from .rules import DEFAULT_DIMENSION, Board, Mark, detect_winner, empty_board, is_full


@dataclass(frozen=True)
class HistoryEntry:
    board: Board
    cell: Optional[int] = None  # move that produced this board, None at start


class RejectReason(Enum):
    OUT_OF_RANGE = "out_of_range"
    GAME_OVER = "game_over"
    OCCUPIED = "occupied"


@dataclass(frozen=True)
class MoveRejected:
    cell: int
    reason: RejectReason


@dataclass(frozen=True)
class Winner:
    mark: Mark


@dataclass(frozen=True)
class Draw:
    pass


@dataclass(frozen=True)
class InProgress:
    next_mark: Mark


Status = Union[Winner, Draw, InProgress]


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of a game: every board played so far and which one
    is active.

    Transitions return a new GameState. Rewinding only moves step_number;
    playing a move after a rewind drops the boards after the active one.
    """

    history: Tuple[HistoryEntry, ...]
    step_number: int = 0
    dimension: int = DEFAULT_DIMENSION

    @classmethod
    def new(cls, dimension: int = DEFAULT_DIMENSION) -> "GameState":
        if dimension < 1:
            raise ValueError(f"Board dimension must be positive, got {dimension}.")
        return cls(
            history=(HistoryEntry(empty_board(dimension)),),
            step_number=0,
            dimension=dimension,
        )

    @property
    def x_is_next(self) -> bool:
        return self.step_number % 2 == 0

    @property
    def next_mark(self) -> Mark:
        return Mark.X if self.x_is_next else Mark.O

    def current_board(self) -> Board:
        return self.history[self.step_number].board

    def winner(self) -> Optional[Mark]:
        return detect_winner(self.current_board(), self.dimension)

    def status(self) -> Status:
        board = self.current_board()
        winner = self.winner()
        if winner is not None:
            return Winner(winner)
        if is_full(board):
            return Draw()
        return InProgress(self.next_mark)

    def validate_move(self, cell: int) -> Optional[MoveRejected]:
        board = self.current_board()
        if not 0 <= cell < len(board):
            return MoveRejected(cell, RejectReason.OUT_OF_RANGE)
        if self.winner() is not None:
            return MoveRejected(cell, RejectReason.GAME_OVER)
        if board[cell] is not None:
            return MoveRejected(cell, RejectReason.OCCUPIED)
        return None

    def apply_move(self, cell: int) -> "GameState":
        if self.validate_move(cell) is not None:
            return self

        squares = list(self.current_board())
        squares[cell] = self.next_mark
        history = self.history[: self.step_number + 1] + (
            HistoryEntry(tuple(squares), cell),
        )
        return replace(self, history=history, step_number=len(history) - 1)

    def jump_to(self, step: int) -> "GameState":
        if not 0 <= step < len(self.history):
            raise InvalidStep(step, len(self.history))
        return replace(self, step_number=step)
