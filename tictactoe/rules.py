# tictactoe/rules.py

from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple

DEFAULT_DIMENSION = 3


class Mark(Enum):
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


Cell = Optional[Mark]
Board = Tuple[Cell, ...]
Line = Tuple[int, ...]


def empty_board(dimension: int = DEFAULT_DIMENSION) -> Board:
    return (None,) * (dimension * dimension)


@lru_cache(maxsize=None)
def winning_lines(dimension: int = DEFAULT_DIMENSION) -> Tuple[Line, ...]:
    """
    All lines that win the game on a dimension x dimension board.

    Order: rows top to bottom, columns left to right, main diagonal,
    anti-diagonal. For 3x3 this is the classic table of 8 triples.
    """
    n = dimension
    rows = [tuple(r * n + c for c in range(n)) for r in range(n)]
    cols = [tuple(r * n + c for r in range(n)) for c in range(n)]
    diagonal = tuple(i * n + i for i in range(n))
    anti_diagonal = tuple(i * n + (n - 1 - i) for i in range(n))
    return tuple(rows + cols + [diagonal, anti_diagonal])


def _check_size(board: Board, dimension: int) -> None:
    if len(board) != dimension * dimension:
        raise ValueError(
            f"Board has {len(board)} cells, expected {dimension * dimension}."
        )


def winning_line(board: Board, dimension: int = DEFAULT_DIMENSION) -> Optional[Line]:
    _check_size(board, dimension)
    for line in winning_lines(dimension):
        first = board[line[0]]
        if first is not None and all(board[i] == first for i in line[1:]):
            return line
    return None


def detect_winner(board: Board, dimension: int = DEFAULT_DIMENSION) -> Optional[Mark]:
    line = winning_line(board, dimension)
    return board[line[0]] if line else None


def is_full(board: Board) -> bool:
    return all(cell is not None for cell in board)
