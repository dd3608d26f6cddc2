"""
Board and round state types for TicTacToe.
Marks, round results, and helpers for the 9-cell board.
"""

from enum import Enum
from typing import Optional, List, Sequence, Tuple
from dataclasses import dataclass


class Mark(Enum):
    """The two player symbols."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


# A cell is either empty (None) or holds a mark
Cell = Optional[Mark]

# Cells are indexed 0-8 in row-major order:
#   0 | 1 | 2
#   3 | 4 | 5
#   6 | 7 | 8
BOARD_CELLS = 9
EMPTY_BOARD: Tuple[Cell, ...] = (None,) * BOARD_CELLS


@dataclass(frozen=True)
class RoundResult:
    """
    How a round ended.

    Exactly one of the two is set:
    - winner: the mark that completed a line
    - is_draw: the board filled up without a line
    """
    winner: Optional[Mark] = None
    is_draw: bool = False

    @classmethod
    def win(cls, mark: Mark) -> "RoundResult":
        return cls(winner=mark)

    @classmethod
    def draw(cls) -> "RoundResult":
        return cls(is_draw=True)


def empty_cells(board: Sequence[Cell]) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: 9-cell board.

    Returns:
        List of cell indices, ascending.
    """
    return [idx for idx, cell in enumerate(board) if cell is None]


def is_full(board: Sequence[Cell]) -> bool:
    """True when no cell is empty."""
    return all(cell is not None for cell in board)


def is_empty(board: Sequence[Cell]) -> bool:
    return all(cell is None for cell in board)


def parse_board(text: str) -> Tuple[Cell, ...]:
    """
    Build a board from a 9-character string such as "XXXOO....".
    Any character other than X or O is an empty cell.
    """
    if len(text) != BOARD_CELLS:
        raise ValueError(f"Board needs {BOARD_CELLS} cells, got {len(text)}")
    lookup = {"X": Mark.X, "O": Mark.O}
    return tuple(lookup.get(ch.upper()) for ch in text)


def format_board(board: Sequence[Cell]) -> str:
    """
    Render the board as text, empty cells shown by their 1-9 number.
    """
    rows = []
    for row in range(3):
        cells = []
        for col in range(3):
            idx = row * 3 + col
            cell = board[idx]
            cells.append(cell.value if cell is not None else str(idx + 1))
        rows.append(" " + " | ".join(cells))
    return "\n---+---+---\n".join(rows)
