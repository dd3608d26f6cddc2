"""
Move validator for TicTacToe.
Validates that moves and opponent-mode changes follow the rules.
"""

from enum import Enum
from typing import Optional, Mapping, Sequence
from dataclasses import dataclass
from .game_state import Cell, Mark, RoundResult, BOARD_CELLS, is_empty


class RejectReason(Enum):
    """Why a request was ignored."""
    CELL_OCCUPIED = "cell_occupied"
    ROUND_ENDED = "round_ended"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    ACTIVITY_STARTED = "activity_started"


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None


VALID = ValidationResult(is_valid=True)


class MoveValidator:
    """
    Validates TicTacToe requests.

    Rules:
    1. Index must be a cell number 0-8
    2. Round must not be over
    3. Can only place on empty cells
    4. Opponent mode can only change before any activity
       (empty board AND zero score for both marks)
    """

    def validate_move(
        self,
        board: Sequence[Cell],
        result: Optional[RoundResult],
        index: object
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current 9-cell board.
            result: Current round result (None while in progress).
            index: Cell to place the mark on.

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        # bool is an int subclass but never a cell number
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.INDEX_OUT_OF_RANGE,
                error_message=f"Invalid cell {index!r}. Must be 0-{BOARD_CELLS - 1}."
            )

        if result is not None:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.ROUND_ENDED,
                error_message="Round is already over!"
            )

        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.CELL_OCCUPIED,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return VALID

    def validate_mode_change(
        self,
        board: Sequence[Cell],
        score: Mapping[Mark, int]
    ) -> ValidationResult:
        """
        Validate an opponent-mode change.

        Args:
            board: Current 9-cell board.
            score: Wins per mark in this session.

        Returns:
            ValidationResult.
        """
        if not is_empty(board) or any(score.values()):
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.ACTIVITY_STARTED,
                error_message="Opponent mode is locked once moves or scores exist. Reset all to change it."
            )
        return VALID
