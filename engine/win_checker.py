"""
Win checker for TicTacToe.
Checks if a mark has won or if the round is a draw.
"""

from typing import Optional, Sequence, Tuple
from .game_state import Cell, Mark, RoundResult, BOARD_CELLS, is_full


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 equal marks in a row
    (horizontally, vertically, or diagonally)

    Evaluation is a pure function of the board, so any 9-cell
    board can be checked without a running game.
    """

    # All possible winning lines (as cell index triples)
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
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

    def check_winner(self, board: Sequence[Cell]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: 9-cell board.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Sequence[Cell]) -> Optional[Tuple[int, int, int]]:
        """
        Get the first complete line, scanning rows, columns, then diagonals.

        Args:
            board: 9-cell board.

        Returns:
            The winning triple of indices, or None.
        """
        if len(board) != BOARD_CELLS:
            raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(board)}")

        for line in self.WINNING_LINES:
            if self._check_line(board, line):
                return line
        return None

    def _check_line(self, board: Sequence[Cell], line: Tuple[int, int, int]) -> bool:
        """True if all 3 cells of the line hold the same mark."""
        a, b, c = line
        return board[a] is not None and board[a] == board[b] == board[c]

    def evaluate(self, board: Sequence[Cell]) -> Optional[RoundResult]:
        """
        Evaluate a board: winning lines first, then fullness.

        Args:
            board: 9-cell board.

        Returns:
            RoundResult for a finished board, None while play can continue.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return RoundResult.win(winner)
        if is_full(board):
            return RoundResult.draw()
        return None


# Quick test
if __name__ == "__main__":
    from .game_state import parse_board, format_board

    print("Testing WinChecker...")

    checker = WinChecker()

    for text in ["XXXOO....", "OX.OX.O..", "XO..X...X", "XOXXOOOXX", "XO..O...."]:
        board = parse_board(text)
        print(f"\n{format_board(board)}")
        print(f"  -> {checker.evaluate(board)}")

    print("\nWinChecker test done!")
