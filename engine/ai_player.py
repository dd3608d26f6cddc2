"""
Computer player for TicTacToe.
Picks a uniformly random empty cell. No lookahead, no heuristics.
"""

from typing import Optional, Sequence

import numpy as np

from .game_state import Cell, empty_cells


class RandomPlayer:
    """
    A computer opponent that plays a random empty cell.

    Uses a numpy Generator so games can be replayed from a seed.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        """
        Initialize the random player.

        Args:
            rng: Generator to draw from (takes precedence over seed).
            seed: Seed for a new default_rng when no rng is given.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        # How many moves we've chosen (for debugging)
        self.moves_chosen = 0

    def choose_move(self, board: Sequence[Cell]) -> Optional[int]:
        """
        Choose a move for the current position.

        Args:
            board: 9-cell board.

        Returns:
            Index of an empty cell, or None if the board is full.
        """
        open_cells = empty_cells(board)
        if not open_cells:
            return None

        self.moves_chosen += 1
        return int(self.rng.choice(open_cells))
