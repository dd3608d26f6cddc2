"""
TicTacToe game engine.
Handles board state, rules, scoring, and the computer opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import Mark, RoundResult, EMPTY_BOARD
from .move_validator import MoveValidator, RejectReason, ValidationResult
from .win_checker import WinChecker
from .ai_player import RandomPlayer
from .scheduler import ManualScheduler
from .game_engine import GameEngine, GameSnapshot
