"""
Game engine for TicTacToe.
Owns the board, turn, round result, score and opponent mode, and
drives the computer opponent through a scheduler.
"""

from typing import Callable, Dict, List, Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Cell, Mark, RoundResult, EMPTY_BOARD, format_board
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import RandomPlayer
from .scheduler import ManualScheduler


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of the engine state for display."""
    board: Tuple[Cell, ...]
    turn: Mark
    result: Optional[RoundResult]
    score: Dict[Mark, int]
    opponent_mode: bool
    starting_mark: Mark


class GameEngine:
    """
    The TicTacToe state machine.

    Rounds:
    - place_mark() writes the current mark, then checks win, then draw,
      otherwise passes the turn
    - restart_round() clears the board and alternates the opening mark
    - reset_all() returns everything to the initial state

    Illegal requests are ignored: they return False and change nothing.

    When opponent mode is on and it becomes O's turn in a live round,
    exactly one computer move is scheduled. Any state change during the
    delay (a move, restart, reset or mode change) makes it stale, and
    computer_move() re-checks mode, round and turn when it fires.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        scheduler=None,
        player: Optional[RandomPlayer] = None,
        on_change: Optional[Callable[["GameEngine"], None]] = None
    ):
        """
        Initialize the engine.

        Args:
            config: Game settings (default: GameConfig()).
            scheduler: Object with schedule(delay_ms, callback)
                (default: a ManualScheduler).
            player: Computer opponent (default: RandomPlayer seeded from config).
            on_change: Called with the engine after every state change.
        """
        self.config = config or GameConfig()
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.player = player or RandomPlayer(seed=self.config.AI_SEED)
        self.on_change = on_change

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        # Last ignored request (None after a successful one)
        self.last_rejection: Optional[ValidationResult] = None

        self._score: Dict[Mark, int] = {Mark.X: 0, Mark.O: 0}
        self._opponent_mode = False
        self._starting_mark = self.config.FIRST_MARK
        self._board: List[Cell] = list(EMPTY_BOARD)
        self._turn = self._starting_mark
        self._result: Optional[RoundResult] = None

        # Bumped on every state change; a scheduled move only runs if nothing changed since
        self._version = 0
        self._pending_token: Optional[int] = None

    # ==================== READ SIDE ====================

    @property
    def board(self) -> Tuple[Cell, ...]:
        return tuple(self._board)

    @property
    def turn(self) -> Mark:
        return self._turn

    @property
    def result(self) -> Optional[RoundResult]:
        return self._result

    @property
    def score(self) -> Dict[Mark, int]:
        return dict(self._score)

    @property
    def opponent_mode(self) -> bool:
        return self._opponent_mode

    @property
    def starting_mark(self) -> Mark:
        return self._starting_mark

    @property
    def computer_move_pending(self) -> bool:
        return self._pending_token is not None

    def snapshot(self) -> GameSnapshot:
        """Get a read-only copy of the whole state."""
        return GameSnapshot(
            board=self.board,
            turn=self._turn,
            result=self._result,
            score=self.score,
            opponent_mode=self._opponent_mode,
            starting_mark=self._starting_mark
        )

    def is_computer_turn(self) -> bool:
        return (
            self._opponent_mode
            and self._result is None
            and self._turn == self.config.AI_MARK
        )

    def can_toggle_opponent_mode(self) -> bool:
        return self.validator.validate_mode_change(self._board, self._score).is_valid

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        if self._result is None or self._result.winner is None:
            return None
        return self.win_checker.get_winning_line(self._board)

    def status_text(self) -> str:
        """Status line: whose turn it is, or how the round ended."""
        if self._result is not None:
            if self._result.is_draw:
                return "It's a Draw!"
            return f"Winner: {self._result.winner.value}"

        text = f"Turn: {self._turn.value}"
        if self.is_computer_turn():
            text += " (AI)"
        return text

    def print_board(self):
        """Print the board and game info to console."""
        print()
        print(format_board(self._board))
        print(f"\n{self.status_text()}")
        print(f"Score  X: {self._score[Mark.X]}  O: {self._score[Mark.O]}")
        if self._opponent_mode:
            print(f"Computer plays: {self.config.AI_MARK.value}")

    # ==================== OPERATIONS ====================

    def place_mark(self, index: int) -> bool:
        """
        Place the current mark on a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the mark was placed, False if the request was ignored.
        """
        check = self.validator.validate_move(self._board, self._result, index)
        if not check.is_valid:
            self._reject(check)
            return False

        self.last_rejection = None
        mark = self._turn
        self._board[index] = mark

        result = self.win_checker.evaluate(self._board)
        if result is None:
            self._turn = mark.opposite()
        elif result.winner is not None:
            self._result = result
            self._score[result.winner] += 1
            self._debug(f"{result.winner.value} wins with cell {index}")
        else:
            self._result = result
            self._debug("Board full, draw")

        self._changed()
        return True

    def computer_move(self) -> bool:
        """
        Let the computer play a random empty cell.

        Ignored unless opponent mode is on, the round is live, and it is
        the computer's turn.

        Returns:
            True if a mark was placed.
        """
        if not self.is_computer_turn():
            return False

        index = self.player.choose_move(self._board)
        if index is None:
            return False

        self._debug(f"Computer plays {self._turn.value} at cell {index}")
        return self.place_mark(index)

    def restart_round(self):
        """Start a new round. Score and opponent mode are kept."""
        self._board = list(EMPTY_BOARD)
        self._result = None
        self._starting_mark = self._starting_mark.opposite()
        self._turn = self._starting_mark
        self.last_rejection = None
        self._changed()

    def reset_all(self):
        """Return to the initial state: scores zeroed, opponent mode off."""
        self._board = list(EMPTY_BOARD)
        self._result = None
        self._score = {Mark.X: 0, Mark.O: 0}
        self._opponent_mode = False
        self._starting_mark = self.config.FIRST_MARK
        self._turn = self._starting_mark
        self.last_rejection = None
        self._changed()

    def set_opponent_mode(self, enabled: bool) -> bool:
        """
        Turn the computer opponent on or off.

        Only allowed while the board is empty and both scores are zero.

        Returns:
            True if the change was accepted.
        """
        check = self.validator.validate_mode_change(self._board, self._score)
        if not check.is_valid:
            self._reject(check)
            return False

        self.last_rejection = None
        if bool(enabled) == self._opponent_mode:
            return True  # no change, keep any pending computer move

        self._opponent_mode = bool(enabled)
        self._changed()
        return True

    # ==================== INTERNALS ====================

    def _changed(self):
        """Common tail of every state change."""
        # Any change makes an already scheduled move stale
        self._version += 1
        self._pending_token = None

        self._maybe_schedule_computer_move()
        if self.on_change is not None:
            self.on_change(self)

    def _maybe_schedule_computer_move(self):
        if not self.is_computer_turn() or self._pending_token is not None:
            return

        token = self._version
        self._pending_token = token
        self.scheduler.schedule(
            self.config.AI_MOVE_DELAY_MS,
            lambda: self._run_scheduled_move(token)
        )

    def _run_scheduled_move(self, token: int):
        if token != self._version:
            return  # stale: state changed during the delay

        self._pending_token = None
        self.computer_move()

    def _reject(self, check: ValidationResult):
        self.last_rejection = check
        self._debug(f"Ignored: {check.error_message}")

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(f"[engine] {message}")


# Quick test
if __name__ == "__main__":
    print("Testing GameEngine...")

    engine = GameEngine()
    for idx in [0, 3, 1, 4, 2]:
        print(f"\n{engine.turn.value} moves to {idx}")
        engine.place_mark(idx)
        engine.print_board()

    engine.restart_round()
    engine.print_board()

    print("\nGameEngine test done!")
