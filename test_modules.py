"""
Tests for the TicTacToe logic modules.
Run with pytest, or directly as a script.
"""

import sys

import numpy as np
import pytest

from engine.config import GameConfig
from engine.game_state import (
    Mark, RoundResult, EMPTY_BOARD, empty_cells, is_full, parse_board, format_board
)
from engine.win_checker import WinChecker
from engine.move_validator import MoveValidator, RejectReason
from engine.ai_player import RandomPlayer
from engine.scheduler import ManualScheduler
from main import build_config


X, O = Mark.X, Mark.O


def swap_marks(board):
    """Board with every X replaced by O and vice versa."""
    return tuple(None if cell is None else cell.opposite() for cell in board)


def relabel(result):
    """Same result with X and O swapped."""
    if result.winner is None:
        return result
    return RoundResult.win(result.winner.opposite())


# ==================== GAME STATE ====================

def test_mark_opposite():
    assert X.opposite() == O
    assert O.opposite() == X


def test_board_helpers():
    board = parse_board("XO.X...O.")
    assert len(board) == 9
    assert board[0] == X and board[1] == O and board[2] is None
    assert empty_cells(board) == [2, 4, 5, 6, 8]
    assert not is_full(board)
    assert is_full(parse_board("XOXXOOOXX"))
    assert empty_cells(EMPTY_BOARD) == list(range(9))


def test_parse_board_rejects_wrong_length():
    with pytest.raises(ValueError):
        parse_board("XO")


def test_format_board_numbers_empty_cells():
    text = format_board(parse_board("X...O...."))
    assert text.splitlines()[0] == " X | 2 | 3"
    assert " O " in text.splitlines()[2]


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_wins(line):
    board = [None] * 9
    for idx in line:
        board[idx] = O
    checker = WinChecker()
    assert checker.check_winner(board) == O
    assert checker.get_winning_line(board) == line
    assert checker.evaluate(board) == RoundResult.win(O)


def test_no_winner_on_partial_board():
    checker = WinChecker()
    assert checker.evaluate(parse_board("XO..O....")) is None
    assert checker.evaluate(EMPTY_BOARD) is None


def test_full_board_without_line_is_draw():
    checker = WinChecker()
    board = parse_board("XOXXOOOXX")
    assert checker.check_winner(board) is None
    assert checker.evaluate(board) == RoundResult.draw()


def test_full_board_with_line_is_win_not_draw():
    checker = WinChecker()
    board = parse_board("XXXOOXOXO")
    assert checker.evaluate(board) == RoundResult.win(X)


def test_win_check_symmetric_under_relabel():
    checker = WinChecker()
    rng = np.random.default_rng(7)
    for _ in range(200):
        cells = rng.integers(0, 3, size=9)
        board = tuple([None, X, O][v] for v in cells)
        result = checker.evaluate(board)
        swapped = checker.evaluate(swap_marks(board))
        if result is None:
            assert swapped is None
        else:
            assert swapped == relabel(result)


def test_evaluate_rejects_bad_board_length():
    with pytest.raises(ValueError):
        WinChecker().evaluate([None] * 8)


# ==================== MOVE VALIDATOR ====================

def test_validate_move_accepts_empty_cell():
    result = MoveValidator().validate_move(EMPTY_BOARD, None, 4)
    assert result.is_valid
    assert result.reason is None


@pytest.mark.parametrize("index", [-1, 9, 100, "3", None, 1.0, True])
def test_validate_move_out_of_range(index):
    result = MoveValidator().validate_move(EMPTY_BOARD, None, index)
    assert not result.is_valid
    assert result.reason == RejectReason.INDEX_OUT_OF_RANGE


def test_validate_move_occupied_and_round_ended():
    validator = MoveValidator()
    board = parse_board("X........")

    occupied = validator.validate_move(board, None, 0)
    assert occupied.reason == RejectReason.CELL_OCCUPIED

    ended = validator.validate_move(board, RoundResult.win(X), 5)
    assert ended.reason == RejectReason.ROUND_ENDED


def test_validate_mode_change():
    validator = MoveValidator()
    assert validator.validate_mode_change(EMPTY_BOARD, {X: 0, O: 0}).is_valid

    with_move = validator.validate_mode_change(parse_board("....X...."), {X: 0, O: 0})
    assert with_move.reason == RejectReason.ACTIVITY_STARTED

    with_score = validator.validate_mode_change(EMPTY_BOARD, {X: 0, O: 1})
    assert with_score.reason == RejectReason.ACTIVITY_STARTED


# ==================== RANDOM PLAYER ====================

def test_random_player_picks_empty_cells_only():
    player = RandomPlayer(seed=123)
    board = parse_board("XOX.O.XO.")
    for _ in range(50):
        move = player.choose_move(board)
        assert move in (3, 5, 8)
        assert isinstance(move, int)
    assert player.moves_chosen == 50


def test_random_player_full_board():
    assert RandomPlayer(seed=1).choose_move(parse_board("XOXXOOOXX")) is None


def test_random_player_covers_all_open_cells():
    player = RandomPlayer(seed=0)
    seen = {player.choose_move(EMPTY_BOARD) for _ in range(300)}
    assert seen == set(range(9))


def test_random_player_seed_is_reproducible():
    a = RandomPlayer(seed=42)
    b = RandomPlayer(rng=np.random.default_rng(42))
    assert [a.choose_move(EMPTY_BOARD) for _ in range(10)] == [b.choose_move(EMPTY_BOARD) for _ in range(10)]


# ==================== SCHEDULER ====================

def test_scheduler_runs_in_due_order():
    scheduler = ManualScheduler()
    calls = []
    scheduler.schedule(300, lambda: calls.append("b"))
    scheduler.schedule(100, lambda: calls.append("a"))
    scheduler.schedule(300, lambda: calls.append("c"))

    assert scheduler.advance(99) == 0
    assert scheduler.advance(1) == 1
    assert calls == ["a"]
    assert scheduler.pending == 2
    assert scheduler.next_due() == (True, 200)

    assert scheduler.run_pending() == 2
    assert calls == ["a", "b", "c"]
    assert scheduler.next_due() == (False, 0)


def test_scheduler_callback_can_reschedule():
    scheduler = ManualScheduler()
    calls = []

    def first():
        calls.append(scheduler.now_ms)
        scheduler.schedule(50, lambda: calls.append(scheduler.now_ms))

    scheduler.schedule(50, first)
    scheduler.advance(100)
    assert calls == [50, 100]


def test_config_defaults():
    config = GameConfig()
    assert config.CELL_COUNT == 9
    assert config.AI_MOVE_DELAY_MS == 500
    assert config.AI_MARK == O
    assert config.FIRST_MARK == X


def test_scheduler_orders_many_callbacks():
    scheduler = ManualScheduler()
    calls = []
    delays = [700, 100, 400, 100, 0, 900, 400, 250]
    for n, delay in enumerate(delays):
        scheduler.schedule(delay, lambda n=n, d=delay: calls.append((d, n)))

    assert scheduler.run_pending() == len(delays)
    # Due time first, then the order they were scheduled in
    assert calls == sorted(calls)
    assert scheduler.now_ms == 900


def test_build_config_overrides():
    config = build_config(delay_ms=120, seed=9, debug=True)
    assert config.AI_MOVE_DELAY_MS == 120
    assert config.AI_SEED == 9
    assert config.DEBUG_MODE is True


def test_build_config_defaults_and_negative_delay():
    config = build_config(delay_ms=None, seed=None, debug=False)
    assert config.AI_MOVE_DELAY_MS == 500
    assert config.AI_SEED is None
    assert config.DEBUG_MODE is False

    assert build_config(delay_ms=-250, seed=None, debug=False).AI_MOVE_DELAY_MS == 0
    # Overrides stay on the instance
    assert GameConfig.AI_MOVE_DELAY_MS == 500


def run_all_tests():
    """Run all tests."""
    return pytest.main([__file__, "-v"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
