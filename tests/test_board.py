"""Board model tests — operations, rejection rules, and invariants.

Random sequences of cursor moves, grabs, and drops are replayed against a
board and the disk set and stacking order are checked after every step.
"""

from __future__ import annotations

import logging
import random

import pytest

from hanoi.backend.engine.gameplay import GamePlay
from hanoi.backend.engine.gamestate import is_won
from hanoi.backend.models.action import Action
from hanoi.backend.models.board import Board

# Optimal 3-disk solution as (from pole, to pole).
_SOLUTION_3: list[tuple[int, int]] = [
    (0, 2), (0, 1), (2, 1), (0, 2), (1, 0), (1, 2), (0, 2),
]


# -- helpers ------------------------------------------------------------------


def _move(board: Board, src: int, dst: int) -> bool:
    """Carry the top disk of *src* over to *dst*; True if it was placed."""
    board.move_cursor(src - board.cursor)
    assert board.grab(), f"nothing to grab on pole {src}"
    board.move_cursor(dst - board.cursor)
    return board.drop()


def _assert_invariants(board: Board) -> None:
    assert board.disks() == list(range(1, board.disk_count + 1))
    for pole in board.poles:
        assert pole == sorted(pole, reverse=True), f"bad stacking: {pole}"
    assert 0 <= board.cursor < board.pole_count


# -- construction -------------------------------------------------------------


def test_new_stacks_everything_on_first_pole() -> None:
    board = Board.new(3, 3)
    assert board.poles == [[3, 2, 1], [], []]
    assert board.cursor == 0
    assert board.held_disk is None
    assert board.move_count == 0
    assert board.last_dropped is None


def test_new_with_more_poles() -> None:
    board = Board.new(5, 12)
    assert board.poles[0] == list(range(12, 0, -1))
    assert board.poles[1:] == [[], [], [], []]


@pytest.mark.parametrize("poles, disks", [(0, 3), (-1, 3), (3, -1)])
def test_new_rejects_bad_counts(poles: int, disks: int) -> None:
    with pytest.raises(ValueError):
        Board.new(poles, disks)


def test_copy_is_independent() -> None:
    board = Board.new(3, 3)
    clone = board.copy()
    clone.grab()
    assert board.poles == [[3, 2, 1], [], []]
    assert board.held_disk is None


# -- cursor -------------------------------------------------------------------


@pytest.mark.parametrize("delta", [-100, -1, 0, 1, 2, 3, 100])
def test_move_cursor_is_clamped(delta: int) -> None:
    board = Board.new(3, 3)
    board.move_cursor(delta)
    assert board.cursor == max(0, min(2, delta))


def test_move_cursor_repeated_never_leaves_range() -> None:
    board = Board.new(4, 2)
    for _ in range(10):
        board.move_cursor(1)
    assert board.cursor == 3
    for _ in range(10):
        board.move_cursor(-1)
    assert board.cursor == 0


# -- grab / drop --------------------------------------------------------------


def test_grab_takes_top_disk() -> None:
    board = Board.new(3, 3)
    assert board.grab()
    assert board.held_disk == 1
    assert board.poles[0] == [3, 2]


def test_grab_while_holding_is_ignored() -> None:
    board = Board.new(3, 3)
    board.grab()
    assert not board.grab()
    assert board.held_disk == 1
    assert board.poles[0] == [3, 2]


def test_grab_from_empty_pole_is_ignored() -> None:
    board = Board.new(3, 3)
    board.move_cursor(1)
    assert not board.grab()
    assert board.held_disk is None


def test_drop_without_disk_is_ignored() -> None:
    board = Board.new(3, 3)
    assert not board.drop()
    assert board.poles == [[3, 2, 1], [], []]
    assert board.move_count == 0


def test_drop_on_smaller_disk_is_rejected() -> None:
    board = Board.new(3, 3)
    # move 1 to pole 2, then 2 to pole 1, then pick up 3
    assert _move(board, 0, 2)
    assert _move(board, 0, 1)
    board.move_cursor(-board.cursor)
    assert board.grab()
    assert board.held_disk == 3

    board.move_cursor(2)
    before = board.copy()
    assert not board.drop()
    assert board.held_disk == 3
    assert board.poles == before.poles
    assert board.move_count == before.move_count
    assert board.last_dropped == before.last_dropped


def test_drop_on_larger_disk_is_allowed() -> None:
    board = Board.new(3, 3)
    board.grab()
    assert board.drop()
    assert board.poles[0] == [3, 2, 1]


def test_rejected_drop_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    board = Board.new(3, 2)
    _move(board, 0, 1)
    board.move_cursor(-1)
    board.grab()
    board.move_cursor(1)
    with caplog.at_level(logging.DEBUG, logger="hanoi"):
        board.drop()
    assert "drop rejected" in caplog.text


# -- move counting ------------------------------------------------------------


def test_scenario_first_move() -> None:
    board = Board.new(3, 3)
    board.grab()
    assert board.held_disk == 1
    assert board.poles[0] == [3, 2]
    board.move_cursor(1)
    board.move_cursor(1)
    assert board.cursor == 2
    assert board.drop()
    assert board.poles[2] == [1]
    assert board.move_count == 1


def test_redrop_of_same_disk_is_not_counted() -> None:
    board = Board.new(3, 3)
    _move(board, 0, 2)
    assert board.move_count == 1

    # pick the same disk up and put it straight back
    board.grab()
    board.drop()
    assert board.move_count == 1

    # ... or carry it elsewhere: still the same disk as last time
    _move(board, 2, 1)
    assert board.move_count == 1


def test_different_disk_counts_once() -> None:
    board = Board.new(3, 3)
    _move(board, 0, 2)
    _move(board, 0, 1)
    assert board.move_count == 2


def test_full_three_disk_solution() -> None:
    board = Board.new(3, 3)
    for src, dst in _SOLUTION_3:
        assert _move(board, src, dst)
        _assert_invariants(board)
    assert board.poles == [[], [], [3, 2, 1]]
    assert board.move_count == 7
    assert is_won(board)


# -- reset --------------------------------------------------------------------


def test_reset_restores_start() -> None:
    board = Board.new(4, 5)
    _move(board, 0, 3)
    _move(board, 0, 2)
    board.move_cursor(-10)
    board.grab()
    board.move_cursor(1)

    board.reset()
    assert board.poles == [[5, 4, 3, 2, 1], [], [], []]
    assert board.held_disk is None
    assert board.move_count == 0
    assert board.last_dropped is None
    assert board.cursor == 1
    _assert_invariants(board)


# -- properties ---------------------------------------------------------------


@pytest.mark.parametrize("seed", range(20))
def test_random_play_keeps_invariants(seed: int) -> None:
    rng = random.Random(seed)
    board = Board.new(rng.randint(3, 7), rng.randint(1, 12))
    for _ in range(300):
        op = rng.choice(("left", "right", "jump", "grab", "drop"))
        if op == "left":
            board.move_cursor(-1)
        elif op == "right":
            board.move_cursor(1)
        elif op == "jump":
            board.move_cursor(rng.randint(-20, 20))
        elif op == "grab":
            board.grab()
        else:
            board.drop()
        _assert_invariants(board)


# -- gameplay wrapper ---------------------------------------------------------


def test_gameplay_applies_board_actions() -> None:
    game = GamePlay(3, 1)
    assert game.apply(Action.GRAB)
    assert not game.apply(Action.MOVE_LEFT)
    assert game.apply(Action.MOVE_RIGHT)
    assert game.apply(Action.MOVE_RIGHT)
    assert game.apply(Action.DROP)
    assert game.is_won
    assert game.moves == 1


def test_gameplay_ignores_non_board_actions() -> None:
    game = GamePlay(3, 3)
    for action in (Action.CONFIRM, Action.ESCAPE, Action.QUIT, Action.INCREMENT):
        assert not game.apply(action)
    assert game.board.poles == [[3, 2, 1], [], []]


def test_gameplay_reset_and_from_board() -> None:
    board = Board.new(3, 2)
    game = GamePlay.from_board(board)
    game.apply(Action.GRAB)
    assert game.apply(Action.RESET)
    assert game.board is board
    assert board.poles == [[2, 1], [], []]
