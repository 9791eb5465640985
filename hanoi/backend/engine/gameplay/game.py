"""Core gameplay logic — applies board actions and checks the win condition."""

from __future__ import annotations

import logging

from hanoi.backend.engine.gamestate import is_won
from hanoi.backend.models.action import Action
from hanoi.backend.models.board import Board

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, pole_count: int, disk_count: int) -> None:
        self.board = Board.new(pole_count, disk_count)
        logger.debug("new session: %r", self.board)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session around an existing board."""
        obj = object.__new__(cls)
        obj.board = board
        return obj

    # -- actions --------------------------------------------------------------

    def apply(self, action: Action) -> bool:
        """Apply a board action.

        Returns True if the board changed.  Actions outside the board's
        scope and illegal moves are ignored and return False.
        """
        board = self.board
        if action is Action.MOVE_LEFT or action is Action.MOVE_RIGHT:
            before = board.cursor
            board.move_cursor(-1 if action is Action.MOVE_LEFT else 1)
            return board.cursor != before
        if action is Action.GRAB:
            return board.grab()
        if action is Action.DROP:
            return board.drop()
        if action is Action.RESET:
            board.reset()
            return True
        return False

    # -- queries --------------------------------------------------------------

    @property
    def moves(self) -> int:
        return self.board.move_count

    @property
    def is_won(self) -> bool:
        return is_won(self.board)
