from hanoi.backend.models.action import Action, Key, KeyEvent
from hanoi.backend.models.board import Board
from hanoi.backend.models.screen import Screen
from hanoi.backend.models.settings import Settings

__all__ = ["Action", "Board", "Key", "KeyEvent", "Screen", "Settings"]
