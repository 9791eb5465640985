"""Key events coming from a frontend and the actions they map to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Key(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"
    F4 = "f4"
    CHAR = "char"
    MODIFIER = "modifier"  # shift / ctrl / alt pressed on its own
    CLOSE = "close"  # window closed
    OTHER = "other"  # a real key with no binding (Tab, Delete, F1, ...)
    NONE = "none"  # nothing decodable was read


@dataclass(frozen=True)
class KeyEvent:
    """A decoded keypress.

    ``char`` is only meaningful for ``Key.CHAR`` and holds the printable
    character that was typed.
    """

    key: Key
    char: str = ""
    alt: bool = False
    ctrl: bool = False
    shift: bool = False

    @property
    def is_modifier(self) -> bool:
        return self.key in (Key.MODIFIER, Key.NONE)


class Action(StrEnum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    GRAB = "grab"
    DROP = "drop"
    RESET = "reset"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    ESCAPE = "escape"
    QUIT = "quit"
    CONFIRM = "confirm"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    NONE = "none"


BOARD_ACTIONS: frozenset[Action] = frozenset(
    {Action.MOVE_LEFT, Action.MOVE_RIGHT, Action.GRAB, Action.DROP, Action.RESET}
)

GLOBAL_ACTIONS: frozenset[Action] = frozenset(
    {Action.TOGGLE_FULLSCREEN, Action.QUIT}
)

MENU_ACTIONS: frozenset[Action] = frozenset(
    {
        Action.MOVE_LEFT,
        Action.MOVE_RIGHT,
        Action.INCREMENT,
        Action.DECREMENT,
        Action.CONFIRM,
    }
)
