"""Maps decoded key events onto game actions, per screen."""

from __future__ import annotations

from hanoi.backend.models.action import Action, Key, KeyEvent
from hanoi.backend.models.screen import Screen

# Letter aliases for the arrow keys, as the CLI frontends have always offered.
_WASD: dict[str, Key] = {
    "w": Key.UP,
    "s": Key.DOWN,
    "a": Key.LEFT,
    "d": Key.RIGHT,
}

_MENU: dict[Key, Action] = {
    Key.LEFT: Action.MOVE_LEFT,
    Key.RIGHT: Action.MOVE_RIGHT,
    Key.UP: Action.INCREMENT,
    Key.DOWN: Action.DECREMENT,
    Key.ENTER: Action.CONFIRM,
}

_PLAY: dict[Key, Action] = {
    Key.LEFT: Action.MOVE_LEFT,
    Key.RIGHT: Action.MOVE_RIGHT,
    Key.UP: Action.GRAB,
    Key.DOWN: Action.DROP,
    Key.ESCAPE: Action.ESCAPE,
}


def _global_action(event: KeyEvent) -> Action:
    if event.key is Key.CLOSE:
        return Action.QUIT
    if event.alt and event.key is Key.ENTER:
        return Action.TOGGLE_FULLSCREEN
    if event.alt and event.key is Key.F4:
        return Action.QUIT
    if event.key is Key.CHAR:
        if event.ctrl and event.char.lower() == "c":
            return Action.QUIT
        if not event.alt and not event.ctrl and event.char in ("q", "Q"):
            return Action.QUIT
    return Action.NONE


def _normalise(event: KeyEvent) -> Key:
    """Fold WASD onto the arrow keys."""
    if event.key is Key.CHAR and not (event.alt or event.ctrl):
        return _WASD.get(event.char.lower(), Key.CHAR)
    return event.key


def classify(event: KeyEvent, screen: Screen) -> Action:
    """Return the action *event* stands for on *screen*.

    Global actions (fullscreen, quit) are recognised on every screen.
    Board actions are only produced while playing.
    """
    action = _global_action(event)
    if action is not Action.NONE:
        return action

    if screen is Screen.WIN:
        return Action.NONE if event.is_modifier else Action.CONFIRM

    if event.alt or event.ctrl:
        return Action.NONE

    key = _normalise(event)
    if screen is Screen.MENU:
        return _MENU.get(key, Action.NONE)
    if screen is Screen.PLAY:
        if key is Key.CHAR and event.char in ("r", "R"):
            return Action.RESET
        return _PLAY.get(key, Action.NONE)
    return Action.NONE
