"""Win evaluation and end-of-game feedback."""

from __future__ import annotations

from hanoi.backend.models.board import Board

_FALLBACK = "Hmmmmmm.... that's uhh.. unexpected"
_DEBUGGING = "Good job debugging, now play the game -_-'"

# (first disk count, last disk count, message) per pole-count group
_THREE_POLES: list[tuple[int, int, str]] = [
    (1, 1, _DEBUGGING),
    (2, 2, "Wow! That was easy huhh...?"),
    (3, 3, "Well done!"),
    (4, 4, "Good job!"),
    (5, 5, "Smart!"),
    (6, 6, "Very Smart!"),
    (7, 7, "Amazing!"),
    (8, 8, "You are crazy!!"),
    (9, 10, "Wow! That's impressive :o"),
    (11, 11, "You. Are. A. Legend"),
    (12, 12, "How in the.....???"),
]

_FOUR_OR_FIVE_POLES: list[tuple[int, int, str]] = [
    (1, 2, _DEBUGGING),
    (3, 5, "Well done! I guess..."),
    (6, 10, "Is it actually hard?"),
    (11, 13, "This probably requires some thinking"),
]


def is_won(board: Board) -> bool:
    """True once every disk sits on the last pole."""
    return len(board.poles[-1]) == board.disk_count


def win_feedback(pole_count: int, disk_count: int) -> str:
    """Return the praise line shown on the win screen."""
    if pole_count == 3:
        table = _THREE_POLES
    elif pole_count in (4, 5):
        table = _FOUR_OR_FIVE_POLES
    elif pole_count >= 6:
        return _DEBUGGING
    else:
        return "Wait, that's ilegal!"

    for lo, hi, message in table:
        if lo <= disk_count <= hi:
            return message
    return _FALLBACK
