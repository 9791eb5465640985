"""Cross-platform single-keypress reader for CLI frontends.

Handles arrow keys, Escape, Alt combinations and F4 without requiring
Enter.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from hanoi.backend.models.action import Key, KeyEvent

# Seconds to wait for the rest of a multi-byte escape sequence.
_SEQUENCE_GAP = 0.03


# -- low-level sequence readers -----------------------------------------------


def _read_unix() -> str:
    """Block for one keypress and return its full byte sequence."""
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        # Use os.read (unbuffered) so that select() sees the remaining
        # bytes of multi-byte sequences (arrow keys, Alt+key).
        seq = os.read(fd, 1).decode("utf-8", errors="ignore")
        if seq == "\x1b":
            while True:
                ready, _, _ = select.select([fd], [], [], _SEQUENCE_GAP)
                if not ready:
                    break
                seq += os.read(fd, 1).decode("utf-8", errors="ignore")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return seq


_WINDOWS_SPECIAL: dict[str, str] = {
    "H": "\x1b[A",
    "P": "\x1b[B",
    "M": "\x1b[C",
    "K": "\x1b[D",
    ">": "\x1bOS",  # F4
    "k": "\x1b[1;3S",  # Alt+F4
}


def _read_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return _WINDOWS_SPECIAL.get(msvcrt.getwch(), "")
    return ch


_read = _read_windows if os.name == "nt" else _read_unix


# -- decoding -----------------------------------------------------------------

_ARROW_MAP: dict[str, Key] = {
    "A": Key.UP,
    "B": Key.DOWN,
    "C": Key.RIGHT,
    "D": Key.LEFT,
}

_F4_SEQUENCES: dict[str, bool] = {
    # sequence -> alt held
    "\x1bOS": False,
    "\x1b[14~": False,
    "\x1b[1;3S": True,
    "\x1b[14;3~": True,
}


def _decode_single(ch: str, alt: bool = False) -> KeyEvent:
    if ch in ("\r", "\n"):
        return KeyEvent(Key.ENTER, alt=alt)
    if ch == "\x03":
        return KeyEvent(Key.CHAR, char="c", alt=alt, ctrl=True)
    if ch.isprintable():
        return KeyEvent(Key.CHAR, char=ch, alt=alt, shift=ch.isupper())
    return KeyEvent(Key.OTHER, alt=alt)


def decode(seq: str) -> KeyEvent:
    """Turn a raw terminal byte sequence into a :class:`KeyEvent`.

    Recognised forms:
        ``ESC [ A``..``D`` and ``ESC O A``..``D`` — arrow keys
        ``ESC`` alone                              — Escape
        ``ESC <key>``                              — Alt + key
        ``ESC O S`` / ``ESC [ 1 ; 3 S``            — F4 / Alt+F4
        ``\\r`` / ``\\n``                          — Enter
        ``\\x03``                                  — Ctrl-C
    Other keys decode to ``Key.OTHER``; an empty read decodes to ``Key.NONE``.
    """
    if not seq:
        return KeyEvent(Key.NONE)

    if seq in _F4_SEQUENCES:
        return KeyEvent(Key.F4, alt=_F4_SEQUENCES[seq])

    if seq[0] == "\x1b":
        rest = seq[1:]
        if not rest:
            return KeyEvent(Key.ESCAPE)
        if len(rest) == 2 and rest[0] in "[O" and rest[1] in _ARROW_MAP:
            return KeyEvent(_ARROW_MAP[rest[1]])
        if len(rest) == 1:
            return _decode_single(rest, alt=True)
        return KeyEvent(Key.OTHER)

    if len(seq) == 1:
        return _decode_single(seq)
    return KeyEvent(Key.OTHER)


# -- public API ----------------------------------------------------------------


def require_terminal() -> None:
    """Raise :class:`RuntimeError` unless stdin is an interactive terminal."""
    if not sys.stdin.isatty():
        raise RuntimeError("stdin is not a terminal")


def get_key() -> KeyEvent:
    """Read a single keypress and return it decoded.

    Blocks until a key is pressed.
    """
    return decode(_read())
