"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"Fullscreen" switches to the terminal's alternate screen buffer.
"""

from __future__ import annotations

import sys

from hanoi.backend.engine.flow import FlowController
from hanoi.backend.engine.render import MIN_HEIGHT, MIN_WIDTH, Grid
from hanoi.backend.models.action import KeyEvent
from hanoi.backend.models.settings import Settings
from hanoi.frontend.cli.input_handler import get_key, require_terminal


# -- ANSI helpers -------------------------------------------------------------

_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset

_ALT_ON = "\033[?1049h"
_ALT_OFF = "\033[?1049l"
_HIDE_CURSOR = "\033[?25l"
_SHOW_CURSOR = "\033[?25h"


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _paint(ch: str) -> str:
    """Colour a single glyph."""
    if ch.isdigit():
        return f"{_Y}{ch}{_R}"
    if ch == "@":
        return f"{_C}{ch}{_R}"
    if ch == "|":
        return f"{_DIM}{ch}{_R}"
    return ch


def _render_grid(grid: Grid) -> str:
    """Return an ANSI-coloured text representation of the grid."""
    lines = ["".join(_paint(ch) for ch in row.rstrip()) for row in grid.rows()]
    return "\n".join(lines)


# -- surface ------------------------------------------------------------------


class VanillaSurface:
    """Draws glyph grids with raw ANSI escape codes."""

    def __init__(self) -> None:
        self.fullscreen = False

    def draw(self, grid: Grid) -> None:
        _clear()
        sys.stdout.write(_render_grid(grid))
        sys.stdout.flush()

    def wait_for_key(self) -> KeyEvent:
        return get_key()

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        sys.stdout.write(_ALT_ON if self.fullscreen else _ALT_OFF)
        sys.stdout.flush()

    def close(self) -> None:
        if self.fullscreen:
            self.toggle_fullscreen()
        sys.stdout.write(_SHOW_CURSOR)
        _clear()
        print("  Goodbye!\n")


# -- public entry point -------------------------------------------------------


def run(
    settings: Settings | None = None,
    *,
    width: int = MIN_WIDTH,
    height: int = MIN_HEIGHT,
) -> None:
    """Launch the vanilla CLI, starting at the menu."""
    require_terminal()
    surface = VanillaSurface()
    controller = FlowController(settings, width=width, height=height)
    sys.stdout.write(_HIDE_CURSOR)
    try:
        controller.run(surface)
    finally:
        surface.close()
