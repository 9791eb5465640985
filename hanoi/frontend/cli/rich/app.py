"""Rich terminal frontend — styled glyphs inside a panel.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.  "Fullscreen" maps onto
Rich's alternate-screen support.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from hanoi.backend.engine.flow import FlowController
from hanoi.backend.engine.render import MIN_HEIGHT, MIN_WIDTH, Grid
from hanoi.backend.engine.render.renderer import TITLE
from hanoi.backend.models.action import KeyEvent
from hanoi.backend.models.settings import Settings
from hanoi.frontend.cli.input_handler import get_key, require_terminal

console = Console()

_STYLES: dict[str, str] = {
    "@": "bold cyan",
    "|": "dim",
    "=": "bright_blue",
    "[": "bold bright_blue",
    "]": "bold bright_blue",
    "{": "bold magenta",
    "}": "bold magenta",
}


# -- grid rendering -----------------------------------------------------------


def _render_grid(grid: Grid) -> Text:
    """Return a Rich Text holding the styled grid."""
    text = Text(no_wrap=True, overflow="crop")
    for y, row in enumerate(grid.rows()):
        if y:
            text.append("\n")
        for ch in row.rstrip():
            if ch.isdigit():
                text.append(ch, style="bold yellow")
            else:
                text.append(ch, style=_STYLES.get(ch, ""))
    return text


# -- surface ------------------------------------------------------------------


class RichSurface:
    def __init__(self, console: Console) -> None:
        self._console = console
        self.fullscreen = False

    def draw(self, grid: Grid) -> None:
        self._console.clear()
        panel = Panel(
            _render_grid(grid),
            title=f"[bold cyan]{TITLE}[/bold cyan]",
            border_style="bright_blue",
            width=grid.width + 4,
        )
        self._console.print(Align.center(panel))

    def wait_for_key(self) -> KeyEvent:
        return get_key()

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        self._console.set_alt_screen(self.fullscreen)

    def close(self) -> None:
        if self.fullscreen:
            self.toggle_fullscreen()
        self._console.show_cursor(True)
        self._console.clear()
        self._console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))


# -- public entry point -------------------------------------------------------


def run(
    settings: Settings | None = None,
    *,
    width: int = MIN_WIDTH,
    height: int = MIN_HEIGHT,
) -> None:
    """Launch the Rich CLI, starting at the menu."""
    require_terminal()
    surface = RichSurface(console)
    controller = FlowController(settings, width=width, height=height)
    console.show_cursor(False)
    try:
        controller.run(surface)
    finally:
        surface.close()
