"""Pygame GUI frontend — the glyph grid in its own window.

The window is sized to the grid in a monospace font.  Input blocks on
``pygame.event.wait`` so nothing is redrawn until a key arrives; the
clock only caps the refresh rate.
"""

from __future__ import annotations

import pygame

from hanoi.backend.engine.flow import FlowController
from hanoi.backend.engine.render import MIN_HEIGHT, MIN_WIDTH, Grid
from hanoi.backend.engine.render.renderer import TITLE
from hanoi.backend.models.action import Key, KeyEvent
from hanoi.backend.models.settings import Settings

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_TEXT = (205, 214, 244)
COL_OVERLAY0 = (108, 112, 134)
COL_BLUE = (137, 180, 250)
COL_YELLOW = (249, 226, 175)
COL_PINK = (245, 194, 231)

FONT_SIZE = 14
LIMIT_FPS = 60

_GLYPH_COLOURS: dict[str, tuple[int, int, int]] = {
    "@": COL_PINK,
    "|": COL_OVERLAY0,
    "=": COL_BLUE,
    "[": COL_BLUE,
    "]": COL_BLUE,
    "{": COL_BLUE,
    "}": COL_BLUE,
}

_KEYS: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_F4: Key.F4,
}

_MODIFIER_KEYS = frozenset(
    {
        pygame.K_LSHIFT,
        pygame.K_RSHIFT,
        pygame.K_LCTRL,
        pygame.K_RCTRL,
        pygame.K_LALT,
        pygame.K_RALT,
        pygame.K_LGUI,
        pygame.K_RGUI,
        pygame.K_CAPSLOCK,
        pygame.K_NUMLOCK,
        pygame.K_MODE,
    }
)


def key_event(ev: pygame.event.Event) -> KeyEvent:
    """Translate a pygame ``KEYDOWN`` event into a :class:`KeyEvent`."""
    alt = bool(ev.mod & pygame.KMOD_ALT)
    ctrl = bool(ev.mod & pygame.KMOD_CTRL)
    shift = bool(ev.mod & pygame.KMOD_SHIFT)

    if ev.key in _MODIFIER_KEYS:
        return KeyEvent(Key.MODIFIER, alt=alt, ctrl=ctrl, shift=shift)
    if ev.key in _KEYS:
        return KeyEvent(_KEYS[ev.key], alt=alt, ctrl=ctrl, shift=shift)

    char = ev.unicode if ev.unicode and ev.unicode.isprintable() else ""
    if not char and ctrl and pygame.K_a <= ev.key <= pygame.K_z:
        char = chr(ev.key)
    if not char:
        return KeyEvent(Key.OTHER, alt=alt, ctrl=ctrl, shift=shift)
    return KeyEvent(Key.CHAR, char=char, alt=alt, ctrl=ctrl, shift=shift)


# ---------------------------------------------------------------------------
# Surface
# ---------------------------------------------------------------------------
class PygameSurface:
    def __init__(self, width: int, height: int) -> None:
        pygame.init()
        pygame.display.set_caption(TITLE)
        self._font = pygame.font.SysFont("monospace", FONT_SIZE, bold=True)
        self._cell_w, self._cell_h = self._font.size("M")
        self._surf = pygame.display.set_mode(
            (width * self._cell_w, height * self._cell_h)
        )
        self._clock = pygame.time.Clock()
        self._glyphs: dict[str, pygame.Surface] = {}

    def _glyph(self, ch: str) -> pygame.Surface:
        if ch not in self._glyphs:
            colour = COL_YELLOW if ch.isdigit() else _GLYPH_COLOURS.get(ch, COL_TEXT)
            self._glyphs[ch] = self._font.render(ch, True, colour)
        return self._glyphs[ch]

    def draw(self, grid: Grid) -> None:
        self._surf.fill(COL_BASE)
        for y, row in enumerate(grid.rows()):
            for x, ch in enumerate(row):
                if ch != " ":
                    self._surf.blit(self._glyph(ch), (x * self._cell_w, y * self._cell_h))
        pygame.display.flip()
        self._clock.tick(LIMIT_FPS)

    def wait_for_key(self) -> KeyEvent:
        while True:
            ev = pygame.event.wait()
            if ev.type == pygame.QUIT:
                return KeyEvent(Key.CLOSE)
            if ev.type == pygame.KEYDOWN:
                return key_event(ev)

    def toggle_fullscreen(self) -> None:
        pygame.display.toggle_fullscreen()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    settings: Settings | None = None,
    *,
    width: int = MIN_WIDTH,
    height: int = MIN_HEIGHT,
) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    surface = PygameSurface(width, height)
    controller = FlowController(settings, width=width, height=height)
    try:
        controller.run(surface)
    finally:
        pygame.quit()
