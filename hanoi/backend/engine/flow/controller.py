"""Screen flow: the Menu → Play → Win state machine shared by all frontends.

The loop is input-driven: a frame is drawn, then the controller blocks on
exactly one key event, applies at most one board or global action and at
most one screen transition, and draws again.
"""

from __future__ import annotations

import logging
from typing import Protocol

from hanoi.backend.engine.controls import classify
from hanoi.backend.engine.gameplay import GamePlay
from hanoi.backend.engine.render import (
    MIN_HEIGHT,
    MIN_WIDTH,
    Grid,
    render_menu,
    render_play,
    render_win,
)
from hanoi.backend.models.action import (
    BOARD_ACTIONS,
    GLOBAL_ACTIONS,
    MENU_ACTIONS,
    Action,
    KeyEvent,
)
from hanoi.backend.models.screen import Screen
from hanoi.backend.models.settings import LABELS, Settings

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """What a frontend must provide to host the game."""

    def wait_for_key(self) -> KeyEvent: ...
    def draw(self, grid: Grid) -> None: ...
    def toggle_fullscreen(self) -> None: ...


class FlowController:
    """Owns the session state (settings, menu cursor, current game)."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        width: int = MIN_WIDTH,
        height: int = MIN_HEIGHT,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.width = width
        self.height = height
        self.screen = Screen.MENU
        self.menu_cursor = 0
        self.game: GamePlay | None = None

    @property
    def running(self) -> bool:
        return self.screen is not Screen.EXIT

    # -- transitions ----------------------------------------------------------

    def _go(self, screen: Screen) -> None:
        logger.info("screen %s -> %s", self.screen, screen)
        self.screen = screen

    def _on_menu(self, action: Action) -> None:
        if action is Action.MOVE_LEFT:
            self.menu_cursor = max(self.menu_cursor - 1, 0)
        elif action is Action.MOVE_RIGHT:
            self.menu_cursor = min(self.menu_cursor + 1, len(LABELS) - 1)
        elif action is Action.INCREMENT:
            self.settings.adjust(self.menu_cursor, 1)
        elif action is Action.DECREMENT:
            self.settings.adjust(self.menu_cursor, -1)
        elif action is Action.CONFIRM:
            self.game = GamePlay(self.settings.poles, self.settings.disks)
            self._go(Screen.PLAY)

    def _on_play(self, action: Action) -> None:
        assert self.game is not None
        if action is Action.ESCAPE:
            self.game = None
            self._go(Screen.MENU)
            return
        if action in BOARD_ACTIONS:
            self.game.apply(action)
            if self.game.is_won:
                logger.info("WIN in %d moves", self.game.moves)
                self._go(Screen.WIN)

    def _on_win(self, action: Action) -> None:
        if action is Action.CONFIRM:
            self.game = None
            self._go(Screen.MENU)

    def handle(self, event: KeyEvent) -> Action:
        """Classify *event* for the current screen and apply it.

        Returns the action so the caller can carry out side effects that
        live outside the game state, such as toggling fullscreen.
        """
        action = classify(event, self.screen)
        if action is Action.QUIT:
            self._go(Screen.EXIT)
        elif action in GLOBAL_ACTIONS or action is Action.NONE:
            pass
        elif self.screen is Screen.MENU and action in MENU_ACTIONS:
            self._on_menu(action)
        elif self.screen is Screen.PLAY:
            self._on_play(action)
        elif self.screen is Screen.WIN:
            self._on_win(action)
        return action

    # -- rendering ------------------------------------------------------------

    def frame(self) -> Grid:
        """Render the current screen."""
        if self.screen is Screen.PLAY and self.game is not None:
            return render_play(self.game.board, self.width, self.height)
        if self.screen is Screen.WIN and self.game is not None:
            return render_win(self.game.board, self.width, self.height)
        return render_menu(self.settings, self.menu_cursor, self.width, self.height)

    # -- main loop ------------------------------------------------------------

    def run(self, surface: Surface) -> None:
        while self.running:
            surface.draw(self.frame())
            event = surface.wait_for_key()
            if self.handle(event) is Action.TOGGLE_FULLSCREEN:
                surface.toggle_fullscreen()
