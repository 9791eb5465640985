from hanoi.backend.engine.render.renderer import (
    MIN_HEIGHT,
    MIN_WIDTH,
    Grid,
    piece,
    render_board,
    render_menu,
    render_play,
    render_win,
)

__all__ = [
    "MIN_HEIGHT",
    "MIN_WIDTH",
    "Grid",
    "piece",
    "render_board",
    "render_menu",
    "render_play",
    "render_win",
]
