"""Glyph renderer. Turns game state into a grid of characters.

Every function here is pure with respect to the game state: the board and
settings are only read, and the result is a fresh :class:`Grid` that a
frontend copies onto its own display.
"""

from __future__ import annotations

from hanoi.backend.engine.gamestate import win_feedback
from hanoi.backend.models.board import Board
from hanoi.backend.models.settings import LABELS, Settings

MIN_WIDTH = 128
MIN_HEIGHT = 32

TITLE = "Rusty Tower Of Hanoi"

POLE = "|"
MARKER = "@"
PADDING = 2  # columns between neighbouring disk stacks
BTN_SIZE = 10  # menu column width per setting


# -- glyph buffer -------------------------------------------------------------


class Grid:
    """A fixed-size buffer of single-character glyphs, blank by default."""

    def __init__(self, width: int = MIN_WIDTH, height: int = MIN_HEIGHT) -> None:
        self.width = width
        self.height = height
        self._cells: list[list[str]] = [[" "] * width for _ in range(height)]

    def put_char(self, x: int, y: int, ch: str) -> None:
        """Write *ch* at (x, y); writes outside the buffer are dropped."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = ch

    def put_text(self, x: int, y: int, text: str) -> None:
        for i, ch in enumerate(text):
            self.put_char(x + i, y, ch)

    def label(self, text: str, y: int, anchor: int, center: bool = True) -> None:
        """Write *text* on row *y*, starting at *anchor* or centred on it."""
        x = anchor - len(text) // 2 if center else anchor
        self.put_text(x, y, text)

    def glyph_at(self, x: int, y: int) -> str:
        return self._cells[y][x]

    def rows(self) -> list[str]:
        return ["".join(row) for row in self._cells]

    def __str__(self) -> str:
        return "\n".join(self.rows())


# -- pieces -------------------------------------------------------------------


def piece(value: int) -> str:
    """Return the glyph string of a disk of size *value*.

    The string is centred on the pole: with ``h = value // 2`` it covers
    columns ``-h-1 .. h+1``.  Odd sizes use curly tips, even sizes square
    ones, and the size is printed in the middle.
    """
    half = value // 2
    odd = value % 2 == 1
    lo, hi = -half - 1, half + 1

    glyphs: list[str] = []
    for k in range(lo, hi + 1):
        if value >= 10 and k == -1:
            glyphs.append(str(value // 10))
        elif k == 0:
            glyphs.append(str(value % 10))
        elif k == lo:
            glyphs.append("{" if odd else "[")
        elif k == hi:
            glyphs.append("}" if odd else "]")
        else:
            glyphs.append("=")
    return "".join(glyphs)


def _draw_piece(grid: Grid, value: int, x: int, y: int) -> None:
    grid.put_text(x - value // 2 - 1, y, piece(value))


# -- board --------------------------------------------------------------------


def pole_x(board: Board, index: int, width: int) -> int:
    """Column of pole *index*, with the poles centred as a group."""
    half_len = board.pole_count // 2
    return (
        width // 2
        - half_len * board.disk_count
        - half_len * PADDING
        + index * (board.disk_count + PADDING)
    )


def base_y(board: Board, height: int) -> int:
    """Row of the bottom disk slot."""
    return height // 2 + board.disk_count // 2


def marker_y(board: Board, height: int) -> int:
    """Row of the cursor marker; a held disk floats one row below it."""
    return height // 2 - board.disk_count // 2 - 4


def render_board(board: Board, grid: Grid) -> Grid:
    """Draw *board* onto *grid* and return it."""
    bottom = base_y(board, grid.height)
    for i, pole in enumerate(board.poles):
        x = pole_x(board, i, grid.width)

        # slots above the stack show the bare pole
        for j in range(board.disk_count + 1):
            if j >= len(pole):
                grid.put_char(x, bottom - j, POLE)
                continue
            _draw_piece(grid, pole[j], x, bottom - j)

        if i == board.cursor:
            top = marker_y(board, grid.height)
            grid.put_char(x, top, MARKER)
            if board.held_disk is not None:
                _draw_piece(grid, board.held_disk, x, top + 1)

    return grid


# -- screens ------------------------------------------------------------------


def render_menu(
    settings: Settings,
    menu_cursor: int,
    width: int = MIN_WIDTH,
    height: int = MIN_HEIGHT,
) -> Grid:
    grid = Grid(width, height)
    half_w, half_h = width // 2, height // 2

    grid.label(TITLE, 1, half_w)
    grid.label("Arrow keys: Change rules", half_h // 2, half_w)

    for i, (name, value) in enumerate(zip(LABELS, settings.values)):
        x = 2 + half_w - BTN_SIZE - PADDING + i * (BTN_SIZE + PADDING)
        y = half_h

        grid.label(name, y, x + 3, center=False)
        grid.put_text(x, y, f"{value:02d}")

        if i == menu_cursor:
            grid.put_text(x, y - 2, "/\\")
            grid.put_text(x, y + 2, "\\/")

    grid.label("Press Enter to play!", height - 3, half_w)
    return grid


def render_play(board: Board, width: int = MIN_WIDTH, height: int = MIN_HEIGHT) -> Grid:
    grid = Grid(width, height)
    half_w = width // 2

    grid.label("Stack all disks on the rightmost pole", 1, half_w)
    grid.label("You can't stack a disk on top of a smaller disk", 2, half_w)

    render_board(board, grid)

    grid.label(f"Moves: {board.move_count}", height - 4, half_w)
    grid.label(
        "Left/Right: move | Up: pick disk | Down: drop disk | R: reset | Esc: main menu",
        height - 2,
        half_w,
    )
    return grid


def render_win(board: Board, width: int = MIN_WIDTH, height: int = MIN_HEIGHT) -> Grid:
    grid = Grid(width, height)
    half_w = width // 2
    moves = board.move_count

    grid.label("You solved the puzzle! :D", 3, half_w)
    grid.label(win_feedback(board.pole_count, board.disk_count), 5, half_w)
    grid.label(f"solved in {moves} move{'' if moves == 1 else 's'}", 7, half_w)

    render_board(board, grid)

    grid.label("Press any key to return to the menu", height - 2, half_w)
    return grid
