"""Tower of Hanoi.

Usage::

    hanoi                       # interactive launcher
    hanoi -f rich -p 4 -d 5     # Rich terminal, 4 poles, 5 disks preselected
    hanoi -f pygame             # Pygame window
    hanoi -v --log-file hanoi.log
"""

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from types import ModuleType
from typing import Optional

import typer

from hanoi.backend.engine.render import MIN_HEIGHT, MIN_WIDTH
from hanoi.backend.models.settings import SETTINGS_BOUNDS, SETTINGS_DEFAULT, Settings
from hanoi.logger import setup_logging

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.vanilla: "hanoi.frontend.cli.vanilla.app",
    Frontend.rich: "hanoi.frontend.cli.rich.app",
    Frontend.pygame: "hanoi.frontend.gui.pygame.app",
}

_CHOICES = {
    "1": Frontend.vanilla,
    "2": Frontend.rich,
    "3": Frontend.pygame,
}


# -- helpers ------------------------------------------------------------------


def _load_runner(frontend: Frontend) -> ModuleType:
    return importlib.import_module(_RUNNERS[frontend])


def _launch(frontend: Frontend, settings: Settings, width: int, height: int) -> None:
    logger.info("launching %s frontend with %s", frontend, settings)
    try:
        mod = _load_runner(frontend)
        mod.run(settings, width=width, height=height)
    except (ImportError, OSError, RuntimeError) as exc:
        logger.error("could not start the %s frontend: %s", frontend, exc)
        typer.echo(f"Could not start the {frontend} frontend: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _menu_loop(settings: Settings, width: int, height: int) -> None:
    while True:
        print()
        print("  ====================================")
        print("       T O W E R   O F   H A N O I    ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame Window)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in _CHOICES:
            _launch(_CHOICES[choice], settings, width, height)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive launcher.",
    ),
    poles: int = typer.Option(
        SETTINGS_DEFAULT[0], "-p", "--poles",
        min=SETTINGS_BOUNDS[0][0], max=SETTINGS_BOUNDS[0][1],
        help="Initial pole count (3-7).",
    ),
    disks: int = typer.Option(
        SETTINGS_DEFAULT[1], "-d", "--disks",
        min=SETTINGS_BOUNDS[1][0], max=SETTINGS_BOUNDS[1][1],
        help="Initial disk count (1-12).",
    ),
    width: int = typer.Option(
        MIN_WIDTH, "--width", min=40,
        help="Glyph grid width in columns.",
    ),
    height: int = typer.Option(
        MIN_HEIGHT, "--height", min=20,
        help="Glyph grid height in rows.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug diagnostics.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Write logs to this file instead of stderr.",
    ),
) -> None:
    """Tower of Hanoi."""
    setup_logging(verbose, log_file)
    settings = Settings.clamped(poles, disks)

    if frontend is None:
        _menu_loop(settings, width, height)
        return

    _launch(frontend, settings, width, height)


if __name__ == "__main__":
    app()
