"""CLI tests — option handling and frontend dispatch, with frontends stubbed."""

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest
from typer.testing import CliRunner

from hanoi import main as cli
from hanoi.backend.models.settings import Settings
from hanoi.logger import setup_logging

runner = CliRunner()


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, Settings, int, int]]:
    """Replace frontend modules with a recorder."""
    calls: list[tuple[str, Settings, int, int]] = []

    def fake_load(frontend: cli.Frontend) -> SimpleNamespace:
        def run(settings: Settings, *, width: int, height: int) -> None:
            calls.append((cli._RUNNERS[frontend], settings, width, height))

        return SimpleNamespace(run=run)

    monkeypatch.setattr(cli, "_load_runner", fake_load)
    return calls


def test_frontend_option_launches_runner(launched: list) -> None:
    result = runner.invoke(cli.app, ["-f", "rich", "-p", "4", "-d", "6"])
    assert result.exit_code == 0, result.output
    assert launched == [("hanoi.frontend.cli.rich.app", Settings(4, 6), 128, 32)]


def test_grid_size_options(launched: list) -> None:
    result = runner.invoke(cli.app, ["-f", "vanilla", "--width", "90", "--height", "30"])
    assert result.exit_code == 0, result.output
    assert launched[0][2:] == (90, 30)


@pytest.mark.parametrize(
    "args",
    [["-p", "2"], ["-p", "8"], ["-d", "0"], ["-d", "13"], ["--width", "10"], ["-f", "qt"]],
)
def test_out_of_range_options_are_rejected(launched: list, args: list[str]) -> None:
    result = runner.invoke(cli.app, ["-f", "vanilla", *args])
    assert result.exit_code == 2
    assert launched == []


def test_interactive_launcher(launched: list) -> None:
    result = runner.invoke(cli.app, ["-d", "5"], input="9\n3\n0\n")
    assert result.exit_code == 0, result.output
    assert "Unknown option." in result.output
    assert "Goodbye!" in result.output
    assert launched == [("hanoi.frontend.gui.pygame.app", Settings(3, 5), 128, 32)]


def test_frontend_failure_exits_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_load(frontend: cli.Frontend) -> SimpleNamespace:
        raise ImportError("No module named 'pygame'")

    monkeypatch.setattr(cli, "_load_runner", broken_load)
    result = runner.invoke(cli.app, ["-f", "pygame"])
    assert result.exit_code == 1


@pytest.mark.parametrize("frontend", ["vanilla", "rich"])
def test_terminal_frontend_needs_a_tty(frontend: str) -> None:
    # CliRunner feeds stdin from a buffer, which is never a tty
    result = runner.invoke(cli.app, ["-f", frontend], input="\n")
    assert result.exit_code == 1
    assert f"Could not start the {frontend} frontend: stdin is not a terminal" in result.output


# -- logging ------------------------------------------------------------------


def test_setup_logging_levels() -> None:
    assert setup_logging().level == logging.WARNING
    logger = setup_logging(verbose=True)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "hanoi.log"
    logger = setup_logging(verbose=True, log_file=log_file)
    logging.getLogger("hanoi.backend.models.board").debug("drop rejected")
    for handler in logger.handlers:
        handler.flush()
    assert "drop rejected" in log_file.read_text()
    setup_logging()
