"""Screens of the game's flow."""

from __future__ import annotations

from enum import StrEnum


class Screen(StrEnum):
    MENU = "menu"
    PLAY = "play"
    WIN = "win"
    EXIT = "exit"
