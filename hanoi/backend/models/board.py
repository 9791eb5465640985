"""Board model for the Tower of Hanoi game."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Board:
    """Represents the puzzle board.

    Each pole is a list of disk sizes stored bottom-first, so the last
    element is the top disk.  ``held_disk`` is the disk lifted by the
    cursor, or ``None`` when the cursor is empty-handed.
    """

    poles: list[list[int]]
    disk_count: int
    cursor: int = 0
    held_disk: int | None = None
    move_count: int = 0
    last_dropped: int | None = field(default=None, repr=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def new(cls, pole_count: int, disk_count: int) -> Board:
        """Create a board with every disk stacked on the first pole.

        Example::

            Board.new(3, 3).poles == [[3, 2, 1], [], []]
        """
        if pole_count < 1:
            raise ValueError(f"A board needs at least one pole, got {pole_count}.")
        if disk_count < 0:
            raise ValueError(f"Disk count cannot be negative, got {disk_count}.")
        board = cls(poles=[[] for _ in range(pole_count)], disk_count=disk_count)
        board.poles[0] = cls._start_stack(disk_count)
        return board

    @staticmethod
    def _start_stack(disk_count: int) -> list[int]:
        return list(range(disk_count, 0, -1))

    # -- queries --------------------------------------------------------------

    @property
    def pole_count(self) -> int:
        return len(self.poles)

    def top(self, index: int) -> int | None:
        """Return the top disk of pole *index*, or ``None`` if it is empty."""
        pole = self.poles[index]
        return pole[-1] if pole else None

    def disks(self) -> list[int]:
        """Every disk on the board, held one included, in ascending order."""
        found = [disk for pole in self.poles for disk in pole]
        if self.held_disk is not None:
            found.append(self.held_disk)
        return sorted(found)

    def copy(self) -> Board:
        return Board(
            poles=[pole[:] for pole in self.poles],
            disk_count=self.disk_count,
            cursor=self.cursor,
            held_disk=self.held_disk,
            move_count=self.move_count,
            last_dropped=self.last_dropped,
        )

    # -- mutations ------------------------------------------------------------

    def move_cursor(self, delta: int) -> None:
        self.cursor = max(min(self.cursor + delta, self.pole_count - 1), 0)

    def grab(self) -> bool:
        """Lift the top disk of the pole under the cursor.

        Returns True if a disk was picked up.
        """
        if self.held_disk is not None:
            logger.debug("grab ignored: disk %d already held", self.held_disk)
            return False
        pole = self.poles[self.cursor]
        if not pole:
            logger.debug("grab ignored: pole %d is empty", self.cursor)
            return False
        self.held_disk = pole.pop()
        return True

    def drop(self) -> bool:
        """Place the held disk on the pole under the cursor.

        A disk cannot rest on a smaller one; such a drop is rejected and
        the disk stays held.  Returns True if the disk was placed.  The
        move counter only advances when the placed disk differs from the
        one placed before it.
        """
        if self.held_disk is None:
            logger.debug("drop ignored: nothing held")
            return False
        top = self.top(self.cursor)
        if top is not None and top < self.held_disk:
            logger.debug(
                "drop rejected: disk %d on top of %d (pole %d)",
                self.held_disk, top, self.cursor,
            )
            return False

        disk = self.held_disk
        self.poles[self.cursor].append(disk)
        self.held_disk = None
        if disk != self.last_dropped:
            self.move_count += 1
        self.last_dropped = disk
        return True

    def reset(self) -> None:
        """Put every disk back on the first pole and clear the score."""
        self.poles = [[] for _ in range(self.pole_count)]
        self.poles[0] = self._start_stack(self.disk_count)
        self.held_disk = None
        self.move_count = 0
        self.last_dropped = None
