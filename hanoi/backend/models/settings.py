"""Game rules chosen in the menu."""

from __future__ import annotations

from dataclasses import dataclass

LABELS: tuple[str, str] = ("Poles", "Disks")

# (min, max) per setting, in LABELS order
SETTINGS_BOUNDS: tuple[tuple[int, int], tuple[int, int]] = (
    (3, 7),
    (1, 12),
)

SETTINGS_DEFAULT: tuple[int, int] = (3, 3)


def _clamp(value: int, index: int) -> int:
    lo, hi = SETTINGS_BOUNDS[index]
    return max(lo, min(hi, value))


@dataclass
class Settings:
    poles: int = SETTINGS_DEFAULT[0]
    disks: int = SETTINGS_DEFAULT[1]

    @classmethod
    def clamped(cls, poles: int, disks: int) -> Settings:
        """Build settings with both values forced into their bounds."""
        return cls(poles=_clamp(poles, 0), disks=_clamp(disks, 1))

    @property
    def values(self) -> tuple[int, int]:
        return (self.poles, self.disks)

    def adjust(self, index: int, delta: int) -> None:
        """Step setting *index* (0 = poles, 1 = disks) by *delta*, clamped."""
        if index == 0:
            self.poles = _clamp(self.poles + delta, 0)
        elif index == 1:
            self.disks = _clamp(self.disks + delta, 1)
        else:
            raise IndexError(f"No setting at index {index}.")
