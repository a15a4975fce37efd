"""Positions on a device, given relative to its start, its end, or its size."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U64_MAX = 2**64 - 1


class SectorKind(enum.Enum):
    """How the value of a sector position is to be read."""

    START = 0
    END = 1
    UNIT = 2
    UNIT_FROM_END = 3
    MEGABYTE = 4
    MEGABYTE_FROM_END = 5
    PERCENT = 6


@dataclass(frozen=True)
class Sector:
    """A sector position: a kind and the value it applies to."""

    kind: SectorKind
    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.kind, SectorKind):
            raise TypeError(f"sector kind must be a SectorKind, not {self.kind!r}")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"sector value must be an integer, not {self.value!r}")
        if not 0 <= self.value <= _U64_MAX:
            raise ValueError(f"sector value out of range: {self.value}")
        if self.kind is SectorKind.PERCENT and self.value > 100:
            raise ValueError(f"percentage above 100: {self.value}")

    @classmethod
    def start(cls) -> "Sector":
        """The first usable sector."""
        return cls(SectorKind.START)

    @classmethod
    def end(cls) -> "Sector":
        """The last usable sector."""
        return cls(SectorKind.END)

    @classmethod
    def unit(cls, value: int) -> "Sector":
        """An absolute sector number."""
        return cls(SectorKind.UNIT, value)

    @classmethod
    def unit_from_end(cls, value: int) -> "Sector":
        """A number of sectors back from the end."""
        return cls(SectorKind.UNIT_FROM_END, value)

    @classmethod
    def megabyte(cls, value: int) -> "Sector":
        """A position a number of megabytes from the start."""
        return cls(SectorKind.MEGABYTE, value)

    @classmethod
    def megabyte_from_end(cls, value: int) -> "Sector":
        """A position a number of megabytes back from the end."""
        return cls(SectorKind.MEGABYTE_FROM_END, value)

    @classmethod
    def percent(cls, value: int) -> "Sector":
        """A position given as a percentage of the device, from 0 to 100."""
        return cls(SectorKind.PERCENT, value)