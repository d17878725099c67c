"""Data structures for pgcodec."""

from __future__ import annotations

import functools
from dataclasses import dataclass

_GRID_MASK: int = 0x7F


@functools.total_ordering
@dataclass(slots=True, frozen=True)
class GridCoordinate:
    """A cell of the 128x128x128 sector grid, ordered by its linear offset."""

    x: int
    y: int
    z: int

    @property
    def offset(self) -> int:
        return self.x + self.y * 128 + self.z * 16384

    @property
    def is_valid(self) -> bool:
        return 0 <= self.x <= _GRID_MASK and 0 <= self.y <= _GRID_MASK and 0 <= self.z <= _GRID_MASK

    @classmethod
    def from_offset(cls, offset: int) -> GridCoordinate:
        return cls(
            offset & _GRID_MASK,
            (offset >> 7) & _GRID_MASK,
            (offset >> 14) & _GRID_MASK,
        )

    @classmethod
    def coerce(cls, value: GridCoordinate | tuple[int, int, int]) -> GridCoordinate:
        """Accept a GridCoordinate or any (x, y, z) sequence."""
        if isinstance(value, cls):
            return value
        x, y, z = value
        return cls(int(x), int(y), int(z))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GridCoordinate):
            return NotImplemented
        return self.offset < other.offset

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"


INVALID_COORDINATE = GridCoordinate(-128, -128, -128)


@dataclass(slots=True, frozen=True)
class Fragment:
    value: str            # lower-case text, the lookup key
    text: str             # canonical-case text from the vocabulary
    is_prefix: bool = False
    c1_consonant_infix: bool = False   # C1: first infix is a consonant infix
    c2_consonant_suffix: bool = False  # C2: suffix is a consonant suffix
    prefix_index: int = 0
    is_infix: bool = False
    vowel_infix: bool = False
    infix_index: int = 0
    is_suffix: bool = False
    vowel_suffix: bool = False     # family 1 suffix
    suffix_index: int = 0


@dataclass(slots=True, frozen=True)
class SystemNameParts:
    """Canonical pieces of a system name, e.g. "Blae Eock KC-C d0"."""

    sector_name: str
    l1: str
    l2: str
    l3: str
    mcode: str
    n1: int
    n2: int
