"""PGSystem: structured system descriptor and its canonical name form."""

from __future__ import annotations

import string
from dataclasses import dataclass

from ._errors import InvalidSystemNameError, PGSystemError

_MIN_NAME_LENGTH = 10  # "ab cd-e f0"
_MID_RADIX = 26
_N_SIZE_CLASSES = 8
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _letter(value: int) -> str:
    return chr(ord("a") + value)


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


@dataclass(slots=True, frozen=True)
class PGSystem:
    """A procedurally named system: "{region} {L1}{L2}-{L3} {mcode}{n1}-{n2}"."""

    region_name: str
    mid1a: int
    mid1b: int
    mid2: int
    size_class: int
    mid3: int = 0
    sequence: int = 0

    def __post_init__(self) -> None:
        for field in ("mid1a", "mid1b", "mid2"):
            value = getattr(self, field)
            if not 0 <= value < _MID_RADIX:
                raise PGSystemError(f"{field} must be in [0, {_MID_RADIX}), got {value}")
        if not 0 <= self.size_class < _N_SIZE_CLASSES:
            raise PGSystemError(
                f"size_class must be in [0, {_N_SIZE_CLASSES}), got {self.size_class}"
            )
        if self.mid3 < 0:
            raise PGSystemError(f"mid3 must be non-negative, got {self.mid3}")
        if self.sequence < 0:
            raise PGSystemError(f"sequence must be non-negative, got {self.sequence}")

    @property
    def mid(self) -> int:
        """The three letters and mid3 as one mixed-radix integer."""
        return ((self.mid3 * _MID_RADIX + self.mid2) * _MID_RADIX + self.mid1b) * _MID_RADIX + self.mid1a

    @property
    def mcode(self) -> str:
        return _letter(self.size_class)

    @classmethod
    def from_mid(cls, region_name: str, mid: int, size_class: int, sequence: int) -> PGSystem:
        rest, mid1a = divmod(mid, _MID_RADIX)
        rest, mid1b = divmod(rest, _MID_RADIX)
        mid3, mid2 = divmod(rest, _MID_RADIX)
        return cls(region_name, mid1a, mid1b, mid2, size_class, mid3, sequence)

    def format(self) -> str:
        letters = f"{_letter(self.mid1a)}{_letter(self.mid1b)}-{_letter(self.mid2)}".upper()
        if self.mid3:
            return f"{self.region_name} {letters} {self.mcode}{self.mid3}-{self.sequence}"
        return f"{self.region_name} {letters} {self.mcode}{self.sequence}"

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def parse(cls, name: str) -> PGSystem:
        """Parse a system name, raising InvalidSystemNameError on failure."""
        system = cls.try_parse(name)
        if system is None:
            raise InvalidSystemNameError(f"{name!r} is not a PG system name")
        return system

    @classmethod
    def try_parse(cls, name: str | None) -> PGSystem | None:
        """Parse a system name by scanning from the right, or return None.

        The region name keeps the case it was given in; every other part
        is case-insensitive.
        """
        if name is None or len(name) < _MIN_NAME_LENGTH:
            return None
        s = name.translate(_ASCII_LOWER)
        i = len(s) - 1
        if not _is_digit(s[i]):                        # region xy-z a1-[0]
            return None

        end = i
        while i > 8 and _is_digit(s[i]):
            i -= 1
        sequence = int(s[i + 1:end + 1])

        mid3 = 0
        if s[i] == "-":                                # region xy-z a1[-]0
            i -= 1
            end = i
            while i > 8 and _is_digit(s[i]):
                i -= 1
            if i == end:
                return None
            mid3 = int(s[i + 1:end + 1])

        if not "a" <= s[i] <= "h":                     # region xy-z [a]1-0
            return None
        size_class = ord(s[i]) - ord("a")
        i -= 1

        if s[i] != " ":                                # region xy-z[ ]a1-0
            return None
        i -= 1
        if not "a" <= s[i] <= "z":                     # region xy-[z] a1-0
            return None
        mid2 = ord(s[i]) - ord("a")
        i -= 1
        if s[i] != "-":                                # region xy[-]z a1-0
            return None
        i -= 1
        if not "a" <= s[i] <= "z":                     # region x[y]-z a1-0
            return None
        mid1b = ord(s[i]) - ord("a")
        i -= 1
        if not "a" <= s[i] <= "z":                     # region [x]y-z a1-0
            return None
        mid1a = ord(s[i]) - ord("a")
        i -= 1
        if s[i] != " ":                                # region[ ]xy-z a1-0
            return None

        region_name = name[:i]
        if not region_name.strip():
            return None
        return cls(region_name, mid1a, mid1b, mid2, size_class, mid3, sequence)
