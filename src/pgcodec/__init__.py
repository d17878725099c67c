"""pgcodec: procedurally generated galaxy sector names, system names and 64-bit addresses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._address import AddressLayout, address64_for, system_for
from ._errors import (
    AddressRangeError,
    InvalidSystemNameError,
    PGError,
    PGSystemError,
    UnknownSectorError,
)
from ._hash import is_c1_offset, jenkins32
from ._interleave import deinterleave2, deinterleave3, interleave2, interleave3
from ._names import (
    canonical_name,
    format_system_name,
    is_valid_name,
    is_valid_sector_name,
    system_name_fragments,
)
from ._system import PGSystem
from ._types import INVALID_COORDINATE, Fragment, GridCoordinate, SystemNameParts
from ._vocabulary import RunLengthTable, Vocabulary, build_vocabulary

if TYPE_CHECKING:
    from collections.abc import Sequence

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "name_for",
    "coordinate_for",
    "address64_for",
    "system_for",
    "canonical_name",
    "format_system_name",
    "is_valid_name",
    "is_valid_sector_name",
    "system_name_fragments",
    "AddressLayout",
    "AddressRangeError",
    "Fragment",
    "GridCoordinate",
    "INVALID_COORDINATE",
    "InvalidSystemNameError",
    "PGError",
    "PGSystem",
    "PGSystemError",
    "RunLengthTable",
    "SectorCodec",
    "SystemNameParts",
    "UnknownSectorError",
    "Vocabulary",
    "build_vocabulary",
    "deinterleave2",
    "deinterleave3",
    "interleave2",
    "interleave3",
    "is_c1_offset",
    "jenkins32",
]


def load(vocabulary: Vocabulary | None = None) -> "SectorCodec":
    """Return a ready-to-use SectorCodec.

    Args:
        vocabulary: Fragment tables to use. If None, uses the shared
            built-in vocabulary.
    """
    from ._sectors import SectorCodec

    return SectorCodec(vocabulary)


def name_for(coordinate: GridCoordinate | Sequence[int]) -> str | None:
    """Sector name of a grid cell, using the shared codec."""
    from ._sectors import default_codec

    return default_codec().name_for(coordinate)


def coordinate_for(name: str) -> GridCoordinate:
    """Grid cell of a sector name, using the shared codec."""
    from ._sectors import default_codec

    return default_codec().coordinate_for(name)


# Deferred import so SectorCodec is available as pgcodec.SectorCodec
# without importing the codec at package import time.
def __getattr__(name: str):
    if name == "SectorCodec":
        from ._sectors import SectorCodec
        return SectorCodec
    raise AttributeError(f"module 'pgcodec' has no attribute {name!r}")
