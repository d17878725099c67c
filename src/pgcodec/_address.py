"""64-bit system addresses: two independent bit layouts.

legacy (55 bits used, size class sc = 0..7)::

    bits 0-2                size class
    bits 3 .. 16-sc         z lane   (14-sc bits: sector z << (7-sc) | mid z)
    bits 17-sc .. 29-2sc    y lane   (13-sc bits: sector y << (7-sc) | mid y)
    bits 30-2sc .. 43-3sc   x lane   (14-sc bits: sector x << (7-sc) | mid x)
    bits 44-3sc .. 54       sequence (11+3sc bits)

mod::

    bits 0-15   sequence
    bits 16-36  mid (x, y, z lanes of 7 bits each)
    bits 37-39  size class
    bits 40-46  sector x
    bits 47-52  sector y
    bits 53-59  sector z
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from ._errors import AddressRangeError, UnknownSectorError
from ._sectors import default_codec
from ._system import PGSystem
from ._types import GridCoordinate

if TYPE_CHECKING:
    from ._sectors import SectorCodec

_LANE_MASK = 0x7F
_MID_BITS = 21
_SECTOR_Y_BITS = 6
_MOD_SEQUENCE_BITS = 16


class AddressLayout(enum.Enum):
    LEGACY = "legacy"
    MOD = "mod"


def _lanes(mid: int) -> tuple[int, int, int]:
    return mid & _LANE_MASK, (mid >> 7) & _LANE_MASK, (mid >> 14) & _LANE_MASK


def _region_sector(system: PGSystem, codec: SectorCodec) -> GridCoordinate:
    if not codec.is_generated_name(system.region_name):
        raise UnknownSectorError(f"{system.region_name!r} is not a PG sector name")
    sector = codec.coordinate_for(system.region_name)
    if sector.y >> _SECTOR_Y_BITS:
        raise AddressRangeError(f"sector {sector} is outside the addressable y range")
    return sector


def _region_name(sector: GridCoordinate, codec: SectorCodec) -> str:
    name = codec.name_for(sector)
    if name is None:
        raise UnknownSectorError(f"sector {sector} has no generated name")
    return name


def _legacy_address(system: PGSystem, sector: GridCoordinate) -> int:
    sc = system.size_class
    lane_bits = 7 - sc
    mid = system.mid
    mx, my, mz = _lanes(mid)
    if mid >> _MID_BITS or (mx | my | mz) >> lane_bits:
        raise AddressRangeError(
            f"mid {mid} does not fit {lane_bits}-bit lanes for size class {system.mcode}"
        )
    seq_bits = 11 + 3 * sc
    if system.sequence >> seq_bits:
        raise AddressRangeError(
            f"sequence {system.sequence} exceeds {seq_bits} bits for size class {system.mcode}"
        )

    x = mx + (sector.x << lane_bits)
    y = my + (sector.y << lane_bits)
    z = mz + (sector.z << lane_bits)
    return (
        sc
        | (z << 3)
        | (y << (17 - sc))
        | (x << (30 - 2 * sc))
        | (system.sequence << (44 - 3 * sc))
    )


def _legacy_system(address: int, codec: SectorCodec) -> PGSystem:
    sc = address & 7
    lane_bits = 7 - sc
    lane_mask = (1 << lane_bits) - 1
    z = (address >> 3) & ((1 << (14 - sc)) - 1)
    y = (address >> (17 - sc)) & ((1 << (13 - sc)) - 1)
    x = (address >> (30 - 2 * sc)) & ((1 << (14 - sc)) - 1)
    seq = (address >> (44 - 3 * sc)) & ((1 << (11 + 3 * sc)) - 1)

    sector = GridCoordinate(x >> lane_bits, y >> lane_bits, z >> lane_bits)
    mid = (x & lane_mask) | ((y & lane_mask) << 7) | ((z & lane_mask) << 14)
    return PGSystem.from_mid(_region_name(sector, codec), mid, sc, seq)


def _mod_address(system: PGSystem, sector: GridCoordinate) -> int:
    mid = system.mid
    if mid >> _MID_BITS:
        raise AddressRangeError(f"mid {mid} exceeds {_MID_BITS} bits")
    if system.sequence >> _MOD_SEQUENCE_BITS:
        raise AddressRangeError(
            f"sequence {system.sequence} exceeds {_MOD_SEQUENCE_BITS} bits"
        )
    return (
        system.sequence
        | (mid << 16)
        | (system.size_class << 37)
        | (sector.x << 40)
        | (sector.y << 47)
        | (sector.z << 53)
    )


def _mod_system(address: int, codec: SectorCodec) -> PGSystem:
    seq = address & 0xFFFF
    mid = (address >> 16) & 0x1FFFFF
    sc = (address >> 37) & 7
    sector = GridCoordinate(
        (address >> 40) & _LANE_MASK,
        (address >> 47) & 0x3F,
        (address >> 53) & _LANE_MASK,
    )
    return PGSystem.from_mid(_region_name(sector, codec), mid, sc, seq)


def address64_for(
    system: PGSystem,
    layout: AddressLayout | str = AddressLayout.LEGACY,
    codec: SectorCodec | None = None,
) -> int:
    """Pack a system descriptor into a 64-bit address.

    Raises:
        UnknownSectorError: the region name is not a PG sector name.
        AddressRangeError: a field does not fit the layout.
    """
    layout = AddressLayout(layout)
    codec = codec if codec is not None else default_codec()
    sector = _region_sector(system, codec)
    if layout is AddressLayout.LEGACY:
        return _legacy_address(system, sector)
    return _mod_address(system, sector)


def system_for(
    address: int,
    layout: AddressLayout | str = AddressLayout.LEGACY,
    codec: SectorCodec | None = None,
) -> PGSystem:
    """Unpack a 64-bit address into a system descriptor.

    Raises:
        UnknownSectorError: the addressed sector cell has no generated name.
        AddressRangeError: the address is negative.
    """
    layout = AddressLayout(layout)
    address = int(address)
    if address < 0:
        raise AddressRangeError(f"address must be non-negative, got {address}")
    codec = codec if codec is not None else default_codec()
    if layout is AddressLayout.LEGACY:
        return _legacy_system(address, codec)
    return _mod_system(address, codec)
