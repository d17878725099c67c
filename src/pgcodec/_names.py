"""Canonical casing and validity checks for sector and system names."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._sectors import default_codec
from ._system import PGSystem
from ._types import SystemNameParts

if TYPE_CHECKING:
    from ._sectors import SectorCodec


def system_name_fragments(
    name: str, codec: SectorCodec | None = None
) -> SystemNameParts | None:
    """Split a system name into canonical parts.

    Returns None if ``name`` is not a system name or its sector part is not
    a PG sector name.
    """
    system = PGSystem.try_parse(name.strip())
    if system is None:
        return None
    codec = codec if codec is not None else default_codec()
    sector_name = codec.canonical_sector_name(system.region_name)
    if sector_name is None:
        return None
    letters = system.format().split(" ")[-2]
    return SystemNameParts(
        sector_name=sector_name,
        l1=letters[0],
        l2=letters[1],
        l3=letters[3],
        mcode=system.mcode,
        n1=system.mid3,
        n2=system.sequence,
    )


def format_system_name(parts: SystemNameParts) -> str:
    """Format parts as "Sector AB-C d1-23", or "Sector AB-C d23" when n1 is 0."""
    letters = f"{parts.l1}{parts.l2}-{parts.l3}".upper()
    mcode = parts.mcode.lower()
    if parts.n1:
        return f"{parts.sector_name} {letters} {mcode}{parts.n1}-{parts.n2}"
    return f"{parts.sector_name} {letters} {mcode}{parts.n2}"


def canonical_name(
    name: str, sector_only: bool = False, codec: SectorCodec | None = None
) -> str | None:
    """Get the correctly-cased form of a sector or system name.

    Args:
        name: A system or sector name, in any case.
        sector_only: Return only the canonical sector part of a system name.

    Returns:
        The canonical name, or None if the sector part is not a PG sector.
    """
    codec = codec if codec is not None else default_codec()
    system = PGSystem.try_parse(name.strip())
    if system is None:
        return codec.canonical_sector_name(name)
    if sector_only:
        return codec.canonical_sector_name(system.region_name)
    parts = system_name_fragments(name, codec)
    if parts is None:
        return None
    return format_system_name(parts)


def is_valid_sector_name(name: str, codec: SectorCodec | None = None) -> bool:
    codec = codec if codec is not None else default_codec()
    return codec.is_generated_name(name)


def is_valid_name(
    name: str, strict: bool = False, codec: SectorCodec | None = None
) -> bool:
    """Check whether ``name`` is a valid PG system name.

    Args:
        name: A system name.
        strict: Also require the sector part to be a valid PG sector name.
    """
    if not name:
        return False
    system = PGSystem.try_parse(name.strip())
    if system is None:
        return False
    if strict:
        return is_valid_sector_name(system.region_name, codec)
    return True
