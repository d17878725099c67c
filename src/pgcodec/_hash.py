"""32-bit Jenkins integer hash used to pick a sector's naming grammar."""

_MASK32: int = 0xFFFFFFFF


def jenkins32(key: int) -> int:
    """Avalanche-mix a 32-bit integer (all arithmetic modulo 2**32)."""
    key &= _MASK32
    key = (key + (key << 12)) & _MASK32
    key ^= key >> 22
    key = (key + (key << 4)) & _MASK32
    key ^= key >> 9
    key = (key + (key << 10)) & _MASK32
    key ^= key >> 2
    key = (key + (key << 7)) & _MASK32
    key ^= key >> 12
    return key


def is_c1_offset(offset: int) -> bool:
    """True if the sector at this linear offset uses the single-word grammar."""
    return (jenkins32(offset) & 1) == 0
