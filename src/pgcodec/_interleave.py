"""Morton-order bit interleaving of two and three integers.

Two-way interleaving packs the two C2 word indexes into a sector offset.
The three-way pair is exported as a standalone helper for Morton-ordering
grid coordinates; the codec itself does not use it.
"""

_MASK21: int = 0x1FFFFF
_MASK32: int = 0xFFFFFFFF


def _part1by1(v: int) -> int:
    # Spread the low 32 bits of v onto the even bit positions.
    v &= _MASK32
    v = (v | (v << 16)) & 0x0000FFFF0000FFFF
    v = (v | (v << 8)) & 0x00FF00FF00FF00FF
    v = (v | (v << 4)) & 0x0F0F0F0F0F0F0F0F
    v = (v | (v << 2)) & 0x3333333333333333
    v = (v | (v << 1)) & 0x5555555555555555
    return v


def _compact1by1(v: int) -> int:
    v &= 0x5555555555555555
    v = (v | (v >> 1)) & 0x3333333333333333
    v = (v | (v >> 2)) & 0x0F0F0F0F0F0F0F0F
    v = (v | (v >> 4)) & 0x00FF00FF00FF00FF
    v = (v | (v >> 8)) & 0x0000FFFF0000FFFF
    v = (v | (v >> 16)) & 0x00000000FFFFFFFF
    return v


def _part1by2(v: int) -> int:
    # Spread the low 21 bits of v onto every third bit position.
    v &= _MASK21
    v = (v | (v << 32)) & 0x001F00000000FFFF
    v = (v | (v << 16)) & 0x001F0000FF0000FF
    v = (v | (v << 8)) & 0x100F00F00F00F00F
    v = (v | (v << 4)) & 0x10C30C30C30C30C3
    v = (v | (v << 2)) & 0x1249249249249249
    return v


def _compact1by2(v: int) -> int:
    v &= 0x1249249249249249
    v = (v | (v >> 2)) & 0x10C30C30C30C30C3
    v = (v | (v >> 4)) & 0x100F00F00F00F00F
    v = (v | (v >> 8)) & 0x001F0000FF0000FF
    v = (v | (v >> 16)) & 0x001F00000000FFFF
    v = (v | (v >> 32)) & _MASK21
    return v


def interleave2(a: int, b: int) -> int:
    """Interleave two 32-bit values: bit i of a -> 2i, bit i of b -> 2i+1."""
    return _part1by1(a) | (_part1by1(b) << 1)


def deinterleave2(value: int) -> tuple[int, int]:
    """Inverse of interleave2."""
    return _compact1by1(value), _compact1by1(value >> 1)


def interleave3(x: int, y: int, z: int) -> int:
    """Interleave three 21-bit values: bits of x, y, z at 3i, 3i+1, 3i+2."""
    return _part1by2(x) | (_part1by2(y) << 1) | (_part1by2(z) << 2)


def deinterleave3(value: int) -> tuple[int, int, int]:
    """Inverse of interleave3."""
    return (
        _compact1by2(value),
        _compact1by2(value >> 1),
        _compact1by2(value >> 2),
    )
