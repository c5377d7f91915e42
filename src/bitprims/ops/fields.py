"""Byte order, bit-field and in-place swap helpers."""

from bitprims.core.widths import (
    U32_BITS,
    require_field,
    require_position,
    wrap_u8,
    wrap_u32,
)
from bitprims.ops.models import ByteCell


def little_to_big_endian(x: int) -> int:
    value = wrap_u32(x)
    return (
        ((value & 0xFF000000) >> 24)
        | ((value & 0x00FF0000) >> 8)
        | ((value & 0x0000FF00) << 8)
        | ((value & 0x000000FF) << 24)
    )


def is_nth_bit_on(x: int, n: int) -> bool:
    return (wrap_u32(x) & (1 << require_position(n, U32_BITS, "n"))) != 0


def set_bits(x: int, p: int, n: int, y: int) -> int:
    """Overwrite the n-bit field of ``x`` whose top bit is ``p`` with ``y``.

    Only the low ``n`` bits of ``y`` are used. Bits outside the field are
    preserved. ``n == 0`` leaves ``x`` unchanged.
    """
    require_field(p, n)
    shift = p - n + 1
    mask = (1 << n) - 1
    field = (wrap_u8(y) & mask) << shift
    return (wrap_u8(x) & ~(mask << shift) & 0xFF) | field


def swap(a: ByteCell, b: ByteCell) -> None:
    """Exchange two byte cells in place with an XOR swap."""
    # XOR-swapping a cell with itself would zero it.
    if a is b:
        return
    a.value ^= b.value
    b.value ^= a.value
    a.value ^= b.value


def clear_lsb(x: int) -> int:
    value = wrap_u8(x)
    return value & (value - 1) & 0xFF


def find_msb(x: int) -> int:
    """Return the bit length of ``x``: 0 for 0, 1 for 1, 8 for 255.

    The count is 1-based (number of right shifts to reach zero), not the
    0-based index of the highest set bit.
    """
    value = wrap_u8(x)
    msb = 0
    while value:
        value >>= 1
        msb += 1
    return msb


def swap_nibbles(x: int) -> int:
    value = wrap_u8(x)
    return ((value & 0x0F) << 4) | ((value & 0xF0) >> 4)
