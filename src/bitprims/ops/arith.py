"""Arithmetic built only from bitwise operators.

Operands are carried in an 8-bit register: every intermediate is masked back
to 8 bits, so overflow wraps modulo 256 instead of growing. ``add`` and
``subtract`` reinterpret the final register as two's-complement i8.
"""

from bitprims.core.widths import U8_BITS, U8_MASK, wrap_i8, wrap_u8


def _add_u8(x: int, y: int) -> int:
    while y:
        carry = x & y
        x = x ^ y
        y = (carry << 1) & U8_MASK
    return x


def _sub_u8(x: int, y: int) -> int:
    while y:
        borrow = ~x & y & U8_MASK
        x = x ^ y
        y = (borrow << 1) & U8_MASK
    return x


def add(x: int, y: int) -> int:
    return wrap_i8(_add_u8(wrap_u8(x), wrap_u8(y)))


def subtract(x: int, y: int) -> int:
    return wrap_i8(_sub_u8(wrap_u8(x), wrap_u8(y)))


def xor_without_operator(x: int, y: int) -> int:
    a = wrap_u8(x)
    b = wrap_u8(y)
    return (a | b) & (~a | ~b) & U8_MASK


def size_of_using_bitwise() -> int:
    """Return the byte width of the 8-bit working register.

    A single set bit is shifted left until it falls off the masked register;
    the number of shifts is the register width in bits.
    """
    size = 0
    sentinel = 1
    while sentinel:
        sentinel = (sentinel << 1) & U8_MASK
        size += 1
    return size >> 3


def multiply_by_n(x: int, n: int) -> int:
    multiplier = wrap_u8(x)
    bits = wrap_u8(n)
    result = 0
    for i in range(U8_BITS):
        if bits & (1 << i):
            result = _add_u8(result, multiplier)
        multiplier = (multiplier << 1) & U8_MASK
    return result
