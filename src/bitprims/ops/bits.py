"""Single-bit access, counting and formatting over u8 values."""

from bitprims.core.widths import U8_BITS, require_position, wrap_u8


def set_bit(x: int, p: int) -> int:
    return wrap_u8(x) | (1 << require_position(p))


def clear_bit(x: int, p: int) -> int:
    return wrap_u8(x) & ~(1 << require_position(p)) & 0xFF


def toggle_bit(x: int, p: int) -> int:
    return wrap_u8(x) ^ (1 << require_position(p))


def get_bit_status(x: int, p: int) -> int:
    return (wrap_u8(x) >> require_position(p)) & 1


def is_even(x: int) -> bool:
    return not (wrap_u8(x) & 1)


def format_binary(x: int) -> str:
    """Render ``x`` as eight '0'/'1' characters, most significant bit first."""
    value = wrap_u8(x)
    return "".join(
        "1" if value & (1 << i) else "0" for i in range(U8_BITS - 1, -1, -1)
    )


def count_set_bits(x: int) -> int:
    value = wrap_u8(x)
    count = 0
    while value:
        count += value & 1
        value >>= 1
    return count


def is_power_of_2(x: int) -> bool:
    value = wrap_u8(x)
    return value != 0 and (value & (value - 1)) == 0
