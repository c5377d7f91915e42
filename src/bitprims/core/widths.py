"""Fixed-width integer helpers for 8-bit and 32-bit emulation."""

U8_BITS = 8
U8_MASK = (1 << U8_BITS) - 1
I8_MIN = -(1 << (U8_BITS - 1))
I8_MAX = (1 << (U8_BITS - 1)) - 1

U32_BITS = 32
U32_MASK = (1 << U32_BITS) - 1


class BitArgumentError(ValueError):
    """Raised when a bit position or field argument is out of its domain."""


def _require_int(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


def wrap_u8(value: int) -> int:
    """Truncate an integer to its low 8 bits."""
    return _require_int(value, "value") & U8_MASK


def wrap_i8(value: int) -> int:
    """Wrap an integer into signed 8-bit range."""
    return ((_require_int(value, "value") - I8_MIN) & U8_MASK) + I8_MIN


def wrap_u32(value: int) -> int:
    return _require_int(value, "value") & U32_MASK


def require_position(p: int, width_bits: int = U8_BITS, name: str = "p") -> int:
    _require_int(p, name)
    if p < 0 or p >= width_bits:
        raise BitArgumentError(
            f"{name} must be in [0, {width_bits - 1}], got {p}"
        )
    return p


def require_field(p: int, n: int) -> tuple[int, int]:
    """Check that an n-bit field with its top bit at p fits in a byte."""
    require_position(p)
    _require_int(n, "n")
    if n < 0 or n > p + 1:
        raise BitArgumentError(f"n must be in [0, {p + 1}] for p={p}, got {n}")
    return p, n
