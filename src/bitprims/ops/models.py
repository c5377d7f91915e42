from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bitprims.core.widths import I8_MAX, I8_MIN, U8_BITS, U8_MASK, U32_MASK

_INT_RANGE_FIELDS = (
    "u8_range",
    "i8_range",
    "u32_range",
)


def _validate_no_bool_int_range_bounds(data: Any) -> None:
    if not isinstance(data, dict):
        return

    for field_name in _INT_RANGE_FIELDS:
        value = data.get(field_name)
        if not isinstance(value, (tuple, list)) or len(value) != 2:
            continue
        low, high = value
        if isinstance(low, bool) or isinstance(high, bool):
            raise ValueError(
                f"{field_name}: bool is not allowed for int range bounds"
            )


class BitOp(str, Enum):
    SET_BIT = "set_bit"
    CLEAR_BIT = "clear_bit"
    TOGGLE_BIT = "toggle_bit"
    GET_BIT_STATUS = "get_bit_status"
    IS_EVEN = "is_even"
    FORMAT_BINARY = "format_binary"
    COUNT_SET_BITS = "count_set_bits"
    IS_POWER_OF_2 = "is_power_of_2"
    SUBTRACT = "subtract"
    ADD = "add"
    XOR_WITHOUT_OPERATOR = "xor_without_operator"
    SIZE_OF_USING_BITWISE = "size_of_using_bitwise"
    LITTLE_TO_BIG_ENDIAN = "little_to_big_endian"
    MULTIPLY_BY_N = "multiply_by_n"
    IS_NTH_BIT_ON = "is_nth_bit_on"
    SET_BITS = "set_bits"
    SWAP = "swap"
    CLEAR_LSB = "clear_lsb"
    FIND_MSB = "find_msb"
    SWAP_NIBBLES = "swap_nibbles"


class ArgKind(str, Enum):
    U8 = "u8"
    I8 = "i8"
    U32 = "u32"
    BIT8 = "bit8"
    BIT32 = "bit32"
    FIELD_WIDTH = "field_width"


# Inclusive domain of each argument kind.
ARG_DOMAINS: dict[ArgKind, tuple[int, int]] = {
    ArgKind.U8: (0, U8_MASK),
    ArgKind.I8: (I8_MIN, I8_MAX),
    ArgKind.U32: (0, U32_MASK),
    ArgKind.BIT8: (0, U8_BITS - 1),
    ArgKind.BIT32: (0, 31),
    ArgKind.FIELD_WIDTH: (0, U8_BITS),
}

_BIT_ARGS = (ArgKind.U8, ArgKind.BIT8)
_U8_PAIR = (ArgKind.U8, ArgKind.U8)
_I8_PAIR = (ArgKind.I8, ArgKind.I8)

OP_SIGNATURES: dict[BitOp, tuple[ArgKind, ...]] = {
    BitOp.SET_BIT: _BIT_ARGS,
    BitOp.CLEAR_BIT: _BIT_ARGS,
    BitOp.TOGGLE_BIT: _BIT_ARGS,
    BitOp.GET_BIT_STATUS: _BIT_ARGS,
    BitOp.IS_EVEN: (ArgKind.U8,),
    BitOp.FORMAT_BINARY: (ArgKind.U8,),
    BitOp.COUNT_SET_BITS: (ArgKind.U8,),
    BitOp.IS_POWER_OF_2: (ArgKind.U8,),
    BitOp.SUBTRACT: _I8_PAIR,
    BitOp.ADD: _I8_PAIR,
    BitOp.XOR_WITHOUT_OPERATOR: _U8_PAIR,
    BitOp.SIZE_OF_USING_BITWISE: (),
    BitOp.LITTLE_TO_BIG_ENDIAN: (ArgKind.U32,),
    BitOp.MULTIPLY_BY_N: _U8_PAIR,
    BitOp.IS_NTH_BIT_ON: (ArgKind.U32, ArgKind.BIT32),
    BitOp.SET_BITS: (
        ArgKind.U8,
        ArgKind.BIT8,
        ArgKind.FIELD_WIDTH,
        ArgKind.U8,
    ),
    BitOp.SWAP: _U8_PAIR,
    BitOp.CLEAR_LSB: (ArgKind.U8,),
    BitOp.FIND_MSB: (ArgKind.U8,),
    BitOp.SWAP_NIBBLES: (ArgKind.U8,),
}


class ByteCell(BaseModel):
    """Mutable u8 storage location, the target of ``swap``."""

    model_config = ConfigDict(validate_assignment=True)

    value: int = Field(default=0, ge=0, le=U8_MASK, strict=True)


class BitCall(BaseModel):
    op: BitOp
    args: list[int] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def validate_input_args(cls, data: Any) -> Any:
        if isinstance(data, dict):
            args = data.get("args")
            if isinstance(args, (list, tuple)) and any(
                isinstance(arg, bool) for arg in args
            ):
                raise ValueError("args: bool is not allowed")
        return data

    @model_validator(mode="after")
    def validate_arity(self) -> "BitCall":
        expected = len(OP_SIGNATURES[self.op])
        if len(self.args) != expected:
            raise ValueError(
                f"op '{self.op.value}' takes {expected} args, "
                f"got {len(self.args)}"
            )
        return self


class VectorAxes(BaseModel):
    n_typical: int = Field(default=4, ge=0, le=256)
    u8_range: tuple[int, int] = Field(default=(0, U8_MASK))
    i8_range: tuple[int, int] = Field(default=(I8_MIN, I8_MAX))
    u32_range: tuple[int, int] = Field(default=(0, U32_MASK))
    allowed_ops: list[BitOp] = Field(default_factory=lambda: list(BitOp))

    @model_validator(mode="before")
    @classmethod
    def validate_input_axes(cls, data: Any) -> Any:
        _validate_no_bool_int_range_bounds(data)
        return data

    @model_validator(mode="after")
    def validate_axes(self) -> "VectorAxes":
        if not self.allowed_ops:
            raise ValueError("allowed_ops must not be empty")

        for name, kind in (
            ("u8_range", ArgKind.U8),
            ("i8_range", ArgKind.I8),
            ("u32_range", ArgKind.U32),
        ):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ValueError(f"{name}: low ({lo}) must be <= high ({hi})")
            dom_lo, dom_hi = ARG_DOMAINS[kind]
            if lo < dom_lo or hi > dom_hi:
                raise ValueError(
                    f"{name}: must lie within [{dom_lo}, {dom_hi}]"
                )

        return self

    def range_for(self, kind: ArgKind) -> tuple[int, int]:
        if kind == ArgKind.U8:
            return self.u8_range
        if kind == ArgKind.I8:
            return self.i8_range
        if kind == ArgKind.U32:
            return self.u32_range
        return ARG_DOMAINS[kind]
