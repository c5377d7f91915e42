import logging
from collections.abc import Callable
from typing import Any

from bitprims.core.widths import wrap_u8
from bitprims.ops.arith import (
    add,
    multiply_by_n,
    size_of_using_bitwise,
    subtract,
    xor_without_operator,
)
from bitprims.ops.bits import (
    clear_bit,
    count_set_bits,
    format_binary,
    get_bit_status,
    is_even,
    is_power_of_2,
    set_bit,
    toggle_bit,
)
from bitprims.ops.fields import (
    clear_lsb,
    find_msb,
    is_nth_bit_on,
    little_to_big_endian,
    set_bits,
    swap,
    swap_nibbles,
)
from bitprims.ops.models import BitCall, BitOp, ByteCell

_LOGGER = logging.getLogger(__name__)


def _eval_swap(x: int, y: int) -> list[int]:
    a = ByteCell(value=wrap_u8(x))
    b = ByteCell(value=wrap_u8(y))
    swap(a, b)
    return [a.value, b.value]


_DISPATCH: dict[BitOp, Callable[..., Any]] = {
    BitOp.SET_BIT: set_bit,
    BitOp.CLEAR_BIT: clear_bit,
    BitOp.TOGGLE_BIT: toggle_bit,
    BitOp.GET_BIT_STATUS: get_bit_status,
    BitOp.IS_EVEN: is_even,
    BitOp.FORMAT_BINARY: format_binary,
    BitOp.COUNT_SET_BITS: count_set_bits,
    BitOp.IS_POWER_OF_2: is_power_of_2,
    BitOp.SUBTRACT: subtract,
    BitOp.ADD: add,
    BitOp.XOR_WITHOUT_OPERATOR: xor_without_operator,
    BitOp.SIZE_OF_USING_BITWISE: size_of_using_bitwise,
    BitOp.LITTLE_TO_BIG_ENDIAN: little_to_big_endian,
    BitOp.MULTIPLY_BY_N: multiply_by_n,
    BitOp.IS_NTH_BIT_ON: is_nth_bit_on,
    BitOp.SET_BITS: set_bits,
    BitOp.SWAP: _eval_swap,
    BitOp.CLEAR_LSB: clear_lsb,
    BitOp.FIND_MSB: find_msb,
    BitOp.SWAP_NIBBLES: swap_nibbles,
}


def eval_call(call: BitCall) -> int | bool | str | list[int]:
    """Run the primitive named by ``call`` on its arguments.

    ``swap`` is run on two fresh byte cells and reported as the swapped pair.
    Precondition errors from the primitive propagate unchanged.
    """
    fn = _DISPATCH.get(call.op)
    if fn is None:  # pragma: no cover
        raise ValueError(f"Unsupported op: {call.op.value}")
    result = fn(*call.args)
    _LOGGER.debug("eval %s%s -> %r", call.op.value, tuple(call.args), result)
    return result
