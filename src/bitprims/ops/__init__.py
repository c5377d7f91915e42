"""BitOps: stateless bit-manipulation primitives over u8, i8 and u32."""

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
from bitprims.ops.eval import eval_call
from bitprims.ops.fields import (
    clear_lsb,
    find_msb,
    is_nth_bit_on,
    little_to_big_endian,
    set_bits,
    swap,
    swap_nibbles,
)
from bitprims.ops.models import BitCall, BitOp, ByteCell, VectorAxes
from bitprims.ops.queries import generate_all_queries, generate_op_queries
from bitprims.ops.validate import validate_op_queries

__all__ = [
    "BitCall",
    "BitOp",
    "ByteCell",
    "VectorAxes",
    "add",
    "clear_bit",
    "clear_lsb",
    "count_set_bits",
    "eval_call",
    "find_msb",
    "format_binary",
    "generate_all_queries",
    "generate_op_queries",
    "get_bit_status",
    "is_even",
    "is_nth_bit_on",
    "is_power_of_2",
    "little_to_big_endian",
    "multiply_by_n",
    "set_bit",
    "set_bits",
    "size_of_using_bitwise",
    "subtract",
    "swap",
    "swap_nibbles",
    "toggle_bit",
    "validate_op_queries",
    "xor_without_operator",
]
