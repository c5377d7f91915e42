import random

from bitprims.core.models import Query, QueryTag, dedupe_queries
from bitprims.ops.eval import eval_call
from bitprims.ops.models import (
    OP_SIGNATURES,
    ArgKind,
    BitCall,
    BitOp,
    VectorAxes,
)

_COVERAGE_VALUES: dict[ArgKind, list[int]] = {
    ArgKind.U8: [0, 1, 0x7F, 0x80, 0xFF],
    ArgKind.I8: [0, 1, -1, 127, -128],
    ArgKind.U32: [0, 1, 0x12345678, 0x80000000, 0xFFFFFFFF],
    ArgKind.BIT8: [0, 7, 3],
    ArgKind.BIT32: [0, 31, 8],
    ArgKind.FIELD_WIDTH: [0, 1, 8],
}

_ADVERSARIAL_VALUES: dict[ArgKind, list[int]] = {
    ArgKind.U8: [0xAA, 0x55],
    ArgKind.I8: [-86, 0x55],
    ArgKind.U32: [0xAAAAAAAA, 0x55555555],
    ArgKind.BIT8: [4, 3],
    ArgKind.BIT32: [16, 15],
    ArgKind.FIELD_WIDTH: [4, 3],
}


def _fit_args(op: BitOp, args: list[int]) -> list[int]:
    # set_bits needs the field to fit below its top bit.
    if op == BitOp.SET_BITS:
        args[2] = min(args[2], args[1] + 1)
    return args


def _pick_args(
    op: BitOp, values: dict[ArgKind, list[int]], index: int
) -> list[int]:
    args = [
        values[kind][index % len(values[kind])] for kind in OP_SIGNATURES[op]
    ]
    return _fit_args(op, args)


def _sample_args(
    op: BitOp, axes: VectorAxes, rng: random.Random
) -> list[int]:
    args: list[int] = []
    for kind in OP_SIGNATURES[op]:
        if kind == ArgKind.FIELD_WIDTH and args:
            args.append(rng.randint(0, args[-1] + 1))
        else:
            args.append(rng.randint(*axes.range_for(kind)))
    return _fit_args(op, args)


def generate_op_queries(
    op: BitOp,
    axes: VectorAxes | None = None,
    rng: random.Random | None = None,
) -> list[Query]:
    """Build reference vectors for one primitive.

    Each query input is the argument list in call order; the output is what
    the primitive returns for it.
    """
    if axes is None:
        axes = VectorAxes()
    if rng is None:
        rng = random.Random()

    queries: list[Query] = []

    def _append_query(args: list[int], tag: QueryTag) -> None:
        queries.append(
            Query(
                input=args,
                output=eval_call(BitCall(op=op, args=args)),
                tag=tag,
            )
        )

    for i in range(max(len(v) for v in _COVERAGE_VALUES.values())):
        _append_query(_pick_args(op, _COVERAGE_VALUES, i), QueryTag.COVERAGE)

    # Alternate low/high bounds across arguments, then flip.
    for start in (0, 1):
        args = [
            axes.range_for(kind)[(start + k) % 2]
            for k, kind in enumerate(OP_SIGNATURES[op])
        ]
        _append_query(_fit_args(op, args), QueryTag.BOUNDARY)

    for _ in range(axes.n_typical):
        _append_query(_sample_args(op, axes, rng), QueryTag.TYPICAL)

    for i in range(2):
        _append_query(
            _pick_args(op, _ADVERSARIAL_VALUES, i), QueryTag.ADVERSARIAL
        )

    return dedupe_queries(queries)


def generate_all_queries(
    axes: VectorAxes | None = None,
    rng: random.Random | None = None,
) -> dict[BitOp, list[Query]]:
    if axes is None:
        axes = VectorAxes()
    if rng is None:
        rng = random.Random()
    return {op: generate_op_queries(op, axes, rng) for op in axes.allowed_ops}
