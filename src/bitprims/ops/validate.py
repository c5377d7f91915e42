import logging
from typing import Any

from pydantic import ValidationError

from bitprims.core.models import Query
from bitprims.core.validate import Issue, Severity
from bitprims.core.widths import BitArgumentError
from bitprims.ops.eval import eval_call
from bitprims.ops.models import OP_SIGNATURES, BitCall, BitOp

CODE_QUERY_INPUT_TYPE = "QUERY_INPUT_TYPE"
CODE_QUERY_ARITY = "QUERY_ARITY"
CODE_QUERY_PRECONDITION = "QUERY_PRECONDITION"
CODE_QUERY_OUTPUT_MISMATCH = "QUERY_OUTPUT_MISMATCH"

_LOGGER = logging.getLogger(__name__)


def _coerce_query_input(value: Any) -> list[int] | None:
    if not isinstance(value, (list, tuple)):
        return None
    if not all(
        isinstance(item, int) and not isinstance(item, bool) for item in value
    ):
        return None
    return list(value)


def _outputs_match(expected: Any, actual: Any) -> bool:
    if type(expected) is not type(actual):
        return False
    return expected == actual


def validate_op_queries(
    op: BitOp,
    queries: list[Query],
    strict: bool = True,
) -> list[Issue]:
    """Check reference vectors for ``op`` against the primitive itself."""
    issues: list[Issue] = []
    severity = Severity.ERROR if strict else Severity.WARNING
    arity = len(OP_SIGNATURES[op])

    def _issue(code: str, message: str, location: str) -> None:
        issues.append(
            Issue(
                code=code,
                severity=severity,
                message=message,
                location=location,
                op=op.value,
            )
        )

    for i, query in enumerate(queries):
        args = _coerce_query_input(query.input)
        if args is None:
            _issue(
                CODE_QUERY_INPUT_TYPE,
                "Query input must be list[int] (bool not allowed)",
                f"queries[{i}].input",
            )
            continue
        if len(args) != arity:
            _issue(
                CODE_QUERY_ARITY,
                f"Expected {arity} args but found {len(args)}",
                f"queries[{i}].input",
            )
            continue

        try:
            expected = eval_call(BitCall(op=op, args=args))
        except (BitArgumentError, ValidationError) as exc:
            _issue(
                CODE_QUERY_PRECONDITION,
                f"Input {args} violates a precondition: {exc}",
                f"queries[{i}].input",
            )
            continue

        if not _outputs_match(expected, query.output):
            _issue(
                CODE_QUERY_OUTPUT_MISMATCH,
                (
                    f"Expected output {expected!r} but found "
                    f"{query.output!r} for input {args}"
                ),
                f"queries[{i}].output",
            )

    _LOGGER.debug(
        "validated %d queries for %s: %d issues",
        len(queries),
        op.value,
        len(issues),
    )
    return issues
