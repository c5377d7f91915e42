from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class QueryTag(str, Enum):
    TYPICAL = "typical"
    BOUNDARY = "boundary"
    COVERAGE = "coverage"
    ADVERSARIAL = "adversarial"


class Query(BaseModel):
    input: Any = Field(description="Primitive arguments, in call order")
    output: Any = Field(description="Expected primitive result")
    tag: QueryTag = Field(description="Query category for analysis")


def _freeze_query_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return (
            "__seq__",
            tuple(_freeze_query_value(item) for item in value),
        )
    # bool and int compare equal, keep them apart.
    return ("__scalar__", type(value).__qualname__, value)


def _query_outputs_equal(left: Any, right: Any) -> bool:
    if type(left) is not type(right):
        return False

    if isinstance(left, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(
            _query_outputs_equal(left_item, right_item)
            for left_item, right_item in zip(left, right, strict=False)
        )

    return left == right


def dedupe_queries(queries: list[Query]) -> list[Query]:
    """Deduplicate queries by input, preserving highest-value tag evidence."""

    tag_priority = {
        QueryTag.TYPICAL: 0,
        QueryTag.BOUNDARY: 1,
        QueryTag.ADVERSARIAL: 2,
        QueryTag.COVERAGE: 3,
    }

    seen_idx: dict[Any, int] = {}
    result: list[Query] = []
    for q in queries:
        key = _freeze_query_value(q.input)
        idx = seen_idx.get(key)
        if idx is None:
            seen_idx[key] = len(result)
            result.append(q)
            continue

        existing = result[idx]
        if not _query_outputs_equal(existing.output, q.output):
            raise ValueError(
                "Duplicate query input has conflicting outputs: "
                f"{existing.input!r} -> {existing.output!r} vs {q.output!r}"
            )

        if tag_priority[q.tag] > tag_priority[existing.tag]:
            result[idx] = Query(
                input=existing.input,
                output=existing.output,
                tag=q.tag,
            )
    return result
