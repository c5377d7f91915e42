from enum import Enum

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Issue(BaseModel):
    code: str = Field(description="Issue code, e.g. QUERY_OUTPUT_MISMATCH")
    severity: Severity = Field(description="Error or warning")
    message: str = Field(description="Human-readable description")
    location: str = Field(description="Path to issue, e.g. queries[7]")
    op: str | None = Field(
        default=None, description="Primitive name for aggregation"
    )
