"""Validation models — violation kinds, violations, and the report structure.

All validation is deterministic: same input → same output. A report serialized
with `model_dump_json()` is byte-identical across runs on the same document.
"""

from collections import Counter
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ViolationKind(str, Enum):
    """Closed set of defect kinds external tooling can pattern-match on."""

    MISSING_REQUIRED = "missing-required"
    WRONG_TYPE = "wrong-type"
    UNKNOWN_PROPERTY = "unknown-property"
    PATTERN_MISMATCH = "pattern-mismatch"
    OUT_OF_RANGE = "out-of-range"
    CARDINALITY = "cardinality"
    ENUM_MISMATCH = "enum-mismatch"


class Violation(BaseModel):
    """A single defect found in a document."""

    location: str = Field(description="JSON Pointer from the document root; '' is the root")
    kind: ViolationKind
    message: str
    suggestion: Optional[str] = None  # How to fix it

    model_config = {"use_enum_values": True, "frozen": True}


class ValidationReport(BaseModel):
    """Outcome of one validation pass, or of several merged passes."""

    valid: bool
    violations: list[Violation] = Field(default_factory=list)

    @classmethod
    def build(cls, violations: list[Violation]) -> "ValidationReport":
        """Build a report from a violation list, preserving its order."""
        return cls(valid=not violations, violations=list(violations))

    @classmethod
    def merge(cls, *reports: "ValidationReport") -> "ValidationReport":
        """Combine reports in order.

        `valid` is the AND of every report; violations are concatenated with
        each report's own ordering kept. Nothing is deduplicated.
        """
        violations: list[Violation] = []
        for report in reports:
            violations.extend(report.violations)
        return cls(valid=all(r.valid for r in reports), violations=violations)

    def counts_by_kind(self) -> dict[str, int]:
        """Number of violations per kind, keyed in first-seen order."""
        return dict(Counter(v.kind for v in self.violations))

    def at(self, location: str) -> list[Violation]:
        """Violations reported at exactly `location`."""
        return [v for v in self.violations if v.location == location]
