"""Base validator — the interface every validation pass implements.

The structural and semantic passes, and any replacement for either, share
this contract so the engine can run and merge them interchangeably.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from palettejson.validators.models import ValidationReport, Violation, ViolationKind


class BaseValidator(ABC):
    """Abstract base for all document validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() accepts any decoded JSON value and never raises on it
        - validate() returns a list of Violation (empty = no issues)
        - No I/O, no randomness, no state kept between calls
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, document: Any) -> list[Violation]:
        """Run validation checks against the document.

        Args:
            document: Decoded PaletteJSON value (not necessarily an object)

        Returns:
            List of Violation findings (empty if no issues)
        """
        ...

    def report(self, document: Any) -> ValidationReport:
        """Run validate() and wrap the findings in a report."""
        return ValidationReport.build(self.validate(document))

    # ── Helper Methods ──

    def _violation(
        self,
        kind: ViolationKind,
        location: str,
        message: str,
        suggestion: Optional[str] = None,
    ) -> Violation:
        """Convenience method to create a Violation."""
        return Violation(location=location, kind=kind, message=message, suggestion=suggestion)


def pointer(base: str, *parts: Union[str, int]) -> str:
    """Extend a JSON Pointer with property names or array indices."""
    escaped = (str(p).replace("~", "~0").replace("/", "~1") for p in parts)
    return "".join([base, *("/" + p for p in escaped)])


def json_type(value: Any) -> str:
    """JSON type name of a decoded value, for messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_number(value: Any) -> bool:
    """True for JSON numbers; booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
