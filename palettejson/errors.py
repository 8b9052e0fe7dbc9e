"""Exceptions raised by the public API.

Validation itself never raises; these cover the calls that must hand back
something other than a report.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from palettejson.validators.models import ValidationReport


class PaletteJSONError(Exception):
    """Base class for all palettejson errors."""


class PaletteValidationError(PaletteJSONError):
    """A document failed validation where typed records were requested."""

    def __init__(self, report: "ValidationReport"):
        self.report = report
        first = report.violations[0] if report.violations else None
        detail = f": {first.message} at '{first.location}'" if first else ""
        super().__init__(f"Palette document is invalid ({len(report.violations)} violation(s)){detail}")


class SchemaNotFoundError(PaletteJSONError):
    """No schema artifact is shipped for the requested version."""

    def __init__(self, version: str, available: Optional[list[str]] = None):
        self.version = version
        self.available = available or []
        super().__init__(
            f"No PaletteJSON schema for version '{version}'"
            + (f" (available: {', '.join(self.available)})" if self.available else "")
        )
