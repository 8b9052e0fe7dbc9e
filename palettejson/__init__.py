"""PaletteJSON — validation engine for color palette interchange documents."""

from palettejson.errors import PaletteJSONError, PaletteValidationError, SchemaNotFoundError
from palettejson.models import (
    AltRepresentation,
    Color,
    ColorRepresentation,
    Palette,
    PaletteDocument,
    PaletteType,
)
from palettejson.validators import (
    ValidationEngine,
    ValidationReport,
    Violation,
    ViolationKind,
    validation_engine,
)

__version__ = "0.1.0"


def validate(document) -> ValidationReport:
    """Validate a decoded document with the default engine."""
    return validation_engine.validate(document)


__all__ = [
    "AltRepresentation",
    "Color",
    "ColorRepresentation",
    "Palette",
    "PaletteDocument",
    "PaletteType",
    "PaletteJSONError",
    "PaletteValidationError",
    "SchemaNotFoundError",
    "ValidationEngine",
    "ValidationReport",
    "Violation",
    "ViolationKind",
    "validate",
    "validation_engine",
]
