"""Palette Validator — structural and semantic validation for PaletteJSON documents.

Usage:
    from palettejson.validators import validation_engine

    report = validation_engine.validate(document)
    if not report.valid:
        # Surface report.violations to the user
"""

from palettejson.validators.engine import ValidationEngine, merge_reports, validation_engine
from palettejson.validators.jsonschema_validator import JsonSchemaValidator
from palettejson.validators.models import ValidationReport, Violation, ViolationKind
from palettejson.validators.semantic_validator import SemanticValidator
from palettejson.validators.structural_validator import StructuralValidator

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "merge_reports",
    "ValidationReport",
    "Violation",
    "ViolationKind",
    "StructuralValidator",
    "SemanticValidator",
    "JsonSchemaValidator",
]
