"""JSON Schema Validator — structural pass driven by the shipped schema artifact.

A drop-in alternative to StructuralValidator for callers who want the
declarative rules enforced by an off-the-shelf engine. Findings are mapped
onto the same violation kinds; messages are jsonschema's own.
"""

from typing import Any, Optional

from jsonschema import Draft202012Validator

from palettejson.config import get_settings
from palettejson.schema import load_schema
from palettejson.validators.base import BaseValidator, pointer
from palettejson.validators.models import Violation, ViolationKind

# Schema keyword → violation kind
KEYWORD_KINDS: dict[str, ViolationKind] = {
    "required": ViolationKind.MISSING_REQUIRED,
    "anyOf": ViolationKind.MISSING_REQUIRED,  # hex-or-components
    "type": ViolationKind.WRONG_TYPE,
    "additionalProperties": ViolationKind.UNKNOWN_PROPERTY,
    "pattern": ViolationKind.PATTERN_MISMATCH,
    "minimum": ViolationKind.OUT_OF_RANGE,
    "maximum": ViolationKind.OUT_OF_RANGE,
    "exclusiveMinimum": ViolationKind.OUT_OF_RANGE,
    "exclusiveMaximum": ViolationKind.OUT_OF_RANGE,
    "minItems": ViolationKind.CARDINALITY,
    "maxItems": ViolationKind.CARDINALITY,
    "enum": ViolationKind.ENUM_MISMATCH,
    "const": ViolationKind.ENUM_MISMATCH,
}


class JsonSchemaValidator(BaseValidator):
    """Validates documents against a versioned PaletteJSON schema."""

    def __init__(self, version: Optional[str] = None):
        self.version = version or get_settings().SCHEMA_VERSION
        self.schema = load_schema(self.version)
        Draft202012Validator.check_schema(self.schema)
        self._validator = Draft202012Validator(self.schema)

    @property
    def name(self) -> str:
        return "JsonSchemaValidator"

    def validate(self, document: Any) -> list[Violation]:
        errors = []

        for error in self._validator.iter_errors(document):
            kind = KEYWORD_KINDS.get(error.validator, ViolationKind.WRONG_TYPE)
            errors.append(self._violation(
                kind,
                pointer("", *error.absolute_path),
                error.message,
            ))

        return errors
