"""Validation Engine — runs the structural and semantic passes and merges them.

This is the main entry point for document validation.

Usage:
    engine = ValidationEngine()
    report = engine.validate(document)
    if not report.valid:
        for violation in report.violations:
            print(violation.location, violation.kind, violation.message)
"""

import json
import time
from typing import Any, Optional, Union

import structlog

from palettejson.config import Settings, get_settings
from palettejson.errors import PaletteValidationError
from palettejson.models import PaletteDocument
from palettejson.validators.base import BaseValidator
from palettejson.validators.jsonschema_validator import JsonSchemaValidator
from palettejson.validators.models import ValidationReport, Violation, ViolationKind
from palettejson.validators.semantic_validator import SemanticValidator
from palettejson.validators.structural_validator import StructuralValidator

logger = structlog.get_logger()


class ValidationEngine:
    """Orchestrates the two validation passes and produces one report.

    Design principles:
        - Deterministic: same input → same output
        - Total: never raises for a decoded document, every defect is a violation
        - Separable: either pass can be replaced without touching the other
        - Observable: logs every validation run with timing
    """

    def __init__(
        self,
        structural: Optional[BaseValidator] = None,
        semantic: Optional[BaseValidator] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize with the default passes or custom ones.

        Args:
            structural: Shape validator. If None, picked by STRUCTURAL_BACKEND.
            semantic: Cross-record validator. If None, SemanticValidator.
            settings: Engine settings. If None, loaded from the environment.
        """
        self.settings = settings or get_settings()
        self.structural = structural or self._default_structural(self.settings)
        self.semantic = semantic or SemanticValidator()

    @staticmethod
    def _default_structural(settings: Settings) -> BaseValidator:
        if settings.STRUCTURAL_BACKEND == "jsonschema":
            return JsonSchemaValidator(settings.SCHEMA_VERSION)
        return StructuralValidator()

    def validate(self, document: Any) -> ValidationReport:
        """Run both passes against a decoded document and merge the results.

        The semantic pass only runs when the document is traversable: an
        object whose `palettes` is an array.

        Args:
            document: Decoded PaletteJSON value

        Returns:
            ValidationReport with structural violations first, then semantic ones
        """
        start_time = time.perf_counter()
        validator_timings: dict[str, float] = {}

        structural = self._run(self.structural, document, validator_timings)

        run_semantic = self._is_traversable(document) and (
            structural.valid or self.settings.SEMANTIC_ON_STRUCTURAL_FAILURE
        )
        if run_semantic:
            semantic = self._run(self.semantic, document, validator_timings)
        else:
            semantic = ValidationReport.build([])

        report = ValidationReport.merge(structural, semantic)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            valid=report.valid,
            total_violations=len(report.violations),
            by_kind=report.counts_by_kind(),
            semantic_ran=run_semantic,
            duration_ms=round(total_duration, 2),
            validator_timings=validator_timings,
        )

        return report

    def validate_json(self, payload: Union[str, bytes]) -> ValidationReport:
        """Decode a JSON payload and validate it.

        A payload that cannot be decoded yields a single `wrong-type`
        violation at the document root.
        """
        try:
            document = json.loads(payload)
        except (ValueError, RecursionError) as e:  # JSONDecodeError and UnicodeDecodeError are ValueErrors
            logger.warning("payload_not_json", error=str(e))
            return ValidationReport.build([
                Violation(
                    location="",
                    kind=ViolationKind.WRONG_TYPE,
                    message=f"Cannot parse palette JSON: {e}",
                    suggestion="Ensure the payload is a valid JSON object",
                )
            ])
        return self.validate(document)

    def load(self, document: Any) -> PaletteDocument:
        """Validate a document and return it as typed records.

        Raises:
            PaletteValidationError: if the document has any violation
        """
        report = self.validate(document)
        if not report.valid:
            raise PaletteValidationError(report)
        return PaletteDocument.model_validate(document)

    def _run(
        self, validator: BaseValidator, document: Any, timings: dict[str, float]
    ) -> ValidationReport:
        v_start = time.perf_counter()
        try:
            return validator.report(document)
        except Exception as e:
            logger.error(
                "validator_failed",
                validator=validator.name,
                error=str(e),
            )
            # A broken validator must not take the report down with it
            return ValidationReport.build([
                Violation(
                    location="",
                    kind=ViolationKind.WRONG_TYPE,
                    message=f"Validator '{validator.name}' crashed: {e}",
                )
            ])
        finally:
            timings[validator.name] = round((time.perf_counter() - v_start) * 1000, 2)

    @staticmethod
    def _is_traversable(document: Any) -> bool:
        return isinstance(document, dict) and isinstance(document.get("palettes"), list)


def merge_reports(structural: ValidationReport, semantic: ValidationReport) -> ValidationReport:
    """Combine a structural and a semantic report, structural findings first."""
    return ValidationReport.merge(structural, semantic)


# Module-level singleton
validation_engine = ValidationEngine()
