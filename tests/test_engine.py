"""Tests for palettejson.validators.engine — orchestration, merging, and entry points."""

import pytest
import structlog

from palettejson import PaletteDocument, PaletteValidationError, validate
from palettejson.config import Settings
from palettejson.models import ColorRepresentation
from palettejson.validators import (
    JsonSchemaValidator,
    StructuralValidator,
    ValidationEngine,
    Violation,
)
from palettejson.validators.base import BaseValidator
from tests.conftest import kinds, make_document, make_palette

EXAMPLE = {
    "palettes": [
        {
            "name": "Test",
            "slug": "test",
            "type": "categorical",
            "colors": [{"hex": "#FF0000"}, {"hex": "#00FF00"}],
        }
    ]
}


class ExplodingValidator(BaseValidator):
    @property
    def name(self) -> str:
        return "ExplodingValidator"

    def validate(self, document) -> list[Violation]:
        raise RuntimeError("boom")


@pytest.fixture
def engine():
    return ValidationEngine(settings=Settings())


def _mixed_document():
    """One structural defect (hex) and one semantic defect (positions)."""
    colors = [{"hex": "#ZZZZZZ", "position": 1}, {"hex": "#00FF00"}]
    return make_document(make_palette(colors=colors))


class TestValidate:
    def test_example_document_is_valid(self, engine):
        report = engine.validate(EXAMPLE)
        assert report.valid
        assert report.violations == []

    def test_invalid_slug(self, engine):
        document = make_document(make_palette(slug="Test_Palette!"))
        report = engine.validate(document)
        assert not report.valid
        assert kinds(report) == ["pattern-mismatch"]
        assert report.violations[0].location == "/palettes/0/slug"

    def test_huge_integer_keeps_other_findings(self, engine):
        colors = [{"components": [10**400, 0, 0]}, {"components": [0, 0, 0]}]
        report = engine.validate(make_document(make_palette(slug="Bad Slug", colors=colors)))
        assert kinds(report) == ["pattern-mismatch", "out-of-range"]

    def test_module_level_validate(self):
        assert validate(EXAMPLE).valid

    def test_structural_before_semantic(self, engine):
        report = engine.validate(_mixed_document())
        assert kinds(report) == ["pattern-mismatch", "cardinality"]
        assert [v.location for v in report.violations] == [
            "/palettes/0/colors/0/hex",
            "/palettes/0/colors",
        ]

    def test_semantic_only_failure(self, engine):
        colors = [
            {"hex": "#93C5FD", "groupId": "blue-scale"},
            {"hex": "#60A5FA", "groupId": "blue-scale", "referenceInGroup": True},
            {"hex": "#3B82F6", "groupId": "blue-scale", "referenceInGroup": True},
            {"hex": "#2563EB", "groupId": "blue-scale"},
        ]
        report = engine.validate(make_document(make_palette(colors=colors, type="sequential")))
        assert not report.valid
        assert kinds(report) == ["cardinality"]
        assert "at indices: 1, 2" in report.violations[0].message

    def test_semantic_skipped_when_disabled_on_failure(self):
        engine = ValidationEngine(settings=Settings(SEMANTIC_ON_STRUCTURAL_FAILURE=False))
        assert kinds(engine.validate(_mixed_document())) == ["pattern-mismatch"]

    def test_semantic_still_runs_on_valid_structure_when_disabled(self):
        engine = ValidationEngine(settings=Settings(SEMANTIC_ON_STRUCTURAL_FAILURE=False))
        colors = [{"hex": "#FF0000", "position": 1}, {"hex": "#00FF00"}]
        assert kinds(engine.validate(make_document(make_palette(colors=colors)))) == ["cardinality"]

    @pytest.mark.parametrize("document", [None, ["palettes"], "text", {"palettes": "none"}])
    def test_untraversable_document_single_violation(self, engine, document):
        report = engine.validate(document)
        assert not report.valid
        assert len(report.violations) == 1
        assert report.violations[0].kind == "wrong-type"

    def test_missing_palettes(self, engine):
        report = engine.validate({})
        assert kinds(report) == ["missing-required"]
        assert report.violations[0].location == ""
        assert "palettes" in report.violations[0].message

    def test_idempotent(self, engine):
        document = _mixed_document()
        assert engine.validate(document).model_dump_json() == engine.validate(document).model_dump_json()

    def test_crashing_validator_becomes_violation(self):
        engine = ValidationEngine(structural=ExplodingValidator(), settings=Settings())
        report = engine.validate(EXAMPLE)
        assert not report.valid
        assert len(report.violations) == 1
        assert "ExplodingValidator" in report.violations[0].message
        assert "boom" in report.violations[0].message

    def test_logs_completion(self, engine):
        with structlog.testing.capture_logs() as logs:
            engine.validate(_mixed_document())
        events = [entry for entry in logs if entry["event"] == "validation_complete"]
        assert len(events) == 1
        assert events[0]["valid"] is False
        assert events[0]["total_violations"] == 2
        assert events[0]["by_kind"] == {"pattern-mismatch": 1, "cardinality": 1}
        assert set(events[0]["validator_timings"]) == {"StructuralValidator", "SemanticValidator"}

    def test_logs_validator_failure(self):
        engine = ValidationEngine(structural=ExplodingValidator(), settings=Settings())
        with structlog.testing.capture_logs() as logs:
            engine.validate(EXAMPLE)
        failures = [entry for entry in logs if entry["event"] == "validator_failed"]
        assert failures[0]["validator"] == "ExplodingValidator"
        assert failures[0]["log_level"] == "error"


class TestBackends:
    def test_builtin_by_default(self, engine):
        assert isinstance(engine.structural, StructuralValidator)

    def test_jsonschema_backend(self):
        engine = ValidationEngine(settings=Settings(STRUCTURAL_BACKEND="jsonschema"))
        assert isinstance(engine.structural, JsonSchemaValidator)
        assert engine.validate(EXAMPLE).valid
        report = engine.validate(_mixed_document())
        assert kinds(report) == ["pattern-mismatch", "cardinality"]


class TestValidateJson:
    def test_text_payload(self, engine):
        payload = '{"palettes": [{"name": "Test", "slug": "test", "type": "categorical", ' \
                  '"colors": [{"hex": "#FF0000"}, {"hex": "#00FF00"}]}]}'
        assert engine.validate_json(payload).valid
        assert engine.validate_json(payload.encode("utf-8")).valid

    @pytest.mark.parametrize("payload", ["{", "", b"\x80abc", "[" * 100000 + "]" * 100000])
    def test_undecodable_payload(self, engine, payload):
        report = engine.validate_json(payload)
        assert not report.valid
        assert len(report.violations) == 1
        assert report.violations[0].location == ""
        assert report.violations[0].kind == "wrong-type"

    def test_decoded_non_object(self, engine):
        report = engine.validate_json("[1, 2, 3]")
        assert kinds(report) == ["wrong-type"]


class TestLoad:
    def test_returns_records(self, engine):
        document = make_document(make_palette(
            colorRepresentation="HSL",
            colors=[
                {"hex": "#FF0000", "components": [0, 1, 0.5], "groupId": "reds", "referenceInGroup": True},
                {"hex": "#FF6666", "groupId": "reds",
                 "altRepresentations": [{"colorRepresentation": "sRGB", "components": [1, 0.4, 0.4]}]},
            ],
        ))
        loaded = engine.load(document)
        assert isinstance(loaded, PaletteDocument)
        palette = loaded.palettes[0]
        assert palette.slug == "test"
        assert palette.effective_representation == ColorRepresentation.HSL
        assert palette.colors[0].components == (0, 1, 0.5)
        assert palette.colors[0].reference_in_group is True
        assert palette.colors[1].alt_representations[0].color_representation == ColorRepresentation.SRGB

    def test_invalid_document_raises_with_report(self, engine):
        with pytest.raises(PaletteValidationError) as exc_info:
            engine.load(make_document(make_palette(slug="Bad Slug")))
        report = exc_info.value.report
        assert not report.valid
        assert report.violations[0].location == "/palettes/0/slug"
        assert "/palettes/0/slug" in str(exc_info.value)
