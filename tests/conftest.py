"""Shared document builders for the validator tests."""

import copy

import pytest


def make_palette(colors=None, **overrides) -> dict:
    """A valid two-color categorical palette, with overrides applied."""
    palette = {
        "name": "Test",
        "slug": "test",
        "type": "categorical",
        "colors": colors if colors is not None else [{"hex": "#FF0000"}, {"hex": "#00FF00"}],
    }
    palette.update(overrides)
    return palette


def make_document(*palettes) -> dict:
    """A document holding the given palettes, or one default palette."""
    return {"palettes": list(palettes) or [make_palette()]}


def with_components(representation, *component_arrays) -> dict:
    """A document whose single palette uses `representation` for the given arrays."""
    colors = [{"components": list(c)} for c in component_arrays]
    return make_document(make_palette(colors=colors, colorRepresentation=representation))


def kinds(report) -> list[str]:
    return [v.kind for v in report.violations]


@pytest.fixture
def valid_document() -> dict:
    return copy.deepcopy(make_document())
