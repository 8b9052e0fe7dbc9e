"""Structural Validator — required fields, types, patterns, enums, and channel bounds."""

import re
from typing import Any, Optional

from palettejson.models import (
    DEFAULT_REPRESENTATION,
    AltRepresentation,
    Color,
    ColorRepresentation,
    Palette,
    PaletteDocument,
    PaletteType,
    document_keys,
    required_keys,
)
from palettejson.validators.base import BaseValidator, is_number, json_type, pointer
from palettejson.validators.models import Violation, ViolationKind
from palettejson.validators.representations import (
    COMPONENT_COUNTS,
    channel_bounds,
    resolve_representation,
)

# String formats
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
GROUP_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")
HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")

# Minimum array sizes
MIN_PALETTES = 1
MIN_COLORS = 2

PALETTE_TYPES = tuple(t.value for t in PaletteType)
REPRESENTATIONS = tuple(r.value for r in ColorRepresentation)

# Closed key sets, read from the record types
DOCUMENT_KEYS = document_keys(PaletteDocument)
DOCUMENT_REQUIRED = required_keys(PaletteDocument)
PALETTE_KEYS = document_keys(Palette)
PALETTE_REQUIRED = required_keys(Palette)
COLOR_KEYS = document_keys(Color)
ALT_KEYS = document_keys(AltRepresentation)
ALT_REQUIRED = required_keys(AltRepresentation)


class StructuralValidator(BaseValidator):
    """Validates the shape of a PaletteJSON document in a single pass.

    Every defect is collected; nothing short-circuits except descending into a
    value whose type is already wrong.
    """

    @property
    def name(self) -> str:
        return "StructuralValidator"

    def validate(self, document: Any) -> list[Violation]:
        if not isinstance(document, dict):
            return [self._violation(
                ViolationKind.WRONG_TYPE,
                "",
                f"Document must be an object, got {json_type(document)}",
                suggestion='Wrap the palettes in an object: {"palettes": [...]}',
            )]

        errors = self._check_keys(document, "", "Document", DOCUMENT_KEYS, DOCUMENT_REQUIRED)

        if "palettes" in document:
            errors.extend(self._check_palettes(document["palettes"], "/palettes"))

        return errors

    # ── Entities ──

    def _check_palettes(self, palettes: Any, location: str) -> list[Violation]:
        if not isinstance(palettes, list):
            return [self._wrong_type(location, "palettes", "array", palettes)]

        errors = []
        if len(palettes) < MIN_PALETTES:
            errors.append(self._violation(
                ViolationKind.CARDINALITY,
                location,
                f"Document must contain at least {MIN_PALETTES} palette, got 0",
            ))
        for i, palette in enumerate(palettes):
            errors.extend(self._check_palette(palette, pointer(location, i)))
        return errors

    def _check_palette(self, palette: Any, location: str) -> list[Violation]:
        if not isinstance(palette, dict):
            return [self._wrong_type(location, "Palette", "object", palette)]

        errors = self._check_keys(palette, location, "Palette", PALETTE_KEYS, PALETTE_REQUIRED)

        if "name" in palette:
            errors.extend(self._check_string(palette["name"], pointer(location, "name"), "name"))
        if "slug" in palette:
            errors.extend(self._check_string(
                palette["slug"],
                pointer(location, "slug"),
                "slug",
                pattern=SLUG_PATTERN,
                hint="Use lowercase letters, digits, and single hyphens, e.g. 'ocean-blues'",
            ))
        if "type" in palette:
            errors.extend(self._check_enum(palette["type"], pointer(location, "type"), "type", PALETTE_TYPES))

        representation: Optional[ColorRepresentation] = DEFAULT_REPRESENTATION
        if "colorRepresentation" in palette:
            tag = palette["colorRepresentation"]
            errors.extend(self._check_enum(
                tag, pointer(location, "colorRepresentation"), "colorRepresentation", REPRESENTATIONS
            ))
            representation = resolve_representation(tag)

        if "colors" in palette:
            errors.extend(self._check_colors(palette["colors"], pointer(location, "colors"), representation))

        return errors

    def _check_colors(
        self, colors: Any, location: str, representation: Optional[ColorRepresentation]
    ) -> list[Violation]:
        if not isinstance(colors, list):
            return [self._wrong_type(location, "colors", "array", colors)]

        errors = []
        if len(colors) < MIN_COLORS:
            errors.append(self._violation(
                ViolationKind.CARDINALITY,
                location,
                f"Palette must contain at least {MIN_COLORS} colors, got {len(colors)}",
            ))
        for i, color in enumerate(colors):
            errors.extend(self._check_color(color, pointer(location, i), representation))
        return errors

    def _check_color(
        self, color: Any, location: str, representation: Optional[ColorRepresentation]
    ) -> list[Violation]:
        if not isinstance(color, dict):
            return [self._wrong_type(location, "Color", "object", color)]

        errors = self._check_keys(color, location, "Color", COLOR_KEYS, ())

        if "hex" not in color and "components" not in color:
            errors.append(self._violation(
                ViolationKind.MISSING_REQUIRED,
                location,
                "Color must define at least one of 'hex' or 'components'",
                suggestion="Add a 'hex' value such as '#3B82F6'",
            ))

        if "name" in color:
            errors.extend(self._check_string(color["name"], pointer(location, "name"), "name"))
        if "hex" in color:
            errors.extend(self._check_string(
                color["hex"],
                pointer(location, "hex"),
                "hex",
                pattern=HEX_PATTERN,
                hint="Use '#' followed by six hex digits, e.g. '#FF8800'",
            ))
        if "components" in color:
            errors.extend(self._check_components(
                color["components"], pointer(location, "components"), representation
            ))
        if "position" in color and not is_number(color["position"]):
            errors.append(self._wrong_type(pointer(location, "position"), "position", "number", color["position"]))
        if "groupId" in color:
            errors.extend(self._check_string(
                color["groupId"],
                pointer(location, "groupId"),
                "groupId",
                pattern=GROUP_ID_PATTERN,
                hint="Start with a letter or digit; then use letters, digits, '.', '_' or '-'",
            ))
        if "referenceInGroup" in color and not isinstance(color["referenceInGroup"], bool):
            errors.append(self._wrong_type(
                pointer(location, "referenceInGroup"), "referenceInGroup", "boolean", color["referenceInGroup"]
            ))
        if "altRepresentations" in color:
            errors.extend(self._check_alt_representations(
                color["altRepresentations"], pointer(location, "altRepresentations")
            ))

        return errors

    def _check_alt_representations(self, alts: Any, location: str) -> list[Violation]:
        if not isinstance(alts, list):
            return [self._wrong_type(location, "altRepresentations", "array", alts)]

        errors = []
        for i, alt in enumerate(alts):
            alt_location = pointer(location, i)
            if not isinstance(alt, dict):
                errors.append(self._wrong_type(alt_location, "AltRepresentation", "object", alt))
                continue

            errors.extend(self._check_keys(alt, alt_location, "AltRepresentation", ALT_KEYS, ALT_REQUIRED))

            representation = None
            if "colorRepresentation" in alt:
                tag = alt["colorRepresentation"]
                errors.extend(self._check_enum(
                    tag, pointer(alt_location, "colorRepresentation"), "colorRepresentation", REPRESENTATIONS
                ))
                representation = resolve_representation(tag)
            if "components" in alt:
                errors.extend(self._check_components(
                    alt["components"], pointer(alt_location, "components"), representation
                ))
        return errors

    def _check_components(
        self, components: Any, location: str, representation: Optional[ColorRepresentation]
    ) -> list[Violation]:
        """Check a channel array. Bounds are skipped when the representation is unknown."""
        if not isinstance(components, list):
            return [self._wrong_type(location, "components", "array", components)]

        if len(components) not in COMPONENT_COUNTS:
            return [self._violation(
                ViolationKind.CARDINALITY,
                location,
                f"components must have 3 channels plus an optional alpha, got {len(components)} values",
            )]

        bounds = channel_bounds(representation) if representation else None
        errors = []
        for i, value in enumerate(components):
            value_location = pointer(location, i)
            if not is_number(value):
                errors.append(self._wrong_type(value_location, f"Component {i}", "number", value))
                continue
            if bounds is None:
                continue
            reason = bounds[i].reject_reason(value)
            if reason:
                errors.append(self._violation(
                    ViolationKind.OUT_OF_RANGE,
                    value_location,
                    f"{representation.value} channel '{bounds[i].name}' {reason}",
                ))
        return errors

    # ── Primitives ──

    def _check_keys(
        self,
        obj: dict,
        location: str,
        label: str,
        allowed: tuple[str, ...],
        required: tuple[str, ...],
    ) -> list[Violation]:
        """Report missing required keys and keys outside the closed set."""
        errors = []
        for key in required:
            if key not in obj:
                errors.append(self._violation(
                    ViolationKind.MISSING_REQUIRED,
                    location,
                    f"{label} is missing required property '{key}'",
                ))
        for key in obj:
            if key not in allowed:
                errors.append(self._violation(
                    ViolationKind.UNKNOWN_PROPERTY,
                    location,
                    f"{label} has unknown property '{key}'",
                    suggestion=f"Allowed properties: {', '.join(allowed)}",
                ))
        return errors

    def _check_string(
        self,
        value: Any,
        location: str,
        label: str,
        pattern: Optional[re.Pattern] = None,
        hint: Optional[str] = None,
    ) -> list[Violation]:
        if not isinstance(value, str):
            return [self._wrong_type(location, label, "string", value)]
        if pattern is not None and not pattern.fullmatch(value):
            return [self._violation(
                ViolationKind.PATTERN_MISMATCH,
                location,
                f"{label} '{value}' does not match {pattern.pattern}",
                suggestion=hint,
            )]
        return []

    def _check_enum(self, value: Any, location: str, label: str, allowed: tuple[str, ...]) -> list[Violation]:
        if not isinstance(value, str):
            return [self._wrong_type(location, label, "string", value)]
        if value not in allowed:
            return [self._violation(
                ViolationKind.ENUM_MISMATCH,
                location,
                f"{label} '{value}' is not one of: {', '.join(allowed)}",
            )]
        return []

    def _wrong_type(self, location: str, label: str, expected: str, value: Any) -> Violation:
        return self._violation(
            ViolationKind.WRONG_TYPE,
            location,
            f"{label} must be {'an' if expected[0] in 'aeiou' else 'a'} {expected}, got {json_type(value)}",
        )
