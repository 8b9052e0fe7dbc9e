"""Semantic Validator — cross-record rules within a palette.

Runs over any document the structural pass can traverse. Palettes whose
`colors` is not an array are skipped, and color entries that are not objects
are ignored, rather than guessing at partial data.
"""

from typing import Any

from palettejson.validators.base import BaseValidator, pointer
from palettejson.validators.models import Violation, ViolationKind

# At most this many colors per group may be flagged as the group reference
MAX_REFERENCES_PER_GROUP = 1


class SemanticValidator(BaseValidator):
    """Enforces position uniformity and group reference cardinality."""

    @property
    def name(self) -> str:
        return "SemanticValidator"

    def validate(self, document: Any) -> list[Violation]:
        errors = []

        palettes = document.get("palettes") if isinstance(document, dict) else None
        if not isinstance(palettes, list):
            return errors

        for i, palette in enumerate(palettes):
            if not isinstance(palette, dict) or not isinstance(palette.get("colors"), list):
                continue
            location = pointer("/palettes", i)
            errors.extend(self.check_positions(palette, location))
            errors.extend(self.check_group_references(palette, location))

        return errors

    def check_positions(self, palette: dict, location: str = "") -> list[Violation]:
        """Either every color in the palette carries `position`, or none does."""
        colors = _object_colors(palette)
        positioned = sum(1 for _, color in colors if "position" in color)

        if positioned in (0, len(colors)):
            return []

        missing = [index for index, color in colors if "position" not in color]
        return [self._violation(
            ViolationKind.CARDINALITY,
            pointer(location, "colors"),
            (
                f"Palette {_label(palette)} has position on {positioned} of {len(colors)} colors "
                f"(missing at indices: {', '.join(map(str, missing))}). "
                "Either every color or none must define position."
            ),
            suggestion="Add a position to every color, or remove it from all of them",
        )]

    def check_group_references(self, palette: dict, location: str = "") -> list[Violation]:
        """At most one color per groupId may set referenceInGroup=true.

        Colors without a groupId are exempt even when they set the flag.
        Groups are reported in the order they first appear.
        """
        errors = []

        references: dict[Any, list[int]] = {}
        for index, color in _object_colors(palette):
            group_id = color.get("groupId")
            if not _is_group_key(group_id):
                continue
            flagged = references.setdefault(group_id, [])
            if color.get("referenceInGroup") is True:
                flagged.append(index)

        for group_id, indices in references.items():
            if len(indices) <= MAX_REFERENCES_PER_GROUP:
                continue
            errors.append(self._violation(
                ViolationKind.CARDINALITY,
                pointer(location, "colors"),
                (
                    f'Group "{group_id}" has {len(indices)} colors with referenceInGroup=true '
                    f"(at indices: {', '.join(map(str, sorted(indices)))}). "
                    f"Maximum allowed is {MAX_REFERENCES_PER_GROUP}."
                ),
                suggestion=f'Keep referenceInGroup=true on a single color of group "{group_id}"',
            ))

        return errors


def _object_colors(palette: dict) -> list[tuple[int, dict]]:
    """(index, color) for every object-shaped entry of the palette's colors."""
    colors = palette.get("colors")
    if not isinstance(colors, list):
        return []
    return [(i, c) for i, c in enumerate(colors) if isinstance(c, dict)]


def _is_group_key(value: Any) -> bool:
    """Non-empty strings and non-zero numbers name a group; anything else does not."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float)) and bool(value)


def _label(palette: dict) -> str:
    for key in ("slug", "name"):
        value = palette.get(key)
        if isinstance(value, str) and value:
            return f'"{value}"'
    return "(unnamed)"
