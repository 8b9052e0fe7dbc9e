"""Palette records — closed, immutable value types for a PaletteJSON document.

The attribute set of every record is closed: the structural validator reads
the accepted keys straight from these models, so adding a field here is the
only way to make a new key legal in a document.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ColorRepresentation(str, Enum):
    """Color-space tags a component array can be expressed in."""

    SRGB = "sRGB"
    HSL = "HSL"
    LAB = "Lab"
    OKLCH = "OKLCH"


class PaletteType(str, Enum):
    """How the colors of a palette relate to each other."""

    CATEGORICAL = "categorical"
    SEQUENTIAL = "sequential"
    DIVERGING = "diverging"


# Space assumed for a palette's components when it declares none
DEFAULT_REPRESENTATION = ColorRepresentation.SRGB

_RECORD_CONFIG = {"extra": "forbid", "frozen": True, "populate_by_name": True}


class AltRepresentation(BaseModel):
    """The same color restated in another color space."""

    model_config = _RECORD_CONFIG

    color_representation: ColorRepresentation = Field(alias="colorRepresentation")
    components: tuple[float, ...]


class Color(BaseModel):
    """One color entry within a palette."""

    model_config = _RECORD_CONFIG

    name: Optional[str] = None
    hex: Optional[str] = None
    components: Optional[tuple[float, ...]] = None
    position: Optional[float] = None
    group_id: Optional[str] = Field(default=None, alias="groupId")
    reference_in_group: Optional[bool] = Field(default=None, alias="referenceInGroup")
    alt_representations: Optional[tuple[AltRepresentation, ...]] = Field(
        default=None, alias="altRepresentations"
    )


class Palette(BaseModel):
    """One named palette."""

    model_config = _RECORD_CONFIG

    name: str
    slug: str
    type: PaletteType
    color_representation: Optional[ColorRepresentation] = Field(
        default=None, alias="colorRepresentation"
    )
    colors: tuple[Color, ...]

    @property
    def effective_representation(self) -> ColorRepresentation:
        """Representation that applies to this palette's `components` arrays."""
        return self.color_representation or DEFAULT_REPRESENTATION


class PaletteDocument(BaseModel):
    """Top-level PaletteJSON container."""

    model_config = _RECORD_CONFIG

    palettes: tuple[Palette, ...]


def document_keys(model: type[BaseModel]) -> tuple[str, ...]:
    """Keys a record accepts in a document, in declaration order."""
    return tuple(field.alias or name for name, field in model.model_fields.items())


def required_keys(model: type[BaseModel]) -> tuple[str, ...]:
    """Keys a record requires in a document, in declaration order."""
    return tuple(
        field.alias or name
        for name, field in model.model_fields.items()
        if field.is_required()
    )
