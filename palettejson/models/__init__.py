from palettejson.models.palette import (
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

__all__ = [
    "DEFAULT_REPRESENTATION",
    "AltRepresentation",
    "Color",
    "ColorRepresentation",
    "Palette",
    "PaletteDocument",
    "PaletteType",
    "document_keys",
    "required_keys",
]
