"""Representation bounds — per-channel limits for every color space.

One table, keyed by representation, drives the checks on a color's own
`components` and on each `altRepresentations[*].components` array.
"""

import math
from typing import NamedTuple, Optional

from palettejson.models import ColorRepresentation


class ChannelBounds(NamedTuple):
    """Limits for one channel. `None` means unbounded on that side."""

    name: str
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_maximum: bool = False  # hue channels wrap at 360

    def describe(self) -> str:
        if self.minimum is None and self.maximum is None:
            return "any finite number"
        close = ")" if self.exclusive_maximum else "]"
        return f"[{_fmt(self.minimum)}, {_fmt(self.maximum)}{close}"

    def reject_reason(self, value: float) -> Optional[str]:
        """Why `value` falls outside this channel, or None if it fits."""
        if isinstance(value, float) and not math.isfinite(value):
            return f"must be a finite number, got {value}"
        if self.minimum is not None and value < self.minimum:
            return f"must be in {self.describe()}, got {_fmt(value)}"
        if self.maximum is not None:
            over = value >= self.maximum if self.exclusive_maximum else value > self.maximum
            if over:
                return f"must be in {self.describe()}, got {_fmt(value)}"
        return None


def _fmt(value: Optional[float]) -> str:
    if value is None:
        return "∞"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# Channel counts a component array may have: three channels, optional alpha
COMPONENT_COUNTS = (3, 4)

ALPHA = ChannelBounds("alpha", 0, 1)

# ──────────────────────────────────────────────────────────────────────
# CHANNEL BOUNDS (channel order is fixed per representation)
# ──────────────────────────────────────────────────────────────────────

CHANNEL_BOUNDS: dict[ColorRepresentation, tuple[ChannelBounds, ...]] = {
    ColorRepresentation.SRGB: (
        ChannelBounds("R", 0, 1),
        ChannelBounds("G", 0, 1),
        ChannelBounds("B", 0, 1),
        ALPHA,
    ),
    ColorRepresentation.HSL: (
        ChannelBounds("H", 0, 360, exclusive_maximum=True),
        ChannelBounds("S", 0, 1),
        ChannelBounds("L", 0, 1),
        ALPHA,
    ),
    ColorRepresentation.LAB: (
        ChannelBounds("L", 0, 100),
        ChannelBounds("a"),
        ChannelBounds("b"),
        ALPHA,
    ),
    ColorRepresentation.OKLCH: (
        ChannelBounds("L", 0, 1),
        ChannelBounds("C", 0, 0.4),
        ChannelBounds("H", 0, 360, exclusive_maximum=True),
        ALPHA,
    ),
}


def resolve_representation(tag) -> Optional[ColorRepresentation]:
    """Map a raw document value to a representation, or None if it is not one."""
    if not isinstance(tag, str):
        return None
    try:
        return ColorRepresentation(tag)
    except ValueError:
        return None


def channel_bounds(representation: ColorRepresentation) -> tuple[ChannelBounds, ...]:
    """Bounds for every channel position, alpha last."""
    return CHANNEL_BOUNDS[representation]
