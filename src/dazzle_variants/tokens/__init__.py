"""
Default design token tables.

Usage:
    from dazzle_variants.tokens import DEFAULT_TOKENS, TAILWIND_COLORS

    spacing = DEFAULT_TOKENS["spacing"]
"""

from dazzle_variants.tokens.defaults import (
    DEFAULT_TOKENS,
    TAILWIND_BORDER_WIDTHS,
    TAILWIND_COLORS,
    TAILWIND_DURATIONS,
    TAILWIND_FONT_SIZES,
    TAILWIND_FONT_WEIGHTS,
    TAILWIND_LETTER_SPACING,
    TAILWIND_LINE_HEIGHTS,
    TAILWIND_OPACITY,
    TAILWIND_RADII,
    TAILWIND_SHADOWS,
    TAILWIND_SPACING,
    TAILWIND_Z_INDEX,
)

__all__ = [
    "DEFAULT_TOKENS",
    "TAILWIND_COLORS",
    "TAILWIND_SPACING",
    "TAILWIND_FONT_SIZES",
    "TAILWIND_RADII",
    "TAILWIND_SHADOWS",
    "TAILWIND_Z_INDEX",
    "TAILWIND_OPACITY",
    "TAILWIND_LINE_HEIGHTS",
    "TAILWIND_FONT_WEIGHTS",
    "TAILWIND_LETTER_SPACING",
    "TAILWIND_BORDER_WIDTHS",
    "TAILWIND_DURATIONS",
]
