"""
Model types for dazzle-variants.

Themes, color schemes and styled configurations are pydantic models; the
color input variants are frozen dataclasses.
"""

from dazzle_variants.specs.styled import (
    CompoundVariant,
    SlotStyles,
    StyledConfig,
    StyleMap,
    VariantTable,
    normalize_variant_value,
)
from dazzle_variants.specs.theme import (
    KNOWN_CATEGORIES,
    ColorInput,
    ColorMap,
    ColorScheme,
    FlatColors,
    ResolvedTheme,
    SchemeName,
    StructuredColors,
    ThemeInput,
    parse_color_input,
)

__all__ = [
    # Styled
    "StyleMap",
    "SlotStyles",
    "VariantTable",
    "CompoundVariant",
    "StyledConfig",
    "normalize_variant_value",
    # Theme
    "KNOWN_CATEGORIES",
    "ColorMap",
    "SchemeName",
    "FlatColors",
    "StructuredColors",
    "ColorInput",
    "parse_color_input",
    "ColorScheme",
    "ThemeInput",
    "ResolvedTheme",
]
