"""
Theme resolver for dazzle-variants.

Resolves the final theme by merging:
1. Default token tables (Tailwind scales and palette)
2. User theme tokens (highest precedence)

and derives the light/dark color scheme from the user's color input.
"""

from __future__ import annotations

import logging
from typing import Any

from dazzle_variants.errors import ColorSchemeError
from dazzle_variants.specs.theme import (
    KNOWN_CATEGORIES,
    ColorInput,
    ColorMap,
    ColorScheme,
    FlatColors,
    ResolvedTheme,
    ThemeInput,
)
from dazzle_variants.tokens.defaults import DEFAULT_TOKENS

logger = logging.getLogger(__name__)


def coerce_theme_input(theme: ThemeInput | dict[str, Any] | None) -> ThemeInput:
    """Validate a plain mapping into ThemeInput (None -> empty theme)."""
    if theme is None:
        return ThemeInput()
    if isinstance(theme, ThemeInput):
        return theme
    return ThemeInput.model_validate(theme)


def default_colors(color_input: ColorInput | None) -> ColorMap:
    """
    Colors that overlay the default palette in the resolved theme.

    Structured input contributes ``light`` with standalone colors applied on
    top; flat input contributes itself.
    """
    if color_input is None:
        return {}
    if isinstance(color_input, FlatColors):
        return dict(color_input.colors)
    return {**color_input.light, **color_input.standalone}


def merge_theme(
    theme: ThemeInput | dict[str, Any] | None,
    defaults: dict[str, dict[str, Any]] | None = None,
) -> ResolvedTheme:
    """
    Merge user tokens over the default tables.

    Args:
        theme: User theme definition
        defaults: Default tables by category (DEFAULT_TOKENS if omitted)

    Returns:
        ResolvedTheme with user entries winning per key
    """
    theme_input = coerce_theme_input(theme)
    tables = DEFAULT_TOKENS if defaults is None else defaults

    # Start with default palette, user colors on top
    colors = dict(tables.get("colors", {}))
    colors.update(default_colors(theme_input.color_input))

    resolved: dict[str, Any] = {"colors": colors}
    for category in KNOWN_CATEGORIES:
        merged = dict(tables.get(category, {}))
        merged.update(getattr(theme_input, category))
        resolved[category] = merged

    # Custom token groups pass through verbatim
    custom = theme_input.custom_tokens
    for key, value in custom.items():
        resolved.setdefault(key, value)

    logger.debug(f"Resolved theme with {len(colors)} colors and {len(custom)} custom token groups")
    return ResolvedTheme.model_validate(resolved)


def build_color_scheme(
    theme: ThemeInput | dict[str, Any] | None,
    *,
    strict: bool = False,
) -> ColorScheme:
    """
    Derive the light/dark color scheme from theme color input.

    Args:
        theme: User theme definition
        strict: Raise instead of warn when light/dark keys differ

    Returns:
        ColorScheme for the mode layer

    Raises:
        ColorSchemeError: If strict and light/dark key sets differ
    """
    color_input = coerce_theme_input(theme).color_input

    if color_input is None:
        return ColorScheme(light={}, dark=None)

    if isinstance(color_input, FlatColors):
        # No true dark variant - same colors both ways
        return ColorScheme(light=dict(color_input.colors), dark=dict(color_input.colors))

    if color_input.dark is not None:
        check_color_parity(color_input.light, color_input.dark, strict=strict)

    standalone = color_input.standalone
    return ColorScheme(
        light={**color_input.light, **standalone},
        dark={**color_input.dark, **standalone} if color_input.dark is not None else None,
    )


def check_color_parity(light: ColorMap, dark: ColorMap, *, strict: bool = False) -> list[str]:
    """
    Compare light and dark key sets.

    Args:
        light: Light scheme colors
        dark: Dark scheme colors
        strict: Raise on mismatch instead of logging a warning

    Returns:
        Sorted list of mismatch descriptions (empty when keys agree)
    """
    issues = [f"missing in dark: {key}" for key in sorted(light.keys() - dark.keys())]
    issues += [f"missing in light: {key}" for key in sorted(dark.keys() - light.keys())]

    if issues:
        message = "Light and dark color keys differ (" + "; ".join(issues) + ")"
        if strict:
            raise ColorSchemeError(message)
        logger.warning(message)

    return issues
