"""
Theme resolution for dazzle-variants.

Usage:
    from dazzle_variants.themes import build_color_scheme, load_theme_config, merge_theme

    theme_input = load_theme_config("theme.toml")
    theme = merge_theme(theme_input)
    scheme = build_color_scheme(theme_input)
"""

from .loader import load_theme_config
from .resolver import (
    build_color_scheme,
    check_color_parity,
    coerce_theme_input,
    default_colors,
    merge_theme,
)

__all__ = [
    # Resolution
    "merge_theme",
    "build_color_scheme",
    "check_color_parity",
    "coerce_theme_input",
    "default_colors",
    # Loading
    "load_theme_config",
]
