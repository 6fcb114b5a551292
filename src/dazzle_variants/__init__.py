"""
dazzle-variants - slot-based style variants over design tokens.

Resolves per-slot style mappings from base styles, variant axes and
compound variants, against a theme of Tailwind-derived tokens with
light/dark color schemes and style utils.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .engine import StyledComponent, clear_style_cache, define_config, styled
from .errors import ColorSchemeError, ThemeConfigError, ThemeScopeError, VariantsError
from .mode import JsonFileModeStore, ThemeContextValue, ThemeMode, ThemeProvider, use_theme
from .nva import StyleEngine, build_engine
from .specs import ColorScheme, ResolvedTheme, StyledConfig, ThemeInput
from .themes import build_color_scheme, load_theme_config, merge_theme

try:
    __version__ = version("dazzle-variants")
except PackageNotFoundError:
    # Source checkout without an installed distribution
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    # Engine
    "build_engine",
    "StyleEngine",
    "styled",
    "define_config",
    "StyledComponent",
    "clear_style_cache",
    # Themes
    "merge_theme",
    "build_color_scheme",
    "load_theme_config",
    "ThemeInput",
    "ResolvedTheme",
    "ColorScheme",
    "StyledConfig",
    # Mode
    "ThemeMode",
    "ThemeProvider",
    "ThemeContextValue",
    "JsonFileModeStore",
    "use_theme",
    # Errors
    "VariantsError",
    "ColorSchemeError",
    "ThemeScopeError",
    "ThemeConfigError",
]
