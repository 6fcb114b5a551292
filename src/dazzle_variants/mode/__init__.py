"""
Color mode selection and persistence.
"""

from dazzle_variants.mode.provider import (
    DEFAULT_STORAGE_KEY,
    THEME_MODES,
    JsonFileModeStore,
    ModeStore,
    ThemeContextValue,
    ThemeMode,
    ThemeProvider,
    resolve_color_scheme,
    use_theme,
)

__all__ = [
    "ThemeMode",
    "THEME_MODES",
    "DEFAULT_STORAGE_KEY",
    "resolve_color_scheme",
    "ModeStore",
    "JsonFileModeStore",
    "ThemeContextValue",
    "ThemeProvider",
    "use_theme",
]
