"""
Error types for dazzle-variants theme building and mode resolution.
"""

from pathlib import Path


class VariantsError(Exception):
    """Base exception for all dazzle-variants errors."""

    def __init__(self, message: str, source: Path | None = None):
        self.message = message
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the originating file if known."""
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class ColorSchemeError(VariantsError):
    """
    Raised when strict color checking rejects a light/dark pair.

    Examples:
    - Dark scheme defines a key the light scheme lacks
    - Light scheme defines a key the dark scheme lacks
    """

    pass


class ThemeScopeError(VariantsError):
    """
    Raised when theme mode state is requested outside a ThemeProvider scope.

    This is always a wiring mistake in the caller, never a runtime condition.
    """

    pass


class ThemeConfigError(VariantsError):
    """
    Raised when a theme configuration file cannot be loaded.

    Examples:
    - File does not exist
    - Invalid TOML / YAML syntax
    - Token tables of the wrong shape
    """

    pass
