"""
Color mode provider.

Selects the active color map from a ColorScheme for a mode ("light",
"dark" or "system"), persists the chosen mode and makes the current state
available to code running inside the provider's scope:

    provider = ThemeProvider(engine.color_scheme, store=JsonFileModeStore(path))
    with provider:
        state = use_theme()
        state.colors["primary"]
        state.toggle()

The provider only reads the ColorScheme; it never mutates it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from contextvars import ContextVar, Token
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol, get_args

from dazzle_variants.errors import ThemeScopeError
from dazzle_variants.specs.theme import ColorMap, ColorScheme, SchemeName

logger = logging.getLogger(__name__)

ThemeMode = Literal["light", "dark", "system"]
THEME_MODES: tuple[str, ...] = get_args(ThemeMode)
DEFAULT_STORAGE_KEY = "dazzle-variants-theme"

_current_provider: ContextVar[ThemeProvider | None] = ContextVar(
    "current_theme_provider", default=None
)


def resolve_color_scheme(mode: ThemeMode, system_scheme: str | None) -> SchemeName:
    """
    Resolve a mode to a concrete scheme.

    "system" follows the system preference and falls back to light when the
    preference is unknown.
    """
    if mode == "system":
        return "dark" if system_scheme == "dark" else "light"
    return mode


# =============================================================================
# Persistence
# =============================================================================


class ModeStore(Protocol):
    """Key/value storage for the selected mode."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class JsonFileModeStore:
    """ModeStore backed by a JSON object in a single file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


# =============================================================================
# Provider
# =============================================================================


@dataclass(frozen=True)
class ThemeContextValue:
    """
    Snapshot of the provider state.

    Attributes:
        mode: Selected mode ("light" | "dark" | "system")
        is_dark: Whether the resolved scheme is dark
        colors: Active color map
        set_theme: Select and persist a mode
        toggle: Switch between light and dark
    """

    mode: ThemeMode
    is_dark: bool
    colors: ColorMap
    set_theme: Callable[[ThemeMode], None]
    toggle: Callable[[], None]


class ThemeProvider:
    """Holds the selected color mode for a ColorScheme."""

    def __init__(
        self,
        colors: ColorScheme,
        *,
        default_mode: ThemeMode = "system",
        storage_key: str = DEFAULT_STORAGE_KEY,
        store: ModeStore | None = None,
        system_scheme: str | None = None,
    ):
        """
        Create a provider and hydrate the persisted mode.

        Args:
            colors: Light/dark color maps
            default_mode: Mode used when nothing valid is persisted
            storage_key: Key under which the mode is persisted
            store: Mode persistence (none when omitted)
            system_scheme: Current system preference ("light" | "dark" | None)
        """
        if default_mode not in THEME_MODES:
            raise ValueError(f"Unknown theme mode {default_mode!r}")
        self.colors = colors
        self.storage_key = storage_key
        self.store = store
        self.system_scheme = system_scheme
        self.mode: ThemeMode = default_mode
        self._tokens: list[Token[ThemeProvider | None]] = []
        self._hydrate()

    def _hydrate(self) -> None:
        if self.store is None:
            return
        try:
            stored = self.store.get_item(self.storage_key)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read theme mode '{self.storage_key}': {e}")
            return
        if stored in THEME_MODES:
            self.mode = stored  # type: ignore[assignment]
        elif stored is not None:
            logger.debug(f"Ignoring invalid stored theme mode: {stored!r}")

    def _persist(self) -> None:
        if self.store is None:
            return
        try:
            self.store.set_item(self.storage_key, self.mode)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to persist theme mode '{self.storage_key}': {e}")

    @property
    def color_scheme(self) -> SchemeName:
        return resolve_color_scheme(self.mode, self.system_scheme)

    @property
    def is_dark(self) -> bool:
        return self.color_scheme == "dark"

    @property
    def active_colors(self) -> ColorMap:
        return self.colors.colors_for(self.color_scheme)

    @property
    def value(self) -> ThemeContextValue:
        return ThemeContextValue(
            mode=self.mode,
            is_dark=self.is_dark,
            colors=self.active_colors,
            set_theme=self.set_theme,
            toggle=self.toggle,
        )

    def set_theme(self, mode: ThemeMode) -> None:
        """
        Select a mode and persist it.

        Raises:
            ValueError: If mode is not "light", "dark" or "system"
        """
        if mode not in THEME_MODES:
            expected = ", ".join(THEME_MODES)
            raise ValueError(f"Unknown theme mode {mode!r}; expected one of {expected}")
        self.mode = mode
        self._persist()

    def toggle(self) -> None:
        """Switch to the opposite of the currently resolved scheme."""
        self.set_theme("light" if self.is_dark else "dark")

    def set_system_scheme(self, scheme: str | None) -> None:
        """Update the system preference signal."""
        self.system_scheme = scheme

    def __enter__(self) -> ThemeProvider:
        self._tokens.append(_current_provider.set(self))
        return self

    def __exit__(self, *exc_info: object) -> None:
        _current_provider.reset(self._tokens.pop())


def use_theme() -> ThemeContextValue:
    """
    Get the state of the innermost active ThemeProvider.

    Raises:
        ThemeScopeError: If called outside a ThemeProvider scope
    """
    provider = _current_provider.get()
    if provider is None:
        raise ThemeScopeError(
            "use_theme() must be called within a ThemeProvider. "
            "Wrap the calling code in `with ThemeProvider(engine.color_scheme):`."
        )
    return provider.value
