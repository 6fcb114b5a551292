"""
Styled declarations.

A StyledComponent binds one configuration (or theme factory) to its own
StyleCache and computes slot styles from variant props:

    button = styled({
        "slots": ["root", "text"],
        "base": {"root": {"padding": 16}, "text": {"fontSize": 14}},
        "variants": {
            "size": {
                "small": {"root": {"padding": 8}},
                "large": {"root": {"padding": 24}},
            },
        },
        "defaultVariants": {"size": "small"},
    })

    styles = button(size="large")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from dazzle_variants.specs.styled import SlotStyles, StyledConfig
from dazzle_variants.specs.theme import ResolvedTheme

from .cache import StyleCache, create_cache_key
from .resolver import resolve_styles
from .utils import ExpandedConfig, UtilsConfig, expand_config

logger = logging.getLogger(__name__)

# Props key reserved for a per-call color override
THEME_PROP = "theme"

ConfigInput = StyledConfig | dict[str, Any]
DefineConfig = Callable[[ConfigInput], ConfigInput]
ConfigFactory = Callable[[DefineConfig, ResolvedTheme], ConfigInput]


def define_config(config: ConfigInput) -> ConfigInput:
    """Identity helper handed to theme factories."""
    return config


class StyledComponent:
    """
    Memoized style computation for one styled declaration.

    Static configurations are expanded once at declaration time. Theme
    factories are evaluated against the engine theme at declaration time and
    re-evaluated when a call supplies a ``theme`` color override.
    """

    def __init__(
        self,
        config_or_factory: ConfigInput | ConfigFactory,
        *,
        theme: ResolvedTheme | None = None,
        utils: UtilsConfig | None = None,
        name: str | None = None,
    ):
        """
        Declare a styled component.

        Args:
            config_or_factory: Configuration, or factory (define_config, theme) -> configuration
            theme: Resolved theme passed to factories
            utils: Util table applied to every style map
            name: Label used in log records

        Raises:
            TypeError: If a factory is given without a theme
        """
        self.is_factory = callable(config_or_factory)
        if self.is_factory and theme is None:
            raise TypeError(
                "Theme factories require a resolved theme; declare them via build_engine().styled"
            )

        self._source = config_or_factory
        self._theme = theme
        self._utils = dict(utils or {})
        self.name = name or getattr(config_or_factory, "__name__", None) or "styled"
        self.config = self._evaluate(theme)
        self.cache = StyleCache(self.name)

    def __repr__(self) -> str:
        return f"StyledComponent({self.name!r}, slots={list(self.slots)!r})"

    @property
    def slots(self) -> tuple[str, ...]:
        return self.config.slots

    def _evaluate(self, theme: ResolvedTheme | None) -> ExpandedConfig:
        if self.is_factory:
            raw = self._source(define_config, theme)  # type: ignore[operator]
        else:
            raw = self._source
        return expand_config(StyledConfig.coerce(raw), self._utils)  # type: ignore[arg-type]

    def __call__(self, props: Mapping[str, Any] | None = None, /, **kwargs: Any) -> SlotStyles:
        """
        Compute slot styles for variant props.

        Props may be passed as a mapping, as keywords, or both (keywords
        win). The reserved ``theme`` prop is a full color map override and
        is only honored for theme factories.

        Override results are cached per override object, and the cache holds
        that object for the lifetime of the declaration. Reuse one override
        mapping per color scheme (e.g. ``engine.color_scheme.dark``); a new
        mapping on every call adds a new entry every time.

        Returns:
            Slot -> style. Results are shared from cache and must not be mutated.
        """
        variant_props = {**(props or {}), **kwargs}
        override = variant_props.pop(THEME_PROP, None)
        key = create_cache_key(variant_props)

        if override is not None and self.is_factory:
            cached = self.cache.get_override(override, key)
            if cached is not None:
                return cached

            logger.debug(f"Re-evaluating {self.name} with color override")
            theme = self._theme.with_colors(dict(override))  # type: ignore[union-attr]
            config = self._evaluate(theme)
            return self.cache.set_override(override, key, resolve_styles(config, variant_props))

        cached = self.cache.get(key)
        if cached is not None:
            return cached

        return self.cache.set(key, resolve_styles(self.config, variant_props))


def styled(config: ConfigInput) -> StyledComponent:
    """
    Declare a styled component without theme or utils.

    Args:
        config: Styled configuration (mapping or StyledConfig)

    Returns:
        Callable computing slot styles from variant props
    """
    return StyledComponent(config)
