"""
Themed engine construction.

build_engine() merges the theme, derives the color scheme and returns a
StyleEngine whose styled() declarations expand the engine's utils and can
read theme tokens through factories:

    engine = build_engine(
        theme={
            "colors": {
                "light": {"primary": "#007AFF", "background": "#FFFFFF"},
                "dark": {"primary": "#0A84FF", "background": "#000000"},
                "white": "#FFFFFF",
            },
            "fontSizes": {"xxs": 10},
        },
        utils={
            "px": lambda v: {"paddingLeft": v, "paddingRight": v},
            "py": lambda v: {"paddingTop": v, "paddingBottom": v},
        },
    )

    button = engine.styled(lambda ctx, t: ctx({
        "slots": ["root"],
        "base": {"root": {"backgroundColor": t.colors["primary"], "px": 16, "py": 12}},
    }))

    button()                                  # light colors
    button(theme=engine.color_scheme.dark)    # re-evaluated with dark colors
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from dazzle_variants.engine.styled import ConfigFactory, ConfigInput, StyledComponent
from dazzle_variants.engine.utils import UtilsConfig, expand_utils
from dazzle_variants.specs.styled import StyleMap
from dazzle_variants.specs.theme import ColorScheme, ResolvedTheme, ThemeInput
from dazzle_variants.themes.resolver import build_color_scheme, coerce_theme_input, merge_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleEngine:
    """
    Theme, color scheme and utils bound to a styled() entry point.

    Attributes:
        theme: Resolved theme; colors use the light scheme
        color_scheme: Light/dark colors for the mode layer
        utils: Util table expanded in every styled declaration
    """

    theme: ResolvedTheme
    color_scheme: ColorScheme
    utils: Mapping[str, Any] = field(default_factory=dict)

    def styled(
        self,
        config_or_factory: ConfigInput | ConfigFactory,
        *,
        name: str | None = None,
    ) -> StyledComponent:
        """
        Declare a styled component with theme access and util expansion.

        Args:
            config_or_factory: Configuration, or factory (define_config, theme) -> configuration
            name: Label used in log records

        Returns:
            Callable computing slot styles from variant props
        """
        return StyledComponent(config_or_factory, theme=self.theme, utils=self.utils, name=name)

    def expand(self, style: Mapping[str, Any] | None) -> StyleMap:
        """Expand this engine's utils in an inline style map."""
        return expand_utils(style, self.utils)


def build_engine(
    theme: ThemeInput | dict[str, Any] | None = None,
    utils: UtilsConfig | None = None,
    *,
    strict_colors: bool = False,
) -> StyleEngine:
    """
    Build a themed style engine.

    Args:
        theme: Theme definition (colors, token categories, custom groups)
        utils: Util name -> expansion function
        strict_colors: Raise ColorSchemeError when light/dark keys differ

    Returns:
        StyleEngine
    """
    theme_input = coerce_theme_input(theme)
    resolved = merge_theme(theme_input)
    color_scheme = build_color_scheme(theme_input, strict=strict_colors)

    logger.debug(
        f"Built style engine (dark scheme: {color_scheme.has_dark}, utils: {len(utils or {})})"
    )
    return StyleEngine(theme=resolved, color_scheme=color_scheme, utils=dict(utils or {}))
