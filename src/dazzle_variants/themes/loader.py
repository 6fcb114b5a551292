"""
Theme configuration loading.

Reads a theme definition from TOML or YAML. A document with a top-level
``theme`` table (manifest style) uses that table; otherwise the whole
document is the theme.

Example theme.toml:

    [theme.colors.light]
    primary = "#007AFF"

    [theme.colors.dark]
    primary = "#0A84FF"

    [theme.fontSizes]
    xxs = 10
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from dazzle_variants.errors import ThemeConfigError
from dazzle_variants.specs.theme import ThemeInput

logger = logging.getLogger(__name__)

TOML_SUFFIXES = (".toml",)
YAML_SUFFIXES = (".yaml", ".yml")


def _read_document(path: Path) -> Any:
    content = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()

    if suffix in TOML_SUFFIXES:
        return tomllib.loads(content)
    if suffix in YAML_SUFFIXES:
        return yaml.safe_load(content)
    raise ThemeConfigError(f"Unsupported theme file type '{suffix}'", source=path)


def load_theme_config(path: Path | str) -> ThemeInput:
    """Load a theme definition from a .toml, .yaml or .yml file.

    Args:
        path: Theme file path.

    Returns:
        Validated ThemeInput. An empty document yields an empty theme.

    Raises:
        ThemeConfigError: If the file is missing, unparseable or malformed.
    """
    path = Path(path)

    if not path.exists():
        raise ThemeConfigError("Theme file not found", source=path)

    try:
        data = _read_document(path)
    except tomllib.TOMLDecodeError as e:
        raise ThemeConfigError(f"Invalid TOML: {e}", source=path) from e
    except yaml.YAMLError as e:
        raise ThemeConfigError(f"Invalid YAML: {e}", source=path) from e

    if not data:
        logger.warning(f"Empty theme file at {path}, using defaults")
        return ThemeInput()

    if not isinstance(data, dict):
        raise ThemeConfigError("Theme document must be a mapping", source=path)

    theme_data = data.get("theme", data)
    if not isinstance(theme_data, dict):
        raise ThemeConfigError("[theme] must be a table", source=path)

    try:
        theme = ThemeInput.model_validate(theme_data)
    except ValidationError as e:
        raise ThemeConfigError(f"Invalid theme schema: {e}", source=path) from e

    logger.debug(f"Loaded theme from {path}")
    return theme
