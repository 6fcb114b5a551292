"""Shared pytest fixtures for dazzle-variants tests."""

from typing import Any

import pytest

from dazzle_variants.engine import clear_style_cache


@pytest.fixture(autouse=True)
def _clear_style_cache():
    """Start every test with empty selection caches."""
    clear_style_cache()
    yield
    clear_style_cache()


@pytest.fixture
def size_config() -> dict[str, Any]:
    """Return a single-slot config with a size axis."""
    return {
        "slots": ["root"],
        "base": {"root": {"padding": 16}},
        "variants": {
            "size": {
                "sm": {"root": {"padding": 8}},
                "lg": {"root": {"padding": 24}},
            },
        },
        "defaultVariants": {"size": "sm"},
    }


@pytest.fixture
def button_config() -> dict[str, Any]:
    """Return a two-slot config with size, square and compound variants."""
    return {
        "slots": ["root", "text"],
        "base": {
            "root": {"padding": 16, "backgroundColor": "#fff"},
            "text": {"fontSize": 14},
        },
        "variants": {
            "size": {
                "sm": {"root": {"padding": 8}, "text": {"fontSize": 12}},
                "lg": {"root": {"padding": 24}, "text": {"fontSize": 18}},
            },
            "square": {
                "true": {"root": {"width": 48, "height": 48}},
                "false": {},
            },
        },
        "defaultVariants": {"size": "sm", "square": False},
        "compoundVariants": [
            {"size": "lg", "square": True, "css": {"root": {"width": 64, "height": 64}}},
        ],
    }


@pytest.fixture
def spacing_utils() -> dict[str, Any]:
    """Return padding/margin shorthand utils."""
    return {
        "px": lambda v: {"paddingLeft": v, "paddingRight": v},
        "py": lambda v: {"paddingTop": v, "paddingBottom": v},
        "mx": lambda v: {"marginLeft": v, "marginRight": v},
        "size": lambda v: {"width": v, "height": v},
    }
