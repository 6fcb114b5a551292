"""
Variant resolution engine.

Key components:
- Util expansion (utils.py)
- Variant resolution (resolver.py)
- Result caching (cache.py)
- Styled declarations (styled.py)
"""

from dazzle_variants.engine.cache import StyleCache, clear_style_cache, create_cache_key
from dazzle_variants.engine.resolver import (
    apply_compound,
    apply_variant,
    compound_matches,
    compute_slot_styles,
    resolve_styles,
    resolve_variant_props,
)
from dazzle_variants.engine.styled import StyledComponent, define_config, styled
from dazzle_variants.engine.utils import (
    ExpandedConfig,
    UtilFn,
    UtilsConfig,
    expand_base,
    expand_compound_variants,
    expand_config,
    expand_utils,
    expand_variants,
)

__all__ = [
    # Declarations
    "styled",
    "define_config",
    "StyledComponent",
    # Resolution
    "resolve_styles",
    "resolve_variant_props",
    "compute_slot_styles",
    "apply_variant",
    "apply_compound",
    "compound_matches",
    # Utils
    "UtilFn",
    "UtilsConfig",
    "ExpandedConfig",
    "expand_utils",
    "expand_base",
    "expand_variants",
    "expand_compound_variants",
    "expand_config",
    # Caching
    "StyleCache",
    "create_cache_key",
    "clear_style_cache",
]
