"""
Style utility expansion.

Utils are style shorthands defined once per engine that expand into one or
more canonical properties:

    utils = {"px": lambda v: {"paddingLeft": v, "paddingRight": v}}
    expand_utils({"px": 16, "color": "red"}, utils)
    # {"paddingLeft": 16, "paddingRight": 16, "color": "red"}

Expansion is shallow: a util's output is never expanded again.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from dazzle_variants.specs.styled import (
    CompoundVariant,
    SlotStyles,
    StyledConfig,
    StyleMap,
    VariantTable,
)

UtilFn = Callable[[Any], StyleMap]
UtilsConfig = Mapping[str, UtilFn]


@dataclass(frozen=True)
class ExpandedConfig:
    """Styled configuration with every util expanded, ready for resolution."""

    slots: tuple[str, ...]
    base: SlotStyles
    variants: VariantTable
    default_variants: dict[str, Any]
    compound_variants: tuple[CompoundVariant, ...]


def expand_utils(style: Mapping[str, Any] | None, utils: UtilsConfig) -> StyleMap:
    """
    Expand util keys in a single style map.

    Args:
        style: Style map that may contain util keys
        utils: Util name -> expansion function

    Returns:
        New style map; util output lands at the util key's position
    """
    if not style:
        return {}

    result: StyleMap = {}
    for key, value in style.items():
        util = utils.get(key)
        if util is not None:
            result.update(util(value))
        else:
            result[key] = value
    return result


def expand_base(base: SlotStyles | None, utils: UtilsConfig) -> SlotStyles:
    """Expand utils in every slot of a base styles mapping."""
    if not base:
        return {}
    return {slot: expand_utils(style, utils) for slot, style in base.items()}


def expand_variants(variants: VariantTable | None, utils: UtilsConfig) -> VariantTable:
    """Expand utils in every axis / value / slot of a variant table."""
    if not variants:
        return {}

    result: VariantTable = {}
    for axis, values in variants.items():
        if not values:
            continue
        result[axis] = {
            label: {slot: expand_utils(style, utils) for slot, style in (slots or {}).items()}
            for label, slots in values.items()
        }
    return result


def expand_compound_variants(
    compound_variants: list[CompoundVariant] | tuple[CompoundVariant, ...] | None,
    utils: UtilsConfig,
) -> tuple[CompoundVariant, ...]:
    """Expand utils in the css of each compound variant, keeping order."""
    if not compound_variants:
        return ()
    return tuple(
        CompoundVariant(
            conditions=dict(compound.conditions),
            css={slot: expand_utils(style, utils) for slot, style in compound.css.items()},
        )
        for compound in compound_variants
    )


def expand_config(config: StyledConfig, utils: UtilsConfig | None = None) -> ExpandedConfig:
    """
    Expand utils across a whole styled configuration.

    Args:
        config: Validated styled configuration
        utils: Util table (no expansion when empty)

    Returns:
        ExpandedConfig with base, variants and compound css expanded
    """
    utils = utils or {}
    return ExpandedConfig(
        slots=tuple(config.slots),
        base=expand_base(config.base, utils),
        variants=expand_variants(config.variants, utils),
        default_variants=dict(config.default_variants),
        compound_variants=expand_compound_variants(config.compound_variants, utils),
    )
