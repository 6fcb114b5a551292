"""
Variant resolution.

Computes the style of each slot by layering, in order:
1. Base styles
2. Variant styles (one per resolved axis, variant-table order, last wins)
3. Compound variant styles (declaration order, last wins)

Resolution is deterministic and never fails: undeclared axes, unknown
value labels and unsatisfiable compounds simply contribute nothing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from dazzle_variants.specs.styled import (
    CompoundVariant,
    SlotStyles,
    StyleMap,
    VariantTable,
    normalize_variant_value,
)

from .utils import ExpandedConfig


def resolve_variant_props(
    default_variants: Mapping[str, Any],
    props: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """
    Fill omitted axes from the default variants.

    A prop set to None counts as not provided and never erases a default.
    """
    resolved = dict(default_variants)
    if props:
        for key, value in props.items():
            if value is not None:
                resolved[key] = value
    return resolved


def apply_variant(slot: str, variants: VariantTable, props: Mapping[str, Any]) -> StyleMap:
    """
    Merge the variant styles selected by ``props`` for one slot.

    Args:
        slot: Slot to collect styles for
        variants: Axis -> label -> slot -> style
        props: Resolved variant selections

    Returns:
        Merged variant style for the slot
    """
    style: StyleMap = {}

    for axis, values in variants.items():
        value = props.get(axis)
        if value is None or not values:
            continue

        slot_style = values.get(normalize_variant_value(value), {}).get(slot)
        if slot_style:
            style.update(slot_style)

    return style


def compound_matches(compound: CompoundVariant, props: Mapping[str, Any]) -> bool:
    """Check every condition of a compound variant against resolved props."""
    for axis, expected in compound.conditions.items():
        actual = props.get(axis)
        if actual is None or expected is None:
            if actual is not expected:
                return False
            continue
        if normalize_variant_value(expected) != normalize_variant_value(actual):
            return False
    return True


def apply_compound(
    slot: str,
    compound_variants: Iterable[CompoundVariant],
    props: Mapping[str, Any],
) -> StyleMap:
    """Merge css of every matching compound variant for one slot."""
    style: StyleMap = {}

    for compound in compound_variants:
        slot_style = compound.css.get(slot)
        if slot_style and compound_matches(compound, props):
            style.update(slot_style)

    return style


def compute_slot_styles(
    slot: str,
    base: SlotStyles,
    variants: VariantTable,
    compound_variants: Iterable[CompoundVariant],
    props: Mapping[str, Any],
) -> StyleMap:
    """
    Compute the final style for a slot.

    Precedence: compound > variant > base.
    """
    return {
        **base.get(slot, {}),
        **apply_variant(slot, variants, props),
        **apply_compound(slot, compound_variants, props),
    }


def resolve_styles(config: ExpandedConfig, props: Mapping[str, Any] | None = None) -> SlotStyles:
    """
    Resolve every slot of an expanded configuration.

    Args:
        config: Configuration with utils already expanded
        props: Variant selections from the caller (None values ignored)

    Returns:
        Slot -> style, in slot declaration order
    """
    resolved_props = resolve_variant_props(config.default_variants, props)
    return {
        slot: compute_slot_styles(
            slot,
            config.base,
            config.variants,
            config.compound_variants,
            resolved_props,
        )
        for slot in config.slots
    }
