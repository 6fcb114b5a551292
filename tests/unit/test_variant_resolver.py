"""
Unit tests for variant resolution.

Covers merge precedence, default fill, boolean normalization and the
silent handling of undeclared axes and unsatisfiable compounds.
"""

import pytest

from dazzle_variants.engine import (
    apply_compound,
    apply_variant,
    compound_matches,
    compute_slot_styles,
    expand_config,
    resolve_styles,
    resolve_variant_props,
)
from dazzle_variants.specs import CompoundVariant, StyledConfig, normalize_variant_value


def _expanded(config):
    return expand_config(StyledConfig.coerce(config))


class TestNormalizeVariantValue:
    """Tests for variant label normalization."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "true"),
            (False, "false"),
            ("true", "true"),
            ("lg", "lg"),
            (2, "2"),
        ],
    )
    def test_normalize(self, value, expected):
        assert normalize_variant_value(value) == expected


class TestResolveVariantProps:
    """Tests for filling props from default variants."""

    def test_defaults_used_when_omitted(self):
        assert resolve_variant_props({"size": "sm"}, None) == {"size": "sm"}

    def test_props_override_defaults(self):
        assert resolve_variant_props({"size": "sm"}, {"size": "lg"}) == {"size": "lg"}

    def test_none_does_not_erase_default(self):
        assert resolve_variant_props({"size": "sm"}, {"size": None}) == {"size": "sm"}

    def test_defaults_not_mutated(self):
        defaults = {"size": "sm"}
        resolve_variant_props(defaults, {"size": "lg"})
        assert defaults == {"size": "sm"}


class TestApplyVariant:
    """Tests for per-axis variant merging."""

    def test_undeclared_axis_ignored(self):
        variants = {"size": {"lg": {"root": {"padding": 24}}}}
        assert apply_variant("root", variants, {"tone": "loud"}) == {}

    def test_undeclared_label_ignored(self):
        variants = {"size": {"lg": {"root": {"padding": 24}}}}
        assert apply_variant("root", variants, {"size": "xl"}) == {}

    def test_missing_slot_ignored(self):
        variants = {"size": {"lg": {"root": {"padding": 24}}}}
        assert apply_variant("label", variants, {"size": "lg"}) == {}

    def test_last_axis_wins(self):
        variants = {
            "size": {"lg": {"root": {"padding": 24, "margin": 1}}},
            "dense": {"true": {"root": {"padding": 4}}},
        }
        style = apply_variant("root", variants, {"size": "lg", "dense": True})
        assert style == {"padding": 4, "margin": 1}


class TestCompoundMatching:
    """Tests for compound variant conditions."""

    def test_all_conditions_must_match(self):
        compound = CompoundVariant(conditions={"size": "lg", "square": True})
        assert compound_matches(compound, {"size": "lg", "square": True})
        assert not compound_matches(compound, {"size": "lg", "square": False})

    def test_boolean_string_equivalence(self):
        compound = CompoundVariant(conditions={"square": "true"})
        assert compound_matches(compound, {"square": True})

    def test_zero_conditions_always_match(self):
        compound = CompoundVariant(css={"root": {"opacity": 0.5}})
        assert compound_matches(compound, {})
        assert apply_compound("root", [compound], {}) == {"opacity": 0.5}

    def test_unresolved_axis_does_not_match(self):
        compound = CompoundVariant(conditions={"tone": "loud"})
        assert not compound_matches(compound, {"size": "lg"})

    def test_compounds_apply_in_declaration_order(self):
        first = CompoundVariant(conditions={"size": "lg"}, css={"root": {"width": 1, "height": 1}})
        second = CompoundVariant(conditions={"size": "lg"}, css={"root": {"width": 2}})
        assert apply_compound("root", [first, second], {"size": "lg"}) == {"width": 2, "height": 1}


class TestComputeSlotStyles:
    """Tests for full precedence per slot."""

    def test_precedence_compound_over_variant_over_base(self):
        base = {"root": {"color": "base", "padding": 1, "margin": 1}}
        variants = {"size": {"lg": {"root": {"color": "variant", "padding": 2}}}}
        compounds = [
            CompoundVariant(conditions={"size": "lg"}, css={"root": {"color": "compound"}})
        ]

        style = compute_slot_styles("root", base, variants, compounds, {"size": "lg"})

        assert style == {"color": "compound", "padding": 2, "margin": 1}

    def test_absent_base_slot_is_empty(self):
        assert compute_slot_styles("root", {}, {}, [], {}) == {}


class TestResolveStyles:
    """Tests for resolving a whole configuration."""

    def test_default_size(self, size_config):
        assert resolve_styles(_expanded(size_config)) == {"root": {"padding": 8}}

    def test_selected_size(self, size_config):
        assert resolve_styles(_expanded(size_config), {"size": "lg"}) == {"root": {"padding": 24}}

    def test_compound_overrides_square_axis(self):
        config = _expanded(
            {
                "slots": ["root"],
                "variants": {
                    "size": {"lg": {"root": {"padding": 24}}},
                    "square": {True: {"root": {"width": 48, "height": 48}}},
                },
                "compoundVariants": [
                    {"size": "lg", "square": True, "css": {"root": {"width": 64, "height": 64}}},
                ],
            }
        )

        result = resolve_styles(config, {"size": "lg", "square": True})

        assert result == {"root": {"padding": 24, "width": 64, "height": 64}}

    def test_every_slot_present_in_order(self, button_config):
        result = resolve_styles(_expanded(button_config))
        assert list(result) == ["root", "text"]
        assert result["text"] == {"fontSize": 12}

    def test_deterministic(self, button_config):
        config = _expanded(button_config)
        first = resolve_styles(config, {"size": "lg", "square": True})
        second = resolve_styles(config, {"size": "lg", "square": True})
        assert first == second
        assert first is not second

    def test_boolean_and_string_selections_equivalent(self, button_config):
        config = _expanded(button_config)
        as_bool = resolve_styles(config, {"square": True})
        assert as_bool == resolve_styles(config, {"square": "true"})
