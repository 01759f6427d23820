"""Tests for elemental combat resolution."""

import math

import pytest

from microomega.combat.damage import (
    compute_base_damage,
    resolve_damage_multiplier,
    resolve_hit,
)
from microomega.combat.elements import (
    AFFINITY_MODIFIERS,
    ELEMENTAL_RPS_TABLE,
    get_elemental_relationship,
    get_elemental_rps_multiplier,
    resolve_affinity_bonus,
)
from microomega.combat.resistance import (
    clamp_damage_multiplier,
    clamp_resistance_value,
    convert_weaknesses_to_resistances,
    normalize_weakness_profile,
    resolve_resistance_multiplier,
    resolve_resistance_profile,
)
from microomega.core.enums import Affinity, Element, Relation


# ---------------------------------------------------------------------------
# Relationship table
# ---------------------------------------------------------------------------

class TestRelationship:

    @pytest.mark.parametrize("element", list(Element))
    def test_mirror(self, element):
        assert get_elemental_relationship(element, element) is Relation.MIRROR
        assert get_elemental_relationship(element.value, element.value.upper()) is Relation.MIRROR

    def test_kinetic_beats_bio(self):
        result = get_elemental_rps_multiplier("kinetic", "bio")
        assert result.relation is Relation.ADVANTAGE
        assert result.multiplier == 1.15
        assert result.to_dict() == {"relation": "advantage", "multiplier": 1.15}

    def test_disadvantage(self):
        result = get_elemental_rps_multiplier(Element.BIO, Element.KINETIC)
        assert result.relation is Relation.DISADVANTAGE
        assert result.multiplier == 0.9

    def test_table_not_symmetric(self):
        # bio and chemical each list the other as an advantage
        assert get_elemental_relationship("acid", "thermal") is Relation.ADVANTAGE
        assert get_elemental_relationship("thermal", "acid") is Relation.DISADVANTAGE
        assert get_elemental_relationship("bio", "chemical") is Relation.ADVANTAGE
        assert get_elemental_relationship("chemical", "bio") is Relation.ADVANTAGE

    def test_neutral_pair(self):
        assert get_elemental_relationship("bio", "thermal") is Relation.NEUTRAL
        assert get_elemental_rps_multiplier("bio", "thermal").multiplier == 1.0

    @pytest.mark.parametrize("attacker, defender", [
        ("plasma", "bio"), ("bio", "plasma"), ("", "bio"), (None, "bio"), (42, "bio"), ("  ", "  "),
    ])
    def test_unknown_resolves_neutral(self, attacker, defender):
        assert get_elemental_relationship(attacker, defender) is Relation.NEUTRAL

    def test_whitespace_and_case(self):
        assert get_elemental_relationship("  KINETIC ", "Bio") is Relation.ADVANTAGE

    def test_every_element_has_a_row(self):
        assert set(ELEMENTAL_RPS_TABLE) == set(Element)
        for element, row in ELEMENTAL_RPS_TABLE.items():
            assert element not in row.advantage
            assert not row.advantage & row.disadvantage

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ELEMENTAL_RPS_TABLE[Element.BIO] = None  # type: ignore[index]
        with pytest.raises(TypeError):
            AFFINITY_MODIFIERS[Affinity.NEUTRAL] = None  # type: ignore[index]


# ---------------------------------------------------------------------------
# Affinity
# ---------------------------------------------------------------------------

class TestAffinityBonus:

    def test_attuned_same_element(self):
        assert resolve_affinity_bonus("thermal", "attuned", Relation.NEUTRAL, attacker_element="thermal") == 0.15

    def test_same_wins_over_relation(self):
        bonus = resolve_affinity_bonus("kinetic", "divergent", Relation.ADVANTAGE, attacker_element="kinetic")
        assert bonus == -0.10

    def test_attuned_advantage(self):
        assert resolve_affinity_bonus("kinetic", "attuned", Relation.ADVANTAGE, attacker_element="bio") == 0.05

    def test_divergent_disadvantage(self):
        assert resolve_affinity_bonus("bio", "divergent", Relation.DISADVANTAGE) == -0.15

    def test_mirror_and_neutral_get_nothing(self):
        assert resolve_affinity_bonus("bio", "attuned", Relation.MIRROR) == 0.0
        assert resolve_affinity_bonus("bio", "attuned", Relation.NEUTRAL) == 0.0

    @pytest.mark.parametrize("relation", list(Relation))
    def test_neutral_affinity_always_zero(self, relation):
        assert resolve_affinity_bonus("bio", "neutral", relation, attacker_element="bio") == 0.0

    def test_unknown_affinity_is_neutral(self):
        assert resolve_affinity_bonus("bio", "chaotic", Relation.ADVANTAGE, attacker_element="bio") == 0.0
        assert resolve_affinity_bonus("bio", None, Relation.ADVANTAGE) == 0.0

    def test_affinity_case_insensitive(self):
        assert resolve_affinity_bonus("bio", " ATTUNED ", Relation.ADVANTAGE) == 0.05


# ---------------------------------------------------------------------------
# Resistance
# ---------------------------------------------------------------------------

class TestResistance:

    @pytest.mark.parametrize("value, expected", [
        (0.5, 0.5), (2.0, 0.95), (-2.0, -0.95), (math.nan, 0.0), (math.inf, 0.0), ("x", 0.0), (None, 0.0), (10**400, 0.0),
    ])
    def test_clamp_resistance_value(self, value, expected):
        assert clamp_resistance_value(value) == expected

    @pytest.mark.parametrize("value, expected", [
        (1.0, 1.0), (0.0, 0.05), (9.0, 5.0), (math.nan, 1.0), (-math.inf, 1.0),
    ])
    def test_clamp_damage_multiplier(self, value, expected):
        assert clamp_damage_multiplier(value) == expected

    def test_profile_clamps_at_cap(self):
        profile = resolve_resistance_profile({"thermal": 0.5}, {"Thermal": 0.3}, {"THERMAL": 0.4})
        assert profile[Element.THERMAL] == 0.95

    def test_profile_clamps_after_each_source(self):
        # Clamping only the final sum would give 0.9
        profile = resolve_resistance_profile({"bio": 0.9}, {"bio": 0.9}, {"bio": -0.9})
        assert profile[Element.BIO] == pytest.approx(0.05)

    def test_profile_source_order_matters(self):
        debuff_last = resolve_resistance_profile({"acid": 0.9}, {"acid": 0.9}, {"acid": -0.9})
        debuff_first = resolve_resistance_profile({"acid": -0.9}, {"acid": 0.9}, {"acid": 0.9})
        assert debuff_last[Element.ACID] == pytest.approx(0.05)
        assert debuff_first[Element.ACID] == pytest.approx(0.9)

    def test_profile_contains_every_element(self):
        profile = resolve_resistance_profile()
        assert profile == {element: 0.0 for element in Element}

    def test_profile_skips_junk(self):
        profile = resolve_resistance_profile(
            {"bio": math.nan, "plasma": 0.5, "acid": "0.25"}, None, "not-a-mapping",
        )
        assert profile[Element.BIO] == 0.0
        assert profile[Element.ACID] == 0.25
        assert "plasma" not in profile

    def test_profile_is_fresh_each_time(self):
        a = resolve_resistance_profile({"bio": 0.2})
        a[Element.BIO] = 0.9
        assert resolve_resistance_profile({"bio": 0.2})[Element.BIO] == 0.2

    def test_weaknesses_become_negative_resistance(self):
        result = convert_weaknesses_to_resistances({"sonic": 0.3, "Acid": -0.4, "bio": 5})
        assert result == {Element.SONIC: -0.3, Element.ACID: -0.4, Element.BIO: -0.95}

    def test_weakness_profile_absolute_values(self):
        assert normalize_weakness_profile({"sonic": -0.2, "plasma": 1, "bio": math.nan}) == {Element.SONIC: 0.2}

    def test_resistance_multiplier(self):
        profile = {"thermal": 0.5}
        assert resolve_resistance_multiplier(profile, "thermal") == 0.5
        assert resolve_resistance_multiplier(profile, "bio") == 1.0

    def test_resistance_multiplier_clamps_out_of_range(self):
        assert resolve_resistance_multiplier({"bio": 50}, "bio") == pytest.approx(0.05)
        assert resolve_resistance_multiplier({"bio": -50}, "bio") == pytest.approx(1.95)
        assert 0.05 <= resolve_resistance_multiplier({"bio": 0.95}, "bio") <= 5

    def test_resistance_multiplier_enum_keys(self):
        assert resolve_resistance_multiplier({Element.ACID: 0.25}, "acid") == 0.75

    def test_resistance_multiplier_unknown_element(self):
        assert resolve_resistance_multiplier({"bio": 0.5}, "plasma") == 1.0
        assert resolve_resistance_multiplier(None, "bio") == 1.0


# ---------------------------------------------------------------------------
# Final multiplier
# ---------------------------------------------------------------------------

class TestDamageMultiplier:

    def test_plain_advantage(self):
        result = resolve_damage_multiplier("kinetic", "bio")
        assert result.relation is Relation.ADVANTAGE
        assert result.multiplier == pytest.approx(1.15)

    def test_affinity_is_additive(self):
        result = resolve_damage_multiplier("kinetic", "bio", "attuned")
        assert result.affinity_bonus == 0.05
        assert result.multiplier == pytest.approx(1.20)

    def test_order_clamp_then_resistance(self):
        # (0.9 - 0.15) clamped, then scaled by the 1.5x from a negative resistance
        result = resolve_damage_multiplier("bio", "kinetic", "divergent", {"bio": -0.5})
        assert result.multiplier == pytest.approx(0.75 * 1.5)

    def test_multiple_resistance_sources(self):
        result = resolve_damage_multiplier(
            "thermal", "electric", None,
            {"thermal": 0.2}, {"thermal": 0.3}, convert_weaknesses_to_resistances({"thermal": 0.1}),
        )
        assert result.resistance_multiplier == pytest.approx(0.6)
        assert result.multiplier == pytest.approx(1.15 * 0.6)

    def test_resistance_applied_after_clamp(self):
        # The clamp bounds only the elemental + affinity sum; resistance
        # can still take the result below 0.05 * 1.
        result = resolve_damage_multiplier("bio", "kinetic", None, {"bio": 0.95})
        assert result.multiplier == pytest.approx(0.9 * 0.05)

    def test_oversized_resistance_is_ignored(self):
        result = resolve_damage_multiplier("kinetic", "bio", None, {"kinetic": 10**400})
        assert math.isfinite(result.multiplier)
        assert result.resistance_multiplier == 1.0
        assert result.multiplier == pytest.approx(1.15)

    def test_malformed_status_data_still_hits(self):
        result = resolve_damage_multiplier(None, "bio", 12, {"bio": "junk"}, None)
        assert result.relation is Relation.NEUTRAL
        assert result.multiplier == 1.0

    def test_to_dict(self):
        data = resolve_damage_multiplier("kinetic", "bio").to_dict()
        assert data["relation"] == "advantage"
        assert set(data) == {
            "relation", "elementalMultiplier", "affinityBonus", "resistanceMultiplier", "multiplier",
        }


class TestResolveHit:

    def test_base_damage_mitigation(self):
        assert compute_base_damage(20, 10, 0) == 14.0
        assert compute_base_damage(20, 10, 4) == pytest.approx(16.4)
        assert compute_base_damage(1, 100) == 1.0

    def test_base_damage_malformed(self):
        assert compute_base_damage(math.nan, math.nan, None) == 1.0

    def test_hit_rounds_half_up(self):
        # 5 * 0.5 = 2.5 -> 3
        result = resolve_hit(5, "bio", "thermal", None, {"bio": 0.5})
        assert result.damage == 3
        assert result.relation is Relation.NEUTRAL

    def test_hit_applies_defense(self):
        result = resolve_hit(20, "bio", "kinetic", defense=10)
        assert result.damage == round(14 * 0.9)
        assert result.relation is Relation.DISADVANTAGE

    def test_hit_with_oversized_numbers(self):
        result = resolve_hit(10**400, "kinetic", "bio", None, {"bio": 10**400}, defense=10**400)
        assert result.damage >= 1
        assert math.isfinite(result.multiplier)

    def test_hit_never_below_one(self):
        result = resolve_hit(1, "bio", "kinetic", "divergent", {"bio": 0.95}, defense=50)
        assert result.damage == 1
