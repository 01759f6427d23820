"""Elemental combat resolution: relations, affinity, resistance, diminishing returns."""

from microomega.combat.elements import (
    get_elemental_relationship,
    get_elemental_rps_multiplier,
    resolve_affinity_bonus,
)
from microomega.combat.resistance import (
    clamp_damage_multiplier,
    convert_weaknesses_to_resistances,
    resolve_resistance_multiplier,
    resolve_resistance_profile,
)
from microomega.combat.diminishing import calculate_diminishing_multiplier
from microomega.combat.damage import resolve_damage_multiplier, resolve_hit

__all__ = [
    "calculate_diminishing_multiplier",
    "clamp_damage_multiplier",
    "convert_weaknesses_to_resistances",
    "get_elemental_relationship",
    "get_elemental_rps_multiplier",
    "resolve_affinity_bonus",
    "resolve_damage_multiplier",
    "resolve_hit",
    "resolve_resistance_multiplier",
    "resolve_resistance_profile",
]
