"""Final damage multiplier pipeline.

The order is fixed and shared by server and client:

    effective = elemental_multiplier + affinity_bonus
    final     = clamp_damage_multiplier(effective) * resistance_multiplier

Malformed status data degrades to neutral values; a hit is never dropped.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping

from microomega.combat.elements import get_elemental_rps_multiplier, resolve_affinity_bonus
from microomega.combat.resistance import (
    clamp_damage_multiplier,
    coerce_finite,
    resolve_resistance_multiplier,
    resolve_resistance_profile,
)
from microomega.core.enums import Relation

logger = logging.getLogger(__name__)

DEFENSE_MITIGATION = 0.6
MIN_DAMAGE = 1


# ---------------------------------------------------------------------------
# Result dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DamageBreakdown:
    """Every intermediate value of one multiplier resolution."""

    relation: Relation
    elemental_multiplier: float
    affinity_bonus: float
    resistance_multiplier: float
    multiplier: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "relation": self.relation.value,
            "elementalMultiplier": self.elemental_multiplier,
            "affinityBonus": self.affinity_bonus,
            "resistanceMultiplier": self.resistance_multiplier,
            "multiplier": self.multiplier,
        }


@dataclass(frozen=True, slots=True)
class HitResult:
    damage: int
    relation: Relation
    multiplier: float

    def to_dict(self) -> dict[str, Any]:
        return {"damage": self.damage, "relation": self.relation.value, "multiplier": self.multiplier}


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def resolve_damage_multiplier(
    attack_element: object,
    defending_element: object,
    affinity: object = None,
    *resistance_sources: Mapping[object, object] | None,
    attacker_element: object = None,
) -> DamageBreakdown:
    """Resolve the damage multiplier of one hit.

    ``resistance_sources`` (base, traits, buffs, converted weaknesses, ...)
    are summed into a fresh profile for this hit.  ``attacker_element`` is
    the attacker's innate element, used for the affinity ``same`` bonus.
    """
    elemental = get_elemental_rps_multiplier(attack_element, defending_element)
    bonus = resolve_affinity_bonus(
        attack_element, affinity, elemental.relation, attacker_element=attacker_element,
    )
    profile = resolve_resistance_profile(*resistance_sources)
    resistance_multiplier = resolve_resistance_multiplier(profile, attack_element)

    effective = elemental.multiplier + bonus
    final = clamp_damage_multiplier(effective) * resistance_multiplier

    return DamageBreakdown(
        relation=elemental.relation,
        elemental_multiplier=elemental.multiplier,
        affinity_bonus=bonus,
        resistance_multiplier=resistance_multiplier,
        multiplier=final,
    )


def compute_base_damage(attack: object, defense: object = 0, penetration: object = 0) -> float:
    """Flat damage before multipliers; defense beyond penetration mitigates 60%."""
    atk = max(1.0, coerce_finite(attack) or 1.0)
    dfn = max(0.0, coerce_finite(defense) or 0.0)
    pen = max(0.0, coerce_finite(penetration) or 0.0)
    mitigated = max(0.0, dfn - pen)
    return max(float(MIN_DAMAGE), atk - mitigated * DEFENSE_MITIGATION)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def resolve_hit(
    attack: object,
    attack_element: object,
    defending_element: object,
    affinity: object = None,
    *resistance_sources: Mapping[object, object] | None,
    defense: object = 0,
    penetration: object = 0,
    attacker_element: object = None,
) -> HitResult:
    """Integer damage of one hit; never below ``MIN_DAMAGE``."""
    base = compute_base_damage(attack, defense, penetration)
    breakdown = resolve_damage_multiplier(
        attack_element, defending_element, affinity, *resistance_sources,
        attacker_element=attacker_element,
    )
    damage = max(MIN_DAMAGE, _round_half_up(base * breakdown.multiplier))
    logger.debug(
        "Hit %s->%s base=%.2f mult=%.4f dmg=%d",
        attack_element, defending_element, base, breakdown.multiplier, damage,
    )
    return HitResult(damage=damage, relation=breakdown.relation, multiplier=breakdown.multiplier)
