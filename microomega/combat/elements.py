"""Elemental rock-paper-scissors table and affinity bonuses.

Each element lists its own advantage and disadvantage targets.  Rows are
authored explicitly and are not mirrored: ``A`` beating ``B`` says nothing
about how ``B`` fares against ``A``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from microomega.core.enums import Affinity, Element, Relation, parse_affinity, parse_element

ELEMENTAL_ADVANTAGE_MULTIPLIER = 1.15
ELEMENTAL_DISADVANTAGE_MULTIPLIER = 0.9
ELEMENTAL_NEUTRAL_MULTIPLIER = 1.0


@dataclass(frozen=True, slots=True)
class Matchup:
    advantage: frozenset[Element]
    disadvantage: frozenset[Element]


def _row(advantage: tuple[Element, ...], disadvantage: tuple[Element, ...]) -> Matchup:
    return Matchup(frozenset(advantage), frozenset(disadvantage))


_E = Element

ELEMENTAL_RPS_TABLE: Mapping[Element, Matchup] = MappingProxyType({
    _E.BIO:      _row((_E.CHEMICAL,),             (_E.KINETIC, _E.SONIC)),
    _E.CHEMICAL: _row((_E.KINETIC, _E.BIO),        (_E.ACID, _E.THERMAL)),
    _E.ACID:     _row((_E.KINETIC, _E.THERMAL),    (_E.PSIONIC, _E.BIO)),
    _E.THERMAL:  _row((_E.ELECTRIC, _E.CHEMICAL),  (_E.ACID,)),
    _E.ELECTRIC: _row((_E.BIO, _E.SONIC),          (_E.THERMAL,)),
    _E.KINETIC:  _row((_E.BIO, _E.PSIONIC),        (_E.CHEMICAL, _E.ACID)),
    _E.PSIONIC:  _row((_E.ACID, _E.ELECTRIC),      (_E.SONIC,)),
    _E.SONIC:    _row((_E.PSIONIC, _E.CHEMICAL),   (_E.ELECTRIC, _E.BIO)),
})


@dataclass(frozen=True, slots=True)
class AffinityModifiers:
    """Additive bonuses selected by how the attack relates to its user."""

    same: float = 0.0
    advantage: float = 0.0
    disadvantage: float = 0.0


AFFINITY_MODIFIERS: Mapping[Affinity, AffinityModifiers] = MappingProxyType({
    Affinity.NEUTRAL: AffinityModifiers(),
    Affinity.ATTUNED: AffinityModifiers(same=0.15, advantage=0.05, disadvantage=0.0),
    Affinity.DIVERGENT: AffinityModifiers(same=-0.10, advantage=0.0, disadvantage=-0.15),
})


@dataclass(frozen=True, slots=True)
class ElementalMultiplier:
    relation: Relation
    multiplier: float

    def to_dict(self) -> dict[str, Any]:
        return {"relation": self.relation.value, "multiplier": self.multiplier}


def get_elemental_relationship(attacking: object, defending: object) -> Relation:
    """Relation of an attack element against a defender element.

    Blank, non-string or unknown elements resolve to ``Relation.NEUTRAL``.
    """
    attacker = parse_element(attacking)
    defender = parse_element(defending)
    if attacker is None or defender is None:
        return Relation.NEUTRAL
    if attacker is defender:
        return Relation.MIRROR

    row = ELEMENTAL_RPS_TABLE[attacker]
    if defender in row.advantage:
        return Relation.ADVANTAGE
    if defender in row.disadvantage:
        return Relation.DISADVANTAGE
    return Relation.NEUTRAL


def get_elemental_rps_multiplier(attacking: object, defending: object) -> ElementalMultiplier:
    relation = get_elemental_relationship(attacking, defending)
    if relation is Relation.ADVANTAGE:
        return ElementalMultiplier(relation, ELEMENTAL_ADVANTAGE_MULTIPLIER)
    if relation is Relation.DISADVANTAGE:
        return ElementalMultiplier(relation, ELEMENTAL_DISADVANTAGE_MULTIPLIER)
    return ElementalMultiplier(relation, ELEMENTAL_NEUTRAL_MULTIPLIER)


def resolve_affinity_bonus(
    attack_element: object,
    affinity: object,
    relation: Relation = Relation.NEUTRAL,
    attacker_element: object = None,
) -> float:
    """Additive bonus for an attack.

    The ``same`` modifier applies when the attack uses the attacker's innate
    element; otherwise the relation picks the advantage/disadvantage
    modifier, and mirror or neutral hits get nothing.
    """
    mods = AFFINITY_MODIFIERS[parse_affinity(affinity)]
    attack = parse_element(attack_element)
    innate = parse_element(attacker_element)

    if attack is not None and attack is innate:
        return mods.same
    if relation is Relation.ADVANTAGE:
        return mods.advantage
    if relation is Relation.DISADVANTAGE:
        return mods.disadvantage
    return 0.0
