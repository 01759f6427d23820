"""Metadata endpoints: expose static definitions so clients hardcode nothing.

The element table, affinity modifiers and type catalogs are the same
immutable objects the core computes with; this module only reshapes them
for JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, TypeAdapter

from fastapi import APIRouter

from microomega.combat.diminishing import DIMINISHING_CONFIGS
from microomega.combat.elements import (
    AFFINITY_MODIFIERS,
    ELEMENTAL_ADVANTAGE_MULTIPLIER,
    ELEMENTAL_DISADVANTAGE_MULTIPLIER,
    ELEMENTAL_RPS_TABLE,
)
from microomega.core.catalog import ORGANIC_MATTER_TYPES, POWER_UP_TYPES, OrganicMatterDef, PowerUpDef
from microomega.core.enums import Element

router = APIRouter(prefix="/metadata", tags=["Metadata"])


class MatchupEntry(BaseModel):
    element: str
    advantage: list[str]
    disadvantage: list[str]


class AffinityEntry(BaseModel):
    affinity: str
    same: float
    advantage: float
    disadvantage: float


class DiminishingEntry(BaseModel):
    tier: str
    rate: float
    minimum: float


class ElementsResponse(BaseModel):
    elements: list[str]
    advantage_multiplier: float
    disadvantage_multiplier: float
    matchups: list[MatchupEntry]
    affinities: list[AffinityEntry]
    diminishing: list[DiminishingEntry]


def _sorted_values(elements: frozenset[Element]) -> list[str]:
    # Table order, not alphabetical
    return [e.value for e in Element if e in elements]


@router.get("/elements", response_model=ElementsResponse)
def get_elements() -> ElementsResponse:
    return ElementsResponse(
        elements=[e.value for e in Element],
        advantage_multiplier=ELEMENTAL_ADVANTAGE_MULTIPLIER,
        disadvantage_multiplier=ELEMENTAL_DISADVANTAGE_MULTIPLIER,
        matchups=[
            MatchupEntry(
                element=element.value,
                advantage=_sorted_values(row.advantage),
                disadvantage=_sorted_values(row.disadvantage),
            )
            for element, row in ELEMENTAL_RPS_TABLE.items()
        ],
        affinities=[
            AffinityEntry(affinity=a.value, same=m.same, advantage=m.advantage, disadvantage=m.disadvantage)
            for a, m in AFFINITY_MODIFIERS.items()
        ],
        diminishing=[
            DiminishingEntry(tier=t.value, rate=c.rate, minimum=c.minimum)
            for t, c in DIMINISHING_CONFIGS.items()
        ],
    )


_organic_adapter = TypeAdapter(list[OrganicMatterDef])
_power_up_adapter = TypeAdapter(list[PowerUpDef])


@router.get("/catalog")
def get_catalog() -> dict:
    return {
        "organic_matter": _organic_adapter.dump_python(list(ORGANIC_MATTER_TYPES.values()), mode="json"),
        "power_ups": _power_up_adapter.dump_python(list(POWER_UP_TYPES.values()), mode="json"),
    }
