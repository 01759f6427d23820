"""Combat endpoints: damage multipliers, hits and diminishing returns."""

from __future__ import annotations

from fastapi import APIRouter

from microomega.api.schemas import (
    DamageMultiplierRequest,
    DamageMultiplierResponse,
    DiminishingRequest,
    DiminishingResponse,
    HitRequest,
    HitResponse,
)
from microomega.combat.damage import resolve_damage_multiplier, resolve_hit
from microomega.combat.diminishing import calculate_diminishing_multiplier
from microomega.combat.resistance import convert_weaknesses_to_resistances

router = APIRouter(prefix="/combat")


@router.post("/multiplier", response_model=DamageMultiplierResponse)
def damage_multiplier(request: DamageMultiplierRequest) -> DamageMultiplierResponse:
    breakdown = resolve_damage_multiplier(
        request.attacking_element,
        request.defending_element,
        request.affinity,
        request.resistance_profile,
        convert_weaknesses_to_resistances(request.weaknesses),
        attacker_element=request.attacker_element,
    )
    return DamageMultiplierResponse(**breakdown.to_dict())


@router.post("/hit", response_model=HitResponse)
def hit(request: HitRequest) -> HitResponse:
    result = resolve_hit(
        request.attack,
        request.attacking_element,
        request.defending_element,
        request.affinity,
        request.resistance_profile,
        convert_weaknesses_to_resistances(request.weaknesses),
        defense=request.defense,
        penetration=request.penetration,
        attacker_element=request.attacker_element,
    )
    return HitResponse(**result.to_dict())


@router.post("/diminishing", response_model=DiminishingResponse)
def diminishing(request: DiminishingRequest) -> DiminishingResponse:
    return DiminishingResponse(multiplier=calculate_diminishing_multiplier(
        request.previous_purchases, request.tier,
        custom_rate=request.custom_rate, custom_minimum=request.custom_minimum,
    ))
