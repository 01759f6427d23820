"""Spawn endpoints: cluster plans, client layouts, appearances and drops."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from microomega.api.dependencies import get_core_config
from microomega.api.schemas import (
    ClusterPlanRequest,
    ClusterPlanResponse,
    DropRequest,
    LayoutRequest,
    LayoutResponse,
    MaterializeRequest,
    PowerUpSchema,
)
from microomega.config import CoreConfig
from microomega.core.enums import parse_organic_type
from microomega.core.models import Appearance
from microomega.systems.cluster_planner import ClusterPlanOptions, plan_cluster_layout, plan_organic_cluster
from microomega.systems.entity_factory import OrganicOverrides, drop_power_ups, materialize_appearance
from microomega.systems.fingerprint import fingerprint_hex, fingerprint_layout, fingerprint_plan
from microomega.systems.rng import SeededRandom, combine_seeds

router = APIRouter(prefix="/spawn")


@router.post("/cluster", response_model=ClusterPlanResponse)
def plan_cluster(
    request: ClusterPlanRequest,
    config: CoreConfig = Depends(get_core_config),
) -> ClusterPlanResponse:
    options = ClusterPlanOptions(
        remaining=request.remaining,
        scatter_min=request.scatter_min if request.scatter_min is not None else config.scatter_min,
        scatter_radius=request.scatter_radius if request.scatter_radius is not None else config.scatter_radius,
        fallback_type=request.fallback_type,
        size_override=request.size_override,
    )
    plan = plan_organic_cluster(request.seed, options)
    return ClusterPlanResponse(
        **plan.to_dict(),
        fingerprint=fingerprint_hex(fingerprint_plan(plan)),
    )


@router.post("/layout", response_model=LayoutResponse)
def plan_layout(request: LayoutRequest) -> LayoutResponse:
    layout = plan_cluster_layout(SeededRandom(request.seed))
    return LayoutResponse(
        **layout.to_dict(),
        fingerprint=fingerprint_hex(fingerprint_layout(layout)),
    )


@router.post("/appearance")
def materialize(request: MaterializeRequest) -> dict:
    organic_type = parse_organic_type(request.appearance.type)
    if organic_type is None:
        raise HTTPException(status_code=422, detail=f"Unknown organic type '{request.appearance.type}'")
    appearance = Appearance(
        type=organic_type,
        seed=request.appearance.seed,
        cluster_seed=request.appearance.cluster_seed,
        cluster_index=request.appearance.cluster_index,
    )
    matter = materialize_appearance(
        appearance, x=request.x, y=request.y,
        overrides=OrganicOverrides.from_mapping(request.overrides),
    )
    if matter is None:
        raise HTTPException(status_code=422, detail="Appearance carries no usable seed")
    return matter.to_dict()


@router.post("/drops", response_model=list[PowerUpSchema])
def roll_drops(
    request: DropRequest,
    config: CoreConfig = Depends(get_core_config),
) -> list[PowerUpSchema]:
    seed = request.seed if request.sequence is None else combine_seeds(request.seed, request.sequence)
    drops = drop_power_ups(
        SeededRandom(seed), request.x, request.y, boss=request.boss,
        drop_chance=config.power_up_drop_chance, spread=config.power_up_drop_spread,
    )
    return [PowerUpSchema(**p.to_dict()) for p in drops]
