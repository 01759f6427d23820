"""GET /api/v1/config: expose core configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from microomega.api.dependencies import get_core_config
from microomega.api.schemas import CoreConfigResponse
from microomega.config import CoreConfig
from microomega.systems.seeding import SEED_SCHEME_VERSION

router = APIRouter()


@router.get("/config", response_model=CoreConfigResponse)
def get_config(
    config: CoreConfig = Depends(get_core_config),
) -> CoreConfigResponse:
    return CoreConfigResponse(
        world_size=config.world_size,
        scatter_min=config.scatter_min,
        scatter_radius=config.scatter_radius,
        power_up_drop_chance=config.power_up_drop_chance,
        power_up_drop_spread=config.power_up_drop_spread,
        seed_scheme_version=SEED_SCHEME_VERSION,
    )
