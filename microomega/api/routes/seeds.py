"""POST /api/v1/seeds/derive: fan a master seed out into child seeds."""

from __future__ import annotations

from fastapi import APIRouter

from microomega.api.schemas import DeriveSeedsRequest, DeriveSeedsResponse
from microomega.systems.rng import normalize_seed
from microomega.systems.seeding import SEED_SCHEME_VERSION, derive_children

router = APIRouter(prefix="/seeds")


@router.post("/derive", response_model=DeriveSeedsResponse)
def derive_seeds(request: DeriveSeedsRequest) -> DeriveSeedsResponse:
    return DeriveSeedsResponse(
        parent=normalize_seed(request.parent),
        children=list(derive_children(request.parent, request.count)),
        version=SEED_SCHEME_VERSION,
    )
