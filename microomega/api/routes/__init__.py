"""Versioned API route modules."""

from fastapi import APIRouter

from microomega.api.routes.combat import router as combat_router
from microomega.api.routes.config import router as config_router
from microomega.api.routes.metadata import router as metadata_router
from microomega.api.routes.seeds import router as seeds_router
from microomega.api.routes.spawn import router as spawn_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(spawn_router, tags=["Spawn"])
api_router.include_router(seeds_router, tags=["Seeds"])
api_router.include_router(combat_router, tags=["Combat"])
api_router.include_router(config_router, tags=["Config"])
api_router.include_router(metadata_router)

__all__ = ["api_router"]
