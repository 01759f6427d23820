"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from microomega import __version__
from microomega.api.dependencies import set_core_config
from microomega.api.routes import api_router
from microomega.config import CoreConfig
from microomega.systems.seeding import SEED_SCHEME_VERSION
from microomega.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: CoreConfig | None = None) -> FastAPI:
    """Build the service around one immutable ``CoreConfig``.

    The config is registered before the app exists so route functions can be
    called without starting the server.
    """
    config = config or CoreConfig()
    set_core_config(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(config.log_level)
        logger.info("Simulation core service started (seed scheme v%d).", SEED_SCHEME_VERSION)
        yield
        logger.info("Simulation core service shutting down.")

    app = FastAPI(
        title="Micro-Omega Simulation Core",
        description=(
            "Deterministic content and combat resolution shared by the room server and clients.\n\n"
            "## API Groups\n\n"
            "- **Spawn**: Cluster plans, client layouts, appearance materialization, power-up drops\n"
            "- **Seeds**: Child seed derivation\n"
            "- **Combat**: Damage multipliers, hits, diminishing returns\n"
            "- **Config**: Read-only core configuration\n"
            "- **Metadata**: Element table, affinity modifiers, type catalogs\n"
        ),
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Spawn", "description": "Deterministic spawn planning. Same seed and options, same output."},
            {"name": "Seeds", "description": "Fan-out of a master seed into independent child seeds."},
            {"name": "Combat", "description": "Elemental damage resolution and upgrade diminishing returns."},
            {"name": "Config", "description": "Read-only core configuration parameters."},
            {"name": "Metadata", "description": "Static lookup data shared by server and clients."},
        ],
    )

    # Browser clients verify plans against the service directly
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials="*" not in config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
