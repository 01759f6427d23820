"""Core configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoreConfig:
    """Immutable configuration for the simulation core and its service."""

    # World
    world_size: float = 4000.0

    # Organic clusters (server plan)
    scatter_min: float = 20.0
    scatter_radius: float = 70.0

    # Power-ups
    power_up_drop_chance: float = 0.18
    power_up_drop_spread: float = 40.0

    # Service
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: tuple[str, ...] = ("*",)

    # Logging
    log_level: str = "INFO"
