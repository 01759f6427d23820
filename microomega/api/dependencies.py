"""FastAPI dependency injection: provides the active CoreConfig."""

from __future__ import annotations

from microomega.config import CoreConfig

_core_config: CoreConfig | None = None


def set_core_config(config: CoreConfig) -> None:
    global _core_config
    _core_config = config


def get_core_config() -> CoreConfig:
    if _core_config is None:
        raise RuntimeError("CoreConfig not initialized: server not started correctly.")
    return _core_config
