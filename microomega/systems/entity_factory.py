"""Entity factory: materialize organic matter and power-ups from a stream.

Draw order for organic matter is fixed: size, vx, vy, color, shape,
rotation speed, rotation, pulse phase, glow intensity.  An overridden
attribute consumes no draw, so overriding one attribute never shifts the
values generated for the attributes after it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from microomega.core.catalog import (
    ORGANIC_MATTER_TYPES,
    POWER_UP_TYPES,
    POWER_UP_TYPE_KEYS,
)
from microomega.core.enums import (
    OrganicType,
    PowerUpType,
    parse_organic_type,
    parse_power_up_type,
)
from microomega.core.models import Appearance, LayoutSlot, OrganicMatter, PowerUp
from microomega.systems.rng import SeededRandom
from microomega.systems.seeding import stream_for_appearance, to_seed_value

logger = logging.getLogger(__name__)

TAU = math.pi * 2

VELOCITY_SPREAD = 0.2
ROTATION_SPEED_SPREAD = 2.0
GLOW_BASE = 0.5
GLOW_SPREAD = 0.5

FALLBACK_COLOR = "#FFFFFF"
FALLBACK_SHAPE = "sphere"

DEFAULT_DROP_CHANCE = 0.18
DEFAULT_DROP_SPREAD = 40.0


# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OrganicOverrides:
    """Explicit attribute values that take precedence over generation."""

    size: float | None = None
    vx: float | None = None
    vy: float | None = None
    color: str | None = None
    shape: str | None = None
    energy: int | None = None
    health: int | None = None
    rotation_speed: float | None = None
    rotation: float | None = None
    pulse_phase: float | None = None
    glow_intensity: float | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> OrganicOverrides:
        """Accept snake_case or camelCase keys; unknown keys are ignored."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _snake_case(key)
            if name in known and value is not None:
                values[name] = value
            else:
                logger.debug("Ignoring override %r", key)
        return cls(**values)


def _snake_case(key: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in key)


# ---------------------------------------------------------------------------
# Organic matter
# ---------------------------------------------------------------------------

def create_organic_matter(
    organic_type: OrganicType | str,
    stream: SeededRandom,
    x: float = 0.0,
    y: float = 0.0,
    layout: LayoutSlot | None = None,
    overrides: OrganicOverrides | None = None,
) -> OrganicMatter | None:
    """Materialize one organic matter entity; ``None`` for an unknown type."""
    otype = parse_organic_type(organic_type)
    if otype is None:
        logger.debug("Unknown organic type %r", organic_type)
        return None
    tdef = ORGANIC_MATTER_TYPES[otype]
    ov = overrides or OrganicOverrides()

    size = ov.size if ov.size is not None else tdef.size_min + stream() * (tdef.size_max - tdef.size_min)
    vx = ov.vx if ov.vx is not None else (stream() - 0.5) * VELOCITY_SPREAD
    vy = ov.vy if ov.vy is not None else (stream() - 0.5) * VELOCITY_SPREAD
    color = ov.color if ov.color is not None else (stream.pick(tdef.colors) or FALLBACK_COLOR)
    shape = ov.shape if ov.shape is not None else (stream.pick(tdef.shapes) or FALLBACK_SHAPE)
    rotation_speed = (
        ov.rotation_speed if ov.rotation_speed is not None
        else (stream() - 0.5) * ROTATION_SPEED_SPREAD
    )
    rotation = ov.rotation if ov.rotation is not None else stream() * TAU
    pulse_phase = ov.pulse_phase if ov.pulse_phase is not None else stream() * TAU
    glow = ov.glow_intensity if ov.glow_intensity is not None else stream() * GLOW_SPREAD + GLOW_BASE

    local_x = layout.local_x if layout else 0.0
    local_y = layout.local_y if layout else 0.0

    return OrganicMatter(
        type=otype,
        x=x + local_x,
        y=y + local_y,
        vx=vx,
        vy=vy,
        size=size,
        color=color,
        shape=shape,
        energy=ov.energy if ov.energy is not None else tdef.energy,
        health=ov.health if ov.health is not None else tdef.health,
        rotation=rotation,
        rotation_speed=rotation_speed,
        pulse_phase=pulse_phase,
        glow_intensity=glow,
        layout=layout,
    )


def materialize_appearance(
    appearance: Appearance,
    x: float = 0.0,
    y: float = 0.0,
    overrides: OrganicOverrides | None = None,
) -> OrganicMatter | None:
    """Regenerate a single cluster member from its wire appearance."""
    stream = stream_for_appearance(
        seed=appearance.seed,
        cluster_seed=appearance.cluster_seed,
        cluster_index=appearance.cluster_index,
    )
    if stream is None:
        return None
    return create_organic_matter(appearance.type, stream, x=x, y=y, overrides=overrides)


# ---------------------------------------------------------------------------
# Power-ups
# ---------------------------------------------------------------------------

def create_power_up(
    power_up_type: PowerUpType | str,
    stream: SeededRandom,
    x: float = 0.0,
    y: float = 0.0,
    power_up_id: int | None = None,
    color: str | None = None,
    icon: str | None = None,
    pulse: float | None = None,
) -> PowerUp | None:
    ptype = parse_power_up_type(power_up_type)
    if ptype is None:
        logger.debug("Unknown power-up type %r", power_up_type)
        return None
    pdef = POWER_UP_TYPES[ptype]

    pid = power_up_id if power_up_id is not None else to_seed_value(stream())
    return PowerUp(
        id=pid,
        type=ptype,
        x=x,
        y=y,
        color=color if color is not None else pdef.color,
        icon=icon if icon is not None else pdef.icon,
        pulse=pulse if pulse is not None else stream() * TAU,
    )


def spawn_power_up(
    stream: SeededRandom,
    world_size: float = 4000.0,
    forced_type: PowerUpType | str | None = None,
    position: tuple[float, float] | None = None,
) -> PowerUp | None:
    """Spawn a power-up of a forced or uniformly drawn type."""
    ptype = parse_power_up_type(forced_type) if forced_type is not None else stream.pick(POWER_UP_TYPE_KEYS)
    if ptype is None:
        return None
    if position is not None:
        x, y = position
    else:
        x = stream() * world_size
        y = stream() * world_size
    return create_power_up(ptype, stream, x=x, y=y)


def drop_power_ups(
    stream: SeededRandom,
    x: float,
    y: float,
    boss: bool = False,
    drop_chance: float = DEFAULT_DROP_CHANCE,
    spread: float = DEFAULT_DROP_SPREAD,
) -> list[PowerUp]:
    """Roll the power-up drops of a defeated enemy.

    Bosses always drop, and additionally leave one power-up exactly where
    they died.
    """
    drops: list[PowerUp] = []
    chance = 1.0 if boss else drop_chance

    if stream() < chance:
        offset_x = (stream() - 0.5) * spread
        offset_y = (stream() - 0.5) * spread
        power_up = spawn_power_up(stream, position=(x + offset_x, y + offset_y))
        if power_up is not None:
            drops.append(power_up)

    if boss:
        power_up = spawn_power_up(stream, position=(x, y))
        if power_up is not None:
            drops.append(power_up)

    return drops
