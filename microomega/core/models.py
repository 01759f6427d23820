"""Core data models exchanged between the room layer and clients.

Every model converts to its JSON wire form with ``to_dict()``; wire keys
are camelCase.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from microomega.core.enums import ClusterShape, OrganicType, PowerUpType, parse_organic_type


def _wire_uint(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value & 0xFFFFFFFF
    if isinstance(value, float) and math.isfinite(value):
        return math.floor(value) & 0xFFFFFFFF
    return None


@dataclass(frozen=True, slots=True)
class Appearance:
    """Per-entity seed bundle sent instead of the entity's attributes."""

    type: OrganicType
    seed: int
    cluster_seed: int
    cluster_index: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "seed": self.seed,
            "clusterSeed": self.cluster_seed,
            "clusterIndex": self.cluster_index,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Appearance | None:
        """Parse a wire appearance; ``None`` for an unknown type or a non-numeric field."""
        organic_type = parse_organic_type(data.get("type"))
        seed = _wire_uint(data.get("seed"))
        cluster_seed = _wire_uint(data.get("clusterSeed"))
        cluster_index = _wire_uint(data.get("clusterIndex"))
        if organic_type is None or seed is None or cluster_seed is None or cluster_index is None:
            return None
        return cls(organic_type, seed, cluster_seed, cluster_index)


@dataclass(frozen=True, slots=True)
class ClusterEntry:
    scatter_angle: float
    scatter_distance: float
    delay_factor: float
    appearance: Appearance

    def to_dict(self) -> dict[str, Any]:
        return {
            "scatterAngle": self.scatter_angle,
            "scatterDistance": self.scatter_distance,
            "delayFactor": self.delay_factor,
            "appearance": self.appearance.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class ClusterPlan:
    """A batch of placement descriptors produced from one region seed."""

    size: int
    entries: tuple[ClusterEntry, ...] = ()

    @property
    def empty(self) -> bool:
        return self.size == 0

    def to_dict(self) -> dict[str, Any]:
        return {"size": self.size, "entries": [e.to_dict() for e in self.entries]}


@dataclass(frozen=True, slots=True)
class LayoutOffset:
    local_x: float
    local_y: float


@dataclass(frozen=True, slots=True)
class ClusterLayout:
    """Client-side decorative geometry of a cluster."""

    shape: ClusterShape
    offsets: tuple[LayoutOffset, ...]

    @property
    def size(self) -> int:
        return len(self.offsets)

    def to_dict(self) -> dict[str, Any]:
        return {
            "shape": self.shape.value,
            "size": self.size,
            "offsets": [{"localX": o.local_x, "localY": o.local_y} for o in self.offsets],
        }


@dataclass(frozen=True, slots=True)
class LayoutSlot:
    """Position of one entity inside a cluster layout."""

    shape: ClusterShape
    size: int
    index: int
    local_x: float = 0.0
    local_y: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "shape": self.shape.value,
            "size": self.size,
            "index": self.index,
            "localX": self.local_x,
            "localY": self.local_y,
        }


@dataclass(slots=True)
class OrganicMatter:
    """A materialized piece of organic matter."""

    type: OrganicType
    x: float
    y: float
    vx: float
    vy: float
    size: float
    color: str
    shape: str
    energy: int
    health: int
    rotation: float
    rotation_speed: float
    pulse_phase: float
    glow_intensity: float
    layout: LayoutSlot | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type.value,
            "x": self.x,
            "y": self.y,
            "vx": self.vx,
            "vy": self.vy,
            "size": self.size,
            "color": self.color,
            "shape": self.shape,
            "energy": self.energy,
            "health": self.health,
            "rotation": self.rotation,
            "rotationSpeed": self.rotation_speed,
            "pulsePhase": self.pulse_phase,
            "glowIntensity": self.glow_intensity,
        }
        if self.layout is not None:
            data["layout"] = self.layout.to_dict()
        return data


@dataclass(slots=True)
class PowerUp:
    id: int
    type: PowerUpType
    x: float
    y: float
    color: str
    icon: str
    pulse: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "x": self.x,
            "y": self.y,
            "color": self.color,
            "icon": self.icon,
            "pulse": self.pulse,
        }
