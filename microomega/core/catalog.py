"""Static type catalogs for organic matter and power-ups.

Definitions are frozen pydantic dataclasses collected into read-only
registries at import time.  Every ``OrganicType`` and ``PowerUpType`` member
must have exactly one definition; a missing entry fails the import instead of
surfacing later as a silent lookup miss.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, TypeVar

from pydantic.dataclasses import dataclass as pydantic_dataclass

from microomega.core.enums import OrganicType, PowerUpType


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class AttributeBuffDef:
    """Short-lived attribute bonus granted when organic matter is consumed."""

    key: str
    label: str
    description: str
    color: str
    icon: str


@pydantic_dataclass(frozen=True)
class OrganicMatterDef:
    """Appearance ranges and nutrition values of one organic matter type."""

    organic_type: OrganicType
    colors: tuple[str, ...]
    size_min: float
    size_max: float
    energy: int
    health: int
    shapes: tuple[str, ...]
    nutrients: tuple[str, ...] = ()
    attribute_buff: AttributeBuffDef | None = None


@pydantic_dataclass(frozen=True)
class PowerUpDef:
    """Catalog entry for a power-up pickup."""

    power_up_type: PowerUpType
    name: str
    icon: str
    color: str
    instant: bool = False
    duration: float = 0.0
    message: str = ""


# ---------------------------------------------------------------------------
# Attribute buffs
# ---------------------------------------------------------------------------

ATTRIBUTE_BUFFS: Mapping[str, AttributeBuffDef] = MappingProxyType({
    "attack": AttributeBuffDef(
        key="attack", label="Aggression Boost",
        description="Temporarily amplifies attack potency.",
        color="#FF4F81", icon="ATK",
    ),
    "defense": AttributeBuffDef(
        key="defense", label="Carapace Shield",
        description="Bolsters defensive resilience for a short time.",
        color="#F5A524", icon="DEF",
    ),
    "speed": AttributeBuffDef(
        key="speed", label="Metabolic Surge",
        description="Accelerates locomotion and reaction speed.",
        color="#2FD8A7", icon="SPD",
    ),
    "range": AttributeBuffDef(
        key="range", label="Focus Bloom",
        description="Extends effective attack distance.",
        color="#3DA9FC", icon="RNG",
    ),
})


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

_E = TypeVar("_E", bound=Enum)
_D = TypeVar("_D")


def _freeze_registry(enum_cls: type[_E], entries: dict[_E, _D]) -> Mapping[_E, _D]:
    missing = [member.value for member in enum_cls if member not in entries]
    if missing:
        raise RuntimeError(f"{enum_cls.__name__} catalog is missing: {', '.join(missing)}")
    # Iteration order follows the enum, which keeps uniform picks stable.
    return MappingProxyType({member: entries[member] for member in enum_cls})


ORGANIC_MATTER_TYPES: Mapping[OrganicType, OrganicMatterDef] = _freeze_registry(OrganicType, {
    OrganicType.PROTEIN: OrganicMatterDef(
        organic_type=OrganicType.PROTEIN,
        colors=("#FF6B9D", "#FF1493", "#C71585"),
        size_min=8, size_max=12, energy=15, health=5,
        shapes=("cluster", "chain", "spiral"),
        nutrients=("protein",),
        attribute_buff=ATTRIBUTE_BUFFS["attack"],
    ),
    OrganicType.LIPID: OrganicMatterDef(
        organic_type=OrganicType.LIPID,
        colors=("#FFD700", "#FFA500", "#FF8C00"),
        size_min=6, size_max=10, energy=10, health=0,
        shapes=("blob", "droplet", "compact-blob"),
        nutrients=("lipid",),
        attribute_buff=ATTRIBUTE_BUFFS["defense"],
    ),
    OrganicType.CARBOHYDRATE: OrganicMatterDef(
        organic_type=OrganicType.CARBOHYDRATE,
        colors=("#00FF88", "#00FA9A", "#3CB371"),
        size_min=10, size_max=15, energy=20, health=0,
        shapes=("crystal", "cluster", "wave"),
        nutrients=("carbohydrate",),
        attribute_buff=ATTRIBUTE_BUFFS["speed"],
    ),
    OrganicType.VITAMIN: OrganicMatterDef(
        organic_type=OrganicType.VITAMIN,
        colors=("#00D9FF", "#1E90FF", "#4169E1"),
        size_min=5, size_max=8, energy=5, health=15,
        shapes=("star", "sphere", "spiral"),
        nutrients=("vitamin",),
        attribute_buff=ATTRIBUTE_BUFFS["range"],
    ),
})

POWER_UP_TYPES: Mapping[PowerUpType, PowerUpDef] = _freeze_registry(PowerUpType, {
    PowerUpType.HEALTH: PowerUpDef(
        power_up_type=PowerUpType.HEALTH, name="Regenerative Capsule",
        icon="❤️", color="#FF4444", instant=True, message="+50 HP",
    ),
    PowerUpType.ENERGY: PowerUpDef(
        power_up_type=PowerUpType.ENERGY, name="Energy Nodule",
        icon="⚡", color="#FFD700", instant=True, message="+100 Energy",
    ),
    PowerUpType.SPEED: PowerUpDef(
        power_up_type=PowerUpType.SPEED, name="Kinetic Impulse",
        icon="💨", color="#00FFAA", duration=8, message="Speed 2x!",
    ),
    PowerUpType.DAMAGE: PowerUpDef(
        power_up_type=PowerUpType.DAMAGE, name="Offensive Spike",
        icon="⚔️", color="#FF4477", duration=10, message="Powerful Attack!",
    ),
    PowerUpType.INVINCIBILITY: PowerUpDef(
        power_up_type=PowerUpType.INVINCIBILITY, name="Stellar Shield",
        icon="🛡️", color="#FFD700", duration=6, message="Invincible!",
    ),
})

ORGANIC_TYPE_KEYS: tuple[OrganicType, ...] = tuple(ORGANIC_MATTER_TYPES)
POWER_UP_TYPE_KEYS: tuple[PowerUpType, ...] = tuple(POWER_UP_TYPES)
