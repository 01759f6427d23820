"""Pydantic request/response models for the REST API.

Field names are snake_case in Python and camelCase on the wire.  The
metadata routes keep their own snake_case models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Spawn ---

class ClusterPlanRequest(WireModel):
    seed: int | float
    remaining: int = Field(ge=0)
    scatter_min: float | None = Field(None, alias="scatterMin")
    scatter_radius: float | None = Field(None, alias="scatterRadius", ge=0)
    fallback_type: str | None = Field(None, alias="fallbackType")
    size_override: int | None = Field(None, alias="sizeOverride", ge=1)


class AppearanceSchema(WireModel):
    type: str
    seed: int = Field(ge=0, le=0xFFFFFFFF)
    cluster_seed: int = Field(alias="clusterSeed", ge=0, le=0xFFFFFFFF)
    cluster_index: int = Field(alias="clusterIndex", ge=0, le=0xFFFFFFFF)


class ClusterEntrySchema(WireModel):
    scatter_angle: float = Field(alias="scatterAngle")
    scatter_distance: float = Field(alias="scatterDistance")
    delay_factor: float = Field(alias="delayFactor")
    appearance: AppearanceSchema


class ClusterPlanResponse(WireModel):
    size: int
    entries: list[ClusterEntrySchema] = Field(default_factory=list)
    fingerprint: str


class LayoutRequest(WireModel):
    seed: int | float


class LayoutResponse(WireModel):
    shape: str
    size: int
    offsets: list[dict[str, float]] = Field(default_factory=list)
    fingerprint: str


class DropRequest(WireModel):
    seed: int | float
    # Per-room kill counter mixed into the seed so repeated kills roll differently
    sequence: int | None = None
    x: float = 0.0
    y: float = 0.0
    boss: bool = False


class PowerUpSchema(WireModel):
    id: int
    type: str
    x: float
    y: float
    color: str
    icon: str
    pulse: float


class MaterializeRequest(WireModel):
    appearance: AppearanceSchema
    x: float = 0.0
    y: float = 0.0
    overrides: dict[str, float | int | str] = Field(default_factory=dict)


# --- Seeds ---

class DeriveSeedsRequest(WireModel):
    parent: int | float
    count: int = Field(1, ge=0, le=4096)


class DeriveSeedsResponse(WireModel):
    parent: int
    children: list[int]
    version: int


# --- Combat ---

class DamageMultiplierRequest(WireModel):
    attacking_element: str | None = Field(None, alias="attackingElement")
    defending_element: str | None = Field(None, alias="defendingElement")
    affinity: str | None = None
    attacker_element: str | None = Field(None, alias="attackerElement")
    resistance_profile: dict[str, float | None] = Field(default_factory=dict, alias="resistanceProfile")
    weaknesses: dict[str, float | None] = Field(default_factory=dict)


class DamageMultiplierResponse(WireModel):
    relation: str
    multiplier: float
    elemental_multiplier: float = Field(alias="elementalMultiplier")
    affinity_bonus: float = Field(alias="affinityBonus")
    resistance_multiplier: float = Field(alias="resistanceMultiplier")


class HitRequest(DamageMultiplierRequest):
    attack: float = 1.0
    defense: float = 0.0
    penetration: float = 0.0


class HitResponse(WireModel):
    damage: int
    relation: str
    multiplier: float


class DiminishingRequest(WireModel):
    previous_purchases: int = Field(alias="previousPurchases", ge=0)
    tier: str
    custom_rate: float | None = Field(None, alias="customRate")
    custom_minimum: float | None = Field(None, alias="customMinimum")


class DiminishingResponse(WireModel):
    multiplier: float


# --- Config ---

class CoreConfigResponse(WireModel):
    world_size: float = Field(alias="worldSize")
    scatter_min: float = Field(alias="scatterMin")
    scatter_radius: float = Field(alias="scatterRadius")
    power_up_drop_chance: float = Field(alias="powerUpDropChance")
    power_up_drop_spread: float = Field(alias="powerUpDropSpread")
    seed_scheme_version: int = Field(alias="seedSchemeVersion")
