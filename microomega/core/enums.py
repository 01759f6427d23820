"""Enumerations used throughout the core.

Wire values are lower-case strings, so every enum here is a ``str`` enum.
The sets are closed: adding a member is the only way to introduce a new
element, affinity, organic type or power-up.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class Element(str, Enum):
    """Damage elements used by the rock-paper-scissors table."""

    BIO = "bio"
    CHEMICAL = "chemical"
    ACID = "acid"
    THERMAL = "thermal"
    ELECTRIC = "electric"
    KINETIC = "kinetic"
    PSIONIC = "psionic"
    SONIC = "sonic"


@unique
class Affinity(str, Enum):
    """Per-entity tuning layered on top of the element table."""

    NEUTRAL = "neutral"
    ATTUNED = "attuned"
    DIVERGENT = "divergent"


@unique
class Relation(str, Enum):
    """Outcome of an element-vs-element lookup."""

    MIRROR = "mirror"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"
    NEUTRAL = "neutral"


@unique
class OrganicType(str, Enum):
    """Organic matter kinds that can be planned into a cluster."""

    PROTEIN = "protein"
    LIPID = "lipid"
    CARBOHYDRATE = "carbohydrate"
    VITAMIN = "vitamin"


@unique
class PowerUpType(str, Enum):
    """Pickups dropped by enemies or spawned in the world."""

    HEALTH = "health"
    ENERGY = "energy"
    SPEED = "speed"
    DAMAGE = "damage"
    INVINCIBILITY = "invincibility"


@unique
class ClusterShape(str, Enum):
    """Decorative client-side layouts for a cluster."""

    SINGLE = "single"
    LINE = "line"
    ARC = "arc"
    RING = "ring"
    HEX = "hex"


@unique
class UpgradeTier(str, Enum):
    """Evolution tiers with their own diminishing-returns defaults."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    MACRO = "macro"


def normalize_key(value: object) -> str | None:
    """Trim and lower-case a wire key; ``None`` for blanks and non-strings."""
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not trimmed:
        return None
    return trimmed.lower()


def parse_element(value: object) -> Element | None:
    key = normalize_key(value)
    if key is None:
        return None
    try:
        return Element(key)
    except ValueError:
        return None


def parse_affinity(value: object) -> Affinity:
    """Resolve an affinity string, falling back to neutral."""
    key = normalize_key(value)
    if key is None:
        return Affinity.NEUTRAL
    try:
        return Affinity(key)
    except ValueError:
        return Affinity.NEUTRAL


def parse_organic_type(value: object) -> OrganicType | None:
    key = normalize_key(value)
    if key is None:
        return None
    try:
        return OrganicType(key)
    except ValueError:
        return None


def parse_power_up_type(value: object) -> PowerUpType | None:
    key = normalize_key(value)
    if key is None:
        return None
    try:
        return PowerUpType(key)
    except ValueError:
        return None
