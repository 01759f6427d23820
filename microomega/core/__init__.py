"""Core enums, static catalogs and wire models."""

from microomega.core.enums import (
    Affinity, ClusterShape, Element, OrganicType, PowerUpType, Relation, UpgradeTier,
)
from microomega.core.models import (
    Appearance, ClusterEntry, ClusterLayout, ClusterPlan, LayoutOffset, LayoutSlot,
    OrganicMatter, PowerUp,
)

__all__ = [
    "Affinity",
    "Appearance",
    "ClusterEntry",
    "ClusterLayout",
    "ClusterPlan",
    "ClusterShape",
    "Element",
    "LayoutOffset",
    "LayoutSlot",
    "OrganicMatter",
    "OrganicType",
    "PowerUp",
    "PowerUpType",
    "Relation",
    "UpgradeTier",
]
