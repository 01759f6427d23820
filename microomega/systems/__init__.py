"""Deterministic generation systems: RNG, seeding, planning, materialization."""

from microomega.systems.rng import SeededRandom, create_stream, normalize_seed
from microomega.systems.seeding import derive_child_seed, to_seed_value
from microomega.systems.cluster_planner import ClusterPlanOptions, plan_cluster_layout, plan_organic_cluster
from microomega.systems.entity_factory import OrganicOverrides, create_organic_matter, materialize_appearance

__all__ = [
    "ClusterPlanOptions",
    "OrganicOverrides",
    "SeededRandom",
    "create_organic_matter",
    "create_stream",
    "derive_child_seed",
    "materialize_appearance",
    "normalize_seed",
    "plan_cluster_layout",
    "plan_organic_cluster",
    "to_seed_value",
]
