"""Cluster spawn planner: deterministic batches of organic matter.

Two planners share one rule: the same seed and options always give the same
output, bit for bit.

* ``plan_organic_cluster`` is the authoritative server plan.  It yields pure
  placement data (scatter angle/distance, spawn delay, per-entity
  appearance seed) and nothing that depends on rendering.
* ``plan_cluster_layout`` is the decorative client-side geometry (single,
  line, arc, ring, hex), chosen by a draw against fixed thresholds.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from microomega.core.catalog import ORGANIC_TYPE_KEYS
from microomega.core.enums import ClusterShape, OrganicType, parse_organic_type
from microomega.core.models import (
    Appearance,
    ClusterEntry,
    ClusterLayout,
    ClusterPlan,
    LayoutOffset,
    LayoutSlot,
    OrganicMatter,
)
from microomega.systems.entity_factory import create_organic_matter
from microomega.systems.rng import SeededRandom, normalize_seed
from microomega.systems.seeding import to_seed_value

logger = logging.getLogger(__name__)

TAU = math.pi * 2

CLUSTER_SIZE_BASE = 3
CLUSTER_SIZE_SPAN = 3

CLUSTER_SPACING = 26.0
ARC_RADIUS = CLUSTER_SPACING * 1.15
RING_RADIUS_FLOOR = CLUSTER_SPACING * 1.2
RING_RADIUS_JITTER = CLUSTER_SPACING * 0.5
HEX_ROW_OFFSET = CLUSTER_SPACING * 0.87


# ---------------------------------------------------------------------------
# Server plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ClusterPlanOptions:
    remaining: int | float
    scatter_min: float
    scatter_radius: float
    fallback_type: OrganicType | str | None = None
    size_override: int | float | None = None


def _whole(value: object) -> int | None:
    """``floor(value)`` for a finite number, else ``None``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, int):
        return value
    return math.floor(value) if math.isfinite(value) else None


def plan_organic_cluster(seed: object, options: ClusterPlanOptions) -> ClusterPlan:
    """Plan one organic cluster from a region seed.

    Draw order: raw size (skipped when ``size_override`` is set), type
    (skipped when ``fallback_type`` is a valid organic type), then four draws
    per entry.  ``remaining <= 0`` yields an empty plan.
    Fractional counts are floored; a non-finite ``remaining`` counts as 0
    and a non-finite ``size_override`` as absent.
    """
    remaining = _whole(options.remaining) or 0
    if remaining <= 0:
        return ClusterPlan(size=0)

    cluster_seed = normalize_seed(seed)
    stream = SeededRandom(cluster_seed)

    size_override = _whole(options.size_override)
    if size_override is not None:
        raw_size = size_override
    else:
        raw_size = math.floor(stream() * CLUSTER_SIZE_SPAN) + CLUSTER_SIZE_BASE
    size = max(1, min(remaining, raw_size))

    organic_type = parse_organic_type(options.fallback_type)
    if organic_type is None:
        organic_type = ORGANIC_TYPE_KEYS[math.floor(stream() * len(ORGANIC_TYPE_KEYS))]

    entries: list[ClusterEntry] = []
    for index in range(size):
        scatter_angle = stream() * TAU
        scatter_distance = options.scatter_min + stream() * options.scatter_radius
        delay_factor = stream()
        appearance = Appearance(
            type=organic_type,
            seed=to_seed_value(stream()),
            cluster_seed=cluster_seed,
            cluster_index=index,
        )
        entries.append(ClusterEntry(scatter_angle, scatter_distance, delay_factor, appearance))

    logger.debug("Planned %s cluster of %d from seed %d", organic_type.value, size, cluster_seed)
    return ClusterPlan(size=size, entries=tuple(entries))


# ---------------------------------------------------------------------------
# Client layouts
# ---------------------------------------------------------------------------

def _line_offsets(size: int) -> list[LayoutOffset]:
    half = (size - 1) / 2
    return [LayoutOffset((i - half) * CLUSTER_SPACING, 0.0) for i in range(size)]


def _arc_offsets(size: int) -> list[LayoutOffset]:
    if size <= 2:
        return _line_offsets(size)
    span = math.pi
    step = span / (size - 1)
    start = -span / 2
    return [
        LayoutOffset(math.cos(start + i * step) * ARC_RADIUS, math.sin(start + i * step) * ARC_RADIUS)
        for i in range(size)
    ]


def _ring_offsets(size: int, radius: float) -> list[LayoutOffset]:
    if size == 1:
        return [LayoutOffset(0.0, 0.0)]
    return [
        LayoutOffset(math.cos(TAU * i / size) * radius, math.sin(TAU * i / size) * radius)
        for i in range(size)
    ]


HEX_POINTS: tuple[LayoutOffset, ...] = (
    LayoutOffset(0.0, 0.0),
    LayoutOffset(CLUSTER_SPACING, 0.0),
    LayoutOffset(CLUSTER_SPACING / 2, -HEX_ROW_OFFSET),
    LayoutOffset(-CLUSTER_SPACING / 2, -HEX_ROW_OFFSET),
    LayoutOffset(-CLUSTER_SPACING, 0.0),
    LayoutOffset(-CLUSTER_SPACING / 2, HEX_ROW_OFFSET),
    LayoutOffset(CLUSTER_SPACING / 2, HEX_ROW_OFFSET),
)


def _single(stream: SeededRandom) -> list[LayoutOffset]:
    return _line_offsets(1)


def _line(stream: SeededRandom) -> list[LayoutOffset]:
    return _line_offsets(max(2, math.floor(stream() * 3) + 3))


def _arc(stream: SeededRandom) -> list[LayoutOffset]:
    return _arc_offsets(max(3, math.floor(stream() * 3) + 3))


def _ring(stream: SeededRandom) -> list[LayoutOffset]:
    size = max(3, math.floor(stream() * 4) + 3)
    radius = RING_RADIUS_FLOOR + stream() * RING_RADIUS_JITTER
    return _ring_offsets(size, radius)


def _hex(stream: SeededRandom) -> list[LayoutOffset]:
    size = max(3, math.floor(stream() * 3) + 4)
    return list(HEX_POINTS[:min(size, len(HEX_POINTS))])


# Cumulative upper bounds of the shape draw.
LAYOUT_THRESHOLDS: tuple[tuple[float, ClusterShape], ...] = (
    (0.2, ClusterShape.SINGLE),
    (0.4, ClusterShape.LINE),
    (0.6, ClusterShape.ARC),
    (0.8, ClusterShape.RING),
    (1.0, ClusterShape.HEX),
)

_LAYOUT_BUILDERS: Mapping[ClusterShape, Callable[[SeededRandom], list[LayoutOffset]]] = {
    ClusterShape.SINGLE: _single,
    ClusterShape.LINE: _line,
    ClusterShape.ARC: _arc,
    ClusterShape.RING: _ring,
    ClusterShape.HEX: _hex,
}


def select_layout_shape(roll: float) -> ClusterShape:
    for bound, shape in LAYOUT_THRESHOLDS:
        if roll < bound:
            return shape
    return LAYOUT_THRESHOLDS[-1][1]


def plan_cluster_layout(stream: SeededRandom) -> ClusterLayout:
    """Draw a decorative layout: one draw for the shape, then its own draws."""
    shape = select_layout_shape(stream())
    offsets = _LAYOUT_BUILDERS[shape](stream)
    return ClusterLayout(shape=shape, offsets=tuple(offsets))


# ---------------------------------------------------------------------------
# Full client-side spawn
# ---------------------------------------------------------------------------

def spawn_organic_matter(
    stream: SeededRandom,
    count: int = 1,
    world_size: float = 4000.0,
    types: Sequence[OrganicType] | None = None,
) -> list[OrganicMatter]:
    """Spawn ``count`` decorative clusters sharing one stream.

    Per cluster: type, layout, base x, base y, then every member in layout
    order.  ``types`` restricts the allowed organic types.
    """
    available = tuple(types) if types is not None else ORGANIC_TYPE_KEYS
    clusters = _whole(count) or 0
    if not available or clusters <= 0:
        return []

    created: list[OrganicMatter] = []
    for _ in range(clusters):
        organic_type = stream.pick(available)
        layout = plan_cluster_layout(stream)
        base_x = stream() * world_size
        base_y = stream() * world_size
        for index, offset in enumerate(layout.offsets):
            slot = LayoutSlot(
                shape=layout.shape,
                size=layout.size,
                index=index,
                local_x=offset.local_x,
                local_y=offset.local_y,
            )
            matter = create_organic_matter(organic_type, stream, x=base_x, y=base_y, layout=slot)
            if matter is not None:
                created.append(matter)
    return created
