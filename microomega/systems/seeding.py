"""Seed derivation: fan one master seed out into independent streams.

``derive_child_seed(parent, i)`` gives every cluster member its own stream,
so a client can regenerate only the entities it can see and still match the
server's full-cluster generation bit for bit.
"""

from __future__ import annotations

import math

from microomega.systems.rng import (
    UINT32_MASK,
    UINT32_RANGE,
    SeededRandom,
    normalize_seed,
)

SEED_SCHEME_VERSION = 1

CHILD_SEED_STRIDE = 0x9E3779B1


def _coerce_index(index: object) -> int:
    if isinstance(index, bool) or index is None:
        return 0
    if isinstance(index, int):
        return index
    try:
        value = float(index)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(value):
        return 0
    return math.floor(value)


def derive_child_seed(parent_seed: object, index: object) -> int:
    """``(normalize(parent) + index * 0x9E3779B1) mod 2**32``."""
    return (normalize_seed(parent_seed) + _coerce_index(index) * CHILD_SEED_STRIDE) & UINT32_MASK


def derive_children(parent_seed: object, count: int) -> tuple[int, ...]:
    """The first ``count`` child seeds of ``parent_seed``."""
    return tuple(derive_child_seed(parent_seed, i) for i in range(max(0, count)))


def to_seed_value(value: float) -> int:
    """Pack one draw in [0, 1) into a transmittable 32-bit seed."""
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return 0
    return math.floor(value * UINT32_RANGE) & UINT32_MASK


def stream_for_appearance(
    seed: object = None,
    cluster_seed: object = None,
    cluster_index: object = None,
) -> SeededRandom | None:
    """Rebuild the stream of a single cluster member.

    An explicit per-entity seed wins; otherwise the stream is derived from
    the cluster seed and the member's index.  Returns ``None`` when neither
    is present so the caller can skip the entity.
    """
    if _is_seed(seed):
        return SeededRandom(seed)
    if _is_seed(cluster_seed):
        return SeededRandom(derive_child_seed(cluster_seed, cluster_index))
    return None


def _is_seed(value: object) -> bool:
    if isinstance(value, bool) or value is None:
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)
