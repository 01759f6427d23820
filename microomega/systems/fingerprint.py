"""Compact digests of generated content using xxhash.

Server and client can compare a 64-bit digest instead of the whole plan
to detect desync or a tampered client.  Floats are packed as little-endian
float64 and seeds as uint32, so the digest depends on every bit of the
output and on nothing platform-specific.
"""

from __future__ import annotations

import struct

import xxhash

from microomega.core.models import ClusterLayout, ClusterPlan

_ENTRY = struct.Struct("<dddIII")
_OFFSET = struct.Struct("<dd")


def fingerprint_plan(plan: ClusterPlan) -> int:
    digest = xxhash.xxh64()
    digest.update(struct.pack("<I", plan.size))
    for entry in plan.entries:
        app = entry.appearance
        digest.update(app.type.value.encode())
        digest.update(_ENTRY.pack(
            entry.scatter_angle, entry.scatter_distance, entry.delay_factor,
            app.seed, app.cluster_seed, app.cluster_index,
        ))
    return digest.intdigest()


def fingerprint_layout(layout: ClusterLayout) -> int:
    digest = xxhash.xxh64()
    digest.update(layout.shape.value.encode())
    for offset in layout.offsets:
        digest.update(_OFFSET.pack(offset.local_x, offset.local_y))
    return digest.intdigest()


def fingerprint_hex(value: int) -> str:
    return f"{value:016x}"
