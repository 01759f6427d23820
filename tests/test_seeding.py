"""Tests for child seed derivation and seed packing."""

import math

import pytest

from microomega.systems.rng import SeededRandom
from microomega.systems.seeding import (
    CHILD_SEED_STRIDE,
    SEED_SCHEME_VERSION,
    derive_child_seed,
    derive_children,
    stream_for_appearance,
    to_seed_value,
)


class TestDeriveChildSeed:

    def test_contract_constants(self):
        assert CHILD_SEED_STRIDE == 0x9E3779B1
        assert SEED_SCHEME_VERSION == 1

    @pytest.mark.parametrize("index, expected", [
        (0, 1337),
        (1, 2654437098),
        (2, 1013905563),
        (3, 3668341324),
        (100, 3450572381),
    ])
    def test_golden_children(self, index, expected):
        assert derive_child_seed(1337, index) == expected

    def test_repeatable(self):
        assert derive_child_seed(42, 7) == derive_child_seed(42, 7)

    def test_parent_is_normalized(self):
        assert derive_child_seed(0, 0) == 1
        assert derive_child_seed(-1337, 1) == derive_child_seed(1337, 1)
        assert derive_child_seed(math.nan, 2) == derive_child_seed(1, 2)

    def test_non_finite_index_is_zero(self):
        assert derive_child_seed(1337, math.inf) == 1337
        assert derive_child_seed(1337, None) == 1337

    def test_derive_children(self):
        assert derive_children(42, 3) == (42, 2654435803, 1013904268)
        assert derive_children(42, 0) == ()
        assert derive_children(42, -5) == ()

    def test_children_streams_are_independent(self):
        a, b = derive_children(99, 2)
        assert SeededRandom(a)() != SeededRandom(b)()


class TestToSeedValue:

    def test_zero(self):
        assert to_seed_value(0.0) == 0

    def test_scales_by_two_pow_32(self):
        assert to_seed_value(0.5) == 0x80000000
        assert to_seed_value(0.25) == 0x40000000

    def test_max_below_one(self):
        assert to_seed_value(0.9999999999) <= 0xFFFFFFFF

    def test_wraps(self):
        assert to_seed_value(1.0) == 0

    @pytest.mark.parametrize("bad", [math.nan, math.inf, None])
    def test_non_finite(self, bad):
        assert to_seed_value(bad) == 0


class TestStreamForAppearance:

    def test_explicit_seed_wins(self):
        stream = stream_for_appearance(seed=555, cluster_seed=1337, cluster_index=4)
        assert stream() == SeededRandom(555)()

    def test_falls_back_to_cluster_derivation(self):
        stream = stream_for_appearance(cluster_seed=1337, cluster_index=2)
        assert stream() == SeededRandom(1013905563)()

    def test_none_without_seeds(self):
        assert stream_for_appearance() is None
        assert stream_for_appearance(seed=math.nan) is None
