"""Tests for upgrade diminishing returns."""

import math

import pytest

from microomega.combat.diminishing import (
    DEFAULT_DIMINISHING,
    DIMINISHING_CONFIGS,
    calculate_diminishing_multiplier,
)
from microomega.core.enums import UpgradeTier


class TestDiminishingMultiplier:

    def test_first_purchase_is_full(self):
        assert calculate_diminishing_multiplier(0, "small") == 1.0

    def test_single_previous_purchase(self):
        assert calculate_diminishing_multiplier(1, "small") == 0.6

    def test_two_previous_purchases(self):
        assert calculate_diminishing_multiplier(2, UpgradeTier.MEDIUM) == pytest.approx(0.36)

    def test_floor(self):
        assert calculate_diminishing_multiplier(10, "large") == 0.2
        assert calculate_diminishing_multiplier(1000, "macro") == 0.2

    @pytest.mark.parametrize("tier", list(UpgradeTier))
    def test_non_increasing_and_bounded(self, tier):
        config = DIMINISHING_CONFIGS[tier]
        previous = 1.0
        for n in range(0, 30):
            value = calculate_diminishing_multiplier(n, tier)
            assert config.minimum <= value <= 1.0
            assert value <= previous
            previous = value

    @pytest.mark.parametrize("purchases", [-1, -0.5, math.nan, math.inf, "3", None, True])
    def test_bad_purchase_counts(self, purchases):
        assert calculate_diminishing_multiplier(purchases, "small") == 1.0

    def test_unknown_tier_uses_default(self):
        assert calculate_diminishing_multiplier(1, "colossal") == DEFAULT_DIMINISHING.rate
        assert calculate_diminishing_multiplier(1, " SMALL ") == 0.6

    def test_custom_rate_and_minimum(self):
        assert calculate_diminishing_multiplier(1, "small", custom_rate=0.5) == 0.5
        assert calculate_diminishing_multiplier(5, "small", custom_rate=0.5, custom_minimum=0.1) == 0.1
        assert calculate_diminishing_multiplier(3, "small", custom_rate=1.0) == 1.0

    def test_zero_minimum_allowed(self):
        assert calculate_diminishing_multiplier(3, "small", custom_rate=0.5, custom_minimum=0.0) == 0.125

    @pytest.mark.parametrize("rate", [0.0, -0.3, 1.5, math.nan, True])
    def test_invalid_custom_rate_falls_back(self, rate):
        assert calculate_diminishing_multiplier(1, "small", custom_rate=rate) == 0.6

    @pytest.mark.parametrize("minimum", [-0.1, 1.2, math.inf])
    def test_invalid_custom_minimum_falls_back(self, minimum):
        assert calculate_diminishing_multiplier(10, "small", custom_minimum=minimum) == 0.2

    def test_oversized_purchase_count(self):
        assert calculate_diminishing_multiplier(10**400, "small") == 1.0

    def test_float_purchase_count(self):
        assert calculate_diminishing_multiplier(2.0, "small") == pytest.approx(0.36)

    def test_oversized_custom_values_fall_back(self):
        assert calculate_diminishing_multiplier(1, "small", custom_rate=10**400) == 0.6
        assert calculate_diminishing_multiplier(10, "small", custom_minimum=10**400) == 0.2
