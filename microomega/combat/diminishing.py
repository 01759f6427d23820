"""Diminishing returns for repeated upgrade purchases.

Shared by server validation and client preview; both must agree on every
multiplier.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from microomega.combat.resistance import coerce_finite
from microomega.core.enums import UpgradeTier, normalize_key


@dataclass(frozen=True, slots=True)
class DiminishingConfig:
    """``rate`` in (0, 1], ``minimum`` in [0, 1]."""

    rate: float
    minimum: float


DEFAULT_DIMINISHING = DiminishingConfig(rate=0.6, minimum=0.2)

DIMINISHING_CONFIGS: Mapping[UpgradeTier, DiminishingConfig] = MappingProxyType({
    UpgradeTier.SMALL: DEFAULT_DIMINISHING,
    UpgradeTier.MEDIUM: DEFAULT_DIMINISHING,
    UpgradeTier.LARGE: DEFAULT_DIMINISHING,
    UpgradeTier.MACRO: DEFAULT_DIMINISHING,
})


def _tier_config(tier: object) -> DiminishingConfig:
    key = normalize_key(tier)
    try:
        return DIMINISHING_CONFIGS[UpgradeTier(key)]
    except ValueError:
        return DEFAULT_DIMINISHING


def _valid(value: object, low: float, high: float, low_inclusive: bool) -> float | None:
    if not isinstance(value, (int, float)):
        return None
    number = coerce_finite(value)
    if number is None:
        return None
    above = number >= low if low_inclusive else number > low
    return number if above and number <= high else None


def calculate_diminishing_multiplier(
    previous_purchases: int,
    tier: UpgradeTier | str,
    custom_rate: float | None = None,
    custom_minimum: float | None = None,
) -> float:
    """``max(minimum, rate ** n)``, or 1.0 for a first purchase.

    Custom values outside their valid ranges fall back to the tier default.
    """
    purchases = coerce_finite(previous_purchases) if isinstance(previous_purchases, (int, float)) else None
    if purchases is None or purchases <= 0:
        return 1.0

    config = _tier_config(tier)
    rate = _valid(custom_rate, 0.0, 1.0, low_inclusive=False)
    minimum = _valid(custom_minimum, 0.0, 1.0, low_inclusive=True)
    if rate is None:
        rate = config.rate
    if minimum is None:
        minimum = config.minimum

    return max(minimum, rate ** purchases)
