"""Resistance profiles and the multipliers derived from them.

A profile maps each element to a resistance in [-0.95, 0.95].  Positive
values reduce incoming damage, negative values amplify it.  Profiles are
rebuilt from their sources on every hit and never cached, so buffs and
debuffs apply immediately.
"""

from __future__ import annotations

import math
from typing import Mapping

from microomega.core.enums import Element, normalize_key, parse_element

RESISTANCE_MIN = -0.95
RESISTANCE_MAX = 0.95

DAMAGE_MULTIPLIER_MIN = 0.05
DAMAGE_MULTIPLIER_MAX = 5.0

ResistanceProfile = dict[Element, float]


def coerce_finite(value: object) -> float | None:
    """Finite float or ``None``; ints too large for a float count as non-finite."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_resistance_value(value: object) -> float:
    """Clamp to the resistance range; malformed values count as 0."""
    number = coerce_finite(value)
    if number is None:
        return 0.0
    return clamp(number, RESISTANCE_MIN, RESISTANCE_MAX)


def clamp_damage_multiplier(value: object) -> float:
    """Clamp to [0.05, 5]; malformed values count as 1x."""
    number = coerce_finite(value)
    if number is None:
        return 1.0
    return clamp(number, DAMAGE_MULTIPLIER_MIN, DAMAGE_MULTIPLIER_MAX)


def normalize_weakness_profile(weaknesses: Mapping[object, object] | None) -> ResistanceProfile:
    """Weakness magnitudes per element, as clamped absolute values."""
    normalized: ResistanceProfile = {}
    for key, value in (weaknesses or {}).items():
        element = parse_element(key)
        number = coerce_finite(value)
        if element is None or number is None:
            continue
        normalized[element] = clamp_resistance_value(abs(number))
    return normalized


def convert_weaknesses_to_resistances(weaknesses: Mapping[object, object] | None) -> ResistanceProfile:
    """A weakness of ``w`` becomes a resistance of ``-w``."""
    return {
        element: clamp_resistance_value(-abs(value))
        for element, value in normalize_weakness_profile(weaknesses).items()
    }


def resolve_resistance_profile(*sources: Mapping[object, object] | None) -> ResistanceProfile:
    """Sum every source per element, clamping after each addition.

    The result always holds all elements; unknown keys and malformed values
    are skipped.
    """
    profile: ResistanceProfile = {element: 0.0 for element in Element}
    for source in sources:
        if not isinstance(source, Mapping):
            continue
        for key, value in source.items():
            element = parse_element(key)
            number = coerce_finite(value)
            if element is None or number is None:
                continue
            profile[element] = clamp_resistance_value(profile[element] + number)
    return profile


def _lookup(profile: Mapping[object, object], element: Element) -> object:
    if element in profile:
        return profile[element]
    for key, value in profile.items():
        if normalize_key(key) == element.value:
            return value
    return 0.0


def resolve_resistance_multiplier(profile: Mapping[object, object] | None, element: object) -> float:
    """``clamp(1 - resistance, 0.05, 5)`` for the attack element.

    Unknown or blank elements take full damage (1x).
    """
    target = parse_element(element)
    if target is None:
        return 1.0
    resistance = clamp_resistance_value(_lookup(profile or {}, target))
    return clamp_damage_multiplier(1 - resistance)
