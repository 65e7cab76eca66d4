"""Primary attributes and stat arithmetic helpers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

_log = logging.getLogger(__name__)


def multiplicative_addition(val1: float, val2: float) -> float:
    """Combine two fractional bonuses multiplicatively."""
    return (1 + val1) * (1 + val2) - 1


def multiplicative_subtraction(val1: float, val2: float) -> float:
    """Remove a fractional bonus that was combined multiplicatively."""
    return (1 + val1) / (1 + val2) - 1


def as_rating(raw: float, factor: float) -> float:
    """Convert a percentage stat to its rating, rounded to a whole number.

    A warning is logged when the raw value does not map closely onto a
    whole rating.
    """
    x = raw * factor * 82 / 52.0
    rating = float(round(x))
    if math.fabs(x - rating) > 0.05:
        _log.warning("raw = %g, factor = %g seems off (%g vs. %g)", raw, factor, x, rating)
    return rating


@dataclass
class Attributes:
    """Strength and agility."""

    strength: float = 0.0
    agility: float = 0.0

    def __add__(self, other: Attributes) -> Attributes:
        return Attributes(self.strength + other.strength, self.agility + other.agility)

    def __iadd__(self, other: Attributes) -> Attributes:
        self.strength += other.strength
        self.agility += other.agility
        return self

    def multiply(self, stat_multiplier: float) -> Attributes:
        """Attributes scaled by a fractional stat bonus."""
        factor = 1 + stat_multiplier
        return Attributes(self.strength * factor, self.agility * factor)

    def __str__(self) -> str:
        parts = []
        if self.strength > 0:
            parts.append(f"strength = {self.strength:g} ")
        if self.agility > 0:
            parts.append(f"agility = {self.agility:g} ")
        return "".join(parts)