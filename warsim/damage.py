"""Damage sources and per-source damage bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DamageSource(Enum):
    """Origin of a piece of damage."""

    WHITE_MH = "white_mh"
    WHITE_OH = "white_oh"
    BLOODTHIRST = "bloodthirst"
    EXECUTE = "execute"
    HEROIC_STRIKE = "heroic_strike"
    CLEAVE = "cleave"
    WHIRLWIND = "whirlwind"
    HAMSTRING = "hamstring"
    DEEP_WOUNDS = "deep_wound"
    ITEM_HIT_EFFECTS = "item_hit_effects"
    OVERPOWER = "overpower"
    SLAM = "slam"
    MORTAL_STRIKE = "mortal_strike"
    SWEEPING_STRIKES = "sweeping_strikes"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DamageInstance:
    """A single hit, recorded for the time lapse."""

    source: DamageSource
    damage: float
    time_stamp: int


def _zero_damage() -> dict[DamageSource, float]:
    return dict.fromkeys(DamageSource, 0.0)


def _zero_counts() -> dict[DamageSource, int]:
    return dict.fromkeys(DamageSource, 0)


@dataclass
class DamageSources:
    """Total damage and hit count for every damage source."""

    damage: dict[DamageSource, float] = field(default_factory=_zero_damage)
    counts: dict[DamageSource, int] = field(default_factory=_zero_counts)

    def add_damage(self, source: DamageSource, damage: float) -> None:
        """Record one hit of ``damage`` from ``source``."""
        if not isinstance(source, DamageSource):
            raise TypeError(f"unknown damage source: {source!r}")
        self.damage[source] += damage
        self.counts[source] += 1

    def total_damage(self) -> float:
        """Sum of damage over all sources."""
        return sum(self.damage.values())

    def total_count(self) -> int:
        """Sum of hit counts over all sources."""
        return sum(self.counts.values())

    def __iadd__(self, other: DamageSources) -> DamageSources:
        for source in DamageSource:
            self.damage[source] += other.damage[source]
            self.counts[source] += other.counts[source]
        return self

    def __add__(self, other: DamageSources) -> DamageSources:
        result = DamageSources(dict(self.damage), dict(self.counts))
        result += other
        return result