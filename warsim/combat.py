"""Combat building blocks: hit results, hit tables, ability queue, slam casts and rage."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from warsim.timekeeper import NEVER

MAX_RAGE = 100.0


class _RandomSource(Protocol):
    def random(self) -> float: ...


class HitResult(Enum):
    """Outcome category of an attack roll."""

    TBD = 0
    MISS = 0x1
    DODGE = 0x2
    GLANCING = 0x4
    CRIT = 0x8
    HIT = 0x10


@dataclass
class HitOutcome:
    """Damage dealt by an attack and the damage that counts for rage."""

    damage: float = 0.0
    hit_result: HitResult = HitResult.TBD
    rage_damage: float | None = None

    def __post_init__(self) -> None:
        if self.rage_damage is None:
            self.rage_damage = self.damage


@dataclass(frozen=True)
class DamageMultipliers:
    """Damage factors for glancing blows, critical strikes and normal hits."""

    glance: float = 0.0
    crit: float = 0.0
    hit: float = 0.0


class HitTable:
    """Single-roll attack table: miss, dodge, glance, crit, then hit."""

    def __init__(
        self,
        name: str = "",
        miss: float = 0.0,
        dodge: float = 0.0,
        glance: float = 0.0,
        crit: float = 0.0,
        multipliers: DamageMultipliers | None = None,
        rng: _RandomSource | None = None,
    ) -> None:
        self._name = name
        self._miss = miss
        self._dodge = miss + dodge
        self._glance = self._dodge + glance
        self._crit = self._glance + crit
        self._multipliers = multipliers if multipliers is not None else DamageMultipliers()
        self._rng: _RandomSource = rng if rng is not None else random.Random()

    @property
    def name(self) -> str:
        return self._name

    @property
    def miss(self) -> float:
        return self._miss

    @property
    def dodge(self) -> float:
        return self._dodge - self._miss

    @property
    def glance(self) -> float:
        return self._glance - self._dodge

    @property
    def crit(self) -> float:
        return self._crit - self._glance if self._crit <= 100 else 100 - self._glance

    @property
    def hit(self) -> float:
        return 100 - self._crit if self._crit <= 100 else 0.0

    @property
    def glancing_penalty(self) -> float:
        return self._multipliers.glance

    def alter_white_crit(self, crit_delta: float) -> None:
        """Change the crit chance of a white attack by ``crit_delta`` percent."""
        self._crit += crit_delta

    def alter_yellow_crit(self, crit_delta: float) -> None:
        """Change the crit chance of an ability; only attacks that land can crit."""
        self._crit += (100 - self._dodge) / 100 * crit_delta

    def _roll(self) -> float:
        return self._rng.random() * 100.0

    def is_miss_or_dodge(self) -> bool:
        """Roll whether an attack misses or is dodged."""
        return self._roll() < self._dodge

    def generate_hit(self, damage: float) -> HitOutcome:
        """Roll the table and apply the matching damage multiplier."""
        roll = self._roll()
        dm = self._multipliers
        if roll < self._miss:
            return HitOutcome(0.0, HitResult.MISS)
        if roll < self._dodge:
            return HitOutcome(0.0, HitResult.DODGE, damage * dm.hit)
        if roll < self._glance:
            return HitOutcome(damage * dm.glance, HitResult.GLANCING)
        if roll < self._crit:
            return HitOutcome(damage * dm.crit, HitResult.CRIT)
        return HitOutcome(damage * dm.hit, HitResult.HIT)


@dataclass
class AbilityQueue:
    """Tracks whether heroic strike or cleave replaces the next main-hand swing."""

    heroic_strike_queued: bool = False
    cleave_queued: bool = False

    def is_ability_queued(self) -> bool:
        return self.heroic_strike_queued or self.cleave_queued

    def queue_heroic_strike(self) -> None:
        self.heroic_strike_queued = True
        self.cleave_queued = False

    def queue_cleave(self) -> None:
        self.heroic_strike_queued = False
        self.cleave_queued = True

    def reset(self) -> None:
        self.heroic_strike_queued = False
        self.cleave_queued = False


class SlamManager:
    """State of a slam cast in progress."""

    def __init__(self, slam_cast_time: int = 1500) -> None:
        self._slam_cast_time = slam_cast_time
        self._is_casting = False
        self._next_finish = NEVER

    @property
    def is_casting(self) -> bool:
        return self._is_casting

    @property
    def next_finish(self) -> int:
        return self._next_finish

    def cast_slam(self, time_stamp: int) -> None:
        """Start casting at ``time_stamp``."""
        self._is_casting = True
        self._next_finish = time_stamp + self._slam_cast_time

    def finish_slam(self) -> None:
        """End the current cast."""
        self._is_casting = False
        self._next_finish = NEVER

    def ready(self, current_time: int) -> bool:
        """Whether the cast finishes exactly now; the finish must not be in the past."""
        if self._next_finish < current_time:
            raise ValueError("slam cast finished before the current time")
        return self._next_finish == current_time


class RageTracker:
    """Current rage with statistics on how it was gained, spent and lost."""

    def __init__(self, rage: float = 0.0, tactical_mastery_rage: float = 0.0) -> None:
        self.rage = rage
        self.tactical_mastery_rage = tactical_mastery_rage
        self.rage_gained = 0.0
        self.rage_spent = 0.0
        self.rage_spent_on_execute = 0.0
        self.rage_lost_stance_swap = 0.0
        self.rage_lost_capped = 0.0

    def gain_rage(self, amount: float) -> None:
        """Add rage, capped at the maximum."""
        self.rage_gained += amount
        self.rage += amount
        if self.rage > MAX_RAGE:
            self.rage_lost_capped += self.rage - MAX_RAGE
            self.rage = MAX_RAGE

    def spend_rage(self, amount: float) -> None:
        """Spend rage; more than is available is an error."""
        if self.rage - amount < 0:
            raise ValueError(f"cannot spend {amount} rage with only {self.rage}")
        self.rage_spent += amount
        self.rage -= amount

    def spend_all_rage(self) -> None:
        """Spend everything, as execute does."""
        self.rage_spent_on_execute += self.rage
        self.rage = 0.0

    def swap_stance(self) -> None:
        """Lose rage above what tactical mastery retains."""
        if self.rage > self.tactical_mastery_rage:
            self.rage_lost_stance_swap += self.rage - self.tactical_mastery_rage
            self.rage = self.tactical_mastery_rage