"""Simulation clock with ability cooldowns and short auras."""

from __future__ import annotations

from enum import Enum

NEVER = 2**31 - 1
_AURA_DURATION = 5000


def to_millis(seconds: float) -> int:
    """Convert seconds to whole milliseconds, rounding half to even."""
    return int(round(1000 * seconds))


class Cooldown(Enum):
    """Abilities whose cooldowns the clock tracks."""

    OVERPOWER = "overpower"
    RAMPAGE = "rampage"
    SWEEPING_STRIKES = "sweeping_strikes"
    BLOODTHIRST = "bloodthirst"
    MORTAL_STRIKE = "mortal_strike"
    WHIRLWIND = "whirlwind"
    GLOBAL = "global"


class TimeKeeper:
    """Current simulation time in milliseconds and the cooldowns running in it."""

    def __init__(self) -> None:
        self.time = -1
        self._cooldowns: dict[Cooldown, int] = {}
        self._overpower_aura = -1
        self._rampage_aura = -1
        self.reset()

    def from_offset(self, offset: float) -> int:
        """Current time plus ``offset``, rounded to a whole millisecond."""
        return int(round(self.time + offset))

    def increment(self, next_event: int) -> None:
        """Advance the clock to ``next_event``."""
        self.time = next_event

    def reset(self) -> None:
        """Clear all cooldowns and auras and rewind the clock."""
        self._cooldowns = dict.fromkeys(Cooldown, -1)
        self.time = -1
        self._overpower_aura = -1
        self._rampage_aura = -1

    def prepare(self, prepare_time: int) -> None:
        """Start the clock at ``prepare_time`` with the global cooldown ending there."""
        self._cooldowns[Cooldown.GLOBAL] = prepare_time
        self.time = prepare_time

    def get_next_event(
        self,
        next_mh_swing: int,
        next_oh_swing: int,
        next_buff_event: int,
        next_slam_finish: int,
        sim_time: int,
    ) -> int:
        """Earliest upcoming event, bounded by the end of the simulation."""
        future = [t for t in self._cooldowns.values() if t > self.time]
        future += [t for t in (next_mh_swing, next_oh_swing, next_slam_finish) if t > self.time]
        return min([NEVER, *future, next_buff_event, sim_time])

    def cast(self, cooldown: Cooldown, duration: int) -> None:
        """Start ``cooldown`` lasting ``duration`` milliseconds from now."""
        self._cooldowns[cooldown] = self.time + duration

    def ready(self, cooldown: Cooldown) -> bool:
        """Whether ``cooldown`` has run out."""
        return self._cooldowns[cooldown] <= self.time

    def remaining(self, cooldown: Cooldown) -> int:
        """Milliseconds until ``cooldown`` runs out; negative once it has."""
        return self._cooldowns[cooldown] - self.time

    def gain_overpower_aura(self) -> None:
        self._overpower_aura = self.time + _AURA_DURATION

    def can_do_overpower(self) -> bool:
        return self.time <= self._overpower_aura

    def gain_rampage_aura(self) -> None:
        self._rampage_aura = self.time + _AURA_DURATION

    def can_do_rampage(self) -> bool:
        return self.time <= self._rampage_aura