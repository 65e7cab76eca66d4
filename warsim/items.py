"""Equipment slots, weapon kinds and item popularity counters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Socket(Enum):
    """Equipment slot of an item."""

    NONE = "none"
    HEAD = "head"
    NECK = "neck"
    SHOULDER = "shoulder"
    BACK = "back"
    CHEST = "chest"
    WRIST = "wrist"
    HANDS = "hands"
    BELT = "belt"
    LEGS = "legs"
    BOOTS = "boots"
    RING = "ring"
    TRINKET = "trinket"
    MAIN_HAND = "main_hand"
    OFF_HAND = "off_hand"
    RANGED = "ranged"

    def __str__(self) -> str:
        return self.value


class WeaponSocket(Enum):
    """Hand or hands a weapon may be wielded in."""

    MAIN_HAND = "main_hand"
    ONE_HAND = "one_hand"
    OFF_HAND = "off_hand"
    TWO_HAND = "two_hand"

    def __str__(self) -> str:
        return self.value


class WeaponType(Enum):
    """Kind of weapon."""

    SWORD = "sword"
    AXE = "axe"
    DAGGER = "dagger"
    MACE = "mace"
    UNARMED = "unarmed"

    def __str__(self) -> str:
        return self.value


class HitEffectType(Enum):
    """What an on-hit effect does when it procs."""

    NONE = "none"
    EXTRA_HIT = "extra_hit"
    WINDFURY_HIT = "windfury_hit"
    SWORD_SPEC = "sword_spec"
    STAT_BOOST = "stat_boost"
    DAMAGE_PHYSICAL = "damage_physical"
    DAMAGE_MAGIC = "damage_magic"
    REDUCE_ARMOR = "reduce_armor"
    RAGE_BOOST = "rage_boost"

    def __str__(self) -> str:
        return self.value


_SOCKET_NAMES = {
    Socket.NONE: "None",
    Socket.HEAD: "Helmet",
    Socket.NECK: "Neck",
    Socket.SHOULDER: "Shoulder",
    Socket.BACK: "Back",
    Socket.CHEST: "Chest",
    Socket.WRIST: "Wrist",
    Socket.HANDS: "Hands",
    Socket.BELT: "Belt",
    Socket.LEGS: "Legs",
    Socket.BOOTS: "Boots",
    Socket.RING: "Ring",
    Socket.TRINKET: "Trinket",
    Socket.MAIN_HAND: "Main hand",
    Socket.OFF_HAND: "Off hand",
    Socket.RANGED: "Ranged",
}

_WEAPON_SOCKET_NAMES = {
    WeaponSocket.MAIN_HAND: "main-hand",
    WeaponSocket.ONE_HAND: "one-hand",
    WeaponSocket.OFF_HAND: "off-hand",
    WeaponSocket.TWO_HAND: "two-hand",
}


def friendly_name(value: Socket | WeaponSocket) -> str:
    """Human-readable name of an equipment or weapon slot."""
    if isinstance(value, Socket):
        return _SOCKET_NAMES[value]
    if isinstance(value, WeaponSocket):
        return _WEAPON_SOCKET_NAMES[value]
    raise TypeError(f"no friendly name for {value!r}")


@dataclass(eq=False)
class ItemPopularity:
    """How often an item was picked.

    Compared with another popularity it orders by counter; compared with a
    string it orders by name.
    """

    name: str = ""
    counter: int = 0

    def __lt__(self, other: object) -> bool:
        if isinstance(other, ItemPopularity):
            return self.counter < other.counter
        if isinstance(other, str):
            return self.name < other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ItemPopularity):
            return self.counter == other.counter
        if isinstance(other, str):
            return self.name == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]