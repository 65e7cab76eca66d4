"""Enchant kinds, the attributes they grant and parsing of enchant options."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from warsim.attributes import Attributes
from warsim.items import Socket


class Enchant(Enum):
    """Kind of enchant applied to an item."""

    NONE = "none"
    AGILITY = "agility"
    GREATER_AGILITY = "greater_agility"
    AGILITY12 = "agility12"
    STRENGTH = "strength"
    STRENGTH7 = "strength7"
    STRENGTH9 = "strength9"
    STRENGTH12 = "strength12"
    STRENGTH15 = "strength15"
    STRENGTH20 = "strength20"
    MINOR_STATS = "minor_stats"
    MAJOR_STATS = "major_stats"
    EXCEPTIONAL_STATS = "exceptional_stats"
    RING_STATS = "ring_stats"
    CATS_SWIFTNESS = "cats_swiftness"
    HASTE = "haste"
    FEROCITY = "ferocity"
    ATTACK_POWER = "attack_power"
    NAXXRAMAS = "naxxramas"
    GREATER_VENGEANCE = "greater_vengeance"
    GREATER_BLADE = "greater_blade"
    COBRAHIDE = "cobrahide"
    NETHERCOBRA = "nethercobra"
    HIT = "hit"
    DAMAGE = "damage"
    RING_DAMAGE = "ring_damage"
    CRUSADER = "crusader"
    MONGOOSE = "mongoose"
    EXECUTIONER = "executioner"

    def __str__(self) -> str:
        return self.value


_WEAPON_ATTRIBUTES = {
    Enchant.AGILITY: (0, 15),
    Enchant.STRENGTH: (15, 0),
    Enchant.STRENGTH20: (20, 0),
    Enchant.GREATER_AGILITY: (0, 20),
}

_ATTRIBUTES: dict[Socket, dict[Enchant, tuple[float, float]]] = {
    Socket.HEAD: {Enchant.AGILITY: (0, 8), Enchant.STRENGTH: (8, 0)},
    Socket.BACK: {Enchant.AGILITY: (0, 3), Enchant.GREATER_AGILITY: (0, 12)},
    Socket.CHEST: {
        Enchant.MINOR_STATS: (3, 3),
        Enchant.MAJOR_STATS: (4, 4),
        Enchant.EXCEPTIONAL_STATS: (6, 6),
    },
    Socket.WRIST: {
        Enchant.STRENGTH7: (7, 0),
        Enchant.STRENGTH9: (9, 0),
        Enchant.STRENGTH12: (12, 0),
    },
    Socket.HANDS: {
        Enchant.AGILITY: (0, 7),
        Enchant.GREATER_AGILITY: (0, 15),
        Enchant.STRENGTH: (7, 0),
        Enchant.STRENGTH15: (15, 0),
    },
    Socket.LEGS: {Enchant.AGILITY: (0, 8), Enchant.STRENGTH: (8, 0)},
    Socket.BOOTS: {
        Enchant.AGILITY: (0, 7),
        Enchant.AGILITY12: (0, 12),
        Enchant.CATS_SWIFTNESS: (0, 6),
    },
    Socket.MAIN_HAND: _WEAPON_ATTRIBUTES,
    Socket.OFF_HAND: _WEAPON_ATTRIBUTES,
    Socket.RING: {Enchant.MAJOR_STATS: (4, 4), Enchant.RING_STATS: (8, 8)},
}


def enchant_attributes(socket: Socket, enchant: Enchant) -> Attributes:
    """Strength and agility that ``enchant`` grants on an item in ``socket``."""
    if not isinstance(socket, Socket):
        raise TypeError(f"not a socket: {socket!r}")
    if not isinstance(enchant, Enchant):
        raise TypeError(f"not an enchant: {enchant!r}")
    strength, agility = _ATTRIBUTES.get(socket, {}).get(enchant, (0, 0))
    return Attributes(strength, agility)


# For each slot, the options in order of precedence: the first one present wins.
_SLOT_OPTIONS: list[tuple[Socket, list[tuple[str, Enchant]]]] = [
    (Socket.HEAD, [
        ("e+8 strength", Enchant.STRENGTH),
        ("e+10 haste", Enchant.HASTE),
        ("eferocity", Enchant.FEROCITY),
    ]),
    (Socket.SHOULDER, [
        ("s+30 attack_power", Enchant.ATTACK_POWER),
        ("snaxxramas", Enchant.NAXXRAMAS),
        ("sgreater_vengeance", Enchant.GREATER_VENGEANCE),
        ("sgreater_blade", Enchant.GREATER_BLADE),
    ]),
    (Socket.BACK, [
        ("b+3 agility", Enchant.AGILITY),
        ("b+12 agility", Enchant.GREATER_AGILITY),
    ]),
    (Socket.CHEST, [
        ("c+3 stats", Enchant.MINOR_STATS),
        ("c+4 stats", Enchant.MAJOR_STATS),
        ("c+6 stats", Enchant.EXCEPTIONAL_STATS),
    ]),
    (Socket.WRIST, [
        ("w+7 strength", Enchant.STRENGTH7),
        ("w+9 strength", Enchant.STRENGTH9),
        ("w+12 strength", Enchant.STRENGTH12),
    ]),
    (Socket.HANDS, [
        ("h+7 strength", Enchant.STRENGTH),
        ("h+15 strength", Enchant.STRENGTH15),
        ("h+7 agility", Enchant.AGILITY),
        ("h+15 agility", Enchant.GREATER_AGILITY),
        ("h+10 haste", Enchant.HASTE),
        ("h+26 attack_power", Enchant.ATTACK_POWER),
    ]),
    (Socket.LEGS, [
        ("l+8 strength", Enchant.STRENGTH),
        ("l+10 haste", Enchant.HASTE),
        ("lcobrahide", Enchant.COBRAHIDE),
        ("lnethercobra", Enchant.NETHERCOBRA),
    ]),
    (Socket.BOOTS, [
        ("t+7 agility", Enchant.AGILITY),
        ("t+12 agility", Enchant.AGILITY12),
        ("tcats_swiftness", Enchant.CATS_SWIFTNESS),
        ("t+10 hit", Enchant.HIT),
    ]),
    (Socket.MAIN_HAND, [
        ("mcrusader", Enchant.CRUSADER),
        ("mmongoose", Enchant.MONGOOSE),
        ("mexecutioner", Enchant.EXECUTIONER),
        ("m+15 agility", Enchant.AGILITY),
        ("m+20 agility", Enchant.GREATER_AGILITY),
        ("m+15 strength", Enchant.STRENGTH),
        ("m+20 strength", Enchant.STRENGTH20),
    ]),
    (Socket.OFF_HAND, [
        ("ocrusader", Enchant.CRUSADER),
        ("omongoose", Enchant.MONGOOSE),
        ("oexecutioner", Enchant.EXECUTIONER),
        ("o+15 agility", Enchant.AGILITY),
        ("o+20 agility", Enchant.GREATER_AGILITY),
        ("o+15 strength", Enchant.STRENGTH),
        ("o+20 strength", Enchant.STRENGTH20),
    ]),
]

# Ring enchants: (first ring option, second ring option, both rings, one ring).
_RING_OPTIONS = [
    ("r+4 stats", "f+4 stats", Enchant.RING_STATS, Enchant.MAJOR_STATS),
    ("r+2 damage", "f+2 damage", Enchant.RING_DAMAGE, Enchant.DAMAGE),
]


def parse_enchants(options: Iterable[str]) -> list[tuple[Socket, Enchant]]:
    """Enchants selected by the option strings, as (socket, enchant) pairs.

    Each slot takes at most one enchant, the first by precedence. Both rings
    enchanted alike count as one combined ring enchant.
    """
    chosen = set(options)
    result: list[tuple[Socket, Enchant]] = []
    for socket, candidates in _SLOT_OPTIONS:
        match = next((enchant for option, enchant in candidates if option in chosen), None)
        if match is not None:
            result.append((socket, match))
    for first, second, both, single in _RING_OPTIONS:
        has_first = first in chosen
        has_second = second in chosen
        if has_first and has_second:
            result.append((Socket.RING, both))
        elif has_first or has_second:
            result.append((Socket.RING, single))
    return result