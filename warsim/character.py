"""Playable races and a character's base statistics."""

from __future__ import annotations

import logging
from enum import Enum

from warsim.attributes import Attributes
from warsim.items import WeaponType

_log = logging.getLogger(__name__)

_DEFAULT_LEVEL = 70


class Race(Enum):
    """Playable race."""

    HUMAN = "human"
    DWARF = "dwarf"
    NIGHT_ELF = "night_elf"
    GNOME = "gnome"
    DRAENEI = "draenei"
    ORC = "orc"
    TAUREN = "tauren"
    TROLL = "troll"
    UNDEAD = "undead"

    def __str__(self) -> str:
        return self.value


_BASE_ATTRIBUTES = {
    Race.HUMAN: (145, 96),
    Race.DWARF: (147, 92),
    Race.NIGHT_ELF: (142, 101),
    Race.GNOME: (140, 99),
    Race.DRAENEI: (146, 93),
    Race.ORC: (148, 93),
    Race.TAUREN: (150, 91),
    Race.TROLL: (146, 98),
    Race.UNDEAD: (144, 94),
}

_RACIAL_EXPERTISE = {
    Race.HUMAN: {WeaponType.SWORD: 5, WeaponType.MACE: 5},
    Race.ORC: {WeaponType.AXE: 5},
}


class Character:
    """A character's race, level and race-dependent base statistics."""

    def __init__(self, race: Race, level: int) -> None:
        if race not in _BASE_ATTRIBUTES:
            raise ValueError(f"unknown race: {race!r}")
        self.race = race
        self.level = level
        self.base_attributes = Attributes(*_BASE_ATTRIBUTES[race])
        self.base_attack_power = 190.0
        self.base_critical_strike = 1.141
        self.expertise: dict[WeaponType, int] = dict(_RACIAL_EXPERTISE.get(race, {}))


def get_race(name: str) -> Race:
    """Race with the given name; falls back to human with a warning."""
    try:
        return Race(name)
    except ValueError:
        _log.warning("Race not found!!! picking human")
        return Race.HUMAN


def character_of_race(name: str) -> Character:
    """A level 70 character of the named race."""
    return Character(get_race(name), _DEFAULT_LEVEL)