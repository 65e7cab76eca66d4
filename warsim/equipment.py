"""Validation of equipped slots, armor swaps and talent parsing."""

from __future__ import annotations

import copy
import logging
from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any

from warsim.items import Socket, WeaponSocket

_log = logging.getLogger(__name__)

# Slots that hold two items; every other slot holds one.
_DOUBLE_SLOTS = frozenset({Socket.RING, Socket.TRINKET})

_TALENTS = (
    "improved_heroic_strike",
    "improved_overpower",
    "anger_management",
    "deep_wounds",
    "two_handed_weapon_specialization",
    "impale",
    "poleaxe_specialization",
    "death_wish",
    "mace_specialization",
    "sword_specialization",
    "improved_disciplines",
    "mortal_strike",
    "improved_mortal_strike",
    "endless_rage",
    "booming_voice",
    "cruelty",
    "unbridled_wrath",
    "improved_cleave",
    "commanding_presence",
    "dual_wield_specialization",
    "improved_execute",
    "improved_slam",
    "sweeping_strikes",
    "weapon_mastery",
    "flurry",
    "precision",
    "bloodthirst",
    "improved_whirlwind",
    "improved_berserker_stance",
    "rampage",
    "tactical_mastery",
    "defiance",
    "one_handed_weapon_specialization",
)


def check_weapon_sockets(weapon_sockets: Sequence[WeaponSocket]) -> bool:
    """Whether the wielded weapons form a valid setup.

    Valid setups are no weapon, a single two-hander, or a main-hand or
    one-hand weapon followed by an off-hand or one-hand weapon.
    """
    match list(weapon_sockets):
        case []:
            return True
        case [only]:
            return only is WeaponSocket.TWO_HAND
        case [main, off]:
            return main in (WeaponSocket.MAIN_HAND, WeaponSocket.ONE_HAND) and off in (
                WeaponSocket.OFF_HAND,
                WeaponSocket.ONE_HAND,
            )
        case _:
            return False


def check_armor_sockets(sockets: Iterable[Socket]) -> bool:
    """Whether no slot holds more items than it has room for.

    Rings and trinkets may appear twice, every other slot once.
    """
    seen: Counter[Socket] = Counter()
    for socket in sockets:
        seen[socket] += 1
        limit = 2 if socket in _DOUBLE_SLOTS else 1
        if seen[socket] > limit:
            _log.error("extra copy of %s", socket)
            return False
    return True


def change_armor(armor: MutableSequence[Any], piece: Any, first_misc_slot: bool) -> bool:
    """Put ``piece`` in place of the worn item in the same slot, keeping its enchant.

    For rings and trinkets ``first_misc_slot`` picks the first of the two
    items; otherwise the second is replaced. Returns whether an item was
    replaced.
    """
    socket = piece.socket
    first_slot = socket not in _DOUBLE_SLOTS or first_misc_slot
    for index, worn in enumerate(armor):
        if worn.socket != socket:
            continue
        if first_slot:
            replacement = copy.copy(piece)
            replacement.enchant = worn.enchant
            armor[index] = replacement
            return True
        first_slot = True
    return False


def parse_talents(names: Sequence[str], values: Sequence[int]) -> dict[str, int]:
    """Talent ranks keyed by talent name, read from parallel name and value lists.

    Names carry a ``_talent`` suffix; talents not given have rank 0.
    """
    if len(names) != len(values):
        raise ValueError("talent names and values differ in length")
    given = dict(zip(names, values))
    return {talent: int(given.get(f"{talent}_talent", 0)) for talent in _TALENTS}