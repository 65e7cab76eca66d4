"""Weapon state used while simulating combat."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from warsim.items import Socket, WeaponSocket, WeaponType


def _normalized_speed(weapon_socket: WeaponSocket, weapon_type: WeaponType) -> float:
    if weapon_socket is WeaponSocket.TWO_HAND:
        return 3.3
    if weapon_type is WeaponType.DAGGER:
        return 1.7
    return 2.4


class WeaponSim:
    """A wielded weapon: its speed, damage and swing timer."""

    def __init__(
        self,
        swing_speed: float,
        min_damage: float,
        max_damage: float,
        socket: Socket,
        weapon_type: WeaponType,
        weapon_socket: WeaponSocket,
        bonus_damage: float = 0.0,
        hit_effects: Iterable[Any] = (),
    ) -> None:
        self.swing_speed = swing_speed
        self.average_damage = 0.5 * (min_damage + max_damage) + bonus_damage
        self.socket = socket
        self.weapon_type = weapon_type
        self.weapon_socket = weapon_socket
        self.hit_effects = list(hit_effects)
        self.next_swing = 0
        self.normalized_swing_speed = _normalized_speed(weapon_socket, weapon_type)

    def _damage(self, speed: float, attack_power: float, bonus_attack_power: float, bonus_damage: float) -> float:
        damage = self.average_damage + attack_power / 14 * speed
        bonus = bonus_attack_power / 14 * speed + bonus_damage
        if self.socket is Socket.MAIN_HAND:
            return damage + bonus
        return damage * 0.5 + bonus

    def swing(self, attack_power: float, bonus_attack_power: float, bonus_damage: float) -> float:
        """Damage of a white swing at the weapon's own speed."""
        return self._damage(self.swing_speed, attack_power, bonus_attack_power, bonus_damage)

    def normalized_swing(self, attack_power: float, bonus_attack_power: float, bonus_damage: float) -> float:
        """Damage of an ability using the normalized weapon speed."""
        return self._damage(self.normalized_swing_speed, attack_power, bonus_attack_power, bonus_damage)