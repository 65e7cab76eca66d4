import pytest

from warsim.items import Socket, WeaponSocket, WeaponType
from warsim.weapon import WeaponSim


def _sword(socket=Socket.MAIN_HAND, speed=2.6):
    return WeaponSim(speed, 100, 200, socket, WeaponType.SWORD, WeaponSocket.ONE_HAND)


def test_normalized_speeds():
    two_hander = WeaponSim(3.6, 300, 400, Socket.MAIN_HAND, WeaponType.AXE, WeaponSocket.TWO_HAND)
    dagger = WeaponSim(1.8, 80, 120, Socket.OFF_HAND, WeaponType.DAGGER, WeaponSocket.ONE_HAND)
    assert two_hander.normalized_swing_speed == 3.3
    assert dagger.normalized_swing_speed == 1.7
    assert _sword().normalized_swing_speed == 2.4


def test_swing_without_power_is_average_damage():
    weapon = _sword()
    assert weapon.swing(0, 0, 0) == pytest.approx(150)
    assert weapon.next_swing == 0


def test_off_hand_deals_half_damage():
    main = _sword(Socket.MAIN_HAND)
    off = _sword(Socket.OFF_HAND)
    assert off.swing(1000, 0, 0) == pytest.approx(0.5 * main.swing(1000, 0, 0))


def test_bonus_damage_not_halved_for_off_hand():
    off = _sword(Socket.OFF_HAND)
    assert off.swing(0, 0, 10) - off.swing(0, 0, 0) == pytest.approx(10)


def test_attack_power_scales_linearly():
    weapon = _sword()
    base = weapon.swing(0, 0, 0)
    gain = weapon.swing(700, 0, 0) - base
    assert weapon.swing(1400, 0, 0) - base == pytest.approx(2 * gain)


def test_bonus_attack_power_matches_attack_power_on_main_hand():
    weapon = _sword()
    assert weapon.swing(0, 500, 0) == pytest.approx(weapon.swing(500, 0, 0))


def test_normalized_swing_equals_swing_at_normalized_speed():
    weapon = _sword(speed=2.4)
    assert weapon.normalized_swing(1200, 100, 5) == pytest.approx(weapon.swing(1200, 100, 5))


def test_buff_bonus_damage_raises_average():
    plain = _sword()
    buffed = WeaponSim(2.6, 100, 200, Socket.MAIN_HAND, WeaponType.SWORD, WeaponSocket.ONE_HAND, bonus_damage=12)
    assert buffed.average_damage - plain.average_damage == pytest.approx(12)