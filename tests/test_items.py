import pytest

from warsim.items import (
    HitEffectType,
    ItemPopularity,
    Socket,
    WeaponSocket,
    WeaponType,
    friendly_name,
)


def test_socket_str_uses_source_names():
    names = {str(s): friendly_name(s) for s in Socket}
    assert names["head"] == "Helmet"
    assert names["main_hand"] == "Main hand"
    assert names["ranged"] == "Ranged"
    assert [str(s) for s in Socket][-1] == "ranged"


def test_weapon_enums_str():
    names = {str(ws): friendly_name(ws) for ws in WeaponSocket}
    assert names["two_hand"] == "two-hand"
    assert names["main_hand"] == "main-hand"
    assert str(WeaponType.DAGGER) == "dagger"
    assert str(HitEffectType.SWORD_SPEC) == "sword_spec"


def test_friendly_socket_names():
    assert friendly_name(Socket.HEAD) == "Helmet"
    assert friendly_name(Socket.OFF_HAND) == "Off hand"


def test_friendly_weapon_socket_names():
    assert friendly_name(WeaponSocket.TWO_HAND) == "two-hand"
    assert friendly_name(WeaponSocket.ONE_HAND) == "one-hand"


def test_every_socket_has_friendly_name():
    names = [friendly_name(s) for s in Socket]
    assert len(set(names)) == len(Socket)


def test_friendly_name_rejects_other_values():
    with pytest.raises(TypeError):
        friendly_name("head")


def test_popularity_orders_by_counter():
    items = [ItemPopularity("b", 3), ItemPopularity("a", 1), ItemPopularity("c", 2)]
    assert [i.name for i in sorted(items)] == ["a", "c", "b"]


def test_popularity_equality_by_counter():
    assert ItemPopularity("x", 4) == ItemPopularity("y", 4)
    assert not ItemPopularity("x", 4) == ItemPopularity("x", 5)


def test_popularity_compares_with_string_by_name():
    item = ItemPopularity("dragonstrike", 7)
    assert item == "dragonstrike"
    assert item < "zzz"
    assert not item < "aaa"