import pytest

from warsim.timekeeper import NEVER, Cooldown, TimeKeeper, to_millis


def test_to_millis():
    assert to_millis(1.5) == 1500
    assert to_millis(0) == 0


def test_prepare_sets_time_and_global():
    keeper = TimeKeeper()
    keeper.prepare(2000)
    assert keeper.time == 2000
    assert keeper.ready(Cooldown.GLOBAL)
    assert keeper.remaining(Cooldown.GLOBAL) == 0


def test_cast_and_ready():
    keeper = TimeKeeper()
    keeper.prepare(1000)
    keeper.cast(Cooldown.WHIRLWIND, 10000)
    assert not keeper.ready(Cooldown.WHIRLWIND)
    assert keeper.remaining(Cooldown.WHIRLWIND) == 10000
    keeper.increment(1000 + 10000)
    assert keeper.ready(Cooldown.WHIRLWIND)


@pytest.mark.parametrize("cooldown", list(Cooldown))
def test_each_cooldown_independent(cooldown):
    keeper = TimeKeeper()
    keeper.prepare(0)
    keeper.cast(cooldown, 500)
    others = [cd for cd in Cooldown if cd is not cooldown]
    assert not keeper.ready(cooldown)
    assert all(keeper.ready(cd) for cd in others)


def test_next_event_picks_earliest_future():
    keeper = TimeKeeper()
    keeper.prepare(0)
    keeper.cast(Cooldown.WHIRLWIND, 3000)
    keeper.cast(Cooldown.BLOODTHIRST, 2000)
    assert keeper.get_next_event(5000, 4000, NEVER, NEVER, 100000) == 2000
    assert keeper.get_next_event(1500, 4000, NEVER, NEVER, 100000) == 1500


def test_next_event_ignores_past_swings_but_not_buffs():
    keeper = TimeKeeper()
    keeper.prepare(1000)
    assert keeper.get_next_event(500, 900, NEVER, NEVER, 60000) == 60000
    assert keeper.get_next_event(5000, 5000, 200, NEVER, 60000) == 200


def test_next_event_bounded_by_sim_time():
    keeper = TimeKeeper()
    keeper.prepare(0)
    keeper.cast(Cooldown.MORTAL_STRIKE, 6000)
    assert keeper.get_next_event(7000, 7000, NEVER, 7000, 400) == 400


def test_from_offset_rounds():
    keeper = TimeKeeper()
    keeper.prepare(1000)
    assert keeper.from_offset(250.4) == 1250


def test_auras_last_five_seconds():
    keeper = TimeKeeper()
    keeper.prepare(0)
    keeper.gain_overpower_aura()
    keeper.gain_rampage_aura()
    keeper.increment(5000)
    assert keeper.can_do_overpower()
    assert keeper.can_do_rampage()
    keeper.increment(5001)
    assert not keeper.can_do_overpower()
    assert not keeper.can_do_rampage()