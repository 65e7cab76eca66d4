import pytest

from warsim.damage import DamageInstance, DamageSource, DamageSources


def test_source_labels_fixed_by_format():
    sources = DamageSources()
    sources.add_damage(DamageSource.DEEP_WOUNDS, 10.0)
    sources.add_damage(DamageSource.WHITE_MH, 20.0)
    labels = {str(source) for source, count in sources.counts.items() if count}
    assert labels == {"deep_wound", "white_mh"}
    assert list(DamageSource)[0] is DamageSource.WHITE_MH


def test_new_sources_are_empty():
    sources = DamageSources()
    assert sources.total_damage() == 0
    assert sources.total_count() == 0
    assert set(sources.damage) == set(DamageSource)


def test_add_damage_accumulates():
    sources = DamageSources()
    sources.add_damage(DamageSource.SLAM, 120.5)
    sources.add_damage(DamageSource.SLAM, 79.5)
    sources.add_damage(DamageSource.EXECUTE, 900.0)
    assert sources.damage[DamageSource.SLAM] == pytest.approx(120.5 + 79.5)
    assert sources.counts[DamageSource.SLAM] == 2
    assert sources.counts[DamageSource.EXECUTE] == 1
    assert sources.total_damage() == pytest.approx(120.5 + 79.5 + 900.0)
    assert sources.total_count() == 3


def test_add_damage_rejects_unknown_source():
    with pytest.raises(TypeError):
        DamageSources().add_damage("slam", 10.0)


def test_addition_combines_all_sources():
    left = DamageSources()
    right = DamageSources()
    left.add_damage(DamageSource.WHIRLWIND, 300.0)
    right.add_damage(DamageSource.WHIRLWIND, 200.0)
    right.add_damage(DamageSource.SWEEPING_STRIKES, 50.0)
    combined = left + right
    assert combined.damage[DamageSource.WHIRLWIND] == pytest.approx(500.0)
    assert combined.counts[DamageSource.SWEEPING_STRIKES] == 1
    assert combined.total_count() == left.total_count() + right.total_count()
    assert left.damage[DamageSource.WHIRLWIND] == pytest.approx(300.0)


def test_in_place_addition():
    left = DamageSources()
    right = DamageSources()
    right.add_damage(DamageSource.HAMSTRING, 45.0)
    left += right
    assert left.counts[DamageSource.HAMSTRING] == 1
    assert left.total_damage() == pytest.approx(right.total_damage())


def test_damage_instance_fields():
    instance = DamageInstance(DamageSource.CLEAVE, 250.0, 1200)
    assert (instance.source, instance.damage, instance.time_stamp) == (DamageSource.CLEAVE, 250.0, 1200)