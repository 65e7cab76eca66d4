# warsim

Building blocks for simulating the damage output of a melee fighter:
running statistics, a combat clock with cooldowns, hit tables, rage
bookkeeping, damage accounting per ability, character races, weapon
swing damage, gear enchantments and gear validity checks.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `warsim.statistics` – plain statistical helpers: `average`, `variance`,
  `standard_deviation`, `sample_deviation`, `add_standard_deviations`,
  `update_mean`, `update_variance`, `two_sided_p_value`, `normal_cdf`,
  `find_cdf_quantile` and `geometric_series`. `average` and `variance`
  raise `ValueError` on an empty sequence.
- `warsim.distribution` – `Distribution`, an online mean/variance
  accumulator (Welford) with `add_sample`, `add` to merge another
  distribution, the properties `samples`, `mean`, `variance`, `std`,
  `var_of_the_mean`, `std_of_the_mean`, `last_sample`, and
  `confidence_interval` / `confidence_interval_of_the_mean`.
- `warsim.binomial` – `BinomialDistribution(trials, success_rate)` with
  `std`, a normal-approximation `confidence_interval` and
  `confidence_interval_width`.
- `warsim.damage` – `DamageSource`, `DamageInstance` and `DamageSources`,
  which tallies damage and hit counts per source (`add_damage`,
  `total_damage`, `total_count`, and `+` / `+=` to combine tallies).
- `warsim.timekeeper` – `TimeKeeper`, a millisecond clock tracking the
  `Cooldown`s of abilities (`cast`, `ready`, `remaining`), the overpower
  and rampage auras, and `get_next_event` to find the next point in time
  to advance to; `to_millis` converts seconds to milliseconds.
- `warsim.items` – `Socket`, `WeaponSocket`, `WeaponType`, `HitEffectType`,
  `ItemPopularity` and `friendly_name` for display names of slots.
- `warsim.attributes` – `Attributes` (strength and agility),
  `multiplicative_addition`, `multiplicative_subtraction` and `as_rating`.
- `warsim.character` – `Race`, `Character` with race-dependent base
  attributes and racial weapon expertise, `get_race` (falls back to human
  with a logged warning) and `character_of_race` (level 70).
- `warsim.weapon` – `WeaponSim`, swing and normalized-swing damage from
  attack power, bonus attack power and bonus damage.
- `warsim.combat` – `HitResult`, `HitOutcome`, `DamageMultipliers`,
  `HitTable` (single-roll miss/dodge/glance/crit/hit table with an
  injectable random source), `AbilityQueue`, `SlamManager` and
  `RageTracker` (rage capped at 100, with gained/spent/lost statistics).
- `warsim.enchants` – `Enchant`, `enchant_attributes` for the strength
  and agility an enchant grants in a slot, and `parse_enchants`, which
  turns option strings such as `"m+20 agility"` into `(Socket, Enchant)`
  pairs.
- `warsim.equipment` – `check_weapon_sockets`, `check_armor_sockets`,
  `change_armor` (swap a worn piece while keeping its enchant) and
  `parse_talents` (talent ranks from parallel name and value lists).

## Example

```python
from warsim.distribution import Distribution

dps = Distribution()
for sample in (1, 2, 3, 4, 5, 6, 7, 8, 9):
    dps.add_sample(sample)

print(dps.mean)                         # 5.0
print(dps.confidence_interval(0.99))    # (low, high)
```

```python
from warsim.timekeeper import Cooldown, TimeKeeper

clock = TimeKeeper()
clock.prepare(0)
clock.cast(Cooldown.BLOODTHIRST, 6000)
print(clock.ready(Cooldown.BLOODTHIRST))      # False
print(clock.remaining(Cooldown.BLOODTHIRST))  # 6000
```

```python
from warsim.combat import RageTracker

rage = RageTracker()
rage.gain_rage(120)
print(rage.rage, rage.rage_lost_capped)       # 100.0 20.0
```

## What it does not do

warsim provides the parts, not a finished simulator. There is no combat
loop that runs a fight from start to finish, no ability rotation, no
buff or proc handling, no item catalogue to look gear up by name, no
combat log, and no command-line program. Callers combine the pieces
above to build those themselves.