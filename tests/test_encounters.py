import random

import pytest

from dungeon_designer.encounters import (
    MAX_ENEMIES,
    MAX_LOOT,
    MAX_PER_ENEMY,
    MAX_PER_LOOT,
    MAX_TRAPS,
    EnemyEncounter,
    LootEncounter,
    TrapEncounter,
)
from dungeon_designer.entities import Enemy, Loot, Trap


def test_enemy_encounter_not_empty():
    assert EnemyEncounter.random().describe().startswith("Enemy Encounter!\n\t")


def test_enemy_encounter_has_heading():
    assert "Enemy Encounter" in EnemyEncounter.random(random.Random(1)).describe()


def test_single_enemy():
    encounter = EnemyEncounter([(Enemy("Joe", 100), 20)])
    assert encounter.describe() == "Enemy Encounter!\n\t20 Joes with 100 health."


def test_three_enemies():
    encounter = EnemyEncounter(
        [(Enemy("Joe", 100), 20), (Enemy("Foo", 69), 11), (Enemy("Bar", 4), 20)]
    )
    assert encounter.describe() == (
        "Enemy Encounter!\n\t20 Joes with 100 health."
        "\n\t11 Foos with 69 health.\n\t20 Bars with 4 health."
    )


@pytest.mark.parametrize("seed", range(15))
def test_random_enemy_encounter_limits(seed):
    encounter = EnemyEncounter.random(random.Random(seed))
    assert 1 <= len(encounter.enemies) <= MAX_ENEMIES
    assert all(1 <= count <= MAX_PER_ENEMY for _, count in encounter.enemies)
    assert len(encounter.describe().splitlines()) == len(encounter.enemies) + 1


def test_loot_encounter_not_empty():
    assert LootEncounter.random().describe().startswith("Loot Encounter!\n\t")


def test_loot_encounter_has_heading():
    assert "Loot Encounter" in LootEncounter.random(random.Random(2)).describe()


def test_single_loot():
    encounter = LootEncounter([(Loot("Computer Monitor"), 20)])
    assert encounter.describe() == "Loot Encounter!\n\t20 Computer Monitors."


def test_three_loot():
    encounter = LootEncounter(
        [
            (Loot("Computer Monitor"), 20),
            (Loot("Throwing Star"), 4),
            (Loot("NVIDIA GTX 3090"), 1),
        ]
    )
    assert encounter.describe() == (
        "Loot Encounter!\n\t20 Computer Monitors.\n\t4 Throwing Stars."
        "\n\t1 NVIDIA GTX 3090s."
    )


@pytest.mark.parametrize("seed", range(15))
def test_random_loot_encounter_limits(seed):
    encounter = LootEncounter.random(random.Random(seed))
    assert 1 <= len(encounter.items) <= MAX_LOOT
    assert all(1 <= count <= MAX_PER_LOOT for _, count in encounter.items)


def test_trap_encounter_not_empty():
    assert TrapEncounter.random().describe().startswith("Trap Encounter!\n\t")


def test_trap_encounter_has_heading():
    assert "Trap Encounter!" in TrapEncounter.random(random.Random(3)).describe()


def test_single_trap():
    encounter = TrapEncounter([Trap("Waterslide", "Slippery Toes")])
    assert encounter.describe() == "Trap Encounter!\n\tWaterslide causing Slippery Toes."


def test_three_traps():
    encounter = TrapEncounter(
        [
            Trap("Waterslide", "Slippery Toes"),
            Trap("Bear Trap", "Pain and Suffering"),
            Trap("Hidden Electromagnet", "Brain Melt"),
        ]
    )
    assert encounter.describe() == (
        "Trap Encounter!\n\tWaterslide causing Slippery Toes."
        "\n\tBear Trap causing Pain and Suffering."
        "\n\tHidden Electromagnet causing Brain Melt."
    )


@pytest.mark.parametrize("seed", range(15))
def test_random_trap_encounter_limits(seed):
    encounter = TrapEncounter.random(random.Random(seed))
    assert 1 <= len(encounter.traps) <= MAX_TRAPS


def test_clone_is_equal_and_independent():
    original = LootEncounter([(Loot("Sword"), 2)])
    duplicate = original.clone()
    assert duplicate == original
    duplicate.items.append((Loot("Egg"), 1))
    assert original.items == [(Loot("Sword"), 2)]


def test_str_matches_describe():
    encounter = TrapEncounter([Trap("Pit", "Falling")])
    assert str(encounter) == "Trap Encounter!\n\tPit causing Falling."