import random

import pytest

from dungeon_designer.encounters import EnemyEncounter, LootEncounter, TrapEncounter
from dungeon_designer.factories import (
    EncounterFactory,
    EnemyEncounterFactory,
    LootEncounterFactory,
    TrapEncounterFactory,
)


@pytest.mark.parametrize(
    ("factory", "heading"),
    [
        (EnemyEncounterFactory(), "Enemy Encounter!\n\t"),
        (LootEncounterFactory(), "Loot Encounter!\n\t"),
        (TrapEncounterFactory(), "Trap Encounter!\n\t"),
    ],
)
def test_encounter_not_empty(factory, heading):
    assert factory.create().describe().startswith(heading)


def test_enemy_factory_has_enemy():
    encounter = EnemyEncounterFactory().create()
    assert "Enemy Encounter!" in encounter.describe()
    assert isinstance(encounter, EnemyEncounter)


def test_loot_factory_has_loot():
    encounter = LootEncounterFactory().create()
    assert "Loot Encounter!" in encounter.describe()
    assert isinstance(encounter, LootEncounter)


def test_trap_factory_has_trap():
    encounter = TrapEncounterFactory().create()
    assert "Trap Encounter!" in encounter.describe()
    assert isinstance(encounter, TrapEncounter)


@pytest.mark.parametrize(
    "factory",
    [EnemyEncounterFactory(), LootEncounterFactory(), TrapEncounterFactory()],
)
def test_same_seed_gives_same_encounter(factory):
    first = factory.create(random.Random(4)).describe()
    second = factory.create(random.Random(4)).describe()
    assert first == second


def test_abstract_factory_cannot_be_instantiated():
    with pytest.raises(TypeError):
        EncounterFactory()