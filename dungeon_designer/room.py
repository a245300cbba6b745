"""A dungeon room holding one randomly chosen encounter."""

from __future__ import annotations

import random as _random
from typing import Optional

from .encounters import Encounter
from .factories import (
    EncounterFactory,
    EnemyEncounterFactory,
    LootEncounterFactory,
    TrapEncounterFactory,
)

_FACTORIES: tuple[EncounterFactory, ...] = (
    TrapEncounterFactory(),
    EnemyEncounterFactory(),
    LootEncounterFactory(),
)


class Room:
    """A numbered room with an encounter drawn from one of the factories."""

    def __init__(self, room_id: int = -1, rng: Optional[_random.Random] = None) -> None:
        self.id = room_id
        self._rng = rng
        self.encounter: Encounter
        self.generate_encounter()

    def generate_encounter(self) -> None:
        """Replace the room's encounter with a fresh random one."""
        source = _random if self._rng is None else self._rng
        factory = _FACTORIES[source.randrange(len(_FACTORIES))]
        self.encounter = factory.create(self._rng)

    def describe(self) -> str:
        """The room number followed by its encounter."""
        return f"Room {self.id}: {self.encounter.describe()}"

    def __str__(self) -> str:
        return self.describe()

    def __copy__(self) -> "Room":
        clone = Room.__new__(Room)
        clone.id = self.id
        clone._rng = self._rng
        clone.encounter = self.encounter.clone()
        return clone