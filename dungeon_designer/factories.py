"""Factories that produce each kind of encounter."""

from __future__ import annotations

import random as _random
from abc import ABC, abstractmethod
from typing import Optional

from .encounters import Encounter, EnemyEncounter, LootEncounter, TrapEncounter


class EncounterFactory(ABC):
    """Produces fresh random encounters of one kind."""

    @abstractmethod
    def create(self, rng: Optional[_random.Random] = None) -> Encounter:
        """Build a new random encounter."""


class EnemyEncounterFactory(EncounterFactory):
    """Produces random enemy encounters."""

    def create(self, rng: Optional[_random.Random] = None) -> Encounter:
        return EnemyEncounter.random(rng)


class LootEncounterFactory(EncounterFactory):
    """Produces random loot encounters."""

    def create(self, rng: Optional[_random.Random] = None) -> Encounter:
        return LootEncounter.random(rng)


class TrapEncounterFactory(EncounterFactory):
    """Produces random trap encounters."""

    def create(self, rng: Optional[_random.Random] = None) -> Encounter:
        return TrapEncounter.random(rng)