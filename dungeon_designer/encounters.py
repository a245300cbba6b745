"""Encounters that fill a room: fights, treasure or traps."""

from __future__ import annotations

import copy
import random as _random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from .entities import Enemy, Loot, Trap

MAX_ENEMIES = 3
MAX_PER_ENEMY = 5
MAX_LOOT = 5
MAX_PER_LOOT = 5
MAX_TRAPS = 2


def _source(rng: Optional[_random.Random]):
    return _random if rng is None else rng


class Encounter(ABC):
    """Something the party meets in a room."""

    @abstractmethod
    def describe(self) -> str:
        """Text describing the encounter."""

    def clone(self) -> "Encounter":
        """An independent copy of this encounter."""
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return self.describe()


@dataclass
class EnemyEncounter(Encounter):
    """Groups of enemies, each with a head count."""

    enemies: list[tuple[Enemy, int]] = field(default_factory=list)

    @classmethod
    def random(cls, rng: Optional[_random.Random] = None) -> "EnemyEncounter":
        """One to ``MAX_ENEMIES`` groups of one to ``MAX_PER_ENEMY`` enemies."""
        rng = _source(rng)
        groups = rng.randint(1, MAX_ENEMIES)
        return cls(
            [(Enemy.random(rng), rng.randint(1, MAX_PER_ENEMY)) for _ in range(groups)]
        )

    def describe(self) -> str:
        lines = (
            f"\t{count} {enemy.name}s with {enemy.health} health."
            for enemy, count in self.enemies
        )
        return "Enemy Encounter!\n" + "\n".join(lines)


@dataclass
class LootEncounter(Encounter):
    """Piles of items, each with a quantity."""

    items: list[tuple[Loot, int]] = field(default_factory=list)

    @classmethod
    def random(cls, rng: Optional[_random.Random] = None) -> "LootEncounter":
        """One to ``MAX_LOOT`` piles of one to ``MAX_PER_LOOT`` items."""
        rng = _source(rng)
        piles = rng.randint(1, MAX_LOOT)
        return cls(
            [(Loot.random(rng), rng.randint(1, MAX_PER_LOOT)) for _ in range(piles)]
        )

    def describe(self) -> str:
        lines = (f"\t{count} {loot.name}s." for loot, count in self.items)
        return "Loot Encounter!\n" + "\n".join(lines)


@dataclass
class TrapEncounter(Encounter):
    """One or more traps."""

    traps: list[Trap] = field(default_factory=list)

    @classmethod
    def random(cls, rng: Optional[_random.Random] = None) -> "TrapEncounter":
        """One to ``MAX_TRAPS`` random traps."""
        rng = _source(rng)
        return cls([Trap.random(rng) for _ in range(rng.randint(1, MAX_TRAPS))])

    def describe(self) -> str:
        lines = (f"\t{trap.name} causing {trap.effect}." for trap in self.traps)
        return "Trap Encounter!\n" + "\n".join(lines)