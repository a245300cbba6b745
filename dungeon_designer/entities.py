"""The things a room can hold: enemies, loot and traps."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Optional

ENEMY_NAMES = ("Zombie", "Pirate", "Monkey", "Skeleton", "Bigfoot", "Gorilla")
MAX_HEALTH = 100

LOOT_NAMES = (
    "Gold Piece",
    "Sword",
    "Bow",
    "Arrow",
    "Egg",
    "Axe",
    "Enchanted Paper Airplane",
)

TRAP_NAMES = ("Beartrap", "Hidden Mine", "Arrow Trap", "Trap Door", "Poison Air")
TRAP_EFFECTS = ("Weakness", "Slowness", "Paralysis", "Poison")


def _source(rng: Optional[_random.Random]):
    return _random if rng is None else rng


@dataclass(frozen=True)
class Enemy:
    """A kind of enemy and its health."""

    name: str
    health: int

    @classmethod
    def random(cls, rng: Optional[_random.Random] = None) -> "Enemy":
        """Pick a random enemy with health from 1 to ``MAX_HEALTH``."""
        rng = _source(rng)
        return cls(rng.choice(ENEMY_NAMES), rng.randint(1, MAX_HEALTH))


@dataclass(frozen=True)
class Loot:
    """A kind of item to be found."""

    name: str

    @classmethod
    def random(cls, rng: Optional[_random.Random] = None) -> "Loot":
        """Pick a random item."""
        return cls(_source(rng).choice(LOOT_NAMES))


@dataclass(frozen=True)
class Trap:
    """A trap and the effect it causes."""

    name: str
    effect: str

    @classmethod
    def random(cls, rng: Optional[_random.Random] = None) -> "Trap":
        """Pick a random trap and a random effect."""
        rng = _source(rng)
        return cls(rng.choice(TRAP_NAMES), rng.choice(TRAP_EFFECTS))