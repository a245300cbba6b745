"""Strategies that connect a dungeon's rooms and draw the result."""

from __future__ import annotations

import random as _random
from abc import ABC, abstractmethod
from typing import Optional

from .graph import MatrixGraph

_ROW_LENGTH = 10


class DungeonType(ABC):
    """A way of wiring rooms together."""

    def __init__(self, rng: Optional[_random.Random] = None) -> None:
        self._rng = rng

    @property
    def rng(self):
        return _random if self._rng is None else self._rng

    @abstractmethod
    def generate(self, rooms: MatrixGraph) -> None:
        """Add the corridors between ``rooms``."""

    def display(self, rooms: MatrixGraph) -> str:
        """Draw the dungeon; by default its adjacency matrix."""
        return rooms.display()


class LinearDungeonType(DungeonType):
    """Rooms in a single chain, each joined to the next."""

    def generate(self, rooms: MatrixGraph) -> None:
        for index in range(len(rooms) - 1):
            rooms.add_edge(index, index + 1)

    def display(self, rooms: MatrixGraph) -> str:
        """Draw the chain in rows of ten rooms."""
        total = len(rooms)
        blocks = []
        start = 0
        while start < total:
            remaining = total - start
            partial = remaining < _ROW_LENGTH
            count = remaining if partial else _ROW_LENGTH
            border = "|--| " * count + "\n"
            numbers = "".join(
                f"|{number:>2}|=" for number in range(start + 1, start + count + 1)
            )
            blocks.append(border + numbers + "\n" + border + ("" if partial else "\n"))
            start += count
        return "".join(blocks)


class BranchingDungeonType(DungeonType):
    """Half the rooms in a chain, the rest each joined to two earlier rooms."""

    def generate(self, rooms: MatrixGraph) -> None:
        size = len(rooms)
        half = size // 2
        for index in range(half):
            rooms.add_edge(index, index + 1)
        for index in range(half + 1, size):
            candidates = range(index - 1)
            if len(candidates) < 2:
                raise ValueError(
                    f"a branching dungeon cannot be built from {size} rooms"
                )
            first, second = self.rng.sample(candidates, 2)
            rooms.add_edge(index, first)
            rooms.add_edge(index, second)


class GriddedDungeonType(DungeonType):
    """The first two rooms joined, every later room joined to two earlier ones."""

    def generate(self, rooms: MatrixGraph) -> None:
        size = len(rooms)
        if size > 1:
            rooms.add_edge(0, 1)
        for index in range(2, size):
            first, second = self.rng.sample(range(index), 2)
            rooms.add_edge(index, first)
            rooms.add_edge(index, second)