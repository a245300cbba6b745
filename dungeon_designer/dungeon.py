"""The dungeon being designed: its rooms and the layout that joins them."""

from __future__ import annotations

import random as _random
from functools import lru_cache
from typing import Optional

from .graph import MatrixGraph
from .layouts import DungeonType, LinearDungeonType
from .room import Room


class Dungeon:
    """A set of rooms wired together by a layout strategy."""

    def __init__(
        self,
        layout: Optional[DungeonType] = None,
        rng: Optional[_random.Random] = None,
    ) -> None:
        self.rng = rng
        self.layout = layout if layout is not None else LinearDungeonType(rng)
        self.rooms = MatrixGraph()

    def set_layout(self, layout: DungeonType) -> None:
        """Use ``layout`` for the next generated dungeon."""
        self.layout = layout

    def generate(self, num_rooms: int) -> None:
        """Throw away the current rooms and build ``num_rooms`` new ones."""
        self.rooms.clear()
        for number in range(1, num_rooms + 1):
            self.rooms.add_vertex(Room(number, self.rng))
        self.layout.generate(self.rooms)

    def populate_rooms(self) -> None:
        """Give every room a fresh encounter, keeping the layout."""
        for index in range(len(self.rooms)):
            self.rooms[index] = Room(index + 1, self.rng)

    def display(self) -> str:
        """The drawn layout followed by every room's encounter."""
        parts = [
            "Here is the generated dungeon:\n\n",
            self.layout.display(self.rooms),
            "\nEncounters for each room:\n",
        ]
        parts.extend(f"{self.rooms[index].describe()}\n" for index in range(len(self.rooms)))
        return "".join(parts)


@lru_cache(maxsize=None)
def get_dungeon() -> Dungeon:
    """The dungeon shared by the whole application."""
    return Dungeon()