# dungeon_designer

A small tool for tabletop game masters. It builds a dungeon as a graph of rooms and gives every room a random encounter: groups of enemies, piles of loot, or a set of traps.

## Installing

```
pip install .
```

## Using the menu

```
dungeon-designer
```

To get the same dice rolls every time, pass a seed:

```
dungeon-designer --seed 42
```

The main menu lets you generate a dungeon, show the most recent one, or quit. When you generate a dungeon, you pick one of three layouts:

- **Linear**: the rooms form a single corridor. It is drawn as rows of ten rooms.
- **Branching**: the first half of the rooms form a chain. Each later room joins two earlier rooms picked at random. A branching dungeon cannot have exactly 3 rooms. If you ask for 3, the menu says so and asks again.
- **Gridded**: the first two rooms are joined. Each later room joins two earlier rooms picked at random.

Branching and gridded dungeons are drawn as their adjacency matrix. A dungeon has from 0 to 30 rooms. Below the drawing, each room is listed with its encounter. From there you can reroll the encounters and keep the layout, or generate the dungeon again with a new room count.

## Using it from Python

```python
import random

from dungeon_designer.dungeon import Dungeon
from dungeon_designer.layouts import GriddedDungeonType

rng = random.Random(42)
dungeon = Dungeon(GriddedDungeonType(rng), rng)
dungeon.generate(8)
print(dungeon.display())

dungeon.populate_rooms()  # new encounters, same layout
print(dungeon.display())
```

`Dungeon.set_layout()` switches the layout that the next `generate()` call uses. `dungeon_designer.dungeon.get_dungeon()` returns the one shared `Dungeon` that the menu uses when no seed is given.

The building blocks can also be used on their own:

- `dungeon_designer.graph.MatrixGraph` is an undirected, weighted graph kept as an adjacency matrix. The matrix grows when it is full. Its `display()` method draws the matrix.
- `dungeon_designer.traversal` has `dfs`, `bfs`, `a_star` and `kruskal_mst` for that graph, and a `DisjointSets` union-find.
- `dungeon_designer.entities` has `Enemy`, `Loot` and `Trap`. Each has a `random()` constructor.
- `dungeon_designer.encounters` has `EnemyEncounter`, `LootEncounter` and `TrapEncounter`. Each has a `describe()` method that returns its text.
- `dungeon_designer.factories` has one factory per kind of encounter. `dungeon_designer.room.Room` uses these factories to pick a room's encounter.
- `dungeon_designer.layouts` has the three layouts. They all derive from `DungeonType`.

Every random choice can come from a `random.Random` instance that you pass in, so a fixed seed gives the same dungeon every time. Without one, the `random` module is used.

## What it does not do

The dungeon exists only while the program runs. Nothing is saved to a file or loaded back, and the output is plain text only.

## Running the tests

```
pip install ".[test]"
pytest
```