"""Interactive menus for designing dungeons."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Optional, TextIO

from .dungeon import Dungeon, get_dungeon
from .layouts import BranchingDungeonType, GriddedDungeonType, LinearDungeonType

MAX_ROOMS = 30

_MAIN_MENU = (
    "Tabletop RPG Dungeon Designer\n"
    "Options:\n"
    "1. Generate a dungeon\n"
    "2. Display the most recent dungeon\n"
    "3. Quit program\n"
    "Please select an option: "
)

_GENERATION_MENU = (
    "What kind of dungeon would you like to generate?\n"
    "Options:\n"
    "1. Generate a Linear Dungeon\n"
    "2. Generate a Branching Dungeon\n"
    "3. Generate a Gridded Dungeon\n"
    "4. Return to Main Menu\n"
    "Please select an option: "
)

_DUNGEON_OPTIONS = (
    "\nOptions:\n"
    "1. Regenerate encounters\n"
    "2. Generate a new dungeon layout\n"
    "3. Return to Main Menu\n"
    "Please select an option: "
)

_LAYOUTS = {
    1: LinearDungeonType,
    2: BranchingDungeonType,
    3: GriddedDungeonType,
}


class DungeonManager:
    """Drives the menus that generate and show a dungeon."""

    def __init__(
        self,
        dungeon: Optional[Dungeon] = None,
        input_func: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.dungeon = dungeon if dungeon is not None else get_dungeon()
        self.input_func = input_func
        self.output = output

    def _write(self, text: str) -> None:
        stream = self.output if self.output is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def _read(self) -> str:
        reader = self.input_func if self.input_func is not None else input
        return reader()

    def _read_number(self) -> Optional[int]:
        try:
            return int(self._read().strip())
        except ValueError:
            return None

    def _choose(self, prompt: str, highest: int) -> Optional[int]:
        self._write(prompt)
        choice = self._read_number()
        if choice is None or not 1 <= choice <= highest:
            return None
        return choice

    def run(self) -> None:
        """Show the main menu until the user quits."""
        while True:
            self.clear_screen()
            choice = self._choose(_MAIN_MENU, 3)
            if choice == 1:
                self.generation_menu()
            elif choice == 2:
                self.dungeon_menu()
            elif choice == 3:
                self._write("\nThank you for using Dungeon Designer!\n")
                return

    def generation_menu(self) -> None:
        """Pick a layout, generate a dungeon and show it."""
        while True:
            self.clear_screen()
            choice = self._choose(_GENERATION_MENU, 4)
            if choice is None:
                continue
            if choice == 4:
                return
            self.dungeon.set_layout(_LAYOUTS[choice](self.dungeon.rng))
            self.prompt_room_count()
            self.dungeon_menu()
            return

    def dungeon_menu(self) -> None:
        """Show the dungeon and offer to regenerate it."""
        while True:
            self.clear_screen()
            choice = self._choose(self.dungeon.display() + _DUNGEON_OPTIONS, 3)
            if choice == 1:
                self.dungeon.populate_rooms()
            elif choice == 2:
                self.prompt_room_count()
            elif choice == 3:
                return

    def prompt_room_count(self) -> int:
        """Ask for a room count until a usable one is given, then generate."""
        while True:
            self._write(f"How many rooms? (0 to {MAX_ROOMS}): ")
            count = self._read_number()
            if count is None:
                self._write("\nPlease enter numbers only!\n\n")
                continue
            if not 0 <= count <= MAX_ROOMS:
                self._write("\nPlease input a valid number of rooms\n\n")
                continue
            try:
                self.dungeon.generate(count)
            except ValueError as error:
                self._write(f"\n{error}\n\n")
                continue
            self.dungeon.populate_rooms()
            return count

    def clear_screen(self) -> None:
        """Push earlier output off the screen."""
        self._write("\n" * 100)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the dungeon designer."""
    parser = argparse.ArgumentParser(
        prog="dungeon-designer",
        description="Design dungeons for tabletop role-playing games.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)

    dungeon = get_dungeon() if args.seed is None else Dungeon(rng=random.Random(args.seed))
    manager = DungeonManager(dungeon)
    try:
        manager.run()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())