"""Random dungeon layouts and encounters for tabletop role-playing games."""

__version__ = "1.0.0"