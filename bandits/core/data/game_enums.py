"""Centralized game enums and constants.

This module contains the enums shared by the battlefield, the combat engine
and the renderers, providing a single source of truth.
"""

from enum import Enum, auto


class Faction(Enum):
    """The two sides of the cave battle."""
    ELF = 0
    GOBLIN = 1

    @property
    def enemy(self) -> "Faction":
        """The opposing faction."""
        return Faction.GOBLIN if self is Faction.ELF else Faction.ELF


class TerrainType(Enum):
    """Static terrain of a cave square."""
    OPEN = auto()
    WALL = auto()


class FightOutcome(Enum):
    """States of the combat state machine."""
    ONGOING = auto()
    ELVES_WIN = auto()
    GOBLINS_WIN = auto()
    TIE = auto()


FACTION_NAMES = {
    Faction.ELF: "Elves",
    Faction.GOBLIN: "Goblins",
}

TERRAIN_NAMES = {
    TerrainType.OPEN: "Open Cavern",
    TerrainType.WALL: "Wall",
}

FIGHT_OUTCOME_NAMES = {
    FightOutcome.ONGOING: "Ongoing",
    FightOutcome.ELVES_WIN: "Elves win",
    FightOutcome.GOBLINS_WIN: "Goblins win",
    FightOutcome.TIE: "Tie",
}
