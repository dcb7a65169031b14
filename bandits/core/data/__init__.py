"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- data_structures.py: Vector2 positions with reading-order comparison
- game_enums.py: Centralized enums for factions, terrain and fight outcomes
- game_info.py: Static game data and symbol lookup tables
"""

from .data_structures import MAX_COORD, MIN_COORD, Vector2, manhattan_distance
from .game_enums import FACTION_NAMES, FIGHT_OUTCOME_NAMES, TERRAIN_NAMES, Faction, FightOutcome, TerrainType
from .game_info import (
    DEFAULT_ATTACK_POWER,
    DEFAULT_HIT_POINTS,
    FACTION_DATA,
    SYMBOL_TO_FACTION,
    SYMBOL_TO_TERRAIN,
    TERRAIN_DATA,
    FactionInfo,
    TerrainInfo,
)

__all__ = [
    "MAX_COORD",
    "MIN_COORD",
    "Vector2",
    "manhattan_distance",
    "FACTION_NAMES",
    "FIGHT_OUTCOME_NAMES",
    "TERRAIN_NAMES",
    "Faction",
    "FightOutcome",
    "TerrainType",
    "DEFAULT_ATTACK_POWER",
    "DEFAULT_HIT_POINTS",
    "FACTION_DATA",
    "SYMBOL_TO_FACTION",
    "SYMBOL_TO_TERRAIN",
    "TERRAIN_DATA",
    "FactionInfo",
    "TerrainInfo",
]
