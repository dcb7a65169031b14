"""Standardized Info classes for game entities.

This module stores static information about factions and terrain behind a
common base, so parsing and rendering share one symbol table and the rules
config takes its default attack powers from here.
"""

from dataclasses import dataclass

from .game_enums import FACTION_NAMES, TERRAIN_NAMES, Faction, TerrainType

DEFAULT_HIT_POINTS = 200
DEFAULT_ATTACK_POWER = 3


@dataclass
class BaseInfo:
    """Base class for all game entity info classes."""
    name: str
    symbol: str


@dataclass
class FactionInfo(BaseInfo):
    """Static information about a faction."""
    attack_power: int = DEFAULT_ATTACK_POWER


@dataclass
class TerrainInfo(BaseInfo):
    """Static information about a terrain type."""
    blocks_movement: bool = False


FACTION_DATA = {
    Faction.ELF: FactionInfo(name=FACTION_NAMES[Faction.ELF], symbol="E"),
    Faction.GOBLIN: FactionInfo(name=FACTION_NAMES[Faction.GOBLIN], symbol="G"),
}

TERRAIN_DATA = {
    TerrainType.OPEN: TerrainInfo(name=TERRAIN_NAMES[TerrainType.OPEN], symbol="."),
    TerrainType.WALL: TerrainInfo(
        name=TERRAIN_NAMES[TerrainType.WALL], symbol="#", blocks_movement=True
    ),
}

SYMBOL_TO_FACTION = {info.symbol: faction for faction, info in FACTION_DATA.items()}
SYMBOL_TO_TERRAIN = {info.symbol: terrain for terrain, info in TERRAIN_DATA.items()}
