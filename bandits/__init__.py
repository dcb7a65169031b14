"""Elves vs Goblins cave battle simulator."""

from .core.data import Faction, FightOutcome, Vector2
from .core.engine import FightResult, score
from .core.rules_loader import RulesConfig, get_rules_config
from .game import (
    Battlefield,
    Combat,
    CombatStalemateError,
    LogManager,
    MapFormatError,
    parse_map,
    render_battlefield,
    run_to_completion,
    run_with_minimum_elf_power,
    shortest_path,
)

__all__ = [
    "Faction",
    "FightOutcome",
    "Vector2",
    "FightResult",
    "score",
    "RulesConfig",
    "get_rules_config",
    "Battlefield",
    "Combat",
    "CombatStalemateError",
    "LogManager",
    "MapFormatError",
    "parse_map",
    "render_battlefield",
    "run_to_completion",
    "run_with_minimum_elf_power",
    "shortest_path",
]
