"""Battle simulation.

This package contains the battlefield and everything that acts on it:
- map.py / map_loader.py: Battlefield grids, map parsing and scenarios
- pathfinding.py: Wavefront distances and reading-order shortest paths
- combat_resolver.py / combat_manager.py: Attacks, turns and rounds
- power_search.py: Minimum Elf attack power for a flawless victory
- render_builder.py / log_manager.py: ASCII output and the battle log
"""

from .combat_manager import Combat, CombatStalemateError, TurnReport, run_to_completion
from .combat_resolver import AttackResult, CombatResolver
from .log_manager import LogCategory, LogLevel, LogManager, LogMessage
from .map import Battlefield
from .map_loader import MapFormatError, Scenario, ScenarioLoader, default_scenario_directory, parse_map
from .pathfinding import distance_field, nearest_target, path_to_nearest_target, shortest_path
from .power_search import attempt_flawless_victory, run_with_minimum_elf_power
from .render_builder import render_battlefield

__all__ = [
    "Combat",
    "CombatStalemateError",
    "TurnReport",
    "run_to_completion",
    "AttackResult",
    "CombatResolver",
    "LogCategory",
    "LogLevel",
    "LogManager",
    "LogMessage",
    "Battlefield",
    "MapFormatError",
    "Scenario",
    "ScenarioLoader",
    "default_scenario_directory",
    "parse_map",
    "distance_field",
    "nearest_target",
    "path_to_nearest_target",
    "shortest_path",
    "attempt_flawless_victory",
    "run_with_minimum_elf_power",
    "render_battlefield",
]
