"""Building battlefields from map text and YAML scenario files."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..core.data import FACTION_DATA, SYMBOL_TO_FACTION, SYMBOL_TO_TERRAIN, Faction, TerrainType, Vector2
from ..core.rules_loader import RulesConfig, get_rules_config
from .entities.unit import Unit
from .map import Battlefield


class MapFormatError(ValueError):
    """Raised when map text contains a character that is not part of the format."""

    def __init__(self, character: str, row: int, column: int):
        super().__init__(f"Unexpected character {character!r} at row {row}, column {column}")
        self.character = character
        self.row = row
        self.column = column


def parse_map(text: str, rules: Optional[RulesConfig] = None) -> Battlefield:
    """Parse a cave map into a battlefield.

    ``#`` is a wall, ``.`` and whitespace are open cavern, ``E`` and ``G``
    are an Elf or a Goblin standing on open cavern. Rows shorter than the
    longest one are padded with open cavern, and the cave carries on as
    open cavern past the last row and column.

    Args:
        text: Map text, one line per row
        rules: Rules providing starting hit points and attack powers
            (defaults to the loaded rules configuration)

    Returns:
        A battlefield with round counter 0 and every unit at full health

    Raises:
        MapFormatError: On any other character
    """
    rules = rules or get_rules_config()
    lines = text.splitlines()
    height = len(lines)
    width = max((len(line) for line in lines), default=0)
    battlefield = Battlefield(width, height)

    sequences = {faction: 0 for faction in Faction}
    for y, line in enumerate(lines):
        for x, character in enumerate(line):
            position = Vector2(y, x)
            if character in SYMBOL_TO_TERRAIN:
                battlefield.set_tile(position, SYMBOL_TO_TERRAIN[character])
            elif character in SYMBOL_TO_FACTION:
                faction = SYMBOL_TO_FACTION[character]
                sequences[faction] += 1
                unit = Unit(
                    unit_id=f"{FACTION_DATA[faction].symbol}{sequences[faction]}",
                    faction=faction,
                    position=position,
                    hit_points=rules.hit_points,
                    attack_power=rules.attack_power[faction],
                )
                added = battlefield.add_unit(unit)
                assert added, f"Could not place {unit!r}"
            elif character.isspace():
                battlefield.set_tile(position, TerrainType.OPEN)
            else:
                raise MapFormatError(character, y, x)

    return battlefield


@dataclass
class Scenario:
    """A named battle: description, rules and starting battlefield."""

    name: str
    description: str
    map_text: str
    rules: RulesConfig

    def build_battlefield(self) -> Battlefield:
        """Fresh battlefield for this scenario."""
        return parse_map(self.map_text, self.rules)


class ScenarioLoader:
    """Handles loading scenarios from YAML files."""

    @staticmethod
    def load_from_file(file_path: str) -> Scenario:
        """Load a scenario from a YAML file."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Scenario file not found: {file_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML scenario: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Scenario file {file_path} must contain a mapping")
        return ScenarioLoader.parse_scenario(data, default_name=Path(file_path).stem)

    @staticmethod
    def parse_scenario(data: dict[str, Any], default_name: str = "Unnamed Scenario") -> Scenario:
        """Parse scenario data from a dictionary."""
        if "map" not in data or not isinstance(data["map"], str):
            raise ValueError("Scenario must define the cave layout as a 'map' string")

        rules = get_rules_config().with_overrides(data.get("rules"))
        scenario = Scenario(
            name=data.get("name", default_name),
            description=data.get("description", ""),
            map_text=data["map"],
            rules=rules,
        )
        # Fail early on malformed maps
        scenario.build_battlefield()
        return scenario

    @staticmethod
    def load_directory(directory: str) -> dict[str, Scenario]:
        """Load every ``*.yaml`` scenario in a directory, keyed by file stem."""
        scenarios = {}
        for filename in sorted(os.listdir(directory)):
            if filename.endswith((".yaml", ".yml")):
                path = os.path.join(directory, filename)
                scenarios[Path(filename).stem] = ScenarioLoader.load_from_file(path)
        return scenarios


def default_scenario_directory() -> str:
    """Directory holding the bundled scenarios."""
    return str(Path(__file__).parent.parent / "assets" / "scenarios")
