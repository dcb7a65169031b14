"""
Basic test fixtures for the bandits test suite.

Provides the worked example caves, their known outcomes and a few small
builders for hand-made battlefields.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from bandits.core.data import Vector2
from bandits.core.rules_loader import RulesConfig
from bandits.game.log_manager import LogManager
from bandits.game.map import Battlefield
from bandits.game.map_loader import parse_map


def cave(*rows: str) -> str:
    """Join map rows into map text with a trailing newline."""
    return "\n".join(rows) + "\n"


EXAMPLE_1 = cave(
    "#######",
    "#.G...#",
    "#...EG#",
    "#.#.#G#",
    "#..G#E#",
    "#.....#",
    "#######",
)

EXAMPLE_2 = cave(
    "#######",
    "#G..#E#",
    "#E#E.E#",
    "#G.##.#",
    "#...#E#",
    "#...E.#",
    "#######",
)

EXAMPLE_3 = cave(
    "#######",
    "#E..EG#",
    "#.#G.E#",
    "#E.##E#",
    "#G..#.#",
    "#..E#.#",
    "#######",
)

EXAMPLE_4 = cave(
    "#######",
    "#E.G#.#",
    "#.#G..#",
    "#G.#.G#",
    "#G..#.#",
    "#...E.#",
    "#######",
)

EXAMPLE_5 = cave(
    "#######",
    "#.E...#",
    "#.#..G#",
    "#.###.#",
    "#E#G#G#",
    "#...#G#",
    "#######",
)

EXAMPLE_6 = cave(
    "#########",
    "#G......#",
    "#.E.#...#",
    "#..##..G#",
    "#...##..#",
    "#...#...#",
    "#.G...G.#",
    "#.....G.#",
    "#########",
)


class TestDataBuilder:
    """Builders for hand-made battlefields used across the suite."""

    @staticmethod
    def rules(elf_power: int = 3, goblin_power: int = 3, hit_points: int = 200) -> RulesConfig:
        """Rules independent of the bundled rules file."""
        return RulesConfig.from_dict({
            "units": {
                "hit_points": hit_points,
                "attack_power": {"elf": elf_power, "goblin": goblin_power},
            },
        })

    @staticmethod
    def battlefield(text: str, **hit_points: int) -> Battlefield:
        """Parse a map with default rules, then set hit points by unit id."""
        battlefield = parse_map(text, TestDataBuilder.rules())
        for unit_id, hp in hit_points.items():
            battlefield.get_unit(unit_id).health.hp_current = hp
        return battlefield


@pytest.fixture
def default_rules():
    """Rules matching the standard battle: 200 HP, attack power 3."""
    return TestDataBuilder.rules()


@pytest.fixture
def log_manager():
    """Create a fresh log manager for testing."""
    return LogManager()


@pytest.fixture
def example_battlefield(default_rules):
    """The first worked example, freshly parsed."""
    return parse_map(EXAMPLE_1, default_rules)


@pytest.fixture
def open_room():
    """Create an empty 5x5 cave: walls around a 3x3 open room."""
    return parse_map(cave("#####", "#...#", "#...#", "#...#", "#####"), TestDataBuilder.rules())


@pytest.fixture
def pillar_room():
    """Create a 3x3 room with a wall in the middle."""
    return parse_map(cave("#####", "#...#", "#.#.#", "#...#", "#####"), TestDataBuilder.rules())


@pytest.fixture
def sample_positions():
    """Create a list of sample positions for testing."""
    return [
        Vector2(0, 0),
        Vector2(1, 1),
        Vector2(2, 2),
        Vector2(3, 4),
    ]
