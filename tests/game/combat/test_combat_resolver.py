"""
Tests for attack target selection and damage application.
"""
from bandits.core.data import Faction, Vector2
from bandits.game.combat_resolver import CombatResolver
from bandits.game.log_manager import LogCategory
from tests.conftest import TestDataBuilder, cave

# Elf surrounded by three Goblins, two of them tied on hit points
TARGETING_CAVE = cave(
    "G....",
    "..G..",
    "..EG.",
    "..G..",
    "...G.",
)


def _targeting_battlefield():
    return TestDataBuilder.battlefield(TARGETING_CAVE, G1=9, G2=4, G3=2, G4=2, G5=1)


class TestTargetSelection:
    """Test choosing which adjacent enemy to attack."""

    def test_adjacent_enemies_in_reading_order(self, log_manager):
        battlefield = _targeting_battlefield()
        resolver = CombatResolver(battlefield, log_manager)
        enemies = resolver.adjacent_enemies(battlefield.get_unit("E1"))
        assert [enemy.unit_id for enemy in enemies] == ["G2", "G3", "G4"]

    def test_fewest_hit_points_then_reading_order(self, log_manager):
        """G3 and G4 both have 2 HP; G3 comes first in reading order. G5 is not adjacent."""
        battlefield = _targeting_battlefield()
        resolver = CombatResolver(battlefield, log_manager)
        target = resolver.select_target(battlefield.get_unit("E1"))
        assert target.unit_id == "G3"
        assert target.position == Vector2(2, 3)

    def test_allies_are_never_targets(self, log_manager):
        battlefield = TestDataBuilder.battlefield(cave("#####", "#EE.#", "#####"))
        resolver = CombatResolver(battlefield, log_manager)
        assert resolver.select_target(battlefield.get_unit("E1")) is None

    def test_nothing_in_range(self, log_manager, example_battlefield):
        resolver = CombatResolver(example_battlefield, log_manager)
        assert resolver.select_target(example_battlefield.get_unit("G1")) is None
        assert resolver.execute_attack(example_battlefield.get_unit("G1")) is None


class TestAttackExecution:
    """Test damage and death."""

    def test_damage_reduces_hit_points(self, log_manager, example_battlefield):
        resolver = CombatResolver(example_battlefield, log_manager)
        result = resolver.execute_attack(example_battlefield.get_unit("E1"))
        assert result.target_id == "G2"
        assert result.damage == 3
        assert result.target_hp_after == 197
        assert not result.defeated
        assert example_battlefield.get_unit("G2").hp_current == 197

    def test_defeated_target_is_removed(self, log_manager):
        battlefield = _targeting_battlefield()
        resolver = CombatResolver(battlefield, log_manager)
        result = resolver.execute_attack(battlefield.get_unit("E1"))

        assert result.defeated
        assert result.target_id == "G3"
        assert result.target_hp_after == -1
        assert battlefield.get_unit("G3") is None
        assert battlefield.get_unit_at(Vector2(2, 3)) is None
        assert battlefield.is_free(Vector2(2, 3))
        assert battlefield.count_units(Faction.GOBLIN) == 4
        battlefield.check_invariants()

    def test_attacks_are_logged(self, log_manager):
        battlefield = _targeting_battlefield()
        CombatResolver(battlefield, log_manager).execute_attack(battlefield.get_unit("E1"))
        texts = [message.text for message in log_manager.get_messages(categories={LogCategory.BATTLE})]
        assert texts == ["E1 hits G3 for 3 (-1 HP left)", "G3 dies at (3,2)"]
