"""
Unit tests for combatants and their components.
"""
import pytest

from bandits.core.data import Faction, Vector2
from bandits.game.entities.components import ActorComponent, HealthComponent
from bandits.game.entities.unit import Unit


class TestComponents:
    """Test the individual components."""

    def test_actor_faction_info(self):
        actor = ActorComponent("G1", Faction.GOBLIN)
        assert actor.get_symbol() == "G"
        assert actor.is_enemy_of(ActorComponent("E1", Faction.ELF))
        assert not actor.is_enemy_of(ActorComponent("G2", Faction.GOBLIN))

    def test_damage_can_go_below_zero(self):
        health = HealthComponent(5)
        assert not health.take_damage(3)
        assert health.hp_current == 2
        assert health.take_damage(3)
        assert health.hp_current == -1
        assert not health.is_alive()

    def test_exactly_zero_is_dead(self):
        health = HealthComponent(3)
        assert health.take_damage(3)
        assert health.hp_current == 0

    def test_negative_damage_rejected(self):
        with pytest.raises(ValueError):
            HealthComponent(10).take_damage(-1)


class TestUnit:
    """Test the unit facade."""

    def test_properties(self):
        unit = Unit("E1", Faction.ELF, Vector2(2, 4))
        assert unit.unit_id == "E1"
        assert unit.faction is Faction.ELF
        assert unit.symbol == "E"
        assert unit.position == Vector2(2, 4)
        assert unit.hp_current == 200
        assert unit.attack_power == 3
        assert unit.is_alive

    def test_string_forms(self):
        unit = Unit("G3", Faction.GOBLIN, Vector2(3, 5), hit_points=59)
        assert str(unit) == "G3"
        assert repr(unit) == "Unit(G3, Vector2(3, 5), hp=59)"

    def test_attack_power_setter(self):
        unit = Unit("E1", Faction.ELF, Vector2(1, 1))
        unit.attack_power = 34
        assert unit.combat.attack_power == 34

    def test_copy_keeps_state(self):
        unit = Unit("E1", Faction.ELF, Vector2(1, 1), attack_power=15)
        unit.health.take_damage(42)
        clone = unit.copy()
        assert clone is not unit
        assert (clone.unit_id, clone.position, clone.hp_current, clone.attack_power) == ("E1", Vector2(1, 1), 158, 15)
        assert clone.health.hp_max == 200

        clone.health.take_damage(10)
        assert unit.hp_current == 158
