"""
Combat resolution: choosing whom to hit and applying the damage.

This module handles attack execution separately from the turn loop and
movement, so targeting rules can be tested on their own.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..core.data import Vector2
from .entities.unit import Unit

if TYPE_CHECKING:
    from .log_manager import LogManager
    from .map import Battlefield


@dataclass
class AttackResult:
    """Result of a single attack."""
    attacker_id: str
    target_id: str
    target_position: Vector2
    damage: int
    target_hp_after: int
    defeated: bool = False


class CombatResolver:
    """Handles target selection and damage application."""

    def __init__(self, battlefield: "Battlefield", log_manager: "LogManager"):
        self.battlefield = battlefield
        self.log = log_manager

    def adjacent_enemies(self, attacker: Unit) -> list[Unit]:
        """Enemies orthogonally adjacent to the attacker, in reading order."""
        return [unit for unit in self.battlefield.adjacent_units(attacker.position)
                if unit.is_enemy_of(attacker)]

    def select_target(self, attacker: Unit) -> Optional[Unit]:
        """Adjacent enemy with the fewest hit points, ties by reading order."""
        enemies = self.adjacent_enemies(attacker)
        if not enemies:
            return None
        return min(enemies, key=lambda enemy: (enemy.hp_current, enemy.position))

    def execute_attack(self, attacker: Unit) -> Optional[AttackResult]:
        """Attack the selected target, removing it from the battlefield if it dies.

        Returns:
            The attack result, or None when no enemy is in range
        """
        target = self.select_target(attacker)
        if target is None:
            return None

        damage = attacker.attack_power
        defeated = target.health.take_damage(damage)
        result = AttackResult(
            attacker_id=attacker.unit_id,
            target_id=target.unit_id,
            target_position=target.position,
            damage=damage,
            target_hp_after=target.hp_current,
            defeated=defeated,
        )

        self.log.battle(f"{attacker} hits {target} for {damage} ({target.hp_current} HP left)")
        if defeated:
            removed = self.battlefield.remove_unit(target.unit_id)
            assert removed is target, f"Failed to remove defeated {target!r}"
            self.log.battle(f"{target} dies at {target.position}")

        return result
