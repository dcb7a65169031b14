"""Component-based Unit implementation.

This module provides the Unit class used for both Elves and Goblins. The
unit wraps its Actor, Health and Combat components and exposes the most
frequently used values as direct properties.
"""

from ...core.data import DEFAULT_ATTACK_POWER, DEFAULT_HIT_POINTS, Faction, Vector2
from .components import ActorComponent, CombatComponent, HealthComponent


class Unit:
    """A single combatant on the battlefield.

    Property Access Patterns:
    1. **Core properties** (most frequent): unit.position, unit.hp_current, unit.is_alive
    2. **Component access** (less frequent): unit.combat.attack_power, unit.health.hp_max

    Position changes must go through ``Battlefield.move_unit`` so the
    occupancy grid stays in sync.
    """

    def __init__(
        self,
        unit_id: str,
        faction: Faction,
        position: Vector2,
        hit_points: int = DEFAULT_HIT_POINTS,
        attack_power: int = DEFAULT_ATTACK_POWER,
    ):
        self.actor = ActorComponent(unit_id, faction)
        self.health = HealthComponent(hit_points)
        self.combat = CombatComponent(attack_power)
        self._position = position

    def __repr__(self) -> str:
        return f"Unit({self.unit_id}, {self.position!r}, hp={self.hp_current})"

    def __str__(self) -> str:
        return self.unit_id

    # ============== Core Properties ==============

    @property
    def unit_id(self) -> str:
        """Get unique unit ID."""
        return self.actor.unit_id

    @property
    def faction(self) -> Faction:
        """Get faction affiliation."""
        return self.actor.faction

    @property
    def symbol(self) -> str:
        """Map symbol of the unit's faction."""
        return self.actor.get_symbol()

    @property
    def position(self) -> Vector2:
        """Get position vector."""
        return self._position

    @property
    def hp_current(self) -> int:
        """Get current hit points."""
        return self.health.hp_current

    @property
    def attack_power(self) -> int:
        return self.combat.attack_power

    @attack_power.setter
    def attack_power(self, value: int) -> None:
        self.combat.attack_power = value

    @property
    def is_alive(self) -> bool:
        """Check if unit is alive."""
        return self.health.is_alive()

    def is_enemy_of(self, other: "Unit") -> bool:
        """Check if the other unit belongs to the opposing faction."""
        return self.actor.is_enemy_of(other.actor)

    def update_position(self, position: Vector2) -> None:
        """Set the position. Called by the battlefield only."""
        self._position = position

    def copy(self) -> "Unit":
        """Independent copy with the same identity and state."""
        clone = Unit(
            self.unit_id,
            self.faction,
            self._position,
            hit_points=self.health.hp_max,
            attack_power=self.combat.attack_power,
        )
        clone.health.hp_current = self.health.hp_current
        return clone
