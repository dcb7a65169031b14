"""Components that make up a combatant.

A unit is composed of three focused components: Actor (who it is), Health
(hit points, life and death) and Combat (attack power). Elves and Goblins
share every component; the faction is plain data on the Actor.
"""

from ...core.data import FACTION_DATA, Faction


class ActorComponent:
    """Component for identity and faction.

    Identity is only used for equality and removal; behaviour is driven by
    faction and position.
    """

    def __init__(self, unit_id: str, faction: Faction):
        self.unit_id = unit_id
        self.faction = faction

    def get_symbol(self) -> str:
        """Get the map symbol for this unit's faction."""
        return FACTION_DATA[self.faction].symbol

    def is_enemy_of(self, other: "ActorComponent") -> bool:
        """Check if the other actor belongs to the opposing faction."""
        return self.faction != other.faction


class HealthComponent:
    """Component for life and death management.

    Hit points are a signed counter: damage may take them below zero, and
    the unit is dead as soon as they reach zero or less.
    """

    def __init__(self, hp_max: int):
        """Initialize health component.

        Args:
            hp_max: Starting (and maximum) hit points
        """
        self.hp_max = hp_max
        self.hp_current = hp_max

    def is_alive(self) -> bool:
        """Check if the unit is alive.

        Returns:
            True if hp_current > 0, False otherwise
        """
        return self.hp_current > 0

    def take_damage(self, amount: int) -> bool:
        """Apply damage to this unit.

        Args:
            amount: Amount of damage to apply

        Returns:
            True if the damage killed the unit
        """
        if amount < 0:
            raise ValueError("Damage amount cannot be negative")
        self.hp_current -= amount
        return not self.is_alive()


class CombatComponent:
    """Component for attack capabilities."""

    def __init__(self, attack_power: int):
        self.attack_power = attack_power

