"""Entity system components.

This package contains the combatant definitions:
- components.py: Actor, Health and Combat components
- unit.py: Component-based units with Vector2 positioning
"""

from .components import ActorComponent, CombatComponent, HealthComponent
from .unit import Unit

__all__ = [
    "ActorComponent",
    "CombatComponent",
    "HealthComponent",
    "Unit",
]
