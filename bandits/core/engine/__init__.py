"""Core combat engine pieces.

This package contains the engine-level systems shared by the simulator:
- game_state.py: FightResult state machine values and outcome scoring
- turn_order.py: Reading-order turn queue fixed at round start
"""

from .game_state import FightResult, score
from .turn_order import TurnEntry, TurnOrder

__all__ = [
    "FightResult",
    "score",
    "TurnEntry",
    "TurnOrder",
]
