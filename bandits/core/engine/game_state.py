"""Combat state machine values and outcome scoring.

A fight is described by a :class:`FightResult`: the :class:`FightOutcome`
plus the total hit points of the surviving side. ``ONGOING`` is the only
non-terminal state.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..data import FIGHT_OUTCOME_NAMES, FightOutcome


@dataclass(frozen=True)
class FightResult:
    """Snapshot of the combat state machine."""

    outcome: FightOutcome
    remaining_hit_points: int = 0

    @classmethod
    def ongoing(cls) -> "FightResult":
        return cls(FightOutcome.ONGOING)

    @classmethod
    def elves_win(cls, remaining_hit_points: int) -> "FightResult":
        return cls(FightOutcome.ELVES_WIN, remaining_hit_points)

    @classmethod
    def goblins_win(cls, remaining_hit_points: int) -> "FightResult":
        return cls(FightOutcome.GOBLINS_WIN, remaining_hit_points)

    @classmethod
    def tie(cls) -> "FightResult":
        return cls(FightOutcome.TIE)

    @property
    def is_terminal(self) -> bool:
        """Check if the fight is over."""
        return self.outcome is not FightOutcome.ONGOING

    def describe(self) -> str:
        """Human-readable summary of the state."""
        name = FIGHT_OUTCOME_NAMES[self.outcome]
        if self.outcome in (FightOutcome.ELVES_WIN, FightOutcome.GOBLINS_WIN):
            return f"{name} with {self.remaining_hit_points} total hit points left"
        return name


def score(result: FightResult, rounds: int) -> int:
    """Calculate the outcome of a finished fight.

    Args:
        result: Terminal fight result
        rounds: Number of fully completed rounds

    Returns:
        ``rounds * remaining hit points`` for a win, 0 for a tie

    Raises:
        ValueError: If the fight is still ongoing
    """
    if result.outcome is FightOutcome.ONGOING:
        raise ValueError("Cannot score a fight that is still ongoing")
    if result.outcome is FightOutcome.TIE:
        return 0
    return result.remaining_hit_points * rounds
