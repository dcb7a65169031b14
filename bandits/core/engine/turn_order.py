"""Turn order for a single combat round.

Every round, all living units are scheduled once, ordered by the reading
order of the square they stand on when the round starts. The order is fixed
for the whole round: units that move do not get re-sorted. Units killed
before their turn are still popped, and the round loop skips them.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from ..data import Vector2

if TYPE_CHECKING:
    from ...game.entities.unit import Unit


@dataclass
class TurnEntry:
    """A unit waiting for its turn in the current round."""

    position: Vector2
    unit_id: str
    sequence_id: int = 0

    def __lt__(self, other: "TurnEntry") -> bool:
        """Define ordering for heap queue.

        Primary: reading order of the starting square
        Secondary: sequence_id (stable ordering, never needed on a valid map)
        """
        if self.position != other.position:
            return self.position < other.position
        return self.sequence_id < other.sequence_id


class TurnOrder:
    """Priority queue of the units still to be reached this round."""

    def __init__(self, units: Iterable["Unit"] = ()):
        self._queue: list[TurnEntry] = []
        self._sequence_counter: int = 0
        for unit in units:
            self.schedule(unit)

    def __len__(self) -> int:
        """Number of entries not reached yet, dead units included."""
        return len(self._queue)

    def schedule(self, unit: "Unit") -> TurnEntry:
        """Schedule a unit at its current position."""
        self._sequence_counter += 1
        entry = TurnEntry(unit.position, unit.unit_id, self._sequence_counter)
        heapq.heappush(self._queue, entry)
        return entry

    def pop_next(self) -> Optional[TurnEntry]:
        """Remove and return the next entry, or None once everyone was reached."""
        if not self._queue:
            return None
        return heapq.heappop(self._queue)
