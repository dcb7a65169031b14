"""Position data structure and grid geometry.

Positions are stored as (y, x) so that the natural tuple ordering of the
fields is the reading order used for every tie-break in combat: top row to
bottom row, left to right within a row.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

# Grids store coordinates as int16, which bounds the representable positions.
MIN_COORD = 0
MAX_COORD = int(np.iinfo(np.int16).max)


@dataclass(frozen=True, order=True)
class Vector2:
    """Grid position with reading-order comparison.

    Uses (y, x) ordering for direct alignment with 2D array access patterns.
    First parameter is row (y-coordinate), second is column (x-coordinate).
    Because the dataclass compares fields in declaration order, ``<`` on two
    positions is exactly reading order.
    """
    y: int
    x: int

    def __repr__(self) -> str:
        return f"Vector2({self.y}, {self.x})"

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def north(self) -> Optional["Vector2"]:
        """Position one row up, or None at the top limit."""
        if self.y > MIN_COORD:
            return Vector2(self.y - 1, self.x)
        return None

    def south(self) -> Optional["Vector2"]:
        """Position one row down, or None at the bottom limit."""
        if self.y < MAX_COORD:
            return Vector2(self.y + 1, self.x)
        return None

    def east(self) -> Optional["Vector2"]:
        """Position one column right, or None at the right limit."""
        if self.x < MAX_COORD:
            return Vector2(self.y, self.x + 1)
        return None

    def west(self) -> Optional["Vector2"]:
        """Position one column left, or None at the left limit."""
        if self.x > MIN_COORD:
            return Vector2(self.y, self.x - 1)
        return None

    def neighbors(self) -> list["Vector2"]:
        """Orthogonal neighbours in reading order (north, west, east, south)."""
        candidates = (self.north(), self.west(), self.east(), self.south())
        return [position for position in candidates if position is not None]

    def manhattan_distance_to(self, other: "Vector2") -> int:
        """Calculate Manhattan distance to another vector."""
        return abs(self.y - other.y) + abs(self.x - other.x)




def manhattan_distance(a: Vector2, b: Vector2) -> int:
    """Manhattan distance between two positions."""
    return a.manhattan_distance_to(b)
