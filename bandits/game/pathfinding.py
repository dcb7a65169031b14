"""Shortest paths on the cave grid with reading-order tie-breaks.

Distances are computed with a numpy wavefront: each iteration grows the
frontier one orthogonal step in all four directions at once, restricted to
passable squares. Paths are then rebuilt greedily, always stepping to the
neighbour one step closer to the destination that comes first in reading
order, which makes the chosen path deterministic when several shortest
paths exist.
"""

from typing import Iterable, Optional

import numpy as np
from numpy.typing import NDArray

from ..core.data import Vector2

UNREACHABLE = -1


def _in_grid(position: Vector2, grid: NDArray) -> bool:
    height, width = grid.shape
    return 0 <= position.y < height and 0 <= position.x < width


def distance_field(origin: Vector2, passable: NDArray[np.bool_]) -> NDArray[np.int32]:
    """Step distance from ``origin`` to every square reachable through ``passable``.

    Args:
        origin: Square the wavefront starts from (always treated as reachable)
        passable: Boolean grid of squares the wavefront may enter

    Returns:
        Grid of distances, UNREACHABLE (-1) where the origin cannot reach
    """
    distances = np.full(passable.shape, UNREACHABLE, dtype=np.int32)
    if not _in_grid(origin, passable):
        return distances

    distances[origin.y, origin.x] = 0
    frontier = np.zeros(passable.shape, dtype=np.bool_)
    frontier[origin.y, origin.x] = True

    step = 0
    while frontier.any():
        step += 1
        grown = np.zeros_like(frontier)
        # Down, up, right and left neighbours of the current frontier
        grown[1:, :] |= frontier[:-1, :]
        grown[:-1, :] |= frontier[1:, :]
        grown[:, 1:] |= frontier[:, :-1]
        grown[:, :-1] |= frontier[:, 1:]

        frontier = grown & passable & (distances == UNREACHABLE)
        distances[frontier] = step

    return distances


def shortest_path(start: Vector2, end: Vector2, passable: NDArray[np.bool_]) -> list[Vector2]:
    """Find the reading-order-preferred shortest path from ``start`` to ``end``.

    The search runs backwards from ``end``. Both endpoints are treated as
    passable, so ``end`` may be an occupied square and ``start`` is the
    moving unit's own square.

    Args:
        start: First square of the path
        end: Last square of the path
        passable: Boolean grid of squares a path may cross

    Returns:
        Positions from start to end inclusive, or an empty list when
        ``end`` cannot be reached
    """
    if not (_in_grid(start, passable) and _in_grid(end, passable)):
        return []

    mask = passable.copy()
    mask[start.y, start.x] = True
    mask[end.y, end.x] = True
    to_end = distance_field(end, mask)

    if to_end[start.y, start.x] == UNREACHABLE:
        return []

    path = [start]
    current = start
    while current != end:
        remaining = to_end[current.y, current.x]
        current = next(
            neighbor for neighbor in current.neighbors()
            if _in_grid(neighbor, mask) and to_end[neighbor.y, neighbor.x] == remaining - 1
        )
        path.append(current)
    return path


def nearest_target(
    start: Vector2, targets: Iterable[Vector2], passable: NDArray[np.bool_]
) -> Optional[tuple[Vector2, int]]:
    """Pick the closest reachable target square.

    Ties on distance go to the target first in reading order.

    Returns:
        ``(target, distance)`` or None when no target is reachable
    """
    mask = passable.copy()
    if _in_grid(start, mask):
        mask[start.y, start.x] = True
    from_start = distance_field(start, mask)

    reachable = [
        (int(from_start[target.y, target.x]), target)
        for target in targets
        if _in_grid(target, mask) and from_start[target.y, target.x] != UNREACHABLE
    ]
    if not reachable:
        return None
    distance, target = min(reachable)
    return target, distance


def path_to_nearest_target(
    start: Vector2, targets: Iterable[Vector2], passable: NDArray[np.bool_]
) -> list[Vector2]:
    """Shortest path to the nearest reachable target, or an empty list.

    A single distance field from ``start`` ranks every target, then
    :func:`shortest_path` rebuilds the route to the chosen one, so the two
    tie-breaks (which target, then which first step) stay independent.
    """
    choice = nearest_target(start, targets, passable)
    if choice is None:
        return []
    target, _ = choice
    return shortest_path(start, target, passable)
