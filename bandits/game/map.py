"""The battlefield: cave terrain, unit placement and the round counter.

Terrain and occupancy are stored in numpy grids indexed ``[y, x]`` so that
pathfinding can work on whole-grid masks. Units are kept in a compact list
with an ID index, mirrored into the occupancy grid for O(1) lookups.

The cave is unbounded to the south and east: every square past the parsed
map is open cavern. The grids always end with one row and one column that
hold no wall and no unit, and grow when a unit steps into that margin. A
shortest path never needs to leave the grids, since any detour further out
can be folded back onto the free margin without getting longer.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from ..core.data import MAX_COORD, MIN_COORD, TERRAIN_DATA, Faction, TerrainType, Vector2
from .entities.unit import Unit


@dataclass
class Battlefield:
    width: int
    height: int
    tiles: np.ndarray = field(init=False)
    _units: list[Unit] = field(default_factory=list)
    occupancy: np.ndarray = field(init=False)  # Stores unit indices (-1 for empty)
    unit_id_to_index: dict[str, int] = field(default_factory=dict)
    rounds: int = 0

    def __post_init__(self):
        # One free row and column past the map edge
        shape = (self.height + 1, self.width + 1)

        # uint8 is plenty for the terrain enum values
        self.tiles = np.full(shape, TerrainType.OPEN.value, dtype=np.uint8)

        # Initialize occupancy array: -1 = empty, >=0 = unit index
        self.occupancy = np.full(shape, -1, dtype=np.int16)

    # ============== Grid Extent ==============

    def is_valid_position(self, position: Vector2) -> bool:
        """Check the numeric limits of a position; the cave itself has no edge."""
        return MIN_COORD <= position.x <= MAX_COORD and MIN_COORD <= position.y <= MAX_COORD

    def _in_grids(self, position: Vector2) -> bool:
        rows, columns = self.tiles.shape
        return position.y < rows and position.x < columns

    def _ensure_margin(self, position: Vector2) -> None:
        """Grow the grids so a free row and column remain past ``position``."""
        rows, columns = self.tiles.shape
        extra_rows = max(0, position.y + 2 - rows)
        extra_columns = max(0, position.x + 2 - columns)
        if extra_rows or extra_columns:
            padding = ((0, extra_rows), (0, extra_columns))
            self.tiles = np.pad(self.tiles, padding, constant_values=TerrainType.OPEN.value)
            self.occupancy = np.pad(self.occupancy, padding, constant_values=-1)

    def extent(self) -> tuple[int, int]:
        """Rows and columns covering the parsed map and every unit."""
        rows, columns = self.height, self.width
        for unit in self._units:
            rows = max(rows, unit.position.y + 1)
            columns = max(columns, unit.position.x + 1)
        return rows, columns

    # ============== Terrain ==============

    def set_tile(self, position: Vector2, terrain_type: TerrainType) -> None:
        """Set terrain at position. Ignored past the numeric limits."""
        if self.is_valid_position(position):
            self._ensure_margin(position)
            self.tiles[position.y, position.x] = terrain_type.value

    def get_terrain_type(self, position: Vector2) -> Optional[TerrainType]:
        """Get terrain type at position, or None past the numeric limits."""
        if not self.is_valid_position(position):
            return None
        if not self._in_grids(position):
            return TerrainType.OPEN
        return TerrainType(int(self.tiles[position.y, position.x]))

    def is_wall(self, position: Vector2) -> bool:
        return self.get_terrain_type(position) is TerrainType.WALL

    def get_blocking_terrain_mask(self) -> NDArray[np.bool_]:
        """Get boolean mask of terrain that blocks movement."""
        max_terrain_value = max(terrain.value for terrain in TerrainType)
        blocks_movement = np.zeros(max_terrain_value + 1, dtype=np.bool_)
        for terrain_type in TerrainType:
            blocks_movement[terrain_type.value] = TERRAIN_DATA[terrain_type].blocks_movement
        return blocks_movement[self.tiles]

    # ============== Occupancy Masks ==============

    def get_occupied_mask(self) -> NDArray[np.bool_]:
        """Get boolean mask of all occupied positions."""
        return self.occupancy >= 0

    def get_passable_mask(self) -> NDArray[np.bool_]:
        """Squares a unit may step onto: open terrain with nobody on it."""
        return ~self.get_blocking_terrain_mask() & ~self.get_occupied_mask()

    def is_free(self, position: Vector2) -> bool:
        """Check if a square is open cavern with nobody on it."""
        if not self.is_valid_position(position):
            return False
        if self.is_wall(position):
            return False
        return not self._in_grids(position) or self.occupancy[position.y, position.x] < 0

    # ============== Units ==============

    def add_unit(self, unit: Unit) -> bool:
        """Add unit to map and return success status."""
        if not self.is_free(unit.position):
            return False

        if unit.unit_id in self.unit_id_to_index:
            return False

        self._ensure_margin(unit.position)
        unit_index = len(self._units)
        self._units.append(unit)
        self.unit_id_to_index[unit.unit_id] = unit_index
        self.occupancy[unit.position.y, unit.position.x] = unit_index
        return True

    def remove_unit(self, unit_id: str) -> Optional[Unit]:
        """Remove unit by ID and clean up all data structures."""
        unit_index = self.unit_id_to_index.get(unit_id)
        if unit_index is None:
            return None

        unit = self._units[unit_index]
        self.occupancy[unit.position.y, unit.position.x] = -1
        del self.unit_id_to_index[unit_id]

        # Remove unit and compact the list
        self._units.pop(unit_index)
        for uid, idx in self.unit_id_to_index.items():
            if idx > unit_index:
                self.unit_id_to_index[uid] = idx - 1

        # Decrement occupancy indices shifted by the compaction
        self.occupancy[self.occupancy > unit_index] -= 1
        return unit

    def get_unit(self, unit_id: str) -> Optional[Unit]:
        """Get unit by ID using index lookup."""
        unit_index = self.unit_id_to_index.get(unit_id)
        if unit_index is None:
            return None
        return self._units[unit_index]

    def get_unit_at(self, position: Vector2) -> Optional[Unit]:
        """Get unit at position using O(1) occupancy array lookup."""
        if not self.is_valid_position(position) or not self._in_grids(position):
            return None
        unit_index = self.occupancy[position.y, position.x]
        if unit_index < 0:
            return None
        return self._units[unit_index]

    def move_unit(self, unit_id: str, position: Vector2) -> bool:
        """Move unit and update occupancy array."""
        unit = self.get_unit(unit_id)
        if not unit:
            return False

        if not self.is_free(position):
            return False

        self._ensure_margin(position)
        old_position = unit.position
        self.occupancy[old_position.y, old_position.x] = -1
        unit.update_position(position)
        self.occupancy[position.y, position.x] = self.unit_id_to_index[unit_id]
        return True

    def units(self) -> list[Unit]:
        """All units in reading order of their positions."""
        return sorted(self._units, key=lambda unit: unit.position)

    def units_of(self, faction: Faction) -> list[Unit]:
        """Units of one faction in reading order."""
        return [unit for unit in self.units() if unit.faction == faction]

    def count_units(self, faction: Faction) -> int:
        return sum(1 for unit in self._units if unit.faction == faction)

    def has_units(self, faction: Faction) -> bool:
        return any(unit.faction == faction for unit in self._units)

    def total_hit_points(self, faction: Faction) -> int:
        """Sum of the hit points of a faction's living units."""
        return sum(unit.hp_current for unit in self._units if unit.faction == faction)

    def adjacent_units(self, position: Vector2) -> Iterator[Unit]:
        """Units on the orthogonal neighbours of a square, in reading order."""
        for neighbor in position.neighbors():
            unit = self.get_unit_at(neighbor)
            if unit is not None:
                yield unit

    def set_attack_power(self, faction: Faction, attack_power: int) -> None:
        """Set the attack power of every unit of a faction."""
        for unit in self._units:
            if unit.faction == faction:
                unit.attack_power = attack_power

    def copy(self) -> "Battlefield":
        """Fully independent deep copy: terrain, units, hit points and rounds."""
        clone = Battlefield(self.width, self.height, rounds=self.rounds)
        clone.tiles = self.tiles.copy()
        clone.occupancy = np.full(self.tiles.shape, -1, dtype=np.int16)
        for unit in self._units:
            added = clone.add_unit(unit.copy())
            assert added, f"Copy failed to place {unit!r}"
        return clone

    def check_invariants(self) -> None:
        """Assert that no unit stands on a wall or shares a square, and the margin is free."""
        seen: set[Vector2] = set()
        for index, unit in enumerate(self._units):
            assert unit.position not in seen, f"Two units on {unit.position}"
            assert not self.is_wall(unit.position), f"{unit} stands on a wall"
            assert unit.is_alive, f"Dead unit {unit} still on the battlefield"
            assert self.occupancy[unit.position.y, unit.position.x] == index
            seen.add(unit.position)
        assert int(np.sum(self.get_occupied_mask())) == len(self._units)

        passable = self.get_passable_mask()
        assert passable[-1, :].all() and passable[:, -1].all(), "No free margin past the cave"
