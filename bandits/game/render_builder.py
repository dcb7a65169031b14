"""ASCII rendering of a battlefield.

Rows are emitted top to bottom and squares left to right, so a freshly
parsed map renders back to its source text.
"""

from ..core.data import TERRAIN_DATA, Vector2
from .map import Battlefield

HIT_POINTS_SEPARATOR = "   "


def render_row(battlefield: Battlefield, y: int, width: int) -> str:
    """Symbols of one row: unit symbol if occupied, terrain symbol otherwise."""
    symbols = []
    for x in range(width):
        position = Vector2(y, x)
        unit = battlefield.get_unit_at(position)
        if unit is not None:
            symbols.append(unit.symbol)
        else:
            symbols.append(TERRAIN_DATA[battlefield.get_terrain_type(position)].symbol)
    return "".join(symbols)


def render_battlefield(battlefield: Battlefield, show_hit_points: bool = False) -> str:
    """Render the battlefield, one ``\\n``-terminated line per row.

    The drawn area is the parsed map, stretched to include any unit that
    walked out past its south or east edge.

    Args:
        battlefield: Battlefield to draw
        show_hit_points: Append the units of each row as ``G(200), E(197)``

    Returns:
        The rendered map
    """
    height, width = battlefield.extent()
    lines = []
    for y in range(height):
        line = render_row(battlefield, y, width)
        if show_hit_points:
            row_units = [unit for unit in battlefield.units() if unit.position.y == y]
            if row_units:
                annotations = ", ".join(f"{unit.symbol}({unit.hp_current})" for unit in row_units)
                line = f"{line}{HIT_POINTS_SEPARATOR}{annotations}"
        lines.append(line + "\n")
    return "".join(lines)
