"""
Core data types for the board topology engine.
Defines contracts between modules to ensure stable interfaces.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

SlotKey = str  # Canonical "row,col" in offset coordinates
Coordinate = Tuple[int, int]  # (row, col)
Position = Tuple[float, float]  # (x, y) layout position


class Direction(Enum):
    """
    Pen directions on the offset grid.

    Values are (d_row, d_col) unit steps. Rows grow upwards and
    columns grow to the right, matching screen axes of the renderer.
    """
    UP = (1, 0)
    DOWN = (-1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


class SlotClass(Enum):
    """Topological class of a slot, derived from centered coordinates."""
    AXIS = "axis"  # On a cross arm (one centered coordinate is 0)
    CORNER = "corner"  # Ring corner (|row| == |col| != 0)


@dataclass(frozen=True)
class Move:
    """
    A single pen movement emitted during traversal.
    """
    direction: Direction
    distance: int  # Number of grid cells

    def __iter__(self):
        # Allows `direction, distance = move`
        yield self.direction
        yield self.distance

    def __str__(self) -> str:
        return f"{self.direction.name} {self.distance}"
