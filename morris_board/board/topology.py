"""
Board topology: valid slots of a concentric-square Morris board.

A board with N rings is backed by a (2N+1) x (2N+1) grid. A cell is a
playable slot if it lies on one of the two diagonals or on one of the two
mid-lines, except for the center cell itself.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple
import logging

import numpy as np

from morris_board.core import (
    Coordinate,
    InvalidConfiguration,
    InvalidSlot,
    OutOfRange,
    Position,
    SlotKey,
)
from .coordinates import center_index, format_key

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Clamp bounds applied to the canvas before projecting slots."""
    min_width: float = 100.0
    max_width: float = 1920.0
    min_height: float = 100.0
    max_height: float = 1080.0

    def __post_init__(self):
        if self.min_width <= 0 or self.min_height <= 0:
            raise InvalidConfiguration("Layout minimum bounds must be positive")
        if self.max_width < self.min_width or self.max_height < self.min_height:
            raise InvalidConfiguration("Layout maximum bounds must not be below minimum")

    def clamp(self, bounds: Tuple[float, float]) -> Tuple[float, float]:
        """Clamp (width, height) into the configured range."""
        width, height = bounds
        return (
            float(np.clip(width, self.min_width, self.max_width)),
            float(np.clip(height, self.min_height, self.max_height)),
        )


def check_row_and_column(row: int, col: int, size: int) -> None:
    """
    Check row and column indices against the grid size.

    Raises:
        OutOfRange: If row or col is outside [0, size)
    """
    if not (0 <= row < size and 0 <= col < size):
        raise OutOfRange(
            f"Row or column ({row}, {col}) doesn't match the board size {size}"
        )


def is_valid_slot(row: int, col: int, size: int) -> bool:
    """
    Determine whether a grid cell is a playable slot.

    Args:
        row: Row index
        col: Column index
        size: Grid dimension (2 * ring_count + 1)

    Returns:
        True if the cell is on a diagonal or a mid-line and is not the center

    Raises:
        OutOfRange: If row or col is outside the grid
    """
    check_row_and_column(row, col, size)

    mid = center_index(size)
    if row == mid and col == mid:
        return False

    return (
        row == col
        or row + col == size - 1
        or row == mid
        or col == mid
    )


class Board:
    """
    Immutable board topology for a given number of rings.

    Slots are identified by their offset key ("row,col"). The valid-slot
    mapping preserves row-major scan order.
    """

    def __init__(self, ring_count: int):
        """
        Build the board.

        Args:
            ring_count: Number of nested rings (>= 1)

        Raises:
            InvalidConfiguration: If ring_count is not an integer >= 1
        """
        if isinstance(ring_count, bool) or not isinstance(ring_count, (int, np.integer)):
            raise InvalidConfiguration(f"Number of rings must be an integer, got {ring_count!r}")
        if ring_count < 1:
            raise InvalidConfiguration(f"Number of rings must be at least 1, got {ring_count}")

        self._ring_count = int(ring_count)
        self._size = 2 * self._ring_count + 1

        grid = np.zeros((self._size, self._size), dtype=bool)
        slots: Dict[SlotKey, Coordinate] = {}

        for row in range(self._size):
            for col in range(self._size):
                if is_valid_slot(row, col, self._size):
                    grid[row, col] = True
                    slots[format_key(row, col)] = (row, col)

        grid.setflags(write=False)
        self._slot_grid = grid
        self._valid_slots = slots

        logger.info(
            f"Board initialized: rings={self._ring_count}, "
            f"size={self._size}, slots={len(slots)}"
        )

    @property
    def ring_count(self) -> int:
        return self._ring_count

    @property
    def size(self) -> int:
        return self._size

    @property
    def center(self) -> int:
        """Row/column index of the (invalid) center cell."""
        return center_index(self._size)

    @property
    def slot_grid(self) -> np.ndarray:
        """Read-only size x size boolean grid of valid slots."""
        return self._slot_grid

    def valid_slots(self) -> Mapping[SlotKey, Coordinate]:
        """Return a read-only ordered mapping of slot key to (row, col)."""
        return MappingProxyType(self._valid_slots)

    def is_valid_key(self, key: SlotKey) -> bool:
        return isinstance(key, str) and key in self._valid_slots

    def coordinate_of(self, key: SlotKey) -> Coordinate:
        """
        Get the offset coordinate of a slot.

        Raises:
            InvalidSlot: If key is not a slot of this board
        """
        try:
            return self._valid_slots[key]
        except (KeyError, TypeError):
            raise InvalidSlot(f"Slot {key!r} is not on a {self._ring_count}-ring board") from None

    def ring_of(self, key: SlotKey) -> int:
        """Ring index of a slot (1 = innermost, ring_count = outermost)."""
        row, col = self.coordinate_of(key)
        return max(abs(row - self.center), abs(col - self.center))

    def spacing(
            self,
            bounds: Tuple[float, float],
            config: Optional[LayoutConfig] = None
    ) -> float:
        """
        Uniform distance between neighbouring grid cells for a canvas.

        Args:
            bounds: Canvas (width, height), clamped by config
            config: Clamp bounds (default: LayoutConfig())

        Returns:
            min(width, height) / (size + 1)
        """
        width, height = (config or LayoutConfig()).clamp(bounds)
        return min(width, height) / (self._size + 1)

    def layout(
            self,
            bounds: Tuple[float, float],
            config: Optional[LayoutConfig] = None
    ) -> Dict[SlotKey, Position]:
        """
        Project every slot onto a canvas.

        Positions are centered on the canvas: the board center maps to
        (width / 2, height / 2). Columns map to x, rows map to y.

        Args:
            bounds: Canvas (width, height)
            config: Clamp bounds (default: LayoutConfig())

        Returns:
            Dictionary slot key -> (x, y) in slot order
        """
        config = config or LayoutConfig()
        width, height = config.clamp(bounds)
        spacing = self.spacing((width, height), config)

        coords = np.array(list(self._valid_slots.values()), dtype=np.float64)
        xs = (coords[:, 1] - self.center) * spacing + width / 2
        ys = (coords[:, 0] - self.center) * spacing + height / 2

        return {
            key: (float(x), float(y))
            for key, x, y in zip(self._valid_slots, xs, ys)
        }

    def __len__(self) -> int:
        return len(self._valid_slots)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._valid_slots

    def __iter__(self) -> Iterator[SlotKey]:
        return iter(self._valid_slots)

    def __repr__(self) -> str:
        return f"Board(ring_count={self._ring_count})"


def build_board(ring_count: int) -> Board:
    """Construct a board with the given number of rings."""
    return Board(ring_count)
