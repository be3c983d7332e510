"""
Mill-line adjacency between slots.

Every slot has at most four neighbours, reachable along a ring edge or
along a cross arm. Neighbours are returned in NEIGHBOR_ORDER:

    index 0  UP      \\  vertical line group
    index 1  DOWN    /
    index 2  LEFT    \\  horizontal line group
    index 3  RIGHT   /

Mill detection groups the results in these two pairs: a slot forms a
three-in-a-row when both members of one pair are owned by the same player.
"""
from typing import Dict, List, Optional, Tuple
import logging

from morris_board.core import (
    Direction,
    InvalidSlot,
    SlotClass,
    SlotKey,
)
from .coordinates import offset_key, parse_key, to_centered
from .topology import Board

logger = logging.getLogger(__name__)

NEIGHBOR_ORDER: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def classify_slot(key: SlotKey, size: int) -> SlotClass:
    """
    Classify a slot as a cross-arm slot or a ring corner.

    Args:
        key: Offset slot key
        size: Grid dimension

    Returns:
        SlotClass.AXIS if one centered coordinate is 0, else SlotClass.CORNER
    """
    row, col = parse_key(to_centered(key, size))
    if row == 0 or col == 0:
        return SlotClass.AXIS
    return SlotClass.CORNER


def _step_sizes(row: int, col: int, slot_class: SlotClass) -> Tuple[int, int]:
    """
    Step magnitudes (row_step, col_step) for a slot in centered coordinates.

    Corners step ring_index along both axes. Arm slots step 1 along their
    own arm and ring_index around the ring.
    """
    ring_index = max(abs(row), abs(col))

    if slot_class is SlotClass.CORNER:
        return ring_index, ring_index

    if row == 0:
        # Horizontal arm: neighbouring rings are one column away
        return ring_index, 1
    return 1, ring_index


def neighbors(board: Board, key: SlotKey) -> List[Optional[SlotKey]]:
    """
    Get the mill-line neighbours of a slot.

    Args:
        board: Board topology
        key: Offset slot key

    Returns:
        Four entries in NEIGHBOR_ORDER; None where no slot lies that way

    Raises:
        InvalidSlot: If key is not a slot of the board
    """
    if not board.is_valid_key(key):
        raise InvalidSlot(f"Slot {key!r} is not on a {board.ring_count}-ring board")

    row, col = parse_key(to_centered(key, board.size))
    slot_class = classify_slot(key, board.size)
    row_step, col_step = _step_sizes(row, col, slot_class)

    result: List[Optional[SlotKey]] = []
    for direction in NEIGHBOR_ORDER:
        candidate = offset_key(
            key,
            direction.d_row * row_step,
            direction.d_col * col_step,
        )
        result.append(candidate if board.is_valid_key(candidate) else None)

    logger.debug(f"Neighbours of {key} ({slot_class.value}): {result}")
    return result


def connected_slots(board: Board, key: SlotKey) -> List[SlotKey]:
    """Neighbours of a slot with the missing directions dropped."""
    return [slot for slot in neighbors(board, key) if slot is not None]


def adjacency_table(board: Board) -> Dict[SlotKey, List[Optional[SlotKey]]]:
    """Neighbour lists for every slot of the board, in slot order."""
    return {key: neighbors(board, key) for key in board}
