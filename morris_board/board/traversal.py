"""
Continuous pen path over every line of the board.

The planner walks the board as one polyline: every ring is drawn as a
square starting from its bottom-middle slot, rings are linked by single
upward steps on the bottom arm, and a fixed connector then draws the
remaining three cross arms.

States:
- IDLE: No traversal in progress
- DRAWING: A cursor slot exists and accepts further steps
"""
from enum import Enum
from typing import List, Optional, Tuple
import logging

from morris_board.core import (
    Direction,
    Move,
    NoActiveTraversal,
    SlotKey,
    UnknownSlot,
)
from .coordinates import format_key, offset_key
from .topology import Board

logger = logging.getLogger(__name__)

# One square perimeter, starting and ending at the bottom-middle slot
RING_PATTERN: Tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.UP,
    Direction.UP,
    Direction.LEFT,
    Direction.LEFT,
    Direction.DOWN,
    Direction.DOWN,
    Direction.RIGHT,
)

# (direction, spans_arm): spans_arm moves cover ring_count - 1 cells,
# the others a single cell. Starts at the innermost bottom-middle slot.
CROSS_CONNECTOR_PATTERN: Tuple[Tuple[Direction, bool], ...] = (
    (Direction.RIGHT, False),
    (Direction.UP, False),
    (Direction.RIGHT, True),
    (Direction.LEFT, True),
    (Direction.UP, False),
    (Direction.LEFT, False),
    (Direction.UP, True),
    (Direction.DOWN, True),
    (Direction.LEFT, False),
    (Direction.DOWN, False),
    (Direction.LEFT, True),
    (Direction.RIGHT, True),
)


class TraversalState(Enum):
    """Planner states."""
    IDLE = "idle"
    DRAWING = "drawing"


def start_key(board: Board) -> SlotKey:
    """Bottom-middle slot of the outermost ring, where the path begins."""
    return format_key(0, board.center)


class TraversalPlanner:
    """
    Key-based cursor that emits the board's drawing order.

    Not reentrant: a single planner must not be driven from several
    threads without external serialization.
    """

    def __init__(self, board: Board):
        """
        Initialize planner.

        Args:
            board: Board topology to walk
        """
        self.board = board

        self.state = TraversalState.IDLE
        self._cursor: Optional[SlotKey] = None
        self._moves: List[Move] = []
        self._path: List[SlotKey] = []

        # Statistics
        self.traversals_completed = 0

        logger.info(f"TraversalPlanner initialized for {board!r}")

    @property
    def cursor(self) -> Optional[SlotKey]:
        """Current slot key, or None when idle."""
        return self._cursor

    @property
    def moves(self) -> List[Move]:
        """Moves emitted since the last start()."""
        return list(self._moves)

    @property
    def path(self) -> List[SlotKey]:
        """Slots visited since the last start(), including the start slot."""
        return list(self._path)

    @property
    def is_drawing(self) -> bool:
        return self.state == TraversalState.DRAWING

    def _transition_to(self, new_state: TraversalState) -> None:
        """Transition to new state."""
        logger.debug(f"State transition: {self.state.value} → {new_state.value}")
        self.state = new_state

    def start(self, key: SlotKey) -> None:
        """
        Begin a traversal at the given slot.

        Args:
            key: Offset key of the first slot

        Raises:
            UnknownSlot: If key is not a slot of the board
        """
        if not self.board.is_valid_key(key):
            raise UnknownSlot(f"Cannot start drawing at unknown slot {key!r}")

        if self.is_drawing:
            logger.warning(f"Restarting traversal at {key}, discarding {len(self._moves)} moves")

        self._cursor = key
        self._moves = []
        self._path = [key]
        self._transition_to(TraversalState.DRAWING)

    def finish(self) -> List[Move]:
        """
        Complete the active traversal.

        Returns:
            Moves emitted during the traversal

        Raises:
            NoActiveTraversal: If no traversal is in progress
        """
        if not self.is_drawing:
            raise NoActiveTraversal("Cannot finish: there is no drawing active")

        moves = list(self._moves)
        self._cursor = None
        self._transition_to(TraversalState.IDLE)
        self.traversals_completed += 1
        return moves

    def step_in_direction(self, direction: Direction, distance: int) -> SlotKey:
        """
        Move the cursor a number of cells along an offset axis.

        UP/DOWN change the row index, LEFT/RIGHT the column index.

        Args:
            direction: Direction to move
            distance: Number of cells (>= 1)

        Returns:
            Key of the slot reached

        Raises:
            NoActiveTraversal: If called while idle
            UnknownSlot: If the target cell is not a slot (cursor unchanged)
        """
        if not self.is_drawing:
            raise NoActiveTraversal("Cannot get current position if there is no drawing active")
        if distance < 1:
            raise ValueError(f"Step distance must be positive, got {distance}")

        target = offset_key(
            self._cursor,
            direction.d_row * distance,
            direction.d_col * distance,
        )

        if not self.board.is_valid_key(target):
            logger.error(
                f"Step {direction.name} {distance} from {self._cursor} "
                f"leaves the board ({target})"
            )
            raise UnknownSlot(f"No slot at {target} on {self.board!r}")

        self._moves.append(Move(direction, distance))
        self._path.append(target)
        self._cursor = target
        return target

    def draw_ring(self, distance: int) -> None:
        """
        Trace one square perimeter, returning to the start slot.

        Args:
            distance: Cells per half side (the ring index)
        """
        if not self.is_drawing:
            raise NoActiveTraversal("Cannot draw a ring if there is no drawing active")

        for direction in RING_PATTERN:
            self.step_in_direction(direction, distance)

        logger.debug(f"Completed drawing ring {distance}")

    def draw_cross_connector(self) -> None:
        """
        Draw the right, top and left cross arms from the innermost ring.

        The bottom arm is already covered by the steps between rings.
        """
        arm_length = self.board.ring_count - 1
        if arm_length < 1:
            logger.debug("Single ring board has no cross arms")
            return

        for direction, spans_arm in CROSS_CONNECTOR_PATTERN:
            self.step_in_direction(direction, arm_length if spans_arm else 1)

        logger.debug("Completed drawing the cross")

    def draw_board(self) -> List[Move]:
        """
        Plan the full board: all rings, bridges and cross arms.

        Returns:
            Ordered list of moves
        """
        ring_count = self.board.ring_count

        self.start(start_key(self.board))
        for i in range(ring_count):
            self.draw_ring(ring_count - i)
            if i != ring_count - 1:
                self.step_in_direction(Direction.UP, 1)

        if ring_count > 1:
            self.draw_cross_connector()

        moves = self.finish()
        logger.info(f"Planned traversal of {ring_count} rings in {len(moves)} moves")
        return moves

    def get_stats(self) -> dict:
        """Get planner statistics."""
        return {
            "current_state": self.state.value,
            "cursor": self._cursor,
            "moves": len(self._moves),
            "traversals_completed": self.traversals_completed,
        }


def plan_traversal(board: Board) -> List[Move]:
    """Ordered moves drawing the whole board as one continuous path."""
    return TraversalPlanner(board).draw_board()


def traversal_path(board: Board) -> List[SlotKey]:
    """Slots visited by plan_traversal, in order, starting slot first."""
    planner = TraversalPlanner(board)
    planner.draw_board()
    return planner.path


def traversal_edges(board: Board) -> List[Tuple[SlotKey, SlotKey]]:
    """
    Slot-to-slot segments drawn by the traversal.

    Moves that pass over intermediate slots (cross arms) are split so
    each segment joins two slots with no slot between them.
    """
    edges: List[Tuple[SlotKey, SlotKey]] = []
    current = start_key(board)

    for move in plan_traversal(board):
        segment_start = current
        for _ in range(move.distance):
            current = offset_key(current, move.direction.d_row, move.direction.d_col)
            if board.is_valid_key(current):
                edges.append((segment_start, current))
                segment_start = current

    return edges
