"""
Morris board topology engine.

Derives slots, adjacency and drawing order of concentric-square
Morris boards from a ring count.
"""
from morris_board.core import (
    BoardError,
    Direction,
    InvalidConfiguration,
    InvalidKey,
    InvalidSlot,
    Move,
    NoActiveTraversal,
    OutOfRange,
    UnknownSlot,
)
from morris_board.board import (
    Board,
    TraversalPlanner,
    build_board,
    neighbors,
    plan_traversal,
)

__all__ = [
    "Board",
    "TraversalPlanner",
    "build_board",
    "neighbors",
    "plan_traversal",
    "Direction",
    "Move",
    "BoardError",
    "InvalidConfiguration",
    "InvalidKey",
    "InvalidSlot",
    "NoActiveTraversal",
    "OutOfRange",
    "UnknownSlot",
]
